import html

PRINT_STYLE = (
    "body{font-family:Georgia,serif;max-width:800px;margin:40px auto;padding:20px;"
    "line-height:1.8;color:#1a1a1a}"
    "h1,h2,h3{margin-top:24px}"
    "h1{text-align:center;border-bottom:2px solid #333;padding-bottom:10px}"
)


def render_print_html(document: str) -> str:
    """Standalone printable page for a court-ready document."""
    body = html.escape(document).replace("\n", "<br/>")
    return (
        "<html><head><title>Court-Ready Document</title>"
        f"<style>{PRINT_STYLE}</style>"
        "</head>"
        f"<body onload=\"window.print()\">{body}</body></html>"
    )
