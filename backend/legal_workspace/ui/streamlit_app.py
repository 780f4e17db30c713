# streamlit run backend/legal_workspace/ui/streamlit_app.py
import logging

import streamlit as st

from legal_workspace.client import GatewayClient, Notification, WorkspaceController
from legal_workspace.config import settings
from legal_workspace.knowledge import ANALYSIS_CARDS, CASE_CATEGORIES, OFFENCE_TYPES
from legal_workspace.schemas import AnalysisResult

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Legal Intelligence Workspace",
    page_icon="⚖️",
    layout="wide",
)


# ---- session helpers ----
def queue_notification(note: Notification):
    st.session_state.setdefault("notifications", []).append(note)


def get_controller() -> WorkspaceController:
    if "controller" not in st.session_state:
        st.session_state["controller"] = WorkspaceController(
            GatewayClient.from_settings(),
            notify=queue_notification,
        )
    return st.session_state["controller"]


def reset_notepad():
    st.session_state["description"] = ""
    st.session_state["category"] = None
    st.session_state["offence"] = None


def show_notifications():
    for note in st.session_state.pop("notifications", []):
        st.toast(f"**{note.title}**: {note.description}", icon="⚠️")


# ---- sections ----
def render_notepad(controller: WorkspaceController):
    st.subheader("Case Notepad")
    st.caption(
        "Describe the case briefly (max two sentences). "
        "Select filters to narrow legal accuracy."
    )
    description = st.text_area(
        "Case description",
        key="description",
        height=120,
        label_visibility="collapsed",
        placeholder=(
            "Example: A person intentionally caused the death of another "
            "individual due to personal enmity."
        ),
    )
    col1, col2, col3 = st.columns([2, 2, 1])
    category = col1.selectbox(
        "Case Category", CASE_CATEGORIES, index=None, key="category", placeholder="Case Category"
    )
    offence = col2.selectbox(
        "Offence Type", OFFENCE_TYPES, index=None, key="offence", placeholder="Offence Type"
    )
    analyze = col3.button(
        "⚖️ Analyze Case",
        type="primary",
        disabled=not description.strip() or controller.state.is_analyzing,
    )
    st.button("↺ Reset", on_click=reset_notepad)

    if analyze:
        with st.spinner("Analyzing case with AI..."):
            controller.submit_analysis(description, category or "", offence or "")


def render_analysis(controller: WorkspaceController, analysis: AnalysisResult):
    titles = dict(ANALYSIS_CARDS)
    left, right = st.columns(2)

    with left.container(border=True):
        st.markdown(f"**1. {titles[1]}**")
        for s in analysis.legalSections:
            st.markdown(f"- {s.section} – {s.description}")

    with right.container(border=True):
        st.markdown(f"**2. {titles[2]}**")
        st.write(analysis.punishmentRange)

    with left.container(border=True):
        st.markdown(f"**3. {titles[3]}**")
        st.write(analysis.presentationStrategy)

    with right.container(border=True):
        st.markdown(f"**4. {titles[4]}**")
        for c in analysis.casePrecedents:
            st.markdown(f"- {c.name} – {c.relevance}")

    with st.container(border=True):
        st.markdown(f"**5. {titles[5]}**")
        st.write("A court-ready brief has been drafted from the analysis above.")
        if st.button("📄 View Full Document"):
            controller.open_document()


def render_document(controller: WorkspaceController, document: str):
    with st.container(border=True):
        head, export, close = st.columns([4, 1, 1])
        head.markdown("### Court-Ready Document")
        export.download_button(
            "⬇️ Export / Print",
            data=controller.export_document() or "",
            file_name="court_ready_document.html",
            mime="text/html",
        )
        if close.button("✕ Close"):
            controller.close_document()
            st.rerun()
        st.markdown(document)


def render_chat(controller: WorkspaceController):
    st.subheader("💬 Legal Assistant Chat")
    st.caption("Context-aware follow-ups")

    state = controller.state
    if not state.messages:
        st.info("Ask follow-up questions about your case analysis...")
    for message in state.messages:
        with st.chat_message(message.role):
            st.markdown(message.content)

    user_input = st.chat_input(
        "Ask a follow-up question...", disabled=state.is_chat_loading
    )
    if not user_input:
        return

    with st.chat_message("user"):
        st.markdown(user_input)
    with st.chat_message("assistant"):
        placeholder = st.empty()

    def show_reply(new_state):
        last = new_state.messages[-1] if new_state.messages else None
        if last is not None and last.role == "assistant":
            placeholder.markdown(last.content)

    controller.on_change = show_reply
    try:
        controller.send_chat_message(user_input)
    finally:
        controller.on_change = None
    st.rerun()


# ---- page ----
controller = get_controller()

st.title("⚖️ Legal Intelligence Workspace")
st.caption("India · Laws · AI-Assisted")

render_notepad(controller)
show_notifications()

state = controller.state
if state.analysis is not None:
    render_analysis(controller, state.analysis)
    if controller.state.show_document:
        render_document(controller, state.analysis.courtDocument)
    render_chat(controller)
    show_notifications()

st.divider()
st.caption("Prototype • Government Law Sources • Cloud Ready • Built for Lawyers")
