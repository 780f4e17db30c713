"""Legal Intelligence Workspace: case analysis, follow-up chat and document export."""

__version__ = "0.1.0"
