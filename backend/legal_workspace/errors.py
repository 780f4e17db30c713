from __future__ import annotations


class WorkspaceError(Exception):
    """Base class for every failure the workspace reports to a user."""

    title = "Error"
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


# ----------------------------------------------------------------------
# Proxy side
# ----------------------------------------------------------------------


class ConfigurationError(WorkspaceError):
    title = "Configuration Error"
    default_message = "Service is not configured"


class GatewayError(WorkspaceError):
    """The AI gateway rejected a request or could not be reached.

    ``status_code`` is None when no HTTP response was received.
    """

    title = "AI Service Error"
    default_message = "AI service error"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


# ----------------------------------------------------------------------
# Workspace client side
# ----------------------------------------------------------------------


class GatewayTransportError(WorkspaceError):
    title = "Connection Error"
    default_message = "Could not reach the analysis service"


class RateLimitedError(WorkspaceError):
    title = "Rate Limited"
    default_message = "Too many requests. Please wait a moment and try again."


class CreditsExhaustedError(WorkspaceError):
    title = "Credits Exhausted"
    default_message = "AI usage credits are exhausted. Please add funds to continue."


class UpstreamServiceError(WorkspaceError):
    title = "AI Service Error"
    default_message = "AI service error"


class AnalysisParseError(WorkspaceError):
    title = "Analysis Error"
    default_message = "The analysis response could not be read"
