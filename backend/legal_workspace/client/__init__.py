from .controller import Notification, WorkspaceController
from .requestor import GatewayClient
from .session import SessionState
from .stream_decoder import StreamDecoder, decode_stream

__all__ = [
    "GatewayClient",
    "Notification",
    "SessionState",
    "StreamDecoder",
    "WorkspaceController",
    "decode_stream",
]
