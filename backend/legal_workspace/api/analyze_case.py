import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, StreamingResponse

from ..engine import llm
from ..engine.prompts import system_prompt_for
from ..errors import GatewayError, WorkspaceError
from ..schemas import AssistRequest, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])

_ERROR_RESPONSES = {
    "chat": {
        429: "Rate limited. Please try again shortly.",
        402: "Credits exhausted. Please add funds.",
    },
    "analyze": {
        429: "Rate limited.",
        402: "Credits exhausted.",
    },
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def _gateway_failure(request_type: str, exc: GatewayError) -> JSONResponse:
    message = _ERROR_RESPONSES[request_type].get(exc.status_code)
    if message is not None:
        return _error(exc.status_code, message)
    return _error(500, "AI service error")


@router.post(
    "/analyze-case",
    responses={
        402: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze_case(req: AssistRequest):
    system_prompt = system_prompt_for(req.type)
    messages = [m.model_dump() for m in req.messages]

    try:
        if req.type == "chat":
            frames = await llm.stream_chat(system_prompt, messages)
            return StreamingResponse(frames, media_type="text/event-stream")
        return await llm.complete(system_prompt, messages)
    except GatewayError as exc:
        return _gateway_failure(req.type, exc)
    except WorkspaceError as exc:
        logger.error("Error: %s", exc)
        return _error(500, exc.message)
    except Exception as exc:
        logger.exception("Error")
        return _error(500, str(exc) or "Unknown error")
