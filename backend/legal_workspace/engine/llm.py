import logging
from collections.abc import AsyncIterator

import openai
from openai import AsyncOpenAI

from ..config import settings
from ..errors import ConfigurationError, GatewayError

logger = logging.getLogger(__name__)

DONE_FRAME = "data: [DONE]\n\n"

_client: AsyncOpenAI | None = None


def _get_client() -> AsyncOpenAI:
    global _client
    if not settings.gateway_api_key:
        raise ConfigurationError("GATEWAY_API_KEY is not configured")
    if _client is None:
        _client = AsyncOpenAI(
            api_key=settings.gateway_api_key,
            base_url=settings.gateway_base_url,
            max_retries=0,
        )
    return _client


def _gateway_error(exc: openai.APIError) -> GatewayError:
    if isinstance(exc, openai.APIStatusError):
        logger.error("AI error: %s %s", exc.status_code, exc.response.text[:500])
        return GatewayError(
            status_code=exc.status_code, body=exc.response.text
        )
    logger.error("AI gateway unreachable: %s", exc)
    return GatewayError(str(exc))


async def complete(system_prompt: str, messages: list[dict]) -> dict:
    """Single non-streaming LLM call; returns the completion as plain JSON data."""
    client = _get_client()
    try:
        response = await client.chat.completions.create(
            model=settings.gateway_model,
            messages=[
                {"role": "system", "content": system_prompt},
                *messages,
            ],
        )
    except openai.APIError as exc:
        raise _gateway_error(exc) from exc
    return response.model_dump(mode="json", exclude_none=True)


async def stream_chat(system_prompt: str, messages: list[dict]) -> AsyncIterator[str]:
    """Open a streaming LLM call and return its chunks as SSE frames.

    The request is issued before this coroutine returns, so gateway
    rejections surface here rather than inside the response body.
    """
    client = _get_client()
    try:
        stream = await client.chat.completions.create(
            model=settings.gateway_model,
            messages=[
                {"role": "system", "content": system_prompt},
                *messages,
            ],
            stream=True,
        )
    except openai.APIError as exc:
        raise _gateway_error(exc) from exc
    return _sse_frames(stream)


async def _sse_frames(stream) -> AsyncIterator[str]:
    try:
        async for chunk in stream:
            yield f"data: {chunk.model_dump_json(exclude_none=True)}\n\n"
    except openai.APIError as exc:
        # Headers are already sent; the client keeps whatever arrived.
        logger.error("AI stream interrupted: %s", exc)
        return
    finally:
        await stream.close()
    yield DONE_FRAME
