from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator

import requests
from pydantic import ValidationError

from ..config import settings
from ..errors import (
    AnalysisParseError,
    CreditsExhaustedError,
    GatewayTransportError,
    RateLimitedError,
    UpstreamServiceError,
)
from ..schemas import AnalysisResult, ChatMessage

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\n?")


def build_case_prompt(description: str, category: str = "", offence: str = "") -> str:
    prompt = f"Case Description: {description}"
    if category:
        prompt += f"\nCase Category: {category}"
    if offence:
        prompt += f"\nOffence Type: {offence}"
    return prompt


def build_context_message(case_context: str, analysis: AnalysisResult | None) -> ChatMessage:
    analysis_json = json.dumps(
        analysis.model_dump(mode="json") if analysis is not None else None,
        indent=2,
    )
    return ChatMessage(
        role="user",
        content=(
            "Context from case analysis:\n"
            f"{case_context}\n\n"
            "Analysis results:\n"
            f"{analysis_json}"
        ),
    )


def parse_analysis_content(content: str) -> AnalysisResult:
    """Parse the model's answer, which may be wrapped in a markdown code fence."""
    raw = _FENCE_RE.sub("", content).strip()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.error("Analysis content is not valid JSON: %s", raw[:500])
        raise AnalysisParseError(f"Invalid analysis JSON: {exc.msg}") from exc
    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as exc:
        logger.error("Analysis JSON has the wrong shape: %s", exc)
        raise AnalysisParseError(
            "The analysis response is missing required fields"
        ) from exc


def _server_message(resp: requests.Response) -> str | None:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"] or None
    return None


def _raise_for_status(resp: requests.Response, fallback: str) -> None:
    if resp.ok:
        return
    message = _server_message(resp)
    logger.warning("Workspace API returned %s: %s", resp.status_code, message)
    if resp.status_code == 429:
        raise RateLimitedError()
    if resp.status_code == 402:
        raise CreditsExhaustedError()
    raise UpstreamServiceError(message or fallback)


class GatewayClient:
    """HTTP client for the workspace's analyze-case endpoint."""

    def __init__(
        self,
        url: str,
        api_key: str = "",
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.api_key = api_key
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls) -> "GatewayClient":
        return cls(settings.workspace_api_url, settings.workspace_api_key)

    def _post(self, payload: dict, *, stream: bool = False) -> requests.Response:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            return self.session.post(
                self.url, json=payload, headers=headers, stream=stream
            )
        except requests.RequestException as exc:
            logger.error("Request to %s failed: %s", self.url, exc)
            raise GatewayTransportError() from exc

    def analyze(self, prompt: str) -> AnalysisResult:
        resp = self._post(
            {
                "type": "analyze",
                "messages": [{"role": "user", "content": prompt}],
            }
        )
        _raise_for_status(resp, "Analysis failed")

        try:
            data = resp.json()
        except ValueError as exc:
            raise AnalysisParseError("The analysis service returned invalid JSON") from exc
        try:
            content = data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError):
            content = ""
        return parse_analysis_content(content)

    def stream_chat(self, messages: list[ChatMessage]) -> Iterator[bytes]:
        """Send the conversation and yield raw response body chunks as they arrive."""
        resp = self._post(
            {
                "type": "chat",
                "messages": [m.model_dump() for m in messages],
            },
            stream=True,
        )
        try:
            _raise_for_status(resp, "Chat stream failed")
            try:
                yield from resp.iter_content(chunk_size=None)
            except requests.RequestException as exc:
                raise GatewayTransportError("The chat stream was interrupted") from exc
        finally:
            resp.close()
