"""
Incremental decoder for Server-Sent-Events chat-completion streams.

The gateway relays frames shaped like::

    data: {"choices": [{"delta": {"content": "Sec"}}]}
    data: {"choices": [{"delta": {"content": "tion 302"}}]}
    data: [DONE]

Chunk boundaries fall anywhere, including inside a frame or inside a
multi-byte character, so decoding is split into a byte-to-text step, a
buffered line reader and the frame parser.
"""

from __future__ import annotations

import codecs
import json
import logging
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"


class LineBuffer:
    """Text buffer that hands out complete ``\\n``-terminated lines."""

    def __init__(self) -> None:
        self._buffer = ""

    @property
    def pending(self) -> str:
        return self._buffer

    def append(self, text: str) -> None:
        self._buffer += text

    def pop_line(self) -> str | None:
        """Remove and return the first complete line, or None if there is none.

        The newline is not included and a trailing carriage return is stripped.
        """
        idx = self._buffer.find("\n")
        if idx == -1:
            return None
        line = self._buffer[:idx]
        self._buffer = self._buffer[idx + 1 :]
        if line.endswith("\r"):
            line = line[:-1]
        return line

    def push_back(self, line: str) -> None:
        """Return a line to the front of the buffer so it is read again later."""
        self._buffer = line + "\n" + self._buffer


def _delta_content(frame: dict) -> str:
    try:
        content = frame["choices"][0]["delta"].get("content")
    except (KeyError, IndexError, TypeError, AttributeError):
        return ""
    return content if isinstance(content, str) else ""


class StreamDecoder:
    """Turns raw stream chunks into assistant text deltas.

    ``content`` holds the concatenation of every non-empty delta seen so
    far; ``done`` becomes True once the ``[DONE]`` sentinel is read.
    """

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._lines = LineBuffer()
        self.content = ""
        self.done = False

    @property
    def pending(self) -> str:
        return self._lines.pending

    def feed(self, chunk: bytes) -> list[str]:
        """Decode one chunk and return the non-empty deltas it completed, in order."""
        self._lines.append(self._decoder.decode(chunk))
        deltas: list[str] = []

        while (line := self._lines.pop_line()) is not None:
            if not line.startswith(DATA_PREFIX):
                continue
            payload = line[len(DATA_PREFIX) :].strip()
            if payload == DONE_SENTINEL:
                self.done = True
                break
            try:
                frame = json.loads(payload)
            except json.JSONDecodeError:
                # Incomplete frame; retry once more bytes arrive.
                self._lines.push_back(line)
                break

            delta = _delta_content(frame)
            if delta:
                self.content += delta
                deltas.append(delta)

        return deltas


def decode_stream(
    chunks: Iterable[bytes],
    on_delta: Callable[[str], None] | None = None,
) -> str:
    """Feed every chunk through a fresh decoder until the source is exhausted.

    ``on_delta`` receives the accumulated text after each non-empty delta.
    Whatever partial line remains at end-of-stream is discarded.
    """
    decoder = StreamDecoder()
    accumulated = ""
    for chunk in chunks:
        for delta in decoder.feed(chunk):
            accumulated += delta
            if on_delta is not None:
                on_delta(accumulated)
    if decoder.pending:
        logger.debug("Dropping %d undecoded characters at end of stream", len(decoder.pending))
    return decoder.content
