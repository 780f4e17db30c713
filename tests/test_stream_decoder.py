from __future__ import annotations

import json

from legal_workspace.client.stream_decoder import LineBuffer, StreamDecoder, decode_stream


def _frame(content: str | None) -> str:
    delta = {} if content is None else {"content": content}
    return "data: " + json.dumps({"choices": [{"index": 0, "delta": delta}]}, ensure_ascii=False) + "\n\n"


def _stream(*contents: str | None, done: bool = True) -> bytes:
    text = "".join(_frame(c) for c in contents)
    if done:
        text += "data: [DONE]\n\n"
    return text.encode("utf-8")


def _split(data: bytes, *cuts: int) -> list[bytes]:
    bounds = [0, *cuts, len(data)]
    return [data[a:b] for a, b in zip(bounds, bounds[1:])]


# ----------------------------------------------------------------------
# LineBuffer
# ----------------------------------------------------------------------


def test_line_buffer_returns_none_without_newline() -> None:
    buf = LineBuffer()
    buf.append("data: {\"partial")
    assert buf.pop_line() is None
    assert buf.pending == "data: {\"partial"


def test_line_buffer_strips_carriage_return() -> None:
    buf = LineBuffer()
    buf.append("first\r\nsecond\n")
    assert buf.pop_line() == "first"
    assert buf.pop_line() == "second"
    assert buf.pop_line() is None


def test_line_buffer_push_back_restores_line_and_newline() -> None:
    buf = LineBuffer()
    buf.append("one\ntwo\n")
    line = buf.pop_line()
    buf.push_back(line)
    assert buf.pending == "one\ntwo\n"


# ----------------------------------------------------------------------
# StreamDecoder
# ----------------------------------------------------------------------


def test_single_chunk_yields_all_deltas_in_order() -> None:
    decoder = StreamDecoder()
    deltas = decoder.feed(_stream("Section ", "302 ", "IPC"))
    assert deltas == ["Section ", "302 ", "IPC"]
    assert decoder.content == "Section 302 IPC"
    assert decoder.done is True


def test_result_is_independent_of_chunk_boundaries() -> None:
    data = _stream("The accused ", "may claim ", "private defence.")
    expected = "The accused may claim private defence."
    for cut in range(1, len(data)):
        assert decode_stream(_split(data, cut)) == expected
    assert decode_stream([data[i : i + 1] for i in range(len(data))]) == expected


def test_line_split_across_chunks_matches_single_chunk() -> None:
    frame = _frame("Bachan Singh").encode()
    whole = StreamDecoder()
    whole.feed(frame)

    split = StreamDecoder()
    assert split.feed(frame[:20]) == []
    assert split.feed(frame[20:]) == ["Bachan Singh"]
    assert split.content == whole.content


def test_unparseable_complete_line_is_pushed_back_and_blocks_later_lines() -> None:
    decoder = StreamDecoder()
    deltas = decoder.feed(b'data: {"choices": [\n' + _frame("later").encode())
    assert deltas == []
    assert decoder.pending.startswith('data: {"choices": [\n')


def test_done_sentinel_does_not_create_empty_message() -> None:
    updates: list[str] = []
    result = decode_stream([b"data: [DONE]\n\n"], updates.append)
    assert result == ""
    assert updates == []


def test_done_stops_extraction_for_the_current_chunk_only() -> None:
    decoder = StreamDecoder()
    first = decoder.feed(_stream("a") + _frame("b").encode())
    assert first == ["a"]
    assert decoder.done is True
    # Lines after the sentinel stay buffered until the next chunk arrives.
    assert decoder.feed(b"") == ["b"]


def test_non_data_lines_are_ignored() -> None:
    data = (": keep-alive\n" "event: message\n" + _frame("ok") + "id: 7\n").encode()
    assert StreamDecoder().feed(data) == ["ok"]


def test_empty_and_missing_deltas_are_skipped() -> None:
    updates: list[str] = []
    result = decode_stream([_stream(None, "", "text", None)], updates.append)
    assert result == "text"
    assert updates == ["text"]


def test_frames_without_choices_are_skipped() -> None:
    data = b'data: {"id": "x"}\n\ndata: {"choices": []}\n\n' + _frame("y").encode()
    assert StreamDecoder().feed(data) == ["y"]


def test_crlf_framing() -> None:
    data = _stream("one", "two").replace(b"\n", b"\r\n")
    assert decode_stream([data]) == "onetwo"


def test_multibyte_character_split_across_chunks() -> None:
    data = _stream("धारा 302 – हत्या")
    cut = data.index("ध".encode()) + 1
    assert decode_stream(_split(data, cut)) == "धारा 302 – हत्या"


def test_on_delta_receives_accumulated_text() -> None:
    updates: list[str] = []
    decode_stream(_split(_stream("a", "b", "c"), 5, 40), updates.append)
    assert updates == ["a", "ab", "abc"]


def test_trailing_partial_line_is_dropped_at_end_of_stream() -> None:
    data = _stream("kept", done=False) + b'data: {"choices": [{"delta": {"content": "lost'
    assert decode_stream([data]) == "kept"


def test_stream_without_done_sentinel_ends_at_end_of_input() -> None:
    assert decode_stream([_stream("no ", "sentinel", done=False)]) == "no sentinel"
