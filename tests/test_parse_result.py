from concurrent.futures import ThreadPoolExecutor
import json
import re
import threading
import time
from types import SimpleNamespace

import pytest

from estreepy.edit import EditBuffer, MapExportingBuffer, SourceMapExport, SourceMapOptions
from estreepy.pipeline import ParseResult, wrap
import estreepy.pipeline.result as result_module
from tests._shared_cases import (
    BIG_NUMERAL,
    RecordingEditBuffer,
    bigint_literal,
    literal,
    program_json,
    raw_result,
    regex_literal,
)


@pytest.fixture
def decode_calls(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    calls: list[str] = []
    original = result_module.decode_program

    def counting_decode(text):
        calls.append(text)
        return original(text)

    monkeypatch.setattr(result_module, "decode_program", counting_decode)
    return calls


def test_wrap_performs_no_work(decode_calls: list[str]) -> None:
    result = wrap(raw_result())

    assert isinstance(result, ParseResult)
    assert decode_calls == []


def test_program_is_decoded_once_and_reference_stable(decode_calls: list[str]) -> None:
    result = wrap(raw_result(program_json(bigint_literal(BIG_NUMERAL))))

    first = result.program
    second = result.program

    assert first is second
    assert result.tree is first
    assert len(decode_calls) == 1
    assert first["body"][0]["expression"]["value"] == int(BIG_NUMERAL)


def test_program_realizes_literals_during_decode() -> None:
    result = wrap(raw_result(program_json(regex_literal("a+", "g"), regex_literal(r"\p{L}", "u"), literal(None, "null"))))

    values = [statement["expression"]["value"] for statement in result.program["body"]]

    assert isinstance(values[0], re.Pattern)
    assert values[0].fullmatch("aaa") is not None
    assert values[1] is None
    assert values[2] is None


def test_module_comments_and_errors_are_identity_stable() -> None:
    raw = raw_result(errors=[{"severity": "Warning", "message": "unused"}])
    result = wrap(raw)

    assert result.module is raw.module
    assert result.module is result.module
    assert result.comments is raw.comments
    assert result.comments is result.comments
    assert result.errors is raw.errors
    assert result.errors is result.errors


def test_views_are_cached_even_when_raw_value_is_none() -> None:
    raw = SimpleNamespace(program=program_json(), module=None, comments=[], errors=[], magic_string=None)
    result = wrap(raw)

    assert result.module is None
    raw.module = {"replaced": True}
    assert result.module is None


def test_has_errors_reads_engine_severity() -> None:
    assert wrap(raw_result(errors=[])).has_errors is False
    assert wrap(raw_result(errors=[{"severity": "Warning"}])).has_errors is False
    assert wrap(raw_result(errors=[{"severity": "Error", "message": "Unexpected token"}])).has_errors is True
    assert wrap(raw_result(errors=[SimpleNamespace(severity="error")])).has_errors is True
    assert wrap(raw_result(errors=[{"message": "no severity"}])).has_errors is True


def test_decode_failure_propagates_and_leaves_slot_unset(decode_calls: list[str]) -> None:
    result = wrap(raw_result('{"type": "Program", "body": ['))

    with pytest.raises(json.JSONDecodeError):
        result.program
    with pytest.raises(json.JSONDecodeError):
        result.program

    assert len(decode_calls) == 2


def test_edit_buffer_is_cached_and_shares_the_raw_buffer() -> None:
    raw_buffer = RecordingEditBuffer()
    result = wrap(raw_result(magic_string=raw_buffer))

    buffer = result.edit_buffer

    assert isinstance(buffer, MapExportingBuffer)
    assert result.edit_buffer is buffer
    assert buffer.buffer is raw_buffer
    buffer.edit()
    assert raw_buffer.revision == 1
    assert result.edit_buffer.revision == 1


def test_generate_map_recomputes_every_call_with_call_time_options() -> None:
    raw_buffer = RecordingEditBuffer()
    result = wrap(raw_result(magic_string=raw_buffer))
    options = SourceMapOptions(source="input.js", hires=True)

    exported = result.edit_buffer.generate_map(options)

    assert isinstance(exported, SourceMapExport)
    assert raw_buffer.calls == []
    assert exported.to_string() == "map-string@0"
    assert exported.to_url() == "data:map@0"
    assert exported.to_map() == {"revision": 0}

    raw_buffer.edit()

    assert exported.to_string() == "map-string@1"
    assert str(exported) == "map-string@1"
    assert exported.to_url() == "data:map@1"
    assert exported.to_map() == {"revision": 1}
    assert {call_options for _, call_options in raw_buffer.calls} == {options}


def test_generate_map_over_reference_edit_buffer_reflects_later_edits() -> None:
    result = wrap(raw_result(magic_string=EditBuffer("let x = 1;")))
    buffer = result.edit_buffer
    exported = buffer.generate_map(SourceMapOptions(source="input.js"))

    before = exported.to_map()
    buffer.overwrite(4, 5, "answer")
    after = exported.to_map()

    assert before.mappings == "AAAA"
    assert after.mappings == "AAAA,IAAI,MAAC"
    assert str(buffer) == "let answer = 1;"


def test_program_is_populated_once_under_concurrent_access(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []
    lock = threading.Lock()
    original = result_module.decode_program

    def slow_decode(text):
        with lock:
            calls.append(1)
        time.sleep(0.01)
        return original(text)

    monkeypatch.setattr(result_module, "decode_program", slow_decode)
    result = wrap(raw_result(program_json(literal("x"))))

    with ThreadPoolExecutor(max_workers=8) as pool:
        programs = list(pool.map(lambda _: result.program, range(16)))

    assert len(calls) == 1
    assert all(program is programs[0] for program in programs)


def test_chained_edits_keep_map_export_available() -> None:
    result = wrap(raw_result(magic_string=EditBuffer("let x = 1;")))
    buffer = result.edit_buffer

    chained = buffer.overwrite(4, 5, "answer").append_right(10, " // done")

    assert chained is buffer
    assert chained.generate_map().to_map().mappings == "AAAA,IAAI,MAAC"
    assert chained.to_string() == "let answer = 1; // done"
    assert buffer.has_changed() is True


def test_slow_program_decode_does_not_block_other_views(monkeypatch: pytest.MonkeyPatch) -> None:
    started = threading.Event()
    release = threading.Event()
    original = result_module.decode_program

    def blocking_decode(text):
        started.set()
        release.wait(timeout=10)
        return original(text)

    monkeypatch.setattr(result_module, "decode_program", blocking_decode)
    raw = raw_result()
    result = wrap(raw)

    with ThreadPoolExecutor(max_workers=2) as pool:
        program_future = pool.submit(lambda: result.program)
        assert started.wait(timeout=5)
        try:
            comments = pool.submit(lambda: result.comments).result(timeout=2)
            errors = pool.submit(lambda: result.errors).result(timeout=2)
        finally:
            release.set()

        assert comments is raw.comments
        assert errors is raw.errors
        assert program_future.result(timeout=5)["type"] == "Program"
