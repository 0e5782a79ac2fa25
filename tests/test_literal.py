import json
import re

import pytest

from estreepy.ast import (
    BigIntSource,
    RegexSource,
    UnsupportedRegexError,
    compile_regex,
    decode_program,
    iter_literals,
    literal_source,
    realize_bigint,
)
from estreepy.ast.literal import regex_flags, translate_pattern
from tests._shared_cases import BIG_NUMERAL, bigint_literal, literal, program_json, regex_literal


def _single_literal(expression: dict) -> dict:
    decoded = decode_program(program_json(expression))
    (node,) = iter_literals(decoded)
    return node


def test_bigint_literal_realizes_exact_integer_beyond_float_precision() -> None:
    node = _single_literal(bigint_literal(BIG_NUMERAL))

    assert node["value"] == 123456789012345678901234567890
    assert isinstance(node["value"], int)
    assert node["value"] != int(float(BIG_NUMERAL))


@pytest.mark.parametrize(
    ("numeral", "expected"),
    [
        ("0", 0),
        ("0x1f", 31),
        ("0o17", 15),
        ("0b101", 5),
        ("1_000", 1000),
        ("42n", 42),
    ],
)
def test_realize_bigint_handles_radix_prefixes(numeral: str, expected: int) -> None:
    assert realize_bigint(BigIntSource(numeral)) == expected


def test_regex_literal_realizes_compiled_pattern() -> None:
    node = _single_literal(regex_literal("a+", "g"))

    value = node["value"]
    assert isinstance(value, re.Pattern)
    assert value.fullmatch("aaa") is not None
    assert value.pattern == re.compile("a+").pattern


def test_regex_flags_map_to_python_flags() -> None:
    node = _single_literal(regex_literal("^abc$", "im"))

    value = node["value"]
    assert value.flags & re.IGNORECASE
    assert value.flags & re.MULTILINE
    assert value.search("x\nABC\n") is not None


@pytest.mark.parametrize(
    ("pattern", "flags"),
    [
        (r"\p{L}+", "u"),
        ("(?<=a+)b", ""),
        ("a", "v"),
        ("a", "gg"),
        ("a", "q"),
        ("(", ""),
    ],
)
def test_unsupported_regex_leaves_value_unset_without_raising(pattern: str, flags: str) -> None:
    node = _single_literal(regex_literal(pattern, flags))

    assert node["value"] is None
    assert node["regex"] == {"pattern": pattern, "flags": flags}


def test_null_literal_keeps_null_value() -> None:
    node = _single_literal(literal(None, raw="null"))

    assert node["value"] is None
    assert literal_source(node) is None


def test_plain_literals_are_not_touched() -> None:
    decoded = decode_program(program_json(literal("text"), literal(1.5), literal(True)))

    assert [node["value"] for node in iter_literals(decoded)] == ["text", 1.5, True]


def test_non_literal_objects_with_bigint_field_are_not_touched() -> None:
    payload = json.dumps({"type": "Program", "body": [], "meta": {"type": "Other", "value": None, "bigint": "5"}})

    decoded = decode_program(payload)

    assert decoded["meta"]["value"] is None


def test_named_groups_and_backreferences_are_translated() -> None:
    assert translate_pattern(r"(?<year>\d{4})-\k<year>") == r"(?P<year>(?a:\d){4})-(?P=year)"
    assert translate_pattern(r"(?<=a)(?<!b)") == r"(?<=a)(?<!b)"
    assert translate_pattern(r"[(?<x>)]") == r"[(?<x>)]"

    compiled = compile_regex(RegexSource(r"(?<word>\w+) \k<word>"))
    match = compiled.fullmatch("hey hey")
    assert match is not None
    assert match.group("word") == "hey"


def test_regex_flags_reject_duplicates_and_unknown_flags() -> None:
    assert regex_flags("dgsuy") == re.DOTALL

    with pytest.raises(UnsupportedRegexError):
        regex_flags("ii")
    with pytest.raises(UnsupportedRegexError):
        regex_flags("v")


def test_decode_program_propagates_malformed_json() -> None:
    with pytest.raises(json.JSONDecodeError):
        decode_program('{"type": "Program", "body": [')


def test_decode_program_rejects_non_object_root() -> None:
    with pytest.raises(ValueError, match="must decode to an object"):
        decode_program("[1, 2, 3]")


def test_bigint_beyond_int_string_digit_limit() -> None:
    numeral = "9" * 5000

    node = _single_literal(bigint_literal(numeral))

    assert node["value"] == 10**5000 - 1
    assert realize_bigint(BigIntSource("1" + "0" * 8000 + "n")) == 10**8000


def test_dollar_matches_only_at_end_without_multiline_flag() -> None:
    anchored = compile_regex(RegexSource("^a$"))
    multiline = compile_regex(RegexSource("^a$", "m"))

    assert anchored.search("a\n") is None
    assert anchored.search("a") is not None
    assert multiline.search("b\na\nc") is not None
    assert translate_pattern("[$]") == "[$]"


@pytest.mark.parametrize(
    ("pattern", "text", "matches"),
    [
        (r"^\d+$", "12", True),
        (r"^\d+$", "\u0661\u0662", False),
        (r"^\w+$", "caf\u00e9", False),
        (r"^[\w]+$", "caf\u00e9", False),
        (r"^[\d]$", "7", True),
        (r"^\D$", "\u0663", True),
        (r"^[\D]$", "\u0663", True),
        (r"^\W$", "\u00e9", True),
        (r"^[\W]$", "_", False),
        (r"\bfoo\b", "\u00e9foo", True),
    ],
)
def test_character_class_escapes_are_ascii(pattern: str, text: str, matches: bool) -> None:
    compiled = compile_regex(RegexSource(pattern))

    assert (compiled.search(text) is not None) is matches


def test_dot_stops_at_line_terminators_unless_dotall() -> None:
    assert compile_regex(RegexSource("^a.b$")).search("a\u2028b") is None
    assert compile_regex(RegexSource("^a.b$")).search("a-b") is not None
    assert compile_regex(RegexSource("^a.b$", "s")).search("a\u2028b") is not None
    assert translate_pattern("[.]") == "[.]"
