from types import SimpleNamespace

import pytest

from estreepy.diagnostics import Severity, engine_severity, has_errors
from estreepy.parser import (
    ExportImportNameKind,
    ExportLocalNameKind,
    ImportNameKind,
    exported_names,
    iter_imported_bindings,
    static_import_requests,
)
from estreepy.pipeline import wrap
from estreepy.text import LineIndex, TextRange, slice_text_range
from tests._shared_cases import raw_result


def _span(value: str) -> dict:
    return {"value": value, "start": 0, "end": len(value)}


MODULE_RECORD = {
    "hasModuleSyntax": True,
    "staticImports": [
        {
            "moduleRequest": _span("react"),
            "entries": [
                {"importName": {"kind": "Default"}, "localName": _span("React"), "isType": False},
                {"importName": {"kind": "Name", "name": "useState"}, "localName": _span("useState"), "isType": False},
            ],
        },
        {
            "moduleRequest": _span("./utils"),
            "entries": [
                {"importName": {"kind": "NamespaceObject"}, "localName": _span("utils"), "isType": False},
            ],
        },
    ],
    "staticExports": [
        {
            "entries": [
                {
                    "exportName": {"kind": "Name", "name": "Button"},
                    "importName": {"kind": "None"},
                    "localName": {"kind": "Name", "name": "Button"},
                },
                {
                    "exportName": {"kind": "Default"},
                    "importName": {"kind": "None"},
                    "localName": {"kind": "Default"},
                },
            ],
        },
        {
            "entries": [
                {
                    "exportName": {"kind": "None"},
                    "importName": {"kind": "AllButDefault"},
                    "localName": {"kind": "None"},
                    "moduleRequest": _span("./icons"),
                },
            ],
        },
    ],
}


def test_static_import_requests_in_source_order() -> None:
    assert static_import_requests(MODULE_RECORD) == ["react", "./utils"]


def test_imported_bindings_carry_kinds() -> None:
    assert list(iter_imported_bindings(MODULE_RECORD)) == [
        ("react", "React", ImportNameKind.DEFAULT),
        ("react", "useState", ImportNameKind.NAME),
        ("./utils", "utils", ImportNameKind.NAMESPACE_OBJECT),
    ]


def test_exported_names_skip_star_reexports() -> None:
    assert exported_names(MODULE_RECORD) == ["Button", "default"]


def test_module_record_helpers_read_facade_view() -> None:
    raw = raw_result()
    raw.module = MODULE_RECORD
    result = wrap(raw)

    assert static_import_requests(result.module) == ["react", "./utils"]
    assert exported_names({}) == []


def test_kind_enums_compare_to_engine_strings() -> None:
    assert ExportImportNameKind("AllButDefault") is ExportImportNameKind.ALL_BUT_DEFAULT
    assert ExportLocalNameKind.DEFAULT == "Default"
    with pytest.raises(ValueError):
        ImportNameKind("Star")


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        ({"severity": "Error"}, Severity.ERROR),
        ({"severity": "warning"}, Severity.WARNING),
        ({"severity": " ADVICE "}, Severity.ADVICE),
        (SimpleNamespace(severity="Error"), Severity.ERROR),
        ({"severity": "fatal"}, None),
        ({"message": "missing"}, None),
    ],
)
def test_engine_severity(error: object, expected: Severity | None) -> None:
    assert engine_severity(error) == expected


def test_has_errors() -> None:
    assert has_errors(None) is False
    assert has_errors([]) is False
    assert has_errors([{"severity": "Warning"}, {"severity": "Advice"}]) is False
    assert has_errors([{"severity": "Warning"}, {"severity": "Error"}]) is True
    assert has_errors([{"message": "no severity"}]) is True


def test_text_range_of_node() -> None:
    assert TextRange.of_node({"start": 3, "end": 9}) == TextRange(3, 9)
    assert TextRange.of_node({"start": 9, "end": 3}) == TextRange.empty(0)
    assert TextRange.of_node(None) == TextRange.empty(0)


def test_line_index_and_slicing() -> None:
    text = "const a = 1;\nconst b = 2;\n"
    index = LineIndex(text)

    assert index.line_col(0) == (0, 0)
    assert index.line_col(19) == (1, 6)
    assert index.line_count == 3
    assert slice_text_range(text, TextRange(13, 18)) == "const"
    with pytest.raises(ValueError):
        index.line_col(len(text) + 1)


def test_line_index_columns_are_utf16_code_units() -> None:
    index = LineIndex("a\U0001f600b\né\U0001f600c")

    assert index.line_col(2) == (0, 3)
    assert index.line_col(6) == (1, 3)
