"""Parser configuration passed through to the parsing engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from pathlib import PurePath


class Lang(StrEnum):
    JS = "js"
    JSX = "jsx"
    TS = "ts"
    TSX = "tsx"
    DTS = "dts"


class SourceType(StrEnum):
    MODULE = "module"
    SCRIPT = "script"
    UNAMBIGUOUS = "unambiguous"


class AstType(StrEnum):
    """Shape of the emitted tree: plain ESTree or the TS-ESTree superset."""

    JS = "js"
    TS = "ts"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Dialect hints and feature flags for one parse invocation."""

    lang: Lang | None = None
    source_type: SourceType = SourceType.MODULE
    ast_type: AstType | None = None
    range: bool = False
    preserve_parens: bool = True
    show_semantic_errors: bool = False

    def resolve(self, filename: str) -> ParserOptions:
        """Fill dialect fields left unset from the file name."""
        lang = self.lang if self.lang is not None else lang_from_filename(filename)
        source_type = self.source_type
        if PurePath(filename).suffix == ".cjs" and source_type == SourceType.MODULE:
            source_type = SourceType.SCRIPT
        ast_type = self.ast_type
        if ast_type is None:
            ast_type = AstType.JS if lang in (Lang.JS, Lang.JSX) else AstType.TS
        return replace(self, lang=lang, source_type=source_type, ast_type=ast_type)


def lang_from_filename(filename: str) -> Lang:
    name = PurePath(filename).name
    if name.endswith((".d.ts", ".d.mts", ".d.cts")):
        return Lang.DTS

    match PurePath(name).suffix:
        case ".ts" | ".mts" | ".cts":
            return Lang.TS
        case ".tsx":
            return Lang.TSX
        case ".jsx":
            return Lang.JSX
        case _:
            return Lang.JS
