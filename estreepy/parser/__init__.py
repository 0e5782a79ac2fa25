"""Parse invocation boundary over an external parsing engine."""

from estreepy.parser.binding import (
    BINDING_ENTRY_POINT_GROUP,
    AsyncParserBinding,
    BindingNotFoundError,
    ParserBinding,
    RawParseResult,
    RawParseResultData,
    get_binding,
    register_binding,
)
from estreepy.parser.kinds import (
    ExportExportNameKind,
    ExportImportNameKind,
    ExportLocalNameKind,
    ImportNameKind,
)
from estreepy.parser.module_record import exported_names, iter_imported_bindings, static_import_requests
from estreepy.parser.options import AstType, Lang, ParserOptions, SourceType, lang_from_filename
from estreepy.parser.parse import parse_async, parse_sync

__all__ = [
    "BINDING_ENTRY_POINT_GROUP",
    "AstType",
    "AsyncParserBinding",
    "BindingNotFoundError",
    "ExportExportNameKind",
    "ExportImportNameKind",
    "ExportLocalNameKind",
    "ImportNameKind",
    "Lang",
    "ParserBinding",
    "ParserOptions",
    "RawParseResult",
    "RawParseResultData",
    "SourceType",
    "exported_names",
    "get_binding",
    "iter_imported_bindings",
    "lang_from_filename",
    "parse_async",
    "parse_sync",
    "register_binding",
    "static_import_requests",
]
