"""Readers over the engine's module record.

The record is handed over as decoded JSON (camelCase keys); these helpers only
read it and never copy it into other types.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from estreepy.parser.kinds import ExportExportNameKind, ImportNameKind


def static_import_requests(module: Mapping[str, Any]) -> list[str]:
    """Module specifiers of static imports, in source order."""
    return [statement["moduleRequest"]["value"] for statement in module.get("staticImports", ())]


def iter_imported_bindings(module: Mapping[str, Any]) -> Iterator[tuple[str, str, ImportNameKind]]:
    """Yield (module specifier, local binding, import kind) per import entry."""
    for statement in module.get("staticImports", ()):
        request = statement["moduleRequest"]["value"]
        for entry in statement.get("entries", ()):
            kind = ImportNameKind(entry["importName"]["kind"])
            yield request, entry["localName"]["value"], kind


def exported_names(module: Mapping[str, Any]) -> list[str]:
    """Names visible to importers; `export default` contributes `default`."""
    names: list[str] = []
    for statement in module.get("staticExports", ()):
        for entry in statement.get("entries", ()):
            export_name = entry.get("exportName", {})
            match ExportExportNameKind(export_name.get("kind", ExportExportNameKind.NONE)):
                case ExportExportNameKind.NAME:
                    names.append(export_name["name"])
                case ExportExportNameKind.DEFAULT:
                    names.append("default")
                case ExportExportNameKind.NONE:
                    pass
    return names
