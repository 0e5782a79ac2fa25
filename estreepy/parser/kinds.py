"""Enumerations used by the engine's module record (`ParseResult.module`)."""

from enum import StrEnum


class ImportNameKind(StrEnum):
    # `import { x } from "mod"`
    NAME = "Name"
    # `import * as ns from "mod"`
    NAMESPACE_OBJECT = "NamespaceObject"
    # `import d from "mod"`
    DEFAULT = "Default"


class ExportImportNameKind(StrEnum):
    # `export { x } from "mod"`
    NAME = "Name"
    # `export * as ns from "mod"`
    ALL = "All"
    # `export * from "mod"`
    ALL_BUT_DEFAULT = "AllButDefault"
    NONE = "None"


class ExportExportNameKind(StrEnum):
    NAME = "Name"
    DEFAULT = "Default"
    NONE = "None"


class ExportLocalNameKind(StrEnum):
    NAME = "Name"
    # `export default expression`
    DEFAULT = "Default"
    NONE = "None"
