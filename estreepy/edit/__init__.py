"""Edit buffer and source map export."""

from estreepy.edit.buffer import EditBuffer
from estreepy.edit.export import MapExportingBuffer, SourceMapExport, SourceMapPrimitives
from estreepy.edit.sourcemap import (
    DATA_URL_PREFIX,
    Segment,
    SourceMap,
    SourceMapOptions,
    encode_mappings,
    encode_vlq,
)

__all__ = [
    "DATA_URL_PREFIX",
    "EditBuffer",
    "MapExportingBuffer",
    "Segment",
    "SourceMap",
    "SourceMapExport",
    "SourceMapOptions",
    "SourceMapPrimitives",
    "encode_mappings",
    "encode_vlq",
]
