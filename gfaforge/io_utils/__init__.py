"""
GFAForge v0.1.0

GFA reading and writing.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

from .gfa_io import (
    GFAReader,
    GFAWriter,
    ReaderState,
    dump_gfa,
    load_gfa,
    parse_line,
    read_gfa,
    write_gfa,
    write_path_sequences,
)

__all__ = [
    "GFAReader",
    "GFAWriter",
    "ReaderState",
    "dump_gfa",
    "load_gfa",
    "parse_line",
    "read_gfa",
    "write_gfa",
    "write_path_sequences",
]
