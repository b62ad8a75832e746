#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

GFA line codec — streaming reader and writer for the GFA1 subset, plus
file-level helpers and FASTA export of path sequences.

Reading runs as a two-state machine: header (H) and comment (#) lines are
consumed into the graph when the reader is created, and the first data line
switches the reader to record mode for the rest of the stream.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

from __future__ import annotations
import gzip
import logging
from enum import Enum
from pathlib import Path as FilePath
from typing import Callable, Dict, Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from ..gfa_core.errors import MalformedLineError, UnrecognizedRecordTypeError
from ..gfa_core.graph import GFA
from ..gfa_core.optional_fields import OptionalFields
from ..gfa_core.records import Containment, GFARecord, Link, Path, Segment

logger = logging.getLogger(__name__)

MIN_FIELDS = 3


# ============================================================================
#                           FILE UTILITIES
# ============================================================================

def is_gzipped(filepath: Union[str, FilePath]) -> bool:
    return FilePath(filepath).suffix in ('.gz', '.gzip')


def open_file(filepath: Union[str, FilePath], mode: str = 'r') -> TextIO:
    """
    Open file with automatic gzip detection.

    Args:
        filepath: Path to file
        mode: File mode ('r' or 'w')

    Returns:
        Text file handle
    """
    filepath = FilePath(filepath)
    if is_gzipped(filepath):
        return gzip.open(filepath, 'rt' if 'r' in mode else 'wt')
    return open(filepath, mode)


# ============================================================================
#                           RECORD PARSERS
# ============================================================================

def _parse_segment(fields: List[str]) -> Tuple[GFARecord, List[str]]:
    return Segment(fields[1], fields[2]), fields[3:]


def _parse_link(fields: List[str]) -> Tuple[GFARecord, List[str]]:
    return Link(fields[1], fields[2], fields[3], fields[4], fields[5]), fields[6:]


def _parse_path(fields: List[str]) -> Tuple[GFARecord, List[str]]:
    steps = fields[2].split(',')
    overlaps = []
    if len(fields) > 3 and fields[3] not in ('', '*'):
        overlaps = fields[3].split(',')
    return Path(fields[1], steps, overlaps), fields[4:]


def _parse_containment(fields: List[str]) -> Tuple[GFARecord, List[str]]:
    return Containment(tuple(fields[1:])), []


# record type -> (minimum field count, parser)
RECORD_PARSERS: Dict[str, Tuple[int, Callable[[List[str]], Tuple[GFARecord, List[str]]]]] = {
    'S': (MIN_FIELDS, _parse_segment),
    'L': (6, _parse_link),
    'P': (MIN_FIELDS, _parse_path),
    'C': (MIN_FIELDS, _parse_containment),
}


def parse_line(line: str) -> GFARecord:
    """
    Parse one data line (S, L, P or C) into a record.

    Args:
        line: A GFA line without its line terminator

    Returns:
        The parsed record, with optional fields attached when present

    Raises:
        MalformedLineError: If the line has too few tab-separated fields
        UnrecognizedRecordTypeError: If the record type is not S, L, P or C
    """
    fields = line.split('\t')
    if len(fields) < MIN_FIELDS:
        raise MalformedLineError("Not enough fields in GFA line", line)

    record_type = line[0]
    if record_type not in RECORD_PARSERS:
        raise UnrecognizedRecordTypeError(f"Encountered unknown line type {record_type!r}", line)

    min_fields, parser = RECORD_PARSERS[record_type]
    if len(fields) < min_fields:
        raise MalformedLineError(f"Not enough fields in GFA {record_type}-line", line)

    record, optional = parser(fields)
    if optional:
        record.add_optional_fields(OptionalFields.parse(optional))
    return record


# ============================================================================
#                           READER
# ============================================================================

class ReaderState(Enum):
    """Reader phases; the reader only ever moves from PREAMBLE to RECORDS."""
    PREAMBLE = "preamble"
    RECORDS = "records"


class GFAReader:
    """
    Read GFA records from a text stream.

    Header and comment lines are collected into the reader's GFA instance
    on construction; read() then yields the data records one at a time.
    Records are not added to the graph automatically (see load_gfa).

    Example:
        >>> reader = GFAReader(handle)
        >>> gfa = reader.collect_gfa()
        >>> for record in reader:
        ...     gfa.add(record)
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._gfa = GFA()
        self._pending: Optional[str] = None
        self.line_number = 0
        self.state = ReaderState.PREAMBLE
        self._read_preamble()

    def _next_line(self) -> Optional[str]:
        raw = self._stream.readline()
        if not raw:
            return None
        self.line_number += 1
        line = raw.rstrip('\n')
        if line.endswith('\r'):
            line = line[:-1]
        return line

    def _read_preamble(self) -> None:
        while self.state is ReaderState.PREAMBLE:
            line = self._next_line()
            if line is None:
                self.state = ReaderState.RECORDS
            elif line.startswith('H'):
                self._read_header(line)
            elif line.startswith('#'):
                self._read_comment(line)
            elif line:
                self._pending = line
                self.state = ReaderState.RECORDS
        logger.debug(
            f"Preamble read: version {self._gfa.version}, "
            f"{len(self._gfa.comments)} comment(s)"
        )

    def _read_header(self, line: str) -> None:
        for tag in line.split('\t')[1:]:
            if not tag.startswith('VN:'):
                continue
            parts = tag.split(':', 2)
            if len(parts) != 3:
                raise MalformedLineError("Malformed version tag in header", line)
            try:
                version = int(parts[2].split('.')[0])
            except ValueError:
                raise MalformedLineError("Unreadable GFA version in header", line) from None
            self._gfa.set_version(version)

    def _read_comment(self, line: str) -> None:
        comment = line[1:]
        if comment.startswith('\t'):
            comment = comment[1:]
        self._gfa.add_comment(comment)

    def collect_gfa(self) -> GFA:
        """Return the GFA instance holding the header and comments."""
        return self._gfa

    def read(self) -> Optional[GFARecord]:
        """Return the next data record, or None at end of stream."""
        while True:
            if self._pending is not None:
                line, self._pending = self._pending, None
            else:
                line = self._next_line()
            if line is None:
                return None
            if line:
                return parse_line(line)

    def __iter__(self) -> Iterator[GFARecord]:
        while True:
            record = self.read()
            if record is None:
                return
            yield record


def load_gfa(stream: TextIO) -> GFA:
    """
    Read a whole GFA stream into a GFA instance.

    Raises:
        MalformedLineError: On unreadable lines
        DuplicateSegmentError: If a segment name repeats
    """
    reader = GFAReader(stream)
    gfa = reader.collect_gfa()
    for record in reader:
        gfa.add(record)
    return gfa


def read_gfa(gfa_path: Union[str, FilePath]) -> GFA:
    """
    Load a GFA v1 file (plain or gzipped).

    Raises:
        FileNotFoundError: If gfa_path does not exist
    """
    gfa_path = FilePath(gfa_path)
    if not gfa_path.exists():
        raise FileNotFoundError(f"GFA file not found: {gfa_path}")

    logger.info(f"Loading graph from GFA: {gfa_path}")
    with open_file(gfa_path, 'r') as handle:
        gfa = load_gfa(handle)
    logger.info(f"Loaded graph: {gfa!r}")
    return gfa


# ============================================================================
#                           WRITER
# ============================================================================

class GFAWriter:
    """Write GFA lines to a text stream."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def write_header(self, gfa: GFA) -> None:
        self._stream.write(gfa.marshal_header())

    def write(self, record: GFARecord) -> None:
        self._stream.write(record.to_gfa_line() + "\n")


def dump_gfa(gfa: GFA, stream: TextIO) -> None:
    """Validate a graph and write it to a stream."""
    gfa.write_content(GFAWriter(stream))


def write_gfa(gfa: GFA, output_path: Union[str, FilePath]) -> None:
    """
    Validate a graph and write it to a GFA file.

    The file is not created when validation fails.
    """
    output_path = FilePath(output_path)
    gfa.validate()

    logger.info(f"Writing GFA: {output_path}")
    with open_file(output_path, 'w') as handle:
        dump_gfa(gfa, handle)

    stats = gfa.stats()
    logger.info(f"GFA export complete: {output_path}")
    logger.info(f"  Segments: {stats['segments']}")
    logger.info(f"  Links: {stats['links']}")
    logger.info(f"  Paths: {stats['paths']}")


# ============================================================================
#                    PATH SEQUENCE EXPORT
# ============================================================================

def path_records(gfa: GFA, path_names: Optional[Iterable[str]] = None) -> Iterator[SeqRecord]:
    """
    Yield one SeqRecord per reconstructed path sequence.

    Args:
        gfa: Graph holding the paths
        path_names: Paths to reconstruct (default: every path in the graph)
    """
    if path_names is None:
        path_names = [path.name for path in gfa.get_paths()]
    for name in path_names:
        sequence = gfa.sequence_for_path(name)
        yield SeqRecord(Seq(sequence), id=name, description="")


def write_path_sequences(
    gfa: GFA,
    output: Union[str, FilePath, TextIO],
    path_names: Optional[Iterable[str]] = None
) -> int:
    """
    Write reconstructed path sequences as FASTA.

    Returns:
        Number of sequences written
    """
    records = list(path_records(gfa, path_names))
    if isinstance(output, (str, FilePath)):
        with open_file(output, 'w') as handle:
            count = SeqIO.write(records, handle, "fasta")
    else:
        count = SeqIO.write(records, output, "fasta")
    logger.info(f"Exported {count} path sequence(s)")
    return count

# GFAForge v0.1.0
# Any usage is subject to this software's license.
