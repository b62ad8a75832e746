#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

GFA graph container — owns the header, comments and record collections of
one graph, enforces segment-name uniqueness, and answers validation and
sequence-reconstruction queries.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Set

from .errors import (
    EmptyCollectionError,
    EmptyReconstructedSequenceError,
    DuplicateSegmentError,
    InvalidVersionError,
    MissingVersionError,
    PathNotFoundError,
    UnsupportedVersionError,
    VersionAlreadySetError,
)
from .records import Containment, GFARecord, Header, Link, Path, Segment

if TYPE_CHECKING:
    from ..io_utils.gfa_io import GFAWriter

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = 1
KNOWN_VERSIONS = (1, 2)


class GFA:
    """
    In-memory GFA1 graph.

    Records are kept in insertion order. Segment names are unique for the
    lifetime of the instance; links and paths are not deduplicated.
    """

    def __init__(self):
        self.header = Header()
        self._comments: List[str] = []
        self._segments: List[Segment] = []
        self._links: List[Link] = []
        self._containments: List[Containment] = []
        self._paths: List[Path] = []
        self._segment_names: Set[str] = set()

    def __repr__(self) -> str:
        return (
            f"GFA(version={self.version}, segments={len(self._segments)}, "
            f"links={len(self._links)}, paths={len(self._paths)})"
        )

    # ------------------------------------------------------------------
    # Header and comments
    # ------------------------------------------------------------------

    @property
    def version(self) -> int:
        """GFA format version; 0 means no version has been set."""
        return self.header.version

    def set_version(self, version: int) -> None:
        """
        Attach a format version to the graph.

        Raises:
            VersionAlreadySetError: If a version is already attached
            UnsupportedVersionError: For version 2
            InvalidVersionError: For anything other than 1 or 2
        """
        if self.header.version != 0:
            raise VersionAlreadySetError(
                f"GFA instance already has a version number attached: {self.header.version}"
            )
        if version == 2:
            raise UnsupportedVersionError("GFA version 2 is currently unsupported")
        if version != SUPPORTED_VERSION:
            raise InvalidVersionError(f"GFA format must be either version 1 or version 2, got {version}")
        self.header.version = version

    def add_comment(self, comment: str) -> None:
        self._comments.append(comment)

    @property
    def comments(self) -> List[str]:
        return list(self._comments)

    def header_line(self) -> str:
        return self.header.to_gfa_line()

    def comment_lines(self) -> List[str]:
        return [f"#\t{comment}" for comment in self._comments]

    def marshal_header(self) -> str:
        """Header line followed by comment lines, newline-terminated."""
        lines = [self.header_line()] + self.comment_lines()
        return ''.join(f"{line}\n" for line in lines)

    # ------------------------------------------------------------------
    # Record insertion
    # ------------------------------------------------------------------

    def add_segment(self, segment: Segment) -> None:
        """
        Add a segment, rejecting names already held by the graph.

        Raises:
            DuplicateSegmentError: If the segment name is already present
        """
        if self.has_segment(segment.name):
            raise DuplicateSegmentError(
                f"Duplicate segment name already present in GFA instance: {segment.name}"
            )
        self._segments.append(segment)
        self._segment_names.add(segment.name)

    def add_link(self, link: Link) -> None:
        self._links.append(link)

    def add_path(self, path: Path) -> None:
        self._paths.append(path)

    def add_containment(self, containment: Containment) -> None:
        self._containments.append(containment)

    def add(self, record: GFARecord) -> None:
        """Add any data record, dispatching on its type."""
        record.add_to(self)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_segments(self) -> List[Segment]:
        if not self._segments:
            raise EmptyCollectionError("No segments currently held in GFA instance")
        return list(self._segments)

    def get_links(self) -> List[Link]:
        if not self._links:
            raise EmptyCollectionError("No links currently held in GFA instance")
        return list(self._links)

    def get_paths(self) -> List[Path]:
        if not self._paths:
            raise EmptyCollectionError("No paths currently held in GFA instance")
        return list(self._paths)

    @property
    def containments(self) -> List[Containment]:
        return list(self._containments)

    def has_segment(self, name: str) -> bool:
        return name in self._segment_names

    def get_segment(self, name: str) -> Segment:
        for segment in self._segments:
            if segment.name == name:
                return segment
        raise KeyError(f"Segment not found: {name}")

    def validate(self) -> None:
        """
        Check the graph is writable.

        Checks that a version (1/2) is attached and that the graph holds at
        least one segment.
        """
        if self.version == 0:
            raise MissingVersionError("Please set GFA to format version 1 or 2")
        if self.version not in KNOWN_VERSIONS:
            raise UnsupportedVersionError(f"GFA version not recognised: {self.version}")
        if not self._segments:
            raise EmptyCollectionError("GFA instance contains no segments")

    def sequence_for_path(self, path_name: str) -> str:
        """
        Reconstruct the sequence spelled by a named path.

        Segment sequences are concatenated in path order. Orientation markers
        are stripped from the steps; sequences are not reverse-complemented.

        Args:
            path_name: Exact name of the path

        Returns:
            The concatenated sequence

        Raises:
            PathNotFoundError: If no path has this name
            EmptyReconstructedSequenceError: If the path spells no sequence
        """
        for path in self._paths:
            if path.name == path_name:
                break
        else:
            raise PathNotFoundError(f"Specified path not found in GFA: {path_name}")

        seq_index: Dict[str, str] = {seg.name: seg.sequence for seg in self._segments}
        parts = []
        for step in path.segments:
            sequence = seq_index.get(step.name)
            if sequence is None:
                logger.warning(f"Path {path_name} references unknown segment {step.name}")
                continue
            parts.append(sequence)

        sequence = ''.join(parts)
        if not sequence:
            raise EmptyReconstructedSequenceError(f"Path {path_name} reconstructs to an empty sequence")
        return sequence

    def stats(self) -> Dict[str, Any]:
        """Record counts and total segment length."""
        return {
            'version': self.version,
            'comments': len(self._comments),
            'segments': len(self._segments),
            'links': len(self._links),
            'containments': len(self._containments),
            'paths': len(self._paths),
            'total_length': sum(seg.length for seg in self._segments),
        }

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def records(self) -> List[GFARecord]:
        """All data records in write order: segments, links, containments, paths."""
        return [*self._segments, *self._links, *self._containments, *self._paths]

    def write_content(self, writer: 'GFAWriter') -> None:
        """
        Dump the graph through a GFAWriter.

        The graph is validated first; nothing is written if validation fails.
        """
        self.validate()
        writer.write_header(self)
        for record in self.records():
            writer.write(record)
        logger.debug(
            f"Wrote {len(self._segments)} segments, {len(self._links)} links, "
            f"{len(self._paths)} paths"
        )

# GFAForge v0.1.0
# Any usage is subject to this software's license.
