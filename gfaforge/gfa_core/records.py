#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

GFA1 record model — header, segment, link, path and containment records.

Data records share a small interface: to_gfa_line() renders the record as
one tab-delimited line and add_to() inserts it into a GFA container.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, NamedTuple, Optional, Tuple, Union

from .errors import EmptySequenceError, InvalidNameError, InvalidOrientationError
from .optional_fields import OptionalFields

if TYPE_CHECKING:
    from .graph import GFA

logger = logging.getLogger(__name__)

ORIENTATIONS = ('+', '-')
RESERVED_NAME_CHARS = frozenset('+-*=')


# ============================================================================
#                           VALIDATION HELPERS
# ============================================================================

def validate_name(name: str) -> str:
    """
    Check a segment name for reserved characters.

    Raises:
        InvalidNameError: If the name is empty, or contains + - * = or whitespace
    """
    if not name:
        raise InvalidNameError("Segment name can't be empty")
    for char in name:
        if char in RESERVED_NAME_CHARS or char.isspace():
            raise InvalidNameError(
                f"Segment name can't contain +/-/*/= or whitespace: {name!r}"
            )
    return name


def validate_orientation(orientation: str, label: str = "Orientation") -> str:
    if orientation not in ORIENTATIONS:
        raise InvalidOrientationError(f"{label} field must be either + or -, got {orientation!r}")
    return orientation


def _render_optional(line: str, optional: Optional[OptionalFields]) -> str:
    if optional is not None and not optional.is_empty():
        return f"{line}\t{optional.to_gfa_string()}"
    return line


# ============================================================================
#                           HEADER
# ============================================================================

@dataclass
class Header:
    """GFA header: record type plus format version (0 = unset)."""
    version: int = 0

    record_type = 'H'

    def to_gfa_line(self) -> str:
        return f"{self.record_type}\tVN:Z:{self.version}"


# ============================================================================
#                           SEGMENT
# ============================================================================

@dataclass
class Segment:
    """
    GFA S-line.

    The sequence is required here even though GFA1 allows '*', and the
    length is always derived from it.
    """
    name: str
    sequence: str
    optional: Optional[OptionalFields] = None

    record_type = 'S'

    def __post_init__(self):
        validate_name(self.name)
        if not self.sequence:
            raise EmptySequenceError(f"Segment must have a sequence: {self.name}")

    @property
    def length(self) -> int:
        return len(self.sequence)

    @property
    def kmer_count(self) -> Optional[int]:
        """K-mer count from the KC tag, or None if the tag is absent."""
        if self.optional is None:
            return None
        return self.optional.kmer_count

    def add_optional_fields(self, optional: OptionalFields) -> None:
        self.optional = optional

    def to_gfa_line(self) -> str:
        """
        Convert to GFA S-line format.

        Format: S <name> <sequence> LN:i:<length> [<optional fields>]
        """
        line = f"{self.record_type}\t{self.name}\t{self.sequence}\tLN:i:{self.length}"
        return _render_optional(line, self.optional)

    def add_to(self, gfa: 'GFA') -> None:
        gfa.add_segment(self)


# ============================================================================
#                           LINK
# ============================================================================

@dataclass
class Link:
    """GFA L-line: an oriented adjacency between two segments."""
    from_name: str
    from_orient: str
    to_name: str
    to_orient: str
    overlap: str
    optional: Optional[OptionalFields] = None

    record_type = 'L'

    def __post_init__(self):
        validate_name(self.from_name)
        validate_name(self.to_name)
        validate_orientation(self.from_orient, "From orientation")
        validate_orientation(self.to_orient, "To orientation")

    def add_optional_fields(self, optional: OptionalFields) -> None:
        self.optional = optional

    def to_gfa_line(self) -> str:
        """
        Convert to GFA L-line format.

        Format: L <from> <from_orient> <to> <to_orient> <overlap> [<optional fields>]
        """
        line = (
            f"{self.record_type}\t{self.from_name}\t{self.from_orient}"
            f"\t{self.to_name}\t{self.to_orient}\t{self.overlap}"
        )
        return _render_optional(line, self.optional)

    def add_to(self, gfa: 'GFA') -> None:
        gfa.add_link(self)


# ============================================================================
#                           PATH
# ============================================================================

class OrientedSegment(NamedTuple):
    """One step of a path: a segment name and its orientation."""
    name: str
    orientation: str

    @classmethod
    def parse(cls, step: str) -> 'OrientedSegment':
        """Split a path step such as '12+' into ('12', '+')."""
        if not step or step[-1] not in ORIENTATIONS:
            raise InvalidOrientationError(f"Path step must end with + or -: {step!r}")
        return cls(step[:-1], step[-1])

    def __str__(self) -> str:
        return f"{self.name}{self.orientation}"


@dataclass
class Path:
    """GFA P-line: an ordered walk over oriented segments."""
    name: str
    segments: List[OrientedSegment] = field(default_factory=list)
    overlaps: List[str] = field(default_factory=list)
    optional: Optional[OptionalFields] = None

    record_type = 'P'

    def __post_init__(self):
        self.segments = [
            step if isinstance(step, OrientedSegment) else OrientedSegment.parse(step)
            for step in self.segments
        ]
        for step in self.segments:
            validate_orientation(step.orientation)

    @property
    def segment_names(self) -> List[str]:
        return [step.name for step in self.segments]

    def add_optional_fields(self, optional: OptionalFields) -> None:
        self.optional = optional

    def to_gfa_line(self) -> str:
        """
        Convert to GFA P-line format.

        Format: P <name> <seg1+,seg2-,...> <overlap1,overlap2,...>
        An empty overlap list is written as '*'.
        """
        steps = ','.join(str(step) for step in self.segments)
        overlaps = ','.join(self.overlaps) if self.overlaps else '*'
        line = f"{self.record_type}\t{self.name}\t{steps}\t{overlaps}"
        return _render_optional(line, self.optional)

    def add_to(self, gfa: 'GFA') -> None:
        gfa.add_path(self)


# ============================================================================
#                           CONTAINMENT (placeholder)
# ============================================================================

@dataclass
class Containment:
    """
    GFA C-line placeholder.

    Containments are accepted by the parser but not interpreted; the raw
    fields are kept so the line can be written back unchanged. This is not
    a Segment: several C lines must not collide on one placeholder name.
    """
    fields: Tuple[str, ...]

    record_type = 'C'

    def to_gfa_line(self) -> str:
        return '\t'.join((self.record_type,) + tuple(self.fields))

    def add_to(self, gfa: 'GFA') -> None:
        gfa.add_containment(self)


GFARecord = Union[Segment, Link, Path, Containment]

# GFAForge v0.1.0
# Any usage is subject to this software's license.
