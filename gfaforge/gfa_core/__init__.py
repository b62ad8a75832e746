"""
GFAForge v0.1.0

GFA1 data model: records, optional fields and the graph container.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

from .errors import (
    GFAError,
    MalformedLineError,
    UnrecognizedRecordTypeError,
    InvalidOptionalFieldError,
    InvalidNameError,
    InvalidOrientationError,
    EmptySequenceError,
    DuplicateSegmentError,
    MissingVersionError,
    UnsupportedVersionError,
    InvalidVersionError,
    VersionAlreadySetError,
    EmptyCollectionError,
    PathNotFoundError,
    EmptyReconstructedSequenceError,
    EdgeInvariantError,
)
from .optional_fields import OptionalFields
from .records import Header, Segment, Link, Path, OrientedSegment, Containment, GFARecord
from .graph import GFA

__all__ = [
    "GFA",
    "Header",
    "Segment",
    "Link",
    "Path",
    "OrientedSegment",
    "Containment",
    "GFARecord",
    "OptionalFields",
    "GFAError",
    "MalformedLineError",
    "UnrecognizedRecordTypeError",
    "InvalidOptionalFieldError",
    "InvalidNameError",
    "InvalidOrientationError",
    "EmptySequenceError",
    "DuplicateSegmentError",
    "MissingVersionError",
    "UnsupportedVersionError",
    "InvalidVersionError",
    "VersionAlreadySetError",
    "EmptyCollectionError",
    "PathNotFoundError",
    "EmptyReconstructedSequenceError",
    "EdgeInvariantError",
]
