#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

Exception hierarchy for GFA parsing, graph containers and MSA conversion.

Every failure is terminal for the call that raised it; nothing is retried
or recovered internally.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""


class GFAError(Exception):
    """Base class for all GFAForge errors."""
    pass


# ============================================================================
#                           LINE / RECORD ERRORS
# ============================================================================

class MalformedLineError(GFAError):
    """Raised when a GFA line cannot be split into the required fields."""

    def __init__(self, message: str, line: str = None):
        self.line = line
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)


class UnrecognizedRecordTypeError(MalformedLineError):
    """Raised when a data line starts with an unknown record type."""
    pass


class InvalidOptionalFieldError(MalformedLineError):
    """Raised when a TAG:TYPE:VALUE field cannot be decoded."""
    pass


class InvalidNameError(GFAError):
    """Raised when a segment name contains a reserved character or whitespace."""
    pass


class InvalidOrientationError(GFAError):
    """Raised when an orientation is anything other than '+' or '-'."""
    pass


class EmptySequenceError(GFAError):
    """Raised when a segment is built without a sequence."""
    pass


# ============================================================================
#                           CONTAINER ERRORS
# ============================================================================

class DuplicateSegmentError(GFAError):
    """Raised when a segment name is already held by the graph."""
    pass


class MissingVersionError(GFAError):
    """Raised when a graph is validated without a format version."""
    pass


class UnsupportedVersionError(GFAError):
    """Raised for GFA2 (recognised but not supported) or unknown versions."""
    pass


class InvalidVersionError(GFAError):
    """Raised when a version other than 1 or 2 is requested."""
    pass


class VersionAlreadySetError(GFAError):
    """Raised when a version is set on a graph that already has one."""
    pass


class EmptyCollectionError(GFAError):
    """Raised when segments, links or paths are requested from a graph holding none."""
    pass


class PathNotFoundError(GFAError):
    """Raised when no path carries the requested name."""
    pass


class EmptyReconstructedSequenceError(GFAError):
    """Raised when a path reconstructs to an empty sequence."""
    pass


# ============================================================================
#                           MSA CONVERSION ERRORS
# ============================================================================

class EdgeInvariantError(GFAError):
    """Raised when a source sequence has no node to start its edges from."""
    pass

# GFAForge v0.1.0
# Any usage is subject to this software's license.
