#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

Optional field codec — parses and prints the typed TAG:TYPE:VALUE fields
shared by segment, link and path records.

Only a small catalogue of tags is recognised (RC, FC, KC, SH, UR). Unknown
tags are dropped on read whatever their shape, and LN is skipped because
segment length is always derived from the sequence.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from .errors import InvalidOptionalFieldError, MalformedLineError

logger = logging.getLogger(__name__)


# (tag, attribute, type code) in print order
FIELD_CATALOGUE = (
    ('RC', 'read_count', 'i'),
    ('FC', 'fragment_count', 'i'),
    ('KC', 'kmer_count', 'i'),
    ('SH', 'checksum', 'H'),
    ('UR', 'uri', 'Z'),
)

_CATALOGUE_BY_TAG = {tag: (attr, type_code) for tag, attr, type_code in FIELD_CATALOGUE}

# Tags read elsewhere and never stored here
SKIPPED_TAGS = frozenset({'LN'})

# GFA1 i values: optional sign, decimal digits
_INT_PATTERN = re.compile(r"[-+]?[0-9]+")

# GFA1 H values: upper-case hex digits, whole bytes
_HEX_PATTERN = re.compile(r"(?:[0-9A-F]{2})+")


def _decode_value(tag: str, type_code: str, value: str):
    """Decode a raw field value for a catalogue tag."""
    if type_code == 'i':
        if not _INT_PATTERN.fullmatch(value):
            raise InvalidOptionalFieldError(f"{tag} expects an integer value", value)
        return int(value)
    if type_code == 'H':
        if not _HEX_PATTERN.fullmatch(value):
            raise InvalidOptionalFieldError(f"{tag} expects an upper-case hex byte array", value)
        return bytes.fromhex(value)
    return value


def _encode_value(type_code: str, value) -> str:
    if type_code == 'H':
        return value.hex().upper()
    return str(value)


@dataclass
class OptionalFields:
    """
    Recognised optional fields of a GFA record.

    Each attribute is None when the tag was absent, so an explicit zero
    count is distinguishable from a missing one.
    """
    read_count: Optional[int] = None
    fragment_count: Optional[int] = None
    kmer_count: Optional[int] = None
    checksum: Optional[bytes] = None
    uri: Optional[str] = None

    @classmethod
    def parse(cls, tokens: Iterable[str]) -> 'OptionalFields':
        """
        Build an OptionalFields from raw TAG:TYPE:VALUE tokens.

        Args:
            tokens: Tab-split optional columns of one GFA line

        Returns:
            OptionalFields holding every recognised tag

        Raises:
            MalformedLineError: If no tokens are supplied
            InvalidOptionalFieldError: If a recognised tag is not
                TAG:TYPE:VALUE or carries an undecodable value
        """
        tokens = list(tokens)
        if not tokens:
            raise MalformedLineError("No optional fields supplied")

        fields = cls()
        for token in tokens:
            tag = token.split(':', 1)[0]
            if tag in SKIPPED_TAGS:
                continue
            if tag not in _CATALOGUE_BY_TAG:
                logger.debug(f"Ignoring unrecognised optional field: {token!r}")
                continue

            parts = token.split(':', 2)
            if len(parts) != 3:
                raise InvalidOptionalFieldError("Optional field is not TAG:TYPE:VALUE", token)
            value = parts[2]

            attr, type_code = _CATALOGUE_BY_TAG[tag]
            setattr(fields, attr, _decode_value(tag, type_code, value))
        return fields

    def is_empty(self) -> bool:
        """True when no recognised tag is set."""
        return all(getattr(self, attr) is None for _, attr, _ in FIELD_CATALOGUE)

    def to_gfa_string(self) -> str:
        """Tab-joined re-encoding of the set tags, in catalogue order."""
        return '\t'.join(
            f"{tag}:{type_code}:{_encode_value(type_code, getattr(self, attr))}"
            for tag, attr, type_code in FIELD_CATALOGUE
            if getattr(self, attr) is not None
        )

# GFAForge v0.1.0
# Any usage is subject to this software's license.
