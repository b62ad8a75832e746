#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

Alignment source — the row/column matrix consumed by the MSA graph builder,
with loading from alignment files via Biopython.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Protocol, Sequence, Union

from Bio import AlignIO
from Bio.Align import MultipleSeqAlignment

logger = logging.getLogger(__name__)

CONSENSUS_NAME = "consensus"


class AlignmentMatrix(Protocol):
    """
    Minimum interface of an alignment that can be converted to a graph.

    SequenceAlignment satisfies this protocol.
    """

    @property
    def num_rows(self) -> int:
        ...

    @property
    def num_columns(self) -> int:
        ...

    def row_name(self, row: int) -> str:
        ...

    def base(self, row: int, column: int) -> str:
        ...

    def delete_row(self, row: int) -> None:
        ...


class SequenceAlignment:
    """
    In-memory multiple sequence alignment.

    Rows are named, equal-length aligned sequences ('-' marks a gap).
    """

    def __init__(self, names: Sequence[str], sequences: Sequence[str]):
        if len(names) != len(sequences):
            raise ValueError(f"Got {len(names)} names for {len(sequences)} sequences")
        lengths = {len(seq) for seq in sequences}
        if len(lengths) > 1:
            raise ValueError(f"Aligned sequences differ in length: {sorted(lengths)}")
        self._names: List[str] = list(names)
        self._sequences: List[str] = [str(seq) for seq in sequences]

    @classmethod
    def from_biopython(cls, msa: MultipleSeqAlignment) -> 'SequenceAlignment':
        """Adapt a Biopython MultipleSeqAlignment."""
        return cls([record.id for record in msa], [str(record.seq) for record in msa])

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"SequenceAlignment(rows={self.num_rows}, columns={self.num_columns})"

    @property
    def num_rows(self) -> int:
        return len(self._names)

    @property
    def num_columns(self) -> int:
        return len(self._sequences[0]) if self._sequences else 0

    @property
    def names(self) -> List[str]:
        return list(self._names)

    def row_name(self, row: int) -> str:
        return self._names[row]

    def base(self, row: int, column: int) -> str:
        return self._sequences[row][column]

    def delete_row(self, row: int) -> None:
        del self._names[row]
        del self._sequences[row]


def read_msa(msa_path: Union[str, Path], fmt: str = "fasta") -> SequenceAlignment:
    """
    Load a multiple sequence alignment file.

    Args:
        msa_path: Path to the alignment file
        fmt: Any format name accepted by Bio.AlignIO (default 'fasta')

    Returns:
        SequenceAlignment with one row per aligned record

    Raises:
        FileNotFoundError: If msa_path does not exist
        ValueError: If the file is not a valid alignment
    """
    msa_path = Path(msa_path)
    if not msa_path.exists():
        raise FileNotFoundError(f"MSA file not found: {msa_path}")

    msa = AlignIO.read(str(msa_path), fmt)
    alignment = SequenceAlignment.from_biopython(msa)
    logger.info(f"Loaded MSA {msa_path}: {alignment.num_rows} rows x {alignment.num_columns} columns")
    return alignment


def remove_consensus(alignment: AlignmentMatrix, name: str = CONSENSUS_NAME) -> int:
    """
    Delete consensus rows from an alignment.

    Returns:
        Number of rows removed
    """
    removed = 0
    for row in reversed(range(alignment.num_rows)):
        if alignment.row_name(row) == name:
            alignment.delete_row(row)
            removed += 1
    if removed:
        logger.debug(f"Removed {removed} '{name}' row(s) from alignment")
    return removed

# GFAForge v0.1.0
# Any usage is subject to this software's license.
