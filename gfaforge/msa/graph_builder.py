#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

MSA variation graph construction — node building, edge induction and chain
compaction.

Nodes live in a dense arena: node ``i`` is stored at index ``i - 1`` and
nodes refer to each other only by identifier. Compaction renumbers the
arena and rebuilds every edge set from scratch.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, List, Optional, Set

from ..gfa_core.errors import EdgeInvariantError
from .alignment import AlignmentMatrix

logger = logging.getLogger(__name__)

GAP_SYMBOL = '-'


@dataclass
class MSANode:
    """
    One distinct base of one alignment column (or a run of them after
    compaction).

    An empty base marks a node created from a gap; such nodes are dropped
    during compaction.
    """
    id: int
    base: str
    seq_ids: FrozenSet[str]
    out_edges: Set[int] = field(default_factory=set)
    in_edges: Set[int] = field(default_factory=set)

    @property
    def is_gap(self) -> bool:
        return self.base == ""


class MSANodes:
    """
    Node arena for one alignment.

    Holds the nodes in ascending identifier order together with the names of
    the source sequences, which drive edge induction and path emission.
    """

    def __init__(self, nodes: List[MSANode], seq_ids: List[str]):
        self._nodes = nodes
        self.seq_ids = seq_ids

    @classmethod
    def from_alignment(cls, alignment: AlignmentMatrix, gap_symbol: str = GAP_SYMBOL) -> 'MSANodes':
        """
        Create one node per distinct base per column.

        Rows sharing a base in a column share a node. Every gap becomes its
        own empty-base node, never merged with other gaps. Identifiers
        increase column by column, left to right.

        Raises:
            ValueError: If two rows carry the same sequence name
        """
        seq_ids = [alignment.row_name(row) for row in range(alignment.num_rows)]
        if len(set(seq_ids)) != len(seq_ids):
            raise ValueError("Alignment contains duplicate sequence names")

        nodes: List[MSANode] = []
        for column in range(alignment.num_columns):
            bases: Dict[str, List[str]] = {}
            gaps: List[str] = []
            for row, seq_id in enumerate(seq_ids):
                base = alignment.base(row, column)
                if base == gap_symbol:
                    gaps.append(seq_id)
                else:
                    bases.setdefault(base, []).append(seq_id)

            for base, ids in bases.items():
                nodes.append(MSANode(len(nodes) + 1, base, frozenset(ids)))
            for seq_id in gaps:
                nodes.append(MSANode(len(nodes) + 1, "", frozenset([seq_id])))

        logger.debug(
            f"Built {len(nodes)} nodes from {alignment.num_columns} columns "
            f"and {len(seq_ids)} sequences"
        )
        return cls(nodes, seq_ids)

    # ------------------------------------------------------------------
    # Arena access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[MSANode]:
        return iter(self._nodes)

    def __getitem__(self, node_id: int) -> MSANode:
        if not 1 <= node_id <= len(self._nodes):
            raise KeyError(f"No node with id {node_id}")
        return self._nodes[node_id - 1]

    def ordered_ids(self) -> List[int]:
        return [node.id for node in self._nodes]

    def edge_count(self) -> int:
        return sum(len(node.out_edges) for node in self._nodes)

    # ------------------------------------------------------------------
    # Edge induction
    # ------------------------------------------------------------------

    def draw_edges(self) -> None:
        """
        Connect consecutive nodes of each source sequence.

        Existing edges are discarded first, so this is safe to re-run after
        the arena has been renumbered.

        Raises:
            EdgeInvariantError: If a source sequence contributes to no node
        """
        for node in self._nodes:
            node.out_edges.clear()
            node.in_edges.clear()

        walks: Dict[str, List[int]] = {seq_id: [] for seq_id in self.seq_ids}
        for node in self._nodes:
            for seq_id in node.seq_ids:
                walks[seq_id].append(node.id)

        for seq_id in self.seq_ids:
            walk = walks[seq_id]
            if not walk:
                raise EdgeInvariantError(f"Node parse error: could not identify start node for {seq_id}")
            for from_id, to_id in zip(walk, walk[1:]):
                self[from_id].out_edges.add(to_id)
                self[to_id].in_edges.add(from_id)

    # ------------------------------------------------------------------
    # Compaction
    # ------------------------------------------------------------------

    def squashable_pairs(self) -> Dict[int, int]:
        """
        Find nodes that can absorb their successor.

        A node is squashable into its successor when it has exactly one
        out-edge, the successor has exactly one in-edge, and both carry the
        same source sequences.

        Returns:
            Mapping of successor id -> predecessor id
        """
        pairs: Dict[int, int] = {}
        for node in self._nodes:
            if len(node.out_edges) != 1:
                continue
            successor = self[next(iter(node.out_edges))]
            if len(successor.in_edges) == 1 and successor.seq_ids == node.seq_ids:
                pairs[successor.id] = node.id
        return pairs

    def squash_nodes(self) -> int:
        """
        Run one compaction pass.

        Merges every squashable pair (highest successor first), drops
        empty-base nodes, renumbers the survivors 1..K in their existing order
        and redraws all edges.

        Returns:
            Number of merges performed
        """
        pairs = self.squashable_pairs()
        arena: List[Optional[MSANode]] = list(self._nodes)
        for successor_id in sorted(pairs, reverse=True):
            predecessor = arena[pairs[successor_id] - 1]
            predecessor.base += arena[successor_id - 1].base
            arena[successor_id - 1] = None

        survivors = [node for node in arena if node is not None and not node.is_gap]
        for new_id, node in enumerate(survivors, 1):
            node.id = new_id
        dropped = len(self._nodes) - len(pairs) - len(survivors)
        self._nodes = survivors
        self.draw_edges()

        logger.debug(
            f"Compaction pass: {len(pairs)} merge(s), {dropped} gap node(s) dropped, "
            f"{len(survivors)} node(s) remain"
        )
        return len(pairs)

    def compact(self, max_passes: Optional[int] = None) -> int:
        """
        Repeat compaction passes until the graph stops changing.

        Args:
            max_passes: Upper bound on passes (None = run to a fixed point)

        Returns:
            Number of passes run
        """
        if max_passes is not None and max_passes < 1:
            raise ValueError(f"max_passes must be >= 1, got {max_passes}")

        passes = 0
        while max_passes is None or passes < max_passes:
            before = len(self._nodes)
            merges = self.squash_nodes()
            passes += 1
            if merges == 0 and len(self._nodes) == before:
                break

        logger.info(
            f"Compacted graph to {len(self._nodes)} nodes and {self.edge_count()} edges "
            f"in {passes} pass(es)"
        )
        return passes

# GFAForge v0.1.0
# Any usage is subject to this software's license.
