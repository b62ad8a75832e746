"""
GFAForge v0.1.0

Multiple sequence alignment to GFA graph conversion.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

from .alignment import AlignmentMatrix, SequenceAlignment, read_msa, remove_consensus
from .graph_builder import MSANode, MSANodes
from .converter import MSAGraphConfig, build_nodes, msa_to_gfa, nodes_to_gfa

__all__ = [
    "AlignmentMatrix",
    "SequenceAlignment",
    "read_msa",
    "remove_consensus",
    "MSANode",
    "MSANodes",
    "MSAGraphConfig",
    "build_nodes",
    "msa_to_gfa",
    "nodes_to_gfa",
]
