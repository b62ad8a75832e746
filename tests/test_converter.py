#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

Tests for MSA to GFA conversion.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

import io

import pytest
from gfaforge.gfa_core import EmptySequenceError
from gfaforge.io_utils import dump_gfa, load_gfa
from gfaforge.msa import (
    MSAGraphConfig,
    MSANode,
    MSANodes,
    SequenceAlignment,
    msa_to_gfa,
    nodes_to_gfa,
    read_msa,
)

UNGAPPED = {
    "seq1": "ACGTACGT",
    "seq2": "ACGTTACGT",
    "seq3": "ACCTACGA",
}


class TestReadMSA:
    """Test loading alignments through Biopython."""

    def test_read_fasta_alignment(self, example_msa):
        alignment = read_msa(example_msa)

        assert alignment.names == ["seq1", "seq2", "seq3", "consensus"]
        assert alignment.num_columns == 9

    def test_missing_file(self, temp_output_dir):
        with pytest.raises(FileNotFoundError):
            read_msa(temp_output_dir / "absent.msa")


class TestMSAToGFA:
    """Test the full conversion pipeline."""

    def test_graph_shape(self, example_alignment):
        gfa = msa_to_gfa(example_alignment)

        assert gfa.version == 1
        assert [seg.sequence for seg in gfa.get_segments()] == ["AC", "G", "C", "T", "T", "ACG", "T", "A"]
        assert [seg.name for seg in gfa.get_segments()] == [str(i) for i in range(1, 9)]
        assert len(gfa.get_links()) == 9
        assert all(link.overlap == "0M" for link in gfa.get_links())
        assert [path.name for path in gfa.get_paths()] == ["seq1", "seq2", "seq3"]

    def test_consensus_removed(self, example_alignment):
        msa_to_gfa(example_alignment)

        assert "consensus" not in example_alignment.names

    def test_path_steps_and_overlaps(self, example_alignment):
        gfa = msa_to_gfa(example_alignment)
        path = gfa.get_paths()[0]

        assert path.to_gfa_line() == "P\tseq1\t1+,2+,4+,6+,7+\t2M,1M,1M,3M,1M"

    @pytest.mark.parametrize("name", sorted(UNGAPPED))
    def test_paths_spell_input_sequences(self, example_alignment, name):
        gfa = msa_to_gfa(example_alignment)

        assert gfa.sequence_for_path(name) == UNGAPPED[name]

    def test_from_file_and_round_trip(self, example_msa):
        """Test the converted graph survives a write/read cycle."""
        gfa = msa_to_gfa(read_msa(example_msa))
        buffer = io.StringIO()
        dump_gfa(gfa, buffer)

        copy = load_gfa(io.StringIO(buffer.getvalue()))
        assert len(copy.get_segments()) == 8
        for name, sequence in UNGAPPED.items():
            assert copy.sequence_for_path(name) == sequence

    def test_custom_link_overlap(self, example_alignment):
        gfa = msa_to_gfa(example_alignment, MSAGraphConfig(link_overlap="*"))

        assert {link.overlap for link in gfa.get_links()} == {"*"}

    def test_single_pass_config(self):
        alignment = SequenceAlignment(["a", "b"], ["A-C", "A-C"])

        gfa = msa_to_gfa(alignment, MSAGraphConfig(max_passes=1))

        assert [seg.sequence for seg in gfa.get_segments()] == ["A", "C"]
        assert gfa.sequence_for_path("a") == "AC"

    def test_custom_gap_symbol(self):
        alignment = SequenceAlignment(["a", "b"], ["A.C", "AGC"])

        gfa = msa_to_gfa(alignment, MSAGraphConfig(gap_symbol="."))

        assert gfa.sequence_for_path("a") == "AC"
        assert gfa.sequence_for_path("b") == "AGC"


class TestMSAGraphConfig:

    def test_invalid_gap_symbol(self):
        with pytest.raises(ValueError):
            MSAGraphConfig(gap_symbol="--")

    def test_invalid_max_passes(self):
        with pytest.raises(ValueError):
            MSAGraphConfig(max_passes=0)

    def test_from_dict(self):
        config = MSAGraphConfig.from_dict({
            'msa': {'consensus_name': 'cons', 'gap_symbol': '.', 'link_overlap': '1M'},
            'compaction': {'max_passes': 2},
        })

        assert config == MSAGraphConfig(consensus_name='cons', gap_symbol='.', link_overlap='1M', max_passes=2)


class TestEmitter:

    def test_empty_base_aborts_emission(self):
        nodes = MSANodes([MSANode(1, "", frozenset({"a"}))], ["a"])

        with pytest.raises(EmptySequenceError):
            nodes_to_gfa(nodes)

# GFAForge v0.1.0
# Any usage is subject to this software's license.
