#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

Pytest configuration and shared fixtures.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from gfaforge.gfa_core import GFA, Segment, Link, Path as GFAPath
from gfaforge.msa import SequenceAlignment


@pytest.fixture
def test_data_dir():
    """Path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def example_gfa(test_data_dir):
    """Small GFA1 file with comments, optional fields, links and paths."""
    return test_data_dir / "example.gfa"


@pytest.fixture
def example_msa(test_data_dir):
    """FASTA alignment of three sequences plus a consensus row."""
    return test_data_dir / "example.msa"


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="gfaforge_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def simple_gfa():
    """Version 1 graph: segments 1:AC and 2:GT joined by one link and one path."""
    gfa = GFA()
    gfa.set_version(1)
    gfa.add_segment(Segment("1", "AC"))
    gfa.add_segment(Segment("2", "GT"))
    gfa.add_link(Link("1", "+", "2", "+", "0M"))
    gfa.add_path(GFAPath("seq", ["1+", "2+"], ["2M", "2M"]))
    return gfa


@pytest.fixture
def example_alignment():
    """Alignment matching tests/data/example.msa, consensus row included."""
    return SequenceAlignment(
        ["seq1", "seq2", "seq3", "consensus"],
        ["ACGT-ACGT", "ACGTTACGT", "ACCT-ACGA", "ACGTTACGT"],
    )

# GFAForge v0.1.0
# Any usage is subject to this software's license.
