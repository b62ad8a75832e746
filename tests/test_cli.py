#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

Tests for CLI command interface.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

import gzip

import pytest
from click.testing import CliRunner
from gfaforge.cli import main
from gfaforge.io_utils import read_gfa


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self):
        """Test that --help runs without error."""
        runner = CliRunner()
        result = runner.invoke(main, ['--help'])

        assert result.exit_code == 0
        assert 'GFAForge' in result.output

    def test_cli_version(self):
        """Test that --version displays version."""
        runner = CliRunner()
        result = runner.invoke(main, ['--version'])

        assert result.exit_code == 0
        assert '0.1.0' in result.output

    def test_invalid_command(self):
        """Test that invalid commands are handled gracefully."""
        runner = CliRunner()
        result = runner.invoke(main, ['nonexistent_command'])

        assert result.exit_code != 0


class TestConfigCLI:
    """Test config subcommands."""

    def test_config_init_and_validate(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            result = runner.invoke(main, ['config', 'init', '--output', 'test_config.yaml'])
            assert result.exit_code == 0

            result = runner.invoke(main, ['config', 'validate', 'test_config.yaml'])
            assert result.exit_code == 0
            assert 'valid' in result.output

    def test_config_validate_rejects_bad_values(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            with open('bad.yaml', 'w') as f:
                f.write("compaction:\n  max_passes: 0\n")
            result = runner.invoke(main, ['config', 'validate', 'bad.yaml'])

            assert result.exit_code == 1


class TestMSA2GFACLI:
    """Test the msa2gfa command."""

    def test_convert(self, example_msa, temp_output_dir):
        output = temp_output_dir / "graph.gfa"
        runner = CliRunner()
        result = runner.invoke(main, ['msa2gfa', str(example_msa), '--output', str(output)])

        assert result.exit_code == 0
        gfa = read_gfa(output)
        assert len(gfa.get_segments()) == 8
        assert gfa.sequence_for_path('seq2') == 'ACGTTACGT'

    def test_convert_single_pass(self, example_msa, temp_output_dir):
        output = temp_output_dir / "graph.gfa"
        runner = CliRunner()
        result = runner.invoke(main, [
            'msa2gfa', str(example_msa), '-o', str(output), '--max-passes', '1',
        ])

        assert result.exit_code == 0
        assert output.exists()

    def test_gzip_config_compresses_output(self, example_msa, temp_output_dir):
        """Test output.gzip adds a .gz suffix and writes a readable gzip file."""
        config_path = temp_output_dir / "gzip.yaml"
        config_path.write_text("output:\n  gzip: true\n")
        output = temp_output_dir / "graph.gfa"
        runner = CliRunner()
        result = runner.invoke(main, [
            'msa2gfa', str(example_msa), '-o', str(output), '-c', str(config_path),
        ])

        assert result.exit_code == 0
        compressed = temp_output_dir / "graph.gfa.gz"
        assert compressed.exists()
        assert not output.exists()
        with gzip.open(compressed, 'rt') as handle:
            assert handle.readline().startswith("H\tVN:Z:1")
        assert read_gfa(compressed).sequence_for_path('seq3') == 'ACCTACGA'

    def test_gzip_config_keeps_existing_suffix(self, example_msa, temp_output_dir):
        config_path = temp_output_dir / "gzip.yaml"
        config_path.write_text("output:\n  gzip: true\n")
        output = temp_output_dir / "graph.gfa.gz"
        runner = CliRunner()
        result = runner.invoke(main, [
            'msa2gfa', str(example_msa), '-o', str(output), '-c', str(config_path),
        ])

        assert result.exit_code == 0
        assert output.exists()
        assert not (temp_output_dir / "graph.gfa.gz.gz").exists()

    def test_missing_output_option(self, example_msa):
        runner = CliRunner()
        result = runner.invoke(main, ['msa2gfa', str(example_msa)])

        assert result.exit_code != 0

    def test_unreadable_alignment(self, temp_output_dir):
        bad = temp_output_dir / "bad.msa"
        bad.write_text(">a\nACGT\n>b\nAC\n")
        runner = CliRunner()
        result = runner.invoke(main, ['msa2gfa', str(bad), '-o', str(temp_output_dir / "out.gfa")])

        assert result.exit_code == 1


class TestGraphCLI:
    """Test the sequence and validate commands."""

    def test_sequence_to_file(self, example_gfa, temp_output_dir):
        output = temp_output_dir / "paths.fasta"
        runner = CliRunner()
        result = runner.invoke(main, ['sequence', str(example_gfa), 'path1', '-o', str(output)])

        assert result.exit_code == 0
        assert output.read_text() == ">path1\nACGTGGTTA\n"

    def test_sequence_to_stdout(self, example_gfa):
        runner = CliRunner()
        result = runner.invoke(main, ['--quiet', 'sequence', str(example_gfa)])

        assert result.exit_code == 0
        assert '>path1\nACGTGGTTA' in result.output
        assert '>path2\nACGTTTA' in result.output

    def test_sequence_unknown_path(self, example_gfa):
        runner = CliRunner()
        result = runner.invoke(main, ['sequence', str(example_gfa), 'nope'])

        assert result.exit_code == 1

    def test_validate(self, example_gfa):
        runner = CliRunner()
        result = runner.invoke(main, ['validate', str(example_gfa)])

        assert result.exit_code == 0
        assert 'Segments: 3' in result.output

    def test_validate_rejects_versionless_graph(self, temp_output_dir):
        gfa_path = temp_output_dir / "noversion.gfa"
        gfa_path.write_text("S\t1\tACGT\n")
        runner = CliRunner()
        result = runner.invoke(main, ['validate', str(gfa_path)])

        assert result.exit_code == 1

# GFAForge v0.1.0
# Any usage is subject to this software's license.
