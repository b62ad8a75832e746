#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for GFAForge.

This module provides the main CLI entry point and all subcommands for
converting alignments to GFA graphs and inspecting GFA files.
"""

import io
import logging
import sys
import click
from pathlib import Path
import yaml

from .version import __version__
from .config.schema import load_config, save_config_template, validate_config
from .gfa_core.errors import GFAError
from .io_utils.gfa_io import is_gzipped, read_gfa, write_gfa, write_path_sequences
from .msa.alignment import read_msa
from .msa.converter import MSAGraphConfig, msa_to_gfa

logger = logging.getLogger(__name__)

# Failures reported to the user instead of a traceback
CLI_ERRORS = (GFAError, OSError, ValueError)


def _setup_logging(verbose: bool, quiet: bool, level: str = 'INFO') -> None:
    if verbose:
        level = 'DEBUG'
    elif quiet:
        level = 'WARNING'
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    GFAForge: Graphical Fragment Assembly toolkit

    Build compacted variation graphs from multiple sequence alignments and
    read, validate and query GFA1 files.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='gfaforge_config.yaml',
              help='Output configuration file path')
@click.option('--template', '-t', type=click.Choice(['default', 'single-pass']),
              default='default', help='Configuration template type')
def config_init(output, template):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating {template} configuration template: {output}")

    try:
        save_config_template(Path(output), template=template)
        click.echo(f"✓ Configuration file created: {output}")
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        cfg = load_config(Path(config_file))
    except (OSError, yaml.YAMLError) as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(cfg)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
def config_show(config_file):
    """Display configuration settings."""
    try:
        cfg = load_config(Path(config_file))
    except (OSError, yaml.YAMLError) as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)
    click.echo(yaml.dump(cfg, default_flow_style=False, sort_keys=False))


# ============================================================================
# Graph Commands
# ============================================================================

@main.command('msa2gfa')
@click.argument('msa_file', type=click.Path(exists=True))
@click.option('--output', '-o', required=True, type=click.Path(),
              help='Output GFA file (.gz for compressed output, added when output.gzip is set)')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='Configuration file (YAML)')
@click.option('--format', '-f', 'msa_format', default=None,
              help='Alignment format understood by Bio.AlignIO (default: fasta)')
@click.option('--max-passes', type=int, default=None,
              help='Limit compaction passes (default: run until stable)')
@click.pass_context
def msa2gfa(ctx, msa_file, output, config_file, msa_format, max_passes):
    """
    Convert a multiple sequence alignment to a compacted GFA graph.

    Every aligned sequence becomes a path through the graph.

    Examples:
        gfaforge msa2gfa alignment.msa -o graph.gfa
    """
    try:
        cfg = load_config(Path(config_file) if config_file else None)
    except (OSError, yaml.YAMLError) as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(cfg)
    if errors:
        for error in errors:
            click.echo(f"✗ {error}", err=True)
        sys.exit(1)

    _setup_logging(ctx.obj['VERBOSE'], ctx.obj['QUIET'], cfg['output']['logging']['level'])

    if max_passes is not None:
        cfg['compaction']['max_passes'] = max_passes
    if cfg['output']['gzip'] and not is_gzipped(output):
        output = f"{output}.gz"

    try:
        graph_config = MSAGraphConfig.from_dict(cfg)
        logger.debug(f"Conversion settings: {graph_config}")
        alignment = read_msa(msa_file, fmt=msa_format or cfg['msa']['format'])
        gfa = msa_to_gfa(alignment, graph_config)
        write_gfa(gfa, output)
    except CLI_ERRORS as e:
        click.echo(f"✗ Conversion failed: {e}", err=True)
        sys.exit(1)

    stats = gfa.stats()
    if not ctx.obj['QUIET']:
        click.echo(f"✓ Wrote {output}: {stats['segments']} segments, "
                   f"{stats['links']} links, {stats['paths']} paths")


@main.command('sequence')
@click.argument('gfa_file', type=click.Path(exists=True))
@click.argument('path_names', nargs=-1)
@click.option('--output', '-o', type=click.Path(), default=None,
              help='Output FASTA file (default: stdout)')
@click.pass_context
def sequence(ctx, gfa_file, path_names, output):
    """
    Reconstruct path sequences from a GFA file as FASTA.

    Without PATH_NAMES every path in the graph is written.
    """
    _setup_logging(ctx.obj['VERBOSE'], ctx.obj['QUIET'])

    try:
        gfa = read_gfa(gfa_file)
        names = list(path_names) or None
        if output:
            write_path_sequences(gfa, output, names)
        else:
            buffer = io.StringIO()
            write_path_sequences(gfa, buffer, names)
            click.echo(buffer.getvalue(), nl=False)
    except CLI_ERRORS as e:
        click.echo(f"✗ Could not extract sequence: {e}", err=True)
        sys.exit(1)


@main.command('validate')
@click.argument('gfa_file', type=click.Path(exists=True))
@click.pass_context
def validate(ctx, gfa_file):
    """Check that a GFA file parses and is structurally valid."""
    _setup_logging(ctx.obj['VERBOSE'], ctx.obj['QUIET'])

    try:
        gfa = read_gfa(gfa_file)
        gfa.validate()
    except CLI_ERRORS as e:
        click.echo(f"✗ Invalid GFA: {e}", err=True)
        sys.exit(1)

    stats = gfa.stats()
    click.echo(f"✓ {gfa_file} is valid")
    click.echo(f"  Version: {stats['version']}")
    click.echo(f"  Segments: {stats['segments']}")
    click.echo(f"  Links: {stats['links']}")
    click.echo(f"  Paths: {stats['paths']}")
    click.echo(f"  Total length: {stats['total_length']:,} bp")


if __name__ == '__main__':
    main()
