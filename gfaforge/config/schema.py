#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

Configuration schema for GFAForge.

Defines all available configuration parameters with defaults and validation.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

import copy
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # MSA Input
    # ========================================================================
    'msa': {
        'format': 'fasta',  # Any Bio.AlignIO format name
        'consensus_name': 'consensus',  # Row dropped before graph building
        'gap_symbol': '-',
        'link_overlap': '0M',  # Overlap written on every L-line
    },

    # ========================================================================
    # Chain Compaction
    # ========================================================================
    'compaction': {
        'max_passes': None,  # None = repeat until no pass changes the graph
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'gzip': False,  # Append .gz to msa2gfa output and compress it
        'logging': {
            'level': 'INFO',
        },
    },
}

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to YAML config file (None = use defaults)

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        with open(config_path) as f:
            user_config = yaml.safe_load(f)

        # Deep merge user config into defaults
        if user_config:
            config = _deep_merge(config, user_config)

    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def save_config_template(output_path: Path, template: str = 'default'):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
        template: Template type ('default' or 'single-pass')
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # One compaction pass, as produced by the original converter
    if template == 'single-pass':
        config['compaction']['max_passes'] = 1

    with open(output_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    msa = config.get('msa', {})
    gap_symbol = msa.get('gap_symbol', '-')
    if not isinstance(gap_symbol, str) or len(gap_symbol) != 1:
        errors.append(f"Invalid msa.gap_symbol: must be a single character, got {gap_symbol!r}")

    if not msa.get('consensus_name'):
        errors.append("Invalid msa.consensus_name: must be a non-empty string")

    if not msa.get('link_overlap'):
        errors.append("Invalid msa.link_overlap: must be a non-empty string")

    max_passes = config.get('compaction', {}).get('max_passes')
    if max_passes is not None and (not isinstance(max_passes, int) or max_passes < 1):
        errors.append(f"Invalid compaction.max_passes: must be null or an integer >= 1, got {max_passes!r}")

    gzip_output = config.get('output', {}).get('gzip', False)
    if not isinstance(gzip_output, bool):
        errors.append(f"Invalid output.gzip: must be true or false, got {gzip_output!r}")

    level = config.get('output', {}).get('logging', {}).get('level', 'INFO')
    if level not in VALID_LOG_LEVELS:
        errors.append(f"Invalid output.logging.level: {level} (expected one of {', '.join(VALID_LOG_LEVELS)})")

    return errors

# GFAForge v0.1.0
# Any usage is subject to this software's license.
