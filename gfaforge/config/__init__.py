"""
GFAForge v0.1.0

Configuration management for GFAForge.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

from .schema import DEFAULT_CONFIG, load_config, save_config_template, validate_config

__all__ = ["DEFAULT_CONFIG", "load_config", "save_config_template", "validate_config"]
