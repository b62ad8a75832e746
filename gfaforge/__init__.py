#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

Package initialization and version metadata.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

from .version import __version__

__all__ = ["__version__"]

# GFAForge v0.1.0
# Any usage is subject to this software's license.
