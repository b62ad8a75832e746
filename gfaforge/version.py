#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAForge v0.1.0

Version information.

Author: GFAForge Development Team
License: MIT - See LICENSE
"""

__version__ = "0.1.0"

# GFAForge v0.1.0
# Any usage is subject to this software's license.
