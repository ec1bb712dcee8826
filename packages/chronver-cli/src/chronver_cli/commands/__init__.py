# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import bump, compare, show, sort, validate

__all__ = ["bump", "compare", "show", "sort", "validate"]
