# SPDX-License-Identifier: MIT
"""Command-line interface for chronological versions."""

from .main import cli, main

__all__ = ["cli", "main"]
