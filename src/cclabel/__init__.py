"""cclabel CLI entry point.

This package provides a Click-based CLI for creating ClearCase label types and
applying version labels through cleartool. See `cclabel --help` for details.
"""
