"""Worked examples of data structures, sorting, design patterns, small system designs and file and HTTP utilities."""

__version__ = "0.1.0"