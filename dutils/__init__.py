"""Utilities for strings, timestamps, files, config, profiling and random draws, plus numpy-based matrix, transform and drawing helpers."""

__version__ = "0.1.0"