"""Shared utilities for assetctl (I/O, text, merging, time, paths)."""
