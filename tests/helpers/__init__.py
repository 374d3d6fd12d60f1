"""Shared test helpers for assetctl."""
