"""
assetctl - asset enablement for AI assistant configuration catalogs

assetctl resolves which prompts, instructions, chat modes and collections are
enabled for a project, records user overrides, and mirrors the effective state
into the project's ``.github/`` directory.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
