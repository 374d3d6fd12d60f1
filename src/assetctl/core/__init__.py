"""assetctl core: catalog, override store, state resolution, sync and config.

The CLI layer in ``assetctl.cli`` is a thin presentation shell over
``assetctl.core.workspace.Workspace``.
"""
