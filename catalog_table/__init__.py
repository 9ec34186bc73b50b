"""
Top-level package for the catalog table widget.

This package exposes the core architecture (domain, config, UI adapters).
Most code should import from submodules such as:
    catalog_table.core
    catalog_table.config
    catalog_table.ui
"""

__all__: list[str] = []
