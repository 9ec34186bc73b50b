"""
Config package for catalog_table.

Responsible for:
- config models (GlobalConfig)
- config I/O helpers (load_global_config / load_seed_records)
"""

from .model import GlobalConfig
from .io import load_global_config, load_seed_records, load_app_data
