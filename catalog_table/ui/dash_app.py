from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from catalog_table.config.io import load_app_data
from catalog_table.ui.layout.build_layout import build_layout
from catalog_table.ui.callbacks.callbacks_filters import register_filter_callbacks
from catalog_table.ui.callbacks.callbacks_table import register_table_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load config + seed records
    global_config, seed = load_app_data(config_root)

    # 2) App context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        seed=seed,
    )

    # Resolve the assets folder relative to this file so styles.css is found
    # regardless of the working directory.
    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_table_callbacks(app, ctx)

    logger.info("Dash app created",
                extra={"config_root": str(config_root),
                       "n_records": len(seed)})
    return app
