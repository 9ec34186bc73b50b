from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from catalog_table.ui.ids import IDs
from catalog_table.ui.layout.build_filter_panel import build_filter_panel
from catalog_table.ui.layout.build_navbar import build_navbar
from catalog_table.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from catalog_table.ui.config import AppConfig


def build_layout(ctx: "AppConfig"):
    controller = ctx.new_controller()

    return dbc.Container(
        fluid=True,
        className="scb-root",
        children=[
            build_navbar(ctx.global_config),

            # One serialised TableController per page load
            dcc.Store(
                id=IDs.Store.TABLE_STATE,
                storage_type="memory",
                data=controller.to_dict(),
            ),

            build_filter_panel(controller.categories),
            build_table_panel(controller.visible_records()),
        ],
    )
