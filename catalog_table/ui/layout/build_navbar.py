from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from catalog_table.config.model import GlobalConfig


NAVBAR_SUBTITLE = "Filter and manage catalog items"


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    title = global_config.ui_title
    subtitle = NAVBAR_SUBTITLE

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(
                            subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm scb-navbar",
    )
