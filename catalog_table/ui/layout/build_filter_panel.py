from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from catalog_table.ui.helpers import (
    get_category_options,
    get_price_options,
    get_rating_options,
)
from catalog_table.ui.ids import IDs


def build_filter_panel(categories: Sequence[str]) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            dbc.Row(
                [
                    dbc.Col(
                        dbc.Input(
                            id=IDs.Control.NAME_FILTER,
                            type="text",
                            value="",
                            placeholder="Search by name",
                        ),
                        md=3,
                    ),
                    dbc.Col(
                        dbc.Input(
                            id=IDs.Control.DATE_FILTER,
                            type="text",
                            value="",
                            placeholder="Search by date (DD-MM-YYYY)",
                        ),
                        md=2,
                    ),
                    dbc.Col(
                        dcc.Dropdown(
                            id=IDs.Control.PRICE_FILTER,
                            options=get_price_options(),
                            value="Any",
                            clearable=False,
                        ),
                        md=2,
                    ),
                    dbc.Col(
                        dcc.Dropdown(
                            id=IDs.Control.RATING_FILTER,
                            options=get_rating_options(),
                            value="Any",
                            clearable=False,
                        ),
                        md=2,
                    ),
                    dbc.Col(
                        html.Div(
                            [
                                dbc.Button(
                                    "Category",
                                    id=IDs.Control.CATEGORY_BUTTON,
                                    color="secondary",
                                    outline=True,
                                ),
                                html.Div(
                                    dbc.Checklist(
                                        id=IDs.Control.CATEGORY_CHECKLIST,
                                        options=get_category_options(categories),
                                        value=[],
                                    ),
                                    id=IDs.Control.CATEGORY_DROPDOWN,
                                    className="scb-category-dropdown border rounded p-2 mt-2 bg-white",
                                    style={"display": "none"},
                                ),
                            ],
                            className="position-relative",
                        ),
                        md=2,
                    ),
                    dbc.Col(
                        dbc.Button(
                            "Reset Filters",
                            id=IDs.Control.RESET_BUTTON,
                            color="secondary",
                            outline=True,
                        ),
                        md=1,
                    ),
                ],
                className="g-2 align-items-start",
            )
        ),
        className="mt-3",
    )
