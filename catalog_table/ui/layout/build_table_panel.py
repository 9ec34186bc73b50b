from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import html

from catalog_table.core.record import Record
from catalog_table.ui.helpers import format_price
from catalog_table.ui.ids import IDs, record_delete_id

COLUMNS = ("Name", "Category", "Date", "Price", "Rating", "Actions")

FONT_FAMILY = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'

HEADER_STYLE = {
    "fontFamily": FONT_FAMILY,
    "fontSize": "12px",
    "fontWeight": "600",
    "backgroundColor": "#f3f4f6",
    "borderBottom": "1px solid #e5e7eb",
    "color": "#111827",
    "padding": "8px 12px",
    "whiteSpace": "nowrap",
}

CELL_STYLE = {
    "fontFamily": FONT_FAMILY,
    "fontSize": "12px",
    "padding": "6px 12px",
    "borderBottom": "1px solid #e5e7eb",
    "color": "#374151",
    "verticalAlign": "middle",
    "whiteSpace": "nowrap",
}


def build_record_row(record: Record) -> html.Tr:
    return html.Tr(
        [
            html.Td(record.name, style=CELL_STYLE),
            html.Td(record.category, style=CELL_STYLE),
            html.Td(record.date, style=CELL_STYLE),
            html.Td(format_price(record.price), style=CELL_STYLE),
            html.Td(str(record.rating), style=CELL_STYLE),
            html.Td(
                dbc.Button(
                    "Delete",
                    id=record_delete_id(record.id),
                    color="danger",
                    outline=True,
                    size="sm",
                    style={
                        "fontSize": "11px",
                        "padding": "2px 8px",
                        "lineHeight": "1.2"
                    }
                ),
                style=CELL_STYLE,
            ),
        ],
        **{"data-testid": "table-row"},
    )


def build_no_data_row() -> html.Tr:
    return html.Tr(
        html.Td(
            "No data available",
            colSpan=len(COLUMNS),
            className="text-center text-muted",
            style=CELL_STYLE,
        ),
        **{"data-testid": "no-data-row"},
    )


def build_records_table(records: Sequence[Record]) -> dbc.Table:
    """
    Builds the styled dbc.Table for the visible records.
    An empty sequence renders a single "No data available" row.
    """
    thead = html.Thead(html.Tr([html.Th(c, style=HEADER_STYLE) for c in COLUMNS]))

    if records:
        rows = [build_record_row(r) for r in records]
    else:
        rows = [build_no_data_row()]

    return dbc.Table(
        [thead, html.Tbody(rows)],
        bordered=False,
        hover=True,
        responsive=True,
        className="mb-0",
        style={"border": "1px solid #e5e7eb", "borderRadius": "4px"}
    )


def build_table_panel(records: Sequence[Record]) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Span(id=IDs.Control.STATUS_TEXT, className="text-muted small"),
            ),
            dbc.CardBody(
                html.Div(build_records_table(records), id=IDs.Control.TABLE_CONTAINER),
                className="p-2",
            ),
        ],
        className="mt-3",
    )
