from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State

from catalog_table.ui.callbacks.callbacks_utils import apply_action, delete_target, dropdown_style
from catalog_table.ui.helpers import get_category_options, status_text
from catalog_table.ui.ids import IDs
from catalog_table.ui.layout.build_table_panel import build_records_table

if TYPE_CHECKING:
    from catalog_table.ui.config import AppConfig

logger = logging.getLogger(__name__)


def render_table_state(ctx: AppConfig, store_data):
    """
    Pure helper: everything the page shows for one controller state.
    """
    controller = ctx.load_controller(store_data)
    rows = controller.visible_records()
    return (
        build_records_table(rows),
        status_text(len(rows), len(controller.records)),
        get_category_options(controller.categories),
        sorted(controller.filters.categories),
        dropdown_style(controller.dropdown_open),
    )


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Delete a row
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.TABLE_STATE, "data", allow_duplicate=True),
        Input({"type": IDs.Pattern.DELETE_RECORD, "index": ALL}, "n_clicks"),
        State(IDs.Store.TABLE_STATE, "data"),
        prevent_initial_call=True,
    )
    def delete(_n_clicks_list, store_data):
        triggered = dash.ctx.triggered[0] if dash.ctx.triggered else {}
        record_id = delete_target(dash.ctx.triggered_id, triggered.get("value"))
        if record_id is None:
            raise dash.exceptions.PreventUpdate

        logger.info("Deleting record", extra={"record_id": record_id})
        return apply_action(ctx, store_data, lambda c: c.delete_record(record_id))

    # ---------------------------------------------------------
    # Render table, category list and dropdown from the store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_CONTAINER, "children"),
        Output(IDs.Control.STATUS_TEXT, "children"),
        Output(IDs.Control.CATEGORY_CHECKLIST, "options"),
        Output(IDs.Control.CATEGORY_CHECKLIST, "value"),
        Output(IDs.Control.CATEGORY_DROPDOWN, "style"),
        Input(IDs.Store.TABLE_STATE, "data"),
    )
    def render(store_data):
        return render_table_state(ctx, store_data)
