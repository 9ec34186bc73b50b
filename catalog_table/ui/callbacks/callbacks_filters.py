from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from catalog_table.ui.callbacks.callbacks_utils import apply_action, toggled_categories
from catalog_table.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_table.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Text filters (name / date)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.TABLE_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.NAME_FILTER, "value"),
        State(IDs.Store.TABLE_STATE, "data"),
        prevent_initial_call=True,
    )
    def change_name(text, store_data):
        return apply_action(ctx, store_data, lambda c: c.set_name_query(text))

    @app.callback(
        Output(IDs.Store.TABLE_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.DATE_FILTER, "value"),
        State(IDs.Store.TABLE_STATE, "data"),
        prevent_initial_call=True,
    )
    def change_date(text, store_data):
        return apply_action(ctx, store_data, lambda c: c.set_date_query(text))

    # ---------------------------------------------------------
    # Bucket filters (price / rating)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.TABLE_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.PRICE_FILTER, "value"),
        State(IDs.Store.TABLE_STATE, "data"),
        prevent_initial_call=True,
    )
    def change_price(bucket, store_data):
        return apply_action(ctx, store_data, lambda c: c.set_price_bucket(bucket))

    @app.callback(
        Output(IDs.Store.TABLE_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.RATING_FILTER, "value"),
        State(IDs.Store.TABLE_STATE, "data"),
        prevent_initial_call=True,
    )
    def change_rating(threshold, store_data):
        return apply_action(ctx, store_data, lambda c: c.set_rating_threshold(threshold))

    # ---------------------------------------------------------
    # Category dropdown + checklist
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.TABLE_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.CATEGORY_BUTTON, "n_clicks"),
        State(IDs.Store.TABLE_STATE, "data"),
        prevent_initial_call=True,
    )
    def toggle_dropdown(_n_clicks, store_data):
        return apply_action(ctx, store_data, lambda c: c.toggle_category_dropdown())

    @app.callback(
        Output(IDs.Store.TABLE_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.CATEGORY_CHECKLIST, "value"),
        State(IDs.Store.TABLE_STATE, "data"),
        prevent_initial_call=True,
    )
    def toggle_category(checked, store_data):
        selected = ctx.load_controller(store_data).filters.categories
        changed = toggled_categories(selected, checked)
        # Checklist value written back by the render callback, nothing to do
        if not changed:
            raise dash.exceptions.PreventUpdate

        def _toggle_all(controller):
            for key in changed:
                controller.toggle_category(key)

        return apply_action(ctx, store_data, _toggle_all)

    # ---------------------------------------------------------
    # Reset (store + visible input widgets)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.TABLE_STATE, "data", allow_duplicate=True),
        Output(IDs.Control.NAME_FILTER, "value"),
        Output(IDs.Control.DATE_FILTER, "value"),
        Output(IDs.Control.PRICE_FILTER, "value"),
        Output(IDs.Control.RATING_FILTER, "value"),
        Input(IDs.Control.RESET_BUTTON, "n_clicks"),
        State(IDs.Store.TABLE_STATE, "data"),
        prevent_initial_call=True,
    )
    def reset(_n_clicks, store_data):
        logger.info("Resetting table filters")
        data = apply_action(ctx, store_data, lambda c: c.reset_filters())
        return data, "", "", "Any", "Any"
