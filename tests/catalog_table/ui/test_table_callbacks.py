from pathlib import Path

from dash import html

from catalog_table.config.model import GlobalConfig
from catalog_table.core.record import Record
from catalog_table.ui.callbacks.callbacks_table import render_table_state
from catalog_table.ui.callbacks.callbacks_utils import (
    apply_action,
    delete_target,
    dropdown_style,
    toggled_categories,
)
from catalog_table.ui.config import AppConfig
from catalog_table.ui.ids import IDs, record_delete_id


def _make_ctx():
    seed = (
        Record(id=1, name="Laptop", category="Electronics", date="2023-01-01", price=1200, rating=4.5),
        Record(id=2, name="Chair", category="Furniture", date="2023-02-01", price=150, rating=3.8),
    )
    return AppConfig(
        config_root=Path("config"),
        global_config=GlobalConfig(ui_title="Test", records_path=Path("records.json")),
        seed=seed,
    )


def _row_testids(table):
    tbody = table.children[1]
    return [getattr(row, "data-testid") for row in tbody.children]


def test_apply_action_round_trips_through_store():
    ctx = _make_ctx()
    data = ctx.new_controller().to_dict()

    data = apply_action(ctx, data, lambda c: c.set_name_query("Laptop"))
    data = apply_action(ctx, data, lambda c: c.toggle_category("electronics"))

    controller = ctx.load_controller(data)
    assert controller.filters.name_query == "Laptop"
    assert controller.filters.categories == frozenset({"electronics"})
    assert [r.name for r in controller.visible_records()] == ["Laptop"]


def test_delete_through_store_keeps_seed():
    ctx = _make_ctx()
    data = apply_action(ctx, None, lambda c: c.delete_record(1))

    assert data["deleted_ids"] == [1]
    assert [r.id for r in ctx.seed] == [1, 2]
    assert [r.name for r in ctx.load_controller(data).visible_records()] == ["Chair"]


def test_toggled_categories_is_symmetric_difference():
    assert toggled_categories(["electronics"], ["electronics", "furniture"]) == ["furniture"]
    assert toggled_categories(["electronics"], []) == ["electronics"]
    assert toggled_categories(["a"], ["a"]) == []
    assert toggled_categories(None, None) == []


def test_delete_target_ignores_rerendered_buttons():
    assert delete_target(record_delete_id(3), 1) == 3
    assert delete_target(record_delete_id(3), None) is None
    assert delete_target(IDs.Control.RESET_BUTTON, 1) is None
    assert delete_target({"type": "other", "index": 3}, 1) is None


def test_dropdown_style():
    assert dropdown_style(True) == {"display": "block"}
    assert dropdown_style(False) == {"display": "none"}


def test_render_shows_every_row_by_default():
    ctx = _make_ctx()
    table, status, options, value, style = render_table_state(ctx, None)

    assert _row_testids(table) == ["table-row", "table-row"]
    assert status == "Showing 2 of 2 records"
    assert [o["value"] for o in options] == ["electronics", "furniture"]
    assert value == []
    assert style == {"display": "none"}


def test_render_shows_no_data_row_when_nothing_matches():
    ctx = _make_ctx()
    data = apply_action(ctx, None, lambda c: c.set_name_query("NoSuchName"))

    table, status, _, _, _ = render_table_state(ctx, data)

    assert _row_testids(table) == ["no-data-row"]
    assert status == "Showing 0 of 2 records"


def test_render_row_cells_and_delete_button():
    ctx = _make_ctx()
    table, _, _, _, _ = render_table_state(ctx, None)

    first_row = table.children[1].children[0]
    cells = first_row.children
    assert [c.children for c in cells[:5]] == ["Laptop", "Electronics", "2023-01-01", "1200/-", "4.5"]
    assert cells[5].children.id == record_delete_id(1)


def test_render_reflects_dropdown_and_checked_categories():
    ctx = _make_ctx()
    data = apply_action(ctx, None, lambda c: c.toggle_category_dropdown())
    data = apply_action(ctx, data, lambda c: c.toggle_category("furniture"))

    table, status, _, value, style = render_table_state(ctx, data)

    assert style == {"display": "block"}
    assert value == ["furniture"]
    assert status == "Showing 1 of 2 records"
    assert isinstance(table.children[1], html.Tbody)


def test_raw_select_values_pass_through_the_store():
    ctx = _make_ctx()
    data = apply_action(ctx, None, lambda c: c.set_rating_threshold("4"))
    data = apply_action(ctx, data, lambda c: c.set_price_bucket("High"))

    assert data["filters"]["min_rating"] == 4.0
    assert data["filters"]["price_bucket"] == "High"
    assert [r.name for r in ctx.load_controller(data).visible_records()] == ["Laptop"]
