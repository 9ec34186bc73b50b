from __future__ import annotations

__all__ = ["IDs", "record_delete_id"]


class IDs:
    class Store:
        TABLE_STATE = "table-state"

    class Control:
        # Filter bar
        NAME_FILTER = "filter-name"
        DATE_FILTER = "filter-date"
        PRICE_FILTER = "filter-price"
        RATING_FILTER = "filter-rating"

        CATEGORY_BUTTON = "filter-category-button"
        CATEGORY_DROPDOWN = "filter-category-dropdown"
        CATEGORY_CHECKLIST = "filter-category-checklist"

        RESET_BUTTON = "reset-button"

        # Table
        TABLE_CONTAINER = "table-component"
        STATUS_TEXT = "table-status"

    class Pattern:
        # pattern-matching "type" strings
        DELETE_RECORD = "delete-button"


def record_delete_id(record_id) -> dict:
    return {"type": IDs.Pattern.DELETE_RECORD, "index": record_id}
