from __future__ import annotations

from typing import List, Sequence

from catalog_table.core.filter_state import RATING_CHOICES


def format_price(price) -> str:
    return f"{price}/-"


def format_rating_label(threshold: float) -> str:
    return f"{threshold:g}+"


def get_price_options() -> List[dict]:
    return [
        {"label": "Any Price", "value": "Any"},
        {"label": "High (>= 500/-)", "value": "High"},
        {"label": "Low (< 500/-)", "value": "Low"},
    ]


def get_rating_options() -> List[dict]:
    options = [{"label": "Any Rating", "value": "Any"}]
    options.extend(
        {"label": format_rating_label(t), "value": f"{t:g}"} for t in RATING_CHOICES
    )
    return options


def get_category_options(categories: Sequence[str]) -> List[dict]:
    return [{"label": f" {c}", "value": c} for c in categories]


def status_text(n_visible: int, n_total: int) -> str:
    noun = "record" if n_total == 1 else "records"
    return f"Showing {n_visible} of {n_total} {noun}"
