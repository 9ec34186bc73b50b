from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from catalog_table.core.filter_engine import category_index, visible
from catalog_table.core.filter_state import (
    FilterState,
    PriceBucket,
    TextField,
    parse_price_bucket,
    parse_rating_threshold,
)
from catalog_table.core.record import Record, RecordId

logger = logging.getLogger(__name__)


class TableController:
    """
    Owns the session state of one displayed table.

    State:
        - records: working copy of the seed, shrinks on delete
        - filters: the current FilterState
        - categories: distinct lowercased categories of `records`
        - dropdown_open: whether the category checklist is shown

    The seed passed at construction is copied into a tuple and never
    mutated. Every operation is valid in every state.
    """

    def __init__(self, seed: Iterable[Record]):
        self._seed: Tuple[Record, ...] = tuple(seed)
        self._records: List[Record] = list(self._seed)
        self._filters = FilterState()
        self._dropdown_open = False
        self._categories = category_index(self._records)

    # ---------------------------------------------------------
    # Read accessors
    # ---------------------------------------------------------
    @property
    def seed(self) -> Tuple[Record, ...]:
        return self._seed

    @property
    def records(self) -> Tuple[Record, ...]:
        return tuple(self._records)

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def categories(self) -> Tuple[str, ...]:
        return self._categories

    @property
    def dropdown_open(self) -> bool:
        return self._dropdown_open

    def visible_records(self) -> List[Record]:
        return visible(self._records, self._filters)

    # ---------------------------------------------------------
    # Filter operations
    # ---------------------------------------------------------
    def set_text_filter(self, text_field: TextField, value: Optional[str]) -> None:
        text_field = TextField(text_field)
        if text_field is TextField.NAME:
            self.set_name_query(value)
        else:
            self.set_date_query(value)

    def set_name_query(self, value: Optional[str]) -> None:
        self._filters = dataclasses.replace(self._filters, name_query=value or "")

    def set_date_query(self, value: Optional[str]) -> None:
        self._filters = dataclasses.replace(self._filters, date_query=(value or "").strip())

    def set_price_bucket(self, bucket: Union[PriceBucket, str, None]) -> None:
        self._filters = dataclasses.replace(self._filters, price_bucket=parse_price_bucket(bucket))

    def set_rating_threshold(self, threshold: Union[float, str, None]) -> None:
        self._filters = dataclasses.replace(self._filters, min_rating=parse_rating_threshold(threshold))

    def toggle_category(self, category_key: str) -> None:
        key = category_key.lower()
        selected = self._filters.categories
        selected = selected - {key} if key in selected else selected | {key}
        self._filters = dataclasses.replace(self._filters, categories=frozenset(selected))

    def toggle_category_dropdown(self) -> None:
        self._dropdown_open = not self._dropdown_open

    def reset_filters(self) -> None:
        self._filters = FilterState()

    # ---------------------------------------------------------
    # Record operations
    # ---------------------------------------------------------
    def delete_record(self, target: Union[Record, RecordId]) -> bool:
        """
        Remove a record from the working set by id.

        Returns True if a record was removed, False if no record had that id.
        """
        record_id = target.id if isinstance(target, Record) else target
        remaining = [r for r in self._records if r.id != record_id]
        if len(remaining) == len(self._records):
            logger.debug("Delete ignored, no record with id %r", record_id)
            return False

        self._records = remaining
        self._categories = category_index(self._records)
        logger.debug("Deleted record %r, %d records remain", record_id, len(self._records))
        return True

    # ---------------------------------------------------------
    # Serialisation (dcc.Store round trip)
    # ---------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        remaining = {r.id for r in self._records}
        return {
            "deleted_ids": [r.id for r in self._seed if r.id not in remaining],
            "filters": self._filters.to_dict(),
            "dropdown_open": self._dropdown_open,
        }

    @classmethod
    def from_dict(cls, seed: Iterable[Record], data: Optional[Dict[str, Any]]) -> TableController:
        controller = cls(seed)
        if not data:
            return controller

        deleted = set(data.get("deleted_ids") or [])
        if deleted:
            controller._records = [r for r in controller._records if r.id not in deleted]
            controller._categories = category_index(controller._records)

        controller._filters = FilterState.from_dict(data.get("filters"))
        controller._dropdown_open = bool(data.get("dropdown_open", False))
        return controller

    def __repr__(self) -> str:
        return (
            f"TableController(records={len(self._records)}/{len(self._seed)}, "
            f"filters={self._filters!r}, dropdown_open={self._dropdown_open})"
        )
