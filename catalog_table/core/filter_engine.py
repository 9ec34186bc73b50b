"""Pure filtering functions mapping a record set and a FilterState to the visible rows."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from catalog_table.core.filter_state import FilterState, PriceBucket
from catalog_table.core.record import Record

logger = logging.getLogger(__name__)

PRICE_THRESHOLD = 500


def to_display_date(date: str) -> str:
    """
    Convert a canonical YYYY-MM-DD date into display form DD-MM-YYYY.

    No zero-padding is added, so "2023-1-1" becomes "1-1-2023".

    Raises:
        ValueError: if the date does not split into exactly three parts.
    """
    parts = str(date).split("-")
    if len(parts) != 3:
        raise ValueError(f"Malformed date {date!r}, expected YYYY-MM-DD")
    year, month, day = parts
    return f"{day}-{month}-{year}"


def category_index(records: Iterable[Record]) -> Tuple[str, ...]:
    """
    Distinct lowercased categories in first-seen order.
    """
    return tuple(dict.fromkeys(r.category_key for r in records))


def matches_name(record: Record, name_query: str) -> bool:
    if not name_query:
        return True
    return name_query.lower() in record.name.lower()


def matches_category(record: Record, categories) -> bool:
    if not categories:
        return True
    return record.category_key in categories


def matches_date(record: Record, date_query: str) -> bool:
    if not date_query:
        return True
    try:
        return to_display_date(record.date) == date_query
    except ValueError:
        logger.debug("Skipping record %r with malformed date %r", record.id, record.date)
        return False


def matches_price(record: Record, bucket: PriceBucket) -> bool:
    if bucket is PriceBucket.HIGH:
        return record.price >= PRICE_THRESHOLD
    if bucket is PriceBucket.LOW:
        return record.price < PRICE_THRESHOLD
    return True


def matches_rating(record: Record, min_rating) -> bool:
    if min_rating is None:
        return True
    return record.rating >= min_rating


def matches(record: Record, filters: FilterState) -> bool:
    return (
        matches_name(record, filters.name_query)
        and matches_category(record, filters.categories)
        and matches_date(record, filters.date_query)
        and matches_price(record, filters.price_bucket)
        and matches_rating(record, filters.min_rating)
    )


def visible(records: Sequence[Record], filters: FilterState) -> List[Record]:
    """
    Return the records satisfying every active filter, in their original order.

    An empty result is an empty list, never None.
    """
    return [r for r in records if matches(r, filters)]
