from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional

logger = logging.getLogger(__name__)


class PriceBucket(str, Enum):
    ANY = "Any"
    HIGH = "High"
    LOW = "Low"


class TextField(str, Enum):
    NAME = "name"
    DATE = "date"


ANY_RATING = "Any"
RATING_CHOICES = (4.5, 4.0, 3.5, 3.0)


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user filters on the table.

    Fields:

    - name_query: substring matched case-insensitively against Record.name
    - categories: lowercased category keys; empty means every category
    - date_query: exact date in display form DD-MM-YYYY
    - price_bucket: coarse price range (Any / High / Low)
    - min_rating: lowest rating shown, None means Any

    Every field at its default value places no constraint on the records.
    """

    name_query: str = ""
    categories: FrozenSet[str] = field(default_factory=frozenset)
    date_query: str = ""
    price_bucket: PriceBucket = PriceBucket.ANY
    min_rating: Optional[float] = None

    @property
    def is_default(self) -> bool:
        return self == FilterState()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name_query": self.name_query,
            "categories": sorted(self.categories),
            "date_query": self.date_query,
            "price_bucket": self.price_bucket.value,
            "min_rating": self.min_rating,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterState:
        data = data or {}
        min_rating = data.get("min_rating")
        return cls(
            name_query=str(data.get("name_query") or ""),
            categories=frozenset(str(c).lower() for c in data.get("categories") or []),
            date_query=str(data.get("date_query") or ""),
            price_bucket=parse_price_bucket(data.get("price_bucket")),
            min_rating=parse_rating_threshold(min_rating),
        )


def parse_price_bucket(value: Any) -> PriceBucket:
    """
    Convert a UI price-select value into a PriceBucket.

    Unknown values fail open to PriceBucket.ANY so the table never hides
    every row because of a bad input.
    """
    if value is None or value == "":
        return PriceBucket.ANY
    if isinstance(value, PriceBucket):
        return value
    try:
        return PriceBucket(str(value).strip().capitalize())
    except ValueError:
        logger.warning("Unrecognised price bucket %r, treating as Any", value)
        return PriceBucket.ANY


def parse_rating_threshold(value: Any) -> Optional[float]:
    """
    Convert a UI rating-select value ("Any", "4.5", 4, ...) into a threshold.

    None means Any. Unparseable values fail open to None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, str) and value.strip().lower() == ANY_RATING.lower():
        return None
    if isinstance(value, bool):
        logger.warning("Unrecognised rating threshold %r, treating as Any", value)
        return None
    try:
        threshold = float(value)
    except (TypeError, ValueError):
        logger.warning("Unrecognised rating threshold %r, treating as Any", value)
        return None
    if threshold != threshold:  # NaN
        logger.warning("Unrecognised rating threshold %r, treating as Any", value)
        return None
    return threshold
