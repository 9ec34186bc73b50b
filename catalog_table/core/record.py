from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Union

from catalog_table.core.exceptions import RecordSchemaError

RecordId = Union[int, str]


@dataclass(frozen=True)
class Record:
    """
    One catalog item, displayed as a single table row.

    Fields:

    - id: stable unique identifier, used for deletion
    - name: display name, matched case-insensitively by the name filter
    - category: display category; its lowercased form is the category key
    - date: canonical calendar date string, YYYY-MM-DD
    - price: non-negative number, currency agnostic
    - rating: number between 0.0 and 5.0
    """

    id: RecordId
    name: str
    category: str
    date: str
    price: float
    rating: float

    @property
    def category_key(self) -> str:
        return self.category.lower()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Record:
        try:
            return cls(
                id=data["id"],
                name=str(data["name"]),
                category=str(data["category"]),
                date=str(data["date"]),
                price=_as_number(data["price"]),
                rating=_as_number(data["rating"]),
            )
        except KeyError as e:
            raise RecordSchemaError(f"Record is missing field {e.args[0]!r}: {data!r}") from e
        except (TypeError, ValueError) as e:
            raise RecordSchemaError(f"Record has a non-numeric price/rating: {data!r}") from e


def _as_number(value: Any) -> float:
    # Keep integral prices as ints so they render as "1200/-", not "1200.0/-"
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    if isinstance(value, int):
        return value
    number = float(value)
    return int(number) if number.is_integer() else number
