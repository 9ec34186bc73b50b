import pytest

from catalog_table.core.exceptions import RecordSchemaError
from catalog_table.core.filter_state import (
    FilterState,
    PriceBucket,
    parse_price_bucket,
    parse_rating_threshold,
)
from catalog_table.core.record import Record


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Any", PriceBucket.ANY),
        ("High", PriceBucket.HIGH),
        ("low", PriceBucket.LOW),
        (None, PriceBucket.ANY),
        ("", PriceBucket.ANY),
        ("Expensive", PriceBucket.ANY),
        (PriceBucket.HIGH, PriceBucket.HIGH),
    ],
)
def test_parse_price_bucket(raw, expected):
    assert parse_price_bucket(raw) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Any", None),
        ("any", None),
        (None, None),
        ("4.5", 4.5),
        ("4", 4.0),
        (3, 3.0),
        ("four", None),
        ("nan", None),
    ],
)
def test_parse_rating_threshold(raw, expected):
    assert parse_rating_threshold(raw) == expected


def test_unknown_price_bucket_logs_a_warning(caplog):
    with caplog.at_level("WARNING"):
        parse_price_bucket("Medium")
    assert "Unrecognised price bucket" in caplog.text


def test_filter_state_dict_round_trip():
    state = FilterState(
        name_query="lap",
        categories=frozenset({"furniture", "electronics"}),
        date_query="01-01-2023",
        price_bucket=PriceBucket.HIGH,
        min_rating=4.0,
    )
    data = state.to_dict()

    assert data["categories"] == ["electronics", "furniture"]
    assert data["price_bucket"] == "High"
    assert FilterState.from_dict(data) == state


def test_filter_state_from_empty_dict_is_default():
    assert FilterState.from_dict({}).is_default
    assert FilterState.from_dict(None) == FilterState()


def test_record_from_dict_keeps_integral_prices_as_int():
    record = Record.from_dict(
        {"id": 1, "name": "Laptop", "category": "Electronics", "date": "2023-01-01", "price": 1200.0, "rating": 4.5}
    )
    assert record.price == 1200
    assert isinstance(record.price, int)
    assert record.category_key == "electronics"


def test_record_from_dict_rejects_missing_fields():
    with pytest.raises(RecordSchemaError):
        Record.from_dict({"id": 1, "name": "Laptop"})


def test_record_from_dict_rejects_non_numeric_price():
    with pytest.raises(RecordSchemaError):
        Record.from_dict(
            {"id": 1, "name": "Laptop", "category": "E", "date": "2023-01-01", "price": "cheap", "rating": 4.5}
        )
