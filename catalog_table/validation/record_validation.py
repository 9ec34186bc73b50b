from __future__ import annotations

import pandas as pd

from catalog_table.validation.errors import ValidationIssue, ValidationError

REQUIRED_COLUMNS = ("name", "category", "date", "price", "rating")
RATING_MIN = 0.0
RATING_MAX = 5.0


def validate_seed_frame(df: pd.DataFrame) -> None:
    """
    Validate the raw seed table BEFORE building Records from it.
    Collects every problem so the seed file can be fixed in one go.
    """
    issues: list[ValidationIssue] = []

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValidationError(
            [ValidationIssue("SEED_COLUMNS", f"Seed is missing column(s): {', '.join(missing)}.")]
        )

    if "id" in df.columns:
        if df["id"].isna().any():
            issues.append(ValidationIssue("SEED_ID_MISSING", "Every record needs an id when an id column is present."))
        dupes = df["id"][df["id"].duplicated()].dropna().unique().tolist()
        if dupes:
            issues.append(ValidationIssue("SEED_ID_DUPLICATE", f"Duplicate record id(s): {dupes}."))

    for col in REQUIRED_COLUMNS:
        if df[col].isna().any():
            rows = df.index[df[col].isna()].tolist()
            issues.append(ValidationIssue("SEED_EMPTY_VALUE", f"Column '{col}' is empty in row(s) {rows}."))

    price = pd.to_numeric(df["price"], errors="coerce")
    if (price.isna() & df["price"].notna()).any():
        issues.append(ValidationIssue("SEED_PRICE_TYPE", "price must be numeric."))
    if (price < 0).any():
        rows = df.index[price < 0].tolist()
        issues.append(ValidationIssue("SEED_PRICE_NEGATIVE", f"Negative price in row(s) {rows}."))

    rating = pd.to_numeric(df["rating"], errors="coerce")
    if (rating.isna() & df["rating"].notna()).any():
        issues.append(ValidationIssue("SEED_RATING_TYPE", "rating must be numeric."))
    out_of_range = (rating < RATING_MIN) | (rating > RATING_MAX)
    if out_of_range.any():
        rows = df.index[out_of_range].tolist()
        issues.append(
            ValidationIssue("SEED_RATING_RANGE", f"rating outside {RATING_MIN}-{RATING_MAX} in row(s) {rows}.")
        )

    dates = df["date"].dropna().astype(str)
    bad_dates = dates[dates.str.split("-").str.len() != 3]
    if not bad_dates.empty:
        issues.append(
            ValidationIssue("SEED_DATE_FORMAT", f"date must be YYYY-MM-DD, got {bad_dates.tolist()}.")
        )

    if issues:
        raise ValidationError(issues)
