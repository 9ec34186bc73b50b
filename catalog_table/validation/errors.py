from __future__ import annotations

from dataclasses import dataclass

from catalog_table.core.exceptions import CatalogTableError


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str


class ValidationError(CatalogTableError):
    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in issues))
