from __future__ import annotations

from enum import Enum


class SortOrder(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def parse(cls, value: str | SortOrder | None) -> SortOrder:
        if isinstance(value, SortOrder):
            return value
        text = (value or "").strip().lower()
        if text in {"descending", "desc"}:
            return cls.DESCENDING
        # Unknown values fall back to ascending
        return cls.ASCENDING
