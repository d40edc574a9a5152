from __future__ import annotations

from operator import attrgetter
from typing import Iterable

from .config import SORT_KEY_ALIASES, SORT_KEYS, SortDirection, SortKey
from .models import SortConfig, YearSummary


def normalize_sort_key(key: str) -> SortKey:
    text = str(key).strip()
    if text in SORT_KEYS:
        return text  # type: ignore[return-value]
    alias = SORT_KEY_ALIASES.get(text.lower().replace("_", ""))
    if alias is None:
        raise ValueError(f"Unknown sort key {key!r}; expected one of {list(SORT_KEYS)}")
    return alias


class TableSorter:
    """Sorts yearly rows by a column, toggling direction on repeated keys.

    ``average_salary`` is held as its formatted string, so it orders
    lexicographically: "100000.00" sorts before "20000.00".
    """

    def __init__(self) -> None:
        self.config = SortConfig()

    def next_direction(self, key: SortKey) -> SortDirection:
        if self.config.key == key and self.config.direction == "ascending":
            return "descending"
        return "ascending"

    def sort(self, rows: Iterable[YearSummary], key: str) -> list[YearSummary]:
        sort_key = normalize_sort_key(key)
        direction = self.next_direction(sort_key)

        ordered = sorted(rows, key=attrgetter(sort_key), reverse=direction == "descending")

        self.config = SortConfig(key=sort_key, direction=direction)
        return ordered
