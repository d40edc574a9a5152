from __future__ import annotations

from dataclasses import dataclass, field

from .config import SortDirection, SortKey

RawRecord = dict[str, str]


@dataclass(slots=True, frozen=True)
class YearSummary:
    year: int
    total_jobs: int
    average_salary: str


@dataclass(slots=True, frozen=True)
class JobTitleCount:
    job_title: str
    count: int


@dataclass(slots=True)
class SortConfig:
    key: SortKey | None = None
    direction: SortDirection = "ascending"


@dataclass(slots=True)
class SelectionState:
    selected_year: str | None = None


@dataclass(slots=True)
class ParseIssue:
    line_fields: list[str]
    reason: str


@dataclass(slots=True)
class ParseResult:
    records: list[RawRecord]
    issues: list[ParseIssue] = field(default_factory=list)
    missing_columns: list[str] = field(default_factory=list)
    encoding: str | None = None


@dataclass(slots=True)
class LoadResult:
    source: str
    records: list[RawRecord] = field(default_factory=list)
    issues: list[ParseIssue] = field(default_factory=list)
    missing_columns: list[str] = field(default_factory=list)
    encoding: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
