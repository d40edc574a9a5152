from __future__ import annotations

import csv
from io import StringIO
from typing import Iterable

import pandas as pd

from .config import REQUIRED_COLUMNS
from .models import ParseIssue, ParseResult, RawRecord
from .normalization import standardize_columns

FIELD_SIZE_LIMIT = 16 * 1024 * 1024


class CsvParseError(ValueError):
    pass


def decode_csv_bytes(raw: bytes, candidates: Iterable[str]) -> tuple[str, str]:
    for encoding in candidates:
        try:
            return raw.decode(encoding), encoding
        except UnicodeDecodeError:
            continue
    return raw.decode("latin-1"), "latin-1"


def missing_required_columns(columns: list[str]) -> list[str]:
    present = set(columns)
    return [required for required in REQUIRED_COLUMNS if required not in present]


def _ensure_field_size_limit() -> None:
    if csv.field_size_limit() < FIELD_SIZE_LIMIT:
        csv.field_size_limit(FIELD_SIZE_LIMIT)


def _is_blank_line(fields: list[str]) -> bool:
    return not fields or (len(fields) == 1 and not fields[0].strip())


def scan_csv_shape(text: str) -> tuple[int, int]:
    """Return ``(header_width, data_line_count)`` for non-blank CSV lines.

    Tokenizer errors (unterminated quotes, oversized fields) raise
    ``CsvParseError`` instead of ending the read early.
    """
    reader = csv.reader(StringIO(text), strict=True)
    width: int | None = None
    data_lines = 0
    try:
        for fields in reader:
            if _is_blank_line(fields):
                continue
            if width is None:
                width = len(fields)
            else:
                data_lines += 1
    except csv.Error as exc:
        raise CsvParseError(f"CSV input could not be tokenized near line {reader.line_num}: {exc}") from exc

    if width is None:
        raise CsvParseError("CSV input has no header row")
    return width, data_lines


def parse_csv_text(text: str) -> ParseResult:
    """Tokenize CSV text into header-keyed records, in source row order.

    Lines carrying extra non-empty fields are skipped and reported as issues;
    extra empty fields (trailing delimiters) are dropped. Short lines are padded
    with empty strings.
    """
    _ensure_field_size_limit()
    width, expected_lines = scan_csv_shape(text)
    issues: list[ParseIssue] = []

    def on_bad_line(fields: list[str]) -> list[str] | None:
        if all(not str(value).strip() for value in fields[width:]):
            return fields[:width]
        issues.append(ParseIssue(line_fields=list(fields), reason="unexpected field count"))
        return None

    # The header is read as a plain row so pandas never infers an index column
    # from an over-long first data line.
    try:
        frame = pd.read_csv(
            StringIO(text),
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=on_bad_line,
        )
    except pd.errors.EmptyDataError as exc:
        raise CsvParseError("CSV input has no header row") from exc
    except pd.errors.ParserError as exc:
        raise CsvParseError(f"CSV input could not be tokenized: {exc}") from exc

    frame = frame.fillna("")
    if frame.empty:
        raise CsvParseError("CSV input has no header row")

    header = [str(value) for value in frame.iloc[0].tolist()]
    body = frame.iloc[1:].copy()
    body.columns = standardize_columns(header)

    if len(body) + len(issues) != expected_lines:
        raise CsvParseError(
            f"CSV input was read partially: {len(body)} rows parsed, "
            f"{len(issues)} skipped, {expected_lines} expected"
        )

    records: list[RawRecord] = [
        {str(key): str(value) for key, value in row.items()}
        for row in body.to_dict(orient="records")
    ]
    return ParseResult(
        records=records,
        issues=issues,
        missing_columns=missing_required_columns(list(body.columns)),
    )


def parse_csv_bytes(raw: bytes, encoding_candidates: Iterable[str]) -> ParseResult:
    text, encoding = decode_csv_bytes(raw, encoding_candidates)
    result = parse_csv_text(text)
    result.encoding = encoding
    return result
