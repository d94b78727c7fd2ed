from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pandas as pd

from .config import CSV_COLUMN


class SampleParseError(ValueError):
    """A token in a sample source could not be read as a number."""


def parse_samples(text: str, source: str = "<text>") -> List[float]:
    """
    Returns the numbers in *text*, in order.

    * Numbers are separated by whitespace (spaces, tabs, newlines).
    * Blank lines and everything after a '#' are ignored.
    """
    samples: List[float] = []
    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        for token in line.split():
            try:
                samples.append(float(token))
            except ValueError:
                raise SampleParseError(
                    f"{source}:{lineno}: not a number: {token!r}"
                ) from None
    return samples


def _csv_samples(path: Path, column: Optional[str]) -> List[float]:
    try:
        df = pd.read_csv(path)
    except pd.errors.EmptyDataError:
        raise SampleParseError(f"{path}: empty file, no header row") from None
    except pd.errors.ParserError as exc:
        raise SampleParseError(f"{path}: malformed csv: {exc}") from None
    except UnicodeDecodeError as exc:
        raise SampleParseError(f"{path}: not utf-8 text: {exc.reason}") from None

    if column and column not in df.columns:
        raise SampleParseError(f"{path}: no column named {column!r}")
    if df.empty:
        return []

    if column:
        series = df[column]
    else:
        numeric = df.select_dtypes(include="number")
        if numeric.columns.empty:
            raise SampleParseError(f"{path}: no numeric column")
        series = numeric.iloc[:, 0]

    values = pd.to_numeric(series.dropna(), errors="coerce")
    bad = values.isna()
    if bad.any():
        row = int(values.index[bad][0])
        raise SampleParseError(
            f"{path}: row {row + 1}: not a number: {series[row]!r}"
        )
    return values.astype(float).tolist()


def load_samples(path, column: Optional[str] = None) -> List[float]:
    """
    Read samples from *path*.

    ``.csv`` files go through pandas and use *column* (falling back to
    SLOTSTATS_CSV_COLUMN, then to the first numeric column).  Anything else
    is treated as plain whitespace-separated text.
    """
    path = Path(path)
    if path.suffix.lower() == ".csv":
        return _csv_samples(path, column or CSV_COLUMN)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SampleParseError(f"{path}: not utf-8 text: {exc.reason}") from None
    return parse_samples(text, source=str(path))
