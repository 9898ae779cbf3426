"""CSV byte-stream reader.

This module decodes raw CSV bytes into a header and a lazy row iterator.
Every cell stays a string so schema readers decide how to interpret it.
"""

from __future__ import annotations

import io
import math
import warnings
from typing import BinaryIO, Iterator

import pandas as pd

from core.constants import SOURCE_ENCODING
from core.errors import MalformedInputError
from core.types import CsvTable


def read_csv_table(stream: BinaryIO, source_name: str = "<stream>") -> CsvTable:
    """Read a comma-separated byte stream into a table.

    Args:
        stream: Binary stream positioned at the header row.
        source_name: Label used in error messages.

    Returns:
        Parsed header and lazy data rows.

    Raises:
        MalformedInputError: If the header is missing, the CSV is unparseable,
            or a row has more cells than the header.
    """
    try:
        with warnings.catch_warnings():
            # pandas truncates rows longer than the header and only warns
            warnings.simplefilter("error", pd.errors.ParserWarning)
            frame = pd.read_csv(
                stream,
                sep=",",
                dtype=str,
                keep_default_na=False,
                encoding=SOURCE_ENCODING,
                skip_blank_lines=True,
                index_col=False,
            )
    except pd.errors.EmptyDataError as error:
        raise MalformedInputError(
            f"Could not read CSV header from {source_name}: source is empty."
        ) from error
    except (pd.errors.ParserError, pd.errors.ParserWarning, UnicodeDecodeError) as error:
        raise MalformedInputError(f"Could not read CSV data from {source_name}: {error}") from error
    header = tuple(str(column).strip() for column in frame.columns)
    return CsvTable(header=header, rows=_iter_rows(frame, len(header), source_name))


def read_csv_bytes(payload: bytes, source_name: str = "<bytes>") -> CsvTable:
    """Read an in-memory CSV payload into a table."""
    return read_csv_table(io.BytesIO(payload), source_name)


def parse_cell(cell: str, context: str) -> float:
    """Parse one observation cell.

    Args:
        cell: Raw cell text.
        context: Location used in error messages.

    Returns:
        Non-negative value; blank cells count as zero.

    Raises:
        MalformedInputError: If a populated cell is not a finite value >= 0.
    """
    text = cell.strip()
    if not text:
        return 0.0
    try:
        value = float(text)
    except ValueError as error:
        raise MalformedInputError(f"Could not parse {text!r} at {context}.") from error
    if not math.isfinite(value) or value < 0:
        raise MalformedInputError(
            f"Invalid value {text!r} at {context}: expected a finite number >= 0."
        )
    return value


def _iter_rows(frame: pd.DataFrame, width: int, source_name: str) -> Iterator[list[str]]:
    for row_number, row in enumerate(frame.itertuples(index=False, name=None), start=1):
        # missing trailing cells come back as NaN; blank cells stay ""
        if any(_is_missing(cell) for cell in row):
            present = sum(1 for cell in row if not _is_missing(cell))
            raise MalformedInputError(
                f"Could not read CSV data from {source_name}: data row {row_number} "
                f"has {present} fields, expected {width}."
            )
        yield [str(cell) for cell in row]


def _is_missing(cell: object) -> bool:
    return cell is None or (isinstance(cell, float) and math.isnan(cell))
