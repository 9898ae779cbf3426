"""Schema readers for supported source layouts.

This module turns a parsed CSV table into an unaligned dataset.
Two layouts are supported behind one reader interface:

- ``row``: one row per entity, one column per day after a fixed number
  of leading metadata columns (JHU CSSE time series).
- ``column``: one row per day with the date in the first column, one
  column per entity.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from core.constants import (
    COLUMN_SCHEMA,
    COLUMN_SCHEMA_DATE_COLUMN,
    DEFAULT_DATE_LAYOUTS,
    ROW_SCHEMA,
    ROW_SCHEMA_ENTITY_COLUMN,
    ROW_SCHEMA_LEADING_COLUMNS,
    SUPPORTED_SCHEMAS,
)
from core.errors import EpicurveConfigError, MalformedInputError
from core.logging_config import get_logger
from core.types import CsvTable, Dataset
from ingest.csv_reader import parse_cell
from ingest.date_parser import parse_date
from ingest.entity_filter import EntityFilter
from ingest.series_accumulator import SeriesAccumulator

_LOGGER = get_logger(__name__)


class SchemaReader(Protocol):
    """Reader turning one source layout into an unaligned dataset."""

    name: str

    def read(
        self,
        table: CsvTable,
        entity_filter: EntityFilter,
        date_layouts: Sequence[str] = DEFAULT_DATE_LAYOUTS,
    ) -> Dataset:
        """Accumulate allow-listed entity series from a table."""
        ...


class RowOrientedReader:
    """Reader for row-per-entity, column-per-day sources."""

    name = ROW_SCHEMA

    def __init__(
        self,
        entity_column: int = ROW_SCHEMA_ENTITY_COLUMN,
        leading_columns: int = ROW_SCHEMA_LEADING_COLUMNS,
    ) -> None:
        if not 0 <= entity_column < leading_columns:
            raise EpicurveConfigError(
                f"Entity column {entity_column} must be one of the "
                f"{leading_columns} leading metadata columns."
            )
        self._entity_column = entity_column
        self._leading_columns = leading_columns

    def day_headers(self, header: Sequence[str]) -> tuple[str, ...]:
        """Return the chronological day columns of a header."""
        return tuple(header[self._leading_columns :])

    def read(
        self,
        table: CsvTable,
        entity_filter: EntityFilter,
        date_layouts: Sequence[str] = DEFAULT_DATE_LAYOUTS,
    ) -> Dataset:
        """Sum allow-listed rows into per-entity day series.

        Args:
            table: Parsed CSV table.
            entity_filter: Allow-list for the entity column.
            date_layouts: Layouts for the day header cells.

        Returns:
            Unaligned dataset with one series per allow-listed entity.

        Raises:
            MalformedInputError: If the header has no day columns or a cell is invalid.
            DateParseError: If a day header cannot be parsed.
        """
        day_headers = self.day_headers(table.header)
        if not day_headers:
            raise MalformedInputError(
                f"CSV header has {len(table.header)} columns; expected day columns "
                f"after {self._leading_columns} leading metadata columns."
            )
        start = parse_date(day_headers[0], date_layouts)
        last = parse_date(day_headers[-1], date_layouts)
        accumulator = SeriesAccumulator(entity_filter.entities, len(day_headers))
        skipped_rows = 0
        blank_cells = 0
        for line_number, row in enumerate(table.rows, 2):
            entity = row[self._entity_column].strip() if len(row) > self._entity_column else ""
            if not entity_filter.accepts(entity):
                skipped_rows += 1
                continue
            cells = row[self._leading_columns :]
            blank_cells += sum(1 for cell in cells if not cell.strip())
            values = [
                parse_cell(cell, f"line {line_number}, column '{day_headers[index]}'")
                for index, cell in enumerate(cells)
            ]
            accumulator.add_row(entity, values)
        _LOGGER.debug(
            "schema_rows_read",
            schema=self.name,
            days=len(day_headers),
            skipped_rows=skipped_rows,
            blank_cells=blank_cells,
        )
        return Dataset(date=last, start=start, table=accumulator.build())


class ColumnOrientedReader:
    """Reader for row-per-day, column-per-entity sources."""

    name = COLUMN_SCHEMA

    def __init__(self, date_column: int = COLUMN_SCHEMA_DATE_COLUMN) -> None:
        self._date_column = date_column

    def read(
        self,
        table: CsvTable,
        entity_filter: EntityFilter,
        date_layouts: Sequence[str] = DEFAULT_DATE_LAYOUTS,
    ) -> Dataset:
        """Read one value per entity from every day row.

        Args:
            table: Parsed CSV table.
            entity_filter: Allow-list resolved against the header.
            date_layouts: Layouts for the date column.

        Returns:
            Unaligned dataset with one series per allow-listed entity.

        Raises:
            UnknownEntityError: If an allow-listed entity has no column.
            MalformedInputError: If there are no day rows or a cell is invalid.
            DateParseError: If a row date cannot be parsed.
        """
        if self._date_column >= len(table.header):
            raise MalformedInputError(
                f"CSV header has no date column at position {self._date_column}."
            )
        columns = entity_filter.resolve_columns(table.header)
        accumulator = SeriesAccumulator(entity_filter.entities)
        first_day: date | None = None
        last_day: date | None = None
        blank_cells = 0
        for line_number, row in enumerate(table.rows, 2):
            if len(row) <= self._date_column:
                raise MalformedInputError(f"Line {line_number} has no date cell.")
            last_day = parse_date(row[self._date_column], date_layouts)
            if first_day is None:
                first_day = last_day
            values = {}
            for entity, column in columns.items():
                cell = row[column] if column < len(row) else ""
                if not cell.strip():
                    blank_cells += 1
                values[entity] = parse_cell(cell, f"line {line_number}, column '{entity}'")
            accumulator.append_day(values)
        if first_day is None or last_day is None:
            raise MalformedInputError("CSV source has a header but no day rows.")
        _LOGGER.debug(
            "schema_rows_read",
            schema=self.name,
            days=accumulator.length,
            skipped_rows=0,
            blank_cells=blank_cells,
        )
        return Dataset(date=last_day, start=first_day, table=accumulator.build())


def build_schema_reader(schema: str) -> SchemaReader:
    """Build the reader for a schema name.

    Args:
        schema: ``row`` or ``column``.

    Returns:
        Schema reader instance.

    Raises:
        EpicurveConfigError: If the schema is unsupported.
    """
    if schema == ROW_SCHEMA:
        return RowOrientedReader()
    if schema == COLUMN_SCHEMA:
        return ColumnOrientedReader()
    supported_rows = ", ".join(SUPPORTED_SCHEMAS)
    raise EpicurveConfigError(f"Unsupported schema '{schema}'. Use one of: {supported_rows}.")
