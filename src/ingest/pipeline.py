"""Dataset pipeline orchestration.

This module coordinates reading, entity filtering, accumulation,
manual corrections, and threshold alignment for one metric. Each run
builds a fresh dataset; nothing is cached between runs.
"""

from __future__ import annotations

from dataclasses import replace
from typing import BinaryIO

from core.config import EpicurveConfig
from core.constants import OUTPUT_DATE_FORMAT
from core.logging_config import get_logger
from core.profile import metric_settings
from core.types import Dataset, ReportProfile
from ingest.csv_reader import read_csv_table
from ingest.entity_filter import EntityFilter
from ingest.fetch import open_source
from ingest.schema_reader import SchemaReader, build_schema_reader
from transforms.data_correction import apply_corrections, correction_table
from transforms.threshold_alignment import align_dataset

_LOGGER = get_logger(__name__)


class DatasetPipeline:
    """Reader-to-aligner pipeline for one metric of a report profile."""

    def __init__(
        self,
        profile: ReportProfile,
        metric: str,
        schema_reader: SchemaReader | None = None,
    ) -> None:
        """Validate the metric and prepare pipeline stages.

        Args:
            profile: Report profile supplying entities, cutoffs, and corrections.
            metric: Metric identifier, case-insensitive.
            schema_reader: Optional reader override; defaults to the profile schema.

        Raises:
            UnsupportedMetricError: If the metric lacks settings or a correction table.
        """
        self._profile = profile
        self._metric = metric.lower()
        self._settings = metric_settings(profile, self._metric)
        correction_table(profile.corrections, self._metric)
        self._reader = schema_reader or build_schema_reader(profile.schema)
        self._entity_filter = EntityFilter(profile.entities)

    @property
    def metric(self) -> str:
        """Normalized metric identifier."""
        return self._metric

    @property
    def cutoff(self) -> float:
        """Alignment threshold for the metric."""
        return self._settings.cutoff

    def build(self, stream: BinaryIO, source_name: str = "<stream>") -> Dataset:
        """Build an aligned dataset from a CSV byte stream.

        Args:
            stream: Binary CSV stream.
            source_name: Label used in errors and logs.

        Returns:
            Corrected and aligned dataset.

        Raises:
            MalformedInputError: If the CSV or a correction is invalid.
            UnknownEntityError: If a column-oriented header lacks an entity.
            DateParseError: If source dates cannot be parsed.
        """
        table = read_csv_table(stream, source_name)
        dataset = self._reader.read(table, self._entity_filter, self._profile.date_layouts)
        dataset = replace(dataset, metric=self._metric)
        dataset = apply_corrections(dataset, self._metric, self._profile.corrections)
        dataset = align_dataset(dataset, self._settings.cutoff)
        _log_dataset_built(dataset, source_name)
        return dataset

    def fetch(self, config: EpicurveConfig) -> Dataset:
        """Download the metric source and build its dataset.

        Args:
            config: Runtime configuration with source URL and timeout.

        Returns:
            Corrected and aligned dataset.

        Raises:
            FetchError: If the download fails or times out.
            MalformedInputError: If the downloaded CSV is invalid.
        """
        url = config.source_url(self._metric)
        with open_source(url, config.fetch_timeout_s) as stream:
            return self.build(stream, url)


def build_dataset(stream: BinaryIO, profile: ReportProfile, metric: str) -> Dataset:
    """Build an aligned dataset from an already-open CSV stream."""
    return DatasetPipeline(profile, metric).build(stream)


def fetch_dataset(profile: ReportProfile, metric: str, config: EpicurveConfig) -> Dataset:
    """Fetch and build an aligned dataset for one metric.

    Args:
        profile: Report profile.
        metric: Metric identifier.
        config: Runtime configuration.

    Returns:
        Corrected and aligned dataset.
    """
    return DatasetPipeline(profile, metric).fetch(config)


def _log_dataset_built(dataset: Dataset, source_name: str) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "dataset_built",
        metric=dataset.metric,
        source=source_name,
        date=dataset.date.strftime(OUTPUT_DATE_FORMAT),
        start=dataset.start.strftime(OUTPUT_DATE_FORMAT),
        entities=len(dataset.table),
        threshold=dataset.threshold,
    )
