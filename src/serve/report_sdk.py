"""Python SDK for report operations.

This module exposes high-level APIs to fetch aligned datasets,
derive chart views, and render or save chart images.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import EpicurveConfig
from core.default_profile import default_profile
from core.profile import load_profile
from core.types import ChartRequest, Dataset, ReportProfile
from ingest.pipeline import DatasetPipeline
from serve.chart_renderer import render_chart
from serve.chart_views import build_chart_request
from serve.image_output import image_path, save_image


class EpicurveClient:
    """Primary SDK entry point for report workflows."""

    def __init__(
        self,
        config: EpicurveConfig | None = None,
        profile: ReportProfile | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            profile: Optional report profile; defaults to the built-in one.
        """
        self._config = config or EpicurveConfig.from_env()
        self._profile = profile or default_profile()

    @classmethod
    def from_profile_file(
        cls,
        profile_path: str,
        config: EpicurveConfig | None = None,
    ) -> "EpicurveClient":
        """Create a client from a YAML report profile.

        Args:
            profile_path: Path to YAML profile.
            config: Optional runtime configuration.

        Returns:
            Configured SDK client.
        """
        return cls(config, load_profile(profile_path))

    @property
    def config(self) -> EpicurveConfig:
        """Runtime configuration."""
        return self._config

    @property
    def profile(self) -> ReportProfile:
        """Report profile."""
        return self._profile

    def metrics(self) -> tuple[str, ...]:
        """Return configured metric identifiers in profile order."""
        return tuple(self._profile.metrics)

    def supports(self, metric: str) -> bool:
        """Return whether the profile defines a metric."""
        return metric.lower() in self._profile.metrics

    def pipeline(self, metric: str) -> DatasetPipeline:
        """Build the dataset pipeline for a metric.

        Raises:
            UnsupportedMetricError: If the metric is not configured.
        """
        return DatasetPipeline(self._profile, metric)

    def fetch_dataset(self, metric: str) -> Dataset:
        """Fetch the source for a metric and build its aligned dataset.

        Args:
            metric: Metric identifier.

        Returns:
            Corrected and aligned dataset.

        Raises:
            FetchError: If the download fails or times out.
            MalformedInputError: If the source is invalid.
        """
        return self.pipeline(metric).fetch(self._config)

    def chart_request(self, metric: str) -> ChartRequest:
        """Fetch a metric and derive its plot-ready views."""
        dataset = self.fetch_dataset(metric)
        return build_chart_request(dataset, self._profile.events)

    def render(self, metric: str) -> bytes:
        """Fetch a metric and render its chart as PNG bytes."""
        return render_chart(self.chart_request(metric))

    def render_to_file(self, metric: str, output_path: str | None = None) -> Path:
        """Render a metric chart and write it to disk.

        Args:
            metric: Metric identifier.
            output_path: Optional destination; defaults to the output directory.

        Returns:
            Written image path.
        """
        target = output_path or image_path(self._config.output_dir, metric)
        return save_image(self.render(metric), target)

    def with_output_dir(self, output_dir: str) -> "EpicurveClient":
        """Clone the client with a different image output directory."""
        resolved_dir = Path(output_dir).expanduser().resolve()
        return EpicurveClient(replace(self._config, output_dir=resolved_dir), self._profile)
