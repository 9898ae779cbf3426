"""Public SDK surface for epicurve.

This module provides a stable import path for report users.
It re-exports the primary client, pipeline helpers, and typed models.
"""

from __future__ import annotations

from core.config import EpicurveConfig
from core.default_profile import default_profile
from core.profile import load_profile
from core.types import ChartRequest, Correction, Dataset, EntityChartView, ReportProfile
from ingest.pipeline import DatasetPipeline, build_dataset, fetch_dataset
from serve.chart_renderer import render_chart
from serve.chart_views import build_chart_request, build_chart_views
from serve.report_sdk import EpicurveClient
from transforms.daily_delta import daily_deltas
from transforms.event_projection import project_event

__all__ = [
    "ChartRequest",
    "Correction",
    "Dataset",
    "DatasetPipeline",
    "EntityChartView",
    "EpicurveClient",
    "EpicurveConfig",
    "ReportProfile",
    "build_chart_request",
    "build_chart_views",
    "build_dataset",
    "daily_deltas",
    "default_profile",
    "fetch_dataset",
    "load_profile",
    "project_event",
    "render_chart",
]
