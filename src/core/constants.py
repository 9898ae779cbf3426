"""Core constants used across epicurve modules.

This module centralizes defaults for sources, schemas, and charts.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

JHU_GLOBAL_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/"
    "csse_covid_19_data/csse_covid_19_time_series/time_series_covid19_{metric}_global.csv"
)
# Per-metric files published before the global series existed; same row layout.
JHU_LEGACY_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/"
    "csse_covid_19_data/csse_covid_19_time_series/time_series_19-covid-{metric}.csv"
)
DEFAULT_SOURCE_URL_TEMPLATE = JHU_GLOBAL_URL_TEMPLATE
METRIC_PLACEHOLDER = "{metric}"
DEFAULT_FETCH_TIMEOUT_S = 30.0
DEFAULT_OUTPUT_DIR = Path(".")
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
SOURCE_ENCODING = "utf-8"

ROW_SCHEMA = "row"
COLUMN_SCHEMA = "column"
SUPPORTED_SCHEMAS = (ROW_SCHEMA, COLUMN_SCHEMA)
DEFAULT_SCHEMA = ROW_SCHEMA
ROW_SCHEMA_ENTITY_COLUMN = 1
ROW_SCHEMA_LEADING_COLUMNS = 4
COLUMN_SCHEMA_DATE_COLUMN = 0
DEFAULT_DATE_LAYOUTS = ("%m/%d/%y", "%m/%d/%Y", "%Y-%m-%d")

SECONDS_PER_DAY = 86400.0
OUTPUT_DATE_FORMAT = "%Y-%m-%d"
IMAGE_FILE_TEMPLATE = "covid-{metric}.png"
IMAGE_ROUTE_PREFIX = "/img-"
PNG_MIME_TYPE = "image/png"
GROWTH_REFERENCE_RATE = 1.33
GROWTH_REFERENCE_LABEL = "33% daily growth"
CHART_WIDTH_CM = 20.0 * 1.618
CHART_HEIGHT_CM = 40.0
CHART_DPI = 96
CHART_X_TICKS = 20
