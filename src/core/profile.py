"""Report profile loading and validation.

This module loads YAML report profiles describing which entities to
track, per-metric cutoffs, event dates, and manual data corrections.
One strict schema keeps CLI, server, and SDK runs consistent.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Mapping, Sequence, cast

import yaml

from core.constants import DEFAULT_DATE_LAYOUTS, DEFAULT_SCHEMA, SUPPORTED_SCHEMAS
from core.errors import EpicurveConfigError, UnsupportedMetricError
from core.types import (
    Correction,
    EventDate,
    MetricSettings,
    ReportProfile,
    SchemaName,
)

_ROOT_KEYS = {"version", "entities", "metrics", "events", "corrections", "schema", "date_layouts"}
_CORRECTION_KEYS = {"entity", "index", "value", "note"}


def load_profile(profile_path: str) -> ReportProfile:
    """Load and validate a YAML report profile from disk.

    Args:
        profile_path: File path to YAML profile.

    Returns:
        Fully validated report profile.

    Raises:
        EpicurveConfigError: If file is invalid or schema checks fail.
    """
    payload = _load_yaml_payload(profile_path)
    return parse_profile(payload)


def parse_profile(payload: object) -> ReportProfile:
    """Validate an already-decoded profile payload.

    Args:
        payload: Decoded YAML/JSON object.

    Returns:
        Validated report profile.

    Raises:
        EpicurveConfigError: If schema checks fail.
    """
    root_mapping = _expect_mapping(payload, "profile root")
    _validate_keys(root_mapping, _ROOT_KEYS, "profile root")
    _parse_version(root_mapping)
    entities = _parse_entities(root_mapping)
    metrics = _parse_metrics(root_mapping)
    corrections = _parse_corrections(root_mapping)
    _check_corrections_cover_metrics(metrics, corrections)
    return ReportProfile(
        entities=entities,
        metrics=metrics,
        events=_parse_events(root_mapping),
        corrections=corrections,
        schema=_parse_schema(root_mapping),
        date_layouts=_parse_date_layouts(root_mapping),
    )


def metric_settings(profile: ReportProfile, metric: str) -> MetricSettings:
    """Look up settings for one metric.

    Args:
        profile: Report profile.
        metric: Metric identifier, case-insensitive.

    Returns:
        Settings for the metric.

    Raises:
        UnsupportedMetricError: If the profile does not define the metric.
    """
    settings = profile.metrics.get(metric.lower())
    if settings is None:
        supported_rows = ", ".join(sorted(profile.metrics))
        raise UnsupportedMetricError(
            f"Unsupported metric '{metric}'. Use one of: {supported_rows}."
        )
    return settings


def _load_yaml_payload(profile_path: str) -> object:
    profile_file = Path(profile_path).expanduser().resolve()
    if not profile_file.exists():
        raise EpicurveConfigError(
            f"Profile file does not exist at {profile_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(profile_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise EpicurveConfigError(
            f"Failed to read profile at {profile_file}: {error}. Check file permissions."
        ) from error
    except yaml.YAMLError as error:
        raise EpicurveConfigError(
            f"Failed to parse YAML profile at {profile_file}: {error}. Fix YAML syntax."
        ) from error
    if payload is None:
        raise EpicurveConfigError(
            f"Profile at {profile_file} is empty. Define 'entities' and 'metrics'."
        )
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise EpicurveConfigError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise EpicurveConfigError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise EpicurveConfigError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _expect_number(value: object, context: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EpicurveConfigError(f"Invalid {context}: expected number, got {value!r}.")
    return float(value)


def _parse_version(root_mapping: Mapping[str, object]) -> None:
    raw_version = root_mapping.get("version", 1)
    if raw_version != 1:
        raise EpicurveConfigError(f"Unsupported profile version {raw_version!r}. Use version: 1.")


def _parse_entities(root_mapping: Mapping[str, object]) -> tuple[str, ...]:
    raw_entities = root_mapping.get("entities")
    if raw_entities is None:
        raise EpicurveConfigError("Profile missing required field 'entities'.")
    entities = []
    for entity in _expect_sequence(raw_entities, "profile entities"):
        if not isinstance(entity, str) or not entity.strip():
            raise EpicurveConfigError(f"Invalid profile entity {entity!r}: expected a name.")
        entities.append(entity.strip())
    if not entities:
        raise EpicurveConfigError("Profile field 'entities' must list at least one entity.")
    if len(set(entities)) != len(entities):
        raise EpicurveConfigError("Profile field 'entities' contains duplicate names.")
    return tuple(entities)


def _parse_metrics(root_mapping: Mapping[str, object]) -> dict[str, MetricSettings]:
    raw_metrics = root_mapping.get("metrics")
    if raw_metrics is None:
        raise EpicurveConfigError("Profile missing required field 'metrics'.")
    metrics = {}
    for metric, raw_settings in _expect_mapping(raw_metrics, "profile metrics").items():
        context = f"profile metric '{metric}'"
        settings_mapping = _expect_mapping(raw_settings, context)
        _validate_keys(settings_mapping, {"cutoff"}, context)
        cutoff = _expect_number(settings_mapping.get("cutoff"), f"{context} cutoff")
        if cutoff < 0:
            raise EpicurveConfigError(f"Invalid {context} cutoff: expected >= 0, got {cutoff}.")
        metrics[metric.lower()] = MetricSettings(cutoff=cutoff)
    if not metrics:
        raise EpicurveConfigError("Profile field 'metrics' must define at least one metric.")
    return metrics


def _parse_events(root_mapping: Mapping[str, object]) -> dict[str, EventDate]:
    raw_events = root_mapping.get("events")
    if raw_events is None:
        return {}
    events: dict[str, EventDate] = {}
    for entity, raw_date in _expect_mapping(raw_events, "profile events").items():
        events[entity] = _parse_event_date(raw_date, f"profile event for '{entity}'")
    return events


def _parse_event_date(raw_date: object, context: str) -> EventDate:
    if isinstance(raw_date, (date, datetime)):
        return raw_date
    if isinstance(raw_date, str):
        try:
            if "T" in raw_date or " " in raw_date.strip():
                return datetime.fromisoformat(raw_date.strip())
            return date.fromisoformat(raw_date.strip())
        except ValueError as error:
            raise EpicurveConfigError(
                f"Invalid {context}: '{raw_date}' is not an ISO date."
            ) from error
    raise EpicurveConfigError(f"Invalid {context}: expected ISO date, got {raw_date!r}.")


def _parse_corrections(root_mapping: Mapping[str, object]) -> dict[str, tuple[Correction, ...]]:
    raw_corrections = root_mapping.get("corrections")
    if raw_corrections is None:
        return {}
    corrections = {}
    for metric, raw_rows in _expect_mapping(raw_corrections, "profile corrections").items():
        context = f"profile corrections for '{metric}'"
        rows = _expect_sequence(raw_rows if raw_rows is not None else [], context)
        corrections[metric.lower()] = tuple(
            _parse_correction(row, f"{context} #{index + 1}") for index, row in enumerate(rows)
        )
    return corrections


def _check_corrections_cover_metrics(
    metrics: Mapping[str, MetricSettings],
    corrections: Mapping[str, tuple[Correction, ...]],
) -> None:
    missing = sorted(set(metrics) - set(corrections))
    if missing:
        raise EpicurveConfigError(
            f"Profile corrections have no entry for metrics: {', '.join(missing)}. "
            "Add an empty list for metrics without corrections."
        )


def _parse_correction(raw_row: object, context: str) -> Correction:
    row_mapping = _expect_mapping(raw_row, context)
    _validate_keys(row_mapping, _CORRECTION_KEYS, context)
    entity = row_mapping.get("entity")
    index = row_mapping.get("index")
    if not isinstance(entity, str):
        raise EpicurveConfigError(f"Invalid {context}: field 'entity' must be a string.")
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise EpicurveConfigError(f"Invalid {context}: field 'index' must be an integer >= 0.")
    value = _expect_number(row_mapping.get("value"), f"{context} value")
    if value < 0:
        raise EpicurveConfigError(f"Invalid {context} value: expected >= 0, got {value}.")
    note = row_mapping.get("note", "")
    return Correction(entity=entity, index=index, value=value, note=str(note))


def _parse_schema(root_mapping: Mapping[str, object]) -> SchemaName:
    raw_schema = root_mapping.get("schema", DEFAULT_SCHEMA)
    if raw_schema in SUPPORTED_SCHEMAS:
        return cast(SchemaName, raw_schema)
    supported_rows = ", ".join(SUPPORTED_SCHEMAS)
    raise EpicurveConfigError(f"Unsupported schema {raw_schema!r}. Use one of: {supported_rows}.")


def _parse_date_layouts(root_mapping: Mapping[str, object]) -> tuple[str, ...]:
    raw_layouts = root_mapping.get("date_layouts")
    if raw_layouts is None:
        return DEFAULT_DATE_LAYOUTS
    layouts = _expect_sequence(raw_layouts, "profile date_layouts")
    if not layouts or not all(isinstance(layout, str) for layout in layouts):
        raise EpicurveConfigError("Profile field 'date_layouts' must be a non-empty string list.")
    return tuple(cast(Sequence[str], layouts))


def _validate_keys(mapping: Mapping[str, object], allowed_keys: set[str], context: str) -> None:
    unknown_keys = sorted(set(mapping) - allowed_keys)
    if unknown_keys:
        raise EpicurveConfigError(f"Invalid {context}: unknown fields {', '.join(unknown_keys)}.")
