"""Unit tests for the known-entity filter."""

from __future__ import annotations

import pytest

from core.errors import UnknownEntityError
from ingest.entity_filter import EntityFilter


def test_accepts_only_allow_listed_entities() -> None:
    """Row-oriented membership is an exact name match."""
    entity_filter = EntityFilter(["France", "US"])

    assert entity_filter.accepts("France") and not entity_filter.accepts("Korea, South")


def test_resolve_columns_maps_entities_in_allow_list_order() -> None:
    """Column lookup should follow the configured order, not the header order."""
    entity_filter = EntityFilter(["Italy", "France"])

    columns = entity_filter.resolve_columns(["date", "France", "Spain", "Italy"])

    assert list(columns.items()) == [("Italy", 3), ("France", 1)]


def test_resolve_columns_fails_fast_for_missing_entity() -> None:
    """A configured entity absent from the header is a setup error."""
    entity_filter = EntityFilter(["France", "Atlantis"])

    with pytest.raises(UnknownEntityError):
        entity_filter.resolve_columns(["date", "France"])
