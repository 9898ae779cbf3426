"""Known-entity filter.

This module restricts ingestion to the configured allow-list.
Column-oriented sources must carry every entity; row-oriented sources
may carry many naming variants and unmatched rows are skipped.
"""

from __future__ import annotations

from typing import Sequence

from core.errors import UnknownEntityError


class EntityFilter:
    """Allow-list membership checks for one ingest run."""

    def __init__(self, entities: Sequence[str]) -> None:
        self._entities = tuple(entities)
        self._allowed = frozenset(self._entities)

    @property
    def entities(self) -> tuple[str, ...]:
        """Allow-listed entities in configured order."""
        return self._entities

    def accepts(self, entity: str) -> bool:
        """Return whether a row-oriented entity field is allow-listed."""
        return entity in self._allowed

    def resolve_columns(self, header: Sequence[str]) -> dict[str, int]:
        """Map every allow-listed entity to its header column.

        Args:
            header: Column names of a column-oriented source.

        Returns:
            Entity name to column index, in allow-list order.

        Raises:
            UnknownEntityError: If any allow-listed entity is absent.
        """
        positions = {name: index for index, name in enumerate(header)}
        missing = [entity for entity in self._entities if entity not in positions]
        if missing:
            raise UnknownEntityError(
                f"Entities {missing} are missing from the source header. "
                "Fix the entity names in the report profile."
            )
        return {entity: positions[entity] for entity in self._entities}
