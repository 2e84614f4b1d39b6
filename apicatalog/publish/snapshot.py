"""Full-replacement snapshot of the catalog graph.

Every run publishes the complete entity set. The store deletes whatever it
previously held for the provider and is not in the new set.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from apicatalog.graph.assembler import CatalogGraph

logger = logging.getLogger(__name__)

FULL_MUTATION = "full"


@dataclass(frozen=True)
class DeferredEntity:
    """One entity in wire form plus the location it is attributed to."""

    entity: dict[str, Any]
    location_key: str

    def to_dict(self) -> dict[str, Any]:
        return {"entity": self.entity, "locationKey": self.location_key}


@dataclass(frozen=True)
class FullMutation:
    """A full-replacement mutation."""

    entities: list[DeferredEntity] = field(default_factory=list)
    type: str = FULL_MUTATION

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "entities": [e.to_dict() for e in self.entities],
        }


def build_full_mutation(graph: CatalogGraph, location_key: str) -> FullMutation:
    """Tag every entity of the graph with location_key.

    Args:
        graph: Assembled catalog graph
        location_key: "<provider-name>:<environment>"

    Returns:
        FullMutation with systems, then services, then APIs
    """
    return FullMutation(
        entities=[
            DeferredEntity(entity=entity.to_dict(), location_key=location_key)
            for entity in graph.entities()
        ]
    )


class JsonFileConnection:
    """Connection that writes each mutation to a JSON file.

    Stands in for the catalog store when inspecting a run locally.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def apply_mutation(self, mutation: FullMutation) -> None:
        """Write the mutation as indented JSON, replacing the previous file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(mutation.to_dict(), f, indent=2)
        logger.info("snapshot_written path=%s entities=%d", self.path, len(mutation.entities))
