"""Tests for full-replacement snapshot building and the JSON connection."""

from __future__ import annotations

import json
from pathlib import Path

from apicatalog.discovery.walker import ApiAssociation, DiscoveryResult
from apicatalog.graph.assembler import CatalogGraph
from apicatalog.models.entities import ApiEntity, EntityLink, ServiceEntity, SystemEntity
from apicatalog.publish.snapshot import (
    FullMutation,
    JsonFileConnection,
    build_full_mutation,
)

REMOTE = "https://example.com/googleapis.git"
LOCATION_KEY = "googleapis-provider:test"


def make_graph() -> CatalogGraph:
    """One system, one service, one API."""
    service_path = Path("/tree/google/alpha/beta")
    result = DiscoveryResult(
        systems={
            Path("/tree/google/alpha"): SystemEntity(
                name="alpha", remote_url=REMOTE, link=EntityLink(url="web/alpha")
            )
        },
        services={
            service_path: ServiceEntity(
                name="beta", system="alpha", remote_url=REMOTE, link=EntityLink(url="web/beta")
            )
        },
        apis=[
            ApiEntity(
                name="BetaService",
                namespace="alpha-beta-v1",
                remote_url=REMOTE,
                definition_url="web/beta.proto",
            )
        ],
        associations=[ApiAssociation(service_path, "alpha-beta-v1/BetaService")],
    )
    return CatalogGraph.from_discovery(result)


class TestBuildFullMutation:
    """Tests for build_full_mutation."""

    def test_full_type(self) -> None:
        """Mutation is a full replacement."""
        mutation = build_full_mutation(make_graph(), LOCATION_KEY)
        assert mutation.type == "full"

    def test_every_entity_tagged(self) -> None:
        """Each entity carries the location key."""
        mutation = build_full_mutation(make_graph(), LOCATION_KEY)

        assert len(mutation.entities) == 3
        assert all(e.location_key == LOCATION_KEY for e in mutation.entities)

    def test_entity_order(self) -> None:
        """Systems, then services, then APIs."""
        mutation = build_full_mutation(make_graph(), LOCATION_KEY)

        kinds = [e.entity["kind"] for e in mutation.entities]

        assert kinds == ["System", "Component", "API"]

    def test_provides_apis_in_wire_form(self) -> None:
        """Assembled provided-API list reaches the wire."""
        mutation = build_full_mutation(make_graph(), LOCATION_KEY)

        component = mutation.entities[1].entity

        assert component["spec"]["providesApis"] == ["alpha-beta-v1/BetaService"]

    def test_to_dict(self) -> None:
        """Wire dict uses locationKey."""
        data = build_full_mutation(make_graph(), LOCATION_KEY).to_dict()

        assert data["type"] == "full"
        assert data["entities"][0]["locationKey"] == LOCATION_KEY
        assert data["entities"][0]["entity"]["metadata"]["name"] == "alpha"

    def test_empty_graph(self) -> None:
        """Empty graph -> empty full mutation, which clears the store."""
        mutation = build_full_mutation(CatalogGraph(), LOCATION_KEY)
        assert mutation == FullMutation(entities=[])

    def test_deterministic(self) -> None:
        """Same graph -> identical serialised mutation."""
        first = json.dumps(build_full_mutation(make_graph(), LOCATION_KEY).to_dict())
        second = json.dumps(build_full_mutation(make_graph(), LOCATION_KEY).to_dict())

        assert first == second


class TestJsonFileConnection:
    """Tests for writing mutations to disk."""

    def test_writes_json(self, tmp_path: Path) -> None:
        """apply_mutation writes the wire dict."""
        path = tmp_path / "out" / "snapshot.json"
        connection = JsonFileConnection(path)
        mutation = build_full_mutation(make_graph(), LOCATION_KEY)

        connection.apply_mutation(mutation)

        with open(path) as f:
            data = json.load(f)
        assert data == mutation.to_dict()

    def test_replaces_previous_snapshot(self, tmp_path: Path) -> None:
        """A second mutation overwrites the first."""
        path = tmp_path / "snapshot.json"
        connection = JsonFileConnection(path)

        connection.apply_mutation(build_full_mutation(make_graph(), LOCATION_KEY))
        connection.apply_mutation(FullMutation(entities=[]))

        with open(path) as f:
            data = json.load(f)
        assert data == {"type": "full", "entities": []}
