"""Shared fixtures: small source trees laid out like googleapis."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from apicatalog.discovery.resolver import ImportResolver
from apicatalog.models.types import SourceTree


@pytest.fixture
def api_tree(tmp_path: Path) -> SourceTree:
    """Primary tree rooted at tmp_path/googleapis with domains under google/."""
    root = tmp_path / "googleapis"
    (root / "google").mkdir(parents=True)
    return SourceTree(
        name="googleapis",
        remote_url="https://example.com/googleapis.git",
        local_root=root,
        browse_url="https://example.com/googleapis/tree/master",
        domain_subdir="google",
    )


@pytest.fixture
def proto_tree(tmp_path: Path) -> SourceTree:
    """Fallback tree rooted at tmp_path/protobuf with imports under src/."""
    root = tmp_path / "protobuf"
    (root / "src").mkdir(parents=True)
    return SourceTree(
        name="protobuf",
        remote_url="https://example.com/protobuf.git",
        local_root=root,
        browse_url="https://example.com/protobuf/tree/main",
        import_subdir="src",
    )


@pytest.fixture
def resolver(api_tree: SourceTree, proto_tree: SourceTree) -> ImportResolver:
    """Resolver over the two fixture trees."""
    return ImportResolver(api_tree.import_root, proto_tree.import_root)


@pytest.fixture
def domain(api_tree: SourceTree) -> Callable[[str], Path]:
    """Return a factory creating domain directories in the primary tree."""

    def make(name: str) -> Path:
        path = api_tree.domain_root / name
        path.mkdir(parents=True, exist_ok=True)
        return path

    return make
