"""Core type definitions: entity kinds and the source tree registry entry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntityKind(Enum):
    """Catalog entity kinds emitted by discovery.

    The value is the `kind` field of the entity on the wire.
    """

    SYSTEM = "System"
    COMPONENT = "Component"
    API = "API"


@dataclass(frozen=True)
class SourceTree:
    """Immutable definition of one mirrored source tree.

    The API tree is walked for systems, services and schemas. Other trees
    are only used as fallback roots when resolving schema imports.
    """

    name: str
    remote_url: str
    local_root: Path
    browse_url: str  # web prefix for origin links, no trailing slash
    import_subdir: str = ""  # where import paths are rooted inside the checkout
    domain_subdir: str = ""  # where the domain directories live

    @property
    def import_root(self) -> Path:
        """Directory that import paths are joined under."""
        if self.import_subdir:
            return self.local_root / self.import_subdir
        return self.local_root

    @property
    def domain_root(self) -> Path:
        """Directory whose direct subdirectories are the domains."""
        if self.domain_subdir:
            return self.local_root / self.domain_subdir
        return self.local_root

    def browse_link(self, path: Path) -> str:
        """Web URL for a path inside the local checkout."""
        relative = path.relative_to(self.local_root).as_posix()
        if relative == ".":
            return self.browse_url
        return f"{self.browse_url}/{relative}"
