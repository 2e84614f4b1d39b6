"""Source tree registry and discovery constants.

The two trees below are the whole input surface. The API tree is walked,
the protobuf tree only backs import resolution.
"""

from __future__ import annotations

from pathlib import Path

from apicatalog.models.types import SourceTree

# Where mirrors are cloned, relative to the working directory
MIRROR_DIR: Path = Path("temp")

SOURCE_TREES: dict[str, SourceTree] = {
    # -- Walked for systems, services and APIs --
    "googleapis": SourceTree(
        name="googleapis",
        remote_url="https://github.com/googleapis/googleapis.git",
        local_root=MIRROR_DIR / "googleapis",
        browse_url="https://github.com/googleapis/googleapis/tree/master",
        domain_subdir="google",
    ),
    # -- Fallback root for well-known protobuf imports --
    "protobuf": SourceTree(
        name="protobuf",
        remote_url="https://github.com/protocolbuffers/protobuf.git",
        local_root=MIRROR_DIR / "protobuf",
        browse_url="https://github.com/protocolbuffers/protobuf/tree/main",
        import_subdir="src",
    ),
}

# Key of the tree that is walked; every other tree is an import fallback
PRIMARY_TREE: str = "googleapis"

# Shallow clone depth for mirrors
CLONE_DEPTH: int = 1

# File formats
DESCRIPTOR_SUFFIX: str = ".yaml"
SCHEMA_SUFFIX: str = ".proto"
SERVICE_DESCRIPTOR_TYPE: str = "google.api.Service"

# Entity defaults
DEFAULT_OWNER: str = "default/guests"
DEFAULT_LIFECYCLE: str = "production"
COMPONENT_TYPE: str = "service"
API_TYPE: str = "grpc"
DEFAULT_NAMESPACE: str = "default"  # used when a schema has no package line
LINK_TITLE: str = "Github"

# Provider identity
SOURCE_NAME: str = "googleapis"
LOCATION_KEY_PREFIX: str = "googleapis-provider"
