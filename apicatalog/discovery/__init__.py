"""Source tree discovery and import resolution."""

from apicatalog.discovery.resolver import ImportResolver
from apicatalog.discovery.walker import (
    ApiAssociation,
    DiscoveryResult,
    TreeWalker,
)

__all__ = [
    "ApiAssociation",
    "DiscoveryResult",
    "ImportResolver",
    "TreeWalker",
]
