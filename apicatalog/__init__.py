"""Catalog provider for API interface-definition source trees."""

from apicatalog.provider import GoogleapisProvider

__all__ = [
    "GoogleapisProvider",
]
