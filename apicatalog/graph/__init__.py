"""Catalog graph assembly."""

from apicatalog.graph.assembler import CatalogGraph

__all__ = [
    "CatalogGraph",
]
