"""Descriptor and schema parsers."""

from apicatalog.parsing.descriptor import (
    ServiceDescriptor,
    find_service_descriptor,
    parse_descriptor,
)
from apicatalog.parsing.schema import ProtoSchema, parse_schema

__all__ = [
    "ProtoSchema",
    "ServiceDescriptor",
    "find_service_descriptor",
    "parse_descriptor",
    "parse_schema",
]
