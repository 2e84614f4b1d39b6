"""Line-oriented schema scanning.

This is deliberately not a proto parser. Each line is checked against three
anchored patterns:

    package a.b.v1;          -> package (last one wins)
    service Name {           -> service name (first one wins)
    import "a/b/c.proto";    -> import path (all kept, in order)

Statements split over several lines, indented statements and commented-out
lines are not recognised, which can hide a service or an import.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from apicatalog.config import DEFAULT_NAMESPACE

PACKAGE_PATTERN = re.compile(r"^package\s+(\S+?)\s*;")
SERVICE_PATTERN = re.compile(r"^service\s+(\w+)\b")
IMPORT_PATTERN = re.compile(r'^import\s+"(.*)"\s*;')


@dataclass
class ProtoSchema:
    """What one schema file contributes to the catalog."""

    package: str | None = None
    service_name: str | None = None
    imports: list[str] = field(default_factory=list)

    @property
    def namespace(self) -> str:
        """Package with dots replaced by dashes."""
        if not self.package:
            return DEFAULT_NAMESPACE
        return self.package.replace(".", "-")


def parse_schema(text: str) -> ProtoSchema:
    """Scan schema text line by line.

    Args:
        text: Full content of a .proto file

    Returns:
        ProtoSchema; service_name is None when no service line was found
    """
    schema = ProtoSchema()

    for line in text.splitlines():
        match = PACKAGE_PATTERN.match(line)
        if match:
            schema.package = match.group(1)
            continue

        match = SERVICE_PATTERN.match(line)
        if match:
            if schema.service_name is None:
                schema.service_name = match.group(1)
            continue

        match = IMPORT_PATTERN.match(line)
        if match:
            schema.imports.append(match.group(1))

    return schema
