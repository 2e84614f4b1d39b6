"""Service descriptor parsing.

A service directory is recognised by a YAML file sitting directly in it
whose `type` is the service descriptor sentinel. Only a handful of fields
are read; everything else in the descriptor is ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from apicatalog.config import DESCRIPTOR_SUFFIX, SERVICE_DESCRIPTOR_TYPE
from apicatalog.core.errors import DescriptorError
from apicatalog.core.paths import sorted_entries

logger = logging.getLogger(__name__)


@dataclass
class ServiceDescriptor:
    """The fields of a service descriptor that feed the catalog."""

    path: Path
    name: str  # full declared name, e.g. "pubsub.googleapis.com"
    title: str | None = None
    summary: str = ""
    overview: str = ""

    @property
    def service_name(self) -> str:
        """First dot-segment of the declared name."""
        return self.name.split(".")[0]

    @property
    def description(self) -> str:
        """Summary and overview joined by a newline, empty parts dropped."""
        return "\n".join(part for part in (self.summary, self.overview) if part)


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def parse_descriptor(content: str, path: Path) -> ServiceDescriptor | None:
    """Parse descriptor YAML.

    Args:
        content: Raw YAML text
        path: File the content came from, for error reporting

    Returns:
        ServiceDescriptor, or None if the document is not a service descriptor

    Raises:
        yaml.YAMLError: If the content is not valid YAML
        DescriptorError: If the document declares the service type but has
            no usable name
    """
    data = yaml.safe_load(content)
    if not isinstance(data, dict):
        return None
    if data.get("type") != SERVICE_DESCRIPTOR_TYPE:
        return None

    name = data.get("name")
    if not isinstance(name, str) or not name.split(".")[0]:
        raise DescriptorError(path, "missing or empty 'name'")

    documentation = data.get("documentation")
    if not isinstance(documentation, dict):
        documentation = {}

    return ServiceDescriptor(
        path=path,
        name=name,
        title=_optional_str(data.get("title")),
        summary=_optional_str(documentation.get("summary")) or "",
        overview=_optional_str(documentation.get("overview")) or "",
    )


def find_service_descriptor(directory: Path) -> ServiceDescriptor | None:
    """Return the first service descriptor directly inside directory.

    Files are checked in name order and hidden files are ignored. Files
    that are not valid YAML or not UTF-8 are logged and skipped.
    Subdirectories are not looked at.

    Raises:
        DescriptorError: If the first file declaring the service type is
            malformed
    """
    for entry in sorted_entries(directory):
        if not entry.is_file() or entry.suffix != DESCRIPTOR_SUFFIX:
            continue

        try:
            content = entry.read_text(encoding="utf-8")
            descriptor = parse_descriptor(content, entry)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            logger.debug("descriptor_unreadable path=%s error=%s", entry, e)
            continue

        if descriptor is not None:
            return descriptor

    return None
