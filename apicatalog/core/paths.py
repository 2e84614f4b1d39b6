"""Directory listing shared by every traversal step."""

from __future__ import annotations

from pathlib import Path


def sorted_entries(directory: Path) -> list[Path]:
    """Direct entries of a directory in name order, hidden ones skipped."""
    return sorted(e for e in directory.iterdir() if not e.name.startswith("."))
