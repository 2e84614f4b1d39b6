"""Schema import resolution against the mirrored source roots."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from apicatalog.models.entities import ApiFile

logger = logging.getLogger(__name__)


class ImportResolver:
    """Resolves import paths found in schema files to files on disk.

    Resolution order:
    1. Primary root (the walked API tree)
    2. Secondary root (well-known protobuf sources)

    A path missing from both roots is logged and still returned joined
    under the primary root, so consumers must tolerate dangling paths.
    """

    def __init__(self, primary_root: Path, secondary_root: Path) -> None:
        self._primary_root = primary_root
        self._secondary_root = secondary_root
        self.missing: list[str] = []

    def resolve(self, import_path: str) -> ApiFile:
        """Resolve one import path.

        Args:
            import_path: Path as written in the import statement

        Returns:
            ApiFile with the file name and the resolved path
        """
        file_name = PurePosixPath(import_path).name

        primary = self._primary_root / import_path
        if primary.exists():
            return ApiFile(file_name=file_name, file_path=primary.as_posix())

        secondary = self._secondary_root / import_path
        if secondary.exists():
            return ApiFile(file_name=file_name, file_path=secondary.as_posix())

        logger.warning(
            "import_missing import=%s primary=%s secondary=%s",
            import_path,
            primary,
            secondary,
        )
        self.missing.append(import_path)
        return ApiFile(file_name=file_name, file_path=primary.as_posix())

    def resolve_all(self, import_paths: list[str]) -> tuple[ApiFile, ...]:
        """Resolve import paths, keeping order and duplicates."""
        return tuple(self.resolve(p) for p in import_paths)
