"""Shallow git mirrors of the source trees.

A mirror is a depth-limited clone that doubles as an on-disk cache: if the
target directory exists it is trusted as-is and nothing is fetched.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from apicatalog.config import CLONE_DEPTH
from apicatalog.core.errors import MirrorError
from apicatalog.models.types import SourceTree

logger = logging.getLogger(__name__)


def ensure_mirror(remote_url: str, local_root: Path, depth: int = CLONE_DEPTH) -> bool:
    """Make sure a shallow clone of remote_url exists at local_root.

    Args:
        remote_url: Repository to clone
        local_root: Target directory, created with its parents if missing
        depth: Clone depth

    Returns:
        True if a clone was performed, False if local_root already existed

    Raises:
        MirrorError: If git is missing or the clone fails. The created
            directory is not cleaned up.
    """
    if local_root.exists():
        logger.info("mirror_exists root=%s", local_root)
        return False

    logger.info("mirror_missing root=%s url=%s", local_root, remote_url)
    local_root.mkdir(parents=True, exist_ok=True)

    try:
        result = subprocess.run(
            ["git", "clone", "--depth", str(depth), remote_url, str(local_root)],
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise MirrorError(remote_url, local_root, (e.stderr or "").strip() or str(e)) from e
    except OSError as e:
        raise MirrorError(remote_url, local_root, str(e)) from e

    logger.info("mirror_cloned root=%s url=%s output=%s", local_root, remote_url, result.stderr.strip())
    return True


def ensure_tree(tree: SourceTree) -> bool:
    """Mirror one registered source tree."""
    return ensure_mirror(tree.remote_url, tree.local_root)
