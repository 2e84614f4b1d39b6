"""Local shallow mirrors of remote source trees."""

from apicatalog.mirror.git import ensure_mirror, ensure_tree

__all__ = [
    "ensure_mirror",
    "ensure_tree",
]
