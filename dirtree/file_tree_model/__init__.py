"""Domain model for listed directory entries plus the OS collaborators.

This package contains non-rendering primitives:
- entry kind, listed child and metadata datatypes
- directory listing with sorted children
- lstat snapshots and owner/group name resolution
"""

from __future__ import annotations

from .types import DirectoryChild, EntryKind, Metadata
from .fs import (
    child_sort_key,
    group_name,
    list_directory_children,
    lstat_metadata,
    owner_name,
    with_trailing_separator,
)

__all__ = [
    "DirectoryChild",
    "EntryKind",
    "Metadata",
    "child_sort_key",
    "group_name",
    "list_directory_children",
    "lstat_metadata",
    "owner_name",
    "with_trailing_separator",
]
