"""Filesystem collaborators: directory listing, lstat snapshots and id names.

Every OS failure is translated here: listing errors are returned to the caller
as ``scan_error`` values, name lookup failures become ``FatalError``.
"""

from __future__ import annotations

import errno
import grp
import os
import pwd
from functools import lru_cache

from ..errors import NAME_LOOKUP_MESSAGE, FatalError
from .types import DirectoryChild, Metadata


def with_trailing_separator(directory: str) -> str:
    """Return ``directory`` guaranteed to end with a path separator."""
    if directory.endswith(os.sep):
        return directory
    return directory + os.sep


def child_sort_key(child: DirectoryChild) -> tuple[bool, bytes]:
    """Directories first, then byte-wise name order."""
    return (not child.is_dir, os.fsencode(child.name))


def list_directory_children(directory: str) -> tuple[list[DirectoryChild], OSError | None]:
    """List and sort all children of ``directory``.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be opened or read; ``children`` is then empty. The
    listing handle is closed before returning on every path.
    """
    if not directory:
        return [], FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), directory)
    base = with_trailing_separator(directory)
    children: list[DirectoryChild] = []
    try:
        with os.scandir(base) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=child.name, path=base + child.name, is_dir=is_dir))
    except OSError as exc:
        return [], exc

    children.sort(key=child_sort_key)
    return children, None


def lstat_metadata(path: str) -> Metadata | None:
    """Return a fresh non-following stat snapshot, or ``None`` when it fails."""
    try:
        return Metadata.from_stat(os.lstat(path))
    except OSError:
        return None


@lru_cache(maxsize=256)
def owner_name(uid: int) -> str:
    """Resolve a user id to its login name."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError as exc:
        raise FatalError(NAME_LOOKUP_MESSAGE) from exc


@lru_cache(maxsize=256)
def group_name(gid: int) -> str:
    """Resolve a group id to its group name."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError as exc:
        raise FatalError(NAME_LOOKUP_MESSAGE) from exc


__all__ = [
    "child_sort_key",
    "group_name",
    "list_directory_children",
    "lstat_metadata",
    "owner_name",
    "with_trailing_separator",
]
