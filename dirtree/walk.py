"""Depth-first directory walker.

Lists one directory at a time, renders each child, folds it into the shared
``Summary`` and descends into subdirectories. Descent uses an explicit frame
stack rather than Python recursion, so nesting depth is bounded by memory
only; the emitted order is the same pre-order a recursive walk produces.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from .errors import (
    OUT_OF_MEMORY_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    FatalError,
    access_error_message,
    is_out_of_memory,
)
from .file_tree_model import (
    DirectoryChild,
    EntryKind,
    Metadata,
    group_name,
    list_directory_children,
    lstat_metadata,
    owner_name,
)
from .summary import Summary
from .tree_model import DisplayOptions, next_prefix, render_error_line, render_line


@dataclass
class _Frame:
    """Children of one open directory still waiting to be emitted."""

    children: list[DirectoryChild]
    prefix: str
    position: int = 0

    def exhausted(self) -> bool:
        return self.position >= len(self.children)

    def advance(self) -> tuple[DirectoryChild, bool]:
        """Return the next child and whether it is the last sibling."""
        child = self.children[self.position]
        self.position += 1
        return child, self.position == len(self.children)


def _open_frame(directory: str, prefix: str, options: DisplayOptions, out: TextIO) -> _Frame | None:
    """List ``directory`` or render its access error in place.

    Returns ``None`` when there is nothing to descend into.
    """
    children, scan_error = list_directory_children(directory)
    if scan_error is None:
        return _Frame(children=children, prefix=prefix)

    message = access_error_message(scan_error)
    if message is not None:
        out.write(render_error_line(prefix, message, options.tree_view) + "\n")
        return None
    if is_out_of_memory(scan_error):
        raise FatalError(OUT_OF_MEMORY_MESSAGE) from scan_error
    out.write(f"ERROR: error code {scan_error.errno}\n")
    raise FatalError(UNKNOWN_ERROR_MESSAGE) from scan_error


def _render_child(prefix: str, child: DirectoryChild, metadata: Metadata | None, options: DisplayOptions) -> str:
    owner: str | None = None
    group: str | None = None
    if options.verbose and metadata is not None:
        owner = owner_name(metadata.uid)
        group = group_name(metadata.gid)
    return render_line(prefix, child.name, options, metadata, owner, group)


def visit(
    directory: str,
    prefix: str,
    summary: Summary,
    options: DisplayOptions,
    out: TextIO | None = None,
) -> None:
    """Emit the listing of everything below ``directory`` into ``out``.

    ``prefix`` is the inherited prefix of ``directory``'s children. Entries
    whose metadata cannot be read are still listed but are neither counted
    nor descended into.
    """
    stream = out if out is not None else sys.stdout
    stack: list[_Frame] = []
    root_frame = _open_frame(directory, prefix, options, stream)
    if root_frame is not None:
        stack.append(root_frame)

    while stack:
        frame = stack[-1]
        if frame.exhausted():
            stack.pop()
            continue

        child, is_last = frame.advance()
        metadata = lstat_metadata(child.path)
        child_prefix = next_prefix(frame.prefix, is_last, options.tree_view)
        stream.write(_render_child(child_prefix, child, metadata, options) + "\n")
        if metadata is None:
            continue

        summary.fold(metadata)
        if metadata.kind is EntryKind.DIRECTORY:
            sub_frame = _open_frame(child.path, child_prefix, options, stream)
            if sub_frame is not None:
                stack.append(sub_frame)


__all__ = ["visit"]
