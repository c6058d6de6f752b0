"""Formatting helpers for tree prefixes and listing rows.

All functions here are pure string transforms: metadata is fetched and owner/
group names are resolved by the caller before a row is rendered.
"""

from __future__ import annotations

from ..file_tree_model.types import EntryKind, Metadata
from .types import DisplayOptions

NAME_COLUMN_WIDTH = 54
TRUNCATED_NAME_WIDTH = 51
ELLIPSIS = "..."

BRANCH_GLYPH = "|"
CORNER_GLYPH = "`"
CONNECTOR_GLYPH = "-"
PLAIN_INDENT = "  "

UNKNOWN_NAME = "?"

TYPE_CODES: dict[EntryKind, str] = {
    EntryKind.REGULAR: " ",
    EntryKind.DIRECTORY: "d",
    EntryKind.CHAR_DEVICE: "c",
    EntryKind.SYMLINK: "l",
    EntryKind.FIFO: "f",
    EntryKind.BLOCK_DEVICE: "b",
    EntryKind.SOCKET: "s",
    EntryKind.UNKNOWN: "\0",
}


def next_prefix(parent_prefix: str, is_last: bool, tree_view: bool) -> str:
    """Derive the prefix of a child row from its parent's prefix.

    In tree view the parent's own branch marker is blanked out: a corner
    becomes a space (that branch is closed), a continuation bar stays, and the
    connector column always becomes a space.
    """
    if not tree_view:
        return parent_prefix + PLAIN_INDENT

    chars = list(parent_prefix)
    if len(chars) > 1:
        if chars[-2] == CORNER_GLYPH:
            chars[-2] = " "
        chars[-1] = " "
    chars.append(CORNER_GLYPH if is_last else BRANCH_GLYPH)
    chars.append(CONNECTOR_GLYPH)
    return "".join(chars)


def type_code(kind: EntryKind) -> str:
    return TYPE_CODES.get(kind, "\0")


def format_name_column(text: str, verbose: bool) -> str:
    """Fit ``prefix + name`` into the name column.

    Verbose rows never exceed the column; plain rows only pad.
    """
    if verbose and len(text) > NAME_COLUMN_WIDTH:
        return text[:TRUNCATED_NAME_WIDTH] + ELLIPSIS
    return text.ljust(NAME_COLUMN_WIDTH)


def format_detail_fields(metadata: Metadata | None, owner: str | None, group: str | None) -> str:
    """Render the verbose owner/group/size/blocks/type columns."""
    if metadata is None:
        return f"  {UNKNOWN_NAME:>8}:{UNKNOWN_NAME:<8}  {0:>10}  {0:>8}  {UNKNOWN_NAME}"
    user = owner if owner is not None else UNKNOWN_NAME
    group_label = group if group is not None else UNKNOWN_NAME
    return (
        f"  {user:>8}:{group_label:<8}  {metadata.size:>10}  {metadata.blocks:>8}  {type_code(metadata.kind)}"
    )


def render_line(
    prefix: str,
    name: str,
    options: DisplayOptions,
    metadata: Metadata | None = None,
    owner: str | None = None,
    group: str | None = None,
) -> str:
    """Render one listing row (without the trailing newline)."""
    line = format_name_column(prefix + name, options.verbose)
    if options.verbose:
        line += format_detail_fields(metadata, owner, group)
    return line


def render_error_line(prefix: str, message: str, tree_view: bool) -> str:
    """Render the row standing in for a directory that could not be listed."""
    return f"{next_prefix(prefix, True, tree_view)}ERROR: {message}"


__all__ = [
    "NAME_COLUMN_WIDTH",
    "TRUNCATED_NAME_WIDTH",
    "format_detail_fields",
    "format_name_column",
    "next_prefix",
    "render_error_line",
    "render_line",
    "type_code",
]
