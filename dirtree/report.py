"""Per-root driver: headers, listings, summaries and the grand total."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .summary import Summary
from .tree_model import DisplayOptions
from .walk import visit

RULE = "-" * 100
PLAIN_HEADER = "Name".ljust(100)
VERBOSE_HEADER = "Name".ljust(60) + "User:Group           Size    Blocks Type "


def summary_header(options: DisplayOptions) -> str:
    return VERBOSE_HEADER if options.verbose else PLAIN_HEADER


def format_root_summary(summary: Summary, options: DisplayOptions) -> str:
    """Render the closing sentence for one root (without trailing blank line)."""
    sentence = summary.describe()
    if options.verbose:
        return f"{sentence[:68]:<68}   {summary.size:>14} {summary.blocks:>9}"
    return sentence


def format_grand_total(total: Summary, root_count: int, options: DisplayOptions) -> str:
    lines = [
        f"Analyzed {root_count} directories:",
        f"  total # of files:        {total.files:>16}",
        f"  total # of directories:  {total.directories:>16}",
        f"  total # of links:        {total.links:>16}",
        f"  total # of pipes:        {total.fifos:>16}",
        f"  total # of sockets:      {total.sockets:>16}",
    ]
    if options.verbose:
        lines.append(f"  total file size:         {total.size:>16}")
        lines.append(f"  total # of blocks:       {total.blocks:>16}")
    return "\n".join(lines)


def run_roots(roots: Sequence[str], options: DisplayOptions, out: TextIO | None = None) -> Summary:
    """List every root in order and return the grand total.

    The grand total only accumulates while summaries are enabled; it is
    printed when more than one root was given.
    """
    stream = out if out is not None else sys.stdout
    total = Summary()
    for root in roots:
        root_summary = Summary()
        if options.summary:
            stream.write(summary_header(options) + "\n")
            stream.write(RULE + "\n")
        stream.write(f"{root}\n")
        visit(root, "", root_summary, options, stream)
        if options.summary:
            stream.write(RULE + "\n")
            stream.write(format_root_summary(root_summary, options) + "\n\n")
            total.combine(root_summary)

    if options.summary and len(roots) > 1:
        stream.write(format_grand_total(total, len(roots), options) + "\n")
    return total


__all__ = [
    "format_grand_total",
    "format_root_summary",
    "run_roots",
    "summary_header",
]
