"""Tree-row rendering primitives and display options."""

from __future__ import annotations

from .types import DisplayOptions
from .rendering import (
    format_detail_fields,
    format_name_column,
    next_prefix,
    render_error_line,
    render_line,
    type_code,
)

__all__ = [
    "DisplayOptions",
    "format_detail_fields",
    "format_name_column",
    "next_prefix",
    "render_error_line",
    "render_line",
    "type_code",
]
