"""Responsive spacing utilities.

Maps a viewport's shortest side and text direction to precomputed spacing,
layout and typography values, and provides optical adjustment formulas for
padding, shadows, radii and text metrics.

Usage:
    from ultra_spacing import cached_resolve
    spacing = cached_resolve(390.0, is_rtl=False)
    layout.setContentsMargins(spacing.page_padding.toMargins())
"""

from .tables import (  # noqa: F401
    SpacingTables,
    DEFAULT_TABLES,
    TableValidationError,
    load_tables,
    default_tables,
)
from .breakpoints import (  # noqa: F401
    Breakpoint,
    BreakpointConsistencyError,
    list_breakpoints,
    get_breakpoint,
    breakpoint_at,
    resolve_breakpoint,
    classify_width,
    shortest_side,
)
from .cache import (  # noqa: F401
    SingleSlotCache,
    BreakpointCache,
    SpacingCache,
    cached_resolve,
    cached_resolve_size,
    detect_breakpoint,
    invalidate_cache,
)
from .directional import (  # noqa: F401
    AxisAlignment,
    DirectionalInsets,
)
from .profile import SpacingProfile, grid_item_width  # noqa: F401
from .responsive_value import (  # noqa: F401
    ResponsiveValue,
    Direct,
    Lazy,
    responsive_switch,
)
from . import optical  # noqa: F401

__all__ = [
    "SpacingTables",
    "DEFAULT_TABLES",
    "TableValidationError",
    "load_tables",
    "default_tables",
    "Breakpoint",
    "BreakpointConsistencyError",
    "list_breakpoints",
    "get_breakpoint",
    "breakpoint_at",
    "resolve_breakpoint",
    "classify_width",
    "shortest_side",
    "SingleSlotCache",
    "BreakpointCache",
    "SpacingCache",
    "cached_resolve",
    "cached_resolve_size",
    "detect_breakpoint",
    "invalidate_cache",
    "AxisAlignment",
    "DirectionalInsets",
    "SpacingProfile",
    "grid_item_width",
    "ResponsiveValue",
    "Direct",
    "Lazy",
    "responsive_switch",
    "optical",
]
