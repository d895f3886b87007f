"""Responsive breakpoints keyed on the viewport's shortest side.

The shortest side (the smaller of width and height) is the resolution
input, so rotating a device alone never changes its breakpoint. Orientation
is carried separately (see `SpacingProfile.is_landscape`).

Breakpoint Scale (default tables):
 - phone_small:   < 375px
 - phone_medium:  >=375 & < 430px
 - phone_large:   >=430 & < 500px
 - tablet_small:  >=500 & < 680px
 - tablet_medium: >=680 & < 820px
 - tablet_large:  >=820 & < 1000px
 - tablet_xlarge: >=1000 & < 1200px
 - desktop:       >=1200px

Width comparisons are inclusive on the lower bound and exclusive on the upper
bound except for the final tier.

Out-of-domain input policy:
 - Negative finite widths are clamped to 0 (smallest breakpoint).
 - NaN and infinite widths raise ValueError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Dict, List, Optional, Tuple

from .tables import BREAKPOINT_COUNT, DEFAULT_TABLES, SpacingTables

_logger = logging.getLogger(__name__)

__all__ = [
    "Breakpoint",
    "BreakpointConsistencyError",
    "list_breakpoints",
    "get_breakpoint",
    "breakpoint_at",
    "resolve_breakpoint",
    "classify_width",
    "shortest_side",
]


class BreakpointConsistencyError(RuntimeError):
    """Raised when a breakpoint index falls outside the 0..7 table range."""


_IDS: Tuple[Tuple[str, str], ...] = (
    ("phone_small", "Phone Small"),
    ("phone_medium", "Phone Medium"),
    ("phone_large", "Phone Large"),
    ("tablet_small", "Tablet Small"),
    ("tablet_medium", "Tablet Medium"),
    ("tablet_large", "Tablet Large"),
    ("tablet_xlarge", "Tablet XL"),
    ("desktop", "Desktop"),
)


@dataclass(frozen=True)
class Breakpoint:
    """Resolved breakpoint category.

    Attributes
    ----------
    index: int
        Ordinal position 0..7, used to index the spacing tables.
    id: str
        Semantic identifier (phone_small .. desktop).
    min_width: float
        Inclusive lower pixel boundary.
    max_width: float
        Exclusive upper pixel boundary (-1 for the open-ended final tier).
    label: str
        Human readable label.
    """

    index: int
    id: str
    min_width: float
    max_width: float
    label: str
    tables: SpacingTables = field(default=DEFAULT_TABLES, repr=False, compare=False)

    def is_within(self, width: float) -> bool:
        if self.max_width == -1:
            return width >= self.min_width
        return self.min_width <= width < self.max_width

    @property
    def is_phone(self) -> bool:
        return self.index <= 2

    @property
    def is_tablet(self) -> bool:
        return 3 <= self.index <= 6

    @property
    def is_desktop(self) -> bool:
        return self.index == 7

    @property
    def is_small(self) -> bool:
        return self.index <= 1

    @property
    def is_large(self) -> bool:
        return self.index >= 5

    def grid_columns(self, is_landscape: bool) -> int:
        return self.tables.grid_columns[self.index][1 if is_landscape else 0]


def _build_registry(tables: SpacingTables) -> Tuple[Breakpoint, ...]:
    bounds = (0.0,) + tuple(tables.thresholds)
    result = []
    for index, (bp_id, label) in enumerate(_IDS):
        upper = bounds[index + 1] if index + 1 < len(bounds) else -1
        result.append(Breakpoint(index, bp_id, bounds[index], upper, label, tables))
    return tuple(result)


_REGISTRY: Tuple[Breakpoint, ...] = _build_registry(DEFAULT_TABLES)
_BY_ID: Dict[str, Breakpoint] = {bp.id: bp for bp in _REGISTRY}


def list_breakpoints(tables: Optional[SpacingTables] = None) -> List[Breakpoint]:
    if tables is None or tables == DEFAULT_TABLES:
        return list(_REGISTRY)
    return list(_build_registry(tables))


def get_breakpoint(bp_id: str) -> Breakpoint:
    bp = _BY_ID.get(bp_id)
    if bp is None:
        raise KeyError(f"Unknown breakpoint id: {bp_id}")
    return bp


def breakpoint_at(index: int, tables: Optional[SpacingTables] = None) -> Breakpoint:
    """Return the registry entry for an index, failing loudly when out of range."""
    if not 0 <= index < BREAKPOINT_COUNT:
        raise BreakpointConsistencyError(f"Breakpoint index out of range: {index}")
    return list_breakpoints(tables)[index]


def resolve_breakpoint(width: float, tables: SpacingTables = DEFAULT_TABLES) -> int:
    """Return the breakpoint index (0..7) for a shortest-side width.

    Scans thresholds from the highest down; the first threshold the width
    reaches opens breakpoint ``i + 1``.
    """
    if math.isnan(width) or math.isinf(width):
        raise ValueError(f"Width must be finite, got {width!r}")
    if width < 0:
        _logger.debug("negative width %r clamped to 0", width)
        width = 0.0
    thresholds = tables.thresholds
    for i in range(len(thresholds) - 1, -1, -1):
        if width >= thresholds[i]:
            return i + 1
    return 0


def classify_width(width: float, tables: Optional[SpacingTables] = None) -> Breakpoint:
    """Return the Breakpoint matching the given shortest-side width."""
    index = resolve_breakpoint(width, tables or DEFAULT_TABLES)
    return breakpoint_at(index, tables)


def shortest_side(width: float, height: float) -> float:
    """Smaller viewport dimension; both must be finite."""
    for value in (width, height):
        if math.isnan(value) or math.isinf(value):
            raise ValueError(f"Viewport dimensions must be finite, got {width!r} x {height!r}")
    return min(width, height)
