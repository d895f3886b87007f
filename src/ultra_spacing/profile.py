"""Derived spacing values for one resolved breakpoint.

A `SpacingProfile` is an immutable snapshot of ``(breakpoint_index, is_rtl,
is_landscape, screen_width)``. Every accessor is a pure function of those
fields and the spacing tables, so profiles can be shared freely between
views rendered under the same device configuration.

Semantic tiers are fixed multiples of the breakpoint's base unit:

    micro 0.25 | xs 0.5 | sm 1 | md 2 | lg 3 | xl 4 | xxl 6 | xxxl 8 | huge 12 | massive 16

Profiles are normally obtained from `cache.SpacingCache.resolve` (or the
module-level `cached_resolve`) rather than constructed directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Dict, Optional, TypeVar

from PyQt6.QtCore import QMarginsF, Qt

from . import directional, settings
from .breakpoints import Breakpoint, BreakpointConsistencyError, breakpoint_at
from .directional import AxisAlignment, DirectionalInsets
from .tables import BREAKPOINT_COUNT, DEFAULT_TABLES, SpacingTables

T = TypeVar("T")

__all__ = ["SpacingProfile", "grid_item_width", "TIER_MULTIPLIERS"]

TIER_MULTIPLIERS: Dict[str, float] = {
    "micro": 0.25,
    "xs": 0.5,
    "sm": 1.0,
    "md": 2.0,
    "lg": 3.0,
    "xl": 4.0,
    "xxl": 6.0,
    "xxxl": 8.0,
    "huge": 12.0,
    "massive": 16.0,
}


@dataclass(frozen=True)
class SpacingProfile:
    breakpoint_index: int
    is_rtl: bool = False
    is_landscape: bool = False
    screen_width: float = 0.0
    tables: SpacingTables = field(default=DEFAULT_TABLES, repr=False)

    def __post_init__(self) -> None:
        if not 0 <= self.breakpoint_index < BREAKPOINT_COUNT:
            raise BreakpointConsistencyError(
                f"Breakpoint index out of range: {self.breakpoint_index}"
            )

    @classmethod
    def for_breakpoint(
        cls,
        index: int,
        is_rtl: bool = False,
        is_landscape: bool = False,
        screen_width: float = 0.0,
        tables: SpacingTables = DEFAULT_TABLES,
    ) -> "SpacingProfile":
        return cls(index, is_rtl, is_landscape, screen_width, tables)

    @property
    def breakpoint(self) -> Breakpoint:
        return breakpoint_at(self.breakpoint_index, self.tables)

    # --- Core values ------------------------------------------------------
    @property
    def base(self) -> float:
        return self.tables.base_values[self.breakpoint_index]

    @property
    def margin(self) -> float:
        return self.base * self.tables.margin_scale[self.breakpoint_index]

    @property
    def gutter(self) -> float:
        return self.base * self.tables.gutter_scale[self.breakpoint_index]

    def tier(self, name: str) -> float:
        """Semantic tier by name (e.g. ``"md"``)."""
        multiplier = TIER_MULTIPLIERS.get(name)
        if multiplier is None:
            raise KeyError(f"Unknown spacing tier: {name}")
        return self.base * multiplier

    @property
    def micro(self) -> float:
        return self.base * 0.25

    @property
    def xs(self) -> float:
        return self.base * 0.5

    @property
    def sm(self) -> float:
        return self.base

    @property
    def md(self) -> float:
        return self.base * 2

    @property
    def lg(self) -> float:
        return self.base * 3

    @property
    def xl(self) -> float:
        return self.base * 4

    @property
    def xxl(self) -> float:
        return self.base * 6

    @property
    def xxxl(self) -> float:
        return self.base * 8

    @property
    def huge(self) -> float:
        return self.base * 12

    @property
    def massive(self) -> float:
        return self.base * 16

    # --- Device checks ----------------------------------------------------
    @property
    def is_mobile(self) -> bool:
        return self.breakpoint_index <= 2

    @property
    def is_tablet(self) -> bool:
        return 3 <= self.breakpoint_index <= 6

    @property
    def is_desktop(self) -> bool:
        return self.breakpoint_index == 7

    @property
    def is_small(self) -> bool:
        return self.breakpoint_index <= 1

    @property
    def is_large(self) -> bool:
        return self.breakpoint_index >= 5

    # --- Layout -----------------------------------------------------------
    @property
    def columns(self) -> int:
        return self.tables.grid_columns[self.breakpoint_index][1 if self.is_landscape else 0]

    @property
    def max_content_width(self) -> float:
        return self.tables.max_content_width[self.breakpoint_index]

    # --- Padding bundles --------------------------------------------------
    @property
    def page_padding(self) -> QMarginsF:
        return QMarginsF(self.margin, self.md, self.margin, self.md)

    @property
    def card_padding(self) -> QMarginsF:
        v = self.md if self.is_mobile else self.lg
        return QMarginsF(v, v, v, v)

    @property
    def button_padding(self) -> QMarginsF:
        vertical = self.sm if self.is_mobile else self.md
        return QMarginsF(self.lg, vertical, self.lg, vertical)

    @property
    def input_padding(self) -> QMarginsF:
        return QMarginsF(self.md, self.sm, self.md, self.sm)

    @property
    def list_item_padding(self) -> QMarginsF:
        return QMarginsF(self.md, self.sm, self.md, self.sm)

    @property
    def modal_padding(self) -> QMarginsF:
        return QMarginsF(self.lg, self.lg, self.lg, self.lg)

    # --- Directional padding ----------------------------------------------
    @property
    def page_directional_padding(self) -> DirectionalInsets:
        return DirectionalInsets.symmetric(horizontal=self.margin, vertical=self.md)

    def directional(
        self, start: float = 0.0, end: float = 0.0, top: float = 0.0, bottom: float = 0.0
    ) -> DirectionalInsets:
        return DirectionalInsets(start=start, top=top, end=end, bottom=bottom)

    def horizontal_directional(self, value: float) -> DirectionalInsets:
        return DirectionalInsets.symmetric(horizontal=value)

    def vertical_directional(self, value: float) -> DirectionalInsets:
        return DirectionalInsets.symmetric(vertical=value)

    def resolve_insets(self, insets: DirectionalInsets) -> QMarginsF:
        """Absolute margins for directional insets under this profile's direction."""
        return insets.resolve(self.is_rtl)

    # --- Alignment --------------------------------------------------------
    @property
    def start_alignment(self) -> Qt.AlignmentFlag:
        return directional.start_alignment(self.is_rtl)

    @property
    def end_alignment(self) -> Qt.AlignmentFlag:
        return directional.end_alignment(self.is_rtl)

    @property
    def start_cross(self) -> AxisAlignment:
        return directional.start_axis(self.is_rtl)

    @property
    def end_cross(self) -> AxisAlignment:
        return directional.end_axis(self.is_rtl)

    @property
    def start_main(self) -> AxisAlignment:
        return directional.start_axis(self.is_rtl)

    @property
    def end_main(self) -> AxisAlignment:
        return directional.end_axis(self.is_rtl)

    @property
    def start_text(self) -> Qt.AlignmentFlag:
        return directional.start_text(self.is_rtl)

    @property
    def end_text(self) -> Qt.AlignmentFlag:
        return directional.end_text(self.is_rtl)

    @property
    def layout_direction(self) -> Qt.LayoutDirection:
        return directional.layout_direction(self.is_rtl)

    # --- Selectors --------------------------------------------------------
    def responsive(
        self,
        phone: Optional[T] = None,
        tablet: Optional[T] = None,
        desktop: Optional[T] = None,
        *,
        fallback: T,
    ) -> T:
        """Pick a value for the current device class.

        Order of preference is desktop, tablet, phone, then fallback; a branch
        is only taken when its device predicate holds and its value is set.
        """
        if self.is_desktop and desktop is not None:
            return desktop
        if self.is_tablet and tablet is not None:
            return tablet
        if self.is_mobile and phone is not None:
            return phone
        return fallback

    # --- Figma conversion -------------------------------------------------
    def figma(self, points: int) -> float:
        """Convert a Figma 8pt-grid value to the matching semantic tier.

        12pt maps to ``0.75 * md``, an approximation kept for compatibility.
        Values outside the table scale linearly: ``(points / 8) * sm``.
        """
        mapped = {
            4: self.xs,
            8: self.sm,
            12: self.md * 0.75,
            16: self.md,
            24: self.lg,
            32: self.xl,
            48: self.xxl,
            64: self.xxxl,
            96: self.huge,
        }
        if points in mapped:
            return mapped[points]
        return (points / 8.0) * self.sm

    def figma_scaled(self, points: int) -> float:
        """Figma value grown with the base unit relative to the smallest breakpoint."""
        base_ratio = self.base / settings.REFERENCE_BASE_UNIT
        return (points / 8.0) * self.sm * base_ratio


def grid_item_width(available_width: float, columns: int, spacing: float) -> Optional[float]:
    """Width of one grid cell, or None when no positive finite width exists."""
    if columns <= 0:
        return None
    width = (available_width - spacing * (columns - 1)) / columns
    if not math.isfinite(width) or width <= 0:
        return None
    return width
