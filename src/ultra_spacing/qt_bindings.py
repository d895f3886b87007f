"""PyQt6 adapters for spacing profiles and optical shadows.

Resolves profiles from a live widget (its size and layout direction) and
applies computed values back onto widgets and layouts. Widgets themselves
(gaps, grids, containers) stay in the view layer; this module only bridges
values.

Usage:
    spacing = spacing_for_widget(self)
    apply_padding(self.layout(), spacing.page_padding)
    apply_subtle_shadow(card, elevation=2.0)
"""

from __future__ import annotations

import math
from typing import Optional

from PyQt6.QtCore import QMarginsF, Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QLayout, QWidget

from .breakpoints import Breakpoint
from .cache import (
    BreakpointCache,
    SpacingCache,
    default_breakpoint_cache,
    default_spacing_cache,
)
from .optical import subtle_shadow
from .profile import SpacingProfile

__all__ = [
    "is_rtl_widget",
    "spacing_for_widget",
    "breakpoint_for_widget",
    "apply_padding",
    "apply_subtle_shadow",
]


def is_rtl_widget(widget: QWidget) -> bool:
    return widget.layoutDirection() == Qt.LayoutDirection.RightToLeft


def spacing_for_widget(widget: QWidget, cache: Optional[SpacingCache] = None) -> SpacingProfile:
    size = widget.size()
    c = cache or default_spacing_cache()
    return c.resolve_size(float(size.width()), float(size.height()), is_rtl=is_rtl_widget(widget))


def breakpoint_for_widget(widget: QWidget, cache: Optional[BreakpointCache] = None) -> Breakpoint:
    size = widget.size()
    c = cache or default_breakpoint_cache()
    return c.detect(float(size.width()), float(size.height()))


def apply_padding(layout: QLayout, margins: QMarginsF) -> None:
    """Set layout contents margins, rounding to whole pixels."""
    layout.setContentsMargins(
        int(math.floor(margins.left() + 0.5)),
        int(math.floor(margins.top() + 0.5)),
        int(math.floor(margins.right() + 0.5)),
        int(math.floor(margins.bottom() + 0.5)),
    )


def apply_subtle_shadow(
    widget: QWidget, elevation: float = 1.0, color: Optional[QColor] = None
) -> None:
    """Attach the optical shadow for an elevation; zero or less clears it."""
    if elevation <= 0:
        widget.setGraphicsEffect(None)  # type: ignore[arg-type]
        return
    spec = subtle_shadow(color=color, elevation=elevation)[0]
    widget.setGraphicsEffect(spec.to_effect())
