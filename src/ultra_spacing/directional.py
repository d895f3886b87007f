"""Direction-aware insets and alignment selectors.

"Start" and "end" are reading-direction relative: start is the left edge in
LTR layouts and the right edge in RTL layouts. Every selector here is a
two-way branch on the RTL flag, so an RTL result is always the mirror of the
LTR result for the same inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QMarginsF, Qt

__all__ = [
    "AxisAlignment",
    "DirectionalInsets",
    "start_alignment",
    "end_alignment",
    "start_axis",
    "end_axis",
    "start_text",
    "end_text",
    "layout_direction",
]


class AxisAlignment(Enum):
    """Placement of children along a box layout's main or cross axis."""

    START = "start"
    CENTER = "center"
    END = "end"


@dataclass(frozen=True)
class DirectionalInsets:
    """Insets expressed with start/end instead of left/right."""

    start: float = 0.0
    top: float = 0.0
    end: float = 0.0
    bottom: float = 0.0

    @classmethod
    def symmetric(cls, horizontal: float = 0.0, vertical: float = 0.0) -> "DirectionalInsets":
        return cls(start=horizontal, top=vertical, end=horizontal, bottom=vertical)

    def resolve(self, is_rtl: bool) -> QMarginsF:
        """Map to absolute left/top/right/bottom margins for a text direction."""
        if is_rtl:
            return QMarginsF(self.end, self.top, self.start, self.bottom)
        return QMarginsF(self.start, self.top, self.end, self.bottom)


def start_alignment(is_rtl: bool) -> Qt.AlignmentFlag:
    if is_rtl:
        return Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
    return Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter


def end_alignment(is_rtl: bool) -> Qt.AlignmentFlag:
    return start_alignment(not is_rtl)


def start_axis(is_rtl: bool) -> AxisAlignment:
    return AxisAlignment.END if is_rtl else AxisAlignment.START


def end_axis(is_rtl: bool) -> AxisAlignment:
    return AxisAlignment.START if is_rtl else AxisAlignment.END


def start_text(is_rtl: bool) -> Qt.AlignmentFlag:
    return Qt.AlignmentFlag.AlignRight if is_rtl else Qt.AlignmentFlag.AlignLeft


def end_text(is_rtl: bool) -> Qt.AlignmentFlag:
    return Qt.AlignmentFlag.AlignLeft if is_rtl else Qt.AlignmentFlag.AlignRight


def layout_direction(is_rtl: bool) -> Qt.LayoutDirection:
    return Qt.LayoutDirection.RightToLeft if is_rtl else Qt.LayoutDirection.LeftToRight
