"""Optical adjustment formulas.

Perceived size and balance rarely match the mathematically "correct" value:
vertical gaps read smaller than they are, small rounded elements look
over-rounded, Arabic glyphs read smaller than Latin ones at the same pixel
size. The helpers below apply fixed, literal corrections on top of computed
spacing and typography values.

Every function is pure and independent of the breakpoint system. Direction
aware helpers take an explicit ``is_rtl`` flag; the left/right values of an
RTL result are always the mirror of the LTR result.

Public API:
 - adjust_spacing, adjust_font_size, adjust_border_radius
 - asymmetric_list_padding, horizontal_padding, vertical_padding,
   directional_padding, balanced_container_padding, list_item_margin
 - subtle_shadow -> list[ShadowSpec]
 - adjusted_text_style -> TextStyle, adjust_for_rtl
 - arabic_letter_spacing, determine_font_weight
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import List, Optional

from PyQt6.QtCore import QMarginsF
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QGraphicsDropShadowEffect

from .directional import DirectionalInsets

__all__ = [
    "ShadowSpec",
    "TextStyle",
    "adjust_spacing",
    "asymmetric_list_padding",
    "horizontal_padding",
    "vertical_padding",
    "adjust_font_size",
    "subtle_shadow",
    "adjust_border_radius",
    "adjusted_text_style",
    "directional_padding",
    "balanced_container_padding",
    "list_item_margin",
    "arabic_letter_spacing",
    "determine_font_weight",
    "adjust_for_rtl",
]


def _weight_value(weight: QFont.Weight | int) -> int:
    return int(getattr(weight, "value", weight))


@dataclass(frozen=True)
class ShadowSpec:
    """Single shadow layer.

    Qt's drop shadow effect has no spread; `spread_radius` is kept for
    painters that draw shadows themselves.
    """

    color: QColor
    blur_radius: float
    spread_radius: float
    offset_x: float
    offset_y: float

    def to_effect(self) -> QGraphicsDropShadowEffect:
        effect = QGraphicsDropShadowEffect()
        effect.setBlurRadius(self.blur_radius)
        effect.setOffset(self.offset_x, self.offset_y)
        effect.setColor(QColor(self.color))
        return effect


@dataclass(frozen=True)
class TextStyle:
    font_size: float
    font_weight: QFont.Weight
    color: Optional[QColor] = None
    height: Optional[float] = None
    letter_spacing: Optional[float] = None

    def to_font(self, family: Optional[str] = None) -> QFont:
        """Build a QFont; line height is left to the layout using `height`."""
        f = QFont(family) if family else QFont()
        f.setPixelSize(max(1, int(round(self.font_size))))
        f.setWeight(self.font_weight)
        if self.letter_spacing is not None:
            f.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, self.letter_spacing)
        return f


def adjust_spacing(original_spacing: float, factor: float = 1.0) -> float:
    return original_spacing * factor


def asymmetric_list_padding(
    base_horizontal: float,
    is_rtl: bool = False,
    leading_factor: float = 1.1,
    trailing_factor: float = 0.9,
) -> QMarginsF:
    """Heavier leading side, lighter trailing side for horizontal lists."""
    leading = base_horizontal * leading_factor
    trailing = base_horizontal * trailing_factor
    if is_rtl:
        return QMarginsF(trailing, 0.0, leading, 0.0)
    return QMarginsF(leading, 0.0, trailing, 0.0)


def horizontal_padding(value: float) -> QMarginsF:
    return QMarginsF(value, 0.0, value, 0.0)


def vertical_padding(value: float) -> QMarginsF:
    return QMarginsF(0.0, value, 0.0, value)


def adjust_font_size(
    calculated_size: float, adjustment: float = -0.5, is_arabic: bool = False
) -> float:
    # Arabic glyphs read smaller at the same size
    arabic_adjustment = 0.5 if is_arabic else 0.0
    return calculated_size + adjustment + arabic_adjustment


def subtle_shadow(color: Optional[QColor] = None, elevation: float = 1.0) -> List[ShadowSpec]:
    base_opacity = 0.03 * elevation
    alpha = int(math.floor(base_opacity * 255 + 0.5))
    shadow_color = QColor(color) if color is not None else QColor(0, 0, 0)
    shadow_color.setAlpha(min(255, max(0, alpha)))
    return [
        ShadowSpec(
            color=shadow_color,
            blur_radius=8.0 * elevation,
            spread_radius=0.5 * elevation,
            offset_x=0.0,
            offset_y=1.0 * elevation,
        )
    ]


def adjust_border_radius(base_radius: float, element_size: float) -> float:
    """Scale a radius by the element's controlling (smaller) dimension.

    Below 100 the radius shrinks by 10%, above 300 it grows by 10%; sizes in
    [100, 300] keep the radius unchanged.
    """
    if element_size < 100:
        return base_radius * 0.9
    if element_size > 300:
        return base_radius * 1.1
    return base_radius


def _arabic_weight(weight: QFont.Weight | int) -> QFont.Weight:
    value = _weight_value(weight)
    if value >= 800:
        return QFont.Weight.ExtraBold
    if value >= 700:
        return QFont.Weight.Bold
    if value >= 400:
        return QFont.Weight.Normal
    return QFont.Weight.Light


def adjusted_text_style(
    font_size: float,
    font_weight: QFont.Weight,
    color: Optional[QColor] = None,
    height_factor: Optional[float] = None,
    letter_spacing_factor: Optional[float] = None,
    is_arabic: bool = False,
) -> TextStyle:
    """Text style with line height, tracking and weight corrections.

    Line height: Latin 1.3 below 16px else 1.25; Arabic 1.5 below 16px else
    1.4. Letter spacing: always 0 for Arabic; otherwise
    ``font_size * letter_spacing_factor / 100`` when a factor is given, else
    -0.5 above 18px, 0.25 below 14px and 0 in between. Arabic weights are
    clamped to the steps available in common Arabic families.
    """
    if height_factor is not None:
        height = height_factor
    elif is_arabic:
        height = 1.5 if font_size < 16 else 1.4
    else:
        height = 1.3 if font_size < 16 else 1.25

    if is_arabic:
        letter_spacing = 0.0
    elif letter_spacing_factor is not None:
        letter_spacing = font_size * letter_spacing_factor / 100
    elif font_size > 18:
        letter_spacing = -0.5
    elif font_size < 14:
        letter_spacing = 0.25
    else:
        letter_spacing = 0.0

    weight = _arabic_weight(font_weight) if is_arabic else QFont.Weight(_weight_value(font_weight))
    return TextStyle(
        font_size=font_size,
        font_weight=weight,
        color=color,
        height=height,
        letter_spacing=letter_spacing,
    )


def directional_padding(
    start: float,
    end: float,
    top: float = 0.0,
    bottom: float = 0.0,
    is_rtl: bool = False,
) -> QMarginsF:
    return DirectionalInsets(start=start, top=top, end=end, bottom=bottom).resolve(is_rtl)


def balanced_container_padding(
    base: float,
    top_factor: float = 1.0,
    bottom_factor: float = 1.0,
    leading_factor: float = 1.0,
    trailing_factor: float = 1.0,
    is_rtl: bool = False,
    is_arabic: Optional[bool] = None,
) -> QMarginsF:
    """Per-side factors applied to one base value.

    ``is_arabic`` True or False overrides ``is_rtl``; None defers to it.
    """
    rtl = is_rtl if is_arabic is None else is_arabic
    leading = base * leading_factor
    trailing = base * trailing_factor
    top = base * top_factor
    bottom = base * bottom_factor
    if rtl:
        return QMarginsF(trailing, top, leading, bottom)
    return QMarginsF(leading, top, trailing, bottom)


def list_item_margin(
    vertical: float,
    horizontal: Optional[float] = None,
    is_first: bool = False,
    is_last: bool = False,
    leading: Optional[float] = None,
    trailing: Optional[float] = None,
    is_rtl: bool = False,
) -> QMarginsF:
    """Margins for one list item.

    The first item gets the full vertical margin on top and the last item the
    full margin on the bottom; every other edge gets half, so two adjacent
    items add up to one full unit.
    """
    if horizontal is None and (leading is None or trailing is None):
        raise ValueError("Either provide horizontal or both leading and trailing values")
    resolved_leading = leading if leading is not None else horizontal
    resolved_trailing = trailing if trailing is not None else horizontal
    top = vertical if is_first else vertical / 2
    bottom = vertical if is_last else vertical / 2
    if is_rtl:
        return QMarginsF(resolved_trailing, top, resolved_leading, bottom)
    return QMarginsF(resolved_leading, top, resolved_trailing, bottom)


def arabic_letter_spacing(is_arabic: bool, default_spacing: Optional[float] = None) -> Optional[float]:
    if is_arabic:
        return 0.0
    return default_spacing


def determine_font_weight(
    desired_weight: QFont.Weight,
    is_arabic: bool,
    is_heading: bool = False,
    increased_contrast: bool = False,
) -> QFont.Weight:
    """Pick a usable weight for the script and context."""
    value = _weight_value(desired_weight)
    if not is_arabic:
        if increased_contrast and value < 600:
            return QFont.Weight.DemiBold
        return QFont.Weight(value)
    if value >= 800:
        return QFont.Weight.ExtraBold
    if value >= 700:
        return QFont.Weight.Bold
    if value >= 500:
        return QFont.Weight.Bold if is_heading else QFont.Weight.Normal
    if value >= 400:
        return QFont.Weight.Normal
    return QFont.Weight.Light


def adjust_for_rtl(style: TextStyle, is_rtl: bool) -> TextStyle:
    """Drop tracking and open up line height for right-to-left scripts."""
    if not is_rtl:
        return style
    height = style.height * 1.1 if style.height is not None else 1.3
    return replace(style, letter_spacing=0.0, height=height)
