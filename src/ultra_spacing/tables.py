"""Breakpoint spacing tables: defaults, loading and validation.

Responsibilities:
- Hold the per-breakpoint constant tables in a single immutable object.
- Validate table shape (7 thresholds, 8 rows per array) at construction.
- Load replacement tables from JSON for experimentation.

All arrays are indexed by the breakpoint index produced by
`breakpoints.resolve_breakpoint` (0 = phone_small ... 7 = desktop).

Usage:
    from ultra_spacing.tables import load_tables
    tables = load_tables("compact_tables.json")
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
import json
import logging
import math
from typing import Any, Dict, Mapping, Sequence, Tuple

from . import settings

_logger = logging.getLogger(__name__)

BREAKPOINT_COUNT = 8


class TableValidationError(RuntimeError):
    """Raised when a spacing table is missing entries or is malformed."""


@dataclass(frozen=True)
class SpacingTables:
    """Per-breakpoint constants.

    Attributes
    ----------
    thresholds: tuple[float, ...]
        Seven ascending minimum widths; threshold ``i`` opens breakpoint ``i + 1``.
    base_values: tuple[float, ...]
        Base spacing unit per breakpoint.
    margin_scale / gutter_scale: tuple[float, ...]
        Multipliers applied to the base unit for margins and gutters.
    grid_columns: tuple[tuple[int, int], ...]
        ``(portrait, landscape)`` column counts per breakpoint.
    max_content_width: tuple[float, ...]
        Content width cap per breakpoint (``math.inf`` for unbounded).
    """

    thresholds: Tuple[float, ...] = (375.0, 430.0, 500.0, 680.0, 820.0, 1000.0, 1200.0)
    base_values: Tuple[float, ...] = (4.0, 4.6, 5.2, 6.0, 6.8, 7.6, 8.0, 8.0)
    margin_scale: Tuple[float, ...] = (4.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0)
    gutter_scale: Tuple[float, ...] = (2.0, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0)
    grid_columns: Tuple[Tuple[int, int], ...] = (
        (1, 2),  # phone_small
        (1, 2),  # phone_medium
        (2, 3),  # phone_large
        (2, 3),  # tablet_small
        (3, 4),  # tablet_medium
        (4, 5),  # tablet_large
        (5, 6),  # tablet_xlarge
        (6, 6),  # desktop
    )
    max_content_width: Tuple[float, ...] = (
        math.inf,
        math.inf,
        math.inf,
        680.0,
        760.0,
        840.0,
        1000.0,
        1200.0,
    )

    def __post_init__(self) -> None:
        _validate_tables(self)

    def row(self, index: int) -> Dict[str, Any]:
        """Return every value for one breakpoint (debugging / docs helper)."""
        if not 0 <= index < BREAKPOINT_COUNT:
            raise IndexError(f"Breakpoint index out of range: {index}")
        return {
            "base": self.base_values[index],
            "margin_scale": self.margin_scale[index],
            "gutter_scale": self.gutter_scale[index],
            "grid_columns": self.grid_columns[index],
            "max_content_width": self.max_content_width[index],
        }


def _validate_tables(t: SpacingTables) -> None:
    if len(t.thresholds) != BREAKPOINT_COUNT - 1:
        raise TableValidationError(
            f"thresholds must have {BREAKPOINT_COUNT - 1} entries, got {len(t.thresholds)}"
        )
    for prev, cur in zip(t.thresholds, t.thresholds[1:]):
        if not cur > prev:
            raise TableValidationError(f"thresholds must be strictly ascending: {t.thresholds}")
    if t.thresholds[0] <= 0:
        raise TableValidationError("First threshold must be positive")
    for name in ("base_values", "margin_scale", "gutter_scale", "grid_columns", "max_content_width"):
        values = getattr(t, name)
        if len(values) != BREAKPOINT_COUNT:
            raise TableValidationError(
                f"{name} must have {BREAKPOINT_COUNT} entries, got {len(values)}"
            )
    if list(t.base_values) != sorted(t.base_values):
        raise TableValidationError("base_values must be ascending")
    previous: Tuple[int, int] = (0, 0)
    for idx, pair in enumerate(t.grid_columns):
        if len(pair) != 2:
            raise TableValidationError(f"grid_columns[{idx}] must be a (portrait, landscape) pair")
        portrait, landscape = pair
        if portrait > landscape:
            raise TableValidationError(f"grid_columns[{idx}] portrait exceeds landscape")
        if portrait < previous[0] or landscape < previous[1]:
            raise TableValidationError(f"grid_columns[{idx}] decreases from previous row")
        previous = (portrait, landscape)


def _coerce_row(name: str, value: Any) -> Tuple[Any, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise TableValidationError(f"{name} must be a list")
    if name == "grid_columns":
        rows = []
        for item in value:
            if not isinstance(item, Sequence) or isinstance(item, str):
                raise TableValidationError("grid_columns entries must be [portrait, landscape] lists")
            for v in item:
                if not isinstance(v, (int, float)) or isinstance(v, bool):
                    raise TypeError(f"grid_columns entries must be numeric, got {type(v)!r}")
            rows.append(tuple(int(v) for v in item))
        return tuple(rows)
    result = []
    for item in value:
        if item is None and name == "max_content_width":
            result.append(math.inf)
            continue
        if not isinstance(item, (int, float)) or isinstance(item, bool):
            raise TypeError(f"{name} entries must be numeric, got {type(item)!r}")
        result.append(float(item))
    return tuple(result)


def tables_from_mapping(data: Mapping[str, Any]) -> SpacingTables:
    """Build tables from a mapping; omitted keys keep their default rows."""
    known = {f.name for f in fields(SpacingTables)}
    unknown = set(data) - known
    if unknown:
        raise TableValidationError(f"Unknown table keys: {sorted(unknown)}")
    kwargs = {name: _coerce_row(name, value) for name, value in data.items()}
    return SpacingTables(**kwargs)


def load_tables(path: str | Path) -> SpacingTables:
    """Load spacing tables from JSON.

    Parameters
    ----------
    path: JSON file whose keys mirror `SpacingTables` field names. ``null`` in
        ``max_content_width`` denotes an unbounded width.
    """
    table_path = Path(path)
    if not table_path.exists():
        raise FileNotFoundError(f"Spacing table file not found: {table_path}")
    with table_path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, Mapping):
        raise TableValidationError("Spacing table file must contain a JSON object")
    tables = tables_from_mapping(data)
    _logger.info("loaded spacing tables from %s", table_path)
    return tables


DEFAULT_TABLES = SpacingTables()


def default_tables() -> SpacingTables:
    """Tables used by the module-level caches (env override aware)."""
    if settings.TABLES_PATH:
        return load_tables(settings.TABLES_PATH)
    return DEFAULT_TABLES


__all__ = [
    "BREAKPOINT_COUNT",
    "SpacingTables",
    "TableValidationError",
    "DEFAULT_TABLES",
    "default_tables",
    "load_tables",
    "tables_from_mapping",
]
