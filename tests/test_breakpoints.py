"""Tests for shortest-side breakpoint resolution."""

import math

import pytest
from ultra_spacing.breakpoints import (
    Breakpoint,
    BreakpointConsistencyError,
    breakpoint_at,
    classify_width,
    get_breakpoint,
    list_breakpoints,
    resolve_breakpoint,
    shortest_side,
)
from ultra_spacing.tables import DEFAULT_TABLES, SpacingTables

THRESHOLDS = [375, 430, 500, 680, 820, 1000, 1200]


def test_breakpoints_defined_and_ordered():
    bps = list_breakpoints()
    ids = [b.id for b in bps]
    assert ids == [
        "phone_small",
        "phone_medium",
        "phone_large",
        "tablet_small",
        "tablet_medium",
        "tablet_large",
        "tablet_xlarge",
        "desktop",
    ]
    assert [b.index for b in bps] == list(range(8))
    mins = [b.min_width for b in bps]
    assert mins == sorted(mins)
    assert bps[-1].max_width == -1


def test_resolve_width_edges():
    # Inclusive lower bounds, exclusive upper bounds
    assert resolve_breakpoint(0) == 0
    assert resolve_breakpoint(374.999) == 0
    assert resolve_breakpoint(375) == 1
    assert resolve_breakpoint(429) == 1
    assert resolve_breakpoint(430) == 2
    assert resolve_breakpoint(499.5) == 2
    assert resolve_breakpoint(500) == 3
    assert resolve_breakpoint(680) == 4
    assert resolve_breakpoint(820) == 5
    assert resolve_breakpoint(999) == 5
    assert resolve_breakpoint(1000) == 6
    assert resolve_breakpoint(1199) == 6
    assert resolve_breakpoint(1200) == 7
    assert resolve_breakpoint(5000) == 7


@pytest.mark.parametrize("threshold", THRESHOLDS)
def test_threshold_opens_next_breakpoint(threshold):
    below = resolve_breakpoint(threshold - 1e-6)
    at = resolve_breakpoint(threshold)
    assert at == below + 1
    assert at == THRESHOLDS.index(threshold) + 1


def test_monotonic_over_width_range():
    previous = 0
    width = 0.0
    while width < 1600:
        current = resolve_breakpoint(width)
        assert current >= previous
        previous = current
        width += 7.5


def test_classify_matches_is_within():
    for width in (0, 200, 375, 431, 650, 819, 1000, 1300):
        bp = classify_width(width)
        assert isinstance(bp, Breakpoint)
        assert bp.is_within(width)


def test_negative_width_clamped_to_smallest():
    assert resolve_breakpoint(-10) == 0
    assert classify_width(-0.5).id == "phone_small"


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_width_rejected(bad):
    with pytest.raises(ValueError):
        resolve_breakpoint(bad)


def test_device_predicates():
    flags = [(b.is_phone, b.is_tablet, b.is_desktop) for b in list_breakpoints()]
    assert flags[:3] == [(True, False, False)] * 3
    assert flags[3:7] == [(False, True, False)] * 4
    assert flags[7] == (False, False, True)
    assert [b.is_small for b in list_breakpoints()] == [True, True] + [False] * 6
    assert [b.is_large for b in list_breakpoints()] == [False] * 5 + [True] * 3


def test_grid_columns_by_orientation():
    small = get_breakpoint("phone_small")
    assert small.grid_columns(False) == 1
    assert small.grid_columns(True) == 2
    assert get_breakpoint("desktop").grid_columns(True) == 6


def test_specific_breakpoint_lookup():
    bp = get_breakpoint("tablet_medium")
    assert bp.index == 4
    assert bp.min_width == 680
    assert bp.label == "Tablet Medium"


def test_unknown_breakpoint_raises():
    with pytest.raises(KeyError):
        get_breakpoint("mega")


@pytest.mark.parametrize("index", [-1, 8, 42])
def test_out_of_range_index_is_fatal(index):
    with pytest.raises(BreakpointConsistencyError):
        breakpoint_at(index)


def test_custom_tables_shift_boundaries():
    tables = SpacingTables(thresholds=(300.0, 400.0, 500.0, 600.0, 700.0, 800.0, 900.0))
    assert resolve_breakpoint(350, tables) == 1
    assert resolve_breakpoint(350, DEFAULT_TABLES) == 0
    bp = classify_width(950, tables)
    assert bp.id == "desktop"
    assert bp.min_width == 900.0


def test_shortest_side():
    assert shortest_side(800, 390) == 390
    assert shortest_side(390, 800) == 390


@pytest.mark.parametrize("size", [(math.nan, 500.0), (500.0, math.nan), (math.inf, 500.0), (500.0, -math.inf)])
def test_shortest_side_rejects_non_finite(size):
    with pytest.raises(ValueError):
        shortest_side(*size)


def test_classified_breakpoint_carries_its_tables():
    tables = SpacingTables(grid_columns=((2, 3),) * 8)
    bp = classify_width(300, tables)
    assert bp.tables is tables
    assert bp.grid_columns(False) == 2
    assert classify_width(300).grid_columns(False) == 1
