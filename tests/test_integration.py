"""End-to-end scenarios across resolution, profiles and optical helpers."""

from ultra_spacing import cached_resolve, cached_resolve_size, invalidate_cache, optical


def test_portrait_phone():
    spacing = cached_resolve(300.0)
    assert spacing.breakpoint_index == 0
    assert spacing.is_mobile
    assert spacing.columns == 1


def test_landscape_phone():
    spacing = cached_resolve(300.0, is_landscape=True)
    assert spacing.breakpoint_index == 0
    assert spacing.columns == 2


def test_desktop():
    spacing = cached_resolve(1400.0)
    assert spacing.breakpoint_index == 7
    assert spacing.is_desktop
    assert spacing.max_content_width == 1200


def test_font_size_correction():
    assert optical.adjust_font_size(16.0) == 15.5
    assert optical.adjust_font_size(16.0, is_arabic=True) == 16.0


def test_first_list_item_margin():
    m = optical.list_item_margin(vertical=12, horizontal=16, is_first=True, is_last=False)
    assert m.top() == 12
    assert m.bottom() == 6


def test_balanced_container_padding_rtl():
    m = optical.balanced_container_padding(
        base=16, leading_factor=1.1, trailing_factor=0.9, is_rtl=True
    )
    assert m.left() == 16 * 0.9
    assert m.right() == 16 * 1.1


def test_rotation_keeps_breakpoint_but_changes_columns():
    portrait = cached_resolve_size(600.0, 960.0)
    landscape = cached_resolve_size(960.0, 600.0)
    assert portrait.breakpoint_index == landscape.breakpoint_index == 3
    assert (portrait.columns, landscape.columns) == (2, 3)
    invalidate_cache()
    assert cached_resolve_size(600.0, 960.0) == portrait


def test_rtl_profile_padding_resolution():
    spacing = cached_resolve(820.0, is_rtl=True)
    insets = spacing.directional(start=spacing.lg, end=spacing.sm)
    margins = spacing.resolve_insets(insets)
    assert margins.right() == spacing.lg
    assert margins.left() == spacing.sm
