import pytest

from fractol.colors import COLOR_NAMES, ColorLayout, lookup_color, text_to_rgb


@pytest.fixture
def rgb888():
    return ColorLayout.from_masks(0xFF0000, 0x00FF00, 0x0000FF)


@pytest.fixture
def rgb565():
    return ColorLayout.from_masks(0xF800, 0x07E0, 0x001F)


def test_lookup_plain_name():
    assert lookup_color("snow") == 0xFFFAFA


def test_lookup_ignores_case():
    assert lookup_color("Ghost White") == 0xF8F8FF
    assert lookup_color("GHOSTWHITE") == lookup_color("ghostwhite")


def test_lookup_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_numbered_and_gray():
    assert lookup_color("snow2") == 0xEEE9E9
    assert lookup_color("gray50") == 0x7F7F7F
    assert lookup_color("grey50") == lookup_color("gray50")
    assert lookup_color("gray100") == 0xFFFFFF


def test_lookup_none_is_minus_one():
    assert lookup_color("none") == -1


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("no such colour")


def test_table_values_fit_24_bits():
    assert all(-1 <= value <= 0xFFFFFF for value in COLOR_NAMES.values())
    assert all(name == name.lower() for name in COLOR_NAMES)


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff8000") == 0xFF8000
    assert text_to_rgb("#FFA500", None) == lookup_color("orange")


def test_text_to_rgb_hex_stops_at_invalid():
    assert text_to_rgb("#ffzz") == 0xFF
    assert text_to_rgb("#zz") == 0


def test_text_to_rgb_two_words():
    assert text_to_rgb("ghost", "white") == 0xF8F8FF
    assert text_to_rgb("navy", "blue") == lookup_color("navyblue")


def test_text_to_rgb_single_word():
    assert text_to_rgb("Red") == 0xFF0000
    assert text_to_rgb("none") == -1


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("unknown") == 0
    assert text_to_rgb("unknown", "name") == 0


def test_deep_visual_passes_color_through(rgb565):
    assert rgb565.convert(0x123456, 24) == 0x123456
    assert rgb565.convert(0xFF8000, 32) == 0xFF8000


def test_888_layout_keeps_color(rgb888):
    for color in (0x000000, 0xFFFFFF, 0xFF8000, 0x123456, 0xAF601A):
        assert rgb888.convert(color, 16) == color


def test_888_layout_channels(rgb888):
    assert rgb888.red_bits == rgb888.green_bits == rgb888.blue_bits
    assert rgb888.red_shift > rgb888.green_shift > rgb888.blue_shift


def test_565_white_fills_all_masks(rgb565):
    assert rgb565.convert(0xFFFFFF, 16) == 0xF800 | 0x07E0 | 0x001F


def test_565_primaries_land_in_their_masks(rgb565):
    assert rgb565.convert(0xFF0000, 16) == 0xF800
    assert rgb565.convert(0x00FF00, 16) == 0x07E0
    assert rgb565.convert(0x0000FF, 16) == 0x001F
    assert rgb565.convert(0x000000, 16) == 0


def test_from_masks_rejects_empty_mask():
    with pytest.raises(ValueError):
        ColorLayout.from_masks(0, 0xFF00, 0xFF)


def test_from_masks_rejects_too_wide_mask():
    with pytest.raises(ValueError):
        ColorLayout.from_masks(0x1FFFF0000, 0xFF00, 0xFF)