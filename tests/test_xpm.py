import pytest

from fractol.colors import lookup_color
from fractol.xpm import (
    TRANSPARENT,
    XpmError,
    color_key,
    find,
    find_outside_quotes,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    str_to_wordtab,
    strip_comments,
)

SAMPLE_LINES = [
    "3 2 3 1",
    "a c #ff0000",
    "b c blue",
    ". c None",
    "ab.",
    "..b",
]

SAMPLE_TEXT = (
    "/* XPM */\n"
    "static char *sample[] = {\n"
    "/* columns rows colors chars-per-pixel */\n"
    '"3 2 3 1",\n'
    '"a c #ff0000", // red\n'
    '"b c blue",\n'
    '". c None",\n'
    "/* pixels */\n"
    '"ab.",\n'
    '"..b"\n'
    "};\n"
)


def test_find_returns_match_position():
    text = "hello world"
    index = find(text, "wor")
    assert text[index:].startswith("wor")
    assert find(text, "xyz") is None


def test_find_outside_quotes_skips_quoted_match():
    text = '"/*" /* x */'
    assert find_outside_quotes(text, "/*") == text.rindex("/*")
    assert find_outside_quotes('"//"', "//") is None


def test_str_to_wordtab_splits_on_spaces_and_tabs():
    assert str_to_wordtab("  a\tbb  c ") == ["a", "bb", "c"]
    assert str_to_wordtab("a\nb") == ["a\nb"]
    assert str_to_wordtab("   ") == []


def test_strip_comments_blanks_block_and_line_comments():
    assert strip_comments("a /* b */ c") == "a " + " " * len("/* b */") + " c"
    assert strip_comments("x // y\nz") == "x " + " " * len("// y\n") + "z"


def test_strip_comments_keeps_quoted_text_and_length():
    assert strip_comments('"/* kept */"') == '"/* kept */"'
    assert len(strip_comments(SAMPLE_TEXT)) == len(SAMPLE_TEXT)


def test_color_key_packs_characters():
    assert color_key("a") == ord("a")
    assert color_key("ab") == 0x6162
    assert color_key("") == 0


def test_parse_lines_pixels():
    image = parse_xpm_lines(SAMPLE_LINES)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == lookup_color("blue")
    assert image.get_pixel(2, 0) == TRANSPARENT
    assert image.get_pixel(0, 1) == TRANSPARENT
    assert image.get_pixel(2, 1) == lookup_color("blue")


def test_parse_text_matches_lines():
    from_text = parse_xpm_text(SAMPLE_TEXT)
    from_lines = parse_xpm_lines(SAMPLE_LINES)
    assert from_text.data == from_lines.data


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_TEXT)
    assert load_xpm(path).data == parse_xpm_text(SAMPLE_TEXT).data


def test_two_chars_per_pixel():
    image = parse_xpm_lines(["2 1 2 2", "aa c red", "bb c #00ff00", "aabb"])
    assert image.get_pixel(0, 0) == lookup_color("red")
    assert image.get_pixel(1, 0) == lookup_color("green")


def test_two_word_color_name():
    image = parse_xpm_lines(["1 1 1 1", "a c light blue", "a"])
    assert image.get_pixel(0, 0) == lookup_color("light blue")


def test_short_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.get_pixel(0, 0) == lookup_color("blue")


def test_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.get_pixel(0, 0) == lookup_color("red")


def test_undefined_key_is_black():
    image = parse_xpm_lines(["1 1 1 1", "a c red", "z"])
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        [],
        ["1 1 1 1"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["2 1 1 1", "a c red", "a"],
        ["1 2 1 1", "a c red", "a"],
    ],
)
def test_invalid_input_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_text_without_strings_raises():
    with pytest.raises(XpmError):
        parse_xpm_text("/* nothing here */")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_xpm(tmp_path / "absent.xpm")