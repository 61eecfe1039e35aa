import pytest

from raycube.colornames import text_to_rgb
from raycube.xpm import (
    XpmError,
    extract_strings,
    find,
    find_unquoted,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    split_words,
    strip_comments,
)

SAMPLE_XPM = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c #00FF00",
"X c red",
// pixels
"X. ",
" .X"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]
    assert split_words(" \t ") == []


def test_find_first_occurrence():
    text, needle = "xxabcab", "ab"
    pos = find(text, needle)
    assert text[pos:pos + len(needle)] == needle
    assert needle not in text[:pos + len(needle) - 1]


def test_find_missing():
    assert find("ab", "abc") == -1
    assert find("abc", "z") == -1


def test_find_unquoted_skips_strings():
    text = '"/*" /*'
    assert find_unquoted(text, "/*") == text.rindex("/*")
    assert find_unquoted('"/* only"', "/*") == -1


def test_strip_comments_block():
    text = "a/*xx*/b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result and "*/" not in result
    assert result.replace(" ", "") == "ab"


def test_strip_comments_line_comment_removes_newline():
    text = '// hi\n"x"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.strip() == '"x"'
    assert "\n" not in result


def test_strip_comments_keeps_quoted():
    text = '"a/*b*/" "c//d"'
    assert strip_comments(text) == text


def test_extract_strings():
    assert list(extract_strings('x "ab" y "cd" "e')) == ["ab", "cd"]


def test_parse_xpm_pixels():
    image = parse_xpm(["2 2 2 1", ". c #FF0000", "# c None", ".#", "#."])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 1) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000


def test_parse_xpm_named_two_word_color():
    image = parse_xpm(["1 1 1 1", "a c sky blue", "a"])
    assert image.get_pixel(0, 0) == text_to_rgb("sky", "blue")


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #010203", "a c #0A0B0C", "a"])
    assert image.get_pixel(0, 0) == 0x0A0B0C


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c #010203", "aaa c #0A0B0C", "aaa"])
    assert image.get_pixel(0, 0) == 0x010203


def test_two_char_keys():
    image = parse_xpm(["2 1 2 2", "ab c #000010", "ba c #001000", "baab"])
    assert image.get_pixel(0, 0) == 0x001000
    assert image.get_pixel(1, 0) == 0x000010


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        [],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_parse_xpm_text_with_comments():
    image = parse_xpm_text(SAMPLE_XPM)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(0, 0) == text_to_rgb("red")
    assert image.get_pixel(1, 0) == 0x00FF00
    assert image.get_pixel(2, 0) == 0xFF000000
    assert image.get_pixel(2, 1) == text_to_rgb("red")


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(SAMPLE_XPM)
    loaded = load_xpm(path)
    assert loaded.to_bytes() == parse_xpm_text(SAMPLE_XPM).to_bytes()


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")