import pytest

from raycube.colornames import COLOR_TABLE, text_to_rgb


def test_basic_names():
    assert text_to_rgb("red") == 0xff0000
    assert text_to_rgb("white") == 0xffffff
    assert text_to_rgb("black") == 0x0


def test_none_is_transparent_marker():
    assert text_to_rgb("none") == -1
    assert text_to_rgb("None") == -1


def test_case_insensitive():
    assert text_to_rgb("RED") == text_to_rgb("red")
    assert text_to_rgb("GhostWhite") == text_to_rgb("ghostwhite")


def test_two_word_name_joined_with_end():
    assert text_to_rgb("light", "grey") == text_to_rgb("light grey")
    assert text_to_rgb("ghost", "white") == text_to_rgb("ghostwhite")


def test_duplicate_name_first_entry_wins():
    first = next(color for name, color in COLOR_TABLE if name == "dark slate")
    assert text_to_rgb("dark slate") == first
    assert text_to_rgb("dark", "slate") == 0x2f4f4f


def test_unknown_name_gives_zero():
    assert text_to_rgb("notacolour") == 0
    assert text_to_rgb("red", "extra") == 0


@pytest.mark.parametrize("name,color", COLOR_TABLE)
def test_every_name_resolves_to_first_match(name, color):
    first = next(c for n, c in COLOR_TABLE if n.lower() == name.lower())
    assert text_to_rgb(name) == first


def test_hex_spec():
    assert text_to_rgb("#ff00ff") == 0xff00ff
    assert text_to_rgb("#FF00FF") == 0xff00ff


def test_hex_ignores_end_word():
    assert text_to_rgb("#ff0000", "anything") == 0xff0000


def test_hex_stops_at_invalid_character():
    assert text_to_rgb("#12zz") == 0x12


def test_empty_hex_is_zero():
    assert text_to_rgb("#") == 0
    assert text_to_rgb("#zz") == 0