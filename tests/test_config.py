import pytest

from raycube.config import (
    Color,
    ParseError,
    SceneConfig,
    find_player,
    has_bad_extension,
    is_config_line,
    is_empty_line,
    map_width,
    parse_color,
    parse_config_section,
    parse_file,
    parse_map,
    parse_text,
    validate_config,
)

MAP_ROWS = ["111111", "100101", "1000N1", "111111"]
SETTINGS = [
    "NO ./textures/north.xpm",
    "SO ./textures/south.xpm",
    "WE ./textures/west.xpm",
    "EA ./textures/east.xpm",
    "",
    "F 220,100,0",
    "C 225,30,0",
    "",
]
SCENE = "\n".join(SETTINGS + MAP_ROWS) + "\n"


@pytest.mark.parametrize(
    "name, bad",
    [("map.cub", False), ("maps/level.cub", False), ("map.txt", True), ("ab", False), ("", False)],
)
def test_has_bad_extension(name, bad):
    assert has_bad_extension(name) is bad


@pytest.mark.parametrize("line, empty", [("", True), ("  \t\n", True), (None, True), (" x ", False)])
def test_is_empty_line(line, empty):
    assert is_empty_line(line) is empty


@pytest.mark.parametrize(
    "line, expected",
    [
        ("NO ./a.xpm", True),
        ("  \tF 1,2,3", True),
        ("C 0,0,0", True),
        ("NO", False),
        ("NOX a", False),
        ("111", False),
    ],
)
def test_is_config_line(line, expected):
    assert is_config_line(line) is expected


def test_parse_color_values():
    assert parse_color("220,100,0") == Color(220, 100, 0)
    assert parse_color(" 10,20,30") == Color(10, 20, 30)
    assert parse_color("1,,2,3") == Color(1, 2, 3)


@pytest.mark.parametrize("text", ["1,2", "256,0,0", "-1,0,0", "0,0,300", ""])
def test_parse_color_rejects(text):
    with pytest.raises(ParseError):
        parse_color(text)


def test_set_texture_duplicate():
    config = SceneConfig()
    config.set_texture("NO", "a.xpm")
    with pytest.raises(ParseError, match="Duplicate"):
        config.set_texture("NO", "b.xpm")
    assert config.textures == {"NO": "a.xpm"}


def test_parse_config_section_stops_at_map():
    config = SceneConfig()
    parse_config_section(SETTINGS + MAP_ROWS + ["F 1,1,1"], config)
    assert config.config_lines == 6
    assert config.floor == Color(220, 100, 0)
    assert config.ceiling == Color(225, 30, 0)
    assert config.textures["WE"] == "./textures/west.xpm"


def test_parse_config_section_bad_line_keeps_earlier():
    config = SceneConfig()
    with pytest.raises(ParseError):
        parse_config_section(["NO a.xpm", "F 1,2", "SO b.xpm"], config)
    assert config.config_lines == 1
    assert config.textures == {"NO": "a.xpm"}


def test_parse_map_rows():
    assert parse_map(SETTINGS + MAP_ROWS) == MAP_ROWS
    assert parse_map(["F 1,2,3", "  ", "  1111", "   ", "1N01"]) == ["  1111", "1N01"]


def test_parse_map_without_map():
    with pytest.raises(ParseError, match="no map"):
        parse_map(SETTINGS)


def test_map_width():
    assert map_width(["1", "111", "11"]) == 3
    assert map_width([]) == 0


@pytest.mark.parametrize("cell, angle", [("N", -1.575), ("S", 1.575), ("W", 3.15), ("E", 0.0)])
def test_find_player_angle(cell, angle):
    grid = ["111", f"1{cell}1", "111"]
    x, y, found_angle = find_player(grid)
    assert (x, y) == (1.5, 1.5)
    assert found_angle == angle


def test_find_player_last_wins():
    _, _, angle = find_player(["1N1", "1S1"])
    assert angle == 1.575


def test_find_player_missing():
    with pytest.raises(ParseError):
        find_player(["111", "101"])


def test_validate_config_counts():
    config = SceneConfig(config_lines=5)
    with pytest.raises(ParseError, match="got 5"):
        validate_config(config)


def test_validate_config_missing_texture():
    config = SceneConfig(textures={"NO": "a", "SO": "b", "WE": "c"}, config_lines=6)
    with pytest.raises(ParseError, match="Missing texture"):
        validate_config(config)


def test_parse_text_full_scene():
    config = parse_text(SCENE)
    assert config.grid == MAP_ROWS
    assert config.height == len(MAP_ROWS)
    assert config.width == len(MAP_ROWS[0])
    assert config.textures == {
        "NO": "./textures/north.xpm",
        "SO": "./textures/south.xpm",
        "WE": "./textures/west.xpm",
        "EA": "./textures/east.xpm",
    }
    assert config.floor == Color(220, 100, 0)


def test_parse_text_duplicate_after_full_set_is_accepted():
    config = parse_text("\n".join(SETTINGS + ["NO other.xpm"] + MAP_ROWS))
    assert config.config_lines == 6
    assert config.textures["NO"] == "./textures/north.xpm"


def test_parse_text_bad_color_fails_validation():
    text = "\n".join(SETTINGS[:5] + ["F 999,0,0", "C 1,2,3"] + MAP_ROWS)
    with pytest.raises(ParseError, match="Expected 6"):
        parse_text(text)


def test_parse_file(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text(SCENE)
    assert parse_file(path).grid == MAP_ROWS


def test_parse_file_bad_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text(SCENE)
    with pytest.raises(ParseError, match="extension"):
        parse_file(path)


def test_parse_file_missing(tmp_path):
    with pytest.raises(ParseError):
        parse_file(tmp_path / "missing.cub")