"""Parsing and validation of ``.cub`` scene descriptions."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from os import PathLike

logger = logging.getLogger(__name__)

TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
REQUIRED_ELEMENTS = 6
PLAYER_ANGLES = {"N": -1.575, "S": 1.575, "W": 3.15, "E": 0.0}

_CONFIG_PREFIXES = ("NO ", "SO ", "WE ", "EA ", "F ", "C ")
_ATOI_RE = re.compile(r"[\t\n\v\f\r ]*([+-]?\d+)")


class ParseError(ValueError):
    """Raised when a scene description is invalid."""


@dataclass(frozen=True)
class Color:
    """An RGB colour with components from 0 to 255."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class SceneConfig:
    """Textures, colours and map read from a scene description."""

    textures: dict[str, str] = field(default_factory=dict)
    floor: Color = field(default_factory=Color)
    ceiling: Color = field(default_factory=Color)
    config_lines: int = 0
    grid: list[str] = field(default_factory=list)

    def set_texture(self, key: str, path: str) -> None:
        """Record the texture path for a wall key; each key may be set once."""
        if key not in TEXTURE_KEYS:
            raise ParseError(f"unknown texture key: {key!r}")
        if key in self.textures:
            raise ParseError("Duplicate texture definition")
        self.textures[key] = path

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return map_width(self.grid)


def _atoi(text: str) -> int:
    match = _ATOI_RE.match(text)
    return int(match.group(1)) if match else 0


def _split(text: str, separator: str) -> list[str]:
    return [part for part in text.split(separator) if part]


def has_bad_extension(filename: str | None) -> bool:
    """Tell whether a name of four or more characters does not end in ".cub"."""
    if not filename or len(filename) < 4:
        return False
    return filename[-4:] != ".cub"


def is_empty_line(line: str | None) -> bool:
    """Tell whether a line holds nothing but spaces, tabs and newlines."""
    if line is None:
        return True
    return all(char in " \t\n" for char in line)


def is_config_line(line: str) -> bool:
    """Tell whether a line, stripped of spaces and tabs, starts a setting."""
    return line.strip(" \t").startswith(_CONFIG_PREFIXES)


def parse_color(text: str) -> Color:
    """Parse an "R,G,B" colour whose components lie between 0 and 255."""
    parts = _split(text, ",")
    if len(parts) < 3:
        raise ParseError(f"invalid colour: {text!r}")
    r, g, b = (_atoi(part) for part in parts[:3])
    if not all(0 <= value <= 255 for value in (r, g, b)):
        raise ParseError("RGB values must be between 0 and 255")
    return Color(r, g, b)


def _parse_config_line(line: str, config: SceneConfig) -> None:
    tokens = _split(line.strip(" \t\n"), " ")
    if len(tokens) < 2:
        raise ParseError(f"incomplete setting: {line!r}")
    key, value = tokens[0], tokens[1]
    for texture_key in TEXTURE_KEYS:
        if key.startswith(texture_key):
            config.set_texture(texture_key, value)
            return
    if key.startswith("F"):
        config.floor = parse_color(value)
    elif key.startswith("C"):
        config.ceiling = parse_color(value)
    else:
        raise ParseError(f"unknown setting: {line!r}")


def parse_config_section(lines: list[str], config: SceneConfig) -> None:
    """Read the settings at the head of ``lines`` into ``config``.

    Empty lines are skipped and reading stops at the first other line. Each
    setting read adds one to ``config.config_lines``; the first invalid one
    raises ParseError, leaving the settings before it in place.
    """
    for line in lines:
        if is_empty_line(line):
            continue
        if not is_config_line(line):
            break
        _parse_config_line(line, config)
        config.config_lines += 1


def parse_map(lines: list[str]) -> list[str]:
    """Return the map rows: the non-empty lines from the first map line on."""
    start = next(
        (i for i, line in enumerate(lines)
         if not is_empty_line(line) and not is_config_line(line)),
        None,
    )
    if start is None:
        raise ParseError("no map found")
    tail = lines[start:]
    count = sum(1 for line in tail if not is_config_line(line) and not is_empty_line(line))
    rows = [line for line in tail if not is_empty_line(line)]
    return rows[:count]


def map_width(grid: list[str]) -> int:
    """Return the length of the longest map row."""
    return max((len(row) for row in grid), default=0)


def find_player(grid: list[str]) -> tuple[float, float, float]:
    """Return (x, y, angle) of the player start; the last one found counts."""
    found: tuple[float, float, float] | None = None
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell in PLAYER_ANGLES:
                found = (x + 0.5, y + 0.5, PLAYER_ANGLES[cell])
    if found is None:
        raise ParseError("no player start position in the map")
    return found


def validate_config(config: SceneConfig) -> None:
    """Raise ParseError unless enough settings and all four textures are given."""
    if config.config_lines < REQUIRED_ELEMENTS:
        raise ParseError(
            f"Expected {REQUIRED_ELEMENTS} config elements, got {config.config_lines}"
        )
    if any(key not in config.textures for key in TEXTURE_KEYS):
        raise ParseError("Missing texture configuration")


def parse_text(text: str) -> SceneConfig:
    """Parse the text of a scene description."""
    lines = _split(text, "\n")
    config = SceneConfig()
    try:
        parse_config_section(lines, config)
    except ParseError as exc:
        # The settings read so far are kept; validation decides if they suffice.
        logger.warning("%s", exc)
    config.grid = parse_map(lines)
    validate_config(config)
    return config


def parse_file(filename: str | PathLike[str]) -> SceneConfig:
    """Read and parse the scene description file ``filename``."""
    name = str(filename)
    if has_bad_extension(name):
        raise ParseError("file extension")
    try:
        with open(name, encoding="utf-8", errors="surrogateescape") as handle:
            text = handle.read()
    except OSError as exc:
        raise ParseError(f"cannot open {name}: {exc}") from exc
    return parse_text(text)