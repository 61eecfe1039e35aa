"""Reading of XPM images into pixel buffers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from raycube.colornames import text_to_rgb
from raycube.image import Image

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_ATOI_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
TRANSPARENT_PIXEL = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find(text: str, needle: str) -> int:
    """Return the position of the first ``needle`` in ``text``, or -1."""
    if len(needle) > len(text):
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the position of the first ``needle`` outside double quotes, or -1."""
    if len(needle) > len(text):
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    return text[:start] + " " * length + text[start + length:]


def strip_comments(text: str) -> str:
    """Replace C comments outside strings by spaces, keeping the length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def extract_strings(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``, in order."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _atoi(text: str) -> int:
    match = _ATOI_RE.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"invalid XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _read_color(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without a 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a colour value: {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return text_to_rgb(words[index], end)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM file, header first."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "header"))

    # Short keys overwrite earlier definitions, longer keys keep the first.
    keep_last = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour table")
        key = line[:cpp]
        rgb = _read_color(line, cpp)
        if keep_last:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(source, "pixel rows")
        for x in range(width):
            color = colors.get(line[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            image.put_pixel(x, y, color)
    return image


def parse_xpm_text(text: str) -> Image:
    """Build an image from the text of an XPM file."""
    return parse_xpm(extract_strings(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> Image:
    """Read and parse the XPM file at ``path``."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read XPM file {path}: {exc}") from exc
    return parse_xpm_text(text)