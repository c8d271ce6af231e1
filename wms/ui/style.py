"""A small terminal styling and layout toolkit working on ANSI strings."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass

from wcwidth import wcswidth, wcwidth

LEFT = TOP = 0.0
CENTER = 0.5
RIGHT = BOTTOM = 1.0

_ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")
_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Border:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str


ROUNDED_BORDER = Border("╭", "╮", "╰", "╯", "─", "│")


def _box(value) -> tuple[int, int, int, int]:
    if isinstance(value, int):
        value = (value,)
    value = tuple(value)
    if len(value) == 1:
        return (value[0],) * 4
    if len(value) == 2:
        return (value[0], value[1], value[0], value[1])
    if len(value) == 3:
        return (value[0], value[1], value[2], value[1])
    if len(value) == 4:
        return value
    raise ValueError("box values take 1 to 4 numbers")


def _char_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


def _line_width(line: str) -> int:
    plain = _ANSI.sub("", line)
    width = wcswidth(plain)
    return width if width >= 0 else sum(_char_width(c) for c in plain)


def visible_width(text: str) -> int:
    """Widest line of text in terminal cells, ignoring ANSI sequences."""
    return max(_line_width(line) for line in text.split("\n"))


def text_height(text: str) -> int:
    return text.count("\n") + 1


def _pad_line(line: str, width: int, position: float) -> str:
    gap = width - _line_width(line)
    if gap <= 0:
        return line
    left = int(gap * position)
    return " " * left + line + " " * (gap - left)


def _sgr(color: str | None, bold: bool = False, italic: bool = False) -> str:
    codes = []
    if bold:
        codes.append("1")
    if italic:
        codes.append("3")
    if color:
        hexval = color.lstrip("#")
        r, g, b = (int(hexval[i:i + 2], 16) for i in (0, 2, 4))
        codes.append(f"38;2;{r};{g};{b}")
    return f"\x1b[{';'.join(codes)}m" if codes else ""


def _paint(text: str, prefix: str) -> str:
    return f"{prefix}{text}{_RESET}" if prefix and text else text


@dataclass(frozen=True)
class Style:
    """An immutable text style: colour, emphasis, box model and alignment."""

    foreground: str | None = None
    bold: bool = False
    italic: bool = False
    padding: tuple = (0, 0, 0, 0)
    margin: tuple = (0, 0, 0, 0)
    width: int = 0
    height: int = 0
    align: float = LEFT
    align_vertical: float = TOP
    border: Border | None = None
    border_foreground: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "padding", _box(self.padding))
        object.__setattr__(self, "margin", _box(self.margin))

    def copy(self, **kwargs) -> Style:
        return dataclasses.replace(self, **kwargs)

    def render(self, text: str) -> str:
        lines = text.replace("\r\n", "\n").split("\n")
        pt, pr, pb, pl = self.padding
        inner = max(_line_width(line) for line in lines)
        if self.width:
            inner = max(inner, self.width - pl - pr)
        if self.height:
            gap = self.height - pt - pb - len(lines)
            if gap > 0:
                above = int(gap * self.align_vertical)
                lines = [""] * above + lines + [""] * (gap - above)

        prefix = _sgr(self.foreground, self.bold, self.italic)
        body = [
            " " * pl + _paint(_pad_line(line, inner, self.align), prefix) + " " * pr
            for line in lines
        ]
        full = inner + pl + pr
        body = [" " * full] * pt + body + [" " * full] * pb

        if self.border:
            b = self.border
            bc = _sgr(self.border_foreground)
            side = _paint(b.vertical, bc)
            body = (
                [_paint(b.top_left + b.horizontal * full + b.top_right, bc)]
                + [side + line + side for line in body]
                + [_paint(b.bottom_left + b.horizontal * full + b.bottom_right, bc)]
            )
            full += 2

        mt, mr, mb, ml = self.margin
        outer = full + ml + mr
        body = (
            [" " * outer] * mt
            + [" " * ml + line + " " * mr for line in body]
            + [" " * outer] * mb
        )
        return "\n".join(body)


def join_horizontal(position: float, *blocks: str) -> str:
    """Place blocks side by side, aligning shorter ones by position."""
    if not blocks:
        return ""
    split = [block.split("\n") for block in blocks]
    height = max(len(lines) for lines in split)
    columns = []
    for lines in split:
        width = max(_line_width(line) for line in lines)
        gap = height - len(lines)
        above = int(gap * position)
        lines = [""] * above + lines + [""] * (gap - above)
        columns.append([_pad_line(line, width, LEFT) for line in lines])
    return "\n".join("".join(row) for row in zip(*columns))


def join_vertical(position: float, *blocks: str) -> str:
    """Stack blocks, padding every line to a common width."""
    if not blocks:
        return ""
    lines = [line for block in blocks for line in block.split("\n")]
    width = max(_line_width(line) for line in lines)
    return "\n".join(_pad_line(line, width, position) for line in lines)