"""Line, box and run-length sprite helpers for the EF9365 video processor."""

from __future__ import annotations

from dataclasses import dataclass

LINE_COMMAND = 0x11
X_NEGATIVE = 0x02
Y_NEGATIVE = 0x04
_ENTRIES_WHEN_ZERO = 256


def _coordinate(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be within 0..255, got {value}")
    return value


@dataclass(frozen=True)
class LineCommand:
    """Register values for one EF9365 vector draw.

    ``x`` and ``y`` are the start position, ``xlen`` and ``ylen`` the
    absolute deltas and ``command`` the byte written to the command
    register, whose direction bits give the signs of the deltas.
    """

    x: int
    y: int
    xlen: int
    ylen: int
    command: int


def line_command(x1: int, y1: int, x2: int, y2: int) -> LineCommand:
    """Return the draw command for a line from (x1, y1) to (x2, y2)."""
    x1 = _coordinate("x1", x1)
    y1 = _coordinate("y1", y1)
    x2 = _coordinate("x2", x2)
    y2 = _coordinate("y2", y2)

    command = LINE_COMMAND
    if x1 > x2:
        command |= X_NEGATIVE
        xlen = x1 - x2
    else:
        xlen = x2 - x1

    if y1 > y2:
        command |= Y_NEGATIVE
        ylen = y1 - y2
    else:
        ylen = y2 - y1

    return LineCommand(x=x1, y=y1, xlen=xlen, ylen=ylen, command=command)


def box_lines(x1: int, y1: int, x2: int, y2: int) -> list[LineCommand]:
    """Return the four draw commands outlining the box with corners (x1, y1) and (x2, y2)."""
    return [
        line_command(x1, y1, x2, y1),
        line_command(x1, y1, x1, y2),
        line_command(x2, y2, x1, y2),
        line_command(x2, y2, x2, y1),
    ]


def vectsprite_spans(data: bytes) -> list[list[tuple[int, int]]]:
    """Decode a run-length vector sprite into per-line ``(length, colour)`` spans.

    Layout: line count, then for each line an entry count followed by
    entries. An entry byte holds ``count << 4 | colour``; a zero count means
    the length follows in the next byte. An entry count of zero stands for
    256 entries.
    """
    it = iter(bytes(data))

    def take(what: str) -> int:
        try:
            return next(it)
        except StopIteration:
            raise ValueError(f"sprite data truncated while reading {what}") from None

    lines = []
    for _ in range(take("line count")):
        entries = take("entry count") or _ENTRIES_WHEN_ZERO
        spans = []
        for _ in range(entries):
            entry = take("entry")
            length = entry >> 4 or take("run length")
            spans.append((length, entry & 0xF))
        lines.append(spans)
    return lines