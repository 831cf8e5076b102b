"""Bitmap to run-length "vector sprite" converter producing C source data."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from PIL import Image

MAX_PARAM_ARG_SIZE = 512
MAX_LINES = 255
MAX_SHORT_RUN = 15
MAX_RUN = 255
BYTES_PER_LINE = 16

PALETTE = (
    0xFFFFFF,
    0x00FFFF,
    0xFF00FF,
    0x0000FF,
    0xFFFF00,
    0x00FF00,
    0xFF0000,
    0x000000,
    0x7F7F7F,
    0x007F7F,
    0x7F007F,
    0x00007F,
    0x7F7F00,
    0x007F00,
    0x7F0000,
    0x000000,
)

_BANNER = (
    "/////////////////////////////////\n"
    "//  Vector generated BMP data  //\n"
    "/////////////////////////////////\n"
    "\n"
)

_HELP = (
    "Options:\n"
    "  -help \t\t\t\t: This help\n"
    "  -file:[filename]\t\t\t: Input bmp file\n"
    "  -fontname:[name]\t\t\t: Output font name\n"
)


def color_index(rgb: int) -> int:
    """Return the palette index of ``rgb`` (0xRRGGBB); unknown colours map to 0."""
    try:
        return PALETTE.index(rgb)
    except ValueError:
        return 0


def _run_entry(count: int, color: int) -> bytes:
    if count <= MAX_SHORT_RUN:
        return bytes([((count << 4) | (color & 0xF)) & 0xFF])
    return bytes([color & 0xF, count & 0xFF])


def _pack_row(row: Sequence[int]) -> tuple[int, bytes]:
    out = bytearray()
    entries = 0
    run = 0
    last = color_index(row[0]) if row else color_index(0)

    for pixel in row:
        color = color_index(pixel)
        if color == last:
            run += 1
            if run > MAX_RUN:
                out += bytes([color & 0xF, MAX_RUN])
                run -= MAX_RUN
                entries += 1
        else:
            out += _run_entry(run, last)
            entries += 1
            run = 1
        last = color

    if run:
        out += _run_entry(run, last)
        entries += 1

    return entries, bytes(out)


def pack_bitmap(rows: Sequence[Sequence[int]]) -> bytes:
    """Pack rows of 0xRRGGBB pixels into the run-length sprite format.

    Layout: line count (capped at 255), then for every line its entry
    count followed by entries. An entry is one byte ``count << 4 | colour``
    or, for runs longer than 15, ``colour`` followed by a count byte.
    """
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise ValueError("all rows must have the same width")

    out = bytearray([min(len(rows), MAX_LINES)])
    for row in rows:
        entries, body = _pack_row(row)
        out.append(entries & 0xFF)
        out += body
    return bytes(out)


def header_source(name: str) -> str:
    """Return the C header text declaring the sprite array ``bmp_data_<name>``."""
    return _BANNER + f"extern const unsigned char bmp_data_{name}[];\n"


def data_source(name: str, data: bytes) -> str:
    """Return the C source text defining the sprite array ``bmp_data_<name>``."""
    parts = [_BANNER, f'#include "{name}.h"\n', "\n", f"const unsigned char bmp_data_{name}[] =\n"]
    last = len(data) - 1
    for i, value in enumerate(data):
        if i % BYTES_PER_LINE == 0:
            parts.append("\n\t" if i else "{\n\t")
        parts.append(f"0x{value:02X}")
        parts.append("," if i < last else "\n};\n")
    return "".join(parts)


def write_source_files(name: str, data: bytes) -> list[Path]:
    """Write ``<name>.h`` and ``<name>.c``; with no name, print the source instead.

    Returns the paths written.
    """
    if not name:
        sys.stdout.write(data_source(name, data))
        return []
    header = Path(f"{name}.h")
    source = Path(f"{name}.c")
    header.write_text(header_source(name))
    source.write_text(data_source(name, data))
    return [header, source]


def find_option(argv: Iterable[str], name: str) -> str | None:
    """Look for ``-name`` or ``-name:value`` among ``argv``.

    Returns None when absent, the value (at most 511 characters) when given
    with a colon, and an empty string when given without one.
    """
    for arg in argv:
        if not arg.startswith("-"):
            continue
        option, colon, value = arg[1:].partition(":")
        if option == name:
            return value[: MAX_PARAM_ARG_SIZE - 1] if colon else ""
    return None


def load_bitmap(path: str | Path) -> list[list[int]]:
    """Load an image file and return its rows, top first, as 0xRRGGBB integers."""
    with Image.open(path) as image:
        rgb = image.convert("RGB")
        width, height = rgb.size
        pixels = [(r << 16) | (g << 8) | b for r, g, b in rgb.getdata()]
    return [pixels[y * width : (y + 1) * width] for y in range(height)]


def main(argv: list[str] | None = None) -> int:
    """Command line entry point: -file:IMAGE -imagename:NAME [-help]."""
    args = sys.argv[1:] if argv is None else list(argv)

    print("Squale bmp2vect v0.1\n")

    if find_option(args, "help") is not None:
        print(_HELP)

    filename = find_option(args, "file") or ""
    if filename:
        print(f"Input file : {filename}")

    imagename = find_option(args, "imagename") or ""
    if imagename:
        print(f"Image name : {imagename}")

    if not filename:
        print(_HELP)
        return 0

    try:
        rows = load_bitmap(filename)
    except OSError:
        print(f"Can't load {filename} !")
        return 1

    height = len(rows)
    width = len(rows[0]) if rows else 0
    print(f"\nBmp Loaded... Xsize: {width}, Ysize: {height}")

    write_source_files(imagename, pack_bitmap(rows))
    return 0