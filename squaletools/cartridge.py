"""Cartridge ROM image builder for the Squale computer."""

from __future__ import annotations

import sys
from pathlib import Path

MEMORY_SIZE = 64 * 1024
SMALL_ROM_SIZE = 32 * 1024
PROGRAM_OFFSET = 0x100
FILL_BYTE = 0xFF


class CartridgeError(ValueError):
    """Raised when a loader or program cannot be placed in the ROM image."""


def build_cartridge(loader: bytes, program: bytes) -> bytes:
    """Return a ROM image holding ``loader`` at 0 and ``program`` at 0x100.

    The image is 32 KiB when the program fits below that limit, 64 KiB
    otherwise. Unused bytes are 0xFF.
    """
    if not loader:
        raise CartridgeError("loader is empty")
    if not program:
        raise CartridgeError("program is empty")
    if len(loader) > MEMORY_SIZE:
        raise CartridgeError("loader does not fit in the cartridge memory")
    if PROGRAM_OFFSET + len(program) > MEMORY_SIZE:
        raise CartridgeError("program does not fit in the cartridge memory")

    memory = bytearray([FILL_BYTE]) * MEMORY_SIZE
    memory[: len(loader)] = loader
    memory[PROGRAM_OFFSET : PROGRAM_OFFSET + len(program)] = program

    rom_size = SMALL_ROM_SIZE if len(program) + PROGRAM_OFFSET <= SMALL_ROM_SIZE else MEMORY_SIZE
    return bytes(memory[:rom_size])


def _read(path: str) -> bytes:
    try:
        data = Path(path).read_bytes()
    except OSError:
        print(f"Can't open {path} !")
        raise
    if not data:
        print(f"read {path} error...")
        raise CartridgeError(f"{path} is empty")
    print(f"{path} loaded")
    return data


def main(argv: list[str] | None = None) -> int:
    """Command line entry point: LOADER PROGRAM OUTPUT."""
    args = sys.argv[1:] if argv is None else list(argv)

    print("Squale cartridge generator v1.1")

    if len(args) != 3:
        return 0

    loader_path, program_path, output_path = args
    try:
        loader = _read(loader_path)
        program = _read(program_path)
    except (OSError, CartridgeError):
        return 1

    try:
        rom = build_cartridge(loader, program)
    except CartridgeError as exc:
        print(f"{exc}")
        return 1

    try:
        Path(output_path).write_bytes(rom)
    except OSError:
        print(f"Can't create {output_path} !")
        return 1

    print(f"{output_path} created")
    return 0