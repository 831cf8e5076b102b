"""Tape audio generator: turns a binary into a Squale cassette WAV file."""

from __future__ import annotations

import math
import struct
import sys
from pathlib import Path

SAMPLE_RATE = 44100
FREQ_ONE = 1300
FREQ_ZERO = 2100
BIT_MICROSECONDS = 833

_HEADER = struct.Struct("<4si4s4sihhiihh4si")
HEADER_SIZE = _HEADER.size


def _to_short(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


class ToneGenerator:
    """Phase-continuous sine generator producing 16-bit mono PCM."""

    def __init__(self) -> None:
        self.offset = 0.0
        self.frequency = 1200.0

    def fill(self, size: int, frequency: float, amplitude: int) -> list[int]:
        """Return ``size`` samples of a sine wave, keeping phase across calls."""
        if frequency != 0 and frequency != self.frequency:
            self.offset = (self.frequency * self.offset) / frequency
            self.frequency = frequency

        samples = []
        for _ in range(size):
            self.offset += 1
            value = math.sin((2.0 * math.pi * frequency * self.offset) / SAMPLE_RATE) * amplitude
            samples.append(_to_short(int(value)))
        return samples

    def tone(self, microseconds: int, frequency: float, volume: int) -> bytes:
        """Return PCM bytes for a tone lasting ``microseconds``."""
        if microseconds < 0:
            raise ValueError("duration must not be negative")
        count = (SAMPLE_RATE * microseconds) // 1_000_000
        repeats = 1 if microseconds < 1_000_000 else microseconds
        chunks = []
        for _ in range(repeats):
            samples = self.fill(count, frequency, volume)
            chunks.append(struct.pack(f"<{len(samples)}h", *samples))
        return b"".join(chunks)

    def byte(self, value: int, volume: int) -> bytes:
        """Return PCM bytes for one framed byte: start bit, 8 bits LSB first, stop bit."""
        if not 0 <= value <= 0xFF:
            raise ValueError("byte value out of range")
        parts = [self.tone(BIT_MICROSECONDS, FREQ_ZERO, volume)]
        for bit in range(8):
            freq = FREQ_ONE if value & (1 << bit) else FREQ_ZERO
            parts.append(self.tone(BIT_MICROSECONDS, freq, volume))
        parts.append(self.tone(BIT_MICROSECONDS, FREQ_ONE, volume))
        return b"".join(parts)


def wav_header(data_size: int) -> bytes:
    """Return the 44-byte RIFF header for ``data_size`` bytes of 16-bit mono PCM."""
    return _HEADER.pack(
        b"RIFF",
        data_size + HEADER_SIZE - 8,
        b"WAVE",
        b"fmt ",
        16,
        1,
        1,
        SAMPLE_RATE,
        (SAMPLE_RATE * 16) // 8,
        16 // 8,
        16,
        b"data",
        data_size,
    )


def build_cassette_wave(data: bytes) -> bytes:
    """Return a complete WAV file encoding ``data`` as a cassette recording."""
    gen = ToneGenerator()
    body = bytearray()
    volume = 0

    for _ in range(30000):
        body += gen.tone(100, FREQ_ONE, volume)
        if volume < 26000:
            volume += 6

    size = len(data)
    for value in (0x00, 0x00, (size >> 8) & 0xFF, size & 0xFF, 0x00, 0x00):
        body += gen.byte(value, volume)

    for value in data:
        body += gen.byte(value, volume)

    body += gen.byte(0x00, volume)

    for _ in range(1500):
        body += gen.tone(1000, FREQ_ONE, volume)

    while volume > 0:
        body += gen.tone(100, FREQ_ONE, volume)
        volume -= 6

    return wav_header(len(body)) + bytes(body)


def main(argv: list[str] | None = None) -> int:
    """Command line entry point: INPUT OUTPUT."""
    args = sys.argv[1:] if argv is None else list(argv)

    print("Squale Tape wave generator v1.1")

    if len(args) != 2:
        return 0

    input_path, output_path = args
    try:
        data = Path(input_path).read_bytes()
    except OSError:
        print(f"Can't open {input_path} !")
        return 1

    print("Create wave file...")
    wave = build_cassette_wave(data)
    try:
        Path(output_path).write_bytes(wave)
    except OSError:
        print(f"Can't create {output_path} !")
        return 1
    return 0