# squaletools

Host-side tools for building software for the Apollo Squale, a 6809-based
computer with an EF9365 graphics controller.

## Installation

```
pip install .
```

## Command-line tools

### Cartridge ROM image

```
squale-build-cartridge cartridge_loader.bin program.bin program.rom
```

Places the loader at offset 0 and the program at offset `0x100` of a 64 KiB
memory image filled with `0xFF`. The image written is 32 KiB when the program
ends at or below 32 KiB, and 64 KiB otherwise. Empty inputs, or inputs that do
not fit in 64 KiB, are reported and the command exits with status 1.

### Cassette WAV file

```
squale-build-cassette-wave program.bin program.wav
```

Writes a 16-bit mono 44.1 kHz WAV file the Squale can load from tape. Bits are
tones of 833 µs: 1300 Hz for a one, 2100 Hz for a zero. Each byte is framed by
a start bit (zero) and a stop bit (one), least significant bit first. The
recording holds a rising lead-in tone, a six-byte header (start address 0,
then the data length high and low byte, then two zero bytes), the data, a
trailing zero byte, a closing tone and a fade-out.

### Bitmap to vector sprite

```
squale-bmp2vect -file:logo.bmp -imagename:logo
```

Loads any image Pillow can open, maps each pixel to the 16-colour palette in
`squaletools.vectorize.PALETTE` (unknown colours become index 0) and packs it
into the run-length sprite format. With `-imagename:NAME` it writes `NAME.h`
and `NAME.c` declaring and defining `bmp_data_NAME`; without it the C source
is printed to standard output. `-help` prints the option list.

## Library use

```python
from squaletools.cartridge import build_cartridge
from squaletools.cassette import build_cassette_wave
from squaletools.lzh import unlzh
from squaletools.vectorize import load_bitmap, pack_bitmap, data_source

rom = build_cartridge(loader_bytes, program_bytes)
wav = build_cassette_wave(program_bytes)
raw = unlzh(packed_bytes, expected_size)
sprite = pack_bitmap(load_bitmap("logo.bmp"))
c_text = data_source("logo", sprite)
```

Other pieces:

- `squaletools.cassette.ToneGenerator` produces phase-continuous tones
  (`fill`, `tone`, `byte`); `wav_header` builds the 44-byte RIFF header.
- `squaletools.lzh.unlzh` decodes -lh5- LZH data, returning at most
  `outsize` bytes; corrupt input raises `ValueError`.
- `squaletools.vectorize` also offers `color_index`, `header_source`,
  `write_source_files` and `find_option`.
- `squaletools.drawing.line_command` and `box_lines` compute the EF9365
  register values (`LineCommand`) for lines and box outlines;
  `vectsprite_spans` decodes a packed sprite into per-line
  `(length, colour)` spans.
- `squaletools.geometry` provides `Dot`, `Object3D`, the fixed-point
  rotations `rotate_x`, `rotate_y`, `rotate_z` (256 steps per turn), and
  `calc_polygon` / `calc_object`, which project wireframe faces into 2D screen
  lines. The sample objects `BOX01`, `HEDRA01` and `PYRAMID01` are in
  `OBJECTS`.

## What it does not do

- There is no LZH compressor, only the decoder, and no tool for converting
  YM music files.
- The drawing and geometry helpers compute commands and coordinates; they do
  not drive hardware or render to the screen.

## Running the tests

```
pip install .[test]
pytest
```