"""Apollo Squale host tools: cartridge and cassette image builders, sprite
vectorizing, LZH decoding and EF9365 2D/3D vector helpers."""

__version__ = "1.1.0"