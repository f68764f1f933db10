"""Decoder for the RLE textures of the 3D Maze screensaver."""

from maze_core.rle.cursor import Cursor
from maze_core.rle.decoder import (
    DecodedTexture,
    DecodeResult,
    DecodeStatus,
    RLEDecoder,
    decode_texture,
    load_texture,
)
from maze_core.rle.errors import (
    FormatError,
    InvalidEscapeError,
    RowOverflowError,
    TruncatedHeaderError,
)
from maze_core.rle.palette import Palette, parse_palette, read_dimension
from maze_core.rle.pixel_buffer import PixelBuffer, PixelPlanes

__all__ = [
    "Cursor",
    "DecodedTexture",
    "DecodeResult",
    "DecodeStatus",
    "FormatError",
    "InvalidEscapeError",
    "Palette",
    "PixelBuffer",
    "PixelPlanes",
    "RLEDecoder",
    "RowOverflowError",
    "TruncatedHeaderError",
    "decode_texture",
    "load_texture",
    "parse_palette",
    "read_dimension",
]
