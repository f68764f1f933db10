"""
palette.py

Header parsing for 3D Maze textures.

Layout (offsets in bytes, little-endian):
    4..5      image dimension (textures are square)
    24..1047  256 colour table entries, 4 bytes each, stored B G R A
    1048..    RLE pixel stream
"""

from __future__ import annotations

import struct

import numpy as np

from maze_core.rle.errors import TruncatedHeaderError

DIMENSION_OFFSET = 4
PALETTE_OFFSET = 24
PALETTE_ENTRIES = 256
BYTES_PER_ENTRY = 4
PIXEL_DATA_OFFSET = PALETTE_OFFSET + PALETTE_ENTRIES * BYTES_PER_ENTRY

# Stored order is BGRA; columns picked out to get RGBA.
_BGRA_TO_RGBA = [2, 1, 0, 3]


class Palette:
    """Read-only 256 entry RGBA colour table."""

    def __init__(self, entries: np.ndarray):
        if entries.shape != (PALETTE_ENTRIES, 4):
            raise ValueError(f"Palette needs shape ({PALETTE_ENTRIES}, 4), got {entries.shape}")
        self._entries = np.array(entries, dtype=np.uint8)
        self._entries.flags.writeable = False

    def __len__(self) -> int:
        return PALETTE_ENTRIES

    def __getitem__(self, index: int) -> tuple[int, int, int, int]:
        r, g, b, a = self._entries[index]
        return int(r), int(g), int(b), int(a)

    @property
    def entries(self) -> np.ndarray:
        """``(256, 4)`` uint8 array in RGBA order."""
        return self._entries

    @property
    def rgb(self) -> np.ndarray:
        return self._entries[:, :3]

    @property
    def background(self) -> tuple[int, int, int, int]:
        """Entry 0; every pixel starts out with this colour."""
        return self[0]


def read_dimension(data: bytes) -> int:
    """Return the image width/height stored at offset 4.

    The header repeats the other dimension at offsets 9-10, but every known
    texture is square, so only the first one is used.
    """
    if len(data) < DIMENSION_OFFSET + 2:
        raise TruncatedHeaderError(
            f"Need {DIMENSION_OFFSET + 2} bytes for the image dimension, got {len(data)}"
        )
    (dim,) = struct.unpack_from("<H", data, DIMENSION_OFFSET)
    return dim


def parse_palette(
    data: bytes,
    offset: int = PALETTE_OFFSET,
    count: int = PALETTE_ENTRIES,
) -> Palette:
    needed = offset + BYTES_PER_ENTRY * count
    if len(data) < needed:
        raise TruncatedHeaderError(f"Need {needed} bytes for the colour table, got {len(data)}")

    raw = np.frombuffer(data, dtype=np.uint8, count=BYTES_PER_ENTRY * count, offset=offset)
    bgra = raw.reshape(count, BYTES_PER_ENTRY)
    return Palette(bgra[:, _BGRA_TO_RGBA])
