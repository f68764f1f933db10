"""
decoder.py

RLE pixel stream decoder for the 3D Maze screensaver textures.

The stream is a variant of Microsoft BI_RLE8:

    n  i          encoded run: colour index i repeated n times (n >= 1)
    00 01         end of bitmap
    00 02 dx dy   delta: move the cursor, skipped pixels keep colour 0
    00 n ...      absolute run: n - 2 literal colour indices (n >= 3)

There is no end-of-line escape; rows wrap purely on the image width.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from maze_core.rle.cursor import Cursor
from maze_core.rle.errors import FormatError, InvalidEscapeError, RowOverflowError
from maze_core.rle.palette import (
    PIXEL_DATA_OFFSET,
    Palette,
    parse_palette,
    read_dimension,
)
from maze_core.rle.pixel_buffer import PixelBuffer

ESCAPE = 0x00
END_OF_BITMAP = 0x01
DELTA = 0x02
ABSOLUTE_BIAS = 2


class DecodeStatus(Enum):
    END_MARKER = "end_marker"
    STREAM_EXHAUSTED = "stream_exhausted"


@dataclass(frozen=True)
class DecodeResult:
    status: DecodeStatus
    buffer: PixelBuffer
    stop_offset: int
    cursor: tuple[int, int]
    pixels_written: int


@dataclass(frozen=True)
class DecodedTexture:
    dim: int
    palette: Palette
    result: DecodeResult

    @property
    def buffer(self) -> PixelBuffer:
        return self.result.buffer

    @property
    def status(self) -> DecodeStatus:
        return self.result.status


class RLEDecoder:
    """Single-use decode session for one texture."""

    def __init__(self, palette: Palette, dim: int):
        self.palette = palette
        self.dim = dim
        self.cursor = Cursor(dim)
        self.buffer = PixelBuffer.for_palette(dim, palette)
        self.pixels_written = 0

    def _paint(self, index: int, run_offset: int) -> None:
        row, col = self.cursor.position
        if not self.buffer.contains(row, col):
            raise RowOverflowError(run_offset, row, col, self.dim)
        self.buffer.write(row, col, index, self.palette[index])
        self.pixels_written += 1
        self.cursor.advance()

    def _finish(self, status: DecodeStatus, offset: int) -> DecodeResult:
        self.buffer.finalize()
        return DecodeResult(
            status=status,
            buffer=self.buffer,
            stop_offset=offset,
            cursor=self.cursor.position,
            pixels_written=self.pixels_written,
        )

    def decode(self, data: bytes, start: int = PIXEL_DATA_OFFSET) -> DecodeResult:
        """Decode ``data[start:]`` into the pixel buffer.

        Returns with ``END_MARKER`` on ``00 01`` and ``STREAM_EXHAUSTED`` when
        the input ends first (including mid-run). Raises
        :class:`InvalidEscapeError` on ``00 00`` and :class:`RowOverflowError`
        when a pixel would land below the last row.
        """
        if self.buffer.finalized:
            raise RuntimeError("RLEDecoder instances decode a single stream")

        end = len(data)
        offset = start

        while offset + 1 < end:
            b0 = data[offset]
            b1 = data[offset + 1]

            if b0 != ESCAPE:
                # Encoded run
                run_offset = offset
                offset += 2
                for _ in range(b0):
                    self._paint(b1, run_offset)
                continue

            if b1 == END_OF_BITMAP:
                return self._finish(DecodeStatus.END_MARKER, offset)

            if b1 == DELTA:
                if offset + 3 >= end:
                    break
                self.cursor.jump(data[offset + 2], data[offset + 3])
                offset += 4
                continue

            if b1 == ESCAPE:
                raise InvalidEscapeError(offset, b1)

            # Absolute run; the count byte is two more than the literal count.
            run_offset = offset
            count = b1 - ABSOLUTE_BIAS
            offset += 2
            literals = data[offset:offset + count]
            for index in literals:
                self._paint(index, run_offset)
            offset += len(literals)
            if len(literals) < count:
                break

        return self._finish(DecodeStatus.STREAM_EXHAUSTED, offset)


def decode_texture(data: bytes) -> DecodedTexture:
    """Parse the header of a texture resource and decode its pixels."""
    dim = read_dimension(data)
    palette = parse_palette(data)
    if dim == 0:
        raise FormatError("Image dimension is zero")
    result = RLEDecoder(palette, dim).decode(data, PIXEL_DATA_OFFSET)
    return DecodedTexture(dim=dim, palette=palette, result=result)


def load_texture(path: Path | str) -> DecodedTexture:
    return decode_texture(Path(path).read_bytes())
