import numpy as np
import pytest

from maze_core.rle.errors import FormatError, TruncatedHeaderError
from maze_core.rle.palette import (
    PALETTE_OFFSET,
    PIXEL_DATA_OFFSET,
    parse_palette,
    read_dimension,
)


def _header(dim: int, colors=None) -> bytearray:
    data = bytearray(PIXEL_DATA_OFFSET)
    data[4:6] = dim.to_bytes(2, "little")
    for index, (r, g, b, a) in (colors or {}).items():
        start = PALETTE_OFFSET + 4 * index
        data[start:start + 4] = bytes((b, g, r, a))
    return data


def test_parse_palette_reorders_bgra_to_rgba() -> None:
    data = _header(8, {0: (1, 2, 3, 0), 5: (10, 20, 30, 255), 255: (7, 8, 9, 128)})

    palette = parse_palette(bytes(data))

    assert len(palette) == 256
    assert palette[5] == (10, 20, 30, 255)
    assert palette[255] == (7, 8, 9, 128)
    assert palette.background == (1, 2, 3, 0)
    assert palette.entries.shape == (256, 4)
    assert palette.rgb.shape == (256, 3)


def test_parse_palette_is_read_only() -> None:
    palette = parse_palette(bytes(_header(8)))

    assert palette.entries.flags.writeable is False
    with pytest.raises(ValueError):
        palette.entries[0, 0] = 1


def test_parse_palette_rejects_short_input() -> None:
    data = bytes(_header(8))[: PIXEL_DATA_OFFSET - 1]

    with pytest.raises(TruncatedHeaderError):
        parse_palette(data)


def test_truncated_header_is_a_format_error() -> None:
    assert issubclass(TruncatedHeaderError, FormatError)


@pytest.mark.parametrize(
    ("low", "high", "expected"),
    [(0x80, 0x00, 128), (0x00, 0x01, 256), (0x40, 0x00, 64)],
)
def test_read_dimension_is_little_endian(low, high, expected) -> None:
    data = bytes([0, 0, 0, 0, low, high])

    assert read_dimension(data) == expected


def test_read_dimension_rejects_short_input() -> None:
    with pytest.raises(TruncatedHeaderError):
        read_dimension(b"\x00\x00\x00\x00\x80")


def test_palette_entries_are_uint8() -> None:
    palette = parse_palette(bytes(_header(8, {1: (255, 254, 253, 252)})))

    assert palette.entries.dtype == np.uint8
    assert palette[1] == (255, 254, 253, 252)
