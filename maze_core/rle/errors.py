"""Exceptions raised while decoding 3D Maze RLE textures."""


class FormatError(ValueError):
    """Base class for malformed texture input."""


class TruncatedHeaderError(FormatError):
    """Input is too short to hold the dimension or the colour table."""


class InvalidEscapeError(FormatError):
    def __init__(self, offset: int, value: int):
        super().__init__(f"Unsupported escape 00 {value:02X} at offset 0x{offset:08X}")
        self.offset = offset
        self.value = value


class RowOverflowError(FormatError):
    def __init__(self, offset: int, row: int, col: int, dim: int):
        super().__init__(
            f"Pixel at row {row}, col {col} is outside the {dim}x{dim} image "
            f"(run starting at offset 0x{offset:08X})"
        )
        self.offset = offset
        self.row = row
        self.col = col
        self.dim = dim
