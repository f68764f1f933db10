from __future__ import annotations


class Cursor:
    """Write position inside a square image.

    Rows and columns are zero based. Painting moves in row-major order and
    wraps to the next row when the column reaches ``dim``.
    """

    def __init__(self, dim: int, row: int = 0, col: int = 0):
        self.dim = dim
        self.row = row
        self.col = col

    def __repr__(self) -> str:
        return f"Cursor(dim={self.dim}, row={self.row}, col={self.col})"

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def advance(self) -> None:
        self.col += 1
        if self.col == self.dim:
            self.col = 0
            self.row += 1

    def jump(self, dx: int, dy: int) -> None:
        self.row += dy
        self.col += dx
        # Some textures (OpenGL text) carry a delta that runs past the right
        # edge; the column snaps back to 0 and the row stays where it is.
        if self.col >= self.dim:
            self.col = 0
