from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from maze_core.rle.palette import Palette


@dataclass(frozen=True)
class PixelPlanes:
    rgb: np.ndarray
    alpha: np.ndarray
    index: np.ndarray


class PixelBuffer:
    """Decoded image as three parallel ``dim x dim`` planes.

    Rows are kept in stream order, which is bottom-up for these textures.
    :meth:`flipped` gives the top-down view used when writing image files.
    """

    def __init__(self, dim: int, background: tuple[int, int, int, int] = (0, 0, 0, 0)):
        if dim <= 0:
            raise ValueError(f"Image dimension must be positive, got {dim}")
        r, g, b, a = background
        self.dim = dim
        self._rgb = np.empty((dim, dim, 3), dtype=np.uint8)
        self._rgb[:] = (r, g, b)
        self._alpha = np.full((dim, dim), a, dtype=np.uint8)
        self._index = np.zeros((dim, dim), dtype=np.uint8)
        self._finalized = False

    @classmethod
    def for_palette(cls, dim: int, palette: Palette) -> "PixelBuffer":
        return cls(dim, palette.background)

    @property
    def rgb(self) -> np.ndarray:
        return self._rgb

    @property
    def alpha(self) -> np.ndarray:
        return self._alpha

    @property
    def index(self) -> np.ndarray:
        return self._index

    @property
    def finalized(self) -> bool:
        return self._finalized

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.dim and 0 <= col < self.dim

    def write(self, row: int, col: int, index: int, rgba: tuple[int, int, int, int]) -> None:
        if self._finalized:
            raise RuntimeError("PixelBuffer is finalized")
        if not self.contains(row, col):
            raise IndexError(f"({row}, {col}) outside {self.dim}x{self.dim} buffer")
        r, g, b, a = rgba
        self._rgb[row, col] = (r, g, b)
        self._alpha[row, col] = a
        self._index[row, col] = index

    def finalize(self) -> None:
        for plane in (self._rgb, self._alpha, self._index):
            plane.flags.writeable = False
        self._finalized = True

    def flipped(self) -> PixelPlanes:
        """Vertically flipped views; the stored planes are left untouched."""
        return PixelPlanes(
            rgb=self._rgb[::-1],
            alpha=self._alpha[::-1],
            index=self._index[::-1],
        )

    def rgba(self, flip: bool = False) -> np.ndarray:
        planes = self.flipped() if flip else PixelPlanes(self._rgb, self._alpha, self._index)
        return np.dstack((planes.rgb, planes.alpha))
