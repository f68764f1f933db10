"""PNG output for decoded textures."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import numpy as np
from PIL import Image

from maze_core.rle.decoder import DecodedTexture
from maze_core.rle.palette import Palette
from maze_core.rle.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

IMAGE_SUFFIX = "_image.png"
COLOR_TABLE_SUFFIX = "_color_table.png"
INDEX_SUFFIX = "_image_grayscale.png"


def write_image_png(buffer: PixelBuffer, out_path: Path) -> Path:
    """Write the colour and alpha planes as a top-down RGBA PNG."""
    rgba = np.ascontiguousarray(buffer.rgba(flip=True))
    Image.fromarray(rgba).save(out_path)
    logger.debug("Wrote RGBA image: %s", out_path)
    return out_path


def write_color_table_png(palette: Palette, out_path: Path) -> Path:
    # One pixel per entry, top to bottom.
    strip = np.ascontiguousarray(palette.rgb.reshape(len(palette), 1, 3))
    Image.fromarray(strip).save(out_path)
    logger.debug("Wrote colour table: %s", out_path)
    return out_path


def write_index_png(buffer: PixelBuffer, out_path: Path) -> Path:
    """Write the palette indices as an 8-bit grayscale PNG.

    Useful for the pattern textures, which are meant to be colour cycled.
    """
    index = np.ascontiguousarray(buffer.flipped().index)
    Image.fromarray(index).save(out_path)
    logger.debug("Wrote index image: %s", out_path)
    return out_path


def export_texture(
    texture: DecodedTexture,
    out_dir: Path,
    stem: str,
    include_index_outputs: bool = False,
) -> List[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)

    written = [write_image_png(texture.buffer, out_dir / f"{stem}{IMAGE_SUFFIX}")]
    if include_index_outputs:
        written.append(write_color_table_png(texture.palette, out_dir / f"{stem}{COLOR_TABLE_SUFFIX}"))
        written.append(write_index_png(texture.buffer, out_dir / f"{stem}{INDEX_SUFFIX}"))

    logger.info("Exported %d file(s) for %s to %s", len(written), stem, out_dir)
    return written
