#!/usr/bin/env python3
"""
tex2png.py

Converts RLE texture resources extracted from the 3D Maze screensaver to PNG.

Outputs, next to the input unless --out-dir is given:
    <name>_image.png            RGBA image
    <name>_color_table.png      colour table strip      (--colormap)
    <name>_image_grayscale.png  palette index image     (--colormap)
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from maze_core.config import ConfigBackend, ExportSettings, load_export_settings
from maze_core.rle.catalog import describe_resource, is_plain_bitmap
from maze_core.rle.decoder import DecodeStatus, load_texture
from maze_core.rle.errors import FormatError
from maze_core.rle.export import export_texture


# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

LOGGER_NAME = "maze_core"


def setup_logger(log_path: Path | None, verbose: bool) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    if logger.handlers:
        return logger

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


# -----------------------------------------------------------------------------
# Conversion
# -----------------------------------------------------------------------------

def convert_texture(
    tex_path: Path,
    settings: ExportSettings,
    logger: logging.Logger,
) -> List[Path]:
    label = describe_resource(tex_path)
    if is_plain_bitmap(tex_path):
        raise FormatError(f"{tex_path.name} ({label}) is a plain bitmap, not an RLE texture")

    logger.info("Decoding %s%s", tex_path.name, f" ({label})" if label else "")
    texture = load_texture(tex_path)
    result = texture.result

    if result.status is DecodeStatus.END_MARKER:
        logger.debug("End of bitmap at offset 0x%08X", result.stop_offset)
    else:
        logger.warning(
            "No end-of-bitmap marker in %s; stream ran out at offset 0x%08X "
            "(cursor row %d, col %d)",
            tex_path.name,
            result.stop_offset,
            *result.cursor,
        )
    logger.debug(
        "%dx%d image, %d pixels painted", texture.dim, texture.dim, result.pixels_written
    )

    out_dir = settings.output_dir or tex_path.parent
    return export_texture(texture, out_dir, tex_path.stem, settings.colormap_and_index)


# -----------------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser("tex2png", description="3D Maze RLE texture -> PNG")
    ap.add_argument("textures", type=Path, nargs="+")
    ap.add_argument("-o", "--out-dir", type=Path)
    ap.add_argument(
        "--colormap",
        action="store_true",
        default=None,
        help="Also write the colour table and a grayscale palette index image",
    )
    ap.add_argument("--config", help="settings.ini path")
    ap.add_argument("--log", type=Path)
    ap.add_argument("-v", "--verbose", action="store_true", default=None)
    return ap


def resolve_settings(args: argparse.Namespace) -> ExportSettings:
    settings = load_export_settings(ConfigBackend(args.config))
    overrides = {}
    if args.out_dir is not None:
        overrides["output_dir"] = args.out_dir
    if args.colormap is not None:
        overrides["colormap_and_index"] = args.colormap
    if args.verbose is not None:
        overrides["verbose"] = args.verbose
    if args.log is not None:
        overrides["log_file"] = args.log
    return replace(settings, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)
    logger = setup_logger(settings.log_file, settings.verbose)

    failures = 0
    for tex_path in args.textures:
        try:
            convert_texture(tex_path, settings, logger)
        except (FormatError, OSError) as exc:
            logger.error("Failed to convert %s: %s", tex_path, exc)
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
