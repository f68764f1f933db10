"""Texture resources of the Windows 95 3D Maze screensaver.

File names are the ones assigned by NirSoft ResourcesExtract.
"""

from __future__ import annotations

from pathlib import Path

RLE_TEXTURES = {
    "3D Maze - Copy_103_101.bin": "start button",
    "3D Maze - Copy_104_101.bin": "smiley face",
    "3D Maze - Copy_105_101.bin": "rat",
    "3D Maze - Copy_106_101.bin": "OpenGL text",
    "3D Maze - Copy_120_101.bin": "pattern 1",
    "3D Maze - Copy_121_101.bin": "pattern 2",
    "3D Maze - Copy_125_101.bin": "pattern 3",
    "3D Maze - Copy_127_101.bin": "pattern 4",
}

# Uncompressed bitmaps; any image editor opens these directly.
PLAIN_BITMAPS = {
    "3D Maze - Copy_100_100.bin": "brick",
    "3D Maze - Copy_101_100.bin": "carpet",
    "3D Maze - Copy_102_100.bin": "stone",
    "3D Maze - Copy_107_100.bin": "OpenGL demo image",
}


def _key(name: str | Path) -> str:
    return Path(name).name.lower()


_RLE_BY_KEY = {_key(name): label for name, label in RLE_TEXTURES.items()}
_PLAIN_BY_KEY = {_key(name): label for name, label in PLAIN_BITMAPS.items()}


def describe_resource(name: str | Path) -> str | None:
    key = _key(name)
    return _RLE_BY_KEY.get(key) or _PLAIN_BY_KEY.get(key)


def is_plain_bitmap(name: str | Path) -> bool:
    return _key(name) in _PLAIN_BY_KEY
