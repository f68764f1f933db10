"""INI settings for the texture tools."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional
import configparser
import os
import sys

EXPORT_SECTION = "export"
LOGGING_SECTION = "logging"

_TRUE_VALUES = {"1", "yes", "true", "on"}
_FALSE_VALUES = {"0", "no", "false", "off", ""}


@dataclass(frozen=True)
class ExportSettings:
    colormap_and_index: bool = False
    output_dir: Optional[Path] = None
    verbose: bool = False
    log_file: Optional[Path] = None


class ConfigBackend:
    """Reads settings.ini, by default from the folder of the running script."""

    def __init__(self, ini_path: Optional[str] = None) -> None:
        base_dir = os.path.dirname(sys.argv[0])
        self._path = Path(ini_path or (Path(base_dir) / "settings.ini"))

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Dict[str, Dict[str, str]]:
        parser = configparser.ConfigParser(inline_comment_prefixes=(";", "#"))
        parser.read(self._path)
        data: Dict[str, Dict[str, str]] = {}
        for section in parser.sections():
            data[section] = dict(parser.items(section))
        return data

    def get_option(
        self,
        data: Mapping[str, Mapping[str, str]],
        section: str,
        option: str,
        fallback: str = "",
    ) -> str:
        section_map = data.get(section)
        if section_map is None:
            return fallback
        return section_map.get(option, fallback)


def _parse_bool(value: str, option: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {option!r}: {value!r}")


def _parse_path(value: str) -> Optional[Path]:
    value = value.strip()
    return Path(value) if value else None


def load_export_settings(backend: Optional[ConfigBackend] = None) -> ExportSettings:
    backend = backend or ConfigBackend()
    data = backend.load()
    return ExportSettings(
        colormap_and_index=_parse_bool(
            backend.get_option(data, EXPORT_SECTION, "colormap_and_index"), "colormap_and_index"
        ),
        output_dir=_parse_path(backend.get_option(data, EXPORT_SECTION, "output_dir")),
        verbose=_parse_bool(backend.get_option(data, LOGGING_SECTION, "verbose"), "verbose"),
        log_file=_parse_path(backend.get_option(data, LOGGING_SECTION, "log_file")),
    )
