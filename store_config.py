# store_config.py
from __future__ import annotations

import configparser
import logging
import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple, Union

from device_filter import DeviceFilter
from errors import ConfigLoadError, PatternError
from models import FILTER_FIELDS, FilterConfig

logger = logging.getLogger(__name__)

FILTER_SECTION = "Filter"


def _windows_appdata_dir() -> Path:
    appdata = os.environ.get("APPDATA")
    if appdata:
        return Path(appdata)
    return Path.home() / "AppData" / "Roaming"


def _linux_xdg_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def user_config_dir(app_name: str) -> Path:
    sysname = (platform.system() or "").lower()
    if sysname.startswith("windows"):
        return _windows_appdata_dir() / app_name
    if sysname.startswith("linux"):
        return _linux_xdg_config_dir() / app_name
    return Path.home() / ".config" / app_name


def _split_patterns(raw: str) -> Tuple[str, ...]:
    return tuple(line.strip() for line in raw.splitlines() if line.strip())


def parse_filter_config(text: str, source: str = "<string>") -> FilterConfig:
    """
    I parse the INI text of a config file into a FilterConfig.

    Only a [Filter] section is allowed, holding any of the four pattern keys.
    Each key takes one regex per line. Surrounding spaces on a line are not
    part of the regex, so edge spaces have to be written as "[ ]":

        [Filter]
        include_names =
            (?i)astro.*a50.*game
            analog-stereo
    """
    cfg = configparser.ConfigParser(interpolation=None)
    cfg.read_string(text, source=source)

    unknown_sections = [s for s in cfg.sections() if s != FILTER_SECTION]
    if cfg.defaults():
        unknown_sections.insert(0, cfg.default_section)
    if unknown_sections:
        raise ValueError(f"unknown section(s): {', '.join(unknown_sections)}")
    if not cfg.has_section(FILTER_SECTION):
        return FilterConfig()

    values: Dict[str, Tuple[str, ...]] = {}
    unknown_keys: List[str] = []
    for key, raw in cfg.items(FILTER_SECTION):
        if key not in FILTER_FIELDS:
            unknown_keys.append(key)
            continue
        values[key] = _split_patterns(raw)
    if unknown_keys:
        raise ValueError(f"unknown key(s) in [{FILTER_SECTION}]: {', '.join(unknown_keys)}")

    return FilterConfig(**values)


def load_filter_config(path: Union[str, Path]) -> FilterConfig:
    p = Path(path)
    logger.debug("loading config file %s", p)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError("read failed") from e
    try:
        return parse_filter_config(text, source=str(p))
    except (configparser.Error, ValueError) as e:
        raise ConfigLoadError("parse failed") from e


def load_device_filter(path: Union[str, Path], trace: bool = False) -> DeviceFilter:
    conf = load_filter_config(path)
    try:
        return DeviceFilter.from_config(conf, trace=trace)
    except PatternError as e:
        raise ConfigLoadError("parse failed") from e


@dataclass(frozen=True)
class ConfigStore:
    app_name: str = "pulse-switcher"
    filename: str = "pulse-switcher.cfg"

    @property
    def dir_path(self) -> Path:
        return user_config_dir(self.app_name)

    @property
    def file_path(self) -> Path:
        return self.dir_path / self.filename

    def load_filter(self, trace: bool = False) -> DeviceFilter:
        """
        Load the default config file. A missing file means no filtering; a file
        that exists but cannot be loaded is an error.
        """
        p = self.file_path
        if not p.is_file():
            logger.debug("default config file %s not found, using default", p)
            return DeviceFilter(trace=trace)
        try:
            return load_device_filter(p, trace=trace)
        except ConfigLoadError as e:
            raise ConfigLoadError(f"failed to load '{p}'") from e
