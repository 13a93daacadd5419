"""Loading of the user's configuration file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from xplr.keys import KeyConfig, key_config_from_toml
from xplr.styles import StyleConfig, style_config_from_toml


class ConfigError(Exception):
    """Raised when the configuration file exists but cannot be used."""


@dataclass
class Config:
    """Style and key overrides read from the configuration file."""

    style: StyleConfig = field(default_factory=StyleConfig)
    keys: KeyConfig = field(default_factory=KeyConfig)


def config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Location of the configuration file.

    ``XPLR_CONFIG`` wins; otherwise ``$XDG_CONFIG_HOME/xplr/config.toml``.
    """
    env = os.environ if environ is None else environ
    explicit = env.get("XPLR_CONFIG")
    if explicit:
        return Path(explicit)
    base = env.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "xplr" / "config.toml"


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Read the configuration file; a missing file yields the defaults."""
    path = config_path(environ)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Config()
    except OSError as exc:
        raise ConfigError(f"failed to open config file: {exc}") from exc
    except ValueError as exc:
        raise ConfigError(f"failed to read config file: {exc}") from exc
    try:
        return Config(style=style_config_from_toml(text), keys=key_config_from_toml(text))
    except ValueError as exc:
        raise ConfigError(f"failed to read config file: {exc}") from exc