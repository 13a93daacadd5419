"""Key bindings for the tree view and their configuration."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields, replace
from typing import Any


@dataclass(frozen=True)
class KeyBinding:
    """A set of keys bound to one action, with help text."""

    keys: tuple[str, ...]
    help_key: str = ""
    help_desc: str = ""
    enabled: bool = True

    def matches(self, key: str) -> bool:
        """Whether the given key name triggers this binding."""
        return self.enabled and key in self.keys


@dataclass
class KeyConfig:
    """User overrides for key bindings; empty lists keep the defaults."""

    bottom_keys: list[str] = field(default_factory=list)
    top_keys: list[str] = field(default_factory=list)
    down_keys: list[str] = field(default_factory=list)
    up_keys: list[str] = field(default_factory=list)
    collapse_keys: list[str] = field(default_factory=list)
    help_keys: list[str] = field(default_factory=list)
    quit_keys: list[str] = field(default_factory=list)


_CONFIG_FIELDS = {f.name.replace("_", ""): f.name for f in fields(KeyConfig)}


def _load_toml(data: bytes | str) -> dict[str, Any]:
    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        return tomllib.loads(text)
    except ValueError as exc:
        raise ValueError(f"failed to parse key config: {exc}") from exc


def key_config_from_toml(data: bytes | str) -> KeyConfig:
    """Read key overrides such as ``DownKeys = ["j"]`` from a TOML document."""
    values: dict[str, list[str]] = {}
    for name, value in _load_toml(data).items():
        attr = _CONFIG_FIELDS.get(name.replace("_", "").lower())
        if attr is None:
            continue
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ValueError(f"failed to parse key config: {name} must be a list of strings")
        values[attr] = list(value)
    return KeyConfig(**values)


@dataclass(frozen=True)
class KeyMap:
    """Key bindings used by the tree view."""

    bottom: KeyBinding
    top: KeyBinding
    down: KeyBinding
    up: KeyBinding
    collapse: KeyBinding
    help: KeyBinding
    quit: KeyBinding


def default_key_map() -> KeyMap:
    """The default key bindings."""
    return KeyMap(
        bottom=KeyBinding(("bottom",), "end", "bottom"),
        top=KeyBinding(("top",), "home", "top"),
        down=KeyBinding(("down", "j"), "↓", "down"),
        up=KeyBinding(("up", "k"), "↑", "up"),
        collapse=KeyBinding(("tab", "enter"), "tab/enter", "collapse/expand"),
        help=KeyBinding(("?",), "?", "toggle help"),
        quit=KeyBinding(("q", "esc"), "esc", "return"),
    )


def new_key_map(config: KeyConfig) -> KeyMap:
    """Apply the configured overrides to the default key map."""
    keys = default_key_map()
    # Up keys are applied to the down binding, matching established behaviour.
    overrides = (
        ("bottom", config.bottom_keys),
        ("top", config.top_keys),
        ("down", config.down_keys),
        ("down", config.up_keys),
        ("collapse", config.collapse_keys),
        ("help", config.help_keys),
        ("quit", config.quit_keys),
    )
    for name, new_keys in overrides:
        if new_keys:
            binding = replace(getattr(keys, name), keys=tuple(new_keys))
            keys = replace(keys, **{name: binding})
    return keys