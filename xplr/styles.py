"""Colours and text styles for the tree view."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from typing import Any

WHITE = "#ffffff"
BLACK = "#000000"
BLUE = "#7DB8F2"
ORANGE = "#D99C63"

_RESET = "\x1b[0m"


def _color_code(color: str | None, base: int) -> str | None:
    if not color:
        return None
    if color.startswith("#"):
        digits = color[1:]
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6:
            return None
        try:
            r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            return None
        return f"{base};2;{r};{g};{b}"
    if color.isdigit() and int(color) <= 255:
        return f"{base};5;{int(color)}"
    return None


@dataclass(frozen=True)
class TextStyle:
    """Foreground, background and faintness applied to rendered text."""

    foreground: str | None = None
    background: str | None = None
    faint: bool = False

    def render(self, text: str) -> str:
        """Wrap each line of text in the ANSI escapes for this style."""
        codes = ["2"] if self.faint else []
        codes += [
            code
            for code in (
                _color_code(self.foreground, 38),
                _color_code(self.background, 48),
            )
            if code
        ]
        if not codes:
            return text
        prefix = f"\x1b[{';'.join(codes)}m"
        return "\n".join(f"{prefix}{line}{_RESET}" for line in text.split("\n"))


@dataclass
class StyleConfig:
    """User colour overrides; empty strings keep the defaults."""

    shape_color: str = ""
    selected_foreground_color: str = ""
    selected_background_color: str = ""
    unselected_foreground_color: str = ""
    help_color: str = ""


_CONFIG_FIELDS = {f.name.replace("_", ""): f.name for f in fields(StyleConfig)}


def _load_toml(data: bytes | str) -> dict[str, Any]:
    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        return tomllib.loads(text)
    except ValueError as exc:
        raise ValueError(f"failed to parse style config: {exc}") from exc


def style_config_from_toml(data: bytes | str) -> StyleConfig:
    """Read colour overrides such as ``ShapeColor = "#ff0000"`` from TOML."""
    values: dict[str, str] = {}
    for name, value in _load_toml(data).items():
        attr = _CONFIG_FIELDS.get(name.replace("_", "").lower())
        if attr is None:
            continue
        if not isinstance(value, str):
            raise ValueError(f"failed to parse style config: {name} must be a string")
        values[attr] = value
    return StyleConfig(**values)


@dataclass(frozen=True)
class Style:
    """Styles for the parts of the tree view."""

    shapes: TextStyle
    selected: TextStyle
    unselected: TextStyle
    help: TextStyle


def default_styles() -> Style:
    """The default styles; help text uses the terminal's own foreground."""
    return Style(
        shapes=TextStyle(foreground=ORANGE),
        selected=TextStyle(foreground=WHITE, background=BLUE),
        unselected=TextStyle(foreground=WHITE, faint=True),
        help=TextStyle(),
    )


def new_style(config: StyleConfig) -> Style:
    """Apply the configured colours to the default styles."""
    style = default_styles()
    if config.shape_color:
        style = replace(style, shapes=replace(style.shapes, foreground=config.shape_color))
    if config.selected_foreground_color:
        style = replace(
            style, selected=replace(style.selected, foreground=config.selected_foreground_color)
        )
    if config.selected_background_color:
        style = replace(
            style, selected=replace(style.selected, background=config.selected_background_color)
        )
    if config.unselected_foreground_color:
        # The unselected colour is applied as a background, matching established behaviour.
        style = replace(
            style,
            unselected=replace(style.unselected, background=config.unselected_foreground_color),
        )
    if config.help_color:
        style = replace(style, help=replace(style.help, foreground=config.help_color))
    return style