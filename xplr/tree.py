"""Navigable tree view: state, key handling and rendering."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from xplr.keys import KeyBinding, KeyMap
from xplr.nodes import Node, dfs
from xplr.styles import Style

BOTTOM_LEFT = " └─"
KEY_WIDTH = 10
VALUE_WIDTH = 20
DEFAULT_HEIGHT = 80
HELP_HEIGHT = 50
TAB = "    "

_SHORT_SEPARATOR = " • "
_FULL_SEPARATOR = "    "
_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _visible_width(text: str) -> int:
    return len(_ANSI.sub("", text))


def _pad(text: str, width: int) -> str:
    return text + " " * (width - _visible_width(text))


def _join_vertical(sections: list[str]) -> str:
    lines = [line for section in sections for line in section.split("\n")]
    width = max((_visible_width(line) for line in lines), default=0)
    return "\n".join(_pad(line, width) for line in lines)


@dataclass
class TreeConfig:
    """Initial size, styles and key bindings of a tree view."""

    width: int
    height: int
    style: Style
    keys: KeyMap


class TreeModel:
    """State of the tree view: nodes, cursor, window size and help mode."""

    def __init__(self, config: TreeConfig, nodes: list[Node] | None) -> None:
        self.key_map = config.keys
        self.styles = config.style
        self.nodes = nodes
        self.width = config.width
        self.height = config.height
        self.cursor = 0
        self.current_node: Node | None = None
        self.show_help = True
        self.show_all = False
        self.additional_short_help_keys: Callable[[], list[KeyBinding]] | None = None

    def number_of_nodes(self) -> int:
        """Number of visible nodes, descending only into expanded ones."""
        visited: list[Node] = []
        dfs(self.nodes or [], lambda node, _layer: visited.append(node))
        return len(visited)

    def short_help(self) -> list[KeyBinding]:
        """Bindings shown in the one-line help."""
        bindings = [self.key_map.up, self.key_map.down, self.key_map.collapse]
        if self.additional_short_help_keys is not None:
            bindings.extend(self.additional_short_help_keys())
        bindings.append(self.key_map.quit)
        return bindings

    def full_help(self) -> list[list[KeyBinding]]:
        """Columns of bindings shown in the full help."""
        return [
            [self.key_map.up, self.key_map.down, self.key_map.collapse],
            [self.key_map.quit, self.key_map.help],
        ]

    def update(self, key: str) -> bool:
        """Handle one key press; return True when the view should close."""
        km = self.key_map
        if km.bottom.matches(key):
            self.cursor = self.number_of_nodes()
        elif km.top.matches(key):
            self.cursor = 0
        elif km.down.matches(key):
            self.nav_down()
        elif km.up.matches(key):
            self.nav_up()
        elif km.collapse.matches(key):
            self.invert_collapsed()
        elif km.help.matches(key):
            self.show_all = not self.show_all
        elif km.quit.matches(key):
            return True
        return False

    def resize(self, width: int, height: int) -> None:
        """Record a new window size."""
        self.width = width
        self.height = height

    def nav_up(self) -> None:
        """Move the cursor up, stopping at the first row."""
        self.cursor -= 1
        if self.cursor < 0:
            self.cursor = 0

    def nav_down(self) -> None:
        """Move the cursor down, stopping at the last row."""
        self.cursor += 1
        count = self.number_of_nodes()
        if self.cursor >= count:
            self.cursor = count - 1

    def invert_collapsed(self) -> None:
        """Expand or collapse the node under the cursor, if it has children."""
        if self.current_node is not None and self.current_node.children is not None:
            self.current_node.expand = not self.current_node.expand

    def display_range(self, max_rows: int) -> tuple[int, int]:
        """First and last row index to draw around the cursor."""
        rows_above = self.height // 2
        rows_below = self.height // 2
        if self.cursor < rows_above:
            rows_above = self.cursor
            rows_below = self.height - self.cursor
        if self.cursor + rows_below > max_rows:
            rows_below = max_rows - self.cursor
            rows_above = self.height - rows_below
        return self.cursor - rows_above, self.cursor + rows_below

    def view(self) -> str:
        """Render the tree and help text as a string of terminal output."""
        if self.nodes is None:
            return "no data"
        available = self.height if self.height > 0 else DEFAULT_HEIGHT
        help_text = ""
        if self.show_help:
            help_text = self._help_view()
            available -= HELP_HEIGHT
        lines = self._render_tree().replace("\t", TAB).split("\n")
        if len(lines) < available:
            lines.extend([""] * (available - len(lines)))
        return _join_vertical(["\n".join(lines), help_text])

    def _help_view(self) -> str:
        text = self._full_help_text() if self.show_all else self._short_help_text()
        return self.styles.help.render(text)

    def _short_help_text(self) -> str:
        return _SHORT_SEPARATOR.join(
            f"{b.help_key} {b.help_desc}" for b in self.short_help() if b.enabled
        )

    def _full_help_text(self) -> str:
        columns: list[list[str]] = []
        for group in self.full_help():
            bindings = [b for b in group if b.enabled]
            if not bindings:
                continue
            key_width = max(len(b.help_key) for b in bindings)
            desc_width = max(len(b.help_desc) for b in bindings)
            columns.append(
                [f"{b.help_key:<{key_width}} {b.help_desc:<{desc_width}}" for b in bindings]
            )
        if not columns:
            return ""
        height = max(len(column) for column in columns)
        padded = [
            column + [" " * len(column[0])] * (height - len(column)) for column in columns
        ]
        return "\n".join(
            _FULL_SEPARATOR.join(column[row] for column in padded).rstrip()
            for row in range(height)
        )

    def _render_tree(self) -> str:
        parts: list[str] = []
        index = 0
        min_row, max_row = self.display_range(self.number_of_nodes())

        def visit(node: Node, layer: int) -> None:
            nonlocal index
            text = ""
            if layer > 0:
                text += " " * ((layer - 1) * 2) + self.styles.shapes.render(BOTTOM_LEFT) + " "
            idx = index
            index += 1
            key_str = f"{node.key:<{KEY_WIDTH}}".replace("\n", " ")
            value_str = f"{node.value:<{VALUE_WIDTH}}".replace("\n", " ")
            if self.cursor == idx:
                self.current_node = node
                style = self.styles.selected
                text += f"{style.render(key_str)}\t\t{style.render(value_str)}\n"
            elif min_row <= idx <= max_row:
                style = self.styles.unselected
                text += f"{style.render(key_str)}\t\t{style.render(value_str)}\n"
            parts.append(text)

        dfs(self.nodes or [], visit)
        return "".join(parts)