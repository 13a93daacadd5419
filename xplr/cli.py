"""Command line entry point: read a data file and explore it as a tree."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import IO

from xplr.config import ConfigError, load_config
from xplr.formats import FormatError, parse_any
from xplr.keys import new_key_map
from xplr.nodes import Node, build_tree
from xplr.styles import new_style
from xplr.tree import TreeConfig, TreeModel

VERSION = "0.1.0"

_KEY_NAMES = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_ENTER": "enter",
    "KEY_TAB": "tab",
    "KEY_ESCAPE": "esc",
    "KEY_HOME": "home",
    "KEY_END": "end",
}
_CHAR_NAMES = {"\t": "tab", "\n": "enter", "\r": "enter", "\x1b": "esc"}


def read_data(argument: str | None, file: str | None, stdin: IO | None) -> bytes:
    """Take data from the argument, else the file, else standard input."""
    if argument:
        data = argument.encode("utf-8")
    elif file:
        try:
            data = Path(file).read_bytes()
        except OSError as exc:
            raise OSError(f"failed to open data file: {exc}") from exc
    else:
        if stdin is None:
            raise ValueError("no data")
        try:
            raw = stdin.read()
        except OSError as exc:
            raise OSError(f"failed to read from pipe: {exc}") from exc
        data = raw.encode("utf-8") if isinstance(raw, str) else raw
    if not data:
        raise ValueError("no data")
    return data


def load_tree(data: bytes | str, layers: int = 0) -> list[Node]:
    """Parse JSON, YAML or TOML data into tree nodes."""
    try:
        mapping = parse_any(data)
    except FormatError:
        mapping = {}
    if not mapping:
        raise ValueError("no data")
    return build_tree(mapping, layers)


def _layers(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid layer count: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid layer count: {text!r}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xplr",
        description=(
            "Takes in a tree data file (JSON, YAML, TOML) either via flag parameter, "
            "first argument, or stdin and produces TUI navigable tree to view and "
            "explore the data"
        ),
        epilog="example: xplr -x 2 -f foo.json",
    )
    parser.add_argument("data", nargs="?", default=None, help="data to explore")
    parser.add_argument(
        "-x", "--expand", type=_layers, default=0, help="number of layers to expand by default"
    )
    parser.add_argument("-f", "--file", default="", help="file to read data from")
    parser.add_argument("--version", action="version", version=VERSION)
    return parser


def _key_name(key) -> str:
    if key.is_sequence and key.name:
        return _KEY_NAMES.get(key.name, key.name.removeprefix("KEY_").lower())
    text = str(key)
    return _CHAR_NAMES.get(text, text)


def _attach_keyboard() -> None:
    # Data may have come through a pipe; read keys from the controlling terminal.
    if sys.stdin is not None and sys.stdin.isatty():
        return
    try:
        fd = os.open("/dev/tty", os.O_RDONLY)
    except OSError:
        return
    os.dup2(fd, 0)
    os.close(fd)


def _run(model: TreeModel) -> None:
    _attach_keyboard()
    import blessed

    term = blessed.Terminal()
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        try:
            while True:
                if (term.width, term.height) != (model.width, model.height):
                    model.resize(term.width, term.height)
                sys.stdout.write(term.home + term.clear + model.view())
                sys.stdout.flush()
                key = term.inkey()
                if model.update(_key_name(key)):
                    break
        except KeyboardInterrupt:
            pass
        sys.stdout.write(term.home + term.clear)
        sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the explorer; return the process exit status."""
    args = _parser().parse_args(argv)
    try:
        try:
            config = load_config()
        except ConfigError as exc:
            raise ConfigError(f"failed to parse config: {exc}") from exc
        stdin = getattr(sys.stdin, "buffer", sys.stdin)
        data = read_data(args.data, args.file, stdin)
        nodes = load_tree(data, args.expand)
        key_map = new_key_map(config.keys)
        style = new_style(config.style)
        try:
            width, height = os.get_terminal_size(sys.stdout.fileno())
        except (OSError, ValueError) as exc:
            raise OSError(f"failed to get terminal size: {exc}") from exc
        model = TreeModel(TreeConfig(width=width, height=height, style=style, keys=key_map), nodes)
        _run(model)
    except (ConfigError, OSError, ValueError) as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())