# xplr

Explore a tree data file in your terminal. `xplr` reads JSON, YAML or TOML
and shows it as a navigable, collapsible tree.

## Installation

```
pip install .
```

## Usage

The data can come from an argument, from a file, or from standard input, in
that order of preference:

```
xplr '{"foo": {"bar": [1, 2, 3]}}'
xplr -f foo.json
cat foo.yaml | xplr
```

Options:

- `-f`, `--file FILE`: file to read data from
- `-x`, `--expand N`: number of layers to expand by default (default `0`,
  must not be negative)
- `--version`: print the version and exit

The input is tried as JSON first, then YAML, then TOML. Empty input, or input
that does not yield a non-empty mapping, is reported as `no data`. Errors are
printed and the command exits with status 1.

The view needs a terminal: its size is read from standard output. When the
data arrives through a pipe, keys are read from the controlling terminal.

### Keys

| Action          | Default keys    |
|-----------------|-----------------|
| Down            | `down`, `j`     |
| Up              | `up`, `k`       |
| Collapse/expand | `tab`, `enter`  |
| Top             | `top`           |
| Bottom          | `bottom`        |
| Toggle help     | `?`             |
| Quit            | `q`, `esc`      |

The entries are key names: arrow keys are `up` and `down`, Home and End are
`home` and `end`, and printable keys are the character itself. The defaults
for Top and Bottom are the names `top` and `bottom`, which no single key
produces; bind them in the configuration to use them. `?` switches between
the one-line help and the full help.

## Configuration

A TOML configuration file is read from the path in `XPLR_CONFIG`. If that
variable is not set, `$XDG_CONFIG_HOME/xplr/config.toml` is used, with
`~/.config` standing in for an unset `XDG_CONFIG_HOME`. A missing file means
the defaults apply; an unreadable or malformed file is an error.

```toml
# key bindings: each replaces the defaults for that action
DownKeys = ["down", "n"]
CollapseKeys = ["space"]
QuitKeys = ["q"]

# colours
ShapeColor = "#D99C63"
SelectedForegroundColor = "#ffffff"
SelectedBackgroundColor = "#7DB8F2"
UnselectedForegroundColor = "#ffffff"
HelpColor = "#aaaaaa"
```

Recognised key settings: `BottomKeys`, `TopKeys`, `DownKeys`, `UpKeys`,
`CollapseKeys`, `HelpKeys`, `QuitKeys`, each a list of strings. Note that
`UpKeys` replaces the keys of the *down* binding; the up binding keeps its
defaults.

Recognised colour settings: `ShapeColor`, `SelectedForegroundColor`,
`SelectedBackgroundColor`, `UnselectedForegroundColor`, `HelpColor`, each a
string. `UnselectedForegroundColor` is applied as the background of
unselected rows. Colours may be `#rrggbb`, `#rgb`, or a number from 0 to 255;
other values leave the text uncoloured.

Setting names are matched without regard to case or underscores, so
`down_keys` works as well as `DownKeys`. Unknown settings are ignored.

## Library use

```python
from xplr.formats import parse_any
from xplr.nodes import build_tree

tree = build_tree(parse_any(b'{"a": {"b": 1}}'), 1)
print(tree[0])  # a: {b: 1}
```

- `xplr.formats`: `parse_json`, `parse_yaml`, `parse_toml` and `parse_any`,
  raising `FormatError` on bad input.
- `xplr.nodes`: `Node`, `build_tree`, `make_node` and `dfs`.
- `xplr.keys` and `xplr.styles`: key bindings and text styles, with
  `key_config_from_toml` and `style_config_from_toml`.
- `xplr.config`: `config_path` and `load_config`.
- `xplr.tree`: `TreeModel`, the view's state, key handling and rendering.

## Development

```
pip install -e .[test]
pytest
```