"""Explore tree data files (JSON, YAML, TOML) in an interactive terminal view."""

__version__ = "0.1.0"