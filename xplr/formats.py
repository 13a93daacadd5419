"""Parsers that turn JSON, YAML or TOML documents into a mapping."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Callable
from typing import Any

import yaml

Parser = Callable[[bytes | str], dict[str, Any]]


class FormatError(ValueError):
    """Raised when a document cannot be parsed into a mapping."""


def _as_mapping(value: Any, kind: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise FormatError(f"failed to unmarshal {kind}: top level is not a mapping")
    return value


def parse_json(data: bytes | str) -> dict[str, Any]:
    """Parse a JSON document whose top level is an object."""
    try:
        value = json.loads(data)
    except ValueError as exc:
        raise FormatError(f"failed to unmarshal json: {exc}") from exc
    return _as_mapping(value, "json")


def parse_yaml(data: bytes | str) -> dict[str, Any]:
    """Parse a YAML document whose top level is a mapping."""
    try:
        value = yaml.safe_load(data)
    except (yaml.YAMLError, ValueError) as exc:
        raise FormatError(f"failed to unmarshal yaml: {exc}") from exc
    return _as_mapping(value, "yaml")


def parse_toml(data: bytes | str) -> dict[str, Any]:
    """Parse a TOML document."""
    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        return tomllib.loads(text)
    except ValueError as exc:
        raise FormatError(f"failed to unmarshal toml: {exc}") from exc


PARSERS: tuple[Parser, ...] = (parse_json, parse_yaml, parse_toml)


def parse_any(data: bytes | str) -> dict[str, Any]:
    """Try JSON, YAML and TOML in turn and return the first successful result."""
    errors = []
    for parser in PARSERS:
        try:
            return parser(data)
        except FormatError as exc:
            errors.append(str(exc))
    raise FormatError("; ".join(errors))