"""
Core type definitions for toml-query.

This module contains the type aliases describing a parsed TOML value tree and
the helpers that classify nodes of such a tree.
"""

from collections.abc import Mapping, Sequence
from datetime import date, datetime, time
from typing import Any

TomlScalar = str | int | float | bool | datetime | date | time

TomlValue = TomlScalar | list | dict

TomlTable = dict[str, Any]


def is_table(node: Any) -> bool:
    """Check whether a node is a TOML table (any mapping)."""
    return isinstance(node, Mapping)


def is_array(node: Any) -> bool:
    """Check whether a node is a TOML array (any sequence but text)."""
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def toml_type_name(value: Any) -> str:
    """
    Name the TOML kind of a value.

    Params:
        value: Any node of a value tree

    Returns:
        One of "table", "array", "string", "integer", "float", "boolean",
        "datetime", "date", "time", or the Python type name for anything else

    Examples:
        {"a": 1} -> "table"
        True -> "boolean"
        1 -> "integer"
    """
    if is_table(value):
        return "table"
    if isinstance(value, str):
        return "string"
    if is_array(value):
        return "array"
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    # datetime before date, datetime is a date subclass
    if isinstance(value, datetime):
        return "datetime"
    if isinstance(value, date):
        return "date"
    if isinstance(value, time):
        return "time"
    return type(value).__name__
