"""
toml-query execution components.

This package provides the resolver that walks value trees along parsed paths.
"""

from toml_query.execution.resolution import (
    contains,
    delete,
    insert,
    read,
    read_or_default,
    set_value,
)

__all__ = [
    "read",
    "read_or_default",
    "contains",
    "insert",
    "set_value",
    "delete",
]
