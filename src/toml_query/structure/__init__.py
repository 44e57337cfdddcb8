"""
toml-query typed components.

This package provides conversion of tree values into typed shapes and models
bound to fixed document locations.
"""

from toml_query.structure.partial import (
    insert_partial,
    partial,
    partial_location,
    read_partial,
)
from toml_query.structure.type_mapping import (
    TypeMappingConfig,
    convert,
    dump,
    insert_serialized,
    read_as,
    read_as_or_default,
    read_bool,
    read_datetime,
    read_float,
    read_int,
    read_str,
)

__all__ = [
    "TypeMappingConfig",
    "convert",
    "dump",
    "read_as",
    "read_as_or_default",
    "insert_serialized",
    "read_str",
    "read_int",
    "read_float",
    "read_bool",
    "read_datetime",
    "partial",
    "partial_location",
    "read_partial",
    "insert_partial",
]
