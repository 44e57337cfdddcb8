"""
Core toml-query components.

This package provides the path model, the path string grammar, and the type
definitions describing a parsed TOML value tree.
"""

from toml_query.core.path_utils import (
    DEFAULT_SEPARATOR,
    MapKey,
    Path,
    PathLike,
    PathParser,
    SequenceIndex,
    Step,
    as_path,
)
from toml_query.core.types import (
    TomlScalar,
    TomlTable,
    TomlValue,
    is_array,
    is_table,
    toml_type_name,
)

__all__ = [
    "DEFAULT_SEPARATOR",
    "MapKey",
    "SequenceIndex",
    "Step",
    "Path",
    "PathLike",
    "PathParser",
    "as_path",
    "TomlScalar",
    "TomlTable",
    "TomlValue",
    "is_array",
    "is_table",
    "toml_type_name",
]
