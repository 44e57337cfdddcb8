"""
toml-query - Read and write nested values of parsed TOML documents by path

toml-query resolves dotted/bracketed path strings such as "servers[0].host"
against the value tree a TOML parser returns, with typed conversion through
pydantic on top.
"""

import logging
from importlib.metadata import version

from toml_query.core import MapKey, Path, SequenceIndex
from toml_query.document import TomlDocument
from toml_query.exceptions import (
    ArrayPaddingError,
    NotFoundError,
    PartialLocationError,
    PathParseError,
    PathResolutionError,
    PathTypeMismatchError,
    TomlQueryError,
    TypedConversionError,
)
from toml_query.execution import (
    contains,
    delete,
    insert,
    read,
    read_or_default,
    set_value,
)
from toml_query.query import Query, ReadQuery, execute_query
from toml_query.structure import (
    insert_partial,
    insert_serialized,
    partial,
    read_as,
    read_as_or_default,
    read_bool,
    read_datetime,
    read_float,
    read_int,
    read_partial,
    read_str,
)

__version__ = version("toml-query")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Path",
    "MapKey",
    "SequenceIndex",
    "TomlDocument",
    "read",
    "read_or_default",
    "contains",
    "insert",
    "set_value",
    "delete",
    "read_as",
    "read_as_or_default",
    "insert_serialized",
    "read_str",
    "read_int",
    "read_float",
    "read_bool",
    "read_datetime",
    "partial",
    "read_partial",
    "insert_partial",
    "Query",
    "ReadQuery",
    "execute_query",
    "TomlQueryError",
    "PathParseError",
    "PathResolutionError",
    "NotFoundError",
    "PathTypeMismatchError",
    "ArrayPaddingError",
    "TypedConversionError",
    "PartialLocationError",
]
