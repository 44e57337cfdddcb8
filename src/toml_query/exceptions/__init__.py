"""
toml-query exception classes.

This package provides all exception types raised by path parsing, tree
resolution, and the typed conversion layer.
"""

from toml_query.exceptions.core import (
    ArrayPaddingError,
    NotFoundError,
    PartialLocationError,
    PathParseError,
    PathResolutionError,
    PathTypeMismatchError,
    ResolutionContext,
    TomlQueryError,
    TypedConversionError,
)

__all__ = [
    "TomlQueryError",
    "PathParseError",
    "PathResolutionError",
    "NotFoundError",
    "PathTypeMismatchError",
    "ArrayPaddingError",
    "TypedConversionError",
    "PartialLocationError",
    "ResolutionContext",
]
