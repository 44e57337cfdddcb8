"""
Typed conversion layer for toml-query.

Values read from a tree are validated into caller-specified shapes with
pydantic, and typed objects are dumped back into plain TOML values before
insertion. Conversion failures raise TypedConversionError, which is distinct
from the path resolution errors.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from toml_query.core.path_utils import DEFAULT_SEPARATOR, PathLike, as_path
from toml_query.core.types import toml_type_name
from toml_query.exceptions import NotFoundError, TypedConversionError
from toml_query.execution.resolution import insert, read

T = TypeVar("T")


@dataclass
class TypeMappingConfig:
    """Configuration for typed conversions."""

    strict: bool = False  # Disable pydantic's lax coercions ("1" -> 1)
    exclude_none: bool = True  # TOML has no null, drop None fields on dump


DEFAULT_CONFIG = TypeMappingConfig()


def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or str(shape)


def convert(
    value: Any,
    shape: type[T],
    path: str = "",
    config: TypeMappingConfig = DEFAULT_CONFIG,
) -> T:
    """
    Validate a raw tree value into a typed shape.

    Params:
        value: Value taken from the tree
        shape: Any type pydantic can validate (models, dataclasses, generics)
        path: Path the value came from, for error reporting
        config: Conversion options

    Returns:
        The converted value

    Raises:
        TypedConversionError: If validation fails or pydantic cannot
            build a validator for the shape
    """
    try:
        return _adapter(shape).validate_python(value, strict=config.strict)
    except (PydanticSchemaGenerationError, ValidationError) as e:
        raise TypedConversionError(path, shape_name(shape), toml_type_name(value), e)


def dump(
    obj: Any, path: str = "", config: TypeMappingConfig = DEFAULT_CONFIG
) -> Any:
    """
    Dump a typed object into plain TOML values.

    Models and dataclasses become dicts; nested objects are dumped recursively.

    Raises:
        TypedConversionError: If the object cannot be serialized
    """
    try:
        return _adapter(type(obj)).dump_python(
            obj, mode="python", exclude_none=config.exclude_none
        )
    except (PydanticSchemaGenerationError, PydanticSerializationError) as e:
        raise TypedConversionError(path, "TOML value", shape_name(type(obj)), e)


def read_as(
    tree: Any,
    path: PathLike,
    shape: type[T],
    separator: str = DEFAULT_SEPARATOR,
    config: TypeMappingConfig = DEFAULT_CONFIG,
) -> T:
    """
    Read the value at a path and convert it into a typed shape.

    Raises:
        NotFoundError: If the path is absent
        PathTypeMismatchError: If a step does not fit the node it meets
        TypedConversionError: If the value does not convert
    """
    path = as_path(path, separator)
    value = read(tree, path, separator)
    return convert(value, shape, path.render(separator), config)


def read_as_or_default(
    tree: Any,
    path: PathLike,
    shape: type[T],
    default: Any = None,
    separator: str = DEFAULT_SEPARATOR,
    config: TypeMappingConfig = DEFAULT_CONFIG,
) -> T | Any:
    """Like read_as, but return `default` (unconverted) when the path is absent."""
    path = as_path(path, separator)
    try:
        value = read(tree, path, separator)
    except NotFoundError:
        return default
    return convert(value, shape, path.render(separator), config)


def insert_serialized(
    tree: Any,
    path: PathLike,
    obj: Any,
    separator: str = DEFAULT_SEPARATOR,
    config: TypeMappingConfig = DEFAULT_CONFIG,
) -> Any:
    """
    Dump a typed object and insert the result at a path.

    Returns:
        The previous value at the path, or None
    """
    path = as_path(path, separator)
    return insert(tree, path, dump(obj, path.render(separator), config), separator)


def _read_kind(tree: Any, path: PathLike, kind: str, separator: str) -> Any:
    path = as_path(path, separator)
    value = read(tree, path, separator)
    actual = toml_type_name(value)
    if actual != kind:
        raise TypedConversionError(path.render(separator), kind, actual)
    return value


# Strict getters: no coercion, a boolean is never an integer


def read_str(tree: Any, path: PathLike, separator: str = DEFAULT_SEPARATOR) -> str:
    return _read_kind(tree, path, "string", separator)


def read_int(tree: Any, path: PathLike, separator: str = DEFAULT_SEPARATOR) -> int:
    return _read_kind(tree, path, "integer", separator)


def read_float(tree: Any, path: PathLike, separator: str = DEFAULT_SEPARATOR) -> float:
    return _read_kind(tree, path, "float", separator)


def read_bool(tree: Any, path: PathLike, separator: str = DEFAULT_SEPARATOR) -> bool:
    return _read_kind(tree, path, "boolean", separator)


def read_datetime(
    tree: Any, path: PathLike, separator: str = DEFAULT_SEPARATOR
) -> datetime:
    return _read_kind(tree, path, "datetime", separator)
