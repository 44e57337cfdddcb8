"""
Models bound to a fixed location of a TOML document.

A partial is a pydantic model (or any shape pydantic can validate) that
describes one table of a larger document:

    @partial("server.http")
    class HttpSettings(BaseModel):
        host: str
        port: int = 8080

    settings = read_partial(tree, HttpSettings)
"""

from collections.abc import Callable
from typing import Any, TypeVar

from toml_query.core.path_utils import DEFAULT_SEPARATOR, Path
from toml_query.exceptions import PartialLocationError
from toml_query.structure.type_mapping import (
    DEFAULT_CONFIG,
    TypeMappingConfig,
    insert_serialized,
    read_as,
)

T = TypeVar("T")

LOCATION_ATTRIBUTE = "__toml_location__"


def partial(location: str, separator: str = DEFAULT_SEPARATOR) -> Callable[[T], T]:
    """
    Class decorator recording the document location of a model.

    Params:
        location: Path string of the table the model describes
        separator: Key separator used in `location`

    Raises:
        PathParseError: At decoration time, if the location is malformed
    """
    parsed = Path.parse(location, separator)

    def decorator(model: T) -> T:
        setattr(model, LOCATION_ATTRIBUTE, parsed)
        return model

    return decorator


def partial_location(model: Any) -> Path:
    """
    Return the location recorded on a partial model class.

    Raises:
        PartialLocationError: If the class was never decorated
    """
    location = getattr(model, LOCATION_ATTRIBUTE, None)
    if not isinstance(location, Path):
        raise PartialLocationError(model)
    return location


def read_partial(
    tree: Any, model: type[T], config: TypeMappingConfig = DEFAULT_CONFIG
) -> T:
    """Read and validate a partial model from its location."""
    return read_as(tree, partial_location(model), model, config=config)


def insert_partial(
    tree: Any, instance: Any, config: TypeMappingConfig = DEFAULT_CONFIG
) -> Any:
    """
    Dump a partial model instance into its location.

    Returns:
        The previous value at the location, or None
    """
    return insert_serialized(
        tree, partial_location(type(instance)), instance, config=config
    )
