"""
Object facade over a parsed TOML value tree.

TomlDocument binds a tree and a key separator so every operation of the
library can be called as a method:

    doc = TomlDocument.loads(text)
    port = doc.read_int("server.port")
    doc["server.hosts[2]"] = "example.org"
    del doc["legacy"]
"""

import tomllib
from typing import Any, TypeVar

from toml_query.core.path_utils import DEFAULT_SEPARATOR, PathLike, PathParser
from toml_query.execution import resolution
from toml_query.query import Query, execute_query
from toml_query.structure import type_mapping
from toml_query.structure.partial import insert_partial, read_partial
from toml_query.structure.type_mapping import DEFAULT_CONFIG, TypeMappingConfig

T = TypeVar("T")
Output = TypeVar("Output")


class TomlDocument:
    """A value tree plus the separator its path strings use."""

    def __init__(
        self,
        tree: Any = None,
        separator: str = DEFAULT_SEPARATOR,
        config: TypeMappingConfig = DEFAULT_CONFIG,
    ):
        """
        Initialize the document.

        Params:
            tree: Root of an already-parsed tree; a new empty table when None
            separator: Key separator for path strings
            config: Options for the typed conversion methods
        """
        PathParser.validate_separator(separator)
        self.tree = {} if tree is None else tree
        self.separator = separator
        self.config = config

    @classmethod
    def loads(cls, text: str, separator: str = DEFAULT_SEPARATOR) -> "TomlDocument":
        """Parse TOML text into a new document."""
        return cls(tomllib.loads(text), separator)

    def __repr__(self) -> str:
        return f"TomlDocument({self.tree!r}, separator={self.separator!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TomlDocument):
            return self.tree == other.tree
        return NotImplemented

    # Path resolution

    def read(self, path: PathLike) -> Any:
        return resolution.read(self.tree, path, self.separator)

    def read_or_default(self, path: PathLike, default: Any = None) -> Any:
        return resolution.read_or_default(self.tree, path, default, self.separator)

    def contains(self, path: PathLike) -> bool:
        return resolution.contains(self.tree, path, self.separator)

    def insert(self, path: PathLike, value: Any, fill: Any = None) -> Any:
        return resolution.insert(self.tree, path, value, self.separator, fill)

    def set(self, path: PathLike, value: Any) -> Any:
        return resolution.set_value(self.tree, path, value, self.separator)

    def delete(self, path: PathLike) -> Any:
        return resolution.delete(self.tree, path, self.separator)

    def __getitem__(self, path: PathLike) -> Any:
        return self.read(path)

    def __setitem__(self, path: PathLike, value: Any) -> None:
        self.insert(path, value)

    def __delitem__(self, path: PathLike) -> None:
        self.delete(path)

    def __contains__(self, path: object) -> bool:
        return self.contains(path)

    # Typed layer

    def read_as(self, path: PathLike, shape: type[T]) -> T:
        return type_mapping.read_as(self.tree, path, shape, self.separator, self.config)

    def read_as_or_default(
        self, path: PathLike, shape: type[T], default: Any = None
    ) -> T | Any:
        return type_mapping.read_as_or_default(
            self.tree, path, shape, default, self.separator, self.config
        )

    def insert_serialized(self, path: PathLike, obj: Any) -> Any:
        return type_mapping.insert_serialized(
            self.tree, path, obj, self.separator, self.config
        )

    def read_str(self, path: PathLike) -> str:
        return type_mapping.read_str(self.tree, path, self.separator)

    def read_int(self, path: PathLike) -> int:
        return type_mapping.read_int(self.tree, path, self.separator)

    def read_float(self, path: PathLike) -> float:
        return type_mapping.read_float(self.tree, path, self.separator)

    def read_bool(self, path: PathLike) -> bool:
        return type_mapping.read_bool(self.tree, path, self.separator)

    def read_datetime(self, path: PathLike):
        return type_mapping.read_datetime(self.tree, path, self.separator)

    def read_partial(self, model: type[T]) -> T:
        return read_partial(self.tree, model, self.config)

    def insert_partial(self, instance: Any) -> Any:
        return insert_partial(self.tree, instance, self.config)

    # Queries

    def execute_query(self, query: Query[Output]) -> Output:
        return execute_query(self.tree, query, self.separator)
