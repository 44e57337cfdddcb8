"""
Exception classes for toml-query.

This module defines specific exception types for the different error
conditions that can occur while parsing path strings, walking a value tree,
and converting values into typed shapes.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class ResolutionContext:
    """
    Location information for errors raised while walking a value tree.

    Captures which step of which path failed and how far the walk got before
    failing, so callers can point at the offending segment.

    Params:
        path: Canonical rendering of the full path being resolved
        step: Rendering of the step that failed (e.g. "name" or "[3]")
        position: Zero-based index of the failing step within the path
        consumed: Canonical rendering of the steps successfully walked
        node_kind: TOML kind of the node the failing step was applied to
    """

    path: str
    step: str
    position: int
    consumed: str = ""
    node_kind: str | None = None

    def format_location(self) -> str:
        """
        Format the location as indented lines for error messages.

        Returns:
            Multi-line location description
        """
        lines = [f"  at step {self.position} ({self.step}) of '{self.path}'"]

        if self.consumed:
            lines.append(f"  after '{self.consumed}'")
        else:
            lines.append("  at document root")

        if self.node_kind:
            lines.append(f"  node is {self.node_kind}")

        return "\n".join(lines)


class TomlQueryError(Exception):
    """Base exception for all toml-query errors."""

    pass


class PathParseError(TomlQueryError, ValueError):
    """Raised when a path string is malformed."""

    def __init__(self, path: str, reason: str, position: int | None = None):
        """
        Initialize the exception.

        Params:
            path: The path text that failed to parse
            reason: Why the path is invalid
            position: Character offset where parsing failed, if known
        """
        self.path = path
        self.reason = reason
        self.position = position

        message = f"Invalid path '{path}': {reason}"
        if position is not None:
            message += f" (at character {position})"
        super().__init__(message)


class PathResolutionError(TomlQueryError):
    """Base exception for failures while walking a value tree."""

    def __init__(self, message: str, context: ResolutionContext):
        self.context = context
        super().__init__(f"{message}\n{context.format_location()}")

    @property
    def path(self) -> str:
        return self.context.path

    @property
    def step(self) -> str:
        return self.context.step

    @property
    def position(self) -> int:
        return self.context.position

    @property
    def consumed(self) -> str:
        return self.context.consumed


class NotFoundError(PathResolutionError, LookupError):
    """Raised when a key or index addressed by a path is absent."""

    def __init__(self, context: ResolutionContext):
        """
        Initialize the exception.

        Params:
            context: Location of the missing step
        """
        super().__init__(f"Nothing found at '{context.path}'", context)


class PathTypeMismatchError(PathResolutionError, TypeError):
    """Raised when a step kind does not match the kind of the node it is applied to."""

    def __init__(self, expected: str, context: ResolutionContext):
        """
        Initialize the exception.

        Params:
            expected: The node kind the step requires ("table" or "array")
            context: Location of the conflicting step
        """
        self.expected = expected
        super().__init__(
            f"Cannot apply {context.step} to {context.node_kind} in '{context.path}', "
            f"expected {expected}",
            context,
        )


class ArrayPaddingError(PathResolutionError, ValueError):
    """Raised when an array cannot be padded up to an addressed index."""

    def __init__(self, reason: str, context: ResolutionContext):
        """
        Initialize the exception.

        Params:
            reason: Why the padding failed
            context: Location of the index step being padded to
        """
        self.reason = reason
        super().__init__(
            f"Cannot pad array for {context.step} in '{context.path}': {reason}",
            context,
        )


class TypedConversionError(TomlQueryError):
    """Raised when a value cannot be converted to or from a typed shape."""

    def __init__(
        self,
        path: str,
        expected: str,
        actual: str,
        cause: Exception | None = None,
    ):
        """
        Initialize the exception.

        Params:
            path: Path of the value that failed to convert
            expected: Name of the requested type or shape
            actual: TOML kind of the value that was found
            cause: Underlying validation or serialization error, if any
        """
        self.path = path
        self.expected = expected
        self.actual = actual
        self.cause = cause

        message = f"Value at '{path}' is {actual}, cannot convert to {expected}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class PartialLocationError(TomlQueryError):
    """Raised when a model class is used as a partial without a document location."""

    def __init__(self, model: Any):
        """
        Initialize the exception.

        Params:
            model: The class missing a location
        """
        self.model = model
        name = getattr(model, "__name__", repr(model))
        super().__init__(
            f"'{name}' has no document location, decorate it with @partial(...)"
        )
