"""
Path resolution over parsed TOML value trees.

This module walks a value tree along a Path and implements the read,
read-or-default, insert, set and delete operations. The tree is read and
mutated in place; nothing is copied.
"""

import copy
import logging
from typing import Any

from toml_query.core.path_utils import (
    DEFAULT_SEPARATOR,
    MapKey,
    Path,
    PathLike,
    Step,
    as_path,
)
from toml_query.core.types import is_array, is_table, toml_type_name
from toml_query.exceptions import (
    ArrayPaddingError,
    NotFoundError,
    PathParseError,
    PathTypeMismatchError,
    ResolutionContext,
)

logger = logging.getLogger(__name__)

# Upper bound on the number of slots one insert may add to an array
MAX_PADDING = 10_000


def _context(
    path: Path, position: int, node: Any, separator: str
) -> ResolutionContext:
    return ResolutionContext(
        path=path.render(separator),
        step=path.steps[position].render(separator),
        position=position,
        consumed=path.prefix(position).render(separator),
        node_kind=toml_type_name(node),
    )


def _require_container(
    node: Any, step: Step, path: Path, position: int, separator: str
) -> None:
    """
    Check that a node can hold the target of a step.

    Raises:
        PathTypeMismatchError: If a key step meets a non-table or an index
            step meets a non-array
    """
    if isinstance(step, MapKey):
        expected, fits = "table", is_table(node)
    else:
        expected, fits = "array", is_array(node)
    if not fits:
        raise PathTypeMismatchError(
            expected, _context(path, position, node, separator)
        )


def _step_into(node: Any, path: Path, position: int, separator: str) -> Any:
    """
    Apply one step of a path to a node.

    Params:
        node: Container the step is applied to
        path: Full path being resolved, for error reporting
        position: Index of the step within the path
        separator: Separator used when rendering the path in errors

    Returns:
        The child addressed by the step

    Raises:
        PathTypeMismatchError: If the step kind does not match the node kind
        NotFoundError: If the key or index is absent
    """
    step = path.steps[position]
    _require_container(node, step, path, position, separator)

    if isinstance(step, MapKey):
        if step.key not in node:
            raise NotFoundError(_context(path, position, node, separator))
        return node[step.key]

    if step.index >= len(node):
        raise NotFoundError(_context(path, position, node, separator))
    return node[step.index]


def _walk(tree: Any, path: Path, separator: str, length: int | None = None) -> Any:
    """Follow the first `length` steps of a path (all of them by default)."""
    node = tree
    stop = len(path) if length is None else length
    for position in range(stop):
        node = _step_into(node, path, position, separator)
    return node


def _new_container(next_step: Step) -> dict | list:
    return {} if isinstance(next_step, MapKey) else []


def _pad(array: Any, path: Path, position: int, fill: Any, separator: str) -> None:
    """
    Extend an array with copies of `fill` up to the index of a step.

    Raises:
        ArrayPaddingError: If the gap exceeds MAX_PADDING or the array
            rejects the fill value
    """
    index = path.steps[position].index
    missing = index - len(array)
    if missing <= 0:
        return
    if missing > MAX_PADDING:
        raise ArrayPaddingError(
            f"{missing} slots exceed the limit of {MAX_PADDING}",
            _context(path, position, array, separator),
        )

    logger.debug("Padding array of length %d up to index %d", len(array), index)
    try:
        array.extend(copy.deepcopy(fill) for _ in range(missing))
    except (TypeError, ValueError) as e:
        # tomlkit arrays refuse None, the default fill
        raise ArrayPaddingError(
            f"the array rejected fill value {fill!r}, pass a storable fill ({e})",
            _context(path, position, array, separator),
        ) from e


def _root_error(path: Path, operation: str) -> PathParseError:
    return PathParseError(
        path.text or str(path), f"cannot {operation} the document root"
    )


def read(tree: Any, path: PathLike, separator: str = DEFAULT_SEPARATOR) -> Any:
    """
    Read the value addressed by a path.

    Params:
        tree: Root of the value tree
        path: Path string or pre-parsed Path; the empty path returns the root
        separator: Key separator used when `path` is a string

    Returns:
        The stored value object itself, not a copy

    Raises:
        PathParseError: If the path string is malformed
        NotFoundError: If a key or index along the path is absent
        PathTypeMismatchError: If a step does not fit the node it meets
    """
    return _walk(tree, as_path(path, separator), separator)


def read_or_default(
    tree: Any,
    path: PathLike,
    default: Any = None,
    separator: str = DEFAULT_SEPARATOR,
) -> Any:
    """
    Read the value addressed by a path, or return a default when it is absent.

    Type mismatches still raise: a default cannot repair a structural conflict.
    """
    try:
        return read(tree, path, separator)
    except NotFoundError:
        return default


def contains(tree: Any, path: PathLike, separator: str = DEFAULT_SEPARATOR) -> bool:
    """Check whether a path addresses an existing value."""
    try:
        read(tree, path, separator)
    except NotFoundError:
        return False
    return True


def insert(
    tree: Any,
    path: PathLike,
    value: Any,
    separator: str = DEFAULT_SEPARATOR,
    fill: Any = None,
) -> Any:
    """
    Write a value at a path, creating missing containers on the way.

    A missing intermediate becomes an empty table when the following step is
    a key and an empty array when it is an index. Arrays shorter than an
    addressed index are padded with `fill`. A `None` slot counts as missing.
    Existing values are never replaced to make room for a container.

    Params:
        tree: Root of the value tree
        path: Non-root path to write to
        value: Value to store; any prior occupant is overwritten
        separator: Key separator used when `path` is a string
        fill: Padding for skipped array positions, copied into each slot

    Returns:
        The previous value at the path, or None

    Raises:
        PathParseError: If the path is malformed or addresses the root
        PathTypeMismatchError: If an existing node conflicts with a step
        ArrayPaddingError: If padding exceeds MAX_PADDING or the array
            rejects `fill`
    """
    path = as_path(path, separator)
    if path.is_root:
        raise _root_error(path, "insert at")

    node = tree
    for position in range(len(path) - 1):
        step = path.steps[position]
        next_step = path.steps[position + 1]
        _require_container(node, step, path, position, separator)

        if isinstance(step, MapKey):
            if node.get(step.key) is None:
                logger.debug("Creating container at '%s'", path.prefix(position + 1))
                node[step.key] = _new_container(next_step)
            node = node[step.key]
        else:
            _pad(node, path, position, fill, separator)
            if step.index == len(node):
                logger.debug("Creating container at '%s'", path.prefix(position + 1))
                node.append(_new_container(next_step))
            elif node[step.index] is None:
                node[step.index] = _new_container(next_step)
            node = node[step.index]

    last = path.steps[-1]
    position = len(path) - 1
    _require_container(node, last, path, position, separator)

    if isinstance(last, MapKey):
        previous = node.get(last.key)
        node[last.key] = value
        return previous

    if last.index < len(node):
        previous = node[last.index]
        node[last.index] = value
        return previous

    _pad(node, path, position, fill, separator)
    node.append(value)
    return None


def set_value(
    tree: Any, path: PathLike, value: Any, separator: str = DEFAULT_SEPARATOR
) -> Any:
    """
    Replace the value at an existing location.

    Unlike insert, nothing is created: the parent, and the key or index the
    last step names, must already exist.

    Returns:
        The replaced value

    Raises:
        PathParseError: If the path is malformed or addresses the root
        NotFoundError: If the location does not exist
        PathTypeMismatchError: If a step does not fit the node it meets
    """
    path = as_path(path, separator)
    if path.is_root:
        raise _root_error(path, "set")

    parent = _walk(tree, path, separator, len(path) - 1)
    previous = _step_into(parent, path, len(path) - 1, separator)

    last = path.last
    if isinstance(last, MapKey):
        parent[last.key] = value
    else:
        parent[last.index] = value
    return previous


def delete(tree: Any, path: PathLike, separator: str = DEFAULT_SEPARATOR) -> Any:
    """
    Remove the value at a path if present.

    Deleting an absent location, including one below a missing intermediate,
    is a no-op. Deleting an array item shifts the following items down.

    Returns:
        The removed value, or None when nothing was removed

    Raises:
        PathParseError: If the path is malformed or addresses the root
        PathTypeMismatchError: If a step does not fit the node it meets
    """
    path = as_path(path, separator)
    if path.is_root:
        raise _root_error(path, "delete")

    try:
        parent = _walk(tree, path, separator, len(path) - 1)
    except NotFoundError as e:
        logger.debug("Nothing to delete at '%s': %s", path, e.step)
        return None

    last = path.last
    _require_container(parent, last, path, len(path) - 1, separator)

    if isinstance(last, MapKey):
        if last.key in parent:
            logger.debug("Deleting '%s'", path)
            return parent.pop(last.key)
        return None

    if last.index < len(parent):
        logger.debug("Deleting '%s'", path)
        return parent.pop(last.index)
    return None
