"""
Path model and path string grammar for toml-query.

This module provides the step types a path is made of, the immutable Path
value, and the PathParser that converts between path strings and steps.

Grammar:
    a.b.c       table keys separated by the separator (default ".")
    a[0].b      bracketed array index attached to the previous segment
    a.[0].b     index as its own segment
    "a.b".c     quoted key, may contain the separator; backslash escapes
    'a.b'.c     literal key, no escapes
    a\\.b       bare key with an escaped separator
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from toml_query.exceptions import PathParseError

DEFAULT_SEPARATOR = "."

_BARE_KEY = re.compile(r"[A-Za-z0-9_-]+")
_DIGITS = re.compile(r"[0-9]+")
_RESERVED = "[]\"'\\"


@dataclass(frozen=True)
class MapKey:
    """Step addressing a key of a table."""

    key: str
    quoted: bool = field(default=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.key, str):
            raise PathParseError(repr(self.key), "key must be a string")
        if not self.key and not self.quoted:
            raise PathParseError(self.key, "empty key must be quoted")

    def render(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """
        Render the key as a path segment.

        Bare keys are emitted as-is, everything else is double-quoted with
        backslash escapes.
        """
        if _BARE_KEY.fullmatch(self.key) and separator not in self.key:
            return self.key
        escaped = self.key.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class SequenceIndex:
    """Step addressing a position of an array."""

    index: int

    def __post_init__(self):
        if (
            isinstance(self.index, bool)
            or not isinstance(self.index, int)
            or self.index < 0
        ):
            raise PathParseError(
                str(self.index), "index must be a non-negative integer"
            )

    def render(self, separator: str = DEFAULT_SEPARATOR) -> str:
        return f"[{self.index}]"

    def __str__(self) -> str:
        return self.render()


Step = MapKey | SequenceIndex


@dataclass(frozen=True)
class Path:
    """
    Parsed, reusable sequence of steps.

    A Path holds no reference to any tree. The empty path addresses the
    document root.
    """

    steps: tuple[Step, ...] = ()
    text: str | None = field(default=None, compare=False)

    @classmethod
    def parse(cls, text: str, separator: str = DEFAULT_SEPARATOR) -> "Path":
        """
        Parse a path string.

        Params:
            text: Path string such as "servers[0].host"
            separator: Character separating table keys

        Returns:
            Path with the parsed steps

        Raises:
            PathParseError: If the text does not follow the path grammar
        """
        return cls(steps=PathParser.parse(text, separator), text=text)

    @classmethod
    def of(cls, *parts: str | int) -> "Path":
        """
        Build a path from raw keys and indices without parsing.

        Examples:
            Path.of("a", 0, "b") -> a[0].b
            Path.of("x.y") -> "x.y" (a single key containing a dot)
        """
        steps: list[Step] = []
        for part in parts:
            if isinstance(part, int) and not isinstance(part, bool):
                steps.append(SequenceIndex(part))
            else:
                steps.append(MapKey(part, quoted=True))
        return cls(steps=tuple(steps))

    def render(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Render the canonical string form of this path."""
        return PathParser.render(self.steps, separator)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    @property
    def is_root(self) -> bool:
        return not self.steps

    @property
    def parent(self) -> "Path":
        """Path of the container holding the last step's target."""
        if self.is_root:
            raise PathParseError("", "the document root has no parent")
        return Path(steps=self.steps[:-1])

    @property
    def last(self) -> Step:
        if self.is_root:
            raise PathParseError("", "the document root has no last step")
        return self.steps[-1]

    def prefix(self, length: int) -> "Path":
        """Path made of the first `length` steps."""
        return Path(steps=self.steps[:length])

    def child(self, step: Step | str | int) -> "Path":
        """Path extended by one step; strings become keys, ints become indices."""
        if not isinstance(step, (MapKey, SequenceIndex)):
            step = Path.of(step).steps[0]
        return Path(steps=self.steps + (step,))


PathLike = str | Path


def as_path(path: PathLike, separator: str = DEFAULT_SEPARATOR) -> Path:
    """Accept either a Path or a path string and return a Path."""
    if isinstance(path, Path):
        return path
    if not isinstance(path, str):
        raise PathParseError(repr(path), "path must be a string or Path")
    return Path.parse(path, separator)


class PathParser:
    """
    Conversion between path strings and step sequences.

    The parser is a single left-to-right scan. Every error reports the
    character offset where the scan stopped.
    """

    @staticmethod
    def validate_separator(separator: str) -> None:
        if (
            not isinstance(separator, str)
            or len(separator) != 1
            or separator in _RESERVED
            or separator.isspace()
        ):
            raise PathParseError(
                str(separator),
                "separator must be a single character other than brackets, quotes, "
                "backslash or whitespace",
            )

    @staticmethod
    def parse(text: str, separator: str = DEFAULT_SEPARATOR) -> tuple[Step, ...]:
        """
        Parse a path string into steps.

        Params:
            text: Path string
            separator: Character separating table keys

        Returns:
            Tuple of steps, empty for the empty string

        Raises:
            PathParseError: On unterminated brackets or quotes, non-numeric or
                negative indices, empty segments, or stray characters

        Examples:
            "a[0].b" -> (MapKey("a"), SequenceIndex(0), MapKey("b"))
            "a.[0]" -> (MapKey("a"), SequenceIndex(0))
            "" -> ()
        """
        PathParser.validate_separator(separator)
        if text == "":
            return ()

        steps: list[Step] = []
        length = len(text)
        i = 0

        while True:
            if i < length and text[i] == "[":
                index, i = PathParser._scan_index(text, i)
                steps.append(SequenceIndex(index))
            elif i < length and text[i] in "\"'":
                key, i = PathParser._scan_quoted(text, i)
                steps.append(MapKey(key, quoted=True))
            else:
                key, i = PathParser._scan_bare(text, i, separator)
                if not key:
                    raise PathParseError(text, "empty segment", i)
                steps.append(MapKey(key))

            while i < length and text[i] == "[":
                index, i = PathParser._scan_index(text, i)
                steps.append(SequenceIndex(index))

            if i == length:
                break
            if text[i] != separator:
                raise PathParseError(
                    text, f"unexpected character '{text[i]}' after segment", i
                )
            i += 1
            if i == length:
                raise PathParseError(text, "empty segment", i)

        return tuple(steps)

    @staticmethod
    def render(steps: tuple[Step, ...], separator: str = DEFAULT_SEPARATOR) -> str:
        """
        Render steps as a canonical path string.

        Examples:
            (MapKey("a"), SequenceIndex(0), MapKey("b")) -> "a[0].b"
            (MapKey("a.b"),) -> '"a.b"'
        """
        parts: list[str] = []
        for step in steps:
            if isinstance(step, SequenceIndex):
                parts.append(step.render(separator))
            else:
                if parts:
                    parts.append(separator)
                parts.append(step.render(separator))
        return "".join(parts)

    @staticmethod
    def _scan_index(text: str, start: int) -> tuple[int, int]:
        end = text.find("]", start + 1)
        if end == -1:
            raise PathParseError(text, "unterminated '['", start)

        inner = text[start + 1 : end].strip()
        if not inner:
            raise PathParseError(text, "empty index", start)
        if not _DIGITS.fullmatch(inner):
            raise PathParseError(text, f"index '{inner}' is not a non-negative integer", start)
        return int(inner), end + 1

    @staticmethod
    def _scan_quoted(text: str, start: int) -> tuple[str, int]:
        quote = text[start]
        chars: list[str] = []
        i = start + 1
        while i < len(text):
            char = text[i]
            if char == quote:
                return "".join(chars), i + 1
            if char == "\\" and quote == '"':
                if i + 1 == len(text):
                    raise PathParseError(text, "dangling escape", i)
                chars.append(text[i + 1])
                i += 2
                continue
            chars.append(char)
            i += 1
        raise PathParseError(text, f"unterminated {quote} quote", start)

    @staticmethod
    def _scan_bare(text: str, start: int, separator: str) -> tuple[str, int]:
        chars: list[str] = []
        i = start
        while i < len(text):
            char = text[i]
            if char == separator or char == "[":
                break
            if char == "]":
                raise PathParseError(text, "unmatched ']'", i)
            if char in "\"'":
                raise PathParseError(text, "quote inside bare key", i)
            if char == "\\":
                if i + 1 == len(text):
                    raise PathParseError(text, "dangling escape", i)
                chars.append(text[i + 1])
                i += 2
                continue
            chars.append(char)
            i += 1
        return "".join(chars), i
