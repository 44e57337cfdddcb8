"""
Tests for models bound to document locations.
"""

import pytest
from pydantic import BaseModel

from toml_query.core.path_utils import Path
from toml_query.exceptions import (
    NotFoundError,
    PartialLocationError,
    PathParseError,
    TypedConversionError,
)
from toml_query.structure.partial import (
    insert_partial,
    partial,
    partial_location,
    read_partial,
)


@partial("server.limits")
class LimitSettings(BaseModel):
    connections: int
    requests: int = 0


@partial("server.backends[1]")
class SecondBackend(BaseModel):
    name: str
    weight: int


@partial("plugins/cache.redis", separator="/")
class RedisSettings(BaseModel):
    url: str


class Unbound(BaseModel):
    value: int


class TestPartialDecorator:
    """Test recording locations on classes."""

    def test_location_is_parsed(self):
        assert partial_location(LimitSettings) == Path.parse("server.limits")

    def test_custom_separator(self):
        assert str(partial_location(RedisSettings)) == 'plugins."cache.redis"'

    def test_decorator_returns_class(self):
        assert LimitSettings(connections=1).connections == 1

    def test_malformed_location_fails_at_decoration(self):
        with pytest.raises(PathParseError):

            @partial("server[")
            class Broken(BaseModel):
                pass

    def test_unbound_class(self):
        with pytest.raises(PartialLocationError) as exc_info:
            partial_location(Unbound)

        assert "Unbound" in str(exc_info.value)


class TestReadPartial:
    """Test reading partial models."""

    def test_read(self, server_tree):
        assert read_partial(server_tree, LimitSettings) == LimitSettings(
            connections=100
        )

    def test_read_from_array_item(self, server_tree):
        backend = read_partial(server_tree, SecondBackend)
        assert backend.name == "secondary"
        assert backend.weight == 1

    def test_missing_location(self, empty_tree):
        with pytest.raises(NotFoundError):
            read_partial(empty_tree, LimitSettings)

    def test_invalid_content(self):
        tree = {"server": {"limits": {"connections": "many"}}}
        with pytest.raises(TypedConversionError):
            read_partial(tree, LimitSettings)

    def test_unbound_read(self, server_tree):
        with pytest.raises(PartialLocationError):
            read_partial(server_tree, Unbound)


class TestInsertPartial:
    """Test writing partial models."""

    def test_insert_into_empty_document(self, empty_tree):
        insert_partial(empty_tree, RedisSettings(url="redis://localhost"))
        assert empty_tree == {"plugins": {"cache.redis": {"url": "redis://localhost"}}}

    def test_round_trip(self, server_tree):
        settings = LimitSettings(connections=7, requests=9)
        previous = insert_partial(server_tree, settings)

        assert previous == {"connections": 100}
        assert read_partial(server_tree, LimitSettings) == settings

    def test_unbound_insert(self):
        with pytest.raises(PartialLocationError):
            insert_partial({}, Unbound(value=1))
