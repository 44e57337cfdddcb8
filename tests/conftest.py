"""
Shared test fixtures for the toml-query test suite.
"""

import tomllib

import pytest

FRUIT_TOML = """
[[fruit.blah]]
  name = "apple"

  [fruit.blah.physical]
    color = "red"
    shape = "round"

[[fruit.blah]]
  name = "banana"

  [fruit.blah.physical]
    color = "yellow"
    shape = "bent"
"""

SERVER_TOML = """
title = "example"
enabled = true
ratio = 0.5
started = 1979-05-27T07:32:00Z

[server]
host = "localhost"
port = 8080
tags = ["a", "b", "c"]

[server.limits]
connections = 100

[[server.backends]]
name = "primary"
weight = 3

[[server.backends]]
name = "secondary"
weight = 1
"""


@pytest.fixture
def server_text():
    """Raw TOML text of the server document."""
    return SERVER_TOML


@pytest.fixture
def fruit_tree():
    """Array-of-tables document with nested tables inside each item."""
    return tomllib.loads(FRUIT_TOML)


@pytest.fixture
def server_tree():
    """Document mixing scalars, nested tables, arrays and arrays of tables."""
    return tomllib.loads(SERVER_TOML)


@pytest.fixture
def empty_tree():
    return tomllib.loads("")
