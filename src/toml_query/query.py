"""Queries executed against a location of a value tree.

A query names a path and a function applied to the value found there. Queries
can be chained: when `next()` returns another query, the first query runs for
its side effects on the target and the chained query produces the result.
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from attrs import field, frozen

from toml_query.core.path_utils import DEFAULT_SEPARATOR
from toml_query.execution.resolution import read

Output = TypeVar("Output")

logger = logging.getLogger(__name__)


class Query(ABC, Generic[Output]):
    """A path plus an operation on the value the path addresses."""

    @property
    @abstractmethod
    def query_path(self) -> str:
        """Path of the target this query operates on."""

    @abstractmethod
    def execute(self, target: Any) -> Output:
        """
        Run the query on its target.

        Params:
            target: The value found at `query_path`, mutable in place

        Returns:
            The query's output
        """

    def next(self) -> "Query[Output] | None":
        """Query to run after this one on the same target. None by default."""
        return None


@frozen
class ReadQuery(Query[Any]):
    """Query returning a deep copy of its target."""

    path: str = field()

    @property
    def query_path(self) -> str:
        return self.path

    def execute(self, target: Any) -> Any:
        return copy.deepcopy(target)


def execute_query(
    tree: Any, query: Query[Output], separator: str = DEFAULT_SEPARATOR
) -> Output:
    """
    Execute a query on the value at its path.

    If the query has a chained `next()` query, the output of the first query
    is discarded and the chained query's output is returned.

    Raises:
        NotFoundError: If nothing exists at the query path
        PathTypeMismatchError: If the query path does not fit the tree
    """
    target = read(tree, query.query_path, separator)
    chained = query.next()
    if chained is None:
        return query.execute(target)

    logger.debug("Running %s before chained %s", type(query).__name__, type(chained).__name__)
    query.execute(target)
    return chained.execute(target)
