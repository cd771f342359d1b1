"""Error taxonomy for grid construction and search queries.

An unreachable goal is not an error: queries report it as a ``None`` cost.
"""


class GridPathError(ValueError):
    """Base class for all gridpath errors."""


class MalformedGridError(GridPathError):
    """Grid data is empty, ragged, not two-dimensional or holds unknown cells."""


class InvalidQueryError(GridPathError):
    """A query was given arguments it cannot answer (e.g. start outside the grid)."""


class SearchLimitError(GridPathError):
    """The search finalized more states than ``SearchOptions.max_expansions`` allows."""

    def __init__(self, limit: int, finalized: int):
        super().__init__(f"search exceeded expansion limit {limit} ({finalized} states finalized)")
        self.limit = limit
        self.finalized = finalized
