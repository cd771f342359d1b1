"""Search configuration and per-run diagnostics."""

from dataclasses import dataclass, replace
from typing import Optional

from ..core.definitions import DEFAULT_STEP_COST, DEFAULT_TURN_PENALTY, Direction
from ..core.exceptions import InvalidQueryError

COLLECTORS = ('dag', 'copy')


@dataclass(frozen=True)
class SearchOptions:
    """Configuration options for a search query.

    ``start_direction`` only matters for oriented searches. ``None`` lets the
    first move leave the start in any direction at plain step cost.
    """
    oriented: bool = False
    turn_penalty: int = DEFAULT_TURN_PENALTY
    step_cost: int = DEFAULT_STEP_COST
    allow_reversal: bool = True
    start_direction: Optional[Direction] = Direction.RIGHT
    collector: str = "dag"  # "dag" (parent pointers) or "copy" (path copying)
    max_expansions: Optional[int] = None

    @classmethod
    def for_variant(cls, variant: str = "positional") -> 'SearchOptions':
        """Factory method for the common maze variants."""
        if variant == "positional":
            return cls()
        elif variant == "reindeer":
            return cls(oriented=True)
        elif variant == "reindeer_free_start":
            return cls(oriented=True, start_direction=None)
        elif variant == "reindeer_no_reversal":
            return cls(oriented=True, allow_reversal=False)
        raise InvalidQueryError(f"unknown search variant {variant!r}")

    @property
    def reversal_cost(self) -> int:
        return self.step_cost + 2 * self.turn_penalty

    def with_changes(self, **changes) -> 'SearchOptions':
        return replace(self, **changes)

    def validate(self) -> 'SearchOptions':
        if self.step_cost <= 0:
            raise InvalidQueryError(f"step_cost must be positive, got {self.step_cost}")
        if self.turn_penalty < 0:
            raise InvalidQueryError(f"turn_penalty must be non-negative, got {self.turn_penalty}")
        if self.collector not in COLLECTORS:
            raise InvalidQueryError(
                f"collector must be one of {COLLECTORS}, got {self.collector!r}")
        if self.max_expansions is not None and self.max_expansions <= 0:
            raise InvalidQueryError(
                f"max_expansions must be positive, got {self.max_expansions}")
        if self.start_direction is not None and not isinstance(self.start_direction, Direction):
            raise InvalidQueryError(
                f"start_direction must be a Direction or None, got {self.start_direction!r}")
        return self


@dataclass
class SearchDiagnostics:
    """Statistics from one search run."""
    states_finalized: int = 0
    entries_discarded: int = 0
    entries_pushed: int = 0
    max_frontier_size: int = 0
    time_taken_ms: float = 0.0
    goal_cost: Optional[int] = None
    terminated_early: bool = False

    @property
    def success(self) -> bool:
        return self.goal_cost is not None

    def summary(self) -> str:
        """Human-readable summary of the run."""
        status = f"REACHED (cost {self.goal_cost})" if self.success else "UNREACHABLE"
        return f"""
=== Search Diagnostics ===
Status: {status}
States Finalized: {self.states_finalized:,}
Entries Pushed: {self.entries_pushed:,}
Entries Discarded: {self.entries_discarded:,}
Max Frontier Size: {self.max_frontier_size:,}
Terminated Early: {self.terminated_early}
Time Taken: {self.time_taken_ms:.1f}ms
=========================="""
