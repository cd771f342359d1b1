"""
GridMap - bounds-checked passability grid
=========================================

A rectangular grid of ``Cell`` values stored as a read-only numpy array
indexed ``[y, x]``. A GridMap never changes once built; "adding walls
between queries" produces a new GridMap via ``with_walls``.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .definitions import CELL_CHARS, MARK_CHAR, Cell, Position
from .exceptions import MalformedGridError

logger = logging.getLogger(__name__)


class GridMap:
    """
    Immutable 2D array of binary-passable cells.

    Build one with ``from_rows``, ``from_array`` or ``from_walls``.
    ``get`` returns ``None`` outside ``[0, width) x [0, height)``.
    """

    def __init__(self, cells: np.ndarray):
        cells = np.asarray(cells)
        if cells.ndim != 2:
            raise MalformedGridError(f"grid must be 2-dimensional, got shape {cells.shape}")
        if cells.size == 0:
            raise MalformedGridError("grid must have at least one cell")
        invalid = ~np.isin(cells, (Cell.EMPTY, Cell.WALL))
        if invalid.any():
            y, x = np.argwhere(invalid)[0]
            raise MalformedGridError(f"unknown cell value {cells[y, x]!r} at ({x}, {y})")

        self._cells = cells.astype(np.uint8, copy=True)
        self._cells.setflags(write=False)
        self.height, self.width = self._cells.shape

    # --------------------------------------------------
    # Construction
    # --------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> 'GridMap':
        """Build from row-major data. Rows may hold Cells, ints or bools (True = wall)."""
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise MalformedGridError("grid must have at least one row and one column")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise MalformedGridError(
                    f"row {y} has length {len(row)}, expected {width}")
        try:
            values = [[int(v) for v in row] for row in rows]
        except (TypeError, ValueError) as e:
            raise MalformedGridError(f"grid rows must hold cell values: {e}") from e
        return cls(np.array(values, dtype=np.int64))

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'GridMap':
        """Build from a 2D array; nonzero / True entries are walls."""
        array = np.asarray(array)
        return cls((array != 0).astype(np.uint8))

    @classmethod
    def from_walls(cls, walls: Iterable[Tuple[int, int]], width: int, height: int) -> 'GridMap':
        """Empty ``width x height`` grid with the given wall positions set.

        Walls outside the bounds are ignored.
        """
        if width <= 0 or height <= 0:
            raise MalformedGridError(f"grid dimensions must be positive, got {width}x{height}")
        cells = np.zeros((height, width), dtype=np.uint8)
        dropped = 0
        for x, y in walls:
            if 0 <= x < width and 0 <= y < height:
                cells[y, x] = Cell.WALL
            else:
                dropped += 1
        if dropped:
            logger.debug(f"Ignored {dropped} walls outside the {width}x{height} grid")
        return cls(cells)

    def with_walls(self, positions: Iterable[Tuple[int, int]]) -> 'GridMap':
        """Return a copy of this grid with extra walls; out-of-bounds positions are ignored."""
        cells = self._cells.copy()
        for x, y in positions:
            if self.in_bounds((x, y)):
                cells[y, x] = Cell.WALL
        return GridMap(cells)

    # --------------------------------------------------
    # Lookup
    # --------------------------------------------------

    @property
    def shape(self) -> Tuple[int, int]:
        return self._cells.shape

    def in_bounds(self, pos: Tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, pos: Tuple[int, int]) -> Optional[Cell]:
        if not self.in_bounds(pos):
            return None
        x, y = pos
        return Cell(int(self._cells[y, x]))

    def is_passable(self, pos: Tuple[int, int]) -> bool:
        return self.get(pos) == Cell.EMPTY

    def passable_positions(self) -> Iterator[Position]:
        for y, x in np.argwhere(self._cells == Cell.EMPTY):
            yield Position(int(x), int(y))

    def to_array(self) -> np.ndarray:
        """Writable copy of the underlying ``[y, x]`` array."""
        return self._cells.copy()

    # --------------------------------------------------
    # Display
    # --------------------------------------------------

    def render(self, marked: Iterable[Tuple[int, int]] = ()) -> str:
        marked = set(marked)
        lines: List[str] = []
        for y in range(self.height):
            line = []
            for x in range(self.width):
                if (x, y) in marked:
                    line.append(MARK_CHAR)
                else:
                    line.append(CELL_CHARS[Cell(int(self._cells[y, x]))])
            lines.append(''.join(line))
        return '\n'.join(lines)

    def __eq__(self, other):
        if not isinstance(other, GridMap):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self):
        return hash((self.shape, self._cells.tobytes()))

    def __repr__(self):
        walls = int(np.count_nonzero(self._cells))
        return f"GridMap({self.width}x{self.height}, walls={walls})"
