"""
The proximity sensor and the shapes behind its three readings.

Standing at (x, y) the sensor reports one value:

    1  -- the treasure is in the cross around (x, y):
          (x, y) itself and its four orthogonal neighbours
    2  -- the treasure is on one of the four diagonal neighbours
    3  -- neither: the treasure lies outside the 3x3 block around (x, y)

For every reading there is a set of cells it rules out. Readings 1 and
2 rule out everything but their shape; reading 3 rules out the block.
Neighbours that fall off the grid are dropped; the world does not wrap.
"""

from enum import Enum

from .errors import ProtocolError


class Reading(Enum):
    CROSS = 1
    DIAGONAL = 2
    FAR = 3

    @property
    def subset(self) -> str:
        """Name of the variable subset holding "this reading at (x,y)"."""
        return f"sensor{self.value}"


CROSS_DELTAS = ((0, -1), (0, 0), (0, 1), (-1, 0), (1, 0))
DIAGONAL_DELTAS = ((1, 1), (1, -1), (-1, -1), (-1, 1))


def _around(x, y, deltas, dim):
    return {(x + dx, y + dy) for dx, dy in deltas
            if 1 <= x + dx <= dim and 1 <= y + dy <= dim}


def cross(x: int, y: int, dim: int) -> set:
    return _around(x, y, CROSS_DELTAS, dim)


def diagonals(x: int, y: int, dim: int) -> set:
    return _around(x, y, DIAGONAL_DELTAS, dim)


def block(x: int, y: int, dim: int) -> set:
    return cross(x, y, dim) | diagonals(x, y, dim)


def _all_cells(dim):
    return {(i, j) for i in range(1, dim + 1) for j in range(1, dim + 1)}


def compatible_cells(reading: Reading, x: int, y: int, dim: int) -> set:
    """Cells where the treasure may be, given reading observed at (x, y)."""
    if reading is Reading.CROSS:
        return cross(x, y, dim)
    if reading is Reading.DIAGONAL:
        return diagonals(x, y, dim)
    return _all_cells(dim) - block(x, y, dim)


def excluded_cells(reading: Reading, x: int, y: int, dim: int) -> set:
    """Cells that reading observed at (x, y) rules out."""
    return _all_cells(dim) - compatible_cells(reading, x, y, dim)


def sense(treasure, x: int, y: int, dim: int) -> Reading:
    """The reading a correct sensor at (x, y) produces."""
    if treasure in cross(x, y, dim):
        return Reading.CROSS
    if treasure in diagonals(x, y, dim):
        return Reading.DIAGONAL
    return Reading.FAR


def parse_reading(value) -> Reading:
    """Reading from a protocol field ("1", "2", "3")."""
    try:
        return Reading(int(value))
    except (TypeError, ValueError):
        raise ProtocolError(f"sensor reading must be 1, 2 or 3, got {value!r}")
