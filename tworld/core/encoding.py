"""
Variable layout: grid cells <-> integer variable identifiers.

Every Boolean variable of the formula talks about one cell of the N x N
world. Variables are grouped into subsets of N*N consecutive identifiers:

    past      tr(x,y) before the current move
    future    tr(x,y) after the current move
    sensor1   "reading 1 observed at (x,y)"
    sensor2   "reading 2 observed at (x,y)"
    sensor3   "reading 3 observed at (x,y)"

Inside a subset, cell (x, y) maps to (x-1)*N + (y-1) + offset.
Offsets are handed out by allocate(), in the order the rule-base is built,
starting at 1 (DIMACS variables are positive integers).
"""

from dataclasses import dataclass, field
from typing import Iterator


Coord = tuple   # (x, y), 1-indexed


def encode(x: int, y: int, offset: int, dim: int) -> int:
    """Identifier of cell (x, y) in the subset starting at offset."""
    return (x - 1) * dim + (y - 1) + offset


def decode(literal: int, offset: int, dim: int) -> Coord:
    """Inverse of encode(). The sign of the literal is ignored."""
    index = abs(literal) - offset
    return (index // dim + 1, index % dim + 1)


@dataclass
class VariableLayout:
    """
    Allocation cursor plus the offsets handed out so far.

    No bounds checking is done in encode/decode: callers always go
    through an offset obtained from allocate().
    """
    dim: int
    cursor: int = 1
    offsets: dict = field(default_factory=dict)

    @property
    def size(self) -> int:
        return self.dim * self.dim

    @property
    def total_variables(self) -> int:
        return self.cursor - 1

    def allocate(self, name: str) -> int:
        if name in self.offsets:
            raise ValueError(f"variable subset {name!r} already allocated")
        offset = self.cursor
        self.offsets[name] = offset
        self.cursor += self.size
        return offset

    def offset(self, name: str) -> int:
        return self.offsets[name]

    def var(self, name: str, x: int, y: int) -> int:
        return encode(x, y, self.offsets[name], self.dim)

    def cell(self, name: str, literal: int) -> Coord:
        return decode(literal, self.offsets[name], self.dim)

    def subset_of(self, literal: int) -> str:
        """Name of the subset a literal belongs to."""
        v = abs(literal)
        for name, offset in self.offsets.items():
            if offset <= v < offset + self.size:
                return name
        raise KeyError(literal)

    def in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.dim and 1 <= y <= self.dim

    def cells(self) -> Iterator[Coord]:
        for x in range(1, self.dim + 1):
            for y in range(1, self.dim + 1):
                yield (x, y)
