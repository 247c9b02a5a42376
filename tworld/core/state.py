"""
Core data structures: KnowledgeMatrix, FinderState.

KnowledgeMatrix is what the finder believes about every cell:
    "?"  -- the treasure may still be here
    "X"  -- proven treasure-free; never reset to "?"

Cells are addressed 1-indexed as (x, y). In text form the matrix is
written one row per x, from x = N down to x = 1, with the y values of
a row separated by spaces:

    ? ? X      <- x = 3
    ? X X      <- x = 2
    X X X      <- x = 1

FinderState is the full state of the step loop, serializable for
continuity in the same way across runs.
"""

from dataclasses import dataclass, field
from typing import Optional
import json

from .errors import ConfigurationError


UNKNOWN = "?"
EXCLUDED = "X"
SYMBOLS = (UNKNOWN, EXCLUDED)

# Phases of one step.
IDLE = "idle"
AWAITING_MOVE = "awaiting_move"
AWAITING_SENSE = "awaiting_sense"
INFERRING = "inferring"


class KnowledgeMatrix:
    """N x N grid of belief symbols."""

    def __init__(self, dim: int):
        if dim < 1:
            raise ConfigurationError(f"world dimension must be >= 1, got {dim}")
        self.dim = dim
        self.cells = [[UNKNOWN] * dim for _ in range(dim)]

    def get(self, x: int, y: int) -> str:
        return self.cells[x - 1][y - 1]

    def set(self, x: int, y: int, symbol: str):
        if symbol not in SYMBOLS:
            raise ValueError(f"unknown symbol {symbol!r}")
        if symbol == UNKNOWN and self.is_excluded(x, y):
            raise ValueError(f"({x},{y}) is already excluded")
        self.cells[x - 1][y - 1] = symbol

    def exclude(self, x: int, y: int) -> bool:
        """Mark (x, y) excluded. Returns True if it was not excluded before."""
        if self.is_excluded(x, y):
            return False
        self.cells[x - 1][y - 1] = EXCLUDED
        return True

    def is_excluded(self, x: int, y: int) -> bool:
        return self.cells[x - 1][y - 1] == EXCLUDED

    def excluded(self) -> set:
        return {(x, y) for x, y in self._coords() if self.is_excluded(x, y)}

    def unknown(self) -> set:
        return {(x, y) for x, y in self._coords() if not self.is_excluded(x, y)}

    def located(self):
        """The treasure cell, once every other cell has been excluded."""
        remaining = self.unknown()
        if len(remaining) == 1:
            return next(iter(remaining))
        return None

    def copy(self) -> "KnowledgeMatrix":
        other = KnowledgeMatrix(self.dim)
        other.cells = [row[:] for row in self.cells]
        return other

    def _coords(self):
        for x in range(1, self.dim + 1):
            for y in range(1, self.dim + 1):
                yield (x, y)

    def __eq__(self, other):
        return (isinstance(other, KnowledgeMatrix) and
                self.dim == other.dim and
                self.cells == other.cells)

    def __repr__(self):
        return f"KnowledgeMatrix(dim={self.dim}, excluded={len(self.excluded())})"

    # ── text form ────────────────────────────────────────────────────────

    def to_lines(self) -> list:
        return [" ".join(self.cells[x - 1]) for x in range(self.dim, 0, -1)]

    def render(self) -> str:
        return "\n".join(self.to_lines())

    @classmethod
    def from_lines(cls, lines, dim: int) -> "KnowledgeMatrix":
        lines = list(lines)
        if len(lines) != dim:
            raise ConfigurationError(f"expected {dim} rows, got {len(lines)}")
        matrix = cls(dim)
        for i, row in enumerate(lines):
            x = dim - i
            values = row.split()
            if len(values) != dim:
                raise ConfigurationError(
                    f"row for x={x} has {len(values)} values, expected {dim}: {row!r}"
                )
            for y, symbol in enumerate(values, start=1):
                if symbol not in SYMBOLS:
                    raise ConfigurationError(f"unknown symbol {symbol!r} at ({x},{y})")
                matrix.set(x, y, symbol)
        return matrix


@dataclass
class FinderState:
    """
    Full state of the finder loop.

    steps:      scheduled target positions, consumed in order
    next_step:  index of the next target in steps
    position:   where the agent stands; None until a move is acknowledged
    pending:    unit clauses over past variables, committed next step
    evidence:   every clause added on top of the rule-base, in order;
                replaying it over a fresh rule-base restores the formula
    history:    one entry per executed step
    """
    dim: int
    steps: list = field(default_factory=list)
    next_step: int = 0
    position: Optional[tuple] = None
    pending: list = field(default_factory=list)
    evidence: list = field(default_factory=list)
    matrix: Optional[KnowledgeMatrix] = None
    history: list = field(default_factory=list)
    step: int = 0
    phase: str = IDLE
    halted: bool = False
    halt_reason: str = ""

    def __post_init__(self):
        if self.matrix is None:
            self.matrix = KnowledgeMatrix(self.dim)

    @property
    def steps_left(self) -> int:
        return max(len(self.steps) - self.next_step, 0)

    def to_dict(self):
        return {
            "dim": self.dim,
            "steps": [list(s) for s in self.steps],
            "next_step": self.next_step,
            "position": list(self.position) if self.position else None,
            "pending": [list(c) for c in self.pending],
            "evidence": [list(c) for c in self.evidence],
            "matrix": self.matrix.to_lines(),
            "history": self.history,
            "step": self.step,
            "phase": self.phase,
            "halted": self.halted,
            "halt_reason": self.halt_reason,
        }

    @classmethod
    def from_dict(cls, d):
        dim = d["dim"]
        position = d.get("position")
        state = cls(
            dim=dim,
            steps=[tuple(s) for s in d.get("steps", [])],
            next_step=d.get("next_step", 0),
            position=tuple(position) if position else None,
            pending=[list(c) for c in d.get("pending", [])],
            evidence=[list(c) for c in d.get("evidence", [])],
            matrix=KnowledgeMatrix.from_lines(d["matrix"], dim),
        )
        state.history = d.get("history", [])
        state.step = d.get("step", 0)
        state.phase = d.get("phase", IDLE)
        state.halted = d.get("halted", False)
        state.halt_reason = d.get("halt_reason", "")
        return state

    def save(self, path="tworld_state.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="tworld_state.json"):
        with open(path) as f:
            return cls.from_dict(json.load(f))
