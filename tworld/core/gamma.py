"""
Gamma: the static rule-base of the Treasure World.

Built once, before the first step, in this order:

    1. existence    OR over all past tr(x,y);  OR over all future tr(x,y)
    2. persistence  for every cell:  tr_past(c) OR NOT tr_future(c)
                    (a cell excluded before the move stays excluded after it)
    3. sensors      for every reading k, sensor cell s and every cell c the
                    reading rules out:  NOT sensor_k(s) OR NOT tr_future(c)

Time is represented by two fixed generations of treasure variables.
Nothing is allocated after this point: the future conclusions of one
step are re-stated over the past variables at the start of the next.
"""

from typing import Optional

from .encoding import VariableLayout
from .errors import ConfigurationError
from .formula import ClauseDatabase
from .sensor import Reading, excluded_cells


PAST = "past"
FUTURE = "future"


def existence_clauses(layout: VariableLayout, subset: str) -> list:
    return [[layout.var(subset, x, y) for x, y in layout.cells()]]


def persistence_clauses(layout: VariableLayout) -> list:
    return [
        [layout.var(PAST, x, y), -layout.var(FUTURE, x, y)]
        for x, y in layout.cells()
    ]


def sensor_clauses(layout: VariableLayout, reading: Reading) -> list:
    clauses = []
    for x, y in layout.cells():
        fired = layout.var(reading.subset, x, y)
        for i, j in sorted(excluded_cells(reading, x, y, layout.dim)):
            clauses.append([-fired, -layout.var(FUTURE, i, j)])
    return clauses


def _assert_family(db: ClauseDatabase, name: str, clauses: list, verbose: bool):
    db.add_clauses(clauses)
    if verbose:
        print(f"  [gamma] {name}: {len(clauses)} clauses")
    if not db.is_satisfiable():
        raise ConfigurationError(f"rule-base unsatisfiable after {name} axioms")


def build_gamma(
    dim: int,
    db: Optional[ClauseDatabase] = None,
    verbose: bool = True,
):
    """
    Allocate the variable subsets of a dim x dim world and load Gamma.

    Args:
        dim:     world dimension N
        db:      clause database to fill; a fresh one if None
        verbose: print a line per axiom family

    Returns:
        (db, layout)

    Raises:
        ConfigurationError if dim < 1 or an axiom family makes the
        formula unsatisfiable.
    """
    if dim < 1:
        raise ConfigurationError(f"world dimension must be >= 1, got {dim}")
    if db is None:
        db = ClauseDatabase()
    layout = VariableLayout(dim)

    layout.allocate(PAST)
    layout.allocate(FUTURE)
    _assert_family(db, "existence", existence_clauses(layout, PAST) +
                   existence_clauses(layout, FUTURE), verbose)
    _assert_family(db, "persistence", persistence_clauses(layout), verbose)

    for reading in Reading:
        layout.allocate(reading.subset)
        _assert_family(db, f"sensor {reading.value}",
                       sensor_clauses(layout, reading), verbose)

    if verbose:
        print(f"  [gamma] {layout.total_variables} variables, "
              f"{db.num_clauses} clauses")
    return db, layout
