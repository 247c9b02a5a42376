"""
The entailment sweep.

For every cell c, ask the oracle whether tr_future(c) is still
satisfiable together with the formula. If it is not, the formula
entails that the treasure is not at c after this move:

    - the cell is marked excluded in the knowledge matrix
    - the unit clause NOT tr_past(c) is returned as a conclusion for the
      next step, when this step's future has become the past

Re-asserting the conclusion over the future variables would add
nothing (the formula already entails it), hence the switch to the past
generation.
"""

from ..core.encoding import VariableLayout
from ..core.formula import ClauseDatabase
from ..core.gamma import PAST, FUTURE
from ..core.state import KnowledgeMatrix


def treasure_possible(db: ClauseDatabase, layout: VariableLayout, x: int, y: int) -> bool:
    """Is tr_future(x, y) consistent with everything known so far?"""
    return db.is_satisfiable([layout.var(FUTURE, x, y)])


def entailment_sweep(
    db: ClauseDatabase,
    layout: VariableLayout,
    matrix: KnowledgeMatrix,
    skip_known: bool = True,
    verbose: bool = True,
):
    """
    Test every cell and record the ones proven treasure-free.

    Args:
        db:         the live formula
        layout:     variable layout of the run
        matrix:     updated in place; cells only go from "?" to "X"
        skip_known: do not re-query cells already excluded. Their past
                    conclusion was queued when they were first proven.

    Returns:
        (conclusions, newly_excluded)
        conclusions:    unit clauses [-tr_past(c)] for every proven cell
        newly_excluded: cells that were "?" before this sweep
    """
    conclusions = []
    newly_excluded = []
    for x, y in layout.cells():
        if skip_known and matrix.is_excluded(x, y):
            continue
        if treasure_possible(db, layout, x, y):
            continue
        conclusions.append([-layout.var(PAST, x, y)])
        if matrix.exclude(x, y):
            newly_excluded.append((x, y))

    if verbose:
        print(f"  [sweep] {len(newly_excluded)} newly excluded, "
              f"{len(matrix.unknown())} cells still possible")
    return conclusions, newly_excluded
