"""
Evidence: one sensor reading -> one unit clause.

A reading observed at the agent's position is authoritative for the
current step, so its clause goes straight into the live formula. The
rule-base already says what each reading rules out; the evidence only
switches the matching sensor variable on.

Dispatch is a table from Reading to a pure clause builder.
"""

from ..core.encoding import VariableLayout
from ..core.formula import ClauseDatabase
from ..core.sensor import Reading


def _fired(reading: Reading):
    def build(layout: VariableLayout, x: int, y: int) -> list:
        return [layout.var(reading.subset, x, y)]
    build.__name__ = f"reading_{reading.value}_clause"
    return build


EVIDENCE_BUILDERS = {reading: _fired(reading) for reading in Reading}


def evidence_clause(layout: VariableLayout, reading: Reading, x: int, y: int) -> list:
    """The unit clause stating reading was observed at (x, y)."""
    return EVIDENCE_BUILDERS[reading](layout, x, y)


def add_evidence(
    db: ClauseDatabase,
    layout: VariableLayout,
    reading: Reading,
    x: int,
    y: int,
    verbose: bool = True,
) -> list:
    """Append the evidence clause for reading at (x, y). Returns the clause."""
    clause = evidence_clause(layout, reading, x, y)
    db.add_clause(clause)
    if verbose:
        print(f"  [evidence] detector {reading.value} at ({x},{y})")
    return clause
