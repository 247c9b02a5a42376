"""
The clause database: the one live CNF formula of a run.

A thin owner around a PySAT solver. Clauses are lists of non-zero
integers (DIMACS style: 5 means x5, -5 means NOT x5). They are only
ever appended; nothing is retracted, so the set of models can only
shrink as the run goes on.

Queries are satisfiability checks under assumption literals. An
entailment check is a query that comes back UNSAT: if F AND l is
unsatisfiable, F entails NOT l.

Each query may carry a wall-clock budget. A timer interrupts the
solver when the budget runs out; an interrupted query has no answer
and raises QueryTimeoutError instead of guessing one.
"""

from threading import Timer
from typing import Iterable, Optional

from pysat.solvers import Solver

from .errors import QueryTimeoutError


DEFAULT_SOLVER = "glucose4"
DEFAULT_TIMEOUT = None   # seconds; None = no budget


class ClauseDatabase:
    """Append-only CNF formula backed by an incremental SAT solver."""

    def __init__(self, solver_name: str = DEFAULT_SOLVER,
                 timeout: Optional[float] = DEFAULT_TIMEOUT):
        self.solver_name = solver_name
        self.timeout = timeout
        self.solver = Solver(name=solver_name)
        self.num_clauses = 0
        self.num_queries = 0

    def add_clause(self, clause: Iterable[int]):
        lits = [int(lit) for lit in clause]
        if not lits or 0 in lits:
            raise ValueError(f"not a clause: {lits}")
        self.solver.add_clause(lits)
        self.num_clauses += 1

    def add_clauses(self, clauses):
        for clause in clauses:
            self.add_clause(clause)

    def is_satisfiable(self, assumptions: Iterable[int] = (),
                       timeout: Optional[float] = None) -> bool:
        """
        Is the formula satisfiable with every assumption literal true?

        timeout overrides the database default for this one query.
        """
        assumptions = [int(lit) for lit in assumptions]
        budget = self.timeout if timeout is None else timeout
        self.num_queries += 1

        if budget is None:
            return self.solver.solve(assumptions=assumptions)

        timer = Timer(budget, self.solver.interrupt)
        timer.start()
        try:
            result = self.solver.solve_limited(
                assumptions=assumptions, expect_interrupt=True,
            )
        finally:
            timer.cancel()
            self.solver.clear_interrupt()
        if result is None:
            raise QueryTimeoutError(assumptions, budget)
        return result

    def entails(self, literal: int, timeout: Optional[float] = None) -> bool:
        """Does the formula force literal to be true?"""
        return not self.is_satisfiable([-literal], timeout=timeout)

    def close(self):
        if self.solver is not None:
            self.solver.delete()
            self.solver = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __repr__(self):
        return (f"ClauseDatabase({self.solver_name!r}, "
                f"clauses={self.num_clauses}, queries={self.num_queries})")
