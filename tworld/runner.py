"""
Drivers: run a sequence of steps, or run it and check every step.

    run_steps_sequence     build the rule-base, wire up the environment,
                           execute the steps, return the final state
    verify_steps_sequence  the same, comparing the knowledge matrix after
                           every step with an expected one
"""

from typing import Optional

from .core.engine import make_finder, run_finder
from .core.errors import ConfigurationError
from .core.formula import ClauseDatabase, DEFAULT_SOLVER
from .core.state import FinderState
from .domains.world import TreasureWorldEnv
from .visualization import print_state


def _open(dim, treasure, steps, timeout, solver_name, verbose):
    db = ClauseDatabase(solver_name=solver_name, timeout=timeout)
    try:
        state, db, layout = make_finder(dim, steps, db=db, verbose=verbose)
        env = TreasureWorldEnv(dim, treasure, verbose=False)
    except Exception:
        db.close()
        raise
    return state, db, layout, env


def run_steps_sequence(
    dim: int,
    treasure: tuple,
    steps: list,
    num_steps: Optional[int] = None,
    timeout: Optional[float] = None,
    solver_name: str = DEFAULT_SOLVER,
    save_path: Optional[str] = None,
    verbose: bool = True,
) -> FinderState:
    """
    Execute num_steps steps (default: one per scheduled target).

    Steps beyond the scheduled targets re-sense at the last position.
    """
    if num_steps is None:
        num_steps = len(steps)
    state, db, layout, env = _open(dim, treasure, steps, timeout, solver_name, verbose)
    with db:
        if verbose:
            print_state(state)
        return run_finder(
            state, db, layout, env,
            max_steps=num_steps,
            save_path=save_path,
            on_step=print_state if verbose else None,
            verbose=verbose,
        )


def verify_steps_sequence(
    dim: int,
    treasure: tuple,
    steps: list,
    expected: list,
    timeout: Optional[float] = None,
    solver_name: str = DEFAULT_SOLVER,
    verbose: bool = True,
):
    """
    Run one step per expected matrix and compare after each.

    Returns:
        (state, mismatches) where mismatches lists the 1-based step
        numbers whose matrix differed from the expected one.
    """
    for i, matrix in enumerate(expected, start=1):
        if matrix.dim != dim:
            raise ConfigurationError(
                f"expected state {i} is {matrix.dim}x{matrix.dim}, world is {dim}x{dim}"
            )

    mismatches = []

    def check(state):
        target = expected[state.step - 1]
        if state.matrix != target:
            mismatches.append(state.step)
            if verbose:
                print(f"  [verify] step {state.step}: MISMATCH")
        elif verbose:
            print(f"  [verify] step {state.step}: ok")

    state, db, layout, env = _open(dim, treasure, steps, timeout, solver_name, verbose)
    with db:
        state = run_finder(
            state, db, layout, env,
            max_steps=len(expected),
            on_step=check,
            verbose=verbose,
        )
    return state, mismatches
