"""
The finder main loop.

One step, always in this order:

    1. commit   conclusions queued by the previous sweep, already stated
                over the past variables, go into the formula
    2. move     ask the environment to move to the next scheduled target;
                the position changes only if the move is acknowledged
    3. sense    ask for the reading at the current position and add it
                as evidence
    4. infer    entailment sweep over every cell; new exclusions are
                marked and their past-generation form is queued

The knowledge matrix after step 4 is the observable result of the step.
A step with no target left, or with a rejected move, still senses and
infers from wherever the agent stands.
"""

from typing import Callable, Optional

from .encoding import VariableLayout
from .errors import ProtocolError, QueryTimeoutError
from .formula import ClauseDatabase
from .gamma import build_gamma
from .sensor import parse_reading
from .state import (
    FinderState,
    IDLE, AWAITING_MOVE, AWAITING_SENSE, INFERRING,
)
from .protocol import Message, NO_MESSAGE, moveto, detected
from ..inference.evidence import add_evidence
from ..inference.entail import entailment_sweep


MOVE_ANSWERS = ("movedto", "notmovedto", NO_MESSAGE.kind)
SENSE_ANSWERS = ("detected", "notdetectsat", NO_MESSAGE.kind)


def _expect(answer: Message, kinds, request: str):
    if answer.kind not in kinds:
        raise ProtocolError(f"unexpected answer {answer.kind!r} to {request}")


def commit_pending(state: FinderState, db: ClauseDatabase) -> int:
    """Add the queued past-generation conclusions. Returns how many."""
    committed = len(state.pending)
    for clause in state.pending:
        db.add_clause(clause)
        state.evidence.append(list(clause))
    state.pending = []
    return committed


def move_to_next(state: FinderState, env, verbose: bool = True) -> Message:
    """Send the next scheduled moveto, or return NO_MESSAGE if none is left."""
    if state.next_step >= len(state.steps):
        if verbose:
            print("  [move] no more steps to perform")
        return NO_MESSAGE
    x, y = state.steps[state.next_step]
    state.next_step += 1
    if verbose:
        print(f"  [move] moving to ({x},{y})")
    return env.accept_message(moveto(x, y))


def process_move_answer(state: FinderState, answer: Message, verbose: bool = True):
    _expect(answer, MOVE_ANSWERS, "moveto")
    if answer.kind == "movedto":
        state.position = answer.coords()
        if verbose:
            print(f"  [move] moved to {state.position}")
    elif answer.kind == "notmovedto" and verbose:
        print(f"  [move] move to ({answer.x},{answer.y}) rejected, "
              f"staying at {state.position}")


def detect_at(state: FinderState, env, verbose: bool = True) -> Message:
    if state.position is None:
        if verbose:
            print("  [sense] no position yet, nothing to sense")
        return NO_MESSAGE
    x, y = state.position
    if verbose:
        print(f"  [sense] detecting at ({x},{y})")
    return env.accept_message(detected(x, y))


def process_detector_answer(
    state: FinderState,
    db: ClauseDatabase,
    layout: VariableLayout,
    answer: Message,
    verbose: bool = True,
):
    """Turn a detected answer into evidence. Returns the Reading, or None."""
    _expect(answer, SENSE_ANSWERS, "detected")
    if answer.kind != "detected":
        return None
    x, y = answer.coords()
    reading = parse_reading(answer.value)
    clause = add_evidence(db, layout, reading, x, y, verbose=verbose)
    state.evidence.append(clause)
    return reading


def _run_phases(state, db, layout, env, skip_known, verbose):
    committed = commit_pending(state, db)

    state.phase = AWAITING_MOVE
    target = (list(state.steps[state.next_step])
              if state.next_step < len(state.steps) else None)
    move_answer = move_to_next(state, env, verbose=verbose)
    process_move_answer(state, move_answer, verbose=verbose)

    state.phase = AWAITING_SENSE
    sense_answer = detect_at(state, env, verbose=verbose)
    reading = process_detector_answer(state, db, layout, sense_answer,
                                      verbose=verbose)

    state.phase = INFERRING
    conclusions, newly_excluded = entailment_sweep(
        db, layout, state.matrix, skip_known=skip_known, verbose=verbose,
    )
    return committed, target, move_answer, reading, conclusions, newly_excluded


def finder_step(
    state: FinderState,
    db: ClauseDatabase,
    layout: VariableLayout,
    env,
    skip_known: bool = True,
    verbose: bool = True,
) -> FinderState:
    """
    Execute one step of the finder loop.

    Args:
        state:      current FinderState
        db:         the live formula (rule-base plus everything added since)
        layout:     variable layout the formula was built with
        env:        object with accept_message(Message) -> Message
        skip_known: do not re-query cells already excluded
        verbose:    print progress

    Raises:
        QueryTimeoutError if an entailment query runs out of time.
        ProtocolError on a malformed or unexpected answer from env.
        Either way the step is left unfinished and the state is marked
        halted; it must not be resumed.
    """
    state.step += 1
    if verbose:
        print(f"\n--- Step {state.step} ---")

    try:
        committed, target, move_answer, reading, conclusions, newly_excluded = \
            _run_phases(state, db, layout, env, skip_known, verbose)
    except (ProtocolError, QueryTimeoutError) as exc:
        state.halted = True
        state.halt_reason = f"step {state.step} aborted in {state.phase}: {exc}"
        raise
    state.pending.extend(conclusions)
    state.phase = IDLE

    state.history.append({
        "step": state.step,
        "target": target,
        "move": move_answer.kind,
        "position": list(state.position) if state.position else None,
        "reading": reading.value if reading else None,
        "committed": committed,
        "excluded": [list(c) for c in newly_excluded],
        "unknown": len(state.matrix.unknown()),
    })
    return state


def run_finder(
    state: FinderState,
    db: ClauseDatabase,
    layout: VariableLayout,
    env,
    max_steps: Optional[int] = None,
    stop_fn: Optional[Callable] = None,
    save_path: Optional[str] = None,
    on_step: Optional[Callable] = None,
    **kwargs,
) -> FinderState:
    """
    Run the finder until the step budget is spent or stop_fn says so.

    Args:
        max_steps: number of steps; defaults to the number scheduled
        stop_fn:   stop_fn(state) -> bool; halt early if True
        save_path: if set, checkpoint state after each step
        on_step:   on_step(state) called after each step
        **kwargs:  passed through to finder_step
    """
    if max_steps is None:
        max_steps = len(state.steps)
    for _ in range(max_steps):
        if state.halted:
            break
        if stop_fn and stop_fn(state):
            state.halted = True
            state.halt_reason = "stop condition met"
            break
        state = finder_step(state, db, layout, env, **kwargs)
        if on_step:
            on_step(state)
        if save_path:
            state.save(save_path)
    return state


def make_finder(
    dim: int,
    steps=(),
    db: Optional[ClauseDatabase] = None,
    verbose: bool = True,
):
    """Fresh rule-base and state for a dim x dim world. Returns (state, db, layout)."""
    db, layout = build_gamma(dim, db=db, verbose=verbose)
    state = FinderState(dim=dim, steps=[tuple(s) for s in steps])
    return state, db, layout


def restore_finder(
    state: FinderState,
    db: Optional[ClauseDatabase] = None,
    verbose: bool = True,
):
    """Rebuild the formula of a saved state: rule-base plus recorded evidence."""
    db, layout = build_gamma(state.dim, db=db, verbose=verbose)
    db.add_clauses(state.evidence)
    return db, layout


def treasure_located(state: FinderState) -> bool:
    """Stop condition: only one cell is still possible."""
    return state.matrix.located() is not None
