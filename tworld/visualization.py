"""
Console reporting.
"""

from .core.state import FinderState, KnowledgeMatrix


def print_matrix(matrix: KnowledgeMatrix, indent: str = "  "):
    for line in matrix.to_lines():
        print(f"{indent}{line}")


def print_state(state: FinderState):
    """Print the knowledge matrix and where the agent stands."""
    print(f"\n{'='*60}")
    print(f"Step: {state.step}   Position: {state.position}   "
          f"Steps left: {state.steps_left}")
    print(f"Possible cells: {len(state.matrix.unknown())} / {state.dim * state.dim}")
    print_matrix(state.matrix)
    print(f"{'='*60}")


def print_history(state: FinderState):
    """Print what each step did."""
    print(f"\n{'='*60}")
    print("Step history:")
    print(f"{'='*60}")
    for entry in state.history:
        reading = entry["reading"] if entry["reading"] is not None else "-"
        excluded = len(entry["excluded"])
        print(f"  Step {entry['step']}: {entry['move']} -> {entry['position']}, "
              f"reading {reading}, +{excluded} excluded, "
              f"{entry['unknown']} possible")
    located = state.matrix.located()
    if located:
        print(f"  Treasure located at {located}")
