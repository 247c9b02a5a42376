"""
Domain: step files and expected-state files.

Step file -- the first line lists the targets, space separated:

    3,2 3,4 1,1 5,5

State file -- one knowledge matrix per step, in the text form of
KnowledgeMatrix (rows for x = N down to 1), a blank line after each.
"""

from ..core.errors import ConfigurationError
from ..core.state import KnowledgeMatrix


def _read(path: str) -> str:
    try:
        with open(path) as f:
            return f.read()
    except OSError as exc:
        raise ConfigurationError(f"cannot read {path}: {exc}")


def parse_steps(line: str, num_steps=None) -> list:
    steps = []
    for token in line.split():
        try:
            x, y = token.split(",")
            steps.append((int(x), int(y)))
        except ValueError:
            raise ConfigurationError(f"bad step {token!r}, expected x,y")
    if num_steps is not None:
        steps = steps[:num_steps]
    return steps


def load_steps(path: str, num_steps=None) -> list:
    """Targets from a step file, at most num_steps of them."""
    lines = _read(path).splitlines()
    return parse_steps(lines[0] if lines else "", num_steps)


def parse_states(text: str, dim: int, num_states=None) -> list:
    rows = [line for line in text.splitlines() if line.strip()]
    if len(rows) % dim:
        raise ConfigurationError(
            f"{len(rows)} state rows is not a multiple of dimension {dim}"
        )
    states = [KnowledgeMatrix.from_lines(rows[i:i + dim], dim)
              for i in range(0, len(rows), dim)]
    if num_states is not None:
        if len(states) < num_states:
            raise ConfigurationError(
                f"expected {num_states} states, found {len(states)}"
            )
        states = states[:num_states]
    return states


def load_states(path: str, dim: int, num_states=None) -> list:
    return parse_states(_read(path), dim, num_states)


def save_states(path: str, states) -> None:
    with open(path, "w") as f:
        for matrix in states:
            f.write(matrix.render() + "\n\n")
