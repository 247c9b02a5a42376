"""
tworld: a propositional finder for the Treasure World.

An agent walks an N x N grid and, after every move, reads a proximity
sensor. A CNF rule-base plus the readings, queried with a SAT solver,
tells which cells can no longer hold the treasure. Conclusions are
carried from one step to the next with two fixed generations of
variables, so the formula never grows new variables.

Usage:
    python -m tworld 6 3 3 5 steps.txt
    python -m tworld 6 3 3 5 steps.txt --states states.txt
    python -m tworld --scenario cross
"""

from .core.errors import ConfigurationError, ProtocolError, QueryTimeoutError
from .core.encoding import encode, decode, VariableLayout
from .core.state import KnowledgeMatrix, FinderState, UNKNOWN, EXCLUDED
from .core.formula import ClauseDatabase
from .core.sensor import Reading, sense
from .core.gamma import build_gamma
from .core.protocol import Message
from .core.engine import finder_step, run_finder, make_finder, restore_finder
from .inference.evidence import evidence_clause, add_evidence
from .inference.entail import entailment_sweep
from .domains import SCENARIOS, TreasureWorldEnv, load_steps, load_states
from .runner import run_steps_sequence, verify_steps_sequence

__all__ = [
    "ConfigurationError", "ProtocolError", "QueryTimeoutError",
    "encode", "decode", "VariableLayout",
    "KnowledgeMatrix", "FinderState", "UNKNOWN", "EXCLUDED",
    "ClauseDatabase",
    "Reading", "sense",
    "build_gamma",
    "Message",
    "finder_step", "run_finder", "make_finder", "restore_finder",
    "evidence_clause", "add_evidence",
    "entailment_sweep",
    "SCENARIOS", "TreasureWorldEnv", "load_steps", "load_states",
    "run_steps_sequence", "verify_steps_sequence",
]
