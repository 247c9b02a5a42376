from .errors import ConfigurationError, ProtocolError, QueryTimeoutError
from .encoding import Coord, encode, decode, VariableLayout
from .state import KnowledgeMatrix, FinderState, UNKNOWN, EXCLUDED
from .formula import ClauseDatabase
from .sensor import Reading, sense, compatible_cells, excluded_cells
from .gamma import build_gamma
from .protocol import Message, NO_MESSAGE
from .engine import finder_step, run_finder, make_finder, restore_finder

__all__ = [
    "ConfigurationError", "ProtocolError", "QueryTimeoutError",
    "Coord", "encode", "decode", "VariableLayout",
    "KnowledgeMatrix", "FinderState", "UNKNOWN", "EXCLUDED",
    "ClauseDatabase",
    "Reading", "sense", "compatible_cells", "excluded_cells",
    "build_gamma",
    "Message", "NO_MESSAGE",
    "finder_step", "run_finder", "make_finder", "restore_finder",
]
