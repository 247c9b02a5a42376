"""
Error classes for the treasure finder.

    ConfigurationError -- the run cannot start: bad world dimension, an
                          unsatisfiable rule-base, missing or malformed
                          step/state files.
    ProtocolError      -- the environment sent something the protocol does
                          not allow (unknown message kind, bad reading).
    QueryTimeoutError  -- an entailment query ran out of its time budget.
                          The answer is unknown, so the step cannot finish.
"""


class ConfigurationError(ValueError):
    """Fatal at start-up."""


class ProtocolError(ValueError):
    """Malformed or out-of-domain message field."""


class QueryTimeoutError(RuntimeError):
    """The SAT oracle was interrupted before it could decide."""

    def __init__(self, assumptions, timeout):
        self.assumptions = list(assumptions)
        self.timeout = timeout
        super().__init__(
            f"entailment query {self.assumptions} undecided after {timeout}s"
        )
