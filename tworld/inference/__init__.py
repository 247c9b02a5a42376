from .evidence import EVIDENCE_BUILDERS, evidence_clause, add_evidence
from .entail import treasure_possible, entailment_sweep

__all__ = [
    "EVIDENCE_BUILDERS", "evidence_clause", "add_evidence",
    "treasure_possible", "entailment_sweep",
]
