"""
Unit tests for the entailment sweep.

Core claims:
    - with no evidence nothing is entailed
    - every proven cell is marked and yields NOT tr_past(cell)
    - skipping known cells only saves queries, it changes no verdict
    - re-running the sweep on an unchanged formula changes nothing
"""

import pytest

from tworld.core.gamma import build_gamma, PAST
from tworld.core.sensor import Reading
from tworld.core.state import KnowledgeMatrix
from tworld.inference.entail import entailment_sweep, treasure_possible
from tworld.inference.evidence import add_evidence


@pytest.fixture
def gamma5():
    db, layout = build_gamma(5, verbose=False)
    yield db, layout
    db.close()


class TestSweep:
    def test_nothing_entailed_without_evidence(self, gamma5):
        db, layout = gamma5
        matrix = KnowledgeMatrix(5)
        conclusions, newly = entailment_sweep(db, layout, matrix, verbose=False)
        assert conclusions == []
        assert newly == []

    def test_diagonal_reading(self, gamma5):
        db, layout = gamma5
        add_evidence(db, layout, Reading.DIAGONAL, 3, 3, verbose=False)
        matrix = KnowledgeMatrix(5)
        conclusions, newly = entailment_sweep(db, layout, matrix, verbose=False)
        assert matrix.unknown() == {(2, 2), (2, 4), (4, 2), (4, 4)}
        assert len(newly) == 21
        assert sorted(conclusions) == sorted(
            [[-layout.var(PAST, x, y)] for x, y in newly]
        )

    def test_treasure_possible(self, gamma5):
        db, layout = gamma5
        add_evidence(db, layout, Reading.CROSS, 5, 5, verbose=False)
        assert treasure_possible(db, layout, 4, 5)
        assert not treasure_possible(db, layout, 4, 4)

    def test_skip_known_saves_queries(self, gamma5):
        db, layout = gamma5
        add_evidence(db, layout, Reading.CROSS, 1, 1, verbose=False)
        matrix = KnowledgeMatrix(5)
        entailment_sweep(db, layout, matrix, verbose=False)

        queries = db.num_queries
        conclusions, newly = entailment_sweep(db, layout, matrix, verbose=False)
        assert db.num_queries - queries == 3
        assert conclusions == []
        assert newly == []

    def test_recheck_is_idempotent(self, gamma5):
        db, layout = gamma5
        add_evidence(db, layout, Reading.FAR, 3, 3, verbose=False)
        matrix = KnowledgeMatrix(5)
        first, _ = entailment_sweep(db, layout, matrix, skip_known=False, verbose=False)
        snapshot = matrix.copy()
        second, newly = entailment_sweep(db, layout, matrix, skip_known=False, verbose=False)
        assert matrix == snapshot
        assert first == second
        assert newly == []
        assert len(matrix.excluded()) == 9
