"""
Unit tests for evidence encoding.

Core claims:
    - every reading has a builder in the dispatch table
    - a reading becomes one positive unit clause over its sensor subset
    - evidence goes straight into the formula and narrows the models
"""

import pytest

from tworld.core.gamma import build_gamma, FUTURE
from tworld.core.sensor import Reading
from tworld.inference.evidence import EVIDENCE_BUILDERS, evidence_clause, add_evidence


@pytest.fixture
def gamma4():
    db, layout = build_gamma(4, verbose=False)
    yield db, layout
    db.close()


class TestEvidenceClause:
    def test_table_covers_every_reading(self):
        assert set(EVIDENCE_BUILDERS) == set(Reading)

    @pytest.mark.parametrize("reading", list(Reading))
    def test_unit_clause_over_sensor_subset(self, gamma4, reading):
        _, layout = gamma4
        clause = evidence_clause(layout, reading, 2, 3)
        assert clause == [layout.var(reading.subset, 2, 3)]
        assert layout.subset_of(clause[0]) == reading.subset

    def test_builders_are_pure(self, gamma4):
        db, layout = gamma4
        before = db.num_clauses
        evidence_clause(layout, Reading.CROSS, 1, 1)
        assert db.num_clauses == before


class TestAddEvidence:
    def test_clause_added(self, gamma4):
        db, layout = gamma4
        before = db.num_clauses
        clause = add_evidence(db, layout, Reading.DIAGONAL, 2, 2, verbose=False)
        assert db.num_clauses == before + 1
        assert clause == [layout.var("sensor2", 2, 2)]

    def test_evidence_narrows_models(self, gamma4):
        db, layout = gamma4
        add_evidence(db, layout, Reading.CROSS, 1, 1, verbose=False)
        assert db.is_satisfiable([layout.var(FUTURE, 1, 2)])
        assert not db.is_satisfiable([layout.var(FUTURE, 3, 3)])

    def test_verbose(self, gamma4, capsys):
        db, layout = gamma4
        add_evidence(db, layout, Reading.FAR, 4, 1, verbose=True)
        assert "detector 3 at (4,1)" in capsys.readouterr().out
