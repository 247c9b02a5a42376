"""
Unit tests for KnowledgeMatrix and FinderState.

Core claims:
    - a fresh matrix is all unknown
    - exclude() is permanent and reports only the first exclusion
    - equality holds only when every symbol matches
    - the text form is rows x = N..1 and parses back to the same matrix
    - FinderState survives to_dict/from_dict and save/load
"""

import pytest

from tworld.core.errors import ConfigurationError
from tworld.core.state import KnowledgeMatrix, FinderState, UNKNOWN, EXCLUDED


# ── KnowledgeMatrix ──────────────────────────────────────────────────────────

class TestKnowledgeMatrix:
    def test_fresh_matrix_unknown(self):
        m = KnowledgeMatrix(4)
        assert all(m.get(x, y) == UNKNOWN for x in range(1, 5) for y in range(1, 5))
        assert m.excluded() == set()
        assert len(m.unknown()) == 16

    def test_exclude_reports_first_time_only(self):
        m = KnowledgeMatrix(3)
        assert m.exclude(2, 3)
        assert not m.exclude(2, 3)
        assert m.get(2, 3) == EXCLUDED
        assert m.excluded() == {(2, 3)}

    def test_set_cannot_reset_excluded(self):
        m = KnowledgeMatrix(2)
        m.exclude(1, 2)
        with pytest.raises(ValueError):
            m.set(1, 2, UNKNOWN)
        m.set(1, 2, EXCLUDED)
        assert m.is_excluded(1, 2)

    def test_set_rejects_unknown_symbol(self):
        with pytest.raises(ValueError):
            KnowledgeMatrix(2).set(1, 1, "T")

    @pytest.mark.parametrize("dim", [0, -1])
    def test_bad_dimension(self, dim):
        with pytest.raises(ConfigurationError):
            KnowledgeMatrix(dim)

    def test_equality(self):
        a, b = KnowledgeMatrix(3), KnowledgeMatrix(3)
        assert a == b
        a.exclude(1, 1)
        assert a != b
        b.exclude(1, 1)
        assert a == b

    def test_different_dimensions_not_equal(self):
        assert KnowledgeMatrix(2) != KnowledgeMatrix(3)

    def test_copy_is_independent(self):
        a = KnowledgeMatrix(2)
        b = a.copy()
        b.exclude(1, 2)
        assert not a.is_excluded(1, 2)

    def test_located(self):
        m = KnowledgeMatrix(2)
        assert m.located() is None
        for cell in [(1, 1), (1, 2), (2, 2)]:
            m.exclude(*cell)
        assert m.located() == (2, 1)


class TestTextForm:
    def test_rows_top_down(self):
        m = KnowledgeMatrix(3)
        m.exclude(1, 1)
        m.exclude(3, 2)
        assert m.to_lines() == [
            "? X ?",
            "? ? ?",
            "X ? ?",
        ]

    def test_parse(self):
        m = KnowledgeMatrix.from_lines(["X ?", "? ?"], 2)
        assert m.excluded() == {(2, 1)}

    def test_parse_back(self):
        m = KnowledgeMatrix(4)
        for cell in [(1, 4), (2, 2), (4, 1)]:
            m.exclude(*cell)
        assert KnowledgeMatrix.from_lines(m.to_lines(), 4) == m

    def test_wrong_row_count(self):
        with pytest.raises(ConfigurationError):
            KnowledgeMatrix.from_lines(["? ?"], 2)

    def test_wrong_row_width(self):
        with pytest.raises(ConfigurationError):
            KnowledgeMatrix.from_lines(["? ?", "? ? ?"], 2)

    def test_unknown_symbol(self):
        with pytest.raises(ConfigurationError):
            KnowledgeMatrix.from_lines(["? ?", "? T"], 2)


# ── FinderState ──────────────────────────────────────────────────────────────

def _busy_state():
    state = FinderState(dim=3, steps=[(1, 1), (2, 2)])
    state.next_step = 1
    state.position = (1, 1)
    state.pending = [[-5]]
    state.evidence = [[37], [-1]]
    state.matrix.exclude(1, 2)
    state.history.append({"step": 1, "reading": 3})
    state.step = 1
    return state


class TestFinderState:
    def test_fresh_state(self):
        state = FinderState(dim=4)
        assert state.matrix == KnowledgeMatrix(4)
        assert state.position is None
        assert state.steps_left == 0

    def test_steps_left(self):
        assert _busy_state().steps_left == 1

    def test_dict_round_trip(self):
        state = _busy_state()
        restored = FinderState.from_dict(state.to_dict())
        assert restored.steps == state.steps
        assert restored.position == (1, 1)
        assert restored.pending == [[-5]]
        assert restored.evidence == [[37], [-1]]
        assert restored.matrix == state.matrix
        assert restored.history == state.history
        assert restored.step == 1

    def test_json_round_trip(self, tmp_path):
        state = _busy_state()
        path = str(tmp_path / "state.json")
        state.save(path)
        restored = FinderState.load(path)
        assert restored.matrix == state.matrix
        assert restored.next_step == 1
