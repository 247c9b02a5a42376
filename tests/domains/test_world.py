"""
Unit tests for the simulated environment and protocol messages.

Core claims:
    - moves inside the grid are acknowledged, others rejected
    - detected answers carry the reading of a correct sensor
    - sensing off the grid answers notdetectsat
    - anything else is a protocol error
    - a treasure off the grid is a configuration error
"""

import pytest

from tworld.core.errors import ConfigurationError, ProtocolError
from tworld.core.protocol import Message, NO_MESSAGE, moveto, detected
from tworld.domains.world import TreasureWorldEnv


@pytest.fixture
def env():
    return TreasureWorldEnv(6, (3, 3))


class TestMessages:
    def test_fields_are_strings(self):
        assert moveto(3, 2) == Message("moveto", "3", "2", "")

    def test_str(self):
        assert str(Message("detected", "1", "2", "3")) == "detected 1 2 3"
        assert str(NO_MESSAGE) == "NOMESSAGE"

    def test_coords(self):
        assert detected(4, 5).coords() == (4, 5)

    def test_bad_coords(self):
        with pytest.raises(ProtocolError):
            Message("moveto", "a", "1").coords()


class TestMove:
    def test_inside(self, env):
        assert env.accept_message(moveto(6, 1)) == Message("movedto", "6", "1")

    @pytest.mark.parametrize("x,y", [(0, 1), (7, 3), (2, -1)])
    def test_outside(self, env, x, y):
        assert env.accept_message(moveto(x, y)).kind == "notmovedto"


class TestDetect:
    @pytest.mark.parametrize("x,y,value", [
        (3, 2, "1"), (3, 3, "1"), (4, 3, "1"),
        (2, 2, "2"), (4, 4, "2"),
        (1, 1, "3"), (3, 5, "3"), (6, 6, "3"),
    ])
    def test_reading(self, env, x, y, value):
        assert env.accept_message(detected(x, y)) == Message("detected", str(x), str(y), value)

    def test_outside(self, env):
        assert env.accept_message(detected(0, 3)) == Message("notdetectsat", "0", "3")


class TestProtocolErrors:
    def test_unknown_kind(self, env):
        with pytest.raises(ProtocolError):
            env.accept_message(Message("teleport", "1", "1"))

    def test_treasure_outside_world(self):
        with pytest.raises(ConfigurationError):
            TreasureWorldEnv(4, (5, 1))

    def test_verbose_env_echoes(self, capsys):
        TreasureWorldEnv(3, (2, 2), verbose=True).accept_message(moveto(1, 1))
        out = capsys.readouterr().out
        assert "moveto 1 1" in out
        assert "movedto 1 1" in out
