"""
Agent <-> environment messages.

Every message has four string fields: kind, x, y, value.

    moveto   x y      ->  movedto x y        (in bounds)
                          notmovedto x y     (out of bounds)
    detected x y      ->  detected x y r     r in "1", "2", "3"
                          notdetectsat x y   (out of bounds)

NOMESSAGE is what the finder "receives" when it has no step left to
ask for.
"""

from typing import NamedTuple

from .errors import ProtocolError


class Message(NamedTuple):
    kind: str
    x: str = ""
    y: str = ""
    value: str = ""

    def coords(self) -> tuple:
        try:
            return int(self.x), int(self.y)
        except ValueError:
            raise ProtocolError(f"bad coordinates in {self}")

    def __str__(self):
        return " ".join(f for f in self if f)


NO_MESSAGE = Message("NOMESSAGE")


def moveto(x: int, y: int) -> Message:
    return Message("moveto", str(x), str(y))


def detected(x: int, y: int) -> Message:
    return Message("detected", str(x), str(y))
