"""
Domain: the simulated Treasure World.

The environment knows where the treasure is. It answers moveto and
detected messages (see core.protocol) and nothing else; the finder
never looks at the world directly.
"""

from ..core.errors import ConfigurationError, ProtocolError
from ..core.protocol import Message
from ..core.sensor import sense


class TreasureWorldEnv:
    """Knows where the treasure is and answers the finder's messages."""

    def __init__(self, dim: int, treasure: tuple, verbose: bool = False):
        self.dim = dim
        self.treasure = tuple(treasure)
        self.verbose = verbose
        if not self.within_limits(*self.treasure):
            raise ConfigurationError(f"treasure {self.treasure} outside a {dim}x{dim} world")

    def within_limits(self, x: int, y: int) -> bool:
        return 1 <= x <= self.dim and 1 <= y <= self.dim

    def sensor_value(self, x: int, y: int) -> str:
        return str(sense(self.treasure, x, y, self.dim).value)

    def accept_message(self, msg: Message) -> Message:
        if self.verbose:
            print(f"  [env] <- {msg}")
        if msg.kind == "moveto":
            x, y = msg.coords()
            kind = "movedto" if self.within_limits(x, y) else "notmovedto"
            ans = Message(kind, msg.x, msg.y)
        elif msg.kind == "detected":
            x, y = msg.coords()
            if self.within_limits(x, y):
                ans = Message("detected", msg.x, msg.y, self.sensor_value(x, y))
            else:
                ans = Message("notdetectsat", msg.x, msg.y)
        else:
            raise ProtocolError(f"unknown message kind {msg.kind!r}")
        if self.verbose:
            print(f"  [env] -> {ans}")
        return ans
