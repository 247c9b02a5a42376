"""
Scenario registry.

Each scenario is a dict describing one run of the finder:
    dim:         world dimension N
    treasure:    (x, y) of the treasure
    steps:       scheduled targets, in order
    description: str
"""

from .world import TreasureWorldEnv
from .files import load_steps, load_states, parse_steps, parse_states, save_states


SCENARIOS = {
    "cross": {
        "dim": 6,
        "treasure": (3, 3),
        "steps": parse_steps("3,2 3,4"),
        "description": "Two cross readings pin the treasure down in two steps",
    },
    "corner": {
        "dim": 6,
        "treasure": (3, 3),
        "steps": parse_steps("1,1 6,6 2,2 3,4"),
        "description": "Far readings from the corners, then a diagonal and a cross",
    },
    "offgrid": {
        "dim": 5,
        "treasure": (4, 2),
        "steps": parse_steps("2,2 0,3 9,9 5,1"),
        "description": "Rejected moves leave the agent sensing where it stands",
    },
    "tworld1": {
        "dim": 6,
        "treasure": (3, 3),
        "steps": parse_steps("1,1 2,2 3,4 4,4 3,3"),
        "description": "6x6 world, five steps",
    },
    "tworld2": {
        "dim": 7,
        "treasure": (4, 4),
        "steps": parse_steps("1,1 1,7 7,1 3,3 4,5 4,4"),
        "description": "7x7 world, six steps",
    },
    "tworld3": {
        "dim": 8,
        "treasure": (5, 4),
        "steps": parse_steps("1,1 2,3 4,4 6,5 5,5 5,3 5,4"),
        "description": "8x8 world, seven steps",
    },
    "tworld4": {
        "dim": 10,
        "treasure": (6, 5),
        "steps": parse_steps("1,1 3,3 5,5 7,7 6,6 6,4 6,5"),
        "description": "10x10 world, seven steps",
    },
}

__all__ = [
    "SCENARIOS", "TreasureWorldEnv",
    "load_steps", "load_states", "parse_steps", "parse_states", "save_states",
]
