"""
Pattern library: named shapes as (row, col) offsets from their top-left cell.
"""
from typing import Dict, Iterable, List, Tuple, Union
import numpy as np

from .world import Cell, World, get_xbase, to_index

PATTERNS: Dict[str, List[Tuple[int, int]]] = {
    # still lifes
    "block": [(0, 0), (0, 1), (1, 0), (1, 1)],
    "beehive": [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
    # oscillators
    "blinker": [(0, 0), (0, 1), (0, 2)],
    "toad": [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
    "beacon": [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
    # travellers
    "glider": [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
    "lwss": [
        (0, 1), (0, 4), (1, 0), (2, 0), (2, 4),
        (3, 0), (3, 1), (3, 2), (3, 3),
    ],
    # methuselahs
    "r_pentomino": [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
}

STILL_LIFES = ["block", "beehive"]
OSCILLATORS = ["blinker", "toad", "beacon"]
TRAVELLERS = ["glider", "lwss"]

Pattern = Union[str, Iterable[Tuple[int, int]]]


def place(world: World, pattern: Pattern, row: int = 0, col: int = 0) -> World:
    """Stamp `pattern` alive with its origin at (row, col), wrapping around the torus."""
    cells = PATTERNS[pattern] if isinstance(pattern, str) else pattern
    xbase = get_xbase(world)
    out = world.cells.copy()
    for dy, dx in cells:
        out[to_index(row + dy, col + dx, xbase)] = Cell.ALIVE
    return World(out)


def bounding_box(pattern: Pattern) -> Tuple[int, int]:
    """(height, width) of a pattern."""
    cells = PATTERNS[pattern] if isinstance(pattern, str) else list(pattern)
    if not cells:
        return 0, 0
    ys, xs = np.array(cells).T
    return int(ys.max() - ys.min() + 1), int(xs.max() - xs.min() + 1)
