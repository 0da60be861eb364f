"""
Toroidal neighborhood on a flat, row-major square grid.

Every function takes a flat `index` and the side length `xbase`. The left
edge wraps to the right edge and the top row wraps to the bottom row, so
corner cells wrap in both axes at once.

For xbase 1 and 2 the eight directions are not distinct: at xbase=1 every
direction lands on the cell itself, at xbase=2 pairs of directions coincide.
Those are accepted as-is and counted with multiplicity by the engine.
"""
from operator import index as _index
from typing import List, Tuple


# ---------- edge predicates ----------
def is_left_edge(index: int, xbase: int) -> bool:
    return index % xbase == 0


def is_right_edge(index: int, xbase: int) -> bool:
    return index % xbase == xbase - 1


def is_top_edge(index: int, xbase: int) -> bool:
    return index < xbase


def is_bottom_edge(index: int, xbase: int) -> bool:
    return xbase * xbase - index <= xbase


# ---------- single steps ----------
def left(index: int, xbase: int) -> int:
    if is_left_edge(index, xbase):
        return index - 1 + xbase
    return index - 1


def right(index: int, xbase: int) -> int:
    if is_right_edge(index, xbase):
        return index + 1 - xbase
    return index + 1


def top(index: int, xbase: int) -> int:
    if is_top_edge(index, xbase):
        return index - xbase + xbase * xbase
    return index - xbase


def bottom(index: int, xbase: int) -> int:
    if is_bottom_edge(index, xbase):
        return index + xbase - xbase * xbase
    return index + xbase


# ---------- neighborhoods ----------
def _check(index: int, xbase: int) -> Tuple[int, int]:
    if isinstance(index, bool) or isinstance(xbase, bool):
        raise TypeError("index and xbase must be integers, not bool")
    # TypeError for floats and other non-integers
    index, xbase = _index(index), _index(xbase)
    if xbase < 1:
        raise ValueError(f"xbase must be >= 1, got {xbase}")
    if not 0 <= index < xbase * xbase:
        raise ValueError(f"index {index} outside 0..{xbase * xbase - 1}")
    return index, xbase


def neighbors(index: int, xbase: int) -> List[int]:
    """The eight neighbors of `index`, ordered [NW, N, NE, W, E, SW, S, SE]."""
    index, xbase = _check(index, xbase)
    l, r = left(index, xbase), right(index, xbase)
    return [
        top(l, xbase), top(index, xbase), top(r, xbase),
        l, r,
        bottom(l, xbase), bottom(index, xbase), bottom(r, xbase),
    ]

