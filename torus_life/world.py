"""
World store: a square Life grid of side `xbase`, flattened row-major into a
single numpy vector (index = row * xbase + col).

Cell codes:
  0 dead, 1 alive

Worlds are values. Every "mutation" returns a new World and the backing
vector is flagged read-only, so a World can be shared freely.
"""
from enum import IntEnum
from math import isqrt
from typing import Iterator, List, Sequence, Tuple
import numpy as np


class Cell(IntEnum):
    DEAD = 0
    ALIVE = 1


def _as_index(index) -> int:
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"cell index must be an integer, got {type(index).__name__}")
    return int(index)


class World:
    """Immutable mapping from cell index (0 .. xbase² - 1) to Cell."""

    __slots__ = ("_cells",)

    def __init__(self, cells):
        raw = np.asarray(cells).reshape(-1)
        n = raw.size
        if n == 0 or isqrt(n) ** 2 != n:
            raise ValueError(f"cell count {n} is not a positive perfect square")
        # checked before the int8 cast, which would truncate 0.9 to 0
        if not np.isin(raw, (Cell.DEAD, Cell.ALIVE)).all():
            raise ValueError("cell codes must be 0 (dead) or 1 (alive)")
        arr = raw.astype(np.int8)
        arr.setflags(write=False)
        self._cells = arr

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the flat cell vector."""
        return self._cells

    # ---------- mapping protocol ----------
    def __len__(self) -> int:
        return self._cells.size

    def __contains__(self, index) -> bool:
        if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
            return False
        return 0 <= index < self._cells.size

    def __getitem__(self, index) -> Cell:
        i = _as_index(index)
        if not 0 <= i < self._cells.size:
            raise KeyError(index)
        return Cell(int(self._cells[i]))

    def __iter__(self) -> Iterator[int]:
        return iter(range(self._cells.size))

    def keys(self) -> range:
        return range(self._cells.size)

    def values(self) -> List[Cell]:
        return [Cell(int(c)) for c in self._cells]

    def items(self) -> List[Tuple[int, Cell]]:
        return list(enumerate(self.values()))

    # ---------- value semantics ----------
    def __eq__(self, other) -> bool:
        if not isinstance(other, World):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        return f"World(xbase={get_xbase(self)}, alive={population(self)})"


# ---------- construction ----------
def create_world(xbase: int) -> World:
    """Build an all-dead world with xbase² cells."""
    if isinstance(xbase, bool) or not isinstance(xbase, (int, np.integer)):
        raise ValueError(f"xbase must be a positive integer, got {xbase!r}")
    if xbase <= 0:
        raise ValueError(f"xbase must be positive, got {xbase}")
    return World(np.zeros(int(xbase) * int(xbase), dtype=np.int8))


def from_rows(rows: Sequence[Sequence]) -> World:
    """Build a world from a square nested sequence of truthy/falsy cells."""
    grid = np.array([[1 if c else 0 for c in row] for row in rows], dtype=np.int8)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1] or grid.size == 0:
        raise ValueError(f"rows must form a non-empty square grid, got shape {grid.shape}")
    return World(grid.reshape(-1))


def random_world(xbase: int, density: float = 0.3, seed: int = 7) -> World:
    """Random soup: each cell is alive with probability `density`."""
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must lie in [0, 1], got {density}")
    create_world(xbase)  # validates xbase
    rng = np.random.default_rng(seed)
    return World((rng.random(xbase * xbase) < density).astype(np.int8))


# ---------- queries ----------
def get_xbase(world: World) -> int:
    return isqrt(len(world))


def is_alive(world: World, index: int) -> bool:
    return world[index] is Cell.ALIVE


def population(world: World) -> int:
    return int(np.count_nonzero(world.cells))


def alive_indices(world: World) -> List[int]:
    return np.flatnonzero(world.cells).tolist()


# ---------- single-cell updates ----------
def set_cell(world: World, index: int, state: Cell) -> World:
    """Return a copy of `world` with cell `index` set to `state`.

    The index must already be a key of the world; unknown indices raise
    KeyError rather than growing the world.
    """
    i = _as_index(index)
    if i not in world:
        raise KeyError(index)
    if world.cells[i] == state:
        return world
    cells = world.cells.copy()
    cells[i] = Cell(state)
    return World(cells)


def set_alive(world: World, index: int) -> World:
    return set_cell(world, index, Cell.ALIVE)


def set_dead(world: World, index: int) -> World:
    return set_cell(world, index, Cell.DEAD)


# ---------- coordinates ----------
def to_index(row: int, col: int, xbase: int) -> int:
    """Row-major flat index; row and col wrap around the torus."""
    return (row % xbase) * xbase + (col % xbase)


def to_coords(index: int, xbase: int) -> Tuple[int, int]:
    return divmod(index, xbase)
