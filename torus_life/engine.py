"""
Generation engine: Conway's B3/S23 rule applied to every cell at once.

Neighbor counts are always taken from the current world, never from a
partially updated one.
"""
import numpy as np

from .world import Cell, World, get_xbase
from .topology import neighbors

OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr or dc]


def neighbor_counts(world: World) -> np.ndarray:
    """Live-neighbor count for every cell, indexed like world.cells."""
    n = get_xbase(world)
    grid = world.cells.reshape(n, n).astype(np.int16)
    counts = sum(np.roll(grid, (-dr, -dc), axis=(0, 1)) for dr, dc in OFFSETS)
    return counts.reshape(-1)


def live_neighbors(world: World, index: int) -> int:
    if index not in world:
        raise KeyError(index)
    return int(sum(world.cells[n] for n in neighbors(index, get_xbase(world))))


def next_generation(world: World) -> World:
    n = neighbor_counts(world)
    alive = world.cells == Cell.ALIVE
    # birth or survival on 3, survival only on 2
    nxt = (n == 3) | (alive & (n == 2))
    return World(nxt.astype(np.int8))


def advance(world: World, steps: int) -> World:
    """Apply next_generation `steps` times."""
    if steps < 0:
        raise ValueError(f"steps must be >= 0, got {steps}")
    for _ in range(steps):
        world = next_generation(world)
    return world
