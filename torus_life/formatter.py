"""
Text dump of a world: one line per row, three characters per cell.
"""
from .world import Cell, World, get_xbase

ALIVE_SYMBOL = " x "
DEAD_SYMBOL = " o "


def format_world(world: World, alive: str = ALIVE_SYMBOL, dead: str = DEAD_SYMBOL) -> str:
    xbase = get_xbase(world)
    out = []
    for index, state in world.items():
        out.append(alive if state is Cell.ALIVE else dead)
        if (index + 1) % xbase == 0:
            out.append("\n")
    return "".join(out)
