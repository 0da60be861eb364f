"""
Runner: steps a world for many generations without printing it, and
records population, extinction and the first repeat it sees.
"""
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, Tuple
import logging

from tqdm import trange

from .world import World, population, random_world
from .engine import next_generation

logger = logging.getLogger(__name__)

MAX_EVENTS = 800


@dataclass
class RunConfig:
    xbase: int = 32
    generations: int = 200
    density: float = 0.3
    seed: int = 7
    stop_on_cycle: bool = True
    history: int = 64


def _period(recent: Deque[Tuple[int, World]], gen: int, world: World) -> int:
    # newest match first, so the shortest period wins
    for seen_gen, old in reversed(recent):
        if old == world:
            return gen - seen_gen
    return 0


def simulate(
    world: World,
    generations: int,
    stop_on_cycle: bool = True,
    history: int = 64,
    progress: bool = False,
) -> Dict[str, Any]:
    """
    Advance `world` up to `generations` steps.

    With stop_on_cycle, the run ends as soon as a world repeats one of the
    last `history` worlds; the distance back is reported as the period
    (1 for still lifes and for an extinct world).
    """
    if generations < 0:
        raise ValueError(f"generations must be >= 0, got {generations}")

    events: Deque[Dict[str, Any]] = deque(maxlen=MAX_EVENTS)

    def log_event(gen: int, kind: str, **info: Any) -> None:
        events.append({"generation": gen, "kind": kind, **info})

    pop0 = population(world)
    stats: Dict[str, Any] = {
        "world": world,
        "generations": 0,
        "population": [pop0],
        "period": 0,
        "extinct": pop0 == 0,
        "events": events,
    }
    log_event(0, "start", population=pop0)
    logger.debug("simulate: %r for up to %d generations", world, generations)

    recent: Deque[Tuple[int, World]] = deque([(0, world)], maxlen=max(1, history))

    for gen in trange(1, generations + 1, desc="simulate", disable=not progress):
        world = next_generation(world)
        pop = population(world)
        stats["world"] = world
        stats["generations"] = gen
        stats["population"].append(pop)

        if pop == 0 and stats["population"][-2] > 0:
            stats["extinct"] = True
            log_event(gen, "extinct")

        if stop_on_cycle:
            period = _period(recent, gen, world)
            if period:
                stats["period"] = period
                log_event(gen, "cycle", period=period)
                logger.debug("simulate: cycle of period %d at generation %d", period, gen)
                break
            recent.append((gen, world))

    log_event(stats["generations"], "end", population=stats["population"][-1])
    return stats


def run(cfg: RunConfig, progress: bool = False) -> Dict[str, Any]:
    world = random_world(cfg.xbase, density=cfg.density, seed=cfg.seed)
    return simulate(
        world,
        cfg.generations,
        stop_on_cycle=cfg.stop_on_cycle,
        history=cfg.history,
        progress=progress,
    )
