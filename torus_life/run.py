"""
Demo entry: watch a glider cross a small torus, then run a random soup and
print a short report.
"""
from tqdm import tqdm

from torus_life.world import create_world
from torus_life.patterns import place
from torus_life.engine import next_generation
from torus_life.formatter import format_world
from torus_life.runner import RunConfig, run

if __name__ == "__main__":
    world = place(create_world(6), "glider", 0, 0)
    for gen in range(4):
        print(f"generation {gen}")
        print(format_world(world))
        world = next_generation(world)

    stats = run(RunConfig(xbase=32, generations=300, seed=11), progress=True)
    for ev in stats["events"]:
        tqdm.write(f"  gen {ev['generation']:4d}  {ev['kind']}")
    print("Generations run:", stats["generations"])
    print("Final population:", stats["population"][-1])
    print("Period:", stats["period"] or "none detected")
