"""Headless run -- watch one kind take over without a window.

Demonstrates:
- Building an engine from a SwarmConfig with a fixed seed
- Seeding the arena with the default starting population
- Reading counts() from a system every N ticks
- Stopping the loop from a system once a single kind is left

Run: python -m examples.headless [seed]
"""

import sys

from swarm import Arena, Engine, Kind, SwarmConfig, TickContext

REPORT_EVERY = 300
MAX_TICKS = 60_000


def make_reporter(every: int):
    def reporter(arena: Arena, ctx: TickContext) -> None:
        counts = arena.counts()
        alive = [kind for kind, n in counts.items() if n > 0]
        if ctx.tick_number % every == 0 or len(alive) <= 1:
            line = "  ".join(f"{kind.value}={counts[kind]:3d}" for kind in Kind)
            print(f"  tick {ctx.tick_number:6d}  |  {line}")
        if len(alive) <= 1:
            ctx.request_stop()

    return reporter


def main() -> None:
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 2024
    engine = Engine(SwarmConfig(), tps=60, seed=seed)
    engine.arena.reset()
    engine.add_system(make_reporter(REPORT_EVERY))

    print(f"=== Rock / paper / scissors, seed {seed} ===\n")
    engine.run(MAX_TICKS)

    counts = engine.arena.counts()
    survivors = [kind.value for kind, n in counts.items() if n > 0]
    print(f"\nDone after {engine.tick_number} ticks. Left standing: {', '.join(survivors)}")


if __name__ == "__main__":
    main()
