"""Engine - fixed-rate driver around an Arena, with pacing and lifecycle hooks."""

import logging
import os
import random
import time
from typing import Callable

from swarm.arena import Arena
from swarm.config import SwarmConfig
from swarm.types import System, TickContext

logger = logging.getLogger(__name__)


class Engine:
    """Decides when the arena ticks.

    One engine step runs the registered systems in order (command draining,
    bookkeeping) and then ``Arena.tick()``. The arena's tick counter is the
    only counter: a step cut short by ``request_stop`` does not count.
    Pausing only stops new steps from being issued; a step in progress
    always completes.
    """

    def __init__(
        self,
        config: SwarmConfig | None = None,
        tps: int = 60,
        seed: int | None = None,
    ) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[Arena, TickContext], None]] = []
        self._stop_hooks: list[Callable[[Arena, TickContext], None]] = []
        self._stop_requested: bool = False
        self._paused: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._arena = Arena(config, rng=self._rng)

    @property
    def arena(self) -> Arena:
        return self._arena

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def tick_number(self) -> int:
        return self._arena.tick_number

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def paused(self) -> bool:
        return self._paused

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[Arena, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[Arena, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def context(self) -> TickContext:
        """Context for work done outside a step, such as draining commands while paused."""
        return TickContext(self._arena.tick_number, self._request_stop, self._rng)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        # Systems see the number of the tick they are preparing.
        ctx = TickContext(self._arena.tick_number + 1, self._request_stop, self._rng)
        for system in self._systems:
            system(self._arena, ctx)
            if self._stop_requested:
                return
        self._arena.tick()

    def _fire(self, hooks: list[Callable[[Arena, TickContext], None]]) -> None:
        ctx = self.context()
        for hook in hooks:
            hook(self._arena, ctx)

    def step(self) -> bool:
        """Run one step unless paused. Returns whether a step ran."""
        if self._paused:
            return False
        self._stop_requested = False
        self._tick()
        return True

    def run(self, n: int) -> None:
        """Run up to *n* steps back to back, without pacing."""
        self._stop_requested = False
        self._fire(self._start_hooks)
        logger.info("Running %d ticks (seed=%d)", n, self._seed)

        for _ in range(n):
            if self._paused:
                break
            self._tick()
            if self._stop_requested:
                break

        self._fire(self._stop_hooks)
        logger.info("Stopped at tick %d", self._arena.tick_number)

    def run_forever(self) -> None:
        """Step ``tps`` times a second until a system or hook requests a stop.

        While paused the loop keeps its cadence but issues no steps.
        """
        self._stop_requested = False
        self._fire(self._start_hooks)
        logger.info("Running at %d tps (seed=%d)", self._tps, self._seed)

        interval = 1.0 / self._tps
        while not self._stop_requested:
            start = time.monotonic()
            if not self._paused:
                self._tick()
                if self._stop_requested:
                    break
            sleep_time = interval - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._fire(self._stop_hooks)
        logger.info("Stopped at tick %d", self._arena.tick_number)

    def stop(self) -> None:
        """Ask a running loop to exit after the current step. Safe from any thread."""
        self._request_stop()
