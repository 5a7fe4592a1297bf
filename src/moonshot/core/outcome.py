"""Terminal-state detection and loop halting."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from .world import Outcome, SimulationWorld


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoopHandle:
    """Run flag for one host loop (tick or frame).

    on_stop, if set, is called exactly once per running -> stopped change.
    """

    name: str
    running: bool = True
    on_stop: Callable[[], None] | None = None

    def start(self) -> None:
        self.running = True

    def stop(self) -> bool:
        if not self.running:
            return False
        self.running = False
        if self.on_stop is not None:
            self.on_stop()
        return True


@dataclass(slots=True)
class OutcomeCheck:
    loops: list[LoopHandle] = field(default_factory=list)

    def check(self, world: SimulationWorld) -> Outcome:
        """Detect craft/target contact; on contact halt the world and loops."""
        if world.halted:
            self.halt()
            return world.outcome
        if not world.engine.collides(world.craft.handle, world.secondary.handle):
            return Outcome.RUNNING
        world.outcome = Outcome.REACHED_TARGET
        logger.info(
            "craft reached %s after %d ticks (%.1f s)",
            world.secondary.name,
            world.tick_count,
            world.time,
        )
        self.halt()
        return world.outcome

    def halt(self) -> None:
        for loop in self.loops:
            loop.stop()
