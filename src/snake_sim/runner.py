"""Fixed-timestep asyncio loop that drives a simulation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from snake_sim.simulation import Simulation, Snapshot, TickResult

logger = logging.getLogger(__name__)

TickCallback = Callable[[TickResult, Snapshot], None]


class TickLoop:
    """Calls :meth:`Simulation.tick` once per ``interval`` seconds.

    Input is never routed through the loop: hosts write headings with
    :meth:`Simulation.request_direction` whenever they sample their input
    devices, and the loop picks up the latest one on its next tick.
    """

    def __init__(
        self,
        simulation: Simulation,
        interval: float | None = None,
        on_tick: TickCallback | None = None,
    ) -> None:
        if interval is None:
            interval = simulation.config.tick_interval
        if interval <= 0:
            raise ValueError("interval must be positive.")
        self.simulation = simulation
        self.interval = interval
        self.on_tick = on_tick
        self.running = False

    def stop(self) -> None:
        """Stop scheduling ticks after the current one completes."""
        self.running = False

    async def run(self, max_ticks: int | None = None) -> int:
        """Run until :meth:`stop` is called or *max_ticks* ticks have run.

        Returns the number of ticks executed by this call.
        """
        loop = asyncio.get_running_loop()
        self.running = True
        executed = 0
        deadline = loop.time()
        logger.info("Tick loop started (interval=%.3fs).", self.interval)
        try:
            while self.running and (max_ticks is None or executed < max_ticks):
                deadline += self.interval
                await asyncio.sleep(max(0.0, deadline - loop.time()))
                if not self.running:
                    break
                result = self.simulation.tick()
                executed += 1
                if self.on_tick is not None:
                    self.on_tick(result, self.simulation.snapshot())
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled after %d ticks.", executed)
            raise
        except Exception:
            logger.exception("Tick loop error after %d ticks.", executed)
        finally:
            self.running = False
        logger.info("Tick loop stopped after %d ticks.", executed)
        return executed
