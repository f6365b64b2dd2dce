"""
sim/sim_bridge.py
=================
Background-thread orchestrator around :class:`sim.world.World`.  The UI
polls the bridge for the latest snapshot without blocking.

Public API consumed by :mod:`ui.pygame_view`
--------------------------------------------
* ``get_robots()``   → ``List[dict]``
* ``get_arena()``    → ``dict``
* ``get_stats()``    → ``dict``
* ``is_finished()``  → ``bool``
* ``reset()``        → ``None``
* ``set_paused(bool)`` → ``None``
* ``step()``         → ``None``
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Dict, List, Optional

from avoidance.params import ControllerParams
from sim.world import World

log = logging.getLogger("sim_bridge")


class SimBridge:
    """Simulation orchestrator running in a background thread.

    The thread calls :meth:`_tick` at ``tick_rate_hz``, advancing the
    :class:`~sim.world.World` and caching plain-dict snapshots for the UI
    thread.

    Parameters
    ----------
    tick_rate_hz : float
        Control cycles per second (simulated ``dt = 1 / tick_rate_hz``).
    robot_count : int
        Number of foot-bots to spawn.
    obstacle_count : int
        Number of cylinders.
    random_seed : int or None
        Seed for reproducibility.
    params : ControllerParams or None
        Controller tuning.
    max_ticks : int or None
        Stop ticking after this many cycles.
    """

    def __init__(
        self,
        tick_rate_hz: float = 10.0,
        robot_count: int = 4,
        obstacle_count: int = 8,
        random_seed: Optional[int] = None,
        params: Optional[ControllerParams] = None,
        max_ticks: Optional[int] = None,
    ) -> None:
        self._tick_rate_hz = tick_rate_hz
        self._world = World(
            num_robots=robot_count,
            num_obstacles=obstacle_count,
            seed=random_seed,
            params=params,
            max_ticks=max_ticks,
        )

        self._lock = threading.Lock()

        # Cached state: written by the sim thread, read by the UI thread
        self._robots: List[Dict[str, Any]] = []
        self._arena: Dict[str, Any] = {}
        self._stats: Dict[str, Any] = {}
        with self._lock:
            self._publish_locked()

        self._thread: Optional[threading.Thread] = None
        self._running = False
        self._paused = False

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Spawn the background simulation thread."""
        if self._running:
            return
        self._running = True
        self._thread = threading.Thread(
            target=self._loop, daemon=True, name="SimBridge"
        )
        self._thread.start()
        log.info("SimBridge started at %.1f Hz", self._tick_rate_hz)

    def stop(self) -> None:
        """Signal the thread to stop and wait for it to join."""
        self._running = False
        if self._thread:
            self._thread.join(timeout=2.0)
        log.info("SimBridge stopped")

    # ── UI API ────────────────────────────────────────────────────────────────

    def get_robots(self) -> List[Dict[str, Any]]:
        with self._lock:
            return list(self._robots)

    def get_arena(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._arena)

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._stats)

    def is_finished(self) -> bool:
        return self._world.is_finished()

    def reset(self) -> None:
        """Re-initialise the world so the scenario replays."""
        with self._lock:
            self._world.reset()
            self._publish_locked()
        log.info("SimBridge reset")

    def set_paused(self, paused: bool) -> None:
        """Pause / unpause the simulation tick."""
        self._paused = paused

    def step(self, dt: Optional[float] = None) -> None:
        """Advance one tick synchronously (tests, single-stepping from the UI)."""
        if self._world.is_finished():
            return
        self._tick(dt if dt is not None else 1.0 / self._tick_rate_hz)

    # ── Background loop ───────────────────────────────────────────────────────

    def _loop(self) -> None:
        dt = 1.0 / self._tick_rate_hz
        while self._running:
            t0 = time.perf_counter()
            if not self._paused and not self._world.is_finished():
                try:
                    self._tick(dt)
                except Exception:
                    log.exception("SimBridge tick error")
            time.sleep(max(0.0, dt - (time.perf_counter() - t0)))

    def _tick(self, dt: float) -> None:
        with self._lock:
            self._world.tick(dt)
            self._publish_locked()

    def _publish_locked(self) -> None:
        self._robots = [r.as_dict() for r in self._world.robots]
        self._arena = self._world.arena.as_dict()
        self._stats = self._world.stats()
