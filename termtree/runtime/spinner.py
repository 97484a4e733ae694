"""Spinner scheduler: owner of per-node busy state and animation frames.

Busy transitions arrive as commands on a queue. The scheduler applies
pending commands before each tick and before answering any read, so a
command posted by one thread is visible to every later read. The scheduler
never calls back into the widget, which keeps lock ordering one-way.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from queue import Empty, Queue

from ..options import DEFAULT_SPINNER_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpinnerCommand:
    """Request to mark ``node_id`` busy (frame reset to 0) or one run finished."""

    node_id: str
    busy: bool


class SpinnerScheduler:
    """Cancellable periodic task advancing frames of every busy node.

    ``tick`` can be called directly, which lets tests drive animation without
    a running thread or real sleeps. ``start`` launches the daemon ticker;
    ``stop`` cancels it once and later calls are no-ops.
    """

    def __init__(self, frame_count: int, interval: float = DEFAULT_SPINNER_INTERVAL_SECONDS) -> None:
        self._frame_count = frame_count
        # Event.wait(0) returns at once, so a zero interval would busy-loop.
        self._interval = interval if interval > 0 else DEFAULT_SPINNER_INTERVAL_SECONDS
        self._commands: Queue[SpinnerCommand] = Queue()
        self._lock = threading.Lock()
        self._frames: dict[str, int] = {}
        # A node stays busy until every overlapping activation has finished.
        self._in_flight: dict[str, int] = {}
        self._cancel = threading.Event()
        self._thread: threading.Thread | None = None
        self._stopped = False

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def submit(self, command: SpinnerCommand) -> None:
        self._commands.put(command)

    def mark_busy(self, node_id: str) -> None:
        self.submit(SpinnerCommand(node_id=node_id, busy=True))

    def mark_idle(self, node_id: str) -> None:
        self.submit(SpinnerCommand(node_id=node_id, busy=False))

    def _drain_locked(self) -> None:
        while True:
            try:
                command = self._commands.get_nowait()
            except Empty:
                return
            node_id = command.node_id
            if command.busy:
                self._in_flight[node_id] = self._in_flight.get(node_id, 0) + 1
                self._frames[node_id] = 0
                logger.debug("Spinner started for node: %s", node_id)
                continue
            remaining = self._in_flight.get(node_id, 0) - 1
            if remaining > 0:
                self._in_flight[node_id] = remaining
                continue
            self._in_flight.pop(node_id, None)
            if self._frames.pop(node_id, None) is not None:
                logger.debug("Spinner stopped for node: %s", node_id)

    def is_busy(self, node_id: str) -> bool:
        with self._lock:
            self._drain_locked()
            return node_id in self._frames

    def frame_for(self, node_id: str) -> int | None:
        """Return the current frame index, or ``None`` when the node is idle."""
        with self._lock:
            self._drain_locked()
            return self._frames.get(node_id)

    def busy_nodes(self) -> dict[str, int]:
        with self._lock:
            self._drain_locked()
            return dict(self._frames)

    def tick(self) -> None:
        """Advance every busy node by one frame."""
        with self._lock:
            self._drain_locked()
            if self._frame_count <= 0:
                return
            for node_id, frame in self._frames.items():
                self._frames[node_id] = (frame + 1) % self._frame_count
                logger.debug("Spinner updated for node: %s (frame %d)", node_id, self._frames[node_id])

    def _run(self) -> None:
        # Event.wait returns True as soon as stop() sets the token.
        while not self._cancel.wait(self._interval):
            self.tick()

    def start(self) -> None:
        """Launch the ticker thread; no-op when running, stopped, or frameless."""
        if self._stopped or self.running or self._frame_count <= 0:
            return
        self._thread = threading.Thread(
            target=self._run,
            name="termtree-spinner",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: float | None = 1.0) -> None:
        """Cancel the ticker and wait for it to exit. Safe to call repeatedly."""
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
        self._cancel.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        logger.debug("Spinner ticker stopped")


__all__ = ["SpinnerCommand", "SpinnerScheduler"]
