"""Fire-and-forget execution of leaf callbacks on background threads."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ..errors import CallbackFailedError
from ..tree_model import TreeNode
from .spinner import SpinnerScheduler

logger = logging.getLogger(__name__)


class LeafActivationRunner:
    """Run each leaf callback on its own daemon thread.

    The node is marked busy before the thread starts and marked idle when the
    callback returns or raises. A raised exception or a ``False`` return is
    the callback's failure signal: it is logged and handed to ``on_error``,
    never re-raised into the caller of ``activate``. Threads are not cancellable.
    """

    def __init__(
        self,
        spinner: SpinnerScheduler,
        on_error: Callable[[TreeNode, BaseException], None] | None = None,
    ) -> None:
        self._spinner = spinner
        self._on_error = on_error
        self._lock = threading.Lock()
        self._threads: set[threading.Thread] = set()

    def _worker(self, node: TreeNode, callback: Callable[[], object]) -> None:
        logger.debug("Executing callback for node: %s", node.id)
        try:
            result = callback()
        except Exception as exc:
            logger.warning("Callback for node %s failed", node.id, exc_info=True)
            self._report(node, exc)
        else:
            if result is False:
                logger.warning("Callback for node %s reported failure", node.id)
                self._report(node, CallbackFailedError(node.id))
        finally:
            self._spinner.mark_idle(node.id)
            with self._lock:
                self._threads.discard(threading.current_thread())

    def _report(self, node: TreeNode, exc: BaseException) -> None:
        if self._on_error is None:
            return
        try:
            self._on_error(node, exc)
        except Exception:
            logger.exception("Activation error hook raised for node %s", node.id)

    def activate(self, node: TreeNode) -> bool:
        """Start ``node``'s callback; return ``False`` if it has none or no thread could start."""
        callback = node.on_activate
        if callback is None:
            return False
        self._spinner.mark_busy(node.id)
        worker = threading.Thread(
            target=self._worker,
            args=(node, callback),
            name=f"termtree-activate-{node.label}",
            daemon=True,
        )
        with self._lock:
            self._threads.add(worker)
        try:
            worker.start()
        except RuntimeError as exc:
            logger.warning("Could not start callback thread for node %s", node.id, exc_info=True)
            with self._lock:
                self._threads.discard(worker)
            self._spinner.mark_idle(node.id)
            self._report(node, exc)
            return False
        return True

    def pending(self) -> int:
        with self._lock:
            return len(self._threads)

    def join(self, timeout: float | None = None) -> None:
        """Wait for in-flight callbacks; used at teardown and in tests."""
        with self._lock:
            threads = list(self._threads)
        for thread in threads:
            thread.join(timeout)


__all__ = ["LeafActivationRunner"]
