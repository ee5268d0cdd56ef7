import asyncio
import logging
import threading
from collections.abc import Coroutine
from concurrent.futures import Future
from typing import Any

logger = logging.getLogger(__name__)


class WorkerScope:
    """
    Background event loop on a daemon thread.

    Work launched here never runs on the caller's (UI) thread.
    """

    def __init__(self, name: str = "worker") -> None:
        self.name = name
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _ensure_started(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is None or self._loop.is_closed():
                self._loop = asyncio.new_event_loop()
                self._thread = threading.Thread(
                    target=self._run_loop, args=(self._loop,), name=self.name, daemon=True
                )
                self._thread.start()
            return self._loop

    def _run_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        asyncio.set_event_loop(loop)
        # fica rodando até que alguém chame loop.stop()
        loop.run_forever()

        # cleanup: cancela tarefas pendentes e fecha o loop
        pending = asyncio.all_tasks(loop)
        for task in pending:
            task.cancel()
        if pending:
            loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
        loop.run_until_complete(loop.shutdown_asyncgens())
        loop.close()

    def launch(self, coro: Coroutine[Any, Any, Any]) -> Future:
        """
        Schedule a coroutine on the worker loop.

        Args:
            coro: Work to run

        Returns:
            Future resolved with the coroutine's outcome
        """
        loop = self._ensure_started()
        future = asyncio.run_coroutine_threadsafe(coro, loop)
        future.add_done_callback(self._log_failure)
        return future

    def _log_failure(self, future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error(f"Unhandled error in {self.name}: {exc!r}", exc_info=exc)

    def close(self, timeout: float | None = 1) -> None:
        """Stop the loop, cancel leftover work and wait for the thread."""
        with self._lock:
            loop, thread = self._loop, self._thread
            self._loop = None
            self._thread = None

        if loop is not None and not loop.is_closed():
            loop.call_soon_threadsafe(loop.stop)
        # called from a callback running on the worker itself: the loop stops
        # once that callback returns
        if thread is not None and thread.is_alive() and thread is not threading.current_thread():
            thread.join(timeout=timeout)
