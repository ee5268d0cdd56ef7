from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Awaitable, Callable
from concurrent.futures import Future, wait
from typing import Any

from client.viewmodels.scope import WorkerScope
from core.config import Settings, get_settings
from core.login import LoginGate, get_login_gate
from core.models.envelope import Envelope
from core.models.network import RequestError
from core.observable import Observable

type Producer[T] = Callable[[], Awaitable[Envelope[T]]]
type ErrorHandler = Callable[[RequestError], Any]
type SuccessHandler[T] = Callable[[T], Any]


async def _invoke(callback: Callable[[Any], Any], value: Any) -> None:
    result = callback(value)
    if inspect.isawaitable(result):
        await result


class BaseViewModel:
    """
    Base class of every view model: runs requests and publishes their state.

    Subscribers watch ``loading``, ``error``, ``normal`` and ``data``; the only
    writer is a request started through ``run`` or ``execute``.
    """

    def __init__(self, settings: Settings | None = None, login_gate: LoginGate | None = None) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.login_gate = login_gate if login_gate is not None else get_login_gate()
        self.logger = logging.getLogger(type(self).__name__)

        self.loading: Observable[bool] = Observable(False)
        self.error: Observable[RequestError | None] = Observable(None)
        self.normal: Observable[bool] = Observable(True)
        self.data: Observable[Any] = Observable(None)

        self.scope = WorkerScope(f"{type(self).__name__}-scope")
        self._pending: set[Future] = set()
        self._pending_lock = threading.Lock()

    def run[T](
        self,
        producer: Producer[T],
        *,
        requires_login: bool = True,
        show_loading: bool = False,
        on_error: ErrorHandler | None = None,
        on_success: SuccessHandler[T] | None = None,
        target: Observable[T] | None = None,
    ) -> None:
        """
        Start a request on the worker scope and publish its outcome.

        Args:
            producer: Coroutine function doing the real request
            requires_login: Skip the request when the user is known to be logged out
            show_loading: Toggle ``loading`` around the request
            on_error: Error handling, stores into ``error`` by default
            on_success: Receives the payload; when omitted the payload is stored
                into ``target`` (or ``data``)
            target: Observable bound to the payload
        """
        if self.login_gate.blocks(requires_login):
            self.log_info("Request skipped: login required")
            return

        future = self.scope.launch(
            self._request(producer, show_loading, on_error, on_success, target)
        )
        with self._pending_lock:
            self._pending.add(future)
        future.add_done_callback(self._forget)

    async def execute[T](
        self,
        producer: Producer[T],
        *,
        requires_login: bool = True,
        show_loading: bool = False,
        on_error: ErrorHandler | None = None,
        on_success: SuccessHandler[T] | None = None,
        target: Observable[T] | None = None,
    ) -> None:
        """Same as ``run``, awaited in the caller's event loop."""
        if self.login_gate.blocks(requires_login):
            self.log_info("Request skipped: login required")
            return
        await self._request(producer, show_loading, on_error, on_success, target)

    async def _request(
        self,
        producer: Producer[Any],
        show_loading: bool,
        on_error: ErrorHandler | None,
        on_success: SuccessHandler[Any] | None,
        target: Observable[Any] | None,
    ) -> None:
        handle_error = on_error if on_error is not None else self.error.set
        if show_loading:
            self.loading.set(True)
        try:
            error: RequestError | None = None
            try:
                envelope = await producer()
                if envelope.is_success:
                    self.normal.set(True)
                    if envelope.payload is not None:
                        if on_success is not None:
                            await _invoke(on_success, envelope.payload)
                        else:
                            (target if target is not None else self.data).set(envelope.payload)
                else:
                    error = RequestError.from_envelope(envelope)
            except Exception as e:
                self.logger.exception(f"Request failed: {e!r}")
                error = RequestError.from_exception(e, self.settings.network_error_message)

            if error is not None:
                await _invoke(handle_error, error)
        finally:
            if show_loading:
                self.loading.set(False)

    def _forget(self, future: Future) -> None:
        with self._pending_lock:
            self._pending.discard(future)

    def wait_idle(self, timeout: float | None = None) -> bool:
        """
        Block until every request started by ``run`` so far has finished.

        Returns:
            False if the timeout expired first
        """
        with self._pending_lock:
            pending = set(self._pending)
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def clear(self) -> None:
        """End of the view model's life: stop its worker scope."""
        self.scope.close()

    def log_info(self, text: str) -> None:
        self.logger.info(text)

    def log_error(self, text: str) -> None:
        self.logger.error(text)
