import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

type Subscriber[V] = Callable[[V], object]


class Observable(Generic[T]):
    """Value holder with a current value and change notification."""

    def __init__(self, initial: T) -> None:
        """
        Initialize a new instance of the Observable class.

        Args:
            initial: Value held until the first ``set``
        """
        self._value = initial
        self._subscribers: list[Subscriber[T]] = []

        # Lock para acesso thread-safe ao valor e aos inscritos
        self.lock = threading.Lock()

    @property
    def value(self) -> T:
        with self.lock:
            return self._value

    def set(self, value: T) -> None:
        """
        Replace the current value and notify every subscriber.

        Subscribers run on the caller's thread, outside the lock, in
        subscription order.

        Args:
            value: New value
        """
        with self.lock:
            self._value = value
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(value)
            except Exception:
                logger.exception("Error in observable subscriber %r", callback)

    def subscribe(self, callback: Subscriber[T], *, emit_current: bool = True) -> Callable[[], None]:
        """
        Register a subscriber.

        Args:
            callback: Called with each new value
            emit_current: Deliver the current value right away

        Returns:
            Function that removes the subscription
        """
        with self.lock:
            self._subscribers.append(callback)
            current = self._value

        if emit_current:
            try:
                callback(current)
            except Exception:
                logger.exception("Error in observable subscriber %r", callback)

        def unsubscribe() -> None:
            with self.lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        with self.lock:
            return len(self._subscribers)
