"""Thread-safe observer list.

Used by the button sampler to fan transition events out to any number of
observers and queue subscribers.
"""

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Observer list with thread-safe registration and notification.

    Type Parameters:
        T: The observer protocol type (e.g., ButtonObserver)

    Thread Safety:
        All operations are thread-safe. The lock is released before calling
        observer callbacks, so an observer may register or unregister
        observers (including itself) while being notified.
    """

    def __init__(self, observer_type_name: str = "observer"):
        """
        Initialize the observer manager.

        Args:
            observer_type_name: Name of the observer type for logging (e.g., "button")
        """
        self._observers: list[T] = []
        self._lock = Lock()
        self._observer_type_name = observer_type_name

    def register(self, observer: T) -> None:
        """Register an observer (idempotent - won't add duplicates)."""
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)
                logger.info(f"Registered {self._observer_type_name} observer: {observer}")
            else:
                logger.debug(f"{self._observer_type_name} observer already registered: {observer}")

    def unregister(self, observer: T) -> None:
        """Unregister an observer."""
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)
                logger.debug(f"Unregistered {self._observer_type_name} observer: {observer}")
            else:
                logger.warning(
                    f"Attempted to unregister unknown {self._observer_type_name} observer: {observer}"
                )

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Notify all observers by calling their callback method.

        Args:
            callback_name: Name of the callback method to call (e.g., 'on_button_event')
            *args: Positional arguments to pass to the callback
            **kwargs: Keyword arguments to pass to the callback

        Error Handling:
            Exceptions in observer callbacks are logged but don't affect other observers.
        """
        with self._lock:
            observers = list(self._observers)

        for observer in observers:
            try:
                callback = getattr(observer, callback_name)
            except AttributeError:
                logger.error(
                    f"{self._observer_type_name} observer {observer} has no method '{callback_name}'"
                )
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error notifying {self._observer_type_name} observer {observer} via {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Remove all registered observers."""
        with self._lock:
            count = len(self._observers)
            self._observers.clear()
            if count > 0:
                logger.info(f"Cleared {count} {self._observer_type_name} observer(s)")

    def __contains__(self, observer: T) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def __bool__(self) -> bool:
        with self._lock:
            return len(self._observers) > 0
