"""Event system for the violin tuner."""

from typing import Dict, List, Callable, Any
from enum import Enum, auto

from ..logger import get_logger
from ..tuning_types import NoSignal, Reading, TickResult

logger = get_logger(__name__)


class TuningEventType(Enum):
    """Event types emitted by a tuning session."""

    READING = auto()
    NO_SIGNAL = auto()
    ERROR = auto()


class EventEmitter:
    """Minimal synchronous event emitter."""

    def __init__(self):
        """Initialize the event emitter."""
        self._listeners: Dict[Any, List[Callable]] = {}

    def on(self, event_type: Any, callback: Callable) -> None:
        """Register a callback for an event type.

        Args:
            event_type: Event type to listen for
            callback: Function to call when the event occurs
        """
        if event_type not in self._listeners:
            self._listeners[event_type] = []

        if callback not in self._listeners[event_type]:
            self._listeners[event_type].append(callback)
            logger.debug(f"Added listener for event {event_type}")

    def off(self, event_type: Any, callback: Callable) -> None:
        """Remove a previously registered callback."""
        listeners = self._listeners.get(event_type, [])
        if callback in listeners:
            listeners.remove(callback)

    def emit(self, event_type: Any, *args, **kwargs) -> None:
        """Emit an event.

        A failing listener is logged and does not stop the others.

        Args:
            event_type: Event type to emit
            *args: Positional arguments to pass to listeners
            **kwargs: Keyword arguments to pass to listeners
        """
        if event_type not in self._listeners:
            return

        for callback in list(self._listeners[event_type]):
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(f"Error in event listener for {event_type}: {e}", exc_info=True)

    def clear(self) -> None:
        """Remove all event listeners."""
        self._listeners = {}
        logger.debug("Cleared all event listeners")


class TuningEvents:
    """Event emitter specifically for tuning session results."""

    def __init__(self):
        """Initialize the tuning events."""
        self._emitter = EventEmitter()

    def on_reading(self, callback: Callable[[Reading], None]) -> None:
        """Register a callback for ticks that produced a reading."""
        self._emitter.on(TuningEventType.READING, callback)

    def on_no_signal(self, callback: Callable[[NoSignal], None]) -> None:
        """Register a callback for ticks without a usable pitch."""
        self._emitter.on(TuningEventType.NO_SIGNAL, callback)

    def on_error(self, callback: Callable[[Exception], None]) -> None:
        """Register a callback for session start failures."""
        self._emitter.on(TuningEventType.ERROR, callback)

    def on_result(self, callback: Callable[[TickResult], None]) -> None:
        """Register a callback for every tick result."""
        self.on_reading(callback)
        self.on_no_signal(callback)

    def emit_result(self, result: TickResult) -> None:
        """Emit a tick result to the matching listeners."""
        if isinstance(result, Reading):
            self._emitter.emit(TuningEventType.READING, result)
        else:
            self._emitter.emit(TuningEventType.NO_SIGNAL, result)

    def emit_error(self, error: Exception) -> None:
        """Emit a session error."""
        self._emitter.emit(TuningEventType.ERROR, error)

    def clear(self) -> None:
        """Remove all event listeners."""
        self._emitter.clear()
