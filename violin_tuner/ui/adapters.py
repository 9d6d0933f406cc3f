"""Adapters for connecting front ends to a tuning session."""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from ..core.interfaces import IPresentationSink
from ..logger import get_logger
from ..services.tuning_session import TuningSession
from ..tuning_types import Reading, TickResult
from .presentation import display_state, text_meter

logger = get_logger(__name__)


class UIAdapter(IPresentationSink, ABC):
    """Base class for front ends that show a tuning session's results."""

    def __init__(self, session: TuningSession):
        """Initialize the UI adapter.

        Args:
            session: Tuning session whose results are shown
        """
        self._session = session
        self._session.events.on_result(self.present)
        self._last_result: Optional[TickResult] = None

    @property
    def last_result(self) -> Optional[TickResult]:
        return self._last_result

    @abstractmethod
    def present(self, result: TickResult) -> None:
        """Show a tick result."""
        pass


class ConsoleTunerUI(UIAdapter):
    """Prints one line whenever the displayed text changes."""

    def __init__(self, session: TuningSession, stream: Optional[TextIO] = None):
        super().__init__(session)
        self._stream = stream or sys.stdout
        self._last_line: Optional[str] = None

    def format_line(self, result: TickResult) -> str:
        state = display_state(result)
        if not isinstance(result, Reading):
            return f"{'--':>4}  {text_meter(None)}  no signal"
        badge = "  IN TUNE" if state.badge_ok else ""
        return (
            f"{state.note:>4}  {state.frequency:>8} Hz  "
            f"{text_meter(result.cents)}  {result.cents:+6.1f} cents  "
            f"-> {state.target_label} {state.target_hz}{badge}"
        )

    def present(self, result: TickResult) -> None:
        self._last_result = result
        line = self.format_line(result)
        if line != self._last_line:
            self._stream.write(line + "\n")
            self._stream.flush()
            self._last_line = line
