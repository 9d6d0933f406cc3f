"""Fixed-rate driver for a tuning session."""

import time
from typing import Callable, Optional

from ..logger import get_logger
from .tuning_session import TuningSession

logger = get_logger(__name__)


class TickScheduler:
    """Calls TuningSession.tick() at a fixed rate until told to stop.

    Cancellation is a flag checked before each tick: the loop ends as soon
    as the session is stopped, the duration has elapsed or max_ticks ticks
    have run.
    """

    def __init__(
        self,
        session: TuningSession,
        rate_hz: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if rate_hz <= 0:
            raise ValueError("rate_hz must be positive")
        self._session = session
        self._interval = 1.0 / rate_hz
        self._clock = clock
        self._sleep = sleep

    def run(self, duration: Optional[float] = None, max_ticks: Optional[int] = None) -> int:
        """Tick the session until a stop condition holds.

        Args:
            duration: Seconds to run for, or None for no limit
            max_ticks: Maximum number of ticks, or None for no limit

        Returns:
            The number of ticks run
        """
        start = self._clock()
        next_tick = start
        ticks = 0

        while self._session.is_running():
            if max_ticks is not None and ticks >= max_ticks:
                break
            now = self._clock()
            if duration is not None and now - start >= duration:
                break

            self._session.tick()
            ticks += 1

            next_tick += self._interval
            delay = next_tick - self._clock()
            if delay > 0:
                self._sleep(delay)
            else:
                # Running behind, do not try to catch up
                next_tick = self._clock()

        logger.debug(f"Scheduler ran {ticks} ticks")
        return ticks
