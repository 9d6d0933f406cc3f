"""The tuning session: runs the pitch pipeline once per scheduler tick."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..constants import NOISE_GATE_RMS, SMOOTHING_ALPHA
from ..core.config import TunerConfig
from ..core.errors import AcquisitionError
from ..core.events import TuningEvents
from ..core.interfaces import IFrameSource
from ..detection.pitch_estimator import estimate_pitch
from ..detection.smoothing import smooth
from ..logger import get_logger
from ..note_utils import get_note_name
from ..tuning_types import NoSignal, Reading, SessionState, TickResult
from .deviation import evaluate
from .targets import resolve_target

logger = get_logger(__name__)


class SessionStatus(Enum):
    """Lifecycle states of a tuning session."""

    STOPPED = "stopped"
    RUNNING = "running"


class TuningSession:
    """Sequences frame acquisition, estimation, smoothing and evaluation.

    The session owns the smoothing state. The configuration is shared and
    read afresh on every tick. Ticks are driven from outside (see
    TickScheduler or the pygame UI) and never run concurrently.
    """

    def __init__(
        self,
        frame_source: IFrameSource,
        config: Optional[TunerConfig] = None,
        events: Optional[TuningEvents] = None,
        gate: float = NOISE_GATE_RMS,
        alpha: float = SMOOTHING_ALPHA,
    ) -> None:
        """Initialize the tuning session.

        Args:
            frame_source: Where frames come from
            config: Shared user settings, or None for defaults
            events: Emitter results are published to, or None to create one
            gate: Noise gate RMS threshold
            alpha: Smoothing coefficient
        """
        self._frame_source = frame_source
        self.config = config or TunerConfig()
        self.events = events or TuningEvents()
        self._gate = gate
        self._alpha = alpha

        self._status = SessionStatus.STOPPED
        self._state = SessionState()

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def state(self) -> SessionState:
        return self._state

    def is_running(self) -> bool:
        """Check if the session is running."""
        return self._status is SessionStatus.RUNNING

    def start(self) -> None:
        """Acquire the frame source and enter the running state.

        Raises:
            AcquisitionError: If the frame source cannot be opened. The
                session stays stopped.
        """
        if self.is_running():
            logger.warning("Tuning session already running")
            return

        try:
            self._frame_source.open()
        except AcquisitionError as e:
            logger.error(f"Could not start tuning session: {e}")
            self.events.emit_error(e)
            raise

        self._state.reset()
        self._status = SessionStatus.RUNNING
        logger.info(
            f"Tuning session started at {self._frame_source.sample_rate} Hz "
            f"({self.config.mode.name}, A4 = {self.config.reference_pitch:.1f} Hz)"
        )

    def stop(self) -> None:
        """Stop the session and forget the smoothed frequency."""
        if not self.is_running():
            return
        self._status = SessionStatus.STOPPED
        self._state.reset()
        self._frame_source.close()
        logger.info("Tuning session stopped")

    def tick(self) -> Optional[TickResult]:
        """Process one frame.

        Returns:
            A Reading or NoSignal, or None if the session is stopped
        """
        if not self.is_running():
            return None

        frame = self._frame_source.acquire_frame()
        peak = frame.peak

        raw_hz = estimate_pitch(frame, self._gate)
        if raw_hz is None:
            result: TickResult = NoSignal(peak=peak)
            self.events.emit_result(result)
            return result

        hz = smooth(self._state.last_hz, raw_hz, self._alpha)
        self._state.last_hz = hz

        reference_pitch = self.config.reference_pitch
        target = resolve_target(hz, self.config.mode, reference_pitch)
        deviation = evaluate(hz, target)

        result = Reading(
            frequency_hz=hz,
            target_label=target.label,
            target_hz=target.frequency,
            cents=deviation.cents,
            classification=deviation.classification,
            note_label=get_note_name(hz, reference_pitch),
            peak=peak,
        )
        logger.debug(
            f"{hz:.2f}Hz (raw {raw_hz:.2f}) -> {target.label} {deviation.cents:+.1f} cents "
            f"{deviation.classification.name}"
        )
        self.events.emit_result(result)
        return result
