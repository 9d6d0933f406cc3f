"""Configuration for the violin tuner.

Only the reference pitch and the detection mode are user adjustable. The
tuning session reads both at the start of every tick, so they can be
changed at any time between ticks.
"""

import math
from typing import Optional

from ..constants import DEFAULT_REFERENCE_PITCH, REFERENCE_PITCH_RANGE
from ..logger import get_logger
from ..services.targets import DetectionMode, FreeChromatic, mode_from_name
from .errors import ConfigurationError

logger = get_logger(__name__)


class TunerConfig:
    """User-adjustable tuner settings."""

    def __init__(
        self,
        reference_pitch: float = DEFAULT_REFERENCE_PITCH,
        mode: Optional[DetectionMode] = None,
    ):
        """Initialize the configuration.

        Args:
            reference_pitch: Frequency of A4 in Hz
            mode: Detection mode, or None for free chromatic
        """
        self._reference_pitch = DEFAULT_REFERENCE_PITCH
        self._mode: DetectionMode = mode or FreeChromatic()
        self.reference_pitch = reference_pitch

    @property
    def reference_pitch(self) -> float:
        """Get the A4 reference pitch in Hz."""
        return self._reference_pitch

    @reference_pitch.setter
    def reference_pitch(self, value: float) -> None:
        """Set the A4 reference pitch in Hz."""
        low, high = REFERENCE_PITCH_RANGE
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Reference pitch must be a number, got {value!r}") from None
        if not math.isfinite(value) or not low <= value <= high:
            raise ConfigurationError(
                f"Reference pitch must be between {low:.0f} and {high:.0f} Hz, got {value}"
            )
        if value != self._reference_pitch:
            logger.info(f"Reference pitch set to A4 = {value:.1f} Hz")
        self._reference_pitch = value

    @property
    def mode(self) -> DetectionMode:
        """Get the detection mode."""
        return self._mode

    @mode.setter
    def mode(self, value: DetectionMode) -> None:
        """Set the detection mode."""
        if not isinstance(value, DetectionMode):
            raise ConfigurationError(f"Not a detection mode: {value!r}")
        if value != self._mode:
            logger.info(f"Detection mode set to {value.name}")
        self._mode = value

    def set_mode_by_name(self, name: str) -> None:
        """Select the detection mode by name ('chromatic' or 'violin')."""
        self.mode = mode_from_name(name)

    def adjust_reference_pitch(self, delta: float) -> float:
        """Shift the reference pitch, clamped to the allowed range.

        Returns:
            The new reference pitch
        """
        low, high = REFERENCE_PITCH_RANGE
        self.reference_pitch = min(high, max(low, self._reference_pitch + delta))
        return self._reference_pitch

    def __repr__(self) -> str:
        return f"TunerConfig(reference_pitch={self._reference_pitch}, mode={self._mode.name!r})"
