"""Type definitions for the violin tuner."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np


@dataclass(frozen=True)
class SampleFrame:
    """One fixed-length buffer of mono samples handed over per tick."""

    samples: np.ndarray  # float32 samples, roughly in [-1, 1]
    sample_rate: int  # Hz

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def peak(self) -> float:
        """Maximum absolute amplitude of the frame."""
        if len(self.samples) == 0:
            return 0.0
        return float(np.max(np.abs(self.samples)))

    @property
    def rms(self) -> float:
        """Root-mean-square amplitude of the frame."""
        if len(self.samples) == 0:
            return 0.0
        samples = self.samples.astype(np.float64)
        return float(np.sqrt(np.mean(samples * samples)))


@dataclass(frozen=True)
class TuningTarget:
    """The note or string a frequency is being tuned towards."""

    label: str  # Note name (e.g., 'A4') or string name (e.g., 'G3')
    frequency: float  # Target frequency in Hz


class Classification(Enum):
    """How close a reading is to its target."""

    IN_TUNE = "in_tune"
    CLOSE = "close"
    OFF = "off"


@dataclass(frozen=True)
class DeviationResult:
    """Signed deviation from a target, in cents, and its classification."""

    cents: float  # Positive = sharp, negative = flat
    classification: Classification


@dataclass(frozen=True)
class Reading:
    """A tick that produced a pitch."""

    frequency_hz: float  # Smoothed frequency
    target_label: str
    target_hz: float
    cents: float
    classification: Classification
    note_label: str = ""  # Nearest chromatic note of frequency_hz
    peak: float = 0.0  # Input level of the frame

    @property
    def in_tune(self) -> bool:
        return self.classification is Classification.IN_TUNE


@dataclass(frozen=True)
class NoSignal:
    """A tick with silence, noise below the gate or no usable pitch."""

    peak: float = 0.0


TickResult = Union[Reading, NoSignal]


@dataclass
class SessionState:
    """Per-session state owned by the tuning session."""

    last_hz: Optional[float] = None  # Last smoothed frequency, None when unset

    def reset(self) -> None:
        self.last_hz = None
