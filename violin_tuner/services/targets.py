"""Resolution of a frequency to the musical target it is tuned towards.

Two detection modes exist. FreeChromatic snaps to the nearest equal
tempered semitone. FixedStrings snaps to the nearest open string of an
instrument. Both are pure functions of (frequency, mode, reference pitch).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Tuple, Type

from ..constants import STANDARD_REFERENCE_PITCH, VIOLIN_STRINGS
from ..core.errors import ConfigurationError
from ..note_utils import (
    hz_to_note_number,
    nearest_note_number,
    note_name_from_number,
    note_number_to_hz,
)
from ..tuning_types import TuningTarget


@dataclass(frozen=True)
class StringTarget:
    """An open string and its frequency at the standard reference pitch."""

    name: str
    frequency: float


class DetectionMode(ABC):
    """Base for the target resolution strategies."""

    name: ClassVar[str]

    @abstractmethod
    def resolve(self, freq: float, reference_pitch: float) -> TuningTarget:
        """Map a positive frequency to its tuning target."""


@dataclass(frozen=True)
class FreeChromatic(DetectionMode):
    """Target the nearest note of the 12-tone chromatic scale."""

    name: ClassVar[str] = "chromatic"

    def resolve(self, freq: float, reference_pitch: float) -> TuningTarget:
        n = nearest_note_number(hz_to_note_number(freq, reference_pitch))
        return TuningTarget(
            label=note_name_from_number(n),
            frequency=note_number_to_hz(n, reference_pitch),
        )


def _strings(table) -> Tuple[StringTarget, ...]:
    return tuple(StringTarget(name, hz) for name, hz in table)


@dataclass(frozen=True)
class FixedStrings(DetectionMode):
    """Target the nearest open string of an instrument.

    String frequencies are given at A4 = 440 Hz and scaled with the
    configured reference pitch.
    """

    name: ClassVar[str] = "violin"

    strings: Tuple[StringTarget, ...] = _strings(VIOLIN_STRINGS)

    def __post_init__(self):
        if not self.strings:
            raise ConfigurationError("FixedStrings needs at least one string")

    def nearest_string(self, freq: float) -> StringTarget:
        """Return the string closest in Hz, the first one winning ties."""
        best = self.strings[0]
        best_distance = float("inf")
        for string in self.strings:
            distance = abs(freq - string.frequency)
            if distance < best_distance:
                best, best_distance = string, distance
        return best

    def resolve(self, freq: float, reference_pitch: float) -> TuningTarget:
        string = self.nearest_string(freq)
        return TuningTarget(
            label=string.name,
            frequency=string.frequency * reference_pitch / STANDARD_REFERENCE_PITCH,
        )


MODES: Dict[str, Type[DetectionMode]] = {
    FreeChromatic.name: FreeChromatic,
    FixedStrings.name: FixedStrings,
}


def mode_from_name(name: str) -> DetectionMode:
    """Build a detection mode from its name ('chromatic' or 'violin').

    Raises:
        ConfigurationError: If the name is unknown
    """
    try:
        return MODES[name.lower()]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown mode '{name}', expected one of: {', '.join(MODES)}"
        ) from None


def resolve_target(freq: float, mode: DetectionMode, reference_pitch: float) -> TuningTarget:
    """Resolve the tuning target for a frequency under a detection mode."""
    return mode.resolve(freq, reference_pitch)
