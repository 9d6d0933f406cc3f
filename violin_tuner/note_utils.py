"""Utility functions for working with musical notes and frequencies."""

import math

from .constants import DEFAULT_REFERENCE_PITCH, NOTE_NAMES
from .logger import get_logger

logger = get_logger(__name__)

# MIDI note number of A4
A4_NOTE_NUMBER = 69


def hz_to_note_number(freq: float, reference_pitch: float = DEFAULT_REFERENCE_PITCH) -> float:
    """Convert a frequency to a continuous MIDI note number.

    Args:
        freq: Frequency in Hz, must be positive
        reference_pitch: Frequency of A4 in Hz

    Returns:
        Fractional note number, 69.0 for A4
    """
    return A4_NOTE_NUMBER + 12 * math.log2(freq / reference_pitch)


def note_number_to_hz(note_number: float, reference_pitch: float = DEFAULT_REFERENCE_PITCH) -> float:
    """Convert a (possibly fractional) MIDI note number to Hz."""
    return reference_pitch * 2 ** ((note_number - A4_NOTE_NUMBER) / 12)


def nearest_note_number(note_number: float) -> int:
    """Round a note number to the nearest semitone, halves rounding up."""
    return math.floor(note_number + 0.5)


def note_name_from_number(note_number: float) -> str:
    """Name the note nearest to a note number in Scientific Pitch Notation.

    Octave numbers change between B and C, so 59 is 'B3' and 60 is 'C4'.
    Python's floor division and modulo keep negative numbers consistent.
    """
    n = nearest_note_number(note_number)
    name = NOTE_NAMES[n % 12]
    octave = n // 12 - 1
    return f"{name}{octave}"


def get_note_name(freq: float, reference_pitch: float = DEFAULT_REFERENCE_PITCH) -> str:
    """Convert frequency to note name using Scientific Pitch Notation (SPN).

    Args:
        freq: Frequency in Hz
        reference_pitch: Frequency of A4 in Hz

    Returns:
        Note name with octave (e.g., 'A4', 'C#4'), or '--' for a
        non-positive or non-finite frequency
    """
    if not math.isfinite(freq) or freq <= 0:
        logger.debug(f"No note name for frequency {freq}")
        return "--"
    return note_name_from_number(hz_to_note_number(freq, reference_pitch))
