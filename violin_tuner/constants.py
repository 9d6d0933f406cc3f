"""Fixed design constants for the violin tuner."""

from typing import List, Tuple

# Detection
NOISE_GATE_RMS: float = 0.015  # RMS below this is treated as silence
MIN_FREQUENCY: float = 80.0  # Hz - lowest playable fundamental searched
MAX_FREQUENCY: float = 1200.0  # Hz - highest playable fundamental searched

# Smoothing
SMOOTHING_ALPHA: float = 0.5  # Weight of the previous smoothed value

# Classification (absolute cents)
IN_TUNE_CENTS: float = 5.0
CLOSE_CENTS: float = 15.0

# Reference pitch
DEFAULT_REFERENCE_PITCH: float = 440.0
STANDARD_REFERENCE_PITCH: float = 440.0
REFERENCE_PITCH_RANGE: Tuple[float, float] = (415.0, 466.0)

# Audio
SAMPLE_RATE: int = 44100
FRAME_SIZE: int = 8192  # Large enough to resolve the low end of the lag range

# Display
INDICATOR_RANGE_CENTS: float = 50.0

NOTE_NAMES: List[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]

# Open strings of a violin at A4 = 440 Hz, lowest first
VIOLIN_STRINGS: List[Tuple[str, float]] = [
    ("G3", 196.00),
    ("D4", 293.66),
    ("A4", 440.00),
    ("E5", 659.25),
]
