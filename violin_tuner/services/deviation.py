"""Deviation of a frequency from its target, in cents."""

import math

from ..constants import CLOSE_CENTS, IN_TUNE_CENTS
from ..tuning_types import Classification, DeviationResult, TuningTarget


def cents_off(freq: float, target_hz: float) -> float:
    """Signed distance from target_hz to freq in cents. Positive is sharp."""
    return 1200 * math.log2(freq / target_hz)


def classify(cents: float) -> Classification:
    """Classify a deviation by its absolute size.

    |cents| <= 5 is in tune, |cents| <= 15 is close, anything else is off.
    """
    magnitude = abs(cents)
    if magnitude <= IN_TUNE_CENTS:
        return Classification.IN_TUNE
    if magnitude <= CLOSE_CENTS:
        return Classification.CLOSE
    return Classification.OFF


def evaluate(freq: float, target: TuningTarget) -> DeviationResult:
    """Compute the deviation of freq from a tuning target."""
    cents = cents_off(freq, target.frequency)
    return DeviationResult(cents=cents, classification=classify(cents))
