"""Fundamental frequency estimation by autocorrelation."""

from __future__ import annotations

import math
from typing import Optional, Tuple

import numpy as np

from ..constants import MAX_FREQUENCY, MIN_FREQUENCY, NOISE_GATE_RMS
from ..logger import get_logger
from ..tuning_types import SampleFrame

logger = get_logger(__name__)


def lag_bounds(sample_rate: int) -> Tuple[int, int]:
    """Return the (min_lag, max_lag) search range for a sample rate.

    The shortest period searched belongs to MAX_FREQUENCY and the longest
    to MIN_FREQUENCY.
    """
    return int(sample_rate // MAX_FREQUENCY), int(sample_rate // MIN_FREQUENCY)


def autocorrelation(samples: np.ndarray, max_lag: int, min_lag: int = 0) -> np.ndarray:
    """Unnormalized autocorrelation, indexed by lag up to max_lag.

    r[lag] = sum(x[i] * x[i + lag]) over every i where both samples exist,
    one numpy dot product per lag in min_lag..max_lag. Lags outside that
    range, or not shorter than the buffer, are left at 0.
    """
    data = np.asarray(samples, dtype=np.float64)
    n = len(data)
    corr = np.zeros(max_lag + 1)
    for lag in range(max(min_lag, 0), min(max_lag, n - 1) + 1):
        corr[lag] = np.dot(data[: n - lag], data[lag:])
    return corr


def parabolic_shift(y1: float, y2: float, y3: float) -> float:
    """Offset of a parabola's vertex through three equally spaced points.

    Returns 0.0 when the points are collinear.
    """
    denom = y1 - 2 * y2 + y3
    if denom == 0:
        return 0.0
    return 0.5 * (y1 - y3) / denom


def estimate_pitch(frame: SampleFrame, gate: float = NOISE_GATE_RMS) -> Optional[float]:
    """Estimate the fundamental frequency of one frame.

    Args:
        frame: Mono samples and their sample rate
        gate: RMS threshold below which the frame counts as silence

    Returns:
        The frequency in Hz, or None when the frame is below the gate, has
        no positively correlated lag or yields a non-finite estimate
    """
    samples = frame.samples
    sample_rate = frame.sample_rate

    rms = frame.rms
    if rms < gate:
        logger.debug(f"Below noise gate: rms={rms:.4f} < {gate:.4f}")
        return None

    min_lag, max_lag = lag_bounds(sample_rate)
    if min_lag < 1 or len(samples) < max_lag + 2:
        logger.debug(
            f"Frame of {len(samples)} samples at {sample_rate} Hz "
            f"cannot cover lags {min_lag}..{max_lag}"
        )
        return None

    corr = autocorrelation(samples, max_lag + 1, min_lag - 1)

    # argmax keeps the first of equal maxima
    best_lag = min_lag + int(np.argmax(corr[min_lag : max_lag + 1]))
    best_corr = float(corr[best_lag])
    if best_corr <= 0:
        logger.debug("No positively correlated lag")
        return None

    y1, y2, y3 = (float(v) for v in corr[best_lag - 1 : best_lag + 2])
    refined_lag = best_lag + parabolic_shift(y1, y2, y3)

    if refined_lag == 0:
        return None
    freq = sample_rate / refined_lag
    if not math.isfinite(freq) or freq <= 0:
        logger.debug(f"Discarding degenerate estimate {freq} (lag {refined_lag})")
        return None

    logger.debug(
        f"Pitch {freq:.2f}Hz (lag {best_lag}{refined_lag - best_lag:+.3f}, rms {rms:.4f})"
    )
    return freq
