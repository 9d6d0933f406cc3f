"""Exponential smoothing of successive pitch estimates."""

from typing import Optional

from ..constants import SMOOTHING_ALPHA


def smooth(previous: Optional[float], raw: float, alpha: float = SMOOTHING_ALPHA) -> float:
    """Blend a new raw frequency into the previous smoothed one.

    Args:
        previous: Last smoothed frequency, or None when nothing has been seen yet
        raw: The new raw estimate in Hz
        alpha: Weight given to the previous value (0 follows raw exactly)

    Returns:
        The new smoothed frequency
    """
    if previous is None:
        return raw
    return previous * alpha + raw * (1 - alpha)
