"""Formatting of tick results for display."""

import math
from dataclasses import dataclass
from typing import Optional

from ..constants import INDICATOR_RANGE_CENTS
from ..tuning_types import Classification, Reading, TickResult

ACQUISITION_HELP = (
    "Could not access the microphone. Check that an input device is connected "
    "and that this program is allowed to record audio."
)

WAITING_MESSAGE = "Listening... play a string."


@dataclass(frozen=True)
class DisplayState:
    """Everything a front end needs to draw one tick."""

    note: str
    frequency: str
    cents: str
    target_label: str
    target_hz: str
    indicator: float  # Needle position, 0-100 % of the meter width
    level: int  # Input level bar, 0-100 %
    classification: Optional[Classification]
    badge_ok: bool


def indicator_position(cents: float, range_cents: float = INDICATOR_RANGE_CENTS) -> float:
    """Map cents to a needle position in percent.

    -range_cents maps to 0, 0 to 50 and +range_cents to 100. Larger
    deviations are pinned to the ends.
    """
    clamped = max(-range_cents, min(range_cents, cents))
    return (clamped + range_cents) / (2 * range_cents) * 100


def level_percent(peak: float) -> int:
    """Input level bar width for a peak amplitude. Full scale at 0.5."""
    return min(100, math.floor(peak * 200 + 0.5))


def display_state(result: TickResult) -> DisplayState:
    """Build the display state for a reading or the neutral no-signal state."""
    level = level_percent(result.peak)
    if isinstance(result, Reading):
        return DisplayState(
            note=result.note_label or result.target_label,
            frequency=f"{result.frequency_hz:.2f}",
            cents=f"{result.cents:.1f}",
            target_label=result.target_label,
            target_hz=f"({result.target_hz:.2f} Hz)",
            indicator=indicator_position(result.cents),
            level=level,
            classification=result.classification,
            badge_ok=result.in_tune,
        )
    return DisplayState(
        note="--",
        frequency="0.00",
        cents="0.0",
        target_label="--",
        target_hz="",
        indicator=indicator_position(0.0),
        level=level,
        classification=None,
        badge_ok=False,
    )


def text_meter(cents: Optional[float], width: int = 21) -> str:
    """Render a one-line needle meter such as '[----------|----------]'."""
    slots = ["-"] * width
    if cents is not None:
        position = indicator_position(cents) / 100 * (width - 1)
        slots[int(round(position))] = "|"
    return "[" + "".join(slots) + "]"
