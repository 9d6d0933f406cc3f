"""Front ends for the violin tuner.

The pygame meter lives in violin_tuner.ui.pygame_ui and is imported on
demand so that console use does not initialise pygame.
"""

from .adapters import ConsoleTunerUI, UIAdapter
from .presentation import (
    ACQUISITION_HELP,
    DisplayState,
    display_state,
    indicator_position,
    level_percent,
)

__all__ = [
    "ACQUISITION_HELP",
    "ConsoleTunerUI",
    "DisplayState",
    "UIAdapter",
    "display_state",
    "indicator_position",
    "level_percent",
]
