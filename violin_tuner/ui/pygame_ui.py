"""Pygame meter for the tuner."""

from typing import Optional

import pygame

from ..core.errors import ConfigurationError
from ..logger import get_logger
from ..services.targets import FixedStrings, FreeChromatic
from ..services.tuning_session import TuningSession
from ..tuning_types import Classification, TickResult
from .adapters import UIAdapter
from .presentation import WAITING_MESSAGE, DisplayState, display_state

# Get logger for this module
logger = get_logger(__name__)

STATE_COLORS = {
    Classification.IN_TUNE: (60, 200, 110),
    Classification.CLOSE: (235, 190, 60),
    Classification.OFF: (220, 70, 70),
}


class PygameTunerUI(UIAdapter):
    """Window with a linear cents meter driven by the display refresh loop.

    Each frame of the loop runs one session tick, so the session advances
    at the display rate. Keys: M switches mode, Up/Down move A4 by 1 Hz,
    Escape quits.
    """

    def __init__(self, session: TuningSession, fps: int = 60):
        """Initialize the Pygame UI"""
        super().__init__(session)
        self.fps = fps
        self.screen = None
        self.width = 800
        self.height = 480
        self.bg_color = (20, 20, 30)
        self.panel_color = (35, 35, 50)
        self.text_color = (240, 240, 240)
        self.muted_color = (140, 140, 160)
        self.initialized = False
        self.clock = None

        # Fonts
        self.large_font = None
        self.medium_font = None
        self.small_font = None

        self._state: Optional[DisplayState] = None
        logger.debug("Initializing PygameTunerUI")

    def init_screen(self):
        """Initialize the Pygame screen and resources"""
        try:
            pygame.init()
            self.screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption("Violin Tuner")

            self.large_font = pygame.font.SysFont("Arial", 110, bold=True)
            self.medium_font = pygame.font.SysFont("Arial", 34)
            self.small_font = pygame.font.SysFont("Arial", 22)

            self.clock = pygame.time.Clock()
            self.initialized = True
            logger.info("Pygame UI initialized successfully")
            return self.screen

        except pygame.error as e:
            logger.error(f"Failed to initialize Pygame: {e}")
            self.cleanup()
            raise

    def present(self, result: TickResult) -> None:
        self._last_result = result
        self._state = display_state(result)

    def handle_key(self, key: int) -> bool:
        """React to a key press. Returns False when the UI should close."""
        config = self._session.config
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_m:
            if isinstance(config.mode, FreeChromatic):
                config.mode = FixedStrings()
            else:
                config.mode = FreeChromatic()
        elif key in (pygame.K_UP, pygame.K_DOWN):
            delta = 1.0 if key == pygame.K_UP else -1.0
            try:
                config.adjust_reference_pitch(delta)
            except ConfigurationError as e:
                logger.warning(str(e))
        return True

    def _blit_centered(self, font, text, color, center):
        surface = font.render(text, True, color)
        self.screen.blit(surface, surface.get_rect(center=center))

    def draw(self) -> None:
        """Draw the current display state."""
        if not self.initialized or not self.screen:
            return

        state = self._state
        config = self._session.config
        self.screen.fill(self.bg_color)

        # Display panel, tinted by classification
        panel_rect = pygame.Rect(40, 30, self.width - 80, 250)
        panel_color = self.panel_color
        if state and state.classification is not None:
            panel_color = STATE_COLORS[state.classification]
        pygame.draw.rect(self.screen, panel_color, panel_rect, border_radius=12)

        if state is None:
            self._blit_centered(
                self.medium_font, WAITING_MESSAGE, self.text_color, panel_rect.center
            )
        else:
            self._blit_centered(
                self.large_font, state.note, self.text_color, (self.width // 2, 110)
            )
            self._blit_centered(
                self.medium_font,
                f"{state.frequency} Hz   {state.cents} cents",
                self.text_color,
                (self.width // 2, 200),
            )
            self._blit_centered(
                self.small_font,
                f"Target: {state.target_label} {state.target_hz}"
                + ("   IN TUNE" if state.badge_ok else ""),
                self.text_color,
                (self.width // 2, 250),
            )

        # Linear meter: -50 .. +50 cents with the in-tune band in the middle
        meter = pygame.Rect(80, 320, self.width - 160, 30)
        pygame.draw.rect(self.screen, self.panel_color, meter)
        band_width = meter.width * 10 / 100
        band = pygame.Rect(meter.centerx - band_width / 2, meter.top, band_width, meter.height)
        pygame.draw.rect(self.screen, STATE_COLORS[Classification.IN_TUNE], band)
        indicator = state.indicator if state else 50.0
        needle_x = meter.left + meter.width * indicator / 100
        pygame.draw.line(
            self.screen, self.text_color, (needle_x, meter.top - 10), (needle_x, meter.bottom + 10), 4
        )

        # Input level
        level = state.level if state else 0
        level_rect = pygame.Rect(80, 380, (self.width - 160) * level / 100, 10)
        pygame.draw.rect(self.screen, self.muted_color, level_rect)

        footer = (
            f"Mode: {config.mode.name}   A4 = {config.reference_pitch:.0f} Hz   "
            "[M] mode  [Up/Down] A4  [Esc] quit"
        )
        self._blit_centered(self.small_font, footer, self.muted_color, (self.width // 2, 440))

        pygame.display.flip()

    def run(self) -> None:
        """Tick the session once per displayed frame until closed."""
        if not self.initialized:
            self.init_screen()

        running = True
        try:
            while running and self._session.is_running():
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        running = self.handle_key(event.key) and running

                self._session.tick()
                self.draw()
                self.clock.tick(self.fps)
        finally:
            self.cleanup()

    def cleanup(self):
        """Clean up Pygame resources"""
        if self.initialized:
            pygame.quit()
            self.initialized = False
            logger.info("Pygame UI cleaned up")
