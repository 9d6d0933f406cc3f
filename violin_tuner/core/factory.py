"""Factory for creating tuner components."""

from typing import Callable, Dict, Optional

from ..logger import get_logger
from ..services.audio_providers import SyntheticFrameSource, WavFileFrameSource
from ..services.tuning_session import TuningSession
from .config import TunerConfig
from .errors import AcquisitionError
from .events import TuningEvents
from .interfaces import IFrameSource

logger = get_logger(__name__)


def _live_frame_source(**kwargs) -> IFrameSource:
    # sounddevice needs the PortAudio library, so only load it when asked for
    try:
        from ..audio.audio_input import LiveFrameSource
    except OSError as e:
        raise AcquisitionError(f"Audio input is unavailable: {e}", source="microphone") from e

    return LiveFrameSource(**kwargs)


class ComponentFactory:
    """Factory for creating tuner components."""

    def __init__(self, config: Optional[TunerConfig] = None):
        """Initialize the component factory.

        Args:
            config: Shared tuner configuration, or None to create a default one
        """
        self.config = config or TunerConfig()

        # Register default frame source implementations
        self.frame_source_classes: Dict[str, Callable[..., IFrameSource]] = {
            "live": _live_frame_source,
            "wav": WavFileFrameSource,
            "synthetic": SyntheticFrameSource,
        }

    def create_frame_source(self, implementation: str = "live", **kwargs) -> IFrameSource:
        """Create a frame source.

        Args:
            implementation: Name of the implementation to use
            **kwargs: Additional parameters to pass to the constructor

        Returns:
            Frame source instance

        Raises:
            ValueError: If the implementation is not registered
        """
        if implementation not in self.frame_source_classes:
            raise ValueError(f"Unknown frame source implementation: {implementation}")

        instance = self.frame_source_classes[implementation](**kwargs)
        logger.info(f"Created frame source: {implementation}")
        return instance

    def create_session(
        self,
        frame_source: Optional[IFrameSource] = None,
        events: Optional[TuningEvents] = None,
        **source_kwargs,
    ) -> TuningSession:
        """Create a tuning session bound to the shared configuration.

        Args:
            frame_source: Frame source, or None to create a live one
            events: Event emitter, or None to create one
            **source_kwargs: Parameters for the live frame source

        Returns:
            Tuning session instance (stopped)
        """
        if frame_source is None:
            frame_source = self.create_frame_source("live", **source_kwargs)
        return TuningSession(frame_source, config=self.config, events=events)
