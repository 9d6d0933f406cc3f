"""Defines the core interfaces for the violin tuner."""

from __future__ import annotations
from abc import ABC, abstractmethod

from ..tuning_types import SampleFrame, TickResult


class IFrameSource(ABC):
    """Interface for sources of fixed-length sample frames."""

    @abstractmethod
    def open(self) -> None:
        """Acquire the underlying device or file.

        Raises:
            AcquisitionError: If the source is unavailable
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying device or file."""
        pass

    @abstractmethod
    def acquire_frame(self) -> SampleFrame:
        """Return the current frame without blocking."""
        pass

    @property
    @abstractmethod
    def sample_rate(self) -> int:
        """The sample rate of the frames in Hz."""
        pass

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """Check if the source has been opened."""
        pass


class IPresentationSink(ABC):
    """Interface for consumers of per-tick tuning results."""

    @abstractmethod
    def present(self, result: TickResult) -> None:
        """Show a reading or the neutral no-signal state."""
        pass
