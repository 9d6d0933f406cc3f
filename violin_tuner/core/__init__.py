"""Core components for the violin tuner."""

# Import interfaces for easier access
from .interfaces import IFrameSource, IPresentationSink
from .errors import TunerError, AcquisitionError, ConfigurationError

__all__ = [
    "IFrameSource",
    "IPresentationSink",
    "TunerError",
    "AcquisitionError",
    "ConfigurationError",
]
