"""Exception types raised by the violin tuner."""


class TunerError(Exception):
    """Base class for all tuner errors."""


class AcquisitionError(TunerError):
    """The frame source could not be opened.

    Raised when no input device exists, access to it is denied or the
    audio file cannot be read. Fatal to starting a tuning session.
    """

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class ConfigurationError(TunerError, ValueError):
    """A user-adjustable setting was given an invalid value."""
