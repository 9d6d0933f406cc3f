"""Frame sources that do not need an audio device."""

from typing import Optional

import numpy as np
import soundfile as sf

from ..constants import FRAME_SIZE, SAMPLE_RATE
from ..core.errors import AcquisitionError
from ..core.interfaces import IFrameSource
from ..logger import get_logger
from ..tuning_types import SampleFrame

logger = get_logger(__name__)


class WavFileFrameSource(IFrameSource):
    """Provides frames by stepping through an audio file."""

    def __init__(
        self,
        file_path: str,
        frame_size: int = FRAME_SIZE,
        hop_size: Optional[int] = None,
        loop: bool = False,
        gain: float = 1.0,
    ):
        """Initialize the file source.

        Args:
            file_path: Path of any file format libsndfile can read
            frame_size: Number of samples per frame
            hop_size: Samples to advance per frame, or None for frame_size
            loop: Start over at the end of the file instead of going silent
            gain: Linear gain applied to the samples
        """
        self._file_path = file_path
        self._frame_size = frame_size
        self._hop_size = hop_size or frame_size
        self._loop = loop
        self._gain = gain
        self._sample_rate = SAMPLE_RATE
        self._data: Optional[np.ndarray] = None
        self._position = 0

    def open(self) -> None:
        if self._data is not None:
            return
        try:
            data, sample_rate = sf.read(self._file_path, dtype="float32", always_2d=True)
        except (RuntimeError, OSError) as e:
            raise AcquisitionError(
                f"Could not read audio file {self._file_path}: {e}", source=self._file_path
            ) from e

        # Downmix to mono
        mono = data.mean(axis=1).astype(np.float32)
        if self._gain != 1.0:
            mono *= self._gain

        self._data = mono
        self._sample_rate = int(sample_rate)
        self._position = 0
        logger.info(
            f"Opened {self._file_path}: {len(mono)} samples at {self._sample_rate} Hz "
            f"({data.shape[1]} channel(s))"
        )

    def close(self) -> None:
        self._data = None
        self._position = 0

    @property
    def is_open(self) -> bool:
        return self._data is not None

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def exhausted(self) -> bool:
        """True once a non-looping source has handed out its last samples."""
        return (
            self._data is not None
            and not self._loop
            and self._position >= len(self._data)
        )

    def acquire_frame(self) -> SampleFrame:
        if self._data is None:
            raise AcquisitionError("Audio file source is not open", source=self._file_path)

        if self._loop and len(self._data) > 0:
            # Wrap around the end of the file
            indices = (self._position + np.arange(self._frame_size)) % len(self._data)
            window = self._data[indices]
            self._position = (self._position + self._hop_size) % len(self._data)
        else:
            window = self._data[self._position : self._position + self._frame_size]
            if len(window) < self._frame_size:
                window = np.concatenate(
                    (window, np.zeros(self._frame_size - len(window), dtype=np.float32))
                )
            self._position += self._hop_size
        return SampleFrame(samples=window.copy(), sample_rate=self._sample_rate)


class SyntheticFrameSource(IFrameSource):
    """Generates sine frames with a continuous phase, or silence."""

    def __init__(
        self,
        frequency: Optional[float] = 440.0,
        amplitude: float = 0.5,
        sample_rate: int = SAMPLE_RATE,
        frame_size: int = FRAME_SIZE,
        noise: float = 0.0,
        seed: Optional[int] = None,
    ):
        """Initialize the generator.

        Args:
            frequency: Sine frequency in Hz, or None for silence
            amplitude: Peak amplitude of the sine
            sample_rate: Sample rate in Hz
            frame_size: Number of samples per frame
            noise: Standard deviation of added white noise
            seed: Seed for the noise generator
        """
        self.frequency = frequency
        self.amplitude = amplitude
        self._sample_rate = sample_rate
        self._frame_size = frame_size
        self._noise = noise
        self._rng = np.random.default_rng(seed)
        self._phase = 0.0
        self._open = False

    def open(self) -> None:
        self._open = True
        self._phase = 0.0

    def close(self) -> None:
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    def acquire_frame(self) -> SampleFrame:
        if self.frequency is None:
            samples = np.zeros(self._frame_size, dtype=np.float64)
        else:
            step = 2 * np.pi * self.frequency / self._sample_rate
            phases = self._phase + step * np.arange(self._frame_size)
            samples = self.amplitude * np.sin(phases)
            self._phase = float((self._phase + step * self._frame_size) % (2 * np.pi))
        if self._noise > 0:
            samples = samples + self._rng.normal(0.0, self._noise, self._frame_size)
        return SampleFrame(samples=samples.astype(np.float32), sample_rate=self._sample_rate)
