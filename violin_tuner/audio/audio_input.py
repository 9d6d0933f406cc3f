"""Live microphone input for the tuner."""

from __future__ import annotations
import threading
from typing import ClassVar, List, Optional

import numpy as np
import sounddevice as sd

from ..constants import FRAME_SIZE, SAMPLE_RATE
from ..core.errors import AcquisitionError
from ..core.interfaces import IFrameSource
from ..logger import get_logger
from ..tuning_types import SampleFrame

logger = get_logger(__name__)


class LiveFrameSource(IFrameSource):
    """Frame source reading the most recent samples from an input device.

    The PortAudio callback thread appends blocks to a rolling buffer;
    acquire_frame() copies the latest frame_size samples out of it and
    never waits for new audio.
    """

    # Rates tried after the requested one
    FALLBACK_RATES: ClassVar[List[int]] = [48000, 44100, 22050]
    BLOCK_SIZE: ClassVar[int] = 1024

    def __init__(
        self,
        device_id: Optional[int] = None,
        sample_rate: int = SAMPLE_RATE,
        frame_size: int = FRAME_SIZE,
        blocksize: Optional[int] = None,
    ) -> None:
        """Initialize the live source.

        Args:
            device_id: Audio input device ID, or None for the default input
            sample_rate: Preferred sample rate in Hz
            frame_size: Number of samples handed out per frame
            blocksize: Samples per PortAudio callback
        """
        self._device_id = device_id
        self._sample_rate = sample_rate
        self._frame_size = frame_size
        self._blocksize = blocksize or self.BLOCK_SIZE

        self._stream: Optional[sd.InputStream] = None
        self._buffer = np.zeros(frame_size, dtype=np.float32)
        self._lock = threading.Lock()

    def _candidate_rates(self) -> List[int]:
        rates = [self._sample_rate]
        rates.extend(r for r in self.FALLBACK_RATES if r != self._sample_rate)
        return rates

    def open(self) -> None:
        """Open and start the input stream.

        Raises:
            AcquisitionError: If no input device is available or none of the
                candidate sample rates is accepted
        """
        if self._stream is not None:
            return

        errors = []
        for rate in self._candidate_rates():
            stream = None
            try:
                sd.check_input_settings(
                    device=self._device_id, channels=1, dtype="float32", samplerate=rate
                )
                stream = sd.InputStream(
                    device=self._device_id,
                    channels=1,
                    samplerate=rate,
                    blocksize=self._blocksize,
                    dtype="float32",
                    callback=self._audio_callback,
                )
                stream.start()
            except (sd.PortAudioError, ValueError) as e:
                logger.warning(f"Sample rate {rate} Hz not usable: {e}")
                if stream is not None:
                    stream.close()
                errors.append(f"{rate} Hz: {e}")
                continue

            self._stream = stream
            self._sample_rate = rate
            with self._lock:
                self._buffer = np.zeros(self._frame_size, dtype=np.float32)
            logger.info(f"Audio input started: device={self._device_id}, rate={rate} Hz")
            return

        raise AcquisitionError(
            "Could not open audio input device "
            f"{self._device_id if self._device_id is not None else '(default)'}: "
            + "; ".join(errors),
            source="microphone",
        )

    def close(self) -> None:
        """Stop and close the input stream."""
        if self._stream is None:
            return
        try:
            self._stream.stop()
            self._stream.close()
            logger.info("Audio input stopped")
        except sd.PortAudioError as e:
            logger.error(f"Error stopping audio input: {e}")
        finally:
            self._stream = None

    def _audio_callback(
        self,
        indata: np.ndarray,
        _frames: int,
        _time_info,
        status: sd.CallbackFlags,
    ) -> None:
        """Append the newest block to the rolling buffer.

        Runs on the audio thread, so it only copies.
        """
        if status:
            logger.warning(f"Audio callback status: {status}")

        block = indata[:, 0] if indata.ndim > 1 else indata
        with self._lock:
            if len(block) >= self._frame_size:
                self._buffer = block[-self._frame_size :].astype(np.float32)
            else:
                self._buffer = np.concatenate((self._buffer[len(block) :], block))

    def acquire_frame(self) -> SampleFrame:
        with self._lock:
            samples = self._buffer.copy()
        return SampleFrame(samples=samples, sample_rate=self._sample_rate)

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def is_open(self) -> bool:
        return self._stream is not None
