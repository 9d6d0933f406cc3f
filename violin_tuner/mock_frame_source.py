"""A scripted frame source for unit tests."""

from collections import deque
from typing import Iterable, Optional

import numpy as np

from .constants import FRAME_SIZE, SAMPLE_RATE
from .core.errors import AcquisitionError
from .core.interfaces import IFrameSource
from .tuning_types import SampleFrame


class MockFrameSource(IFrameSource):
    """Hands out queued frames, then silence. Can be told to fail on open."""

    def __init__(
        self,
        frames: Iterable[np.ndarray] = (),
        sample_rate: int = SAMPLE_RATE,
        frame_size: int = FRAME_SIZE,
        fail_with: Optional[str] = None,
    ):
        self._frames = deque(frames)
        self._sample_rate = sample_rate
        self._frame_size = frame_size
        self._fail_with = fail_with
        self._open = False
        self.open_calls = 0
        self.frames_served = 0

    def queue(self, samples: np.ndarray) -> None:
        self._frames.append(samples)

    def open(self) -> None:
        self.open_calls += 1
        if self._fail_with:
            raise AcquisitionError(self._fail_with, source="mock")
        self._open = True

    def close(self) -> None:
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    def acquire_frame(self) -> SampleFrame:
        self.frames_served += 1
        if self._frames:
            samples = np.asarray(self._frames.popleft(), dtype=np.float32)
        else:
            samples = np.zeros(self._frame_size, dtype=np.float32)
        return SampleFrame(samples=samples, sample_rate=self._sample_rate)
