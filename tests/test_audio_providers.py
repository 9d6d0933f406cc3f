import os

import numpy as np
import pytest
import soundfile as sf

from violin_tuner.core.errors import AcquisitionError
from violin_tuner.services.audio_providers import SyntheticFrameSource, WavFileFrameSource
from violin_tuner.detection.pitch_estimator import estimate_pitch

SAMPLE_RATE = 44100


@pytest.fixture
def wav_file(tmp_path):
    """Half a second of a 440 Hz sine in a stereo WAV file."""
    t = np.arange(SAMPLE_RATE // 2) / SAMPLE_RATE
    tone = 0.5 * np.sin(2 * np.pi * 440.0 * t)
    path = os.path.join(tmp_path, "a4.wav")
    sf.write(path, np.column_stack((tone, tone)), SAMPLE_RATE)
    return path


def test_wav_source_frames(wav_file):
    source = WavFileFrameSource(wav_file, frame_size=4096)
    assert not source.is_open
    source.open()
    assert source.is_open
    assert source.sample_rate == SAMPLE_RATE

    frame = source.acquire_frame()
    assert len(frame) == 4096
    assert frame.sample_rate == SAMPLE_RATE
    assert estimate_pitch(frame) == pytest.approx(440.0, rel=0.005)


def test_wav_source_pads_last_frame_and_exhausts(wav_file):
    source = WavFileFrameSource(wav_file, frame_size=4096)
    source.open()
    frames = []
    while not source.exhausted:
        frames.append(source.acquire_frame())

    # 22050 samples = 5 full frames + one padded frame
    assert len(frames) == 6
    assert all(len(f) == 4096 for f in frames)
    assert np.all(frames[-1].samples[22050 - 5 * 4096 :] == 0)


def test_wav_source_loops(wav_file):
    source = WavFileFrameSource(wav_file, frame_size=4096, loop=True)
    source.open()
    for _ in range(20):
        frame = source.acquire_frame()
        assert len(frame) == 4096
    assert not source.exhausted
    assert frame.peak > 0.4


def test_wav_source_gain(wav_file):
    source = WavFileFrameSource(wav_file, frame_size=4096, gain=0.5)
    source.open()
    assert source.acquire_frame().peak == pytest.approx(0.25, abs=0.01)


def test_wav_source_missing_file(tmp_path):
    source = WavFileFrameSource(os.path.join(tmp_path, "missing.wav"))
    with pytest.raises(AcquisitionError):
        source.open()
    assert not source.is_open


def test_wav_source_not_open(wav_file):
    source = WavFileFrameSource(wav_file)
    with pytest.raises(AcquisitionError):
        source.acquire_frame()


def test_synthetic_source_is_phase_continuous():
    source = SyntheticFrameSource(440.0, amplitude=0.5, frame_size=1000)
    source.open()
    joined = np.concatenate([source.acquire_frame().samples for _ in range(3)])
    t = np.arange(3000) / SAMPLE_RATE
    expected = 0.5 * np.sin(2 * np.pi * 440.0 * t)
    np.testing.assert_allclose(joined, expected, atol=1e-5)


def test_synthetic_source_silence_and_noise():
    source = SyntheticFrameSource(None, frame_size=2048)
    source.open()
    assert source.acquire_frame().peak == 0.0

    noisy = SyntheticFrameSource(None, frame_size=2048, noise=0.1, seed=4)
    assert noisy.acquire_frame().rms == pytest.approx(0.1, rel=0.1)
