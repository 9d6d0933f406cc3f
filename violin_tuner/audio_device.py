"""Audio device utilities for the tuner."""

from typing import Any, Dict, List, Optional

import sounddevice as sd

from .logger import get_logger

logger = get_logger(__name__)


def list_input_devices() -> List[Dict[str, Any]]:
    """List the system's audio devices that can record.

    Returns:
        One dict per input device with its id, name, channel count and
        default sample rate
    """
    devices = sd.query_devices()
    inputs = []
    for device_id, device in enumerate(devices):
        if device["max_input_channels"] > 0:
            inputs.append(
                {
                    "id": device_id,
                    "name": device["name"],
                    "channels": device["max_input_channels"],
                    "sample_rate": device["default_samplerate"],
                }
            )
    return inputs


def default_input_device() -> Optional[int]:
    """Return the id of the default input device, or None if there is none."""
    try:
        device = sd.default.device[0]
    except (IndexError, TypeError) as e:
        logger.warning(f"Could not get default input device: {e}")
        return None
    if device is None or device < 0:
        return None
    return int(device)
