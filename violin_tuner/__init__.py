"""Violin Tuner: real-time pitch estimation and tuning evaluation."""

__version__ = "0.1.0"
