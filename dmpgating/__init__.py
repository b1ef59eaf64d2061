"""Gating functions for motion primitive generation."""
from .gating import ExponentialGate, GatingFunction, InvalidParameterError
from .utils import LogLevel, set_log

__version__ = "0.1.0"

__all__ = [
    "ExponentialGate",
    "GatingFunction",
    "InvalidParameterError",
    "LogLevel",
    "set_log",
]
