"""Gating functions of the phase variable, used to modulate motion primitives."""
from .exceptions import InvalidParameterError
from .gating_function import GatingFunction
from .exponential import ExponentialGate

__all__ = [
    "ExponentialGate",
    "GatingFunction",
    "InvalidParameterError",
]
