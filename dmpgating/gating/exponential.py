"""Class defining an exponential gating function."""
import math
from numbers import Real
from typing import Dict

import numpy

from dmpgating.gating.exceptions import InvalidParameterError
from dmpgating.gating.gating_function import ArrayLike, GatingFunction
from dmpgating.utils.options_dictionary import OptionsDictionary

DEFAULT_U0 = 1.0
DEFAULT_U_END = 0.005


def check_finite(name: str, value: Real) -> None:
    # ints beyond the float range raise OverflowError
    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = False
    if not finite:
        raise InvalidParameterError(f"{name}: boundary value must be finite")


def check_initial_value(name: str, value: Real) -> None:
    check_finite(name, value)
    if value == 0:
        raise InvalidParameterError(f"{name}: initial value must be non-zero")


class ExponentialGate(GatingFunction):
    """Exponential gating function, u(x) = u0 * exp(-a * x).

    The rate `a` is derived from the initial value `u0` and the value `u_end`
    reached at x = 1, such that a = -ln(u_end / u0). The magnitude of the
    function decays (a > 0) if `u_end` is closer to zero than `u0`, and grows
    (a < 0) otherwise.

    Parameters
    ----------
    u0 : float, optional
        Value of the gating function at x = 0; default 1.0.
    u_end : float, optional
        Value of the gating function at x = 1; default 0.005.

    Raises
    ------
    InvalidParameterError
        If `u0` is zero, if either value is not finite,
        or if `u0` and `u_end` do not share the same sign.
    """

    __slots__ = ("_u0", "_a")

    def __init__(self, u0: float = DEFAULT_U0, u_end: float = DEFAULT_U_END):
        self._u0 = None  # type: float
        self._a = None  # type: float
        super().__init__(u0=u0, u_end=u_end)

    def initialize(self, u0: float = DEFAULT_U0, u_end: float = DEFAULT_U_END) -> None:
        """Set the gating function parameters from its boundary values.

        Previous parameters are overwritten; on failure, they are left unchanged.

        Parameters
        ----------
        u0 : float, optional
            Value of the gating function at x = 0; default 1.0.
        u_end : float, optional
            Value of the gating function at x = 1; default 0.005.

        Raises
        ------
        InvalidParameterError
            If `u0` is zero, if either value is not finite,
            or if `u0` and `u_end` do not share the same sign.
        """
        super().initialize(u0=u0, u_end=u_end)

    def _declare_options(self, options: OptionsDictionary) -> None:
        options.declare(
            "u0", DEFAULT_U0, dtype=Real, exclude=bool, check_valid=check_initial_value,
            desc="Value of the gating function at x = 0",
        )
        options.declare(
            "u_end", DEFAULT_U_END, dtype=Real, exclude=bool, check_valid=check_finite,
            desc="Value of the gating function at x = 1",
        )

    def _compute_parameters(self, options: OptionsDictionary) -> Dict[str, float]:
        u0, u_end = options["u0"], options["u_end"]
        if not ((u0 > 0 and u_end > 0) or (u0 < 0 and u_end < 0)):
            raise InvalidParameterError(
                f"boundary values must share sign; got u0={u0!r} and u_end={u_end!r}"
            )
        # u_end / u0 may underflow or overflow
        return {"u0": u0, "a": math.log(abs(u0)) - math.log(abs(u_end))}

    def _set_parameters(self, u0: float, a: float) -> None:
        self._u0 = u0
        self._a = a

    @property
    def u0(self) -> float:
        """float : Value of the gating function at x = 0."""
        return self._u0

    @property
    def a(self) -> float:
        """float : Rate of evolution of the gating function.

        Positive if the magnitude of the function decays, negative if it grows.
        """
        return self._a

    rate = a

    @property
    def u_end(self) -> float:
        """float : Value of the gating function at x = 1, as given at initialization."""
        return self._options["u_end"]

    @property
    def decreasing(self) -> bool:
        """bool : True if the gating function decreases from `u0` to `u_end`."""
        return self._u0 > self.u_end

    @property
    def increasing(self) -> bool:
        """bool : True if the gating function increases from `u0` to `u_end`."""
        return self._u0 < self.u_end

    def value(self, x: ArrayLike) -> ArrayLike:
        """Gating function output u = u0 * exp(-a * x).

        Parameters
        ----------
        x : float or array-like
            Phase value(s); evaluated elementwise for sequences.
            No clamping is applied outside [0, 1].

        Returns
        -------
        float or numpy.ndarray
            Output value(s), with the same shape as `x`.
        """
        x = self._as_phase(x)
        return self._u0 * numpy.exp(-self._a * x)

    def derivative(self, x: ArrayLike) -> ArrayLike:
        """Derivative du/dx = -a * u0 * exp(-a * x).

        Parameters
        ----------
        x : float or array-like
            Phase value(s); evaluated elementwise for sequences.

        Returns
        -------
        float or numpy.ndarray
            Derivative value(s), with the same shape as `x`.
        """
        x = self._as_phase(x)
        return -self._a * self._u0 * numpy.exp(-self._a * x)
