"""Basic class to define a gating function of the phase variable."""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Union

import numpy

from dmpgating.utils.helpers import is_number
from dmpgating.utils.logging import LogLevel
from dmpgating.utils.options_dictionary import HasOptions, OptionsDictionary

logger = logging.getLogger(__name__)

ArrayLike = Union[float, numpy.ndarray]


class GatingFunction(HasOptions, ABC):
    """Abstract class to define a gating function u(x) of the phase x.

    The function is parameterized by boundary values, declared as options by
    derived classes. Options are validated on assignment; internal parameters
    are then derived from them and cached until the next call to `initialize`.

    Parameters
    ----------
    **kwargs
        Boundary values of the gating function, forwarded to `initialize`.
    """

    __slots__ = ("__weakref__", "_options")

    def __init__(self, **kwargs):
        self._options = OptionsDictionary(read_only=True)
        self.initialize(**kwargs)

    def __json__(self) -> Dict[str, Any]:
        """Creates a JSONable dictionary representation of the object.

        Returns
        -------
        Dict[str, Any]
            The dictionary of boundary values
        """
        return self._options.__json__()

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in self.__json__().items())
        return f"{type(self).__qualname__}({args})"

    def __call__(self, x: ArrayLike) -> ArrayLike:
        return self.value(x)

    @property
    def options(self) -> OptionsDictionary:
        """OptionsDictionary: Boundary values used at last initialization (read-only)."""
        return self._options

    def initialize(self, **kwargs) -> None:
        """Set boundary values and derive the gating function parameters.

        The update is atomic: if any value is invalid, the current options
        and parameters are left unchanged.

        Parameters
        ----------
        **kwargs
            Boundary values, as declared by `_declare_options`.

        Raises
        ------
        TypeError
            If an unknown boundary value is given, or if a value has an invalid type.
        InvalidParameterError
            If boundary values are inconsistent.
        """
        options = self._init_options(kwargs)
        if kwargs:
            raise TypeError(
                f"{type(self).__qualname__} got unexpected option(s) {sorted(kwargs)}"
            )
        parameters = self._compute_parameters(options)
        options.lock()

        self._options = options
        self._set_parameters(**parameters)
        logger.debug(f"Initialized {self!r} with parameters {parameters}")

    @abstractmethod
    def _declare_options(self, options: OptionsDictionary) -> None:
        """Declare the boundary values of the gating function."""
        pass

    @abstractmethod
    def _compute_parameters(self, options: OptionsDictionary) -> Dict[str, float]:
        """Compute internal parameters from validated boundary values.

        Parameters
        ----------
        options : OptionsDictionary
            Boundary values

        Returns
        -------
        Dict[str, float]
            Internal parameters, passed as keyword arguments to `_set_parameters`

        Raises
        ------
        InvalidParameterError
            If boundary values are inconsistent.
        """
        pass

    @abstractmethod
    def _set_parameters(self, **parameters) -> None:
        """Store internal parameters. Must not raise."""
        pass

    @staticmethod
    def _as_phase(x: Any) -> ArrayLike:
        """Convert phase `x` into a float or a float array, logging it in verbose mode."""
        if is_number(x):
            x = float(x)
            logger.log(LogLevel.FULL_DEBUG, f"Evaluate at phase {x}", extra={"phase": x})
            return x
        x = numpy.asarray(x, dtype=float)
        logger.log(LogLevel.FULL_DEBUG, f"Evaluate at {x.size} phase values {x.shape}")
        return x

    @abstractmethod
    def value(self, x: ArrayLike) -> ArrayLike:
        """Gating function output at phase `x`.

        Parameters
        ----------
        x : float or array-like
            Phase value(s); evaluated elementwise for sequences.

        Returns
        -------
        float or numpy.ndarray
            Output value(s), with the same shape as `x`.
        """
        pass

    @abstractmethod
    def derivative(self, x: ArrayLike) -> ArrayLike:
        """Derivative of the gating function output with respect to phase `x`.

        Parameters
        ----------
        x : float or array-like
            Phase value(s); evaluated elementwise for sequences.

        Returns
        -------
        float or numpy.ndarray
            Derivative value(s), with the same shape as `x`.
        """
        pass
