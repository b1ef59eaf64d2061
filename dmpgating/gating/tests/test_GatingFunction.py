import numpy as np
import pytest

from dmpgating.gating import GatingFunction, InvalidParameterError
from dmpgating.utils.options_dictionary import OptionsDictionary


class ConstantGate(GatingFunction):
    """Bogus gating function u = level, used to test the base class"""

    __slots__ = ("level",)

    def _declare_options(self, options: OptionsDictionary) -> None:
        options.declare("level", 1.0, dtype=float)

    def _compute_parameters(self, options):
        level = options["level"]
        if level <= 0:
            raise InvalidParameterError("level must be positive")
        return {"level": level}

    def _set_parameters(self, level):
        self.level = level

    def value(self, x):
        x = self._as_phase(x)
        return self.level * np.ones_like(x)

    def derivative(self, x):
        x = self._as_phase(x)
        return np.zeros_like(x)


def test_GatingFunction_abstract():
    with pytest.raises(TypeError):
        GatingFunction()


def test_GatingFunction___init__():
    gate = ConstantGate()
    assert gate.level == 1.0
    assert gate.options["level"] == 1.0

    gate = ConstantGate(level=3.0)
    assert gate.level == 3.0

    with pytest.raises(TypeError, match="unexpected option"):
        ConstantGate(foo=1.0)

    with pytest.raises(InvalidParameterError):
        ConstantGate(level=-2.0)


def test_GatingFunction_initialize():
    gate = ConstantGate(level=2.0)
    options = gate.options

    gate.initialize(level=4.0)
    assert gate.options is not options
    assert gate.options.read_only
    assert gate.level == 4.0

    with pytest.raises(InvalidParameterError):
        gate.initialize(level=0.0)
    assert gate.level == 4.0
    assert gate.__json__() == {"level": 4.0}

    # Omitted options fall back to their default
    gate.initialize()
    assert gate.level == 1.0


def test_GatingFunction___call__():
    gate = ConstantGate(level=2.5)
    assert gate(0.5) == 2.5
    assert np.array_equal(gate([0, 0.5, 1]), [2.5, 2.5, 2.5])
    assert np.array_equal(gate.derivative([0, 1]), [0.0, 0.0])


def test_GatingFunction___repr__():
    gate = ConstantGate(level=3.0)
    assert repr(gate) == "ConstantGate(level=3.0)"


@pytest.mark.parametrize("x", [
    1,
    1.0,
    np.int64(1),
    np.float32(1.0),
    np.asarray(1),
])
def test_GatingFunction__as_phase_scalar(x):
    phase = GatingFunction._as_phase(x)
    assert type(phase) is float
    assert phase == 1.0


def test_GatingFunction__as_phase_array():
    phase = GatingFunction._as_phase([0, 1])
    assert isinstance(phase, np.ndarray)
    assert phase.dtype == float
    assert np.array_equal(phase, [0.0, 1.0])

    with pytest.raises(TypeError):
        GatingFunction._as_phase(1j)
