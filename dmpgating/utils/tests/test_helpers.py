import pytest

import numpy as np

from dmpgating.utils.helpers import is_number, check_arg, get_typename
from dmpgating.utils.testing import no_exception


@pytest.mark.parametrize("value, expected", [
    (True, False),
    (1, True),
    (1.e-5, True),
    (-0.0, True),
    (float("nan"), True),
    (np.float32(0.5), True),
    (1j, True),
    (np.asarray(True), False),
    (np.asarray(1), True),
    (np.asarray(1.e-5), True),
    (np.asarray('str'), False),
    ('string', False),
    ('', False),
    (None, False),
    ([1, 2, 3], False),
    ((1, 2, 3), False),
    ({1, 2, 3}, False),
    (np.ones(4), False),
    (np.ones((1, 1)), False),
    (np.asarray([], dtype=float), False),
])
def test_is_number(value, expected):
    assert is_number(value) == expected


@pytest.mark.parametrize("dtype, expected", [
    (float, "float"),
    (np.ndarray, "ndarray"),
    ((int, float), "(float, int)"),
    ((str, type(None)), "(NoneType, str)"),
])
def test_get_typename(dtype, expected):
    assert get_typename(dtype) == expected


@pytest.mark.parametrize("args, expected", [
    ((0.005, 'u_end', float), None),
    ((0.005, 'u_end', (int, float)), None),
    ((0.005, 'u_end', (int, str)), TypeError),
    ((0.005, 'u_end', float, lambda x: x > 0), None),
    ((-0.5, 'u_end', float, lambda x: x > 0), ValueError),
    (('0.5', 'u_end', float, lambda x: x > 0), TypeError),
    ((3, 'backupCount', int, lambda n: n >= 0), None),
    ((-3, 'backupCount', int, lambda n: n >= 0), ValueError),
])
def test_check_arg(args, expected):
    if expected is None:
        with no_exception():
            check_arg(*args)
    else:
        with pytest.raises(expected):
            check_arg(*args)


def test_check_arg_message():
    with pytest.raises(TypeError, match=r"argument 'u0' should be one of \(float, int\); got str '1'"):
        check_arg('1', 'u0', (int, float))

    with pytest.raises(ValueError, match=r"argument 'u0' was given invalid value 0"):
        check_arg(0, 'u0', int, lambda x: x != 0)
