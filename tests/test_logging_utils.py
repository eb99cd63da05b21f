import logging

import numpy as np
import pytest

from hypergeo.errors import InvalidTriangle
from hypergeo.logging_utils import _summarise, debug_log_call
from hypergeo.triangle import TriangleState, pythagorean


def test_module_functions_trace_calls_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="hypergeo.triangle.laws")

    pythagorean(1.0, 1.0, None)

    assert "Entering pythagorean(1, 1, None)" in caplog.text
    assert "Exiting pythagorean -> (1, 1, 1.51337)" in caplog.text


def test_exceptions_are_traced_and_reraised(caplog):
    caplog.set_level(logging.DEBUG, logger="hypergeo.triangle.laws")

    with pytest.raises(InvalidTriangle):
        pythagorean(2.0, None, 1.0)

    assert "Exception in pythagorean" in caplog.text


def test_decorator_is_idempotent():
    logger = logging.getLogger("hypergeo.tests")

    @debug_log_call(logger)
    def double(x):
        return 2 * x

    assert debug_log_call(logger)(double) is double
    assert double(3) == 6


def test_summarise_summarises_arrays():
    assert _summarise(np.arange(3.0)) == "ndarray(shape=(3,), dtype=float64), values=[0.0, 1.0, 2.0]"
    assert "min=0" in _summarise(np.arange(100.0))
    assert _summarise([0.5, 2.0]) == "[0.5, 2]"


def test_summarise_skips_unknown_triangle_slots():
    assert _summarise(TriangleState(A=0.5, b=1.0)) == "TriangleState(A=0.5, b=1)"
