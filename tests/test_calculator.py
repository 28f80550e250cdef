import math

import pytest

from gauss_calculator.calculator import ERROR_MESSAGE, calculate_gauss_method, format_result


def test_format_result():
    assert format_result(1.0) == "1.00000000"
    assert format_result(-0.123456789) == "-0.12345679"
    assert format_result(1e20) == "100000000000000000000.00000000"


def test_format_non_finite():
    assert format_result(math.inf) == "Infinity"
    assert format_result(-math.inf) == "-Infinity"
    assert format_result(math.nan) == "NaN"


def test_calculation_with_normalization():
    calculation = calculate_gauss_method("x^2 + 2x + 1", 0, 1, 2)
    assert calculation.display == "2.33333333"
    assert calculation.samples is None
    assert calculation.time_execution >= 0
    assert calculation.date


def test_calculation_raw_input_keeps_caret():
    calculation = calculate_gauss_method("x^2", 0, 1, 2, normalize_input=False)
    assert calculation.result is None
    assert calculation.display == ERROR_MESSAGE


def test_calculation_with_samples():
    calculation = calculate_gauss_method("2x", 0, 1, 3, samples=True, point_count=11)
    assert calculation.display == "1.00000000"
    assert len(calculation.samples) == 11
    assert calculation.samples[0] == (0.0, 0.0)


def test_invalid_expression_clears_samples():
    calculation = calculate_gauss_method("x +* 1", 0, 1, 2, samples=True)
    assert calculation.result is None
    assert calculation.samples is None
    assert calculation.display == ERROR_MESSAGE


def test_infinite_result_is_displayed():
    calculation = calculate_gauss_method("1/x", -1, 1, 3)
    assert calculation.display == "Infinity"


@pytest.mark.parametrize("function, display", [
    ("1/0", "Infinity"),
    ("log(0)", "-Infinity"),
    ("sqrt(-1)", "NaN"),
])
def test_numeric_pathologies_are_displayed(function, display):
    calculation = calculate_gauss_method(function, 0, 1, 2, samples=True, point_count=3)
    assert calculation.display == display
    assert len(calculation.samples) == 3
