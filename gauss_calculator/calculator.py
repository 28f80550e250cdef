import math
import time
from collections import namedtuple
from datetime import datetime

from gauss_calculator.expression import EvaluationError
from gauss_calculator.gauss_method import integrate, sample_curve
from gauss_calculator.normalizer import normalize

ERROR_MESSAGE = "Error: check the expression!"

Calculation = namedtuple(
    "Calculation",
    ["function", "a", "b", "n", "result", "display", "samples", "time_execution", "date"],
)


def format_result(value):
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.8f}"


def calculate_gauss_method(function, a, b, n, samples=False, point_count=101, normalize_input=True):
    start_time = time.time()
    expression = normalize(function) if normalize_input else function
    try:
        result = integrate(expression, a, b, n)
        curve = sample_curve(expression, a, b, point_count) if samples else None
        display = format_result(result)
    except EvaluationError:
        result, curve, display = None, None, ERROR_MESSAGE
    end_time = time.time()
    time_execution = end_time - start_time
    date = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    return Calculation(function, a, b, n, result, display, curve, time_execution, date)
