from gauss_calculator.calculator import ERROR_MESSAGE, Calculation, calculate_gauss_method, format_result
from gauss_calculator.expression import EvaluationError, ExpressionEvaluationError, compile_expression
from gauss_calculator.gauss_method import GAUSS_POINTS, GaussLegendre, integrate, sample_curve
from gauss_calculator.normalizer import normalize

__all__ = [
    "ERROR_MESSAGE",
    "Calculation",
    "EvaluationError",
    "ExpressionEvaluationError",
    "GAUSS_POINTS",
    "GaussLegendre",
    "calculate_gauss_method",
    "compile_expression",
    "format_result",
    "integrate",
    "normalize",
    "sample_curve",
]
