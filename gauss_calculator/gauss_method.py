import numpy as np

from gauss_calculator.expression import compile_expression

GAUSS_POINTS = {
    2: {
        "x": (-1 / np.sqrt(3), 1 / np.sqrt(3)),
        "w": (1.0, 1.0),
    },
    3: {
        "x": (0.0, -np.sqrt(3 / 5), np.sqrt(3 / 5)),
        "w": (8 / 9, 5 / 9, 5 / 9),
    },
}


class GaussLegendre:
    def __init__(self, a, b, n=2):
        self._rule = GAUSS_POINTS[n]
        self._a = a
        self._b = b
        self._mid = (a + b) / 2
        self._half = (b - a) / 2

    def calculate_points(self):
        return self._mid + self._half * np.asarray(self._rule["x"])

    def calculate(self, f):
        points = self.calculate_points()
        integral = 0.0
        for weight, point in zip(self._rule["w"], points):
            integral += weight * f(point)
        return float(self._half * integral)

    def sample(self, f, point_count=101):
        if point_count < 2:
            raise ValueError(f"point_count must be at least 2, got {point_count}")
        step = (self._b - self._a) / (point_count - 1)
        samples = []
        x = self._a
        # accumulated, so the last x may drift slightly from b
        for _ in range(point_count):
            samples.append((float(x), f(x)))
            x += step
        return samples


def integrate(expression, a, b, n):
    """
    Integral of `expression` over [a, b] with the n-point rule.

    Raises EvaluationError when the expression cannot be compiled or
    evaluated, KeyError when n has no rule.
    """
    method = GaussLegendre(a, b, n)
    f = compile_expression(expression)
    return method.calculate(f)


def sample_curve(expression, a, b, point_count=101):
    f = compile_expression(expression)
    return GaussLegendre(a, b).sample(f, point_count)
