import re
from tokenize import NAME, NUMBER

import numpy as np
import sympy as sp
from sympy import Float, Function, Integer, Rational, Symbol, lambdify
from sympy.core.function import AppliedUndef
from sympy.parsing.sympy_parser import parse_expr, standard_transformations


class EvaluationError(ValueError):
    """The expression could not be parsed or evaluated."""


ExpressionEvaluationError = EvaluationError

VARIABLE = "x"

CONSTANTS = {"pi": np.pi, "e": np.e, "E": np.e}

SAFE_LOCALS = {
    "sin": sp.sin, "cos": sp.cos, "tan": sp.tan,
    "asin": sp.asin, "acos": sp.acos, "atan": sp.atan,
    "sinh": sp.sinh, "cosh": sp.cosh, "tanh": sp.tanh,
    "sqrt": sp.sqrt, "exp": sp.exp, "log": sp.log, "ln": sp.log,
    "abs": sp.Abs,
}

# names the parser transformations emit; nothing else is reachable
SAFE_GLOBALS = {
    "__builtins__": {},
    "Integer": Integer, "Float": Float, "Rational": Rational,
    "Symbol": Symbol, "Function": Function,
}

_ALLOWED = re.compile(r"^[A-Za-z0-9_.+\-*/()^,\s]*$")


class Leaves:
    """
    Parser transformation that gives every number, every `x` and every
    constant its own symbol.

    With no two leaves alike SymPy has nothing to fold while parsing, so
    "1/0", "x/x" or "log(0)" reach numpy untouched and come out as
    inf/nan at evaluation time.
    """

    def __init__(self):
        self.symbols = []
        # None marks the variable, filled in at each call
        self.values = []

    def add(self, value, local_dict):
        # "__" can not come from user input
        name = f"__leaf{len(self.symbols)}"
        symbol = Symbol(name)
        local_dict[name] = symbol
        self.symbols.append(symbol)
        self.values.append(value)
        return NAME, name

    def __call__(self, tokens, local_dict, global_dict):
        result = []
        for toknum, tokval in tokens:
            if toknum == NUMBER:
                result.append(self.add(np.float64(tokval), local_dict))
            elif toknum == NAME and tokval == VARIABLE:
                result.append(self.add(None, local_dict))
            elif toknum == NAME and tokval in CONSTANTS:
                result.append(self.add(np.float64(CONSTANTS[tokval]), local_dict))
            else:
                result.append((toknum, tokval))
        return result

    def arguments(self, point):
        x = np.float64(point)
        return [x if value is None else value for value in self.values]


def parse_expression(text):
    """Returns the SymPy expression and the leaves its symbols stand for."""
    if not _ALLOWED.match(text) or "__" in text:
        raise EvaluationError(f"Invalid characters in expression: {text!r}")
    if "^" in text:
        raise EvaluationError("Use ** for powers, '^' is not supported here")
    leaves = Leaves()
    try:
        expr = parse_expr(text, local_dict=dict(SAFE_LOCALS), global_dict=dict(SAFE_GLOBALS),
                          transformations=(leaves,) + standard_transformations)
    except Exception as e:
        raise EvaluationError(f"Invalid expression {text!r}: {e}") from e

    if not isinstance(expr, sp.Expr):
        raise EvaluationError(f"Not an arithmetic expression: {text!r}")
    unknown = expr.free_symbols - set(leaves.symbols)
    if unknown:
        names = ", ".join(sorted(str(s) for s in unknown))
        raise EvaluationError(f"Unknown identifiers: {names}")
    undefined = expr.atoms(AppliedUndef)
    if undefined:
        names = ", ".join(sorted(str(f.func) for f in undefined))
        raise EvaluationError(f"Unknown functions: {names}")
    return expr, leaves


def compile_expression(text):
    """
    Build f(x) from an expression string.

    The returned function works on a single point. Division by zero and
    domain errors come back as inf/nan, anything that raises is an
    EvaluationError.
    """
    expr, leaves = parse_expression(text)
    try:
        y = lambdify(leaves.symbols, expr, "numpy")
    except Exception as e:
        raise EvaluationError(f"Cannot compile {text!r}: {e}") from e

    def f(point):
        try:
            with np.errstate(all="ignore"):
                value = y(*leaves.arguments(point))
            if np.iscomplexobj(value):
                value = np.real(value) if np.imag(value) == 0 else np.nan
            return float(value)
        except Exception as e:
            raise EvaluationError(f"Cannot evaluate {text!r} at x={point}: {e}") from e

    return f
