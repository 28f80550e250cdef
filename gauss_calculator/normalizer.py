import re

# word-like base, caret, integer exponent: "x ^ 2" -> "x**2"
_POWER = re.compile(r"([A-Za-z0-9_]+)\s*\^\s*(\d+)")
# digit touching a letter: "2x" -> "2*x"
_IMPLICIT_MUL = re.compile(r"(\d)([A-Za-z])")


def normalize(raw):
    """
    Rewrite a hand-written formula into plain arithmetic.

    Only single-word bases are rewritten, so "(x+1)^3" keeps its caret.
    """
    expression = _POWER.sub(r"\1**\2", raw)
    return _IMPLICIT_MUL.sub(r"\1*\2", expression)
