# answers.py
"""
Caller-side parsing of typed answers, plus sympy checks on equation text.

``EquationEngine.validate`` expects a number; everything a player types goes
through ``parse_answer`` first and non-numeric text is rejected here.
"""

from __future__ import annotations

import math
import re
from typing import Any, List, Optional

from sympy import Eq, Symbol, nan, nsimplify, oo, solve, zoo
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

# --- Parsing / validation helpers ------------------------------------------------
LEN_LIMIT = 100
_INVALID_CHARS_MSG = (
    "Only numeric answers using digits, spaces, + - * / ^ . and parentheses are allowed."
)
_NON_FINITE_MSG = "Answer is not finite (e.g., division by zero)."
_TOO_COMPLEX_MSG = "Answer is too complex."
_ALLOWED_RE = re.compile(r"^[0-9+\-*/^().\s]{1,100}$")
# Equation display text: digits, x, + - / ÷, parentheses and a single "=".
# No "*" or "^", so powers cannot be written.
_EQUATION_RE = re.compile(r"^[0-9x+\-/÷().\s]+=[0-9x+\-/÷().\s]+$")

TRANSFORMS = standard_transformations + (
    convert_xor,
    implicit_multiplication_application,
)

_MAX_OPS = 50
X = Symbol("x")


def validate_answer_text(s: Any) -> Optional[str]:
    if s is None or not isinstance(s, str) or not s.strip():
        return "Answer required."
    if len(s) > LEN_LIMIT:
        return "Answer too long (> 100)."
    if _ALLOWED_RE.fullmatch(s) is None:
        return _INVALID_CHARS_MSG
    return None


def _assert_finite_sym(val: Any) -> None:
    if getattr(val, "is_finite", None) is False or val in (oo, -oo, zoo, nan):
        raise ValueError(_NON_FINITE_MSG)


def parse_answer(s: str) -> float:
    """
    Turn answer text like ``"7"``, ``"-3.5"`` or ``"12/4"`` into a float.

    Raises ValueError with a player-facing message when the text is rejected.
    """
    msg = validate_answer_text(s)
    if msg:
        raise ValueError(msg)

    # Plain numbers skip sympy entirely
    try:
        val = float(s.strip())
    except ValueError:
        pass
    else:
        if not math.isfinite(val):
            raise ValueError(_NON_FINITE_MSG)
        return val

    try:
        sym = parse_expr(s, transformations=TRANSFORMS, evaluate=True)
    except Exception:
        raise ValueError(_INVALID_CHARS_MSG)
    if hasattr(sym, "count_ops") and sym.count_ops() > _MAX_OPS:
        raise ValueError(_TOO_COMPLEX_MSG)
    _assert_finite_sym(sym)
    try:
        val = float(sym.evalf())
    except (TypeError, ValueError):
        raise ValueError(_INVALID_CHARS_MSG)
    if not math.isfinite(val):
        raise ValueError(_NON_FINITE_MSG)
    return val


# --- Equation text ------------------------------------------------------------------


def parse_equation(expression: str) -> Eq:
    """Parse display text such as ``"2(x + 3) = 4x - 2"`` or ``"x ÷ 4 = 2"``."""
    if len(expression) > LEN_LIMIT or _EQUATION_RE.fullmatch(expression) is None:
        raise ValueError(f"not an equation: {expression!r}")
    lhs, _, rhs = expression.replace("÷", "/").partition("=")
    local = {"x": X}
    return Eq(
        parse_expr(lhs, local_dict=local, transformations=TRANSFORMS),
        parse_expr(rhs, local_dict=local, transformations=TRANSFORMS),
        evaluate=False,
    )


def residual(expression: str, value: float) -> Any:
    """lhs - rhs at x = value; exactly 0 for an exact integer root."""
    eq = parse_equation(expression)
    return (eq.lhs - eq.rhs).subs(X, nsimplify(value))


def solve_for_x(expression: str) -> List[Any]:
    eq = parse_equation(expression)
    return solve(eq.lhs - eq.rhs, X)


def answer_satisfies(expression: str, answer: float) -> bool:
    try:
        return residual(expression, answer) == 0
    except Exception:
        return False
