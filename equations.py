# equations.py
"""
Procedural linear equations for the adventure map.

The root is always drawn first; coefficients follow, and the displayed
right-hand constant is derived from the root so every equation is exactly
solvable. All randomness comes from the engine's own ``random.Random``.
"""

from __future__ import annotations

import logging
import random
import string
from typing import Any, Callable, Dict, List, Optional

from schemas.equations import Equation

logger = logging.getLogger("adventure-lab")

# Answers closer than this to the stored root are accepted (typed decimals).
EPSILON = 1e-3

DIFFICULTY_TIERS = (1, 2, 3, 4, 5)
_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LEN = 9
_DEFAULT_STEP = "Solve for x by isolating the variable."


def _term(coefficient: int) -> str:
    return "x" if coefficient == 1 else f"{coefficient}x"


def _signed(value: int) -> str:
    # "+ 4" / "- 4" so a negative constant never renders as "+ -4"
    return f"+ {value}" if value >= 0 else f"- {-value}"


def _coerce_tier(difficulty: Any) -> int:
    if (
        isinstance(difficulty, int)
        and not isinstance(difficulty, bool)
        and difficulty in DIFFICULTY_TIERS
    ):
        return difficulty
    logger.debug("difficulty %r outside 1-5; using tier 1", difficulty)
    return 1


def validate_answer(equation: Equation, candidate: float) -> bool:
    """Return True when ``candidate`` is within EPSILON of the equation's root."""
    return abs(equation.answer - candidate) < EPSILON


def get_solution(equation: Equation) -> List[str]:
    return [equation.hint or _DEFAULT_STEP]


class EquationEngine:
    """
    Generates equations for difficulty tiers 1-5.

    Pass ``rng`` to share a random source, or ``seed`` for a reproducible
    private one. With neither, the engine seeds itself from the OS.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self._rng = rng if rng is not None else random.Random(seed)
        self._builders: Dict[int, Callable[[str], Equation]] = {
            1: self._additive,
            2: self._multiplicative,
            3: self._two_step,
            4: self._both_sides,
            5: self._distributive,
        }

    # --- Public API ------------------------------------------------------------

    def generate(self, difficulty: Any) -> Equation:
        tier = _coerce_tier(difficulty)
        return self._builders[tier](self._new_id())

    validate = staticmethod(validate_answer)
    solution = staticmethod(get_solution)

    # --- Helpers ---------------------------------------------------------------

    def _new_id(self) -> str:
        return "".join(self._rng.choice(_ID_ALPHABET) for _ in range(_ID_LEN))

    def _flip(self) -> bool:
        return self._rng.random() > 0.5

    # --- Tiers -----------------------------------------------------------------

    def _additive(self, eq_id: str) -> Equation:
        # x + a = r  |  x - a = r
        answer = self._rng.randint(1, 20)
        addend = self._rng.randint(1, 15)
        if self._flip():
            expression = f"x + {addend} = {answer + addend}"
            hint = f"To solve {expression}, subtract {addend} from both sides."
        else:
            expression = f"x - {addend} = {answer - addend}"
            hint = f"To solve {expression}, add {addend} to both sides."
        return Equation(id=eq_id, expression=expression, answer=answer, difficulty=1, hint=hint)

    def _multiplicative(self, eq_id: str) -> Equation:
        # cx = r  |  x ÷ c = q
        answer = self._rng.randint(1, 10)
        coefficient = self._rng.randint(2, 9)
        if self._flip():
            expression = f"{coefficient}x = {answer * coefficient}"
            hint = f"To solve {expression}, divide both sides by {coefficient}."
        else:
            # Integer quotient keeps the division exact; the root is re-derived
            # from it and may differ from the sampled seed (it can be 0).
            quotient = answer // coefficient
            answer = quotient * coefficient
            expression = f"x ÷ {coefficient} = {quotient}"
            hint = f"To solve {expression}, multiply both sides by {coefficient}."
        return Equation(id=eq_id, expression=expression, answer=answer, difficulty=2, hint=hint)

    def _two_step(self, eq_id: str) -> Equation:
        # cx + k = r  |  cx - k = r
        answer = self._rng.randint(1, 15)
        coefficient = self._rng.randint(2, 6)
        constant = self._rng.randint(1, 20)
        if self._flip():
            expression = f"{coefficient}x + {constant} = {coefficient * answer + constant}"
            hint = f"First subtract {constant} from both sides, then divide by {coefficient}."
        else:
            expression = f"{coefficient}x - {constant} = {coefficient * answer - constant}"
            hint = f"First add {constant} to both sides, then divide by {coefficient}."
        return Equation(id=eq_id, expression=expression, answer=answer, difficulty=3, hint=hint)

    def _both_sides(self, eq_id: str) -> Equation:
        # px + q = sx + t
        answer = self._rng.randint(1, 12)
        left_coeff = self._rng.randint(2, 5)
        left_const = self._rng.randint(1, 15)
        right_coeff = self._rng.randint(1, 3)
        while right_coeff == left_coeff:
            # equal x terms would make an identity
            right_coeff = self._rng.randint(1, 3)
        right_const = left_coeff * answer + left_const - right_coeff * answer
        expression = (
            f"{_term(left_coeff)} + {left_const} = {_term(right_coeff)} {_signed(right_const)}"
        )
        return Equation(
            id=eq_id,
            expression=expression,
            answer=answer,
            difficulty=4,
            hint="Move all x terms to one side and constants to the other side.",
        )

    def _distributive(self, eq_id: str) -> Equation:
        # m(x + k) = sx - t
        answer = self._rng.randint(1, 8)
        outer_coeff = self._rng.randint(2, 4)
        inner_const = self._rng.randint(1, 5)
        right_coeff = self._rng.randint(2, 6)
        while right_coeff == outer_coeff:
            right_coeff = self._rng.randint(2, 6)
        # sx - t must equal m(x + k) at x = answer
        right_const = right_coeff * answer - outer_coeff * (answer + inner_const)
        expression = (
            f"{outer_coeff}(x + {inner_const}) = {_term(right_coeff)} {_signed(-right_const)}"
        )
        return Equation(
            id=eq_id,
            expression=expression,
            answer=answer,
            difficulty=5,
            hint="First distribute, then solve like a regular equation.",
        )
