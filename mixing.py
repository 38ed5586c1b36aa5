# mixing.py
"""
Chemistry lab mixing evaluation.

A mixture of two chemicals is scored against the reactant ratio of a target
reaction. Within TOLERANCE the reaction succeeds and yields the reaction's
products; outside it the player gets an incomplete mixture whose color is a
volume-weighted blend of the inputs.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from schemas.chemistry import Chemical, MixingResult, OptimalVolumes, Reactant, Reaction

# --- Scoring policy ---------------------------------------------------------------
# Relative deviation from the expected ratio still counted as a success (inclusive).
TOLERANCE = 0.2

MIN_SUCCESS_SCORE = 50
MAX_SCORE = 100

# Failure path: BASE - floor(|actual - expected| * PENALTY), never below MIN_PARTIAL.
# NOTE: this deviation is not divided by the expected ratio, unlike the success path.
PARTIAL_BASE_SCORE = 50
PARTIAL_PENALTY = 10
MIN_PARTIAL_SCORE = 20

_NO_REACTION_MSG = "These chemicals don't react according to the target reaction!"


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _rgb(color: str) -> tuple[int, int, int]:
    h = color.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fixed1(x: float) -> str:
    # Half-up on the exact binary value (matches what the web client displays)
    return str(Decimal(x).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def blend_colors(color_a: str, color_b: str, weight: float) -> str:
    """
    Linear per-channel blend; ``weight`` is the share of ``color_a``.

    >>> blend_colors("#ff0000", "#0000ff", 0.5)
    '#800080'
    """
    w = min(1.0, max(0.0, weight))
    a = _rgb(color_a)
    b = _rgb(color_b)
    channels = (_round_half_up(ca * w + cb * (1 - w)) for ca, cb in zip(a, b))
    return "#" + "".join(f"{c:02x}" for c in channels)


def calculate_optimal_volumes(reaction: Reaction, total_volume: float = 100) -> OptimalVolumes:
    ratio_a, ratio_b = reaction.correct_ratio
    volume_a = ratio_a * total_volume / (ratio_a + ratio_b)
    return OptimalVolumes(volume_a=volume_a, volume_b=total_volume - volume_a)


def optimal_volume_hint(reaction: Reaction, total_volume: float = 100) -> str:
    v = calculate_optimal_volumes(reaction, total_volume)
    return f"Try approximately {v.volume_a:.0f}mL : {v.volume_b:.0f}mL ratio"


def _find_reactant(reaction: Reaction, formula: str) -> Optional[Reactant]:
    return next((r for r in reaction.reactants if r.formula == formula), None)


def evaluate_mixture(
    chemical_a: Chemical,
    volume_a: float,
    chemical_b: Chemical,
    volume_b: float,
    reaction: Reaction,
) -> MixingResult:
    reactant_a = _find_reactant(reaction, chemical_a.formula)
    reactant_b = _find_reactant(reaction, chemical_b.formula)
    if reactant_a is None or reactant_b is None:
        return MixingResult(
            success=False,
            result_chemical=None,
            feedback=_NO_REACTION_MSG,
            score_earned=0,
            is_optimal_ratio=False,
        )

    actual_ratio = volume_a / volume_b if volume_b else math.inf
    expected_ratio = reactant_a.ratio / reactant_b.ratio
    delta = abs(actual_ratio - expected_ratio)
    deviation = delta / expected_ratio
    total_volume = volume_a + volume_b

    if deviation <= TOLERANCE:
        products = " + ".join(p.formula for p in reaction.products)
        product = Chemical(
            id="result",
            name=products,
            formula=products,
            color=reaction.result_color,
            concentration=1.0,
            volume=total_volume,
            description=f"Product of {reaction.name}",
        )
        score = max(math.floor(MAX_SCORE * (1 - deviation)), MIN_SUCCESS_SCORE)
        return MixingResult(
            success=True,
            result_chemical=product,
            feedback=f"Perfect! You successfully performed {reaction.name}!",
            score_earned=min(score, MAX_SCORE),
            is_optimal_ratio=True,
        )

    weight = volume_a / total_volume if total_volume else 0.5
    mixture = Chemical(
        id="mixture",
        name="Incomplete Mixture",
        formula=f"{chemical_a.formula} + {chemical_b.formula}",
        color=blend_colors(chemical_a.color, chemical_b.color, weight),
        concentration=0.5,
        volume=total_volume,
        description="The reaction was incomplete due to incorrect ratio",
    )
    raw_penalty = delta * PARTIAL_PENALTY
    penalty = math.floor(raw_penalty) if math.isfinite(raw_penalty) else PARTIAL_BASE_SCORE
    return MixingResult(
        success=False,
        result_chemical=mixture,
        feedback=(
            "Close, but the ratio isn't quite right. "
            f"Try {_fixed1(expected_ratio)}:1 ratio."
        ),
        score_earned=max(MIN_PARTIAL_SCORE, PARTIAL_BASE_SCORE - penalty),
        is_optimal_ratio=False,
    )

