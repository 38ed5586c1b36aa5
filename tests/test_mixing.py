import pytest

from bank import get_chemical, get_reaction
from mixing import (
    TOLERANCE,
    blend_colors,
    calculate_optimal_volumes,
    evaluate_mixture,
    optimal_volume_hint,
)
from schemas.chemistry import Reaction


@pytest.fixture
def neutralization():
    # H₂SO₄ : NaOH = 1 : 2, so NaOH-over-H₂SO₄ should be 2
    return get_reaction("acidBase1")


@pytest.fixture
def naoh():
    return get_chemical("NaOH")


@pytest.fixture
def h2so4():
    return get_chemical("H2SO4")


def test_exact_ratio_scores_full(neutralization, naoh, h2so4):
    r = evaluate_mixture(naoh, 100, h2so4, 50, neutralization)
    assert r.success and r.is_optimal_ratio
    assert r.score_earned == 100
    assert r.feedback == "Perfect! You successfully performed Acid-Base Neutralization!"
    product = r.result_chemical
    assert product.id == "result"
    assert product.formula == "Na₂SO₄ + H₂O"
    assert product.name == product.formula
    assert product.color == neutralization.result_color
    assert product.volume == 150
    assert product.concentration == 1.0


def test_tolerance_boundary_is_inclusive(neutralization, naoh, h2so4):
    # 2.4 vs 2 -> 20% off, still a success
    r = evaluate_mixture(naoh, 120, h2so4, 50, neutralization)
    assert TOLERANCE == 0.2
    assert r.success
    assert r.score_earned == 80


def test_outside_tolerance_fails_with_partial_score(neutralization, naoh, h2so4):
    r = evaluate_mixture(naoh, 130, h2so4, 50, neutralization)
    assert not r.success and not r.is_optimal_ratio
    # max(20, 50 - floor(|2.6 - 2| * 10))
    assert r.score_earned == 44
    assert r.feedback == "Close, but the ratio isn't quite right. Try 2.0:1 ratio."
    mixture = r.result_chemical
    assert mixture.id == "mixture"
    assert mixture.name == "Incomplete Mixture"
    assert mixture.formula == "NaOH + H₂SO₄"
    assert mixture.concentration == 0.5
    assert mixture.volume == 180
    assert mixture.color == blend_colors(naoh.color, h2so4.color, 130 / 180)


def test_failure_score_floor(neutralization, naoh, h2so4):
    r = evaluate_mixture(naoh, 900, h2so4, 10, neutralization)
    assert not r.success
    assert r.score_earned == 20


def test_huge_volume_scores_floor_without_overflow(neutralization, naoh, h2so4):
    r = evaluate_mixture(naoh, 1e308, h2so4, 1, neutralization)
    assert not r.success
    assert r.score_earned == 20


def test_reversed_order_uses_inverse_ratio(neutralization, naoh, h2so4):
    r = evaluate_mixture(h2so4, 50, naoh, 100, neutralization)
    assert r.success and r.score_earned == 100

    r = evaluate_mixture(h2so4, 100, naoh, 100, neutralization)
    assert not r.success
    assert "Try 0.5:1 ratio." in r.feedback


@pytest.mark.parametrize("volumes", [(50, 50), (100, 50), (1, 999), (0, 10)])
def test_unknown_reactant_never_reacts(neutralization, h2so4, volumes):
    hcl = get_chemical("HCl")
    r = evaluate_mixture(hcl, volumes[0], h2so4, volumes[1], neutralization)
    assert r.success is False
    assert r.score_earned == 0
    assert r.result_chemical is None
    assert r.feedback == "These chemicals don't react according to the target reaction!"


def test_zero_second_volume_is_a_failed_mix(neutralization, naoh, h2so4):
    r = evaluate_mixture(naoh, 100, h2so4, 0, neutralization)
    assert not r.success
    assert r.score_earned == 20
    assert r.result_chemical.color == naoh.color.lower()


def test_optimal_volumes(neutralization):
    v = calculate_optimal_volumes(neutralization, 90)
    assert (v.volume_a, v.volume_b) == (30, 60)

    v = calculate_optimal_volumes(neutralization)
    assert v.volume_a + v.volume_b == pytest.approx(100)
    assert optimal_volume_hint(neutralization) == "Try approximately 33mL : 67mL ratio"


def test_optimal_volumes_equal_ratio():
    reaction = Reaction(
        id="r",
        name="Equal",
        reactants=[{"formula": "A", "ratio": 1}, {"formula": "B", "ratio": 1}],
        products=[{"formula": "C", "ratio": 1}],
        correct_ratio=(1, 1),
        result_color="#000000",
    )
    v = calculate_optimal_volumes(reaction, 50)
    assert (v.volume_a, v.volume_b) == (25, 25)


def test_reaction_rejects_bad_ratio():
    with pytest.raises(Exception):
        Reaction(
            id="r",
            name="Bad",
            reactants=[],
            products=[],
            correct_ratio=(1, 0),
            result_color="#000000",
        )


def test_blend_midpoint():
    assert blend_colors("#ff0000", "#0000ff", 0.5) == "#800080"
    assert blend_colors("#000000", "#0a0a0a", 0.25) == "#080808"


def test_blend_boundaries():
    assert blend_colors("#FFE135", "#E3F2FD", 1) == "#ffe135"
    assert blend_colors("#FFE135", "#E3F2FD", 0) == "#e3f2fd"
    # out-of-range weights clamp
    assert blend_colors("#FFE135", "#E3F2FD", 1.5) == "#ffe135"
    assert blend_colors("#FFE135", "#E3F2FD", -0.5) == "#e3f2fd"


@pytest.mark.parametrize("w", [0, 0.125, 0.25, 0.5, 0.75, 1])
@pytest.mark.parametrize(
    "c1,c2",
    [("#FFE135", "#E3F2FD"), ("#010203", "#fefdfc"), ("#C8E6C9", "#FFCDD2")],
)
def test_blend_is_complementary(c1, c2, w):
    assert blend_colors(c1, c2, w) == blend_colors(c2, c1, 1 - w)


@pytest.mark.parametrize("w", [0.3, 0.7])
@pytest.mark.parametrize("c1,c2", [("#FFE135", "#E3F2FD"), ("#010203", "#fefdfc")])
def test_blend_is_complementary_for_inexact_weights(c1, c2, w):
    assert blend_colors(c1, c2, w) == blend_colors(c2, c1, 1 - w)
