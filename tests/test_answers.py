import pytest

from answers import (
    answer_satisfies,
    parse_answer,
    parse_equation,
    residual,
    solve_for_x,
    validate_answer_text,
)


@pytest.mark.parametrize(
    "text,value",
    [("7", 7.0), (" 12 ", 12.0), ("-3.5", -3.5), ("12/4", 3.0), ("2^3", 8.0), ("(1+2)*3", 9.0)],
)
def test_parse_answer_numeric(text, value):
    assert parse_answer(text) == pytest.approx(value)


def test_parse_answer_rejects_letters():
    with pytest.raises(ValueError) as e:
        parse_answer("x=3")
    assert "allowed" in str(e.value).lower()


@pytest.mark.parametrize("text", ["", "   ", None])
def test_parse_answer_requires_text(text):
    with pytest.raises(ValueError) as e:
        parse_answer(text)
    assert str(e.value) == "Answer required."


def test_parse_answer_len_limit():
    assert validate_answer_text("1" * 101) == "Answer too long (> 100)."


def test_parse_answer_non_finite():
    with pytest.raises(ValueError) as e:
        parse_answer("1/0")
    assert "finite" in str(e.value)


def test_parse_answer_unbalanced():
    with pytest.raises(ValueError):
        parse_answer("(1+2")


@pytest.mark.parametrize(
    "expression,root",
    [
        ("x + 5 = 12", 7),
        ("x - 15 = -5", 10),
        ("3x = 15", 5),
        ("x ÷ 4 = 2", 8),
        ("x ÷ 9 = 0", 0),
        ("2x - 3 = 11", 7),
        ("3x + 2 = x + 10", 4),
        ("4x + 1 = 3x - 11", -12),
        ("2(x + 3) = 4x - 2", 4),
    ],
)
def test_equation_text(expression, root):
    assert residual(expression, root) == 0
    assert solve_for_x(expression) == [root]
    assert answer_satisfies(expression, root)
    assert not answer_satisfies(expression, root + 1)


def test_answer_satisfies_garbage():
    assert not answer_satisfies("no equals sign", 1)


@pytest.mark.parametrize(
    "expression",
    [
        "__import__('os').getcwd() = 1",
        "x.__class__ = 1",
        "9**9**9 = x",
        "2^x = 8",
        "x + 1 = 2 = 3",
    ],
)
def test_equation_text_outside_allowlist(expression):
    with pytest.raises(ValueError):
        parse_equation(expression)
    assert not answer_satisfies(expression, 1)
