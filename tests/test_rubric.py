import pytest

from payment_kata.domain import rubric


def test_budgets_add_up_to_100():
    assert sum(criterion.max_points for criterion in rubric.CRITERIA) == 100


def test_full_marks():
    result = rubric.score({c.key: c.max_points for c in rubric.CRITERIA})
    assert result.total == 100
    assert result.percentage == 100.0
    assert result.band == "strong"


def test_points_are_clamped():
    result = rubric.score({"abstraction": 50, "dispatch": -5})
    assert result.points["abstraction"] == 20
    assert result.points["dispatch"] == 0
    assert result.points["tests"] == 0


def test_unknown_criterion():
    with pytest.raises(ValueError, match="naming"):
        rubric.score({"naming": 5})


@pytest.mark.parametrize(
    "percentage, band",
    [(85.0, "strong"), (84.9, "pass"), (70.0, "pass"), (50.0, "borderline"), (49.9, "no hire"), (0.0, "no hire")],
)
def test_band_for(percentage, band):
    assert rubric.band_for(percentage) == band
