"""
Scoring rubric for the refactoring exercise.

Each criterion pairs one anti-pattern in `LegacyPaymentProcessor` with the
fix a reviewer looks for, and a point budget. Budgets add up to 100, so the
total is also the percentage.
"""

from pydantic import BaseModel, Field


class RubricCriterion(BaseModel):
    key: str
    title: str
    max_points: int = Field(..., gt=0)
    anti_pattern: str  # What the legacy class does wrong


class RubricScore(BaseModel):
    points: dict[str, int]
    total: int
    max_total: int
    percentage: float
    band: str


CRITERIA: list[RubricCriterion] = [
    RubricCriterion(
        key="abstraction",
        title="Payment-method abstraction",
        max_points=20,
        anti_pattern="One class knows the fields, URL and wording of every payment type",
    ),
    RubricCriterion(
        key="dispatch",
        title="Dispatch instead of a branch chain",
        max_points=15,
        anti_pattern="if/elif chain on payment-type strings",
    ),
    RubricCriterion(
        key="duplication",
        title="Shared success and failure handling",
        max_points=10,
        anti_pattern="Three copies of the request/record/log/email sequence",
    ),
    RubricCriterion(
        key="injection",
        title="Injected collaborators",
        max_points=15,
        anti_pattern="HTTP, log file and email hardwired into the class",
    ),
    RubricCriterion(
        key="errors",
        title="Typed results and exceptions",
        max_points=15,
        anti_pattern="Errors are printed to the console and the caller gets nothing back",
    ),
    RubricCriterion(
        key="secrets",
        title="Secrets out of the source",
        max_points=10,
        anti_pattern="API key is a string literal",
    ),
    RubricCriterion(
        key="state",
        title="Encapsulated transaction state",
        max_points=5,
        anti_pattern="get_processed_transactions() hands out the internal list",
    ),
    RubricCriterion(
        key="tests",
        title="Tests for the refactor",
        max_points=10,
        anti_pattern="No seams to test through",
    ),
]

# Lower bound (percent) of each hiring band, checked top-down.
BANDS: list[tuple[float, str]] = [
    (85.0, "strong"),
    (70.0, "pass"),
    (50.0, "borderline"),
    (0.0, "no hire"),
]


def criteria_by_key() -> dict[str, RubricCriterion]:
    return {criterion.key: criterion for criterion in CRITERIA}


def band_for(percentage: float) -> str:
    for floor, band in BANDS:
        if percentage >= floor:
            return band
    return BANDS[-1][1]


def score(points: dict[str, int]) -> RubricScore:
    """Score a candidate.

    Missing criteria count as zero; each awarded value is clamped to
    ``[0, max_points]``. Unknown criterion keys raise ``ValueError``.
    """
    known = criteria_by_key()
    unknown = sorted(set(points) - set(known))
    if unknown:
        raise ValueError(f"Unknown rubric criteria: {', '.join(unknown)}")

    awarded = {
        key: max(0, min(points.get(key, 0), criterion.max_points)) for key, criterion in known.items()
    }
    total = sum(awarded.values())
    max_total = sum(criterion.max_points for criterion in CRITERIA)
    percentage = round(100.0 * total / max_total, 1)
    return RubricScore(points=awarded, total=total, max_total=max_total, percentage=percentage, band=band_for(percentage))
