"""Saint Luc post-operative blood test score."""

from saintluc.scoring.models import PatientInput, ScoreResult

INTERCEPT = 2.503
COEFFICIENTS: dict[str, float] = {
    "age": 0.0506,
    "gender": -2.896,
    "surgical_indication": 2.976,
    "asa_score": 0.733,
    "treated_hta": 0.771,
    "preop_emoglobin": -0.97,
}
THRESHOLD = -4.5676
SCORE_DECIMALS = 4


def compute(patient: PatientInput) -> ScoreResult:
    """Apply the linear model to a validated patient.

    A blood test is recommended when the rounded score is strictly
    above THRESHOLD.
    """
    raw = (
        INTERCEPT
        + COEFFICIENTS["age"] * patient.age
        + COEFFICIENTS["gender"] * patient.gender
        + COEFFICIENTS["surgical_indication"] * patient.surgical_indication
        + COEFFICIENTS["asa_score"] * patient.asa_score
        + COEFFICIENTS["treated_hta"] * patient.treated_hta
        + COEFFICIENTS["preop_emoglobin"] * patient.preop_emoglobin
    )
    score = round(raw, SCORE_DECIMALS)
    return ScoreResult(score=score, recommend_blood_test=score > THRESHOLD)
