from dataclasses import dataclass

PATIENT_FIELDS: tuple[str, ...] = (
    "age",
    "gender",
    "surgical_indication",
    "asa_score",
    "treated_hta",
    "preop_emoglobin",
)


@dataclass(frozen=True)
class PatientInput:
    """The six validated variables the score is computed from.

    gender: 1 = male, 0 = female.
    surgical_indication: 1 = osteonecrosis, 0 = arthritis.
    treated_hta: 1 = treated hypertension, 0 = none.
    preop_emoglobin: pre-operative hemoglobin in g/dl.
    """

    age: float
    gender: int
    surgical_indication: int
    asa_score: int
    treated_hta: int
    preop_emoglobin: float


@dataclass(frozen=True)
class ScoreResult:
    """Output of the scorer."""

    score: float
    recommend_blood_test: bool
