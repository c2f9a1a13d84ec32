from saintluc.scoring.models import PATIENT_FIELDS, PatientInput, ScoreResult
from saintluc.scoring.scorer import compute
from saintluc.scoring.validator import validate_and_build

__all__ = ["PATIENT_FIELDS", "PatientInput", "ScoreResult", "compute", "validate_and_build"]
