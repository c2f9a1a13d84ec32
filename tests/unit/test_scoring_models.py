import dataclasses

import pytest

from saintluc.scoring.models import PATIENT_FIELDS, PatientInput, ScoreResult


class TestPatientInput:
    def test_is_frozen(self) -> None:
        patient = PatientInput(
            age=60, gender=1, surgical_indication=1, asa_score=2, treated_hta=0, preop_emoglobin=13
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            patient.age = 61  # type: ignore[misc]

    def test_field_order_matches_patient_fields(self) -> None:
        assert tuple(f.name for f in dataclasses.fields(PatientInput)) == PATIENT_FIELDS


class TestScoreResult:
    def test_is_frozen(self) -> None:
        result = ScoreResult(score=-5.525, recommend_blood_test=False)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.score = 0.0  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ScoreResult(score=-3.669, recommend_blood_test=True) == ScoreResult(
            score=-3.669, recommend_blood_test=True
        )
