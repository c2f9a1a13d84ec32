from typing import Any

from saintluc.logging.logger import Log
from saintluc.scoring.exceptions import PatientInputValidationError, UnknownFieldError
from saintluc.scoring.models import PATIENT_FIELDS, ScoreResult
from saintluc.scoring.scorer import compute
from saintluc.scoring.validator import validate_and_build


class FormSession:
    """Raw form values for one patient and the result of the last submit.

    Lifecycle: set values -> submit -> (resubmit | reset).
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._result: ScoreResult | None = None

    @property
    def values(self) -> dict[str, Any]:
        return dict(self._values)

    @property
    def result(self) -> ScoreResult | None:
        return self._result

    def set_value(self, field: str, value: Any) -> None:
        if field not in PATIENT_FIELDS:
            raise UnknownFieldError(
                f"Unknown field '{field}'. Choose from: {list(PATIENT_FIELDS)}"
            )
        self._values[field] = value

    def submit(self) -> ScoreResult:
        """Validate the current values and compute the score.

        Raises:
            PatientInputValidationError: if any field is missing or malformed.
                The previous result is discarded.
        """
        self._result = None
        try:
            patient = validate_and_build(self._values)
        except PatientInputValidationError as exc:
            Log.warning("Rejected submission", invalid_fields=list(exc.errors))
            raise
        self._result = compute(patient)
        Log.info(
            "Computed score",
            score=self._result.score,
            recommend_blood_test=self._result.recommend_blood_test,
        )
        return self._result

    def reset(self) -> None:
        self._values.clear()
        self._result = None
        Log.debug("Form session reset")
