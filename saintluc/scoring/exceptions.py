class ScoringError(Exception):
    """Base exception for all scoring-related errors."""


class PatientInputValidationError(ScoringError):
    """Raised when raw patient values cannot form a valid PatientInput.

    ``errors`` maps each offending field to a human-readable reason.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        details = "; ".join(f"{field}: {reason}" for field, reason in self.errors.items())
        super().__init__(f"Invalid patient input ({details})")


class UnknownFieldError(ScoringError):
    """Raised when a form field name is not one of the patient inputs."""
