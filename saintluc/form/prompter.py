from collections.abc import Callable, Iterable

from saintluc.form.session import FormSession
from saintluc.logging.logger import Log
from saintluc.presentation.base import BaseResultRenderer
from saintluc.presentation.labels import Labels
from saintluc.scoring.exceptions import PatientInputValidationError
from saintluc.scoring.models import PATIENT_FIELDS, ScoreResult


class FormPrompter:
    """Interactive terminal form: prompt -> submit -> render -> reset."""

    def __init__(
        self,
        session: FormSession,
        labels: Labels,
        renderer: BaseResultRenderer,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._session = session
        self._labels = labels
        self._renderer = renderer
        self._input = input_fn
        self._output = output_fn

    def run(self, max_submissions: int | None = None) -> None:
        """Prompt loop. Runs until interrupted or stdin is closed.

        If max_submissions is set, stop after that many scored patients (for testing).
        """
        Log.info("Interactive form started")
        self._output(self._labels.title)
        submissions = 0
        try:
            while max_submissions is None or submissions < max_submissions:
                self._prompt_fields(PATIENT_FIELDS)
                result = self._submit_until_valid()
                self._output(self._renderer.render(result))
                submissions += 1
                self._session.reset()
        except (KeyboardInterrupt, EOFError):
            Log.info("Interactive form closed")

    def _submit_until_valid(self) -> ScoreResult:
        while True:
            try:
                return self._session.submit()
            except PatientInputValidationError as exc:
                for field, reason in exc.errors.items():
                    self._output(f"{self._labels.fields[field]}: {reason}")
                self._prompt_fields(exc.errors)

    def _prompt_fields(self, fields: Iterable[str]) -> None:
        for field in fields:
            self._session.set_value(field, self._input(self._prompt_for(field)))

    def _prompt_for(self, field: str) -> str:
        label = self._labels.fields[field]
        options = self._labels.options.get(field)
        if not options:
            return f"{label}: "
        choices = ", ".join(
            text if text == str(value) else f"{value}={text}" for text, value in options
        )
        return f"{label} [{choices}]: "
