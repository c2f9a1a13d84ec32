import argparse
import sys

from saintluc.config.settings import Settings
from saintluc.form.prompter import FormPrompter
from saintluc.form.session import FormSession
from saintluc.logging.logger import Log
from saintluc.presentation.factory import ResultRendererFactory
from saintluc.presentation.labels import get_labels
from saintluc.scoring.exceptions import PatientInputValidationError
from saintluc.scoring.models import PATIENT_FIELDS

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="saintluc-score",
        description="Saint Luc score: is a post-operative blood test necessary?",
    )
    for field in PATIENT_FIELDS:
        parser.add_argument(f"--{field.replace('_', '-')}", dest=field, default=None)
    parser.add_argument("--locale", choices=["en", "fr"], default=None)
    parser.add_argument(
        "--format", dest="output_format", choices=["text", "json"], default=None
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for each value (default when no patient value is given)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> one-shot score or interactive form."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    overrides = {
        key: value
        for key, value in (("locale", args.locale), ("output_format", args.output_format))
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)
    Log.configure(settings.log_level)

    renderer = ResultRendererFactory.create(settings)
    session = FormSession()
    provided = {field: getattr(args, field) for field in PATIENT_FIELDS}

    if args.interactive or all(value is None for value in provided.values()):
        Log.info("Starting interactive form", locale=settings.locale)
        FormPrompter(session, get_labels(settings.locale), renderer).run()
        return EXIT_OK

    for field, value in provided.items():
        session.set_value(field, value)
    try:
        result = session.submit()
    except PatientInputValidationError as exc:
        for field, reason in exc.errors.items():
            print(f"{field}: {reason}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    print(renderer.render(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
