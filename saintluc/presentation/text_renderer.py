from saintluc.presentation.base import BaseResultRenderer
from saintluc.presentation.labels import Labels
from saintluc.scoring.models import ScoreResult


class TextResultRenderer(BaseResultRenderer):
    """Renders the score and the localized recommendation as plain text."""

    def __init__(self, labels: Labels) -> None:
        self._labels = labels

    def render(self, result: ScoreResult) -> str:
        return (
            f"{self._labels.score}: {result.score}\n"
            f"{self._labels.recommendation(result.recommend_blood_test)}"
        )
