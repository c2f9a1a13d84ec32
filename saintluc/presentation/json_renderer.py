import json
from dataclasses import asdict

from saintluc.presentation.base import BaseResultRenderer
from saintluc.scoring.models import ScoreResult


class JsonResultRenderer(BaseResultRenderer):
    """Renders the result as a JSON object with score and recommend_blood_test."""

    def render(self, result: ScoreResult) -> str:
        return json.dumps(asdict(result))
