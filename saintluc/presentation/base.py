from abc import ABC, abstractmethod

from saintluc.scoring.models import ScoreResult


class BaseResultRenderer(ABC):
    """Contract for all result renderers."""

    @abstractmethod
    def render(self, result: ScoreResult) -> str:
        """Turn a score result into the text shown to the user.

        Args:
            result: Output of the scorer.

        Returns:
            The rendered result, without a trailing newline.
        """
