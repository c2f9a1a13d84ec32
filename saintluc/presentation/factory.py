from saintluc.config.settings import Settings
from saintluc.presentation.base import BaseResultRenderer
from saintluc.presentation.json_renderer import JsonResultRenderer
from saintluc.presentation.labels import get_labels
from saintluc.presentation.text_renderer import TextResultRenderer


class ResultRendererFactory:
    """Creates the correct result renderer based on settings."""

    FORMATS: tuple[str, ...] = ("text", "json")

    @classmethod
    def create(cls, settings: Settings) -> BaseResultRenderer:
        output_format = settings.output_format.lower()
        if output_format == "text":
            return TextResultRenderer(get_labels(settings.locale))
        if output_format == "json":
            return JsonResultRenderer()
        raise ValueError(
            f"Unknown output format '{output_format}'. Choose from: {list(cls.FORMATS)}"
        )
