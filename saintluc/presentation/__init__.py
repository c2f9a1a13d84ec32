from saintluc.presentation.base import BaseResultRenderer
from saintluc.presentation.factory import ResultRendererFactory
from saintluc.presentation.labels import Labels, get_labels

__all__ = ["BaseResultRenderer", "Labels", "ResultRendererFactory", "get_labels"]
