from saintluc.form.prompter import FormPrompter
from saintluc.form.session import FormSession

__all__ = ["FormPrompter", "FormSession"]
