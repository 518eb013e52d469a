"""Custom exceptions for the templating context."""

from typing import Iterable, Optional


class TemplateNotFoundError(KeyError):
    """
    Raised by strict template lookups when a template id is not in the table.

    TemplateRegistry.resolve() catches this and falls back to the default
    template; template selection is never a hard error for callers.

    Attributes:
        template_id: The requested id
        available: Ids present in the table
    """

    def __init__(self, template_id: str, available: Optional[Iterable[str]] = None):
        self.template_id = template_id
        self.available = sorted(available or [])

        message = f"Template '{template_id}' not found"
        if self.available:
            message += f". Available templates: {self.available}"
        self.message = message

        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InvalidTemplateTableError(ValueError):
    """
    Raised when the template table YAML is missing required structure.

    This is a deployment error (bad TEMPLATES_PATH or edited table), surfaced at
    startup rather than per request.
    """

    pass
