"""Custom exceptions for configuration management."""

from typing import List, Optional


class ConfigurationError(Exception):
    """
    Raised when the dashboard configuration cannot be loaded or validated.

    Carries the individual validation errors and suggestions for fixing
    them; ``str()`` renders all of it as a numbered report.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.errors:
            parts.append("\nValidation Errors:")
            parts.extend(f"  {i}. {error}" for i, error in enumerate(self.errors, 1))
        if self.suggestions:
            parts.append("\nSuggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(parts)

    def __str__(self) -> str:
        return self._format_message()

    def add_error(self, error: str) -> None:
        """Append a validation error."""
        self.errors.append(error)

    def add_suggestion(self, suggestion: str) -> None:
        """Append a suggestion."""
        self.suggestions.append(suggestion)
