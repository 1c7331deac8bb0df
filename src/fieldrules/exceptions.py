"""Exception hierarchy for fieldrules.

Field failures are normally returned as data inside an
:class:`~fieldrules.report.ErrorReport`. Exceptions are reserved for
misconfiguration and for callers who explicitly ask for a raise.

Example:
    ```python
    from fieldrules import run
    from fieldrules.exceptions import FieldRulesError, FieldValidationError

    try:
        run(user).raise_for_errors()
    except FieldValidationError as e:
        logger.error(f"Invalid user: {e}")
        for key, messages in e.report.items():
            ...
    ```
"""

from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from .report import ErrorReport


class FieldRulesError(Exception):
    """Base exception for the fieldrules package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (field keys, paths, etc.)
        details: Alternative to context (takes precedence when both are given)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ConfigurationError(FieldRulesError):
    """Raised when a declarative rule configuration is invalid or missing.

    Common scenarios include:
    - Unknown validator type
    - Configuration file not found
    - Unsupported configuration file format

    Example:
        ```python
        raise ConfigurationError(
            "Unknown validator type: 'zipcode'",
            context={"field": "address", "available_types": ["required", "pattern"]}
        )
        ```
    """

    pass


class FieldValidationError(FieldRulesError):
    """Raised on request when a validation run produced failures.

    The full report is kept on the exception so handlers can inspect
    individual fields rather than parse the message.
    """

    def __init__(self, report: "ErrorReport", message: str | None = None):
        super().__init__(
            message or report.render().rstrip("\n"),
            context={"fields": list(report.keys())},
        )
        self.report = report


__all__ = [
    "FieldRulesError",
    "ConfigurationError",
    "FieldValidationError",
]
