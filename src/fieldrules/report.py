"""Error report and result types returned by a validation run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .exceptions import FieldValidationError


class ErrorReport(dict[str, list[str]]):
    """Mapping of field key to the ordered failure messages for that field.

    Only fields with at least one failure are present. Messages within a
    field keep the order in which their validators ran.
    """

    def add(self, key: str, message: str) -> ErrorReport:
        """Record a failure message for a field (fluent API).

        Args:
            key: Field key
            message: Resolved failure message

        Returns:
            Self for chaining
        """
        self.setdefault(key, []).append(message)
        return self

    def first(self) -> tuple[str, str] | None:
        """Return the first recorded ``(key, message)`` pair, if any."""
        for key, messages in self.items():
            if messages:
                return key, messages[0]
        return None

    def render(self) -> str:
        """Render as one ``"<key>: <msg1>,<msg2>\\n"`` line per field."""
        return "".join(f"{key}: {','.join(messages)}\n" for key, messages in self.items())

    def to_dict(self) -> dict[str, list[str]]:
        """Return a plain dict copy safe to serialize or mutate."""
        return {key: list(messages) for key, messages in self.items()}

    def raise_for_errors(self) -> None:
        """Raise :class:`FieldValidationError` if any field failed."""
        if self:
            raise FieldValidationError(self)

    def __str__(self) -> str:
        return self.render()


@dataclass
class ValidationResult:
    """Outcome of one validation run.

    Truthy when validation passed. Also unpacks as a pair so callers can
    write ``errors, ok = run(subject)``.
    """

    errors: ErrorReport = field(default_factory=ErrorReport)
    valid: bool = True

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    def __iter__(self) -> Iterator[ErrorReport | bool]:
        yield self.errors
        yield self.valid

    def add_error(self, key: str, message: str) -> ValidationResult:
        """Add a field failure and mark as invalid (fluent API)."""
        self.errors.add(key, message)
        self.valid = False
        return self

    def raise_for_errors(self) -> ValidationResult:
        """Raise :class:`FieldValidationError` on failure, else return self."""
        self.errors.raise_for_errors()
        return self
