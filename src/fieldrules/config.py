"""Explicit rule configuration for :func:`fieldrules.run_with_config`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .registry import Messages, Plugins, Validators
from .subject import Validatable


@dataclass
class ValidationConfig:
    """The four rule inputs as plain data instead of subject methods.

    ``strict`` defaults to False, unlike :class:`~fieldrules.BaseValidate`,
    so an empty config runs every validator.
    """

    strict: bool = False
    validators: Validators = field(default_factory=dict)
    messages: Messages = field(default_factory=dict)
    plugins: Plugins = field(default_factory=list)

    @classmethod
    def from_subject(cls, subject: Validatable) -> ValidationConfig:
        """Snapshot the rules a subject declares.

        Args:
            subject: Object implementing the Validatable methods

        Returns:
            ValidationConfig with the subject's current rules
        """
        return cls(
            strict=subject.is_strict(),
            validators=dict(subject.validators() or {}),
            messages=dict(subject.messages() or {}),
            plugins=list(subject.plugins() or []),
        )

    def to_dict(self) -> dict[str, Any]:
        """Summarize the configuration (field keys and counts only)."""
        return {
            "strict": self.strict,
            "validators": {key: len(funcs) for key, funcs in self.validators.items()},
            "messages": {key: list(msgs) for key, msgs in self.messages.items()},
            "plugins": len(self.plugins),
        }
