"""Entry points: validate a subject by its own rules or by an explicit config."""

from __future__ import annotations

import logging
from typing import Any

from .config import ValidationConfig
from .executor import execute
from .registry import Messages, Plugins, Validators, merge_rules
from .report import ValidationResult
from .subject import Validatable

logger = logging.getLogger(__name__)


def _run(
    subject: Any,
    strict: bool,
    plugins: Plugins | None,
    validators: Validators | None,
    messages: Messages | None,
) -> ValidationResult:
    registry = merge_rules(plugins=plugins, validators=validators, messages=messages)
    logger.debug(
        f"Validating {type(subject).__name__}: fields={registry.list_keys()} strict={strict}"
    )
    return execute(registry, strict=strict)


def run(subject: Validatable) -> ValidationResult:
    """Validate a subject using the rules it declares.

    Args:
        subject: Object implementing ``is_strict``, ``validators``,
            ``messages`` and ``plugins`` (see :class:`~fieldrules.BaseValidate`)

    Returns:
        ValidationResult; unpack as ``errors, ok = run(subject)``

    Example:
        ```python
        errors, ok = run(user)
        if not ok:
            logger.warning(f"Invalid user:\\n{errors}")
        ```
    """
    return _run(
        subject,
        strict=subject.is_strict(),
        plugins=subject.plugins(),
        validators=subject.validators(),
        messages=subject.messages(),
    )


def run_with_config(subject: Any, config: ValidationConfig) -> ValidationResult:
    """Validate using an explicit configuration instead of the subject's rules.

    The subject is not queried; it only identifies what is being validated.

    Args:
        subject: Object being validated
        config: Strictness, validators, messages and plugins to apply

    Returns:
        ValidationResult; unpack as ``errors, ok = run_with_config(subject, config)``
    """
    return _run(
        subject,
        strict=config.strict,
        plugins=config.plugins,
        validators=config.validators,
        messages=config.messages,
    )
