"""Run the validators of a merged rule registry and collect failures."""

from __future__ import annotations

import logging

from .registry import RuleRegistry
from .report import ValidationResult
from .template import NAME_TOKEN, substitute

logger = logging.getLogger(__name__)


def resolve_message(key: str, diagnostic: str, custom: str) -> str:
    """Pick the message reported for a failed validator.

    A non-empty custom message is used as-is. Otherwise the validator's own
    diagnostic is used with ``$name`` replaced by the field key.
    """
    if custom:
        return custom
    return substitute(diagnostic, {NAME_TOKEN: key})


def execute(registry: RuleRegistry, strict: bool = True) -> ValidationResult:
    """Run every field's validators in declared order.

    Args:
        registry: Merged rules to run
        strict: If True, stop all validation at the first failure

    Returns:
        ValidationResult holding the error report and the success flag
    """
    result = ValidationResult()

    for key, rules in registry.items():
        for index, validator in enumerate(rules.validators):
            if validator is None:
                continue

            try:
                diagnostic = validator()
            except Exception:
                logger.error(f"Validator {index} for field '{key}' raised")
                raise

            if not diagnostic:
                continue

            result.add_error(key, resolve_message(key, str(diagnostic), rules.message_at(index)))

            if strict:
                logger.debug(f"Strict mode: stopping after failure on field '{key}'")
                return result

    if not result.valid:
        logger.debug(f"Validation failed for fields: {list(result.errors.keys())}")
    return result
