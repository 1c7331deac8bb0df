"""Build a ValidationConfig from declarative configuration."""

import json
import logging
import re
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml  # type: ignore[import-untyped]

from . import validators as builtin
from .config import ValidationConfig
from .exceptions import ConfigurationError
from .registry import Validator

logger = logging.getLogger(__name__)


def _bind_required(value: Any, spec: Dict[str, Any]) -> Validator:
    return builtin.required(value)


def _bind_min_length(value: Any, spec: Dict[str, Any]) -> Validator:
    return builtin.min_length(value, spec["min"])


def _bind_max_length(value: Any, spec: Dict[str, Any]) -> Validator:
    return builtin.max_length(value, spec["max"])


def _bind_min_value(value: Any, spec: Dict[str, Any]) -> Validator:
    return builtin.min_value(value, spec["min"])


def _bind_max_value(value: Any, spec: Dict[str, Any]) -> Validator:
    return builtin.max_value(value, spec["max"])


def _bind_between(value: Any, spec: Dict[str, Any]) -> Validator:
    return builtin.between(value, spec["min"], spec["max"])


def _bind_pattern(value: Any, spec: Dict[str, Any]) -> Validator:
    return builtin.pattern(value, spec["pattern"])


def _bind_one_of(value: Any, spec: Dict[str, Any]) -> Validator:
    return builtin.one_of(value, spec["values"])


class RuleFactory:
    """Factory for creating a ValidationConfig from configuration.

    Configuration Options:
        strict (bool): Stop at the first failure (default: False)
        fields (dict): Field key to field definition

    Field Definition Options:
        validators (list): Validator definitions, each with a ``type``
        messages (list): Custom messages aligned with ``validators``

    Validator types and their options:
        required; min_length (min); max_length (max); min_value (min);
        max_value (max); between (min, max); pattern (pattern); one_of (values)

    Example Configuration:
        strict: false
        fields:
          name:
            validators:
              - type: required
              - type: min_length
                min: 3
            messages: ["", "用户名至少 3 个字符"]
          age:
            validators:
              - type: between
                min: 10
                max: 120
    """

    def __init__(self) -> None:
        self._builders: Dict[str, Callable[[Any, Dict[str, Any]], Validator]] = {
            "required": _bind_required,
            "min_length": _bind_min_length,
            "max_length": _bind_max_length,
            "min_value": _bind_min_value,
            "max_value": _bind_max_value,
            "between": _bind_between,
            "pattern": _bind_pattern,
            "one_of": _bind_one_of,
        }

    def register(
        self, validator_type: str, builder: Callable[[Any, Dict[str, Any]], Validator]
    ) -> None:
        """Register a builder for a custom validator type.

        Args:
            validator_type: Name used as ``type`` in configuration
            builder: Callable taking ``(value, spec)`` and returning a Validator
        """
        self._builders[validator_type.lower()] = builder

    def available_types(self) -> List[str]:
        """List the validator types this factory can build."""
        return sorted(self._builders)

    def create(self, values: Mapping[str, Any] | None = None, **config: Any) -> ValidationConfig:
        """Create a ValidationConfig bound to the given field values.

        Args:
            values: Field key to value; each validator captures its field's value
            **config: Rule configuration

        Returns:
            ValidationConfig instance

        Raises:
            ConfigurationError: If a validator definition is invalid
        """
        values = values or {}
        fields = config.get("fields") or {}
        if not isinstance(fields, Mapping):
            raise ConfigurationError(
                f"'fields' must be a mapping of field key to definition, got {type(fields).__name__}",
                context={"fields": fields},
            )
        logger.info(f"Creating validation config for fields: {list(fields)}")

        validators: Dict[str, List[Validator]] = {}
        messages: Dict[str, List[str]] = {}
        for key, field_config in fields.items():
            field_config = field_config or {}
            if not isinstance(field_config, Mapping):
                raise ConfigurationError(
                    f"Definition for field '{key}' must be a mapping, got {type(field_config).__name__}",
                    context={"field": key, "definition": field_config},
                )
            value = values.get(key)
            validators[key] = [
                self._build_validator(key, value, spec)
                for spec in field_config.get("validators") or []
            ]
            field_messages = field_config.get("messages")
            if field_messages:
                messages[key] = ["" if msg is None else str(msg) for msg in field_messages]

        return ValidationConfig(
            strict=bool(config.get("strict", False)),
            validators=validators,
            messages=messages,
        )

    def _build_validator(self, key: str, value: Any, spec: Any) -> Validator:
        if isinstance(spec, str):
            spec = {"type": spec}
        if not isinstance(spec, dict):
            raise ConfigurationError(
                f"Validator definition for field '{key}' must be a mapping or a type name",
                context={"field": key, "definition": spec},
            )

        validator_type = str(spec.get("type", "")).lower()
        builder = self._builders.get(validator_type)
        if builder is None:
            raise ConfigurationError(
                f"Unknown validator type: '{validator_type}'",
                context={"field": key, "available_types": self.available_types()},
            )

        try:
            return builder(value, spec)
        except KeyError as e:
            raise ConfigurationError(
                f"Validator '{validator_type}' for field '{key}' is missing option {e}",
                context={"field": key, "type": validator_type},
            ) from e
        except (TypeError, ValueError, re.error) as e:
            raise ConfigurationError(
                f"Invalid options for validator '{validator_type}' on field '{key}': {e}",
                context={"field": key, "type": validator_type},
            ) from e


def load_config(
    path: Union[str, Path],
    values: Mapping[str, Any] | None = None,
    factory: RuleFactory | None = None,
) -> ValidationConfig:
    """Load a ValidationConfig from a YAML or JSON file.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file
        values: Field values the validators should check
        factory: Factory to use (defaults to the module-level ``rule_factory``)

    Returns:
        ValidationConfig instance

    Raises:
        ConfigurationError: If the file is missing, unsupported or invalid
    """
    path = Path(path).resolve()
    if not path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {path}", context={"path": str(path)}
        )

    suffix = path.suffix.lower()
    with open(path, encoding="utf-8") as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported file format: {suffix}", context={"path": str(path)}
            )

    data = data or {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration root must be a mapping, got {type(data).__name__}",
            context={"path": str(path)},
        )

    if "values" in data:
        raise ConfigurationError(
            "'values' is reserved and cannot appear in a rule file; pass field values to load_config",
            context={"path": str(path)},
        )

    return (factory or rule_factory).create(values=values, **data)


# Singleton instance for shared use
rule_factory = RuleFactory()
