"""fieldrules: field-level validation orchestration.

Subjects declare ordered validators and custom messages per field; the
engine merges plugin and explicit rules, runs them, and returns a per-field
error report.

- **Entry points**: ``run(subject)`` and ``run_with_config(subject, config)``
- **Subjects**: the ``Validatable`` protocol and the ``BaseValidate`` defaults
- **Validators**: ``required``, ``min_length``, ``between`` and friends
- **Configuration**: ``ValidationConfig`` and the YAML/JSON ``load_config``

Example:
    ```python
    from fieldrules import BaseValidate, required, run

    class User(BaseValidate):
        def __init__(self, name: str):
            self.name = name

        def validators(self):
            return {"name": [required(self.name)]}

        def messages(self):
            return {"name": ["用户名必须存在"]}

    errors, ok = run(User(""))
    # errors == {"name": ["用户名必须存在"]}, ok is False
    ```
"""

from .config import ValidationConfig
from .exceptions import ConfigurationError, FieldRulesError, FieldValidationError
from .executor import execute
from .factory import RuleFactory, load_config, rule_factory
from .registry import (
    FieldRules,
    Messages,
    Plugin,
    Plugins,
    RuleRegistry,
    Validator,
    Validators,
    merge_rules,
)
from .report import ErrorReport, ValidationResult
from .runner import run, run_with_config
from .subject import BaseValidate, Validatable
from .template import NAME_TOKEN, substitute
from .validators import (
    between,
    custom,
    max_length,
    max_value,
    min_length,
    min_value,
    one_of,
    pattern,
    required,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Entry points
    "run",
    "run_with_config",
    "ValidationConfig",
    # Subjects
    "Validatable",
    "BaseValidate",
    # Engine
    "merge_rules",
    "execute",
    "RuleRegistry",
    "FieldRules",
    "substitute",
    "NAME_TOKEN",
    # Types
    "Validator",
    "Validators",
    "Messages",
    "Plugin",
    "Plugins",
    # Results
    "ErrorReport",
    "ValidationResult",
    # Exceptions
    "FieldRulesError",
    "ConfigurationError",
    "FieldValidationError",
    # Configuration
    "RuleFactory",
    "rule_factory",
    "load_config",
    # Validators
    "required",
    "min_length",
    "max_length",
    "min_value",
    "max_value",
    "between",
    "pattern",
    "one_of",
    "custom",
]
