"""Capabilities a validation subject exposes to the engine.

A subject is anything with the four methods of :class:`Validatable`. The
easiest way to get them is to inherit :class:`BaseValidate` and override
only what the subject needs:

    ```python
    @dataclass
    class User(BaseValidate):
        name: str = ""
        age: int = 0

        def is_strict(self) -> bool:
            return False

        def validators(self) -> Validators:
            return {
                "name": [required(self.name), min_length(self.name, 3)],
                "age": [min_value(self.age, 10)],
            }

    errors, ok = run(User(name="", age=7))
    ```

Subjects that cannot inherit can hold a ``BaseValidate`` and delegate to it.
"""

from typing import Protocol, runtime_checkable

from .registry import Messages, Plugins, Validators


@runtime_checkable
class Validatable(Protocol):
    """Interface the engine queries on a subject."""

    def is_strict(self) -> bool:
        """Whether the first failure stops all further validation."""
        ...

    def validators(self) -> Validators:
        """Ordered validators per field key."""
        ...

    def messages(self) -> Messages:
        """Custom messages per field key, aligned with ``validators()``."""
        ...

    def plugins(self) -> Plugins:
        """Bundled ``(key, validators, messages)`` providers.

        Rules declared here are replaced by ``validators()`` entries for the
        same key.
        """
        ...


class BaseValidate:
    """Default behavior: strict, with no rules declared."""

    def is_strict(self) -> bool:
        return True

    def validators(self) -> Validators:
        return {}

    def messages(self) -> Messages:
        return {}

    def plugins(self) -> Plugins:
        return []
