"""Rule registry and the merge of plugin and explicit rule sources.

A subject can declare field rules three ways:

- plugins: callables returning a ``(key, validators, messages)`` triple
- an explicit validators map: ``{key: [validator, ...]}``
- an explicit messages map: ``{key: [message, ...]}``

:func:`merge_rules` folds them into one :class:`RuleRegistry`. Plugins are
applied in order (a later plugin replaces an earlier one for the same key),
then every key of the validators map replaces whatever a plugin registered
for it. Entries are replaced, never appended to.

Example:
    ```python
    registry = merge_rules(
        plugins=[lambda: ("name", [required(name)], ["用户名必须存在"])],
        validators={"age": [min_value(age, 10)]},
    )
    registry.list_keys()
    # ['name', 'age']
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

#: Zero-argument check; a falsy return passes, a non-empty string is a failure.
Validator = Callable[[], Optional[str]]
Validators = Mapping[str, Sequence[Optional[Validator]]]
Messages = Mapping[str, Sequence[str]]
PluginTriple = Tuple[str, Sequence[Optional[Validator]], Sequence[str]]
Plugin = Callable[[], Optional[PluginTriple]]
Plugins = Sequence[Optional[Plugin]]


@dataclass(frozen=True)
class FieldRules:
    """Validators for one field and the custom messages aligned with them."""

    validators: tuple[Validator | None, ...] = ()
    messages: tuple[str, ...] = ()

    def message_at(self, index: int) -> str:
        """Custom message for the validator at ``index``, or ``""`` for the default."""
        if 0 <= index < len(self.messages):
            return self.messages[index] or ""
        return ""


class RuleRegistry:
    """Per-run mapping of field key to :class:`FieldRules`.

    Keys iterate in first-registration order; replacing a key keeps its
    position. The registry is built fresh for every run and is not shared,
    so it carries no lock.
    """

    def __init__(self) -> None:
        self._items: dict[str, FieldRules] = {}

    def register(
        self,
        key: str,
        validators: Sequence[Validator | None] | None,
        messages: Sequence[str] | None = None,
    ) -> None:
        """Register the rules for a field, replacing any earlier entry.

        Args:
            key: Field key
            validators: Ordered validators for the field
            messages: Custom messages aligned with ``validators``
        """
        if key in self._items:
            logger.debug(f"Replacing rules for field '{key}'")
        self._items[key] = FieldRules(
            validators=tuple(validators or ()),
            messages=tuple(messages or ()),
        )

    def get(self, key: str) -> FieldRules | None:
        """Get the rules for a field, or None if not registered."""
        return self._items.get(key)

    def has(self, key: str) -> bool:
        """Check if a field has registered rules."""
        return key in self._items

    def list_keys(self) -> list[str]:
        """List registered field keys in iteration order."""
        return list(self._items.keys())

    def items(self) -> list[tuple[str, FieldRules]]:
        """Get all ``(key, rules)`` pairs in iteration order."""
        return list(self._items.items())

    def count(self) -> int:
        """Get count of registered fields."""
        return len(self._items)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_keys())


def merge_rules(
    plugins: Plugins | None = None,
    validators: Validators | None = None,
    messages: Messages | None = None,
) -> RuleRegistry:
    """Merge plugin and explicit rule sources into one registry.

    Args:
        plugins: Ordered plugin callables, each returning ``(key, validators, messages)``
        validators: Explicit validators per field key
        messages: Explicit custom messages per field key

    Returns:
        A new RuleRegistry. ``None`` sources, ``None`` plugins, and plugins
        returning ``None`` or anything other than a triple contribute nothing.
    """
    registry = RuleRegistry()

    for plugin in plugins or ():
        if plugin is None:
            continue
        triple = plugin()
        if not triple:
            logger.debug("Plugin returned no rules, skipping")
            continue
        if not isinstance(triple, (tuple, list)) or len(triple) != 3:
            logger.debug(f"Plugin {plugin!r} returned malformed rules {triple!r}, skipping")
            continue
        key, plugin_validators, plugin_messages = triple
        registry.register(key, plugin_validators, plugin_messages)

    validators = validators or {}
    messages = messages or {}
    for key, field_validators in validators.items():
        registry.register(key, field_validators, messages.get(key))

    inert = [key for key in messages if key not in validators]
    if inert:
        logger.debug(f"Messages without validators are ignored: {inert}")

    return registry
