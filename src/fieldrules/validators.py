"""Built-in validator constructors.

Each constructor captures a value now and returns a zero-argument
:data:`~fieldrules.registry.Validator` to run later. Failures return a
default message containing ``$name``, which the engine replaces with the
field key unless a custom message is registered for that position.

``None`` passes every check except :func:`required`; combine with
:func:`required` to enforce presence.

Example:
    ```python
    def validators(self):
        return {
            "name": [required(self.name), min_length(self.name, 3)],
            "age": [between(self.age, 10, 120)],
        }
    ```
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Collection, Sized
from numbers import Number
from re import Pattern as RegexPattern
from typing import Any

from .registry import Validator


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, (str, bytes, list, dict, set, tuple)) and len(value) == 0


def _not_a_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Number):
        return True
    return isinstance(value, float) and math.isnan(value)


def _check_bound(label: str, bound: Any) -> None:
    if _not_a_number(bound):
        raise ValueError(f"{label} must be a number, got {bound!r}")


def required(value: Any) -> Validator:
    """Fail when the value is None or an empty string/collection."""

    def check() -> str:
        if _is_empty(value):
            return "$name 必须存在"
        return ""

    return check


def min_length(value: Sized | None, length: int) -> Validator:
    """Fail when the value has fewer than ``length`` items or characters."""
    if length < 0:
        raise ValueError(f"min length cannot be negative: {length}")

    def check() -> str:
        if value is None:
            return ""
        if not isinstance(value, Sized):
            return f"$name 类型错误: {type(value).__name__}"
        if len(value) < length:
            return f"$name 必须大于 {length} 个字符"
        return ""

    return check


def max_length(value: Sized | None, length: int) -> Validator:
    """Fail when the value has more than ``length`` items or characters."""
    if length < 0:
        raise ValueError(f"max length cannot be negative: {length}")

    def check() -> str:
        if value is None:
            return ""
        if not isinstance(value, Sized):
            return f"$name 类型错误: {type(value).__name__}"
        if len(value) > length:
            return f"$name 必须小于 {length} 个字符"
        return ""

    return check


def min_value(value: Any, minimum: Any) -> Validator:
    """Fail when a number is less than ``minimum``."""
    _check_bound("minimum", minimum)

    def check() -> str:
        if value is None:
            return ""
        if _not_a_number(value):
            return "$name 必须是数字"
        if value < minimum:
            return f"$name 不能小于 {minimum}"
        return ""

    return check


def max_value(value: Any, maximum: Any) -> Validator:
    """Fail when a number is greater than ``maximum``."""
    _check_bound("maximum", maximum)

    def check() -> str:
        if value is None:
            return ""
        if _not_a_number(value):
            return "$name 必须是数字"
        if value > maximum:
            return f"$name 不能大于 {maximum}"
        return ""

    return check


def between(value: Any, low: Any, high: Any) -> Validator:
    """Fail when a number is outside ``[low, high]``."""
    _check_bound("low", low)
    _check_bound("high", high)
    if low > high:
        raise ValueError(f"low ({low}) cannot be greater than high ({high})")

    def check() -> str:
        if value is None:
            return ""
        if _not_a_number(value):
            return "$name 必须是数字"
        if value < low or value > high:
            return f"$name 必须在 {low} 和 {high} 之间"
        return ""

    return check


def pattern(value: str | None, regex: str | RegexPattern[str]) -> Validator:
    """Fail when a string does not match ``regex`` from its start."""
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def check() -> str:
        if value is None:
            return ""
        if not isinstance(value, str) or not compiled.match(value):
            return "$name 格式不正确"
        return ""

    return check


def one_of(value: Any, choices: Collection[Any]) -> Validator:
    """Fail when the value is not one of ``choices``."""
    if not choices:
        raise ValueError("one_of requires at least one allowed value")
    allowed = ",".join(str(choice) for choice in choices)

    def check() -> str:
        if value is None:
            return ""
        try:
            if value in choices:
                return ""
        except TypeError:
            pass
        return f"$name 必须是 {allowed} 中的一个"

    return check


def custom(predicate: Callable[[], bool], message: str = "$name 验证失败") -> Validator:
    """Fail with ``message`` when ``predicate()`` is false."""

    def check() -> str:
        return "" if predicate() else message

    return check


__all__ = [
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
