"""Pytest configuration and fixtures for fieldrules tests."""

from dataclasses import dataclass

import pytest

from fieldrules import BaseValidate, min_length, required


@dataclass
class User(BaseValidate):
    """Subject with no declared rules."""

    name: str = ""
    age: int = 0


class StrictUser(User):
    """Strict subject: name must exist and be long enough, age at least 10."""

    def validators(self):
        return {
            "name": [required(self.name), min_length(self.name, 3)],
            "age": [self._check_age],
        }

    def _check_age(self) -> str:
        if self.age < 10:
            return "$name 不能小于 10"
        return ""


class LenientUser(StrictUser):
    """Same rules as StrictUser, all of them run."""

    def is_strict(self) -> bool:
        return False


class MessageUser(User):
    """Custom message for the required check."""

    def validators(self):
        return {"name": [required(self.name)]}

    def messages(self):
        return {"name": ["用户名必须存在"]}


class PluginUser(User):
    """Rules bundled in a plugin only."""

    def plugins(self):
        return [
            lambda: ("name", [required(self.name)], ["用户名必须存在"]),
        ]


class CallCounter:
    """Validator that records how many times it ran."""

    def __init__(self, result: str = ""):
        self.result = result
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self.result


@pytest.fixture
def counter():
    """Factory for CallCounter validators."""
    return CallCounter


@pytest.fixture
def lenient_invalid_user():
    """Non-strict user failing on both name and age."""
    return LenientUser(name="", age=9)


@pytest.fixture
def strict_invalid_user():
    """Strict user failing on both name and age."""
    return StrictUser(name="", age=9)


@pytest.fixture
def rules_yaml(tmp_path):
    """YAML rule file for name and age."""
    path = tmp_path / "rules.yaml"
    path.write_text(
        "strict: false\n"
        "fields:\n"
        "  name:\n"
        "    validators:\n"
        "      - type: required\n"
        "      - type: min_length\n"
        "        min: 3\n"
        "    messages: [\"\", \"用户名至少 3 个字符\"]\n"
        "  age:\n"
        "    validators:\n"
        "      - type: min_value\n"
        "        min: 10\n",
        encoding="utf-8",
    )
    return path
