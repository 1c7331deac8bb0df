"""Tests for building configurations from declarative rules."""

import json

import pytest

from fieldrules import (
    ConfigurationError,
    RuleFactory,
    ValidationConfig,
    load_config,
    rule_factory,
    run_with_config,
)

RULES = {
    "strict": False,
    "fields": {
        "name": {
            "validators": [{"type": "required"}, {"type": "min_length", "min": 3}],
            "messages": ["", "用户名至少 3 个字符"],
        },
        "age": {"validators": [{"type": "between", "min": 10, "max": 120}]},
    },
}


class TestRuleFactory:
    """Test RuleFactory.create."""

    def test_create_config(self):
        """Test the shape of a created config."""
        config = rule_factory.create(values={"name": "ab", "age": 30}, **RULES)

        assert isinstance(config, ValidationConfig)
        assert config.strict is False
        assert list(config.validators) == ["name", "age"]
        assert len(config.validators["name"]) == 2
        assert config.messages == {"name": ["", "用户名至少 3 个字符"]}

    def test_validators_bound_to_values(self):
        """Test that validators check the supplied field values."""
        config = rule_factory.create(values={"name": "ab", "age": 7}, **RULES)
        errors, ok = run_with_config(None, config)

        assert ok is False
        assert errors == {
            "name": ["用户名至少 3 个字符"],
            "age": ["age 必须在 10 和 120 之间"],
        }

    def test_missing_value_is_none(self):
        """Test fields absent from values."""
        errors, ok = run_with_config(None, rule_factory.create(**RULES))
        assert ok is False
        assert errors == {"name": ["name 必须存在"]}

    def test_valid_values(self):
        """Test success through a factory-built config."""
        config = rule_factory.create(values={"name": "abcd", "age": 30}, **RULES)
        assert run_with_config(None, config)

    def test_strict_option(self):
        """Test strict flag from configuration."""
        config = rule_factory.create(values={}, **{**RULES, "strict": True})
        errors, ok = run_with_config(None, config)
        assert config.strict is True
        assert errors == {"name": ["name 必须存在"]}

    def test_type_name_shorthand(self):
        """Test validators given as bare type names."""
        config = rule_factory.create(fields={"name": {"validators": ["required"]}})
        errors, _ = run_with_config(None, config)
        assert errors == {"name": ["name 必须存在"]}

    def test_empty_config(self):
        """Test that no fields yields an empty config."""
        config = rule_factory.create()
        assert config.validators == {}
        assert run_with_config(None, config)

    def test_unknown_type(self):
        """Test unknown validator types."""
        with pytest.raises(ConfigurationError) as exc_info:
            rule_factory.create(fields={"zip": {"validators": [{"type": "zipcode"}]}})

        assert "zipcode" in str(exc_info.value)
        assert exc_info.value.context["field"] == "zip"
        assert "required" in exc_info.value.context["available_types"]

    def test_missing_option(self):
        """Test a validator missing a required option."""
        with pytest.raises(ConfigurationError, match="missing option"):
            rule_factory.create(fields={"name": {"validators": [{"type": "min_length"}]}})

    def test_invalid_option(self):
        """Test invalid option values."""
        with pytest.raises(ConfigurationError, match="Invalid options"):
            rule_factory.create(
                fields={"age": {"validators": [{"type": "between", "min": 5, "max": 1}]}}
            )
        with pytest.raises(ConfigurationError):
            rule_factory.create(
                fields={"code": {"validators": [{"type": "pattern", "pattern": "("}]}}
            )

    def test_invalid_definition(self):
        """Test a validator definition that is neither a mapping nor a name."""
        with pytest.raises(ConfigurationError):
            rule_factory.create(fields={"name": {"validators": [42]}})

    @pytest.mark.parametrize(
        "options",
        [
            {"type": "min_value", "min": "ten"},
            {"type": "max_value", "max": True},
            {"type": "between", "min": "1", "max": 10},
        ],
    )
    def test_non_numeric_bounds(self, options):
        """Test that numeric bounds are checked when the config is built."""
        with pytest.raises(ConfigurationError, match="must be a number"):
            rule_factory.create(values={"age": 5}, fields={"age": {"validators": [options]}})

    def test_fields_must_be_mapping(self):
        """Test a list where the field mapping belongs."""
        with pytest.raises(ConfigurationError, match="'fields' must be a mapping"):
            rule_factory.create(fields=[{"name": {"validators": ["required"]}}])

    def test_field_definition_must_be_mapping(self):
        """Test a bare validator list as a field definition."""
        with pytest.raises(ConfigurationError) as exc_info:
            rule_factory.create(fields={"name": ["required"]})

        assert exc_info.value.context["field"] == "name"

    def test_register_custom_type(self):
        """Test registering a custom validator builder."""
        factory = RuleFactory()
        factory.register(
            "even",
            lambda value, spec: lambda: "" if value % 2 == 0 else "$name 必须是偶数",
        )
        config = factory.create(values={"n": 3}, fields={"n": {"validators": ["even"]}})

        assert "even" in factory.available_types()
        assert "even" not in rule_factory.available_types()
        assert run_with_config(None, config).errors == {"n": ["n 必须是偶数"]}


class TestLoadConfig:
    """Test loading rule files."""

    def test_load_yaml(self, rules_yaml):
        """Test loading a YAML rule file."""
        config = load_config(rules_yaml, values={"name": "ab", "age": 9})
        errors, ok = run_with_config(None, config)

        assert ok is False
        assert errors == {
            "name": ["用户名至少 3 个字符"],
            "age": ["age 不能小于 10"],
        }

    def test_load_json(self, tmp_path):
        """Test loading a JSON rule file."""
        path = tmp_path / "rules.json"
        path.write_text(json.dumps(RULES, ensure_ascii=False), encoding="utf-8")

        config = load_config(str(path), values={"name": "abcd", "age": 50})
        assert run_with_config(None, config)

    def test_empty_file(self, tmp_path):
        """Test that an empty YAML file is an empty config."""
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_config(path).validators == {}

    def test_missing_file(self, tmp_path):
        """Test a missing file."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path):
        """Test an unsupported file format."""
        path = tmp_path / "rules.toml"
        path.write_text("strict = true\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            load_config(path)

    def test_non_mapping_root(self, tmp_path):
        """Test a file whose root is not a mapping."""
        path = tmp_path / "rules.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_reserved_values_key(self, tmp_path):
        """Test a rule file declaring a top-level values key."""
        path = tmp_path / "rules.yaml"
        path.write_text("values: 1\nfields: {}\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="reserved"):
            load_config(path, values={})
