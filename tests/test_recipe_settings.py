"""Tests for settings resolution."""

import pytest

from recipe_errors import ConfigurationError
from recipe_settings import Settings, load_settings


def test_defaults():
    settings = load_settings(environ={})
    assert settings == Settings()
    assert settings.amount_decimals == 2
    assert settings.rounding == "half_up"


def test_yaml_file_overrides(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("amount_decimals: 3\nrounding: half_even\nlog_format: json\n")

    settings = load_settings(config, environ={})

    assert settings.amount_decimals == 3
    assert settings.rounding == "half_even"
    assert settings.log_format == "json"


def test_environment_beats_file(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("amount_decimals: 3\n")

    settings = load_settings(config, environ={"RECIPE_AMOUNT_DECIMALS": "1", "RECIPE_LOG_LEVEL": "debug"})

    assert settings.amount_decimals == 1
    assert settings.log_level == "DEBUG"


def test_empty_file_uses_defaults(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("")
    assert load_settings(config, environ={}) == Settings()


def test_unknown_key_rejected(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("precision: 4\n")
    with pytest.raises(ConfigurationError):
        load_settings(config, environ={})


def test_missing_file_rejected(tmp_path):
    with pytest.raises(ConfigurationError) as excinfo:
        load_settings(tmp_path / "missing.yaml", environ={})
    assert excinfo.value.source.endswith("missing.yaml")


def test_non_mapping_file_rejected(tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigurationError):
        load_settings(config, environ={})


@pytest.mark.parametrize("env", [
    {"RECIPE_ROUNDING": "ceiling"},
    {"RECIPE_AMOUNT_DECIMALS": "two"},
    {"RECIPE_AMOUNT_DECIMALS": "-1"},
    {"RECIPE_AMOUNT_EPSILON": "0.7"},
    {"RECIPE_LOG_FORMAT": "xml"},
])
def test_invalid_values_rejected(env):
    with pytest.raises(ConfigurationError):
        load_settings(environ=env)


@pytest.mark.parametrize("decimals", [11, 30])
def test_amount_decimals_capped(decimals):
    with pytest.raises(ConfigurationError):
        Settings(amount_decimals=decimals)
    with pytest.raises(ConfigurationError):
        load_settings(environ={"RECIPE_AMOUNT_DECIMALS": str(decimals)})


def test_highest_precision_renders():
    from recipe import Recipe

    recipe = Recipe("Tea", 3)
    recipe.add_ingredient("leaves (g)", 1.0 / 3)
    assert recipe.render(Settings(amount_decimals=10)) == "Tea (serves 3)\n- 0.3333333333 leaves (g)\n"
