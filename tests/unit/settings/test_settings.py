import pytest
import yaml

from octo.constants import OCTO_SETTINGS_OPTIONAL, BlueprintSchema
from octo.exceptions import SettingsError
from octo.settings import OctoSettings


@pytest.fixture(autouse=True)
def isolated_settings_env(tmp_path, monkeypatch):
    """Run every test in an empty directory without Octo environment variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("OCTO_SETTINGS", raising=False)
    for key in OCTO_SETTINGS_OPTIONAL:
        monkeypatch.delenv(f"OCTO_SETTINGS_{key.upper()}", raising=False)


def test_defaults():
    settings = OctoSettings()

    for key, default in OCTO_SETTINGS_OPTIONAL.items():
        assert getattr(settings, key) == default


def test_settings_load_without_file_uses_defaults():
    """The default settings file is optional."""
    settings = OctoSettings.load()

    assert settings.blueprint_file == ".octo.yaml"
    assert settings.settings_file is None


def test_settings_load_default_file(tmp_path):
    (tmp_path / "octo.yaml").write_text(yaml.dump({"read_schema": "legacy"}))

    settings = OctoSettings.load()

    assert settings.read_schema is BlueprintSchema.LEGACY
    assert settings.settings_file == str(tmp_path / "octo.yaml")


def test_settings_load_successful_load(tmp_path):
    settings_file = tmp_path / "custom.yaml"
    settings_file.write_text(yaml.dump({"blueprint_file": "bp.yaml", "overwrite": False}))

    settings = OctoSettings.load(str(settings_file))

    assert settings.blueprint_file == "bp.yaml"
    assert settings.overwrite is False


def test_settings_load_from_env_var_path(tmp_path, monkeypatch):
    settings_file = tmp_path / "from_env.yaml"
    settings_file.write_text(yaml.dump({"write_schema": "legacy"}))
    monkeypatch.setenv("OCTO_SETTINGS", str(settings_file))

    assert OctoSettings.load().write_schema is BlueprintSchema.LEGACY


def test_settings_load_file_not_found():
    with pytest.raises(SettingsError, match="Settings file not found"):
        OctoSettings.load("nonexistent.yaml")


def test_settings_load_env_var_file_not_found(monkeypatch):
    monkeypatch.setenv("OCTO_SETTINGS", "missing.yaml")

    with pytest.raises(SettingsError, match="Settings file not found"):
        OctoSettings.load()


def test_settings_load_invalid_yaml(tmp_path):
    settings_file = tmp_path / "bad_settings.yaml"
    settings_file.write_text("invalid: yaml: content:")

    with pytest.raises(SettingsError, match="Failed to load settings"):
        OctoSettings.load(str(settings_file))


def test_settings_load_not_a_dictionary(tmp_path):
    settings_file = tmp_path / "list.yaml"
    settings_file.write_text("- one\n- two\n")

    with pytest.raises(SettingsError, match="must contain a YAML dictionary"):
        OctoSettings.load(str(settings_file))


def test_settings_load_unknown_setting(tmp_path):
    settings_file = tmp_path / "typo.yaml"
    settings_file.write_text(yaml.dump({"blueprint_fle": "x.yaml"}))

    with pytest.raises(SettingsError, match="Invalid settings"):
        OctoSettings.load(str(settings_file))


def test_settings_load_with_overrides(tmp_path):
    settings_file = tmp_path / "octo.yaml"
    settings_file.write_text(yaml.dump({"read_schema": "legacy"}))

    settings = OctoSettings.load(str(settings_file), read_schema="current")

    assert settings.read_schema is BlueprintSchema.CURRENT


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("OCTO_SETTINGS_READ_SCHEMA", "current")
    monkeypatch.setenv("OCTO_SETTINGS_OVERWRITE", "false")

    settings = OctoSettings.load()

    assert settings.read_schema is BlueprintSchema.CURRENT
    assert settings.overwrite is False


def test_file_values_beat_environment(tmp_path, monkeypatch):
    (tmp_path / "octo.yaml").write_text(yaml.dump({"blueprint_file": "from_file.yaml"}))
    monkeypatch.setenv("OCTO_SETTINGS_BLUEPRINT_FILE", "from_env.yaml")

    assert OctoSettings.load().blueprint_file == "from_file.yaml"


@pytest.mark.parametrize("value, expected", [("Legacy", BlueprintSchema.LEGACY), ("AUTO", BlueprintSchema.AUTO)])
def test_validate_schema_case_insensitive(value, expected):
    assert OctoSettings(read_schema=value).read_schema is expected


def test_validate_schema_invalid():
    with pytest.raises(ValueError, match="Invalid blueprint schema"):
        OctoSettings(read_schema="xml")


def test_write_schema_auto_rejected():
    with pytest.raises(SettingsError, match="write_schema"):
        OctoSettings.load(write_schema="auto")


def test_as_dict():
    assert OctoSettings().as_dict == {
        "blueprint_file": ".octo.yaml",
        "read_schema": "auto",
        "write_schema": "current",
        "overwrite": True,
    }
