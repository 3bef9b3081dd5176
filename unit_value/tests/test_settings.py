import json
import logging
from pathlib import Path

import pytest

from unit_value.constants import Unit
from unit_value.services.settings import (
    SETTINGS_FILE,
    SETTINGS_PATH_ENV_VAR,
    UnitValueSettings,
    load_settings,
    resolve_settings_path,
)


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "absent.json")

    assert settings == UnitValueSettings()
    config = settings.to_config()
    assert config.initial_value == 0
    assert config.initial_unit is Unit.PERCENT
    assert config.step == 1


def test_load_settings_reads_all_fields(tmp_path: Path) -> None:
    path = tmp_path / SETTINGS_FILE
    path.write_text(
        json.dumps({"value": 640, "unit": "px", "min": 2, "step": 8, "log_level": "debug", "log_retention": 3}),
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings.initial_value == 640
    assert settings.initial_unit is Unit.PIXEL
    assert settings.min_value == 2
    assert settings.step == 8
    assert settings.log_level == "DEBUG"
    assert settings.log_retention == 3


def test_invalid_json_falls_back_with_warning(tmp_path: Path, caplog) -> None:
    path = tmp_path / SETTINGS_FILE
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="UnitValue.Settings"):
        settings = load_settings(path)

    assert settings == UnitValueSettings()
    assert "not valid JSON" in caplog.text


def test_non_object_payload_falls_back(tmp_path: Path) -> None:
    path = tmp_path / SETTINGS_FILE
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_settings(path) == UnitValueSettings()


@pytest.mark.parametrize(
    "payload, field, expected",
    [
        ({"unit": "em"}, "initial_unit", Unit.PERCENT),
        ({"unit": "Pixel"}, "initial_unit", Unit.PIXEL),
        ({"step": 0}, "step", 1.0),
        ({"step": "fast"}, "step", 1.0),
        ({"min": 150}, "min_value", 0.0),
        ({"value": "NaN"}, "initial_value", 0.0),
        ({"log_retention": 99}, "log_retention", 20),
        ({"log_retention": 0}, "log_retention", 1),
        ({"log_level": "  "}, "log_level", None),
    ],
)
def test_from_payload_coerces_bad_fields(payload, field, expected) -> None:
    settings = UnitValueSettings.from_payload(payload)

    assert getattr(settings, field) == expected


def test_to_config_clamps_percent_value() -> None:
    settings = UnitValueSettings.from_payload({"value": 400, "unit": "%"})

    assert settings.to_config().initial_value == 100


def test_settings_path_env_override(tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "custom.json"
    monkeypatch.setenv(SETTINGS_PATH_ENV_VAR, str(target))

    assert resolve_settings_path() == target
    assert resolve_settings_path(tmp_path / "explicit.json") == tmp_path / "explicit.json"


def test_settings_path_defaults_to_root(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(SETTINGS_PATH_ENV_VAR, raising=False)

    assert resolve_settings_path(root=tmp_path) == tmp_path / SETTINGS_FILE
