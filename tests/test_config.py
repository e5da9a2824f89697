import sys
from pathlib import Path

import pytest
import yaml

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
from employee_registry.config import RegistryConfig, load_registry_config  # noqa: E402
from employee_registry.constants import DEFAULT_DEPARTMENTS  # noqa: E402
from employee_registry.storage import JsonFileStorage  # noqa: E402


def test_missing_config_uses_defaults(tmp_path):
    config = load_registry_config(tmp_path / "absent.yaml")
    assert config == RegistryConfig()
    assert config.departments == DEFAULT_DEPARTMENTS
    assert config.autosave_interval == 30.0


def test_config_values_and_relative_storage_path(tmp_path):
    config_path = tmp_path / "configs" / "registry.yaml"
    config_path.parent.mkdir()
    config_path.write_text(
        yaml.safe_dump(
            {
                "storage": {"path": "../data/staff.json", "key": "staff"},
                "autosave": {"interval_seconds": 5},
                "departments": ["Ops", "Legal"],
                "id_prefix": "ACME",
                "logging": {"level": "debug"},
            }
        )
    )

    config = load_registry_config(config_path)

    assert config.storage.path == (tmp_path / "data" / "staff.json").resolve()
    assert config.storage.key == "staff"
    assert isinstance(config.storage.open(), JsonFileStorage)
    assert config.autosave_interval == 5.0
    assert config.departments == ("Ops", "Legal")
    assert config.id_prefix == "ACME"
    assert config.log_level == "debug"


def test_empty_config_file_uses_defaults(tmp_path):
    config_path = tmp_path / "registry.yaml"
    config_path.write_text("")

    config = load_registry_config(config_path)

    assert config.storage.key == "employees"
    assert config.storage.path.name == "employees.json"


def test_non_positive_autosave_interval_is_rejected(tmp_path):
    config_path = tmp_path / "registry.yaml"
    config_path.write_text(yaml.safe_dump({"autosave": {"interval_seconds": 0}}))

    with pytest.raises(ValueError):
        load_registry_config(config_path)


def test_shipped_config_is_valid():
    shipped = Path(__file__).resolve().parents[1] / "configs" / "registry.yaml"
    config = load_registry_config(shipped)
    assert config.storage.key == "employees"
    assert "IT" in config.departments
