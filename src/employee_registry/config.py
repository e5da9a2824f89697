"""Loading of the registry configuration from ``configs/registry.yaml``."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from .constants import AUTOSAVE_INTERVAL_SECONDS, DEFAULT_DEPARTMENTS, EMPLOYEE_ID_PREFIX, STORAGE_KEY
from .logging_utils import get_logger
from .storage import JsonFileStorage

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "configs" / "registry.yaml"
DEFAULT_STORAGE_PATH = PROJECT_ROOT / "data" / "employees.json"


@dataclass(frozen=True)
class StorageConfig:
    path: Path = DEFAULT_STORAGE_PATH
    key: str = STORAGE_KEY

    def open(self) -> JsonFileStorage:
        return JsonFileStorage(self.path)


@dataclass(frozen=True)
class RegistryConfig:
    """Settings shared by the CLI and the Streamlit page.

    Attributes
    ----------
    storage:
        Where the employee list is persisted.
    autosave_interval:
        Seconds between background saves.
    departments:
        Choices offered for the department field and filter.
    id_prefix:
        Prefix for generated employee ids.
    log_level:
        Level name passed to ``configure_logging``.
    """

    storage: StorageConfig = field(default_factory=StorageConfig)
    autosave_interval: float = AUTOSAVE_INTERVAL_SECONDS
    departments: Tuple[str, ...] = DEFAULT_DEPARTMENTS
    id_prefix: str = EMPLOYEE_ID_PREFIX
    log_level: str = "INFO"


def _resolve_path(base_path: Path, path_str: str) -> Path:
    path = Path(path_str).expanduser()
    if path.is_absolute():
        return path
    return (base_path / path).resolve()


def load_registry_config(config_path: Path = DEFAULT_CONFIG_PATH) -> RegistryConfig:
    """Read the registry configuration, falling back to defaults.

    Relative storage paths are resolved against the directory holding the
    configuration file.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        logger.warning("Registry config not found at %s, using defaults", config_path)
        return RegistryConfig()

    config_data: Dict[str, Any] = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}

    storage_section = config_data.get("storage") or {}
    storage = StorageConfig(
        path=_resolve_path(config_path.parent, storage_section.get("path", str(DEFAULT_STORAGE_PATH))),
        key=storage_section.get("key", STORAGE_KEY),
    )

    autosave_section = config_data.get("autosave") or {}
    interval = float(autosave_section.get("interval_seconds", AUTOSAVE_INTERVAL_SECONDS))
    if interval <= 0:
        raise ValueError("autosave.interval_seconds must be positive")

    departments = tuple(config_data.get("departments") or DEFAULT_DEPARTMENTS)
    logging_section = config_data.get("logging") or {}

    return RegistryConfig(
        storage=storage,
        autosave_interval=interval,
        departments=departments,
        id_prefix=config_data.get("id_prefix", EMPLOYEE_ID_PREFIX),
        log_level=str(logging_section.get("level", "INFO")),
    )


__all__ = ["DEFAULT_CONFIG_PATH", "RegistryConfig", "StorageConfig", "load_registry_config"]
