"""Workspace configuration support for the viewforge CLI."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    tomllib = None  # type: ignore

from .constants import DEFAULT_CONTAINER_ID, DEFAULT_URL_PREFIX, DEFAULT_VERSION
from .errors import ConfigError

CONFIG_FILE_NAMES = ("viewforge.toml", ".viewforgerc")
LOG_LEVEL_ENV_VAR = "VIEWFORGE_LOG_LEVEL"


@dataclass
class BuildDefaults:
    """Build settings applied when the command line does not override them."""

    out_dir: Path = Path("build")
    version: str = DEFAULT_VERSION
    url_prefix: str = DEFAULT_URL_PREFIX
    container_id: str = DEFAULT_CONTAINER_ID
    clean: bool = True
    archive: bool = False


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    build: BuildDefaults = field(default_factory=BuildDefaults)
    libraries: Dict[str, str] = field(default_factory=dict)
    config_path: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict)


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc


def _read_toml_config(path: Path) -> Dict[str, Any]:
    if tomllib is None:
        raise ConfigError("TOML parsing requires Python 3.11 or later.", hint="Use a JSON .viewforgerc instead.")
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _parse_bool(section: Dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"[build] {key} must be true or false, got {value!r}")
    return value


def _parse_build(data: Dict[str, Any], root: Path) -> BuildDefaults:
    section = data.get("build") or {}
    if not isinstance(section, dict):
        raise ConfigError("[build] must be a table")

    out_dir = Path(section.get("out_dir") or BuildDefaults.out_dir)
    if not out_dir.is_absolute():
        out_dir = (root / out_dir).resolve()

    return BuildDefaults(
        out_dir=out_dir,
        version=str(section.get("version") or BuildDefaults.version),
        url_prefix=str(section.get("url_prefix") or BuildDefaults.url_prefix),
        container_id=str(section.get("container_id") or BuildDefaults.container_id),
        clean=_parse_bool(section, "clean", BuildDefaults.clean),
        archive=_parse_bool(section, "archive", BuildDefaults.archive),
    )


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        if explicit is not None:
            raise ConfigError(f"Config file not found: {explicit}")
        return WorkspaceConfig(root=root, build=BuildDefaults(out_dir=(root / BuildDefaults.out_dir).resolve()))

    if config_path.suffix == ".toml":
        data = _read_toml_config(config_path)
    else:
        data = _read_json_config(config_path)

    libraries = data.get("libraries") or {}
    if not isinstance(libraries, dict):
        raise ConfigError("[libraries] must map component namespaces to import modules")

    return WorkspaceConfig(
        root=root,
        build=_parse_build(data, root),
        libraries={str(key): str(value) for key, value in libraries.items()},
        config_path=config_path,
        raw=data,
    )


def env_log_level() -> Optional[str]:
    return os.environ.get(LOG_LEVEL_ENV_VAR)


__all__ = [
    "BuildDefaults",
    "WorkspaceConfig",
    "CONFIG_FILE_NAMES",
    "LOG_LEVEL_ENV_VAR",
    "locate_config_file",
    "load_workspace_config",
    "env_log_level",
]
