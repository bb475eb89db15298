import logging
import os
from typing import Any

import yaml

from l10nstatus.classes import DEFAULT_INCLUDES, Project, ResourceDirectory
from l10nstatus.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LOGGING = {
    "level": "INFO",
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "datefmt": "%Y-%m-%d %H:%M:%S",
}


def load_config(config_folder: str) -> dict[str, Any]:
    config_file_path = os.path.abspath(os.path.join(config_folder, "config.yml"))

    config: dict[str, Any] = {}
    try:
        with open(config_file_path, "r", encoding="utf-8") as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        logger.warning(f"Config file not found: {config_file_path}, using defaults")
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid config file {config_file_path}: {exc}")

    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {config_file_path} must hold a mapping")
    return config


def setup_logging(config: dict[str, Any]) -> None:
    settings = {**DEFAULT_LOGGING, **(config.get("logging") or {})}
    logging.basicConfig(
        level=logging.getLevelName(str(settings["level"]).upper()),
        format=settings["format"],
        datefmt=settings["datefmt"],
    )


def _resource(raw: Any) -> ResourceDirectory:
    if isinstance(raw, str):
        return ResourceDirectory(raw)
    if not isinstance(raw, dict) or "directory" not in raw:
        raise ConfigurationError(f"Resource entry needs a directory: {raw!r}")
    return ResourceDirectory(
        str(raw["directory"]),
        list(raw.get("includes") or DEFAULT_INCLUDES),
        list(raw.get("excludes") or []),
    )


def parse_projects(report_cfg: dict[str, Any]) -> list[Project]:
    projects = []
    for index, raw in enumerate(report_cfg.get("projects") or []):
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Project entry must be a mapping: {raw!r}")
        name = str(raw.get("name") or f"project-{index + 1}")
        projects.append(
            Project(name, [_resource(r) for r in raw.get("resources") or []])
        )
    return projects
