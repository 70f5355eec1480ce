from __future__ import annotations

import re
from pathlib import Path

from autoinventory.config.unit_weight_config import (
    DeploymentConfig,
    load_deployment_config,
    profiles_dir,
)

_PROFILE_RE = re.compile(r"^[a-z0-9_]+$")


class ConfigResolutionError(ValueError):
    pass


def available_profiles(directory: Path | None = None) -> list[str]:
    base = directory if directory is not None else profiles_dir()
    return sorted(p.stem for p in base.glob("*.json") if p.is_file())


def resolve_profile(profile: str, directory: Path | None = None) -> Path:
    if not _PROFILE_RE.match(profile):
        raise ConfigResolutionError("Unsupported profile name format")
    base = directory if directory is not None else profiles_dir()
    path = base / f"{profile}.json"
    if not path.exists():
        raise ConfigResolutionError(f"Unknown profile: {profile}")
    return path


def load_profile(profile: str, directory: Path | None = None) -> DeploymentConfig:
    path = resolve_profile(profile, directory=directory)
    config = load_deployment_config(path)
    if config.profile_id != profile:
        raise ValueError(
            f"profile_id mismatch: requested '{profile}', config has '{config.profile_id}'"
        )
    return config
