from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from autoinventory.core.domain.unit_weights import UnitWeightTable

DEFAULT_INTERVAL_MS = 500


@dataclass(frozen=True)
class DeploymentConfig:
    profile_id: str
    description: str
    table: UnitWeightTable
    interval_ms: int


def profiles_dir() -> Path:
    return Path(__file__).resolve().parent / "profiles"


def _require(payload: dict[str, Any], key: str, expected_type: type) -> Any:
    if key not in payload:
        raise ValueError(f"Missing required field '{key}' in deployment config")
    value = payload[key]
    if expected_type is int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Field '{key}' must be int")
        return value
    if not isinstance(value, expected_type):
        raise ValueError(f"Field '{key}' must be {expected_type.__name__}")
    return value


def _int_list(payload: dict[str, Any], key: str) -> tuple[int, ...]:
    raw = _require(payload, key, list)
    values = []
    for item in raw:
        if not isinstance(item, int) or isinstance(item, bool):
            raise ValueError(f"Field '{key}' must contain only int values")
        values.append(item)
    return tuple(values)


def parse_deployment_config(payload: Any) -> DeploymentConfig:
    if not isinstance(payload, dict):
        raise ValueError("Deployment config must be a JSON object")

    labels: tuple[str, ...] = ()
    if "class_labels" in payload:
        raw_labels = _require(payload, "class_labels", list)
        if not all(isinstance(label, str) and label.strip() for label in raw_labels):
            raise ValueError("Field 'class_labels' must contain non-empty strings")
        labels = tuple(label.strip() for label in raw_labels)

    interval_ms = DEFAULT_INTERVAL_MS
    if "interval_ms" in payload:
        interval_ms = _require(payload, "interval_ms", int)
        if interval_ms <= 0:
            raise ValueError("Field 'interval_ms' must be > 0")

    table = UnitWeightTable(
        resolver=_require(payload, "resolver", str),
        unit_weights=_int_list(payload, "unit_weights"),
        tolerance=_require(payload, "tolerance", int),
        class_labels=labels,
    )
    table.validate()

    return DeploymentConfig(
        profile_id=_require(payload, "profile_id", str),
        description=payload.get("description", ""),
        table=table,
        interval_ms=interval_ms,
    )


def load_deployment_config(path: Path) -> DeploymentConfig:
    if not path.exists():
        raise ValueError(f"Deployment config not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Deployment config is not valid JSON: {path}") from exc
    return parse_deployment_config(payload)
