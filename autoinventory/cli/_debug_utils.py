from __future__ import annotations

import argparse
from pathlib import Path

from autoinventory.config.resolve_profile import load_profile
from autoinventory.config.unit_weight_config import DeploymentConfig, load_deployment_config
from autoinventory.core.engine.result import CycleResult


def _debug_enabled(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "debug", False))


def _dbg(args: argparse.Namespace, msg: str) -> None:
    if _debug_enabled(args):
        print(f"[debug] {msg}")


def add_config_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--profile", help="Bundled deployment profile name")
    group.add_argument("--config", help="Path to a deployment config JSON file")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")


def load_config_from_args(args: argparse.Namespace) -> DeploymentConfig:
    if args.config is not None:
        return load_deployment_config(Path(args.config))
    return load_profile(args.profile)


def format_counts(counts: tuple[int, ...] | None, labels: tuple[str, ...]) -> str:
    if counts is None:
        return "-"
    return ",".join(f"{label}={count}" for label, count in zip(labels, counts))


def format_cycle(result: CycleResult, labels: tuple[str, ...]) -> str:
    reasons = ",".join(r.value for r in result.reasons)
    return (
        f"outcome={result.outcome.value} counts={format_counts(result.counts, labels)} "
        f"readings={result.readings} escalation={int(result.escalation)} reasons={reasons}"
    )
