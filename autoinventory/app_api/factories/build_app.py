"""Construct a fully wired app instance for running verification cycles.

Responsibilities:
  - Assemble resolver, interval gate and ports from a deployment config.
Must not:
  - Implement resolution or cycle logic; composition only.
"""

from __future__ import annotations

from autoinventory.app_api.facade import InventoryApplication
from autoinventory.app_api.ports import Alarm, Clock, DisplaySink, ReadingSource, Tare
from autoinventory.config.unit_weight_config import DeploymentConfig
from autoinventory.core.engine.interval_gate import IntervalGate
from autoinventory.core.resolvers.factory import build_resolver


def build_inventory_app(
    config: DeploymentConfig,
    source: ReadingSource,
    display: DisplaySink,
    alarm: Alarm,
    tare: Tare,
    clock: Clock,
) -> InventoryApplication:
    """
    Composition root: bind the unit weight table into a resolver and wire the
    ports into the application facade.
    """
    resolver = build_resolver(config.table)
    return InventoryApplication(
        resolver=resolver,
        source=source,
        display=display,
        alarm=alarm,
        tare=tare,
        clock=clock,
        gate=IntervalGate(config.interval_ms),
        labels=config.table.labels(),
    )
