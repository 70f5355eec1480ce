from __future__ import annotations

from typing import Callable, Dict

from autoinventory.core.domain.models import ResolutionResult
from autoinventory.core.domain.unit_weights import UnitWeightTable
from autoinventory.core.resolvers.dual_class import resolve_dual
from autoinventory.core.resolvers.single_class import resolve_single

Resolver = Callable[[int], ResolutionResult]


def _build_single(table: UnitWeightTable) -> Resolver:
    (unit_weight,) = table.unit_weights
    tolerance = table.tolerance

    def resolver(reading: int) -> ResolutionResult:
        return resolve_single(reading, unit_weight, tolerance)

    return resolver


def _build_dual(table: UnitWeightTable) -> Resolver:
    w1, w2 = table.unit_weights
    tolerance = table.tolerance

    def resolver(reading: int) -> ResolutionResult:
        return resolve_dual(reading, w1, w2, tolerance)

    return resolver


class ResolverFactory:
    def __init__(self) -> None:
        self._registry: Dict[str, Callable[[UnitWeightTable], Resolver]] = {}

    def register(self, resolver_id: str, builder: Callable[[UnitWeightTable], Resolver]) -> None:
        self._registry[resolver_id] = builder

    def create(self, table: UnitWeightTable) -> Resolver:
        if table.resolver not in self._registry:
            raise ValueError(f"Unknown resolver id: {table.resolver}")
        table.validate()
        return self._registry[table.resolver](table)


default_resolver_factory = ResolverFactory()
default_resolver_factory.register("single_class", _build_single)
default_resolver_factory.register("dual_class", _build_dual)


def build_resolver(table: UnitWeightTable) -> Resolver:
    return default_resolver_factory.create(table)


__all__ = ["Resolver", "ResolverFactory", "build_resolver", "default_resolver_factory"]
