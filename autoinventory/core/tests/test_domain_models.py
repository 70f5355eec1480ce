from __future__ import annotations

import pytest

from autoinventory.core.domain.enums import REASON_METADATA, ReasonCode, reason_message
from autoinventory.core.domain.models import ResolutionResult
from autoinventory.core.domain.unit_weights import UnitWeightTable


def test_reason_metadata_complete() -> None:
    assert set(REASON_METADATA) == set(ReasonCode)
    assert reason_message(ReasonCode.NEGATIVE_READING).startswith("Reading was negative")


def test_resolution_result_is_all_or_nothing() -> None:
    with pytest.raises(ValueError):
        ResolutionResult(counts=None, reading=10, total=10)
    with pytest.raises(ValueError):
        ResolutionResult(counts=(), reading=10, total=0)
    with pytest.raises(ValueError):
        ResolutionResult(counts=(-1,), reading=10, total=0)

    unresolved = ResolutionResult.unresolved(10)
    assert not unresolved.resolved
    assert unresolved.deviation is None


@pytest.mark.parametrize(
    "table",
    [
        UnitWeightTable(resolver="single_class", unit_weights=(0,), tolerance=3),
        UnitWeightTable(resolver="single_class", unit_weights=(70, 85), tolerance=3),
        UnitWeightTable(resolver="dual_class", unit_weights=(70,), tolerance=3),
        UnitWeightTable(resolver="dual_class", unit_weights=(70, -85), tolerance=3),
        UnitWeightTable(resolver="dual_class", unit_weights=(70, 85), tolerance=-1),
        UnitWeightTable(resolver="dual_class", unit_weights=(70, 85), tolerance=3, class_labels=("new",)),
        UnitWeightTable(resolver="triple_class", unit_weights=(1, 2, 3), tolerance=0),  # type: ignore[arg-type]
    ],
)
def test_unit_weight_table_rejects_invalid(table: UnitWeightTable) -> None:
    with pytest.raises(ValueError):
        table.validate()


def test_default_labels() -> None:
    table = UnitWeightTable(resolver="dual_class", unit_weights=(70, 85), tolerance=3)

    assert table.labels() == ("class1", "class2")
