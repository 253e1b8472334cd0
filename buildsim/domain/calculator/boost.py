"""Boost and cost arithmetic for renovation improvements.

Contains the bounded boost formula shared by every improvement variant
and the plan-level cost estimate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from buildsim.core.improvement_constants import MAX_BOOST

if TYPE_CHECKING:
    from buildsim.domain.models.improvement import Improvement


def calculate_boost(parameter: float, rate: float, ceiling: float = MAX_BOOST) -> float:
    """Convert an improvement parameter into a bounded boost factor.

    Args:
        parameter: Area, quality level or count of the improvement
        rate: Boost gained per unit of parameter
        ceiling: Upper bound of the factor (defaults to MAX_BOOST)

    Returns:
        min(parameter * rate, ceiling)
    """
    return min(parameter * rate, ceiling)


def calculate_cost_delta(parameter: float, unit_cost: float) -> float:
    """Cost added by an improvement (linear in its parameter)."""
    return parameter * unit_cost


def estimate_plan_cost(plan: Iterable[Improvement]) -> float:
    """Total cost a renovation plan adds to a building.

    Cost deltas do not depend on building state, so the estimate is exact
    and independent of the application order.

    Args:
        plan: Ordered improvements

    Returns:
        Sum of every improvement's cost delta
    """
    return sum((improvement.effect().cost for improvement in plan), 0.0)
