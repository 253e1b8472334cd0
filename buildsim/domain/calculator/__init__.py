"""Renovation calculators."""

from .boost import calculate_boost, calculate_cost_delta, estimate_plan_cost

__all__ = [
    "calculate_boost",
    "calculate_cost_delta",
    "estimate_plan_cost",
]
