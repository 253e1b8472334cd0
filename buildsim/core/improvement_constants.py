"""Improvement constants - single source of truth for renovation policies.

Every improvement variant turns its parameter into a boost with
``min(parameter * rate, MAX_BOOST)`` and scales that boost into an
attribute increment. Cost grows linearly with the parameter.
"""

from typing import TypedDict


class BoostPolicy(TypedDict):
    """Type definition for a single boosted attribute."""
    rate: float
    scale: float


class ImprovementPolicy(TypedDict, total=False):
    """Type definition for one improvement variant."""
    efficiency: BoostPolicy
    aesthetic: BoostPolicy
    unit_cost: float


# Boost factors never exceed this value
MAX_BOOST = 1.0

# Upper bound on efficiency under the capped policy
DEFAULT_EFFICIENCY_CAP = 100.0

# Improvement kind tags
SOLAR_PANELS = "solar_panels"
FACADE_RENOVATION = "facade_renovation"
INSULATION_UPGRADE = "insulation_upgrade"
WINDOW_REPLACEMENT = "window_replacement"
GREEN_ROOF = "green_roof"

IMPROVEMENT_POLICIES: dict[str, ImprovementPolicy] = {
    SOLAR_PANELS: {
        "efficiency": {"rate": 0.02, "scale": 20.0},
        "unit_cost": 100.0,          # per sqm of panel
    },
    FACADE_RENOVATION: {
        "aesthetic": {"rate": 0.1, "scale": 15.0},
        "unit_cost": 500.0,          # per quality level
    },
    INSULATION_UPGRADE: {
        "efficiency": {"rate": 0.15, "scale": 25.0},
        "unit_cost": 400.0,          # per insulation level
    },
    WINDOW_REPLACEMENT: {
        "efficiency": {"rate": 0.05, "scale": 10.0},
        "aesthetic": {"rate": 0.05, "scale": 5.0},
        "unit_cost": 300.0,          # per window
    },
    GREEN_ROOF: {
        "efficiency": {"rate": 0.03, "scale": 15.0},
        "aesthetic": {"rate": 0.02, "scale": 10.0},
        "unit_cost": 200.0,          # per sqm of roof
    },
}


def get_policy(kind: str) -> ImprovementPolicy:
    """Look up the policy of an improvement kind.

    Args:
        kind: Improvement kind tag

    Returns:
        Policy dictionary, raises KeyError for unknown kinds
    """
    return IMPROVEMENT_POLICIES[kind]
