"""Improvement data models.

An improvement is a parameterised renovation action. It turns its fixed
parameter (area, quality level or window count) into bounded boosts for
efficiency and/or aesthetic value and adds a per-unit cost to a building.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, Field

from buildsim.core.improvement_constants import (
    FACADE_RENOVATION,
    GREEN_ROOF,
    INSULATION_UPGRADE,
    SOLAR_PANELS,
    WINDOW_REPLACEMENT,
    get_policy,
)
from buildsim.domain.calculator.boost import calculate_boost, calculate_cost_delta

if TYPE_CHECKING:
    from buildsim.domain.models.building import Building


@dataclass(frozen=True)
class ImprovementEffect:
    """Attribute increments requested by one improvement.

    None means the improvement leaves that attribute alone.
    """

    cost: float
    efficiency: float | None = None
    aesthetic: float | None = None


class Improvement(BaseModel, ABC):
    """Base class for renovation improvements.

    Parameters are fixed at construction; instances are frozen.
    """

    kind: ClassVar[str]

    model_config = {
        "frozen": True,
    }

    @property
    @abstractmethod
    def parameter(self) -> float:
        """Quantity driving both the boost and the cost."""

    @abstractmethod
    def description(self) -> str:
        """Human-readable label of the improvement."""

    def boost(self, attribute: str) -> float | None:
        """Bounded boost factor for an attribute, None if not affected."""
        policy = get_policy(self.kind).get(attribute)
        if policy is None:
            return None
        return calculate_boost(self.parameter, policy["rate"])

    def effect(self) -> ImprovementEffect:
        """Compute the increments this improvement requests."""
        policy = get_policy(self.kind)
        deltas: dict[str, float] = {}
        for attribute in ("efficiency", "aesthetic"):
            boost = self.boost(attribute)
            if boost is not None:
                deltas[attribute] = boost * policy[attribute]["scale"]
        return ImprovementEffect(
            cost=calculate_cost_delta(self.parameter, policy["unit_cost"]),
            **deltas,
        )

    def apply(self, building: Building) -> None:
        """Apply the improvement to a building in place.

        Efficiency goes through ``Building.set_efficiency`` so the
        building's cap policy holds; aesthetic and cost are plain writes.
        """
        effect = self.effect()
        if effect.efficiency is not None:
            building.set_efficiency(building.efficiency + effect.efficiency)
        if effect.aesthetic is not None:
            building.aesthetic = building.aesthetic + effect.aesthetic
        building.cost = building.cost + effect.cost


class SolarPanels(Improvement):
    """Solar panels: efficiency boost, priced per sqm."""

    kind: ClassVar[str] = SOLAR_PANELS

    area: int = Field(..., ge=0, description="Panel area in sqm")

    @property
    def parameter(self) -> float:
        return self.area

    def description(self) -> str:
        return f"Solar Panels with area {self.area} sqm"


class FacadeRenovation(Improvement):
    """Facade renovation: aesthetic boost, priced per quality level."""

    kind: ClassVar[str] = FACADE_RENOVATION

    level: int = Field(..., ge=0, description="Quality level")

    @property
    def parameter(self) -> float:
        return self.level

    def description(self) -> str:
        return f"Facade Renovation with quality level {self.level}"


class InsulationUpgrade(Improvement):
    """Insulation upgrade: efficiency boost, priced per level."""

    kind: ClassVar[str] = INSULATION_UPGRADE

    level: int = Field(..., ge=0, description="Insulation level")

    @property
    def parameter(self) -> float:
        return self.level

    def description(self) -> str:
        return f"Insulation Upgrade with level {self.level}"


class WindowReplacement(Improvement):
    """Window replacement: efficiency and aesthetic boost, priced per window."""

    kind: ClassVar[str] = WINDOW_REPLACEMENT

    count: int = Field(..., ge=0, description="Number of windows replaced")

    @property
    def parameter(self) -> float:
        return self.count

    def description(self) -> str:
        return f"Window Replacement of {self.count} windows"


class GreenRoof(Improvement):
    """Green roof: separate efficiency and aesthetic boosts, priced per sqm."""

    kind: ClassVar[str] = GREEN_ROOF

    area: float = Field(..., ge=0, description="Roof area in sqm")

    @property
    def parameter(self) -> float:
        return self.area

    def description(self) -> str:
        return f"Green Roof with area {self.area:.6f} sqm"
