"""Building data model.

A building carries four numeric attributes and owns the ordered
renovation plan that mutates them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, SerializeAsAny, field_validator

from buildsim.core.settings import get_settings
from buildsim.domain.models.improvement import Improvement


def _default_efficiency_cap() -> float | None:
    return get_settings().effective_efficiency_cap


class Building(BaseModel):
    """Building with its renovation plan.

    Attributes are stored verbatim at construction. Efficiency updates go
    through ``set_efficiency``: with a numeric ``efficiency_cap`` they are
    clamped to it, with ``efficiency_cap=None`` they are stored as given.
    """

    height: float = Field(..., description="Height in m")
    cost: float = Field(..., description="Accumulated cost")
    efficiency: float = Field(..., description="Energy efficiency, conceptually 0-100")
    aesthetic: float = Field(..., description="Aesthetic value")

    # Owned by the building, see copy_plan
    plan: list[SerializeAsAny[Improvement]] = Field(
        default_factory=list, description="Renovation plan, applied in order"
    )

    efficiency_cap: float | None = Field(
        default_factory=_default_efficiency_cap,
        description="Efficiency upper bound, None for the uncapped policy",
    )

    @field_validator("plan")
    @classmethod
    def copy_plan(cls, v: list[Improvement]) -> list[Improvement]:
        """Keep a private copy of the caller's list."""
        return list(v)

    def set_efficiency(self, value: float) -> None:
        """Store a new efficiency according to the cap policy."""
        if self.efficiency_cap is not None:
            value = min(value, self.efficiency_cap)
        self.efficiency = value

    def renovate(self) -> None:
        """Apply every improvement of the plan in list order."""
        for improvement in self.plan:
            improvement.apply(self)

    def snapshot(self) -> dict[str, float]:
        """Current values of the four numeric attributes."""
        return {
            "height": self.height,
            "cost": self.cost,
            "efficiency": self.efficiency,
            "aesthetic": self.aesthetic,
        }

    def describe_plan(self) -> list[str]:
        """Descriptions of the plan entries, in application order."""
        return [improvement.description() for improvement in self.plan]
