"""Renovation engine.

Applies a building's renovation plan step by step and records what each
improvement changed, so capped efficiency gains can be inspected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pandas as pd

from buildsim.core.logging import get_logger
from buildsim.domain.models.building import Building

log = get_logger(__name__)

# Float noise below this is not reported as clipping
CLIP_TOLERANCE = 1e-9

STEP_COLUMNS = [
    "Step",
    "Improvement",
    "Description",
    "Efficiency Requested",
    "Efficiency Applied",
    "Aesthetic Added",
    "Cost Added",
    "Efficiency",
    "Aesthetic",
    "Cost",
    "Efficiency Clipped",
]


@dataclass
class StepResult:
    """Single improvement application result."""

    step: int
    kind: str
    description: str
    efficiency_requested: float
    efficiency_applied: float
    aesthetic_added: float
    cost_added: float
    efficiency: float
    aesthetic: float
    cost: float

    @property
    def efficiency_clipped(self) -> bool:
        return self.efficiency_requested - self.efficiency_applied > CLIP_TOLERANCE

    def to_dict(self) -> dict[str, Any]:
        return {
            "Step": self.step,
            "Improvement": self.kind,
            "Description": self.description,
            "Efficiency Requested": self.efficiency_requested,
            "Efficiency Applied": self.efficiency_applied,
            "Aesthetic Added": self.aesthetic_added,
            "Cost Added": self.cost_added,
            "Efficiency": self.efficiency,
            "Aesthetic": self.aesthetic,
            "Cost": self.cost,
            "Efficiency Clipped": self.efficiency_clipped,
        }


class RenovationEngine:
    """Step-by-step renovation runner.

    Produces the same building state as ``Building.renovate`` plus a
    per-step record and a summary.
    """

    def run(self, building: Building) -> tuple[pd.DataFrame, dict[str, Any]]:
        """Apply the building's plan in order.

        Args:
            building: Building to renovate, mutated in place

        Returns:
            Tuple of (per-step DataFrame, summary dict)
        """
        initial = building.snapshot()
        log.info(
            "renovation_started",
            improvements=len(building.plan),
            efficiency_cap=building.efficiency_cap,
        )

        steps: list[StepResult] = []
        for index, improvement in enumerate(building.plan, start=1):
            before = building.snapshot()
            effect = improvement.effect()
            improvement.apply(building)
            after = building.snapshot()

            step = StepResult(
                step=index,
                kind=improvement.kind,
                description=improvement.description(),
                efficiency_requested=effect.efficiency or 0.0,
                efficiency_applied=after["efficiency"] - before["efficiency"],
                aesthetic_added=after["aesthetic"] - before["aesthetic"],
                cost_added=after["cost"] - before["cost"],
                efficiency=after["efficiency"],
                aesthetic=after["aesthetic"],
                cost=after["cost"],
            )
            steps.append(step)

            log.debug(
                "improvement_applied",
                step=index,
                improvement=step.description,
                efficiency=step.efficiency,
                aesthetic=step.aesthetic,
                cost=step.cost,
            )
            if step.efficiency_clipped:
                log.info(
                    "efficiency_clipped",
                    step=index,
                    requested=step.efficiency_requested,
                    applied=step.efficiency_applied,
                )

        final = building.snapshot()
        summary = {
            "initial": initial,
            "final": final,
            "improvements_applied": len(steps),
            "total_cost_added": final["cost"] - initial["cost"],
            "efficiency_gain": final["efficiency"] - initial["efficiency"],
            "aesthetic_gain": final["aesthetic"] - initial["aesthetic"],
            "clipped_steps": [s.step for s in steps if s.efficiency_clipped],
        }

        log.info(
            "renovation_completed",
            improvements_applied=summary["improvements_applied"],
            total_cost_added=summary["total_cost_added"],
        )

        df = pd.DataFrame([s.to_dict() for s in steps], columns=STEP_COLUMNS)
        return df, summary
