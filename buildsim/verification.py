"""Scenario Verification Runner.

Runs a fixed set of renovation scenarios against the domain model and
reports pass/fail for each one.

Usage:
    python -m buildsim.verification
"""

from __future__ import annotations

import sys
from typing import Any, Callable

from buildsim.core.exceptions import ScenarioFailure
from buildsim.core.logging import get_logger
from buildsim.domain.models import (
    Building,
    FacadeRenovation,
    GreenRoof,
    InsulationUpgrade,
    SolarPanels,
    WindowReplacement,
)

log = get_logger("scenario_runner")


def check_true(condition: bool, message: str) -> None:
    if not condition:
        raise ScenarioFailure(message)


def check_equal(actual: Any, expected: Any, label: str) -> None:
    if actual != expected:
        raise ScenarioFailure(f"{label}: expected {expected!r}, got {actual!r}")


def facade_renovation_only() -> None:
    b = Building(height=25.0, cost=75000, efficiency=50, aesthetic=40, plan=[FacadeRenovation(level=8)])
    b.renovate()
    check_true(b.aesthetic > 40, "aesthetic should increase")
    check_equal(b.cost, 75000 + 8 * 500, "cost")


def multiple_improvements_cumulative() -> None:
    plan = [SolarPanels(area=30), FacadeRenovation(level=3), SolarPanels(area=20)]
    b = Building(height=35.0, cost=90000, efficiency=55, aesthetic=65, plan=plan)
    b.renovate()
    check_true(b.efficiency > 55, "efficiency should increase")
    check_true(b.aesthetic > 65, "aesthetic should increase")
    check_true(b.cost > 90000, "cost should increase")


def no_improvement_after_delete() -> None:
    plan = [SolarPanels(area=40), FacadeRenovation(level=5)]
    b = Building(height=28.0, cost=85000, efficiency=65, aesthetic=75, plan=plan)
    check_true(b.plan is not plan, "building should own a copy of its plan")
    del b
    check_equal(len(plan), 2, "caller plan length")


def zero_improvement_plan() -> None:
    b = Building(height=40.0, cost=120000, efficiency=75, aesthetic=85, plan=[])
    b.renovate()
    check_equal(b.height, 40.0, "height")
    check_equal(b.cost, 120000, "cost")
    check_equal(b.efficiency, 75, "efficiency")
    check_equal(b.aesthetic, 85, "aesthetic")


def efficiency_cap() -> None:
    b = Building(
        height=20.0, cost=50000, efficiency=80, aesthetic=60,
        plan=[SolarPanels(area=200)], efficiency_cap=100.0,
    )
    b.renovate()
    check_equal(b.efficiency, 100, "efficiency")
    check_equal(b.cost, 50000 + 200 * 100, "cost")


def insulation_upgrade_effect() -> None:
    b = Building(height=22.0, cost=60000, efficiency=60, aesthetic=55, plan=[InsulationUpgrade(level=6)])
    b.renovate()
    check_true(b.efficiency > 60, "efficiency should increase")
    check_equal(b.cost, 60000 + 6 * 400, "cost")


def window_replacement_effect() -> None:
    b = Building(height=30.0, cost=70000, efficiency=70, aesthetic=50, plan=[WindowReplacement(count=10)])
    b.renovate()
    check_true(b.efficiency > 70, "efficiency should increase")
    check_true(b.aesthetic > 50, "aesthetic should increase")
    check_equal(b.cost, 70000 + 10 * 300, "cost")


def green_roof_effect() -> None:
    b = Building(height=18.0, cost=55000, efficiency=65, aesthetic=55, plan=[GreenRoof(area=25.0)])
    b.renovate()
    check_true(b.efficiency > 65, "efficiency should increase")
    check_true(b.aesthetic > 55, "aesthetic should increase")
    check_equal(b.cost, 55000 + 25 * 200, "cost")


SCENARIOS: dict[str, Callable[[], None]] = {
    "FacadeRenovationOnly": facade_renovation_only,
    "MultipleImprovementsCumulative": multiple_improvements_cumulative,
    "NoImprovementAfterDelete": no_improvement_after_delete,
    "ZeroImprovementPlan": zero_improvement_plan,
    "EfficiencyCap": efficiency_cap,
    "InsulationUpgradeEffect": insulation_upgrade_effect,
    "WindowReplacementEffect": window_replacement_effect,
    "GreenRoofEffect": green_roof_effect,
}


def run_scenarios() -> dict[str, bool]:
    log.info("scenario_run_started", count=len(SCENARIOS))

    results: dict[str, bool] = {}
    for name, scenario in SCENARIOS.items():
        try:
            scenario()
        except ScenarioFailure as e:
            results[name] = False
            print(f"[FAIL] BuildingTest.{name}: {e}")
            log.warning("scenario_failed", scenario=name, reason=str(e))
        else:
            results[name] = True
            print(f"[PASS] BuildingTest.{name}")

    passed = sum(results.values())
    log.info("all_scenarios_completed", passed=passed, failed=len(results) - passed)
    return results


def main() -> int:
    results = run_scenarios()
    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
