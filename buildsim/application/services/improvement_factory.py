"""Improvement creation service.

Generates improvements, renovation plans and buildings from plain
dictionaries (e.g. scenario definitions).
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import ValidationError

from buildsim.core.exceptions import InvalidParameterError, UnknownImprovementError
from buildsim.core.logging import get_logger
from buildsim.domain.models.building import Building
from buildsim.domain.models.improvement import (
    FacadeRenovation,
    GreenRoof,
    Improvement,
    InsulationUpgrade,
    SolarPanels,
    WindowReplacement,
)

log = get_logger(__name__)

IMPROVEMENT_TYPES: dict[str, type[Improvement]] = {
    cls.kind: cls
    for cls in (SolarPanels, FacadeRenovation, InsulationUpgrade, WindowReplacement, GreenRoof)
}

# Sentinel so that an explicit efficiency_cap=None selects the uncapped policy
_SETTINGS_CAP = object()


def create_improvement(spec: dict[str, Any]) -> Improvement:
    """Create one improvement from its dictionary form.

    Args:
        spec: Mapping with a 'kind' key plus the variant's parameters,
            e.g. {"kind": "solar_panels", "area": 30}

    Returns:
        Frozen improvement instance
    """
    params = dict(spec)
    kind = params.pop("kind", None)

    improvement_cls = IMPROVEMENT_TYPES.get(kind)
    if improvement_cls is None:
        raise UnknownImprovementError(kind, sorted(IMPROVEMENT_TYPES))

    try:
        return improvement_cls(**params)
    except ValidationError as e:
        error = e.errors()[0]
        param_name = ".".join(str(part) for part in error["loc"]) or kind
        raise InvalidParameterError(
            param_name, params.get(param_name), error["msg"]
        ) from e


def create_renovation_plan(specs: Iterable[dict[str, Any]]) -> list[Improvement]:
    """Create an ordered renovation plan.

    Args:
        specs: Improvement dictionaries in application order

    Returns:
        List of improvements, same order as the input
    """
    return [create_improvement(spec) for spec in specs]


def create_building(
    height: float,
    cost: float,
    efficiency: float,
    aesthetic: float,
    plan_specs: Iterable[dict[str, Any]] = (),
    efficiency_cap: Any = _SETTINGS_CAP,
) -> Building:
    """Create a building with a plan built from dictionaries.

    Args:
        height: Height in m
        cost: Initial cost
        efficiency: Initial efficiency
        aesthetic: Initial aesthetic value
        plan_specs: Improvement dictionaries in application order
        efficiency_cap: Cap override; None for the uncapped policy,
            omitted to use the settings

    Returns:
        Building owning the new plan
    """
    plan = create_renovation_plan(plan_specs)

    fields: dict[str, Any] = {
        "height": height,
        "cost": cost,
        "efficiency": efficiency,
        "aesthetic": aesthetic,
        "plan": plan,
    }
    if efficiency_cap is not _SETTINGS_CAP:
        fields["efficiency_cap"] = efficiency_cap

    building = Building(**fields)
    log.debug(
        "building_created",
        improvements=len(plan),
        efficiency_cap=building.efficiency_cap,
    )
    return building
