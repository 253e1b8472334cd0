"""Data models for buildsim."""

from .building import Building
from .improvement import (
    FacadeRenovation,
    GreenRoof,
    Improvement,
    ImprovementEffect,
    InsulationUpgrade,
    SolarPanels,
    WindowReplacement,
)

__all__ = [
    "Building",
    "Improvement",
    "ImprovementEffect",
    "SolarPanels",
    "FacadeRenovation",
    "InsulationUpgrade",
    "WindowReplacement",
    "GreenRoof",
]
