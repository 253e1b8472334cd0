"""Core exceptions, settings and logging."""

from .exceptions import (
    BuildsimError,
    ImprovementError,
    InvalidParameterError,
    ScenarioFailure,
    UnknownImprovementError,
)

__all__ = [
    "BuildsimError",
    "ImprovementError",
    "InvalidParameterError",
    "UnknownImprovementError",
    "ScenarioFailure",
]
