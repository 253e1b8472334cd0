"""Application services."""

from .improvement_factory import (
    IMPROVEMENT_TYPES,
    create_building,
    create_improvement,
    create_renovation_plan,
)
from .renovation import RenovationEngine, StepResult

__all__ = [
    "IMPROVEMENT_TYPES",
    "create_improvement",
    "create_renovation_plan",
    "create_building",
    "RenovationEngine",
    "StepResult",
]
