"""Custom exceptions for buildsim.

Domain-specific exception types for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any



class BuildsimError(Exception):
    """Base exception for all buildsim errors."""
    pass


# --- Improvement Errors ---

class ImprovementError(BuildsimError):
    """Error while building an improvement or a renovation plan."""
    pass


class InvalidParameterError(ImprovementError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class UnknownImprovementError(InvalidParameterError):
    """Improvement kind is not registered."""

    def __init__(self, kind: Any, known: list[str] | None = None):
        reason = "unknown improvement kind"
        if known:
            reason += f" (expected one of: {', '.join(known)})"
        super().__init__("kind", kind, reason)


# --- Verification Errors ---

class ScenarioFailure(BuildsimError):
    """A verification scenario check did not hold."""
    pass
