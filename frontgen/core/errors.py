"""Result-value errors and the internal invariant exception.

``ConfigError`` and ``Rejection`` are expected outcomes and are returned,
never raised. ``InternalInvariantViolation`` signals a gap in the decision
tables and is the only exception the core raises.
"""

from dataclasses import dataclass
from typing import Literal

RejectionReason = Literal[
    "name-required",
    "unsupported-view-kind",
    "react-uses-dedicated-subgenerator",
    "factory-requires-angular",
    "model-requires-single-page-app",
    "invalid-directory",
]


@dataclass(frozen=True)
class ConfigError:
    """Malformed or incomplete project configuration.

    Attributes:
        field: Settings key that failed (``<file>`` for I/O problems).
        reason: Human-readable explanation.
    """

    field: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


@dataclass(frozen=True)
class Rejection:
    """A generation request that cannot be satisfied.

    Attributes:
        reason: Machine-readable rule code.
        message: Human-readable text naming the violated rule.
    """

    reason: RejectionReason
    message: str

    def __str__(self) -> str:
        return f"{self.message} [{self.reason}]"


class InternalInvariantViolation(RuntimeError):
    """Raised when the rule tables produce impossible output."""
