"""
Result types returned by the statement builders.
"""

from dataclasses import dataclass
from enum import Enum


class Resolution(Enum):
    """Whether a synthesized statement can be executed as-is."""

    RESOLVED = "resolved"
    NEEDS_PARAMETER = "needs_parameter"  # A "?" value has to be bound
    NEEDS_PREDICATE = "needs_predicate"  # WHERE is a bare "?": no safe filter known
    NEEDS_ORDER_KEY = "needs_order_key"  # ORDER BY "?" has to be replaced


@dataclass(frozen=True)
class SqlStatement:
    """SQL text plus what the caller still has to supply before executing it."""

    text: str
    resolution: Resolution = Resolution.RESOLVED
    guarded: bool = False  # True when the filter was made always false ("1 = 0")

    @property
    def is_resolved(self) -> bool:
        return self.resolution is Resolution.RESOLVED

    def __str__(self) -> str:
        return self.text
