"""Common types shared by the cost model and its collaborators."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from .errors import CostModelError

INFEASIBLE_COST = math.inf


def is_infeasible(cost: float) -> bool:
    """Whether *cost* marks a state or transition as disallowed."""
    return math.isinf(cost) and cost > 0


class EnvironmentVariant(Enum):
    """Supported planning-state encodings."""

    PLANAR_XY = "planar_xy"
    PLANAR_XY_THETA = "planar_xy_theta"
    FOOTPRINT_AWARE_XY_THETA = "footprint_aware_xy_theta"

    @property
    def has_footprint(self) -> bool:
        return self is EnvironmentVariant.FOOTPRINT_AWARE_XY_THETA


class InsufficientTimePolicy(Enum):
    """What to do when a footprint change takes longer than the motion.

    ``REJECT`` forces the transition cost to ``INFEASIBLE_COST`` so the
    planner never schedules it. ``SCALED_PENALTY`` keeps the transition
    but adds a finite penalty proportional to the time shortfall.
    """

    REJECT = "reject"
    SCALED_PENALTY = "scaled_penalty"


class CellPosition(NamedTuple):
    """Grid position extracted from a planning state."""

    x: float
    y: float
    footprint_class: Optional[int] = None


@dataclass(frozen=True)
class CostOutcome:
    """Either a cost value or the error that prevented computing one."""

    cost: Optional[float] = None
    error: Optional[CostModelError] = None

    def __post_init__(self) -> None:
        if (self.cost is None) == (self.error is None):
            raise ValueError("CostOutcome needs exactly one of cost or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def infeasible(self) -> bool:
        return self.cost is not None and is_infeasible(self.cost)

    def unwrap(self) -> float:
        """Return the cost, re-raising the stored error if there is one."""
        if self.error is not None:
            raise self.error
        assert self.cost is not None
        return self.cost

    def cost_or(self, default: float) -> float:
        return default if self.cost is None else self.cost
