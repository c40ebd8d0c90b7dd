"""Integral of a per-state cost along a straight motion segment."""

from __future__ import annotations

from typing import Callable, Optional

from .spaces import StateSpace
from .types import INFEASIBLE_COST, is_infeasible


def trapezoid(c1: float, c2: float, dist: float) -> float:
    """Mean of the endpoint costs times the segment length."""
    # inf * 0 would give nan for zero-length segments
    if is_infeasible(c1) or is_infeasible(c2):
        return INFEASIBLE_COST
    return 0.5 * dist * (c1 + c2)


class StateCostIntegral:
    """Approximate the integral of ``state_cost`` between two states.

    Without interpolation only the two endpoints are evaluated. With
    interpolation the segment is split so that no piece is longer than
    ``longest_valid_segment`` and the piecewise trapezoids are summed.
    """

    def __init__(
        self,
        space: StateSpace,
        state_cost: Callable[[object], float],
        interpolate: bool = False,
        longest_valid_segment: float = 1.0,
    ) -> None:
        if longest_valid_segment <= 0:
            raise ValueError("longest_valid_segment must be positive")
        self.space = space
        self.state_cost = state_cost
        self.interpolate = interpolate
        self.longest_valid_segment = longest_valid_segment

    def motion_cost(
        self,
        s1,
        s2,
        state_cost: Optional[Callable[[object], float]] = None,
    ) -> float:
        """Integrate *state_cost* (default: the bound callback) from *s1* to *s2*."""
        if state_cost is None:
            state_cost = self.state_cost
        if not self.interpolate:
            return trapezoid(
                state_cost(s1),
                state_cost(s2),
                self.space.distance(s1, s2),
            )

        num_segments = self.space.valid_segment_count(s1, s2, self.longest_valid_segment)
        total = 0.0
        prev_state = s1
        prev_cost = state_cost(s1)
        for j in range(1, num_segments):
            next_state = self.space.interpolate(s1, s2, j / num_segments)
            next_cost = state_cost(next_state)
            total += trapezoid(prev_cost, next_cost, self.space.distance(prev_state, next_state))
            prev_state, prev_cost = next_state, next_cost
        total += trapezoid(prev_cost, state_cost(s2), self.space.distance(prev_state, s2))
        return total
