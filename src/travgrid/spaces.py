"""Planning states and state spaces used to measure motion segments.

The planner owns its states; these types give them a concrete shape and
provide the native metric and interpolation that the state-cost integral
needs. Coordinates are in grid cells.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import numpy as np

from .errors import UnsupportedVariantError
from .types import EnvironmentVariant

YAW_DISTANCE_WEIGHT = 0.5


@runtime_checkable
class PoseLike(Protocol):
    """Protocol for objects with x, y, yaw properties (grid coordinates)."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def yaw(self) -> float: ...


@dataclass
class RealVectorState:
    """Plain position state; ``values[0]`` is x and ``values[1]`` is y."""

    values: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self) -> None:
        self.values = np.asarray(self.values, dtype=float)


@dataclass
class SE2State:
    """Position and heading.

    Attributes:
        x: Column position (float).
        y: Row position (float).
        yaw: Heading in radians.
    """

    x: float
    y: float
    yaw: float = 0.0


@dataclass
class FootprintState:
    """Position, heading and discrete footprint class (e.g. stance width)."""

    x: float
    y: float
    yaw: float = 0.0
    footprint_class: int = 0


def wrap_angle(angle: float) -> float:
    """Wrap *angle* into (-pi, pi]."""
    wrapped = math.fmod(angle + math.pi, 2 * math.pi)
    if wrapped <= 0.0:
        wrapped += 2 * math.pi
    return wrapped - math.pi


def angle_difference(a: float, b: float) -> float:
    """Shortest signed rotation taking heading *a* to heading *b*."""
    return wrap_angle(b - a)


class StateSpace:
    """Metric and interpolation over one kind of planning state."""

    variant: EnvironmentVariant

    def distance(self, s1, s2) -> float:
        raise NotImplementedError

    def interpolate(self, s1, s2, t: float):
        raise NotImplementedError

    def valid_segment_count(self, s1, s2, longest_valid_segment: float) -> int:
        """Number of pieces needed so none is longer than *longest_valid_segment*."""
        if longest_valid_segment <= 0:
            raise ValueError("longest_valid_segment must be positive")
        return max(1, int(math.ceil(self.distance(s1, s2) / longest_valid_segment)))


class RealVectorStateSpace(StateSpace):
    variant = EnvironmentVariant.PLANAR_XY

    def distance(self, s1: RealVectorState, s2: RealVectorState) -> float:
        return float(np.linalg.norm(s2.values - s1.values))

    def interpolate(self, s1: RealVectorState, s2: RealVectorState, t: float) -> RealVectorState:
        return RealVectorState(s1.values + t * (s2.values - s1.values))


class SE2StateSpace(StateSpace):
    """Planar pose space; heading contributes to distance with weight one half."""

    variant = EnvironmentVariant.PLANAR_XY_THETA

    def distance(self, s1: PoseLike, s2: PoseLike) -> float:
        position = math.hypot(s2.x - s1.x, s2.y - s1.y)
        heading = abs(angle_difference(s1.yaw, s2.yaw))
        return position + YAW_DISTANCE_WEIGHT * heading

    def interpolate(self, s1: PoseLike, s2: PoseLike, t: float) -> SE2State:
        return SE2State(
            x=s1.x + t * (s2.x - s1.x),
            y=s1.y + t * (s2.y - s1.y),
            yaw=wrap_angle(s1.yaw + t * angle_difference(s1.yaw, s2.yaw)),
        )


class FootprintStateSpace(SE2StateSpace):
    """SE2 space extended with a discrete footprint class.

    The footprint class does not contribute to distance; it is interpolated
    by rounding to the nearest class.
    """

    variant = EnvironmentVariant.FOOTPRINT_AWARE_XY_THETA

    def __init__(self, num_footprint_classes: int) -> None:
        if num_footprint_classes <= 0:
            raise ValueError("num_footprint_classes must be positive")
        self.num_footprint_classes = num_footprint_classes

    def interpolate(self, s1: FootprintState, s2: FootprintState, t: float) -> FootprintState:
        pose = super().interpolate(s1, s2, t)
        fc = s1.footprint_class + (s2.footprint_class - s1.footprint_class) * t
        return FootprintState(
            x=pose.x,
            y=pose.y,
            yaw=pose.yaw,
            footprint_class=int(math.floor(fc + 0.5)),
        )


def state_space_for(
    variant: EnvironmentVariant,
    num_footprint_classes: int = 1,
) -> StateSpace:
    """Build the state space that matches *variant*."""
    if variant is EnvironmentVariant.PLANAR_XY:
        return RealVectorStateSpace()
    if variant is EnvironmentVariant.PLANAR_XY_THETA:
        return SE2StateSpace()
    if variant is EnvironmentVariant.FOOTPRINT_AWARE_XY_THETA:
        return FootprintStateSpace(num_footprint_classes)
    raise UnsupportedVariantError(variant)
