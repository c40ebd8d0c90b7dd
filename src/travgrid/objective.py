"""Time-based traversal costs over a traversability grid.

``TravGridObjective`` turns the drivability of grid cells into the time
needed to cross them at the configured speed, and charges motions for
changing the robot's footprint on the way.
"""

from __future__ import annotations

import math
import warnings
from typing import Optional

from .config import TravGridConfig
from .errors import (
    ConfigurationError,
    CostModelError,
    FootprintClassError,
    NoGridBoundError,
    OutOfBoundsStateError,
    OutOfBoundsStateWarning,
)
from .extract import extractor_for
from .grid import GridLike
from .integral import StateCostIntegral
from .spaces import StateSpace
from .types import (
    INFEASIBLE_COST,
    CostOutcome,
    InsufficientTimePolicy,
    is_infeasible,
)

SCALED_PENALTY_FACTOR = 100.0


class TravGridObjective:
    """Cost model for a sampling-based planner on a traversability grid.

    The grid is borrowed, not owned: bind it with ``set_grid`` before the
    first evaluation and rebind it whenever the map changes. Rebinding must
    not race with other rebinds; evaluations running concurrently with a
    rebind each see exactly one of the two grids.
    """

    def __init__(
        self,
        space: StateSpace,
        config: TravGridConfig,
        grid: Optional[GridLike] = None,
    ) -> None:
        config.validate()
        config = config.copy()
        if space.variant is not config.env_type:
            raise ConfigurationError(
                f"State space is for {space.variant.name} but the config "
                f"expects {config.env_type.name}"
            )
        if (
            config.env_type.has_footprint
            and space.num_footprint_classes != config.num_footprint_classes
        ):
            raise ConfigurationError(
                f"State space has {space.num_footprint_classes} footprint classes "
                f"but the config expects {config.num_footprint_classes}"
            )
        self._config = config
        self._space = space
        self._extract = extractor_for(config.env_type)
        self._footprint_aware = config.env_type.has_footprint
        self._integral = StateCostIntegral(
            space,
            self.state_cost,
            interpolate=config.interpolate_motion_cost,
            longest_valid_segment=config.longest_valid_segment,
        )
        self._grid = grid

    @property
    def config(self) -> TravGridConfig:
        return self._config.copy()

    @property
    def space(self) -> StateSpace:
        return self._space

    @property
    def grid(self) -> Optional[GridLike]:
        return self._grid

    @property
    def has_grid(self) -> bool:
        return self._grid is not None

    def set_grid(self, grid: Optional[GridLike]) -> None:
        self._grid = grid

    def _bound_grid(self) -> GridLike:
        grid = self._grid
        if grid is None:
            raise NoGridBoundError()
        return grid

    # Cost arithmetic

    def identity_cost(self) -> float:
        return 0.0

    def infinite_cost(self) -> float:
        return INFEASIBLE_COST

    def combine_costs(self, c1: float, c2: float) -> float:
        return c1 + c2

    def is_cost_better_than(self, c1: float, c2: float) -> bool:
        return c1 < c2

    # State cost

    def state_cost(self, state) -> float:
        """Estimated time to traverse the cell under *state*.

        Raises:
            NoGridBoundError: no grid has been bound yet.
            OutOfBoundsStateError: the state lies outside the grid.
            FootprintClassError: the footprint class is out of range.

        Out-of-bounds states also emit an ``OutOfBoundsStateWarning``. Under
        the default warnings filter it is shown once per calling location;
        repeats are suppressed unless the filter is set to "always".
        """
        return self._cell_cost(state, self._bound_grid())

    def _cell_cost(self, state, grid: GridLike) -> float:
        x, y, footprint_class = self._extract(state)
        num_classes = self._config.num_footprint_classes

        if self._footprint_aware and not 0 <= footprint_class <= num_classes:
            raise FootprintClassError(footprint_class, num_classes)

        width, height = grid.cell_size_x, grid.cell_size_y
        # Written so that NaN coordinates fail the check
        if not (0 <= x < width and 0 <= y < height):
            warnings.warn(
                f"Invalid state ({x:4.2f}, {y:4.2f}) has been passed and will be ignored",
                OutOfBoundsStateWarning,
                stacklevel=3,
            )
            raise OutOfBoundsStateError(x, y, width, height)

        drivability = grid.traversability_class(grid.class_at(x, y)).drivability
        speed = self._config.mobility.speed
        if drivability == 0 or speed == 0:
            return INFEASIBLE_COST

        # Drivability 1.0 means the cell is crossed at full speed.
        cost = (grid.scale_x / speed) / drivability
        if self._footprint_aware:
            # Max footprint is full speed; min footprint multiplies the
            # cost by the number of classes + 1.
            cost /= (footprint_class + 1) / (num_classes + 1)
        return cost

    # Motion cost

    def motion_cost(self, s1, s2) -> float:
        """Cost of moving in a straight segment from *s1* to *s2*.

        The mean of the endpoint state costs times the segment length, plus
        the time and penalty for changing footprint when the variant is
        footprint aware.
        """
        grid = self._bound_grid()
        cost = self._integral.motion_cost(
            s1, s2, state_cost=lambda s: self._cell_cost(s, grid)
        )
        if not self._footprint_aware or is_infeasible(cost):
            return cost
        return self._add_footprint_cost(cost, s1, s2, grid)

    def _add_footprint_cost(self, cost: float, s1, s2, grid: GridLike) -> float:
        config = self._config
        p1, p2 = self._extract(s1), self._extract(s2)

        fp_time_sec = (
            abs(p1.footprint_class - p2.footprint_class) / config.num_footprint_classes
        ) * config.time_to_adapt_footprint
        cost += fp_time_sec
        if fp_time_sec > 0:
            cost += config.adapt_footprint_penalty

        # A finite base cost implies speed > 0.
        dist_m = math.hypot(p2.x - p1.x, p2.y - p1.y) * grid.scale_x
        mov_time_sec = dist_m / config.mobility.speed

        if fp_time_sec > mov_time_sec:
            if config.insufficient_time_policy is InsufficientTimePolicy.REJECT or mov_time_sec == 0:
                return INFEASIBLE_COST
            cost += (
                (fp_time_sec / mov_time_sec)
                * config.adapt_footprint_penalty
                * SCALED_PENALTY_FACTOR
            )
        return cost

    # Non-raising entry points

    def evaluate_state_cost(self, state) -> CostOutcome:
        try:
            return CostOutcome(cost=self.state_cost(state))
        except CostModelError as e:
            return CostOutcome(error=e)

    def evaluate_motion_cost(self, s1, s2) -> CostOutcome:
        try:
            return CostOutcome(cost=self.motion_cost(s1, s2))
        except CostModelError as e:
            return CostOutcome(error=e)
