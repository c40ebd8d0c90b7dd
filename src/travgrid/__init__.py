"""Traversability-grid cost model for sampling-based motion planning.

Converts grid drivability into time-based state and motion costs, with an
extra footprint-adaptation cost for robots that change stance between
states.
"""

from .config import Mobility, TravGridConfig
from .errors import (
    ConfigurationError,
    CostModelError,
    FootprintClassError,
    NoGridBoundError,
    OutOfBoundsStateError,
    OutOfBoundsStateWarning,
    UnsupportedVariantError,
)
from .extract import extract_position, extractor_for
from .grid import GridLike, TraversabilityClass, TraversabilityGrid
from .integral import StateCostIntegral
from .objective import TravGridObjective
from .spaces import (
    FootprintState,
    FootprintStateSpace,
    RealVectorState,
    RealVectorStateSpace,
    SE2State,
    SE2StateSpace,
    state_space_for,
)
from .types import (
    INFEASIBLE_COST,
    CellPosition,
    CostOutcome,
    EnvironmentVariant,
    InsufficientTimePolicy,
    is_infeasible,
)

__all__ = [
    # Cost model
    "TravGridObjective",
    "StateCostIntegral",
    "TravGridConfig",
    "Mobility",
    # Grid
    "GridLike",
    "TraversabilityClass",
    "TraversabilityGrid",
    # States
    "EnvironmentVariant",
    "CellPosition",
    "RealVectorState",
    "SE2State",
    "FootprintState",
    "RealVectorStateSpace",
    "SE2StateSpace",
    "FootprintStateSpace",
    "state_space_for",
    "extract_position",
    "extractor_for",
    # Costs and results
    "INFEASIBLE_COST",
    "is_infeasible",
    "CostOutcome",
    "InsufficientTimePolicy",
    # Errors
    "CostModelError",
    "NoGridBoundError",
    "OutOfBoundsStateError",
    "UnsupportedVariantError",
    "ConfigurationError",
    "FootprintClassError",
    "OutOfBoundsStateWarning",
]

__version__ = "0.1.0"
