"""Pull the grid position (and footprint class) out of a planning state.

Each environment variant encodes position differently; there is exactly one
extractor per variant and ``extractor_for`` is the only way to pick one.
"""

from __future__ import annotations

import numbers
from typing import Dict

from .errors import FootprintClassError, UnsupportedVariantError
from .types import CellPosition, EnvironmentVariant


class PositionExtractor:
    variant: EnvironmentVariant

    def __call__(self, state) -> CellPosition:
        raise NotImplementedError


class PlanarXYExtractor(PositionExtractor):
    """Real-vector states: ``values[0]``, ``values[1]``."""

    variant = EnvironmentVariant.PLANAR_XY

    def __call__(self, state) -> CellPosition:
        return CellPosition(float(state.values[0]), float(state.values[1]))


class PlanarXYThetaExtractor(PositionExtractor):
    """SE2 states: ``x``, ``y``; the heading plays no part in cell lookup."""

    variant = EnvironmentVariant.PLANAR_XY_THETA

    def __call__(self, state) -> CellPosition:
        return CellPosition(float(state.x), float(state.y))


class FootprintAwareExtractor(PositionExtractor):
    variant = EnvironmentVariant.FOOTPRINT_AWARE_XY_THETA

    def __call__(self, state) -> CellPosition:
        return CellPosition(float(state.x), float(state.y), _footprint_index(state.footprint_class))


def _footprint_index(value) -> int:
    """Footprint class as an int; non-integral values are rejected, not truncated."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise FootprintClassError(value)
    if not isinstance(value, numbers.Integral) and not float(value).is_integer():
        raise FootprintClassError(value)
    return int(value)


_EXTRACTORS: Dict[EnvironmentVariant, PositionExtractor] = {
    extractor.variant: extractor
    for extractor in (
        PlanarXYExtractor(),
        PlanarXYThetaExtractor(),
        FootprintAwareExtractor(),
    )
}


def extractor_for(variant: EnvironmentVariant) -> PositionExtractor:
    """Return the extractor for *variant*, or raise UnsupportedVariantError."""
    try:
        return _EXTRACTORS[variant]
    except (KeyError, TypeError):
        raise UnsupportedVariantError(variant) from None


def extract_position(state, variant: EnvironmentVariant) -> CellPosition:
    return extractor_for(variant)(state)
