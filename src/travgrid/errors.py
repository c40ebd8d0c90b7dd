"""Errors and warnings raised while evaluating traversal costs."""

from __future__ import annotations

from typing import Any, Optional


class CostModelError(Exception):
    """Base class for failures that abort a state or motion evaluation."""


class NoGridBoundError(CostModelError):
    """A cost was requested before a traversability grid was bound."""

    def __init__(self) -> None:
        super().__init__("No traversability grid available; call set_grid() first")


class OutOfBoundsStateError(CostModelError):
    """A state's position lies outside the bound grid."""

    def __init__(self, x: float, y: float, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Invalid state ({x:4.2f}, {y:4.2f}) is outside the "
            f"{width}x{height} traversability grid"
        )


class UnsupportedVariantError(CostModelError):
    """The environment variant has no known state encoding."""

    def __init__(self, variant: Any) -> None:
        self.variant = variant
        super().__init__(f"Unknown environment variant: {variant!r}")


class ConfigurationError(CostModelError, ValueError):
    """Invalid cost-model configuration."""


class FootprintClassError(ConfigurationError):
    """A state's footprint class is not an integer in [0, num_footprint_classes]."""

    def __init__(self, footprint_class: Any, num_footprint_classes: Optional[int] = None) -> None:
        self.footprint_class = footprint_class
        self.num_footprint_classes = num_footprint_classes
        if num_footprint_classes is None:
            message = f"Footprint class {footprint_class!r} is not an integer"
        else:
            message = (
                f"Footprint class {footprint_class} outside of "
                f"[0, {num_footprint_classes}]"
            )
        super().__init__(message)


class OutOfBoundsStateWarning(UserWarning):
    """Diagnostic emitted alongside every OutOfBoundsStateError."""
