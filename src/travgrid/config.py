"""Cost-model configuration."""

from __future__ import annotations

import dataclasses
import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Mapping

from .errors import ConfigurationError
from .types import EnvironmentVariant, InsufficientTimePolicy

TIME_TO_ADAPT_FOOTPRINT = 10.0  # seconds from min to max footprint
PENALTY_TO_ADAPT_FOOTPRINT = 2.0


@dataclass
class Mobility:
    """Motion capabilities of the robot.

    Attributes:
        speed: Forward speed in metres per second.
    """

    speed: float = 1.0


@dataclass
class TravGridConfig:
    """Runtime configuration for a traversability-grid cost model."""

    env_type: EnvironmentVariant = EnvironmentVariant.PLANAR_XY_THETA
    mobility: Mobility = field(default_factory=Mobility)
    num_footprint_classes: int = 10
    time_to_adapt_footprint: float = TIME_TO_ADAPT_FOOTPRINT
    adapt_footprint_penalty: float = PENALTY_TO_ADAPT_FOOTPRINT
    interpolate_motion_cost: bool = False
    longest_valid_segment: float = 1.0
    insufficient_time_policy: InsufficientTimePolicy = InsufficientTimePolicy.REJECT

    def validate(self) -> None:
        """Raise ConfigurationError describing the first invalid field."""
        if not isinstance(self.env_type, EnvironmentVariant):
            raise ConfigurationError(f"env_type: unknown variant {self.env_type!r}")
        if not isinstance(self.insufficient_time_policy, InsufficientTimePolicy):
            raise ConfigurationError(
                f"insufficient_time_policy: unknown policy {self.insufficient_time_policy!r}"
            )
        if not isinstance(self.mobility, Mobility):
            raise ConfigurationError(
                f"mobility must be a Mobility or a mapping, got {self.mobility!r}"
            )
        _check_number("mobility.speed", self.mobility.speed, strictly_positive=False)
        if isinstance(self.num_footprint_classes, bool) or not isinstance(
            self.num_footprint_classes, int
        ):
            raise ConfigurationError("num_footprint_classes must be an integer")
        if self.num_footprint_classes <= 0:
            raise ConfigurationError(
                f"num_footprint_classes must be > 0, got {self.num_footprint_classes}"
            )
        _check_number("time_to_adapt_footprint", self.time_to_adapt_footprint, strictly_positive=False)
        _check_number("adapt_footprint_penalty", self.adapt_footprint_penalty, strictly_positive=False)
        _check_number("longest_valid_segment", self.longest_valid_segment, strictly_positive=True)

    def copy(self) -> "TravGridConfig":
        return dataclasses.replace(self, mobility=dataclasses.replace(self.mobility))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TravGridConfig":
        """Build a config from plain data, e.g. a parsed YAML or JSON document.

        Enum fields accept either the member name or its value and
        ``mobility`` may be a nested mapping.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")

        kwargs = dict(data)
        if "env_type" in kwargs:
            kwargs["env_type"] = _parse_enum(EnvironmentVariant, kwargs["env_type"], "env_type")
        if "insufficient_time_policy" in kwargs:
            kwargs["insufficient_time_policy"] = _parse_enum(
                InsufficientTimePolicy,
                kwargs["insufficient_time_policy"],
                "insufficient_time_policy",
            )
        mobility = kwargs.get("mobility")
        if isinstance(mobility, Mapping):
            try:
                kwargs["mobility"] = Mobility(**mobility)
            except TypeError as e:
                raise ConfigurationError(f"mobility: {e}") from e

        config = cls(**kwargs)
        config.validate()
        return config


def _parse_enum(enum_cls, value, name: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        if value in enum_cls.__members__:
            return enum_cls[value]
        if value.upper() in enum_cls.__members__:
            return enum_cls[value.upper()]
    try:
        return enum_cls(value)
    except ValueError as e:
        raise ConfigurationError(f"{name}: {e}") from e


def _check_number(name: str, value, strictly_positive: bool) -> None:
    # Range checks are written so that NaN fails them
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value}")
    if strictly_positive and not value > 0:
        raise ConfigurationError(f"{name} must be > 0, got {value}")
    if not value >= 0:
        raise ConfigurationError(f"{name} must be >= 0, got {value}")
