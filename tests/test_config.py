"""Configuration validation and objective construction."""

import pytest

from travgrid import (
    ConfigurationError,
    EnvironmentVariant,
    FootprintStateSpace,
    InsufficientTimePolicy,
    Mobility,
    SE2State,
    SE2StateSpace,
    TravGridConfig,
    TravGridObjective,
    TraversabilityGrid,
    state_space_for,
)


def test_defaults_are_valid():
    config = TravGridConfig()
    config.validate()
    assert config.env_type is EnvironmentVariant.PLANAR_XY_THETA
    assert config.insufficient_time_policy is InsufficientTimePolicy.REJECT
    assert not config.interpolate_motion_cost


@pytest.mark.parametrize(
    "kwargs,match",
    [
        ({"mobility": Mobility(speed=-1.0)}, "speed"),
        ({"num_footprint_classes": 0}, "num_footprint_classes"),
        ({"num_footprint_classes": 2.5}, "integer"),
        ({"time_to_adapt_footprint": -1.0}, "time_to_adapt_footprint"),
        ({"adapt_footprint_penalty": -0.1}, "adapt_footprint_penalty"),
        ({"longest_valid_segment": 0.0}, "longest_valid_segment"),
        ({"env_type": "sherpa"}, "env_type"),
        ({"mobility": Mobility(speed=float("nan"))}, "mobility.speed must be finite"),
        ({"mobility": Mobility(speed=float("inf"))}, "mobility.speed must be finite"),
        ({"mobility": Mobility(speed="fast")}, "mobility.speed must be a number"),
        ({"mobility": 2.0}, "mobility must be a Mobility"),
        ({"time_to_adapt_footprint": float("nan")}, "time_to_adapt_footprint"),
        ({"adapt_footprint_penalty": float("nan")}, "adapt_footprint_penalty"),
        ({"longest_valid_segment": float("nan")}, "longest_valid_segment"),
    ],
    ids=[
        "speed", "classes", "classes-float", "adapt-time", "penalty", "segment", "variant",
        "speed-nan", "speed-inf", "speed-str", "mobility-float", "adapt-time-nan",
        "penalty-nan", "segment-nan",
    ],
)
def test_invalid_config(kwargs, match):
    config = TravGridConfig(**kwargs)
    with pytest.raises(ConfigurationError, match=match):
        config.validate()


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        TravGridConfig(mobility=Mobility(speed=-1.0)).validate()


def test_from_dict():
    config = TravGridConfig.from_dict({
        "env_type": "FOOTPRINT_AWARE_XY_THETA",
        "mobility": {"speed": 0.8},
        "num_footprint_classes": 4,
        "time_to_adapt_footprint": 6.0,
        "adapt_footprint_penalty": 1.0,
        "insufficient_time_policy": "scaled_penalty",
    })
    assert config.env_type is EnvironmentVariant.FOOTPRINT_AWARE_XY_THETA
    assert config.mobility.speed == pytest.approx(0.8)
    assert config.num_footprint_classes == 4
    assert config.insufficient_time_policy is InsufficientTimePolicy.SCALED_PENALTY


@pytest.mark.parametrize(
    "data,match",
    [
        ({"speed": 1.0}, "Unknown config keys"),
        ({"env_type": "sherpa"}, "env_type"),
        ({"mobility": {"velocity": 1.0}}, "mobility"),
        ({"num_footprint_classes": -2}, "num_footprint_classes"),
        ({"mobility": 2.0}, "mobility must be a Mobility"),
        ({"mobility": {"speed": "fast"}}, "mobility.speed must be a number"),
        ({"mobility": {"speed": float("nan")}}, "mobility.speed must be finite"),
        ({"adapt_footprint_penalty": float("nan")}, "adapt_footprint_penalty"),
    ],
)
def test_from_dict_rejects(data, match):
    with pytest.raises(ConfigurationError, match=match):
        TravGridConfig.from_dict(data)


def test_objective_validates_config():
    with pytest.raises(ConfigurationError):
        TravGridObjective(SE2StateSpace(), TravGridConfig(mobility=Mobility(speed=-2.0)))


def test_objective_rejects_mismatched_space():
    config = TravGridConfig(env_type=EnvironmentVariant.FOOTPRINT_AWARE_XY_THETA)
    with pytest.raises(ConfigurationError, match="State space"):
        TravGridObjective(SE2StateSpace(), config)


def test_objective_config_is_frozen_copy():
    config = TravGridConfig(mobility=Mobility(speed=2.0))
    grid = TraversabilityGrid.uniform(4, 4, drivability=1.0)
    objective = TravGridObjective(state_space_for(config.env_type), config, grid)

    config.mobility.speed = 1.0
    objective.config.mobility.speed = 1.0

    assert objective.config.mobility.speed == pytest.approx(2.0)
    assert objective.state_cost(SE2State(1.0, 1.0)) == pytest.approx(0.5)


def test_objective_rejects_nan_speed():
    config = TravGridConfig(mobility=Mobility(speed=float("nan")))
    with pytest.raises(ConfigurationError, match="finite"):
        TravGridObjective(state_space_for(config.env_type), config)


def test_objective_rejects_mismatched_footprint_classes():
    config = TravGridConfig(
        env_type=EnvironmentVariant.FOOTPRINT_AWARE_XY_THETA,
        num_footprint_classes=10,
    )
    with pytest.raises(ConfigurationError, match="footprint classes"):
        TravGridObjective(FootprintStateSpace(1), config)
