"""
Tests for FlockConfig.
"""

import pytest

from flocking.core.config import (
    ALIGNMENT_WEIGHT,
    COHESION_WEIGHT,
    DEFAULT_CONFIG,
    SEPARATION_WEIGHT,
    ConfigurationError,
    FlockConfig,
)


class TestDefaults:
    """Default values for the rules."""

    def test_rule_weights(self):
        assert (SEPARATION_WEIGHT, ALIGNMENT_WEIGHT, COHESION_WEIGHT) == (2.0, 1.0, 0.8)
        assert DEFAULT_CONFIG.separationWeight == 2.0
        assert DEFAULT_CONFIG.alignmentWeight == 1.0
        assert DEFAULT_CONFIG.cohesionWeight == 0.8

    def test_rule_radii(self):
        config = FlockConfig()
        assert (config.separationRadius, config.alignmentRadius, config.cohesionRadius) == (30, 50, 70)

    def test_defaults_validate(self):
        FlockConfig().validate()


class TestDictRoundTrip:
    """Tests for to_dict / from_dict."""

    def test_from_dict_ignores_unknown_keys(self):
        config = FlockConfig.from_dict({"agentCount": 12, "bogus": True})
        assert config.agentCount == 12
        assert not hasattr(config, "bogus")

    def test_to_dict_copies_lists(self):
        config = FlockConfig()
        data = config.to_dict()
        data["palette"].append("#000000")
        assert len(config.palette) == 3


class TestValidation:
    """Degenerate but valid values are accepted."""

    def test_zero_radii_and_weights_are_valid(self):
        FlockConfig(separationRadius=0, alignmentRadius=0, cohesionRadius=0,
                    separationWeight=0, alignmentWeight=0, cohesionWeight=0).validate()

    @pytest.mark.parametrize("overrides", [
        {"agentCount": True},
        {"gridCellSize": 0},
        {"fpsTarget": 0},
        {"trackingInterval": 0},
        {"agentRadius": -1},
    ])
    def test_rejects(self, overrides):
        with pytest.raises(ConfigurationError):
            FlockConfig(**overrides).validate()
