"""
Tests for Flock: construction, the per-tick pipeline and its invariants.
"""

import random

import pytest

from flocking.core.config import DEFAULT_CONFIG, ConfigurationError, FlockConfig
from flocking.core.flock import AgentSnapshot, Flock
from flocking.core.neighbors import SpatialGrid
from flocking.core.vector import Vector2

EPSILON = 1e-9


def place(boid, x, y, vx, vy):
    boid.position.set(x, y)
    boid.velocity.set(vx, vy)


class TestConstruction:
    """Tests for seeding the population."""

    def test_population_size_and_palette_cycle(self):
        flock = Flock(FlockConfig(agentCount=7, seed=1))
        assert len(flock) == 7
        colors = [b.color for b in flock.boids]
        assert colors == ["#ff704f", "#89c3ff", "#ffcd05"] * 2 + ["#ff704f"]

    def test_initial_positions_and_velocities_in_range(self):
        config = FlockConfig(agentCount=40, worldWidth=300, worldHeight=200, seed=5)
        flock = Flock(config)
        for boid in flock.boids:
            assert 0 <= boid.position.x < 300
            assert 0 <= boid.position.y < 200
            assert -1.0 <= boid.velocity.x < 9.0
            assert -1.0 <= boid.velocity.y < 9.0
            assert boid.acceleration == Vector2(0, 0)

    def test_injected_rng_drives_seeding(self):
        config = FlockConfig(agentCount=10)
        a = Flock(config, rng=random.Random(99))
        b = Flock(config, rng=random.Random(99))
        assert a.snapshot() == b.snapshot()

    def test_default_config_is_not_shared(self):
        flock = Flock()
        flock.config.agentCount = 3
        assert DEFAULT_CONFIG.agentCount == 50
        assert flock.config is not DEFAULT_CONFIG

    def test_zero_agents_is_a_valid_steady_state(self):
        flock = Flock(FlockConfig(agentCount=0))
        flock.run(5)
        assert flock.snapshot() == []
        assert flock.tick == 5

    @pytest.mark.parametrize("overrides", [
        {"agentCount": -1},
        {"agentCount": 2.5},
        {"worldWidth": 0},
        {"worldHeight": -10},
        {"separationRadius": -1},
        {"maxSpeed": -0.5},
        {"palette": []},
        {"initialVelocityMin": 5, "initialVelocityMax": 1},
        {"neighborStrategy": "quadtree"},
        {"worldWidth": float("nan")},
        {"worldHeight": float("inf")},
        {"maxSpeed": float("nan")},
        {"maxForce": float("inf")},
        {"agentRadius": float("nan")},
        {"cohesionRadius": float("inf")},
        {"initialVelocityMin": float("-inf")},
        {"gridCellSize": float("nan")},
        {"separationWeight": float("nan")},
    ])
    def test_invalid_configuration_fails_fast(self, overrides):
        with pytest.raises(ConfigurationError):
            Flock(FlockConfig(**overrides))


class TestStepInvariants:
    """Properties that hold after every tick."""

    @pytest.fixture
    def flock(self):
        return Flock(FlockConfig(agentCount=60, seed=3))

    def test_speed_never_exceeds_max(self, flock):
        for _ in range(30):
            flock.step()
            for boid in flock.boids:
                assert boid.velocity.magnitude() <= boid.max_speed + EPSILON

    def test_positions_stay_within_wrap_margin(self, flock):
        for _ in range(30):
            flock.step()
            for boid in flock.boids:
                r = boid.radius
                assert -r <= boid.position.x <= flock.width + r
                assert -r <= boid.position.y <= flock.height + r

    def test_acceleration_reset_after_step(self, flock):
        flock.step()
        for boid in flock.boids:
            assert boid.acceleration == Vector2(0, 0)

    def test_snapshot_reports_render_fields(self, flock):
        flock.step()
        snapshot = flock.snapshot()
        assert len(snapshot) == 60
        first = flock.boids[0]
        assert snapshot[0] == AgentSnapshot(first.position.x, first.position.y, 10.0, "#ff704f")


class TestStepBehavior:
    """Concrete single-tick scenarios."""

    def test_isolated_agent_moves_in_straight_line(self):
        flock = Flock(FlockConfig(agentCount=1, seed=0))
        boid = flock.boids[0]
        place(boid, 200, 300, 3, -2)
        flock.step()
        assert boid.velocity == Vector2(3, -2)
        assert boid.position == Vector2(203, 298)

    def test_close_agents_with_opposite_headings_push_apart(self):
        flock = Flock(FlockConfig(agentCount=2, seed=0))
        a, b = flock.boids
        place(a, 100, 100, 1, 0)
        place(b, 105, 100, -1, 0)

        assert a.separation(flock.boids).x < 0
        assert b.separation(flock.boids).x > 0

        flock.step()
        assert a.velocity.x < 1
        assert b.velocity.x > -1
        assert Vector2.distance(a.position, b.position) > 5

    def test_separation_alone_perturbs_velocity(self):
        config = FlockConfig(agentCount=2, seed=0, alignmentWeight=0, cohesionWeight=0)
        flock = Flock(config)
        a, b = flock.boids
        place(a, 100, 100, 1, 0)
        place(b, 105, 100, -1, 0)
        flock.step()
        # separation force (-10, 0) weighted by 2, then speed clamp
        assert a.velocity.x == pytest.approx(-10.5)
        assert b.velocity.x == pytest.approx(10.5)

    def test_forces_read_previous_tick_state(self):
        config = FlockConfig(agentCount=2, seed=0, cohesionWeight=0, separationWeight=0)
        flock = Flock(config)
        a, b = flock.boids
        place(a, 100, 100, 0, 0)
        place(b, 120, 100, 0, 2)
        flock.step()
        # b aligns with a's velocity before a moved: zero average heading
        assert b.velocity == Vector2(0, 0)
        assert a.velocity.y == pytest.approx(10.0)

    def test_zero_weights_reduce_to_linear_motion(self):
        config = FlockConfig(
            agentCount=40, seed=11,
            separationWeight=0, alignmentWeight=0, cohesionWeight=0,
            initialVelocityMin=-5, initialVelocityMax=5,
        )
        flock = Flock(config)
        before = [(b.position.copy(), b.velocity.copy()) for b in flock.boids]
        flock.step()
        for boid, (position, velocity) in zip(flock.boids, before):
            assert boid.velocity == velocity
            assert boid.position == Vector2(position.x + velocity.x, position.y + velocity.y)

    def test_wraps_across_edge(self):
        flock = Flock(FlockConfig(agentCount=1, seed=0))
        boid = flock.boids[0]
        place(boid, 708, 350, 5, 0)
        flock.step()
        assert boid.position == Vector2(-10, 350)


class TestSeekTargets:
    """Tests for flock-wide seek targets."""

    def test_target_pulls_agents(self):
        flock = Flock(FlockConfig(agentCount=1, seed=0))
        boid = flock.boids[0]
        place(boid, 100, 100, 0, 0)
        flock.add_target(Vector2(300, 100))
        flock.step()
        assert boid.velocity.x == pytest.approx(10.0)
        assert boid.velocity.y == pytest.approx(0.0)

    def test_targets_are_copied_and_clearable(self):
        flock = Flock(FlockConfig(agentCount=1, seed=0))
        point = Vector2(10, 10)
        flock.add_target(point)
        point.set(0, 0)
        assert flock.targets == [Vector2(10, 10)]
        flock.clear_targets()
        assert flock.targets == []


class TestNeighborStrategies:
    """The spatial grid is a drop-in replacement for the linear scan."""

    def test_grid_candidates_cover_every_neighbor(self):
        flock = Flock(FlockConfig(agentCount=80, seed=4))
        grid = SpatialGrid(flock.width, flock.height, 70)
        grid.rebuild(flock.boids)
        for boid in flock.boids:
            for radius in (30, 50, 70):
                expected = {id(o) for o in flock.boids
                            if Vector2.distance(boid.position, o.position) < radius}
                found = {id(o) for o in grid.candidates(boid.position, radius)}
                assert expected <= found

    def test_grid_and_linear_trajectories_match(self):
        linear = Flock(FlockConfig(agentCount=50, seed=8))
        grid = Flock(FlockConfig(agentCount=50, seed=8, neighborStrategy="grid", gridCellSize=40))
        assert isinstance(grid.finder, SpatialGrid)
        for _ in range(5):
            linear.step()
            grid.step()
        for a, b in zip(linear.boids, grid.boids):
            assert a.position.x == pytest.approx(b.position.x, abs=1e-6)
            assert a.position.y == pytest.approx(b.position.y, abs=1e-6)
