import pytest

from particle_sim.Particle import (MAX_INVERSE_MASS, PARTICLE_DEFAULT_RADIUS, PARTICLE_MAX_LIFESPAN,
                                   PARTICLE_MIN_LIFESPAN)
from particle_sim.Vec2 import Vec2
from particle_sim.emitter import EMITTER_DEFAULT_DENSITY, EMITTER_DEFAULT_MAX_RADIUS, Emitter


def test_defaults():
    e = Emitter(Vec2(0, 0), Vec2(1, 0))
    assert e.density == EMITTER_DEFAULT_DENSITY == 10
    assert e.particle_max_radius == EMITTER_DEFAULT_MAX_RADIUS == 8.0
    assert e.randomise_initial_velocity is False


def test_non_positive_settings_fall_back_to_defaults(rng):
    e = Emitter(Vec2(0, 0), Vec2(1, 0), particles_per_second=-3, particle_max_radius=0, rng=rng)
    assert e.density == EMITTER_DEFAULT_DENSITY
    assert e.particle_max_radius == EMITTER_DEFAULT_MAX_RADIUS
    e.density = 0
    assert e.density == EMITTER_DEFAULT_DENSITY
    e.density = 42
    assert e.density == 42


def test_emission_rate(rng):
    e = Emitter(Vec2(50, 60), Vec2(0.1, -0.1), particles_per_second=10, rng=rng)
    particles = e.emit(1000)
    assert len(particles) == 10
    for p in particles:
        assert PARTICLE_MIN_LIFESPAN <= p.lifespan <= PARTICLE_MAX_LIFESPAN
        assert p.age == 0
        assert p.pos == Vec2(50, 60)
        assert p.pos is not e.pos
        assert p.inv_mass > 0
        assert p.base_colour.a == 1.0


def test_rounding_drops_fractions(rng):
    e = Emitter(Vec2(0, 0), Vec2(1, 0), particles_per_second=10, rng=rng)
    assert e.emit(16) == []  # 0.16 particles
    assert len(e.emit(50)) == 1  # 0.5 rounds up
    assert len(e.emit(149)) == 1


def test_positions_are_not_aliased(rng):
    e = Emitter(Vec2(5, 5), Vec2(1, 1), particles_per_second=1000, rng=rng)
    a, b = e.emit(2)
    a.pos.add(Vec2(1, 1))
    assert b.pos == Vec2(5, 5)
    assert e.pos == Vec2(5, 5)


def test_lifespan_radius_and_mass_from_generator(scripted_rng):
    rng = scripted_rng(random=[1.0, 0.5], integers=[10, 20, 30])
    e = Emitter(Vec2(0, 0), Vec2(3, 4), particles_per_second=1000, particle_max_radius=8.0, rng=rng)
    (p,) = e.emit(1)
    assert p.lifespan == PARTICLE_MAX_LIFESPAN
    # full lifespan, speed 5
    assert p.radius == pytest.approx(8.0 * 5)
    assert p.vel == Vec2(3, 4)
    assert p.inv_mass == 2.0
    assert p.base_colour.to_tuple() == (10, 20, 30)
    assert rng.calls == ['random', 'integers', 'integers', 'integers', 'random']


def test_radius_scales_with_lifespan(scripted_rng):
    rng = scripted_rng(random=[0.0, 0.5])
    e = Emitter(Vec2(0, 0), Vec2(0, 2), particles_per_second=1000, particle_max_radius=11.0, rng=rng)
    (p,) = e.emit(1)
    assert p.lifespan == PARTICLE_MIN_LIFESPAN
    assert p.radius == pytest.approx(PARTICLE_MIN_LIFESPAN / PARTICLE_MAX_LIFESPAN * 11.0 * 2)


def test_zero_speed_gives_default_radius(scripted_rng):
    e = Emitter(Vec2(0, 0), Vec2(0, 0), particles_per_second=1000, rng=scripted_rng())
    (p,) = e.emit(1)
    assert p.radius == PARTICLE_DEFAULT_RADIUS


def test_zero_mass_draw_uses_sentinel(scripted_rng):
    e = Emitter(Vec2(0, 0), Vec2(1, 0), particles_per_second=1000, rng=scripted_rng(random=[0.5, 0.0]))
    (p,) = e.emit(1)
    assert p.inv_mass == MAX_INVERSE_MASS


def test_randomised_velocity_jitters_each_axis(scripted_rng):
    rng = scripted_rng(uniform=[0.25, -0.5])
    e = Emitter(Vec2(0, 0), Vec2(1, 1), particles_per_second=1000, randomise_initial_velocity=True, rng=rng)
    (p,) = e.emit(1)
    assert p.vel == Vec2(1.25, 0.5)
    assert rng.calls.count('uniform') == 2
    # the emitter direction itself is untouched
    assert e.direction == Vec2(1, 1)


def test_zero_jitter_leaves_axis_unchanged(scripted_rng):
    rng = scripted_rng(uniform=[0.0, 0.1])
    e = Emitter(Vec2(0, 0), Vec2(-0.2, 0.3), particles_per_second=1000, randomise_initial_velocity=True, rng=rng)
    (p,) = e.emit(1)
    assert p.vel.x == -0.2
    assert p.vel.y == pytest.approx(0.4)


def test_randomised_jitter_stays_within_half_unit(rng):
    e = Emitter(Vec2(0, 0), Vec2(1, -1), particles_per_second=100, randomise_initial_velocity=True, rng=rng)
    for p in e.emit(1000):
        assert 0.5 <= p.vel.x <= 1.5
        assert -1.5 <= p.vel.y <= -0.5


def test_seeded_generators_reproduce_emission():
    import numpy as np
    a = Emitter(Vec2(0, 0), Vec2(1, 0), 10, randomise_initial_velocity=True, rng=np.random.default_rng(99)).emit(1000)
    b = Emitter(Vec2(0, 0), Vec2(1, 0), 10, randomise_initial_velocity=True, rng=np.random.default_rng(99)).emit(1000)
    assert [(p.lifespan, p.vel, p.radius, p.inv_mass) for p in a] == [(p.lifespan, p.vel, p.radius, p.inv_mass) for p in b]
