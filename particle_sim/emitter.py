import numpy as np

from .Particle import PARTICLE_MAX_LIFESPAN, PARTICLE_MAX_LIFESPAN_INCREASE, PARTICLE_MIN_LIFESPAN, Particle
from .RGBA import RGBA
from .Vec2 import Vec2
from .utils import round_half_up

EMITTER_DEFAULT_DENSITY = 10  # particles per second
EMITTER_DEFAULT_MAX_RADIUS = 8.0


class Emitter:
    def __init__(self, pos, direction, particles_per_second=EMITTER_DEFAULT_DENSITY,
                 particle_max_radius=EMITTER_DEFAULT_MAX_RADIUS, randomise_initial_velocity=False, rng=None):
        """
        :param pos: Vec2 position every particle starts from.
        :param direction: Vec2 launch velocity (direction and speed) of the emitted particles.
        :param particles_per_second: emission density; non-positive values fall back to the default.
        :param particle_max_radius: radius of a maximum-lifespan particle at unit speed.
        :param randomise_initial_velocity: jitter each velocity component by up to +-0.5.
        :param rng: numpy Generator used for every random draw; a fresh unseeded one if None.
        """
        self.pos = pos
        self.direction = direction
        self.density = particles_per_second
        self.particle_max_radius = particle_max_radius
        self.randomise_initial_velocity = randomise_initial_velocity
        self.rng = rng if rng is not None else np.random.default_rng()

    @property
    def pos(self):
        return self._pos

    @pos.setter
    def pos(self, value):
        self._pos = value.copy() if isinstance(value, Vec2) else Vec2(value[0], value[1])

    @property
    def direction(self):
        return self._direction

    @direction.setter
    def direction(self, value):
        self._direction = value.copy() if isinstance(value, Vec2) else Vec2(value[0], value[1])

    @property
    def density(self):
        return self._density

    @density.setter
    def density(self, value):
        self._density = value if value and value > 0 else EMITTER_DEFAULT_DENSITY

    @property
    def particle_max_radius(self):
        return self._particle_max_radius

    @particle_max_radius.setter
    def particle_max_radius(self, value):
        self._particle_max_radius = float(value) if value and value > 0 else EMITTER_DEFAULT_MAX_RADIUS

    @property
    def randomise_initial_velocity(self):
        return self._randomise_initial_velocity

    @randomise_initial_velocity.setter
    def randomise_initial_velocity(self, value):
        self._randomise_initial_velocity = bool(value)

    def emit(self, elapsed_ms):
        """Return the particles emitted over `elapsed_ms` milliseconds."""
        # fractions are not carried over between calls
        count = round_half_up((elapsed_ms / 1000.0) * self._density)

        emitted = []
        for _ in range(count):
            lifespan = PARTICLE_MIN_LIFESPAN + round_half_up(self.rng.random() * PARTICLE_MAX_LIFESPAN_INCREASE)

            vel = self._direction.copy()
            if self._randomise_initial_velocity:
                jitter_x = self.rng.uniform(-0.5, 0.5)
                jitter_y = self.rng.uniform(-0.5, 0.5)
                if jitter_x != 0.0:
                    vel.x += jitter_x
                if jitter_y != 0.0:
                    vel.y += jitter_y

            # longer lived and faster particles are drawn bigger
            radius = (lifespan / PARTICLE_MAX_LIFESPAN) * self._particle_max_radius * vel.length()

            particle = Particle(self._pos, vel, lifespan, radius)
            particle.base_colour = RGBA.build_random(self.rng)
            # a zero draw is mapped to MAX_INVERSE_MASS by the setter
            particle.mass = self.rng.random()
            emitted.append(particle)

        return emitted

    def __repr__(self):
        return (f"<Emitter pos=({self._pos.x:.1f}, {self._pos.y:.1f}) dir=({self._direction.x:.3f}, {self._direction.y:.3f}) "
                f"density={self._density} max_radius={self._particle_max_radius} randomise={self._randomise_initial_velocity}>")
