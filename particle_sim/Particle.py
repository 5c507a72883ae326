import math
import sys

from .RGBA import RGBA
from .Vec2 import Vec2

PARTICLE_MIN_LIFESPAN = 1000  # ms
PARTICLE_MAX_LIFESPAN_INCREASE = 10000  # max ms added on top of the minimum lifespan
PARTICLE_MAX_LIFESPAN = PARTICLE_MIN_LIFESPAN + PARTICLE_MAX_LIFESPAN_INCREASE
PARTICLE_DEFAULT_RADIUS = 5.0

# stands in for the inverse of a zero (or negative) mass
MAX_INVERSE_MASS = sys.float_info.max


class Particle:
    def __init__(self, pos, vel=None, lifespan=PARTICLE_MIN_LIFESPAN, radius=PARTICLE_DEFAULT_RADIUS):
        self.pos = pos.copy() if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        self.vel = vel.copy() if isinstance(vel, Vec2) else (Vec2(vel[0], vel[1]) if vel is not None else Vec2(0.0, 0.0))
        self.lifespan = lifespan if lifespan and lifespan > 0 else PARTICLE_MIN_LIFESPAN
        self.radius = radius if radius and radius > 0 else PARTICLE_DEFAULT_RADIUS
        self.age = 0.0

        # sum of the forces applied since the last integration step
        self.force_accum = Vec2(0.0, 0.0)
        self.base_colour = RGBA()

        # immovable until a mass is assigned
        self._inv_mass = 0.0

    @property
    def inv_mass(self):
        return self._inv_mass

    @inv_mass.setter
    def inv_mass(self, value):
        # zero inverse mass means infinite mass (immovable)
        self._inv_mass = float(value) if value > 0 else 0.0

    @property
    def mass(self):
        if self._inv_mass == 0.0:
            return math.inf
        return 1.0 / self._inv_mass

    @mass.setter
    def mass(self, value):
        self._inv_mass = 1.0 / value if value > 0 else MAX_INVERSE_MASS

    @property
    def life_left(self):
        return self.lifespan - self.age

    @property
    def alive(self):
        return self.life_left > 0

    @property
    def aged_colour(self):
        """Base colour faded by the fraction of life left."""
        return self.base_colour.aged(self.life_left / self.lifespan)

    def apply_force(self, force):
        self.force_accum.add(force)

    def integrate(self, dt):
        """
        Advance the particle by `dt` milliseconds.

        Returns False once the lifespan is exhausted, in which case the
        accumulated forces are dropped and nothing else is updated. Velocity
        is updated before position (semi-implicit Euler) and the 1/2*a*dt^2
        term is dropped since dt is small.
        """
        self.age += dt
        if self.life_left <= 0:
            # forces applied this tick are discarded with the particle
            self.force_accum.clear()
            return False

        delta = self.force_accum.copy()
        delta.scale(self._inv_mass)
        delta.scale(dt)
        self.vel.add(delta)

        translation = self.vel.copy()
        translation.scale(dt)
        self.pos.add(translation)

        self.force_accum.clear()
        return True

    def __repr__(self):
        return (f"Particle(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), vel=({self.vel.x:.2f}, {self.vel.y:.2f}), "
                f"radius={self.radius:.2f}, age={self.age}, lifespan={self.lifespan}, inv_mass={self._inv_mass})")

    def __str__(self):
        return self.__repr__()
