import logging
import math
import numbers
from typing import NamedTuple

from .RGBA import RGBA
from .SimulationArea import SimulationArea
from .Vec2 import Vec2
from .forces import Drag, Gravity

logger = logging.getLogger("particle_sim")

DEFAULT_MAX_PARTICLES = 500
DEFAULT_GRAVITY_FIELD = (0.0, 0.00001)  # px / ms^2
DEFAULT_DRAG_DAMPING = 0.001


def _particle_limit(value):
    """Coerce a particle ceiling to an int >= 1, or None if it is unusable."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        return None
    limit = int(value)
    return limit if limit >= 1 else None


class RenderedParticle(NamedTuple):
    pos: Vec2
    radius: float
    colour: RGBA


class Simulator:
    """
    Container for the emitters and the live particle pool.

    The pool never holds more than `max_particles` particles, and particles
    leaving `boundaries` are pruned regardless of their remaining life.
    """

    def __init__(self, max_particles, min_x, max_x, min_y, max_y):
        self.emitters = []
        self.particles = []
        self.max_particles = _particle_limit(max_particles) or DEFAULT_MAX_PARTICLES
        self.boundaries = SimulationArea(min_x, max_x, min_y, max_y)

        self.gravity = Gravity(Vec2(*DEFAULT_GRAVITY_FIELD))
        self.drag = Drag(DEFAULT_DRAG_DAMPING)

        logger.info("Simulator created: max_particles=%d, boundaries=%r", self.max_particles, self.boundaries)

    def __len__(self):
        return len(self.particles)

    def set_max_particles_limit(self, max_particles):
        """Change the particle ceiling. Values that do not give at least one slot are ignored."""
        limit = _particle_limit(max_particles)
        if limit is None:
            return
        self.max_particles = limit
        if len(self.particles) > self.max_particles:
            # newest particles go first
            del self.particles[self.max_particles:]

    def set_gravity(self, gravity=None):
        """Replace the gravity force; None disables it."""
        self.gravity = gravity

    def set_drag(self, drag=None):
        """Replace the drag force; None disables it."""
        self.drag = drag

    def add_emitter(self, emitter):
        self.emitters.append(emitter)

    def add_particle(self, particle):
        # debug path, particles normally come from emitters
        if len(self.particles) < self.max_particles:
            self.particles.append(particle)
        else:
            logger.debug("Pool full (%d), dropping %r", self.max_particles, particle)

    def tick(self, elapsed_ms):
        """
        Advance the simulation by `elapsed_ms` milliseconds.

        Forces are applied and particles integrated; dead particles and those
        outside the boundaries are dropped. Emitters are then polled in order
        and their particles admitted while there is room. The first batch that
        does not fit is truncated and the remaining emitters are skipped for
        this tick, so later emitters starve under sustained overflow.
        """
        gravity = self.gravity
        drag = self.drag

        for p in self.particles:
            if gravity is not None:
                gravity.apply(p, elapsed_ms)
            if drag is not None:
                drag.apply(p, elapsed_ms)

        self.particles = [p for p in self.particles
                          if p.integrate(elapsed_ms) and self.boundaries.contains(p.pos)]

        for i, emitter in enumerate(self.emitters):
            new_particles = emitter.emit(elapsed_ms)
            room = max(0, self.max_particles - len(self.particles))
            if len(new_particles) > room:
                self.particles.extend(new_particles[:room])
                logger.debug("Emitter %d: admitted %d of %d particles, skipping %d emitter(s)",
                             i, room, len(new_particles), len(self.emitters) - i - 1)
                break
            self.particles.extend(new_particles)

    def snapshot(self):
        """
        Read-only view of the live particles for a renderer.

        No liveness check is done, so it is only meaningful right after tick().
        """
        return tuple(RenderedParticle(p.pos.copy(), p.radius, p.aged_colour) for p in self.particles)

    def __repr__(self):
        return (f"<Simulator particles={len(self.particles)}/{self.max_particles} emitters={len(self.emitters)} "
                f"gravity={self.gravity!r} drag={self.drag!r}>")
