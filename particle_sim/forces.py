"""
Global forces applied by the simulator to every particle each tick.

Both write into the particle's force accumulator instead of touching the
velocity directly, so further per-particle forces can be added the same way.
"""


class Force:
    """Base class for forces. Only Gravity and Drag exist."""

    def apply(self, particle, dt=None):
        raise NotImplementedError("Subclasses should implement this method.")

    def __str__(self):
        return self.__repr__()


class Gravity(Force):
    def __init__(self, field):
        self.field = field.copy()

    def apply(self, particle, dt=None):
        # infinite mass: nothing to do
        if particle.inv_mass <= 0:
            return
        # scaled by the mass so every particle ends up with the same acceleration
        scaled = self.field.copy()
        scaled.scale(1.0 / particle.inv_mass)
        particle.apply_force(scaled)

    def __repr__(self):
        return f"<Gravity field=({self.field.x}, {self.field.y})>"


class Drag(Force):
    def __init__(self, damping_factor):
        self.damping_factor = float(damping_factor)

    def apply(self, particle, dt=None):
        if particle.inv_mass <= 0:
            return
        # linear in the velocity, opposing it
        scaled = particle.vel.copy()
        scaled.scale(-self.damping_factor)
        particle.apply_force(scaled)

    def __repr__(self):
        return f"<Drag damping_factor={self.damping_factor}>"
