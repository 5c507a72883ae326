"""
Bridge between the control panel's shared dict and a Simulator.

The panel runs in another process and only writes plain values; the main loop
calls apply_controls() once per frame to push them through the simulator's
public setters.
"""

import math

from .Vec2 import Vec2
from .forces import Drag, Gravity
from .simulator import DEFAULT_DRAG_DAMPING, DEFAULT_GRAVITY_FIELD


def default_controls(max_particles):
    return {
        'max_particles': int(max_particles),
        'gravity_enabled': True,
        'gravity_y': DEFAULT_GRAVITY_FIELD[1],
        'drag_enabled': True,
        'drag_damping': DEFAULT_DRAG_DAMPING,
    }


def _get_float(shared, key):
    try:
        v = shared.get(key)
        if v is None:
            return None
        v = float(v)
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def apply_controls(simulator, shared):
    """Apply the panel values to `simulator`; malformed values are skipped."""
    max_particles = _get_float(shared, 'max_particles')
    if max_particles is not None and int(max_particles) != simulator.max_particles:
        simulator.set_max_particles_limit(int(max_particles))

    if shared.get('gravity_enabled', True):
        gravity_y = _get_float(shared, 'gravity_y')
        if gravity_y is not None:
            current = simulator.gravity
            if current is None or current.field != Vec2(0.0, gravity_y):
                simulator.set_gravity(Gravity(Vec2(0.0, gravity_y)))
    elif simulator.gravity is not None:
        simulator.set_gravity(None)

    if shared.get('drag_enabled', True):
        damping = _get_float(shared, 'drag_damping')
        if damping is not None:
            current = simulator.drag
            if current is None or current.damping_factor != damping:
                simulator.set_drag(Drag(damping))
    elif simulator.drag is not None:
        simulator.set_drag(None)
