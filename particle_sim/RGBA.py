import logging
import numbers

from .utils import round_half_up

logger = logging.getLogger("particle_sim")


class RGBA:
    """8-bit RGB channels plus an alpha in [0, 1]. Defaults to opaque white."""

    def __init__(self):
        self.r = 255
        self.g = 255
        self.b = 255
        self.a = 1.0

    @staticmethod
    def _is_acceptable_channel(c):
        if isinstance(c, bool) or not isinstance(c, numbers.Real):
            return False
        return float(c).is_integer() and 0 <= c < 256

    @staticmethod
    def _is_acceptable_alpha(a):
        if isinstance(a, bool) or not isinstance(a, numbers.Real):
            return False
        return 0.0 <= a <= 1.0

    @classmethod
    def build(cls, r, g, b, a):
        """
        Build a colour from raw components.

        Invalid input never raises: if any channel is out of range the whole
        colour falls back to opaque white and a warning is logged.
        """
        rgba = cls()
        if (cls._is_acceptable_channel(r) and cls._is_acceptable_channel(g)
                and cls._is_acceptable_channel(b) and cls._is_acceptable_alpha(a)):
            rgba.r = int(r)
            rgba.g = int(g)
            rgba.b = int(b)
            rgba.a = float(a)
        else:
            logger.warning("Invalid parameters passed to RGBA.build: rgba(%s,%s,%s,%s)", r, g, b, a)
        return rgba

    @classmethod
    def build_random(cls, rng):
        """Random opaque colour drawn from `rng` (a numpy Generator)."""
        return cls.build(int(rng.integers(0, 256)), int(rng.integers(0, 256)), int(rng.integers(0, 256)), 1.0)

    def aged(self, fraction):
        # fades to black and transparent together
        return RGBA.build(round_half_up(self.r * fraction),
                          round_half_up(self.g * fraction),
                          round_half_up(self.b * fraction),
                          fraction)

    def to_tuple(self):
        return (self.r, self.g, self.b)

    def __eq__(self, other):
        if other is None or not isinstance(other, RGBA):
            return False
        return (self.r, self.g, self.b, self.a) == (other.r, other.g, other.b, other.a)

    def __repr__(self):
        return f"RGBA({self.r}, {self.g}, {self.b}, {self.a})"

    def __str__(self):
        return f"rgba({self.r},{self.g},{self.b},{self.a})"
