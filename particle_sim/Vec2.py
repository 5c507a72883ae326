import math


class Vec2:
    """Minimal mutable 2D vector.

    scale/add/clear work in place on the receiver; the arithmetic operators
    return new vectors. Arguments are not checked, NaN simply propagates.
    """

    def __init__(self, x, y):
        self.x = float(x)
        self.y = float(y)

    def scale(self, scalar):
        self.x *= scalar
        self.y *= scalar

    def add(self, other):
        self.x += other.x
        self.y += other.y

    def clear(self):
        self.x = 0.0
        self.y = 0.0

    def copy(self):
        return Vec2(self.x, self.y)

    def length(self):
        return math.hypot(self.x, self.y)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    def __repr__(self):
        return f"Vec2({self.x:.4f}, {self.y:.4f})"
