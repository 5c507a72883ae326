class SimulationArea:
    """Axis-aligned rectangle; particles outside it are pruned by the simulator."""

    def __init__(self, min_x, max_x, min_y, max_y):
        self.min_x = float(min_x)
        self.max_x = float(max_x)
        self.min_y = float(min_y)
        self.max_y = float(max_y)

    def contains(self, point):
        # edges count as inside
        return (self.min_x <= point.x <= self.max_x and
                self.min_y <= point.y <= self.max_y)

    def __repr__(self):
        return f"<SimulationArea x=[{self.min_x}, {self.max_x}] y=[{self.min_y}, {self.max_y}]>"
