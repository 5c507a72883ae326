import math


def round_half_up(value):
    """Round to the nearest integer, .5 going up (round() would go to even)."""
    return int(math.floor(value + 0.5))
