import math

from circlecurves.model.curves import Curve
from circlecurves.model.geometry_primitives import Circle, Vector
from circlecurves.model.geometry_utils import deg2rad


def radial_chord_curves(circle: Circle, count: int, reach: float = 1.8) -> list[Curve]:
    """
    Straight chords through the centre, one every 180/count degrees starting at 4.5 degrees.

    Curve i crosses the circle at 4.5 + i*180/count degrees (number i + 1) and on
    the opposite side (number i + 1 + count).
    """
    curves = []
    for i in range(count):
        angle = deg2rad(4.5 + 180.0 * i / count)
        start = circle.center + Vector.from_polar(angle, reach * circle.radius)
        end = circle.center + Vector.from_polar(angle + math.pi, reach * circle.radius)
        curves.append(Curve(start=start, end=end, control=circle.center, color="#000000"))
    return curves
