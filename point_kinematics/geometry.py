import numpy as np

from point_kinematics.errors import DomainError


def rotate(cx, cy, x, y, angle):
    """
    Rotate (x, y) about (cx, cy) by `angle` radians, clockwise for a y-up plot:
    x' = cos*(x - cx) + sin*(y - cy) + cx
    y' = cos*(y - cy) - sin*(x - cx) + cy
    """
    cos, sin = np.cos(angle), np.sin(angle)
    return (
        float(cos * (x - cx) + sin * (y - cy) + cx),
        float(cos * (y - cy) - sin * (x - cx) + cy),
    )


def acceleration_components(cx, cy, wt, wn, w):
    """
    Endpoints of the normal and tangential acceleration arrows drawn from (cx, cy).

    Both arrows start as horizontal vectors of length wn / wt and are turned
    by angles taken from atan(wn/w) and atan(wt/w).

    Returns:
        ((wnx, wny), (wtx, wty))
    """
    if w == 0:
        raise DomainError("acceleration is zero, component angles undefined", "W")
    wn_angle = np.arctan(wn / w)
    normal = rotate(cx, cy, cx + wn, cy, wn_angle)

    wt_angle = np.arctan(wt / w)
    tangential = rotate(cx, cy, cx + wt, cy, wt_angle - wn_angle - np.pi / 2)
    return normal, tangential
