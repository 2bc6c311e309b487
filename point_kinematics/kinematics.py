import functools
import logging
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from point_kinematics.errors import ComputationError, DomainError
from point_kinematics.trajectory import sample_trajectory

"""
Module: kinematics.py
Closed-form kinematics of a point moving by the parametric law

    x(t) = a*t**2 + b
    y(t) = sqrt(c*t**3 + d)

Velocity, acceleration and the tangential / normal decomposition are the exact
analytic derivatives of this law. They have to be re-derived by hand if the
shape of the law changes; nothing here differentiates numerically.
"""

logger = logging.getLogger(__name__)

# |w**2 - wt**2| below this fraction of w**2 is rounding of an exact zero
NORMAL_RESIDUE_RTOL = 1e-12


def _quiet(func):
    # overflow surfaces through _finite instead of numpy warnings
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(over="ignore", invalid="ignore"):
            return func(*args, **kwargs)
    return wrapper


def _finite(value, quantity, t):
    if not np.isfinite(value):
        raise ComputationError(f"{quantity} = {value} overflows double precision", quantity, t)
    return float(value)


class MotionParameters(NamedTuple):
    a: float
    b: float
    c: float
    d: float


@dataclass(frozen=True)
class InstantState:
    """All derived scalars of the point at a single instant t."""

    t: float
    x: float
    y: float
    vx: float
    vy: float
    v: float
    wx: float
    wy: float
    w: float
    wt: float
    wn: float
    ro: float


class PointKinematics:
    def __init__(self, a, b, c, d):
        """
        Evaluator for the law x = a*t^2 + b, y = sqrt(c*t^3 + d).

        The parameters are fixed for the lifetime of the evaluator; every
        method is a pure function of t.
        """
        self.params = MotionParameters(float(a), float(b), float(c), float(d))

    @classmethod
    def from_parameters(cls, params: MotionParameters):
        return cls(*params)

    def __repr__(self):
        a, b, c, d = self.params
        return f"PointKinematics(a={a!r}, b={b!r}, c={c!r}, d={d!r})"

    def _radicand(self, t, quantity):
        # c*t^3 + d, the expression under the square root of y(t)
        return _finite(self.params.c * np.float64(t) ** 3 + self.params.d, quantity, t)

    def _require_positive_radicand(self, t, quantity):
        r = self._radicand(t, quantity)
        if r < 0:
            raise DomainError(f"c*t^3 + d = {r:g} is negative", quantity, t)
        if r == 0:
            raise DomainError("c*t^3 + d is zero, derivative of y is unbounded", quantity, t)
        return r

    # --- position -----------------------------------------------------------

    @_quiet
    def position(self, t):
        """
        x = a*t^2 + b
        y = sqrt(c*t^3 + d)
        """
        a, b, _, _ = self.params
        r = self._radicand(t, "y")
        if r < 0:
            raise DomainError(f"c*t^3 + d = {r:g} is negative", "y", t)
        x = a * np.float64(t) ** 2 + b
        return _finite(x, "x", t), float(np.sqrt(r))

    # --- velocity -----------------------------------------------------------

    @_quiet
    def velocity(self, t):
        """
        vx = 2*a*t
        vy = 3*c*t^2 / (2*sqrt(d + c*t^3))
        """
        a, _, c, _ = self.params
        r = self._require_positive_radicand(t, "Vy")
        t = np.float64(t)
        vx = 2 * a * t
        vy = (3 * c * t ** 2) / (2 * np.sqrt(r))
        return _finite(vx, "Vx", t), _finite(vy, "Vy", t)

    @_quiet
    def speed(self, t):
        vx, vy = self.velocity(t)
        return _finite(np.sqrt(np.float64(vx) ** 2 + vy ** 2), "V", t)

    # --- acceleration -------------------------------------------------------

    @_quiet
    def acceleration(self, t):
        """
        wx = 2*a
        wy = 3*c*t*(c*t^3 + 4*d) / (4*(c*t^3 + d)^(3/2))
        """
        a, _, c, d = self.params
        r = self._require_positive_radicand(t, "Wy")
        t = np.float64(t)
        numerator = (3 * c * t) * (c * t ** 3 + 4 * d)
        denominator = 4 * np.power(r, 1.5)
        return 2 * a, _finite(numerator / denominator, "Wy", t)

    @_quiet
    def acceleration_magnitude(self, t):
        wx, wy = self.acceleration(t)
        return _finite(np.sqrt(np.float64(wx) ** 2 + wy ** 2), "W", t)

    @_quiet
    def tangential_acceleration(self, t):
        """Projection of the acceleration on the velocity direction."""
        vx, vy = self.velocity(t)
        wx, wy = self.acceleration(t)
        v = self.speed(t)
        if v == 0:
            raise DomainError("point is at rest, tangential direction undefined", "Wt", t)
        return _finite((np.float64(vx) * wx + vy * wy) / v, "Wt", t)

    @_quiet
    def normal_acceleration(self, t):
        w = self.acceleration_magnitude(t)
        wt = self.tangential_acceleration(t)
        residue = _finite(np.float64(w) ** 2 - np.float64(wt) ** 2, "Wn", t)
        if abs(residue) <= NORMAL_RESIDUE_RTOL * w ** 2:
            return 0.0
        if residue < 0:
            raise ComputationError(
                f"w^2 - wt^2 = {residue:g} is negative (w={w:g}, wt={wt:g})", "Wn", t
            )
        return float(np.sqrt(residue))

    @_quiet
    def curvature_radius(self, t):
        """ro = v^2 / wn, radius of the osculating circle."""
        v = self.speed(t)
        wn = self.normal_acceleration(t)
        if wn == 0:
            raise DomainError("normal acceleration is zero, motion is straight", "Ro", t)
        return _finite(np.float64(v) ** 2 / wn, "Ro", t)

    # --- bundles ------------------------------------------------------------

    def state(self, t) -> InstantState:
        x, y = self.position(t)
        vx, vy = self.velocity(t)
        wx, wy = self.acceleration(t)
        state = InstantState(
            t=t,
            x=x,
            y=y,
            vx=vx,
            vy=vy,
            v=self.speed(t),
            wx=wx,
            wy=wy,
            w=self.acceleration_magnitude(t),
            wt=self.tangential_acceleration(t),
            wn=self.normal_acceleration(t),
            ro=self.curvature_radius(t),
        )
        logger.debug("State at t=%g: %s", t, state)
        return state

    def sample(self, t1, scale=1, n=20):
        return sample_trajectory(self, t1, scale=scale, n=n)
