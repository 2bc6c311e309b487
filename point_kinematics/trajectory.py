import logging
from typing import NamedTuple

import numpy as np
import pandas as pd

from point_kinematics.errors import ComputationError, DomainError

logger = logging.getLogger(__name__)

# highlighted instant is matched against samples with this tolerance
NEAR_TOLERANCE = 0.01


class TrajectorySample(NamedTuple):
    t: float
    x: float
    y: float


class Trajectory:
    """
    Ordered, fully materialised sequence of TrajectorySample with increasing t.
    """

    def __init__(self, samples):
        self._samples = tuple(TrajectorySample(*s) for s in samples)
        if not self._samples:
            raise ComputationError("trajectory has no samples", "trajectory")

    def __len__(self):
        return len(self._samples)

    def __iter__(self):
        return iter(self._samples)

    def __getitem__(self, index):
        return self._samples[index]

    def __eq__(self, other):
        if not isinstance(other, Trajectory):
            return NotImplemented
        return self._samples == other._samples

    def __repr__(self):
        return f"Trajectory({len(self)} samples, t={self.ts[0]:g}..{self.ts[-1]:g})"

    @property
    def ts(self) -> np.ndarray:
        return np.array([s.t for s in self._samples])

    @property
    def xs(self) -> np.ndarray:
        return np.array([s.x for s in self._samples])

    @property
    def ys(self) -> np.ndarray:
        return np.array([s.y for s in self._samples])

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self._samples, columns=["t", "x", "y"])

    def sample_near(self, t, tolerance=NEAR_TOLERANCE) -> TrajectorySample:
        """
        Return the only sample whose parameter lies within `tolerance` of t.

        Args:
            t: highlighted instant.
            tolerance: half-width of the match window (strict).
        Returns:
            The matching TrajectorySample.
        Raises:
            ComputationError when no sample or several samples match.
        """
        matches = [s for s in self._samples if abs(s.t - t) < tolerance]
        if not matches:
            raise ComputationError("no sample near highlighted instant", "trajectory", t)
        if len(matches) > 1:
            raise ComputationError(
                f"{len(matches)} samples near highlighted instant, expected one",
                "trajectory",
                t,
            )
        return matches[0]


def sample_trajectory(kinematics, t1, scale=1, n=20):
    """
    Sample the path on [0.5*t1, 1.5*t1] and scale it uniformly.

    t_i = start + i*step for i = 0..n. All points are multiplied by
        factor = scale / min(maxX - minX, maxY - minY)
    so the smaller side of the bounding box equals `scale`. Only the spatial
    samples are scaled.
    """
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise DomainError(f"number of steps must be an integer, got {n!r}", "trajectory", t1)
    if n < 1:
        raise DomainError(f"need at least one step, got n={n}", "trajectory", t1)
    if not t1 > 0:
        raise DomainError(f"t1 must be positive, got {t1}", "trajectory", t1)
    if not scale > 0:
        raise DomainError(f"scale must be positive, got {scale}", "trajectory", t1)

    start = 0.5 * t1
    end = 1.5 * t1
    step = (end - start) / n

    ts = [start + i * step for i in range(n + 1)]
    raw = np.array([kinematics.position(ti) for ti in ts])

    width = raw[:, 0].max() - raw[:, 0].min()
    height = raw[:, 1].max() - raw[:, 1].min()
    if not (np.isfinite(width) and np.isfinite(height)):
        raise ComputationError(
            f"trajectory extent overflows (width={width:g}, height={height:g})",
            "trajectory",
            t1,
        )
    if width == 0 or height == 0:
        raise ComputationError(
            f"trajectory has zero extent (width={width:g}, height={height:g})",
            "trajectory",
            t1,
        )

    factor = scale / min(width, height)
    scaled = raw * factor
    logger.debug(
        "Sampled %d points on [%g, %g], width=%g height=%g factor=%g",
        n + 1, start, end, width, height, factor,
    )
    return Trajectory(
        TrajectorySample(ti, float(x), float(y)) for ti, (x, y) in zip(ts, scaled)
    )
