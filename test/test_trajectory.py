"""Tests for trajectory sampling and normalisation."""

import numpy as np
import pytest

from point_kinematics import (
    ComputationError,
    DomainError,
    PointKinematics,
    Trajectory,
    sample_trajectory,
)


def test_worked_example_has_21_samples(kinematics, t1):
    trajectory = kinematics.sample(t1, n=20)
    assert len(trajectory) == 21
    assert trajectory[0].t == pytest.approx(0.325)
    assert trajectory[-1].t == pytest.approx(0.975)


def test_sampling_is_deterministic_and_ordered(kinematics, t1):
    first = sample_trajectory(kinematics, t1, scale=3, n=20)
    second = sample_trajectory(kinematics, t1, scale=3, n=20)
    assert first == second
    assert np.all(np.diff(first.ts) > 0)


@pytest.mark.parametrize("scale", [0.5, 1, 3, 10])
def test_smaller_extent_equals_scale(kinematics, t1, scale):
    trajectory = kinematics.sample(t1, scale=scale)
    width = trajectory.xs.max() - trajectory.xs.min()
    height = trajectory.ys.max() - trajectory.ys.min()
    assert min(width, height) == pytest.approx(scale)


def test_doubling_scale_doubles_coordinates(kinematics, t1):
    single = kinematics.sample(t1, scale=1.5)
    double = kinematics.sample(t1, scale=3.0)
    np.testing.assert_allclose(double.xs, 2 * single.xs)
    np.testing.assert_allclose(double.ys, 2 * single.ys)
    np.testing.assert_array_equal(double.ts, single.ts)


def test_scaled_points_are_proportional_to_raw_positions(kinematics, t1):
    trajectory = kinematics.sample(t1, scale=3)
    raw = np.array([kinematics.position(t) for t in trajectory.ts])
    ratios = np.concatenate([trajectory.xs / raw[:, 0], trajectory.ys / raw[:, 1]])
    np.testing.assert_allclose(ratios, ratios[0])


def test_zero_width_trajectory_raises_computation_error(t1):
    k = PointKinematics(0.0, -1.26, 0.72, 0.75)
    with pytest.raises(ComputationError):
        k.sample(t1)


def test_invalid_sample_raises_domain_error():
    # c*t^3 + d < 0 for t < 1
    k = PointKinematics(1.0, 0.0, 1.0, -1.0)
    with pytest.raises(DomainError) as excinfo:
        k.sample(1.0)
    assert excinfo.value.t == pytest.approx(0.5)


@pytest.mark.parametrize("kwargs", [{"n": 0}, {"scale": 0}, {"scale": -1}])
def test_bad_sampling_arguments(kinematics, t1, kwargs):
    with pytest.raises(DomainError):
        kinematics.sample(t1, **kwargs)


def test_non_positive_t1_rejected(kinematics):
    with pytest.raises(DomainError):
        kinematics.sample(0.0)


def test_sample_near_finds_highlighted_instant(kinematics, t1):
    trajectory = kinematics.sample(t1, scale=3)
    point = trajectory.sample_near(t1)
    assert point is trajectory[10]
    assert point.t == pytest.approx(t1)


def test_sample_near_without_match(kinematics, t1):
    trajectory = kinematics.sample(t1)
    with pytest.raises(ComputationError, match="no sample near highlighted instant"):
        trajectory.sample_near(0.1)


def test_sample_near_with_several_matches(kinematics, t1):
    trajectory = kinematics.sample(t1, n=200)
    with pytest.raises(ComputationError, match="samples near highlighted instant"):
        trajectory.sample_near(t1)


def test_to_frame(kinematics, t1):
    frame = kinematics.sample(t1, n=4).to_frame()
    assert list(frame.columns) == ["t", "x", "y"]
    assert len(frame) == 5
    assert frame["t"].is_monotonic_increasing


def test_empty_trajectory_rejected():
    with pytest.raises(ComputationError):
        Trajectory([])


@pytest.mark.parametrize("n", [2.5, "20", True])
def test_non_integer_step_count_rejected(kinematics, t1, n):
    with pytest.raises(DomainError, match="must be an integer"):
        kinematics.sample(t1, n=n)


def test_numpy_integer_step_count_accepted(kinematics, t1):
    assert len(kinematics.sample(t1, n=np.int64(4))) == 5


def test_overflowing_samples_raise_computation_error(kinematics):
    with pytest.raises(ComputationError):
        kinematics.sample(1e110)
