"""Closed-form kinematics of a point: trajectory, velocity, acceleration, curvature."""

from point_kinematics.errors import ComputationError, DomainError, KinematicsError
from point_kinematics.geometry import acceleration_components, rotate
from point_kinematics.kinematics import InstantState, MotionParameters, PointKinematics
from point_kinematics.trajectory import Trajectory, TrajectorySample, sample_trajectory

__version__ = "0.1.0"

__all__ = [
    "ComputationError",
    "DomainError",
    "InstantState",
    "KinematicsError",
    "MotionParameters",
    "PointKinematics",
    "Trajectory",
    "TrajectorySample",
    "acceleration_components",
    "rotate",
    "sample_trajectory",
]
