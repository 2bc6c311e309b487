import matplotlib

matplotlib.use("Agg")

import pytest

from point_kinematics import PointKinematics
from point_kinematics import config


@pytest.fixture
def kinematics():
    return PointKinematics(config.A, config.B, config.C, config.D)


@pytest.fixture
def t1():
    return config.T1
