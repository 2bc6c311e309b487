import pytest

from point_kinematics.errors import ComputationError
from point_kinematics.plotting import (
    acceleration_series,
    render,
    square_layout,
    trajectory_series,
    velocity_series,
)


@pytest.fixture
def trajectory(kinematics, t1):
    return kinematics.sample(t1, scale=3)


@pytest.fixture
def state(kinematics, t1):
    return kinematics.state(t1)


def _inside(layout, x, y):
    (x_lo, x_hi), (y_lo, y_hi) = layout["xaxis"], layout["yaxis"]
    return x_lo <= x <= x_hi and y_lo <= y <= y_hi


def test_trajectory_series_highlights_instant(trajectory, t1):
    path, point = trajectory_series(trajectory, t1)
    assert len(path["x"]) == len(trajectory)
    assert point["x"] == [trajectory[10].x]
    assert point["style"]["color"] == "red"


def test_velocity_parallelogram(state, trajectory, t1):
    series, layout = velocity_series(state, trajectory, t1)
    assert len(series) == 7
    v = next(s for s in series if s["name"] == "V")
    assert v["x"][1] - v["x"][0] == pytest.approx(state.vx)
    assert v["y"][1] - v["y"][0] == pytest.approx(state.vy)
    assert _inside(layout, v["x"][0], v["y"][0])
    assert _inside(layout, v["x"][1], v["y"][1])
    assert sum(1 for s in series if s["style"].get("dash") == "dashdot") == 2


def test_acceleration_construction(state, trajectory, t1):
    series, layout = acceleration_series(state, trajectory, t1)
    assert len(series) == 11
    names = [s["name"] for s in series]
    for name in ("Wx", "Wy", "W", "Wn", "Wt"):
        assert name in names
    for s in series:
        if s["name"] == "trajectory":
            continue
        for x, y in zip(s["x"], s["y"]):
            assert _inside(layout, x, y)


def test_layout_centered_on_highlighted_point_for_worked_example(state, trajectory, t1):
    _, layout = velocity_series(state, trajectory, t1)
    # scaled point lies near (-10.4, 9.4)
    assert layout["xaxis"][0] < -10.4 < layout["xaxis"][1]
    assert layout["yaxis"][0] < 9.4 < layout["yaxis"][1]


def test_square_layout_is_square():
    layout = square_layout([0.0, 2.0], [0.0, 0.5])
    width = layout["xaxis"][1] - layout["xaxis"][0]
    height = layout["yaxis"][1] - layout["yaxis"][0]
    assert width == pytest.approx(height)
    assert width == pytest.approx(3.0)


def test_series_need_highlighted_sample(state, kinematics, t1):
    dense = kinematics.sample(t1, n=200)
    with pytest.raises(ComputationError):
        velocity_series(state, dense, t1)


def test_render_draws_every_series(state, trajectory, t1):
    series, layout = acceleration_series(state, trajectory, t1)
    fig = render(series, layout, title="Acceleration")
    ax = fig.axes[0]
    assert len(ax.lines) == len(series)
    assert ax.get_xlim() == pytest.approx(tuple(layout["xaxis"]))
    assert ax.get_title() == "Acceleration"
    dashed = [line for line in ax.lines if line.get_linestyle() == "-."]
    assert len(dashed) == 4


def test_render_rejects_unknown_dash_style():
    series = [{"name": "V", "x": [0.0, 1.0], "y": [0.0, 1.0], "mode": "lines",
               "style": {"dash": "longdash"}}]
    with pytest.raises(ValueError, match="unknown dash style 'longdash'"):
        render(series)
