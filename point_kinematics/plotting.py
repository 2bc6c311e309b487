"""
Diagrams of the trajectory, the velocity parallelogram and the acceleration
decomposition.

Builders return plain series dictionaries

    {"name": str, "x": [...], "y": [...], "mode": "scatter" | "lines",
     "style": {"color": ..., "dash": ..., "width": ...}}

plus an optional layout {"xaxis": [min, max], "yaxis": [min, max]}; `render`
turns them into a matplotlib figure. Arrows are drawn from the scaled position
of the highlighted sample with unscaled vector components.
"""

import logging

import matplotlib.pyplot as plt

from point_kinematics.geometry import acceleration_components

logger = logging.getLogger(__name__)

DASH_STYLES = {
    None: "-",
    "solid": "-",
    "dash": "--",
    "dot": ":",
    "dashdot": "-.",
}

# relative padding around the vector construction
MARGIN = 0.25
MIN_MARGIN = 0.1


def _linestyle(dash):
    if dash not in DASH_STYLES:
        known = sorted(k for k in DASH_STYLES if k)
        raise ValueError(f"unknown dash style {dash!r}, expected one of {known}")
    return DASH_STYLES[dash]


def _series(name, x, y, mode="lines", **style):
    return {
        "name": name,
        "x": [float(v) for v in x],
        "y": [float(v) for v in y],
        "mode": mode,
        "style": {k: v for k, v in style.items() if v is not None},
    }


def _path_and_point(trajectory, point):
    return [
        _series("trajectory", trajectory.xs, trajectory.ys, mode="scatter"),
        _series("M", [point.x], [point.y], mode="scatter", color="red"),
    ]


def square_layout(xs, ys, margin=MARGIN, min_margin=MIN_MARGIN):
    """Square axis ranges covering all (xs, ys) plus a margin."""
    x_lo, x_hi = min(xs), max(xs)
    y_lo, y_hi = min(ys), max(ys)
    span = max(x_hi - x_lo, y_hi - y_lo)
    half = span / 2 + max(span * margin, min_margin)
    x_mid = (x_lo + x_hi) / 2
    y_mid = (y_lo + y_hi) / 2
    return {
        "xaxis": [x_mid - half, x_mid + half],
        "yaxis": [y_mid - half, y_mid + half],
    }


def trajectory_series(trajectory, t1):
    point = trajectory.sample_near(t1)
    return _path_and_point(trajectory, point)


def velocity_series(state, trajectory, t1):
    """Velocity parallelogram at the sample nearest to t1."""
    point = trajectory.sample_near(t1)
    ox, oy = point.x, point.y
    vx, vy = state.vx, state.vy

    series = [
        _series("Vy", [ox, ox], [oy, oy + vy]),
        _series("Vx", [ox, ox + vx], [oy, oy]),
        _series("V", [ox, ox + vx], [oy, oy + vy]),
        _series("", [ox + vx, ox + vx], [oy, oy + vy], dash="dashdot", width=2),
        _series("", [ox, ox + vx], [oy + vy, oy + vy], dash="dashdot", width=2),
    ]
    series += _path_and_point(trajectory, point)
    layout = square_layout([ox, ox + vx], [oy, oy + vy])
    return series, layout


def acceleration_series(state, trajectory, t1):
    """
    Acceleration W with its Cartesian components and its
    normal / tangential decomposition at the sample nearest to t1.
    """
    point = trajectory.sample_near(t1)
    ox, oy = point.x, point.y
    wx, wy = state.wx, state.wy
    (wnx, wny), (wtx, wty) = acceleration_components(ox, oy, state.wt, state.wn, state.w)

    series = [
        _series("Wy", [ox, ox], [oy, oy + wy], color="blue"),
        _series("Wx", [ox, ox + wx], [oy, oy], color="blue"),
        _series("W", [ox, ox + wx], [oy, oy + wy], color="black"),
        _series("", [ox + wx, ox + wx], [oy, oy + wy], dash="dashdot", width=2, color="blue"),
        _series("", [ox, ox + wx], [oy + wy, oy + wy], dash="dashdot", width=2, color="blue"),
    ]
    series += _path_and_point(trajectory, point)
    series += [
        _series("Wn", [ox, wnx], [oy, wny], mode="scatter", color="pink"),
        _series("Wt", [ox, wtx], [oy, wty], mode="scatter", color="pink"),
        _series("", [wtx, ox + wx], [wty, oy + wy], dash="dashdot", width=2, color="pink"),
        _series("", [wnx, ox + wx], [wny, oy + wy], dash="dashdot", width=2, color="pink"),
    ]
    layout = square_layout([ox, ox + wx, wnx, wtx], [oy, oy + wy, wny, wty])
    return series, layout


def render(series, layout=None, title=None):
    """
    Draw a list of series on a new figure.

    "scatter" series get markers joined by a line, "lines" series a plain line.
    Returns the matplotlib Figure; showing or saving it is up to the caller.
    """
    fig, ax = plt.subplots(figsize=(8, 8))
    for s in series:
        style = s.get("style", {})
        kwargs = {
            "linestyle": _linestyle(style.get("dash")),
            "linewidth": style.get("width", 1.5),
        }
        if "color" in style:
            kwargs["color"] = style["color"]
        if s.get("mode") == "scatter":
            kwargs["marker"] = "o"
        if s.get("name"):
            kwargs["label"] = s["name"]
        ax.plot(s["x"], s["y"], **kwargs)

    if layout:
        if "xaxis" in layout:
            ax.set_xlim(*layout["xaxis"])
        if "yaxis" in layout:
            ax.set_ylim(*layout["yaxis"])
        ax.set_aspect("equal", adjustable="box")

    if title:
        ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.grid(True)
    ax.legend(loc="upper left", fontsize=9)
    fig.tight_layout()
    logger.debug("Rendered %d series%s", len(series), f" for '{title}'" if title else "")
    return fig
