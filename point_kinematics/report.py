import logging

logger = logging.getLogger(__name__)

TRAJECTORY_HEADER = "Траекторія:"

# (label, InstantState field) in report order
SCALAR_LINES = [
    ("Координата\t x1", "x"),
    ("Координата\t y1", "y"),
    ("Складова\t Vx", "vx"),
    ("Складова\t Vy", "vy"),
    ("Швидкість\t V", "v"),
    ("Складова\t Wx", "wx"),
    ("Складова\t Wy", "wy"),
    ("Прискорення\t W", "w"),
    ("Складова\t Wt", "wt"),
    ("Складова\t Wn", "wn"),
    ("Р. кривини\t Ro", "ro"),
]


def format_trajectory(trajectory):
    lines = [TRAJECTORY_HEADER]
    for i, (t, x, y) in enumerate(trajectory):
        lines.append(f"t{i} = {t:.3f}\t, x{i} ={x:.5f}\t, y{i} ={y:.5f}")
    return lines


def format_report(trajectory, state):
    """
    Build every line of the report, without newlines.

    Trajectory table, one blank line, then the scalar quantities of `state`
    with 5 decimals.
    """
    lines = format_trajectory(trajectory)
    lines.append("")
    for label, field in SCALAR_LINES:
        lines.append(f"{label} = {getattr(state, field):.5f}")
    return lines


def write_report(path, trajectory, state):
    # format first so a failure never leaves a half-written file
    lines = format_report(trajectory, state)
    with open(path, "w", encoding="utf-8") as output:
        for line in lines:
            output.write(line + "\n")
    logger.info("Report written to %s (%d lines)", path, len(lines))
    return path
