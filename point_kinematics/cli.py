#!/usr/bin/env python3
import argparse
import logging
import os
import sys

import matplotlib.pyplot as plt

from point_kinematics import config
from point_kinematics.config import RunConfig
from point_kinematics.errors import KinematicsError
from point_kinematics.kinematics import PointKinematics
from point_kinematics.plotting import (
    acceleration_series,
    render,
    trajectory_series,
    velocity_series,
)
from point_kinematics.report import write_report

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Trajectory, velocity and acceleration of a point moving by "
                    "x = a*t^2 + b, y = sqrt(c*t^3 + d)."
    )
    parser.add_argument("-a", type=float, default=config.A, help="coefficient a of x(t)")
    parser.add_argument("-b", type=float, default=config.B, help="coefficient b of x(t)")
    parser.add_argument("-c", type=float, default=config.C, help="coefficient c of y(t)")
    parser.add_argument("-d", type=float, default=config.D, help="coefficient d of y(t)")
    parser.add_argument("--t1", type=float, default=config.T1, help="highlighted instant [s]")
    parser.add_argument("--scale", type=float, default=config.SCALE,
                        help="smaller side of the plotted trajectory")
    parser.add_argument("-n", type=int, default=config.N_STEPS,
                        help="number of steps; the trajectory has n + 1 samples")
    parser.add_argument("--out", default=config.REPORT_FILE, help="report file path")
    parser.add_argument("--csv", default=None, help="also export the sampled trajectory as CSV")
    parser.add_argument("--save-dir", default=None, help="save the diagrams as PNG into this directory")
    parser.add_argument("--no-show", action="store_true", help="do not open the diagram windows")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def config_from_args(args) -> RunConfig:
    return RunConfig(
        a=args.a,
        b=args.b,
        c=args.c,
        d=args.d,
        t1=args.t1,
        scale=args.scale,
        n=args.n,
        report_path=args.out,
        csv_path=args.csv,
        save_dir=args.save_dir,
        show=not args.no_show,
    )


def run(cfg: RunConfig):
    """
    1. Sample the trajectory and evaluate the state at t1.
    2. Build all three diagrams (fails before anything is written).
    3. Write the report, then the optional CSV.
    4. Render trajectory, velocity and acceleration diagrams in that order.

    Returns the list of rendered figures.
    """
    kinematics = PointKinematics.from_parameters(cfg.parameters)
    logger.info("Evaluating %r at t1=%g", kinematics, cfg.t1)

    trajectory = kinematics.sample(cfg.t1, scale=cfg.scale, n=cfg.n)
    logger.info("Sampled %d trajectory points", len(trajectory))
    state = kinematics.state(cfg.t1)

    diagrams = [
        ("trajectory", trajectory_series(trajectory, cfg.t1), None),
        ("velocity", *velocity_series(state, trajectory, cfg.t1)),
        ("acceleration", *acceleration_series(state, trajectory, cfg.t1)),
    ]

    write_report(cfg.report_path, trajectory, state)
    if cfg.csv_path:
        trajectory.to_frame().to_csv(cfg.csv_path, index=False)
        logger.info("Trajectory exported to %s", cfg.csv_path)

    figures = []
    for name, series, layout in diagrams:
        fig = render(series, layout, title=f"{name.capitalize()} at t1 = {cfg.t1:g}")
        if cfg.save_dir:
            os.makedirs(cfg.save_dir, exist_ok=True)
            out_path = os.path.join(cfg.save_dir, f"{name}.png")
            fig.savefig(out_path, dpi=200)
            logger.info("Saved figure to: %s", out_path)
        figures.append(fig)

    if cfg.show:
        plt.show()
    return figures


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = config_from_args(args)
    try:
        figures = run(cfg)
    except KinematicsError as exc:
        logger.error("Aborted, nothing written: %s", exc)
        return 1
    if not cfg.show:
        for fig in figures:
            plt.close(fig)
    return 0


if __name__ == "__main__":
    sys.exit(main())
