from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

if __package__ in (None, ""):
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[1]))

from corridor_motion.animation import FrameTelemetryLogger
from corridor_motion.shapes import EDGE_INDICES

REQUIRED_COLUMNS = tuple(
    col for col in FrameTelemetryLogger.HEADERS if not col.startswith("vel_")
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plot trajectories and square outlines from a frame log."
    )
    parser.add_argument("logfile", type=Path, help="Path to a frame CSV log")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Optional path to save the figure instead of displaying it.",
    )
    parser.add_argument(
        "--every",
        type=int,
        default=10,
        help="Draw one square outline every N frames per actor.",
    )
    return parser


def _corner_array(row: pd.Series) -> np.ndarray:
    return np.array([[row[f"corner{i}_x"], row[f"corner{i}_y"]] for i in range(4)], dtype=float)


def plot_frames(df: pd.DataFrame, output: Path | None, every: int = 10) -> None:
    fig, (ax_path, ax_radius) = plt.subplots(1, 2, figsize=(14, 7))

    for name, group in df.groupby("name", sort=True):
        line = ax_path.plot(group["pos_x"], group["pos_y"], label=name)[0]
        for _, row in group.iloc[:: max(every, 1)].iterrows():
            corners = _corner_array(row)
            for start, end in EDGE_INDICES:
                ax_path.plot(
                    [corners[start, 0], corners[end, 0]],
                    [corners[start, 1], corners[end, 1]],
                    color=line.get_color(),
                    linewidth=0.6,
                    alpha=0.5,
                )

        radius = np.hypot(group["pos_x"].to_numpy(), group["pos_y"].to_numpy())
        ax_radius.plot(group["time"], radius, label=name)

    ax_path.set_aspect("equal", adjustable="datalim")
    ax_path.set_xlabel("X")
    ax_path.set_ylabel("Y")
    ax_path.legend(loc="upper right", fontsize="small")
    ax_path.grid(True, linestyle=":")

    ax_radius.set_xlabel("Elapsed time")
    ax_radius.set_ylabel("Distance from origin")
    ax_radius.legend(loc="upper right", fontsize="small")
    ax_radius.grid(True, linestyle=":")

    fig.tight_layout()

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output, dpi=200)
    else:
        plt.show()


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if not args.logfile.exists():
        raise SystemExit(f"Frame log not found: {args.logfile}")

    df = pd.read_csv(args.logfile)
    missing = [col for col in REQUIRED_COLUMNS if col not in df]
    if missing:
        raise SystemExit(f"Log is missing expected columns: {missing}")

    plot_frames(df, args.output, every=args.every)


if __name__ == "__main__":
    main()
