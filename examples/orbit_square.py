import math
from pathlib import Path

if __package__ in (None, ""):
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[1]))

from corridor_motion.animation import AnimationConfig, MovingSquare
from corridor_motion.shapes import Square
from examples import circular_trajectory, run_scene_example

LOG_DIR = Path(__file__).resolve().parents[1] / "logs"
LOG_FILE = LOG_DIR / "orbit_square.csv"


def main() -> None:
    actors = {
        "inner": MovingSquare(
            square=Square(side=20.0, angle=0.0, center=(0.0, 0.0), size_max=40.0),
            trajectory=circular_trajectory(start_point=(120.0, 0.0)),
        ),
        "outer": MovingSquare(
            square=Square(side=30.0, angle=math.radians(45.0), center=(0.0, 0.0), size_max=60.0),
            trajectory=circular_trajectory(start_point=(0.0, 200.0), start_time=90.0),
        ),
    }

    run_scene_example(
        actors,
        log_path=LOG_FILE,
        config=AnimationConfig(frame_dt=2.0, final_time=360.0),
    )


if __name__ == "__main__":
    main()
