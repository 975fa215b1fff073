from pathlib import Path

if __package__ in (None, ""):
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[1]))

from corridor_motion.animation import AnimationConfig, MovingSquare
from corridor_motion.shapes import Square
from examples import run_scene_example, segment_trajectory

LOG_DIR = Path(__file__).resolve().parents[1] / "logs"
LOG_FILE = LOG_DIR / "segment_square.csv"
SEGMENT_HALF_LENGTH = 150.0


def main() -> None:
    actors = {
        "diagonal": MovingSquare(
            square=Square(side=25.0, angle=0.0, center=(0.0, 0.0), size_max=50.0),
            trajectory=segment_trajectory(start_point=(SEGMENT_HALF_LENGTH, SEGMENT_HALF_LENGTH)),
        ),
        "vertical": MovingSquare(
            square=Square(side=15.0, angle=0.3, center=(0.0, 0.0), size_max=30.0),
            trajectory=segment_trajectory(start_point=(0.0, -SEGMENT_HALF_LENGTH), start_time=50.0),
        ),
    }

    run_scene_example(
        actors,
        log_path=LOG_FILE,
        config=AnimationConfig(frame_dt=5.0, final_time=4.0 * SEGMENT_HALF_LENGTH * 2.0**0.5),
    )


if __name__ == "__main__":
    main()
