from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

import numpy as np

from corridor_motion.animation import (
    AnimationConfig,
    FrameSample,
    FrameSampler,
    FrameTelemetryLogger,
    MovingSquare,
)


def analyze_history(history: Iterable[FrameSample]) -> None:
    history = list(history)
    if not history:
        print("No frames sampled.")
        return

    names = sorted({sample.name for sample in history})
    print(f"Sampled {len(history)} frames for {len(names)} actor(s) up to t={history[-1].time:.2f}.")
    for name in names:
        positions = np.array([sample.position for sample in history if sample.name == name])
        radii = np.linalg.norm(positions, axis=1)
        print(
            f"  {name}: radius min={radii.min():.3f} max={radii.max():.3f}, "
            f"final position {np.array2string(positions[-1], precision=3)}"
        )


def run_scene_example(
    actors: Mapping[str, MovingSquare],
    log_path: Path,
    config: AnimationConfig | None = None,
) -> list[FrameSample]:
    sampler = FrameSampler(config)

    history: list[FrameSample]
    with FrameTelemetryLogger(log_path) as logger:
        history = sampler.run(actors, progress_callback=logger.log)

    analyze_history(history)
    print(f"Frame log written to: {log_path}")
    return history
