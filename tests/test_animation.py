"""Offline frame sampling and the CSV frame logger."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
import pytest

from corridor_motion.animation import (
    AnimationConfig,
    FrameSampler,
    FrameTelemetryLogger,
    MovingSquare,
)
from corridor_motion.shapes import Square
from corridor_motion.trajectory import circular_trajectory, segment_trajectory


def _actors() -> dict[str, MovingSquare]:
    return {
        "orbit": MovingSquare(
            square=Square(side=2.0, angle=0.0, center=(0.0, 0.0)),
            trajectory=circular_trajectory((10.0, 0.0)),
        ),
        "shuttle": MovingSquare(
            square=Square(side=1.0, angle=0.3, center=(0.0, 0.0)),
            trajectory=segment_trajectory((0.0, 5.0)),
        ),
    }


def test_config_rejects_invalid_window() -> None:
    with pytest.raises(ValueError):
        AnimationConfig(frame_dt=0.0)
    with pytest.raises(ValueError):
        AnimationConfig(frame_dt=-1.0)
    with pytest.raises(ValueError):
        AnimationConfig(start_time=5.0, final_time=5.0)


def test_frame_times_cover_window() -> None:
    sampler = FrameSampler(AnimationConfig(frame_dt=3.0, start_time=0.0, final_time=10.0))
    assert np.allclose(sampler.frame_times(), [0.0, 3.0, 6.0, 9.0])

    default_times = FrameSampler().frame_times()
    assert len(default_times) == 360
    assert default_times[0] == 0.0
    assert default_times[-1] == 359.0


def test_moving_square_follows_trajectory() -> None:
    actor = _actors()["orbit"]
    square = actor.square_at(90.0)
    assert np.allclose(square.center, [0.0, 10.0], atol=1e-9)
    assert np.allclose(square.corners().mean(axis=0), [0.0, 10.0], atol=1e-9)
    assert np.allclose(actor.square.center, [0.0, 0.0])


def test_run_interleaves_actors_per_frame() -> None:
    sampler = FrameSampler(AnimationConfig(frame_dt=5.0, final_time=20.0))
    seen = []
    history = sampler.run(_actors(), progress_callback=seen.append)

    assert len(history) == 8
    assert len(seen) == len(history)
    assert all(a is b for a, b in zip(seen, history))
    assert [sample.name for sample in history[:2]] == ["orbit", "shuttle"]
    assert [sample.time for sample in history[::2]] == [0.0, 5.0, 10.0, 15.0]

    shuttle = [sample for sample in history if sample.name == "shuttle"]
    assert np.allclose(shuttle[0].position, [0.0, 5.0], atol=1e-9)
    assert np.allclose(shuttle[1].position, [0.0, 0.0], atol=1e-9)
    assert np.allclose(shuttle[2].position, [0.0, -5.0], atol=1e-9)
    assert np.allclose(shuttle[1].velocity, [0.0, -1.0], atol=1e-9)

    for sample in history:
        assert sample.corners.shape == (4, 2)
        assert np.allclose(sample.corners.mean(axis=0), sample.position, atol=1e-9)


def test_telemetry_logger_writes_header_and_rows(tmp_path) -> None:
    log_path = tmp_path / "nested" / "frames.csv"
    sampler = FrameSampler(AnimationConfig(frame_dt=30.0, final_time=360.0))

    with FrameTelemetryLogger(log_path) as logger:
        history = sampler.run(_actors(), progress_callback=logger.log)

    df = pd.read_csv(log_path)
    assert list(df.columns) == FrameTelemetryLogger.HEADERS
    assert len(df) == len(history) == 24

    orbit = df[df["name"] == "orbit"]
    radii = np.hypot(orbit["pos_x"], orbit["pos_y"])
    assert np.allclose(radii, 10.0)
    speeds = np.hypot(orbit["vel_x"], orbit["vel_y"])
    assert np.allclose(speeds, 10.0 * math.pi / 180.0)

    first = df.iloc[0]
    assert math.isclose(first["corner0_x"], 9.0)
    assert math.isclose(first["corner0_y"], -1.0)


def test_moving_squares_compare_by_value() -> None:
    actor = _actors()["orbit"]
    same = MovingSquare(
        square=Square(side=2.0, angle=0.0, center=(0.0, 0.0)),
        trajectory=circular_trajectory((10.0, 0.0)),
    )
    assert actor == same
    assert hash(actor) == hash(same)
    assert actor != _actors()["shuttle"]
