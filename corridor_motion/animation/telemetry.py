from __future__ import annotations

import csv
from pathlib import Path
from typing import Self

from .sampler import FrameSample


class FrameTelemetryLogger:
    """CSV logger for sampled frame history."""

    HEADERS = [
        "time",
        "name",
        "pos_x",
        "pos_y",
        "vel_x",
        "vel_y",
        "corner0_x",
        "corner0_y",
        "corner1_x",
        "corner1_y",
        "corner2_x",
        "corner2_y",
        "corner3_x",
        "corner3_y",
    ]

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.path.open("w", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(self.HEADERS)

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def log(self, sample: FrameSample) -> None:
        row = [
            sample.time,
            sample.name,
            *sample.position.tolist(),
            *sample.velocity.tolist(),
            *sample.corners.reshape(-1).tolist(),
        ]
        self._writer.writerow(row)
        self._file.flush()
