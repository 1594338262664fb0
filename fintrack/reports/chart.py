"""
Projection Chart Frames

The projection chart draws in from the left over a fixed number of
frames with smoothstep easing. Instead of scheduling redraws, the whole
animation is computed up front as a list of frames in canvas
coordinates; the presentation layer only has to play them back.
Frames never change the projected values, only where they are drawn.
"""

from typing import Sequence

from fintrack.models.analytics import ChartFrame, ProjectionPoint


def smoothstep(t: float) -> float:
    """Ease-in-out curve t*t*(3-2t) on [0, 1]."""
    t = min(1.0, max(0.0, t))
    return t * t * (3 - 2 * t)


def interpolate_frames(
    points: Sequence[ProjectionPoint],
    width: int,
    height: int,
    padding: int = 20,
    total_frames: int = 40,
) -> list[ChartFrame]:
    """
    Compute every animation frame of the projection line.

    - no points: no frames (the caller shows a placeholder)
    - flat series: one frame, a horizontal line at mid height
    - otherwise `total_frames` frames; x positions grow from the left
      edge by the eased progress, y positions are final from frame one
    """
    if not points:
        return []

    values = [float(p.value) for p in points]
    low, high = min(values), max(values)

    if high == low:
        mid = height / 2
        return [ChartFrame(
            index=0,
            progress=1.0,
            points=[(float(padding), mid), (float(width - padding), mid)],
        )]

    scale_x = (width - 2 * padding) / (len(points) - 1 or 1)
    scale_y = (height - 2 * padding) / (high - low)
    targets = [
        (padding + i * scale_x, height - padding - (value - low) * scale_y)
        for i, value in enumerate(values)
    ]

    frames = []
    for frame in range(1, total_frames + 1):
        eased = smoothstep(frame / total_frames)
        frames.append(ChartFrame(
            index=frame - 1,
            progress=eased,
            points=[(padding + (x - padding) * eased, y) for x, y in targets],
        ))
    return frames
