from __future__ import annotations

from typing import Iterable

from .classes import Circle
from .normalize import NormalizationContext, normalizeLength, normalizePoint
from .protocols import DrawingSink


def expandCircles(
    sink: DrawingSink,
    circles: Iterable[Circle],
    context: NormalizationContext,
    registerId: int,
    pathStarted: bool,
) -> bool:
    """Draw each circle as a pair of relative 180 degree arcs.

    The circles become subpaths of the current path if one is open, else
    the first circle starts a new path with the given register. Returns
    whether a path is open afterwards.
    """
    for circle in circles:
        cx, cy = normalizePoint(circle.cx, circle.cy, context)
        r = normalizeLength(circle.r, context)

        if pathStarted:
            sink.closePathAbsMoveTo(cx - r, cy)
        else:
            pathStarted = True
            sink.startPath(registerId, cx - r, cy)

        # A single 360 degree arc would have coincident start and end points,
        # which makes the arc computation degenerate.
        sink.relArcTo(r, r, 0, False, True, +2 * r, 0)
        sink.relArcTo(r, r, 0, False, True, -2 * r, 0)

    return pathStarted
