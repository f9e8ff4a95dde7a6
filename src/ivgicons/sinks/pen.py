from __future__ import annotations

import logging

from fontTools.svgLib.path.arc import EllipticalArc

from ..core.classes import BlendSpec

logger = logging.getLogger(__name__)


class PenSink:
    """A DrawingSink that draws the command stream onto a fontTools segment
    pen, converting everything to absolute coordinates. Smooth curves get
    their implied control point by reflection, arcs are approximated by
    cubic curves.

    Color registers have no meaning for a pen; the register used by each
    path is kept in `pathRegisters`, and register definitions in `blends`.
    """

    def __init__(self, pen):
        self.pen = pen
        self.pathRegisters: list[int] = []
        self.blends: dict[int, BlendSpec] = {}
        self._current = (0, 0)
        self._start = (0, 0)
        self._lastQuadControl = None
        self._lastCubicControl = None

    def _moveTo(self, pt):
        self.pen.moveTo(pt)
        self._current = self._start = pt
        self._resetControls()

    def _lineTo(self, pt):
        self.pen.lineTo(pt)
        self._current = pt
        self._resetControls()

    def _quadTo(self, c, pt):
        self.pen.qCurveTo(c, pt)
        self._current = pt
        self._lastQuadControl = c
        self._lastCubicControl = None

    def _cubeTo(self, c1, c2, pt):
        self.pen.curveTo(c1, c2, pt)
        self._current = pt
        self._lastQuadControl = None
        self._lastCubicControl = c2

    def _arcTo(self, rx, ry, rotation, largeArc, sweep, pt):
        arc = EllipticalArc(
            complex(*self._current),
            rx,
            ry,
            rotation,
            largeArc,
            sweep,
            complex(*pt),
        )
        arc.draw(self.pen)
        self._current = pt
        self._resetControls()

    def _resetControls(self):
        self._lastQuadControl = None
        self._lastCubicControl = None

    def _relative(self, x, y):
        cx, cy = self._current
        return (cx + x, cy + y)

    def _reflected(self, control):
        cx, cy = self._current
        if control is None:
            return (cx, cy)
        return (2 * cx - control[0], 2 * cy - control[1])

    def startPath(self, registerId, x, y):
        self.pathRegisters.append(registerId)
        self._moveTo((x, y))

    def absLineTo(self, x, y):
        self._lineTo((x, y))

    def relLineTo(self, x, y):
        self._lineTo(self._relative(x, y))

    def absHLineTo(self, x):
        self._lineTo((x, self._current[1]))

    def relHLineTo(self, x):
        self._lineTo(self._relative(x, 0))

    def absVLineTo(self, y):
        self._lineTo((self._current[0], y))

    def relVLineTo(self, y):
        self._lineTo(self._relative(0, y))

    def absQuadTo(self, x1, y1, x, y):
        self._quadTo((x1, y1), (x, y))

    def relQuadTo(self, x1, y1, x, y):
        self._quadTo(self._relative(x1, y1), self._relative(x, y))

    def absSmoothQuadTo(self, x, y):
        self._quadTo(self._reflected(self._lastQuadControl), (x, y))

    def relSmoothQuadTo(self, x, y):
        self._quadTo(self._reflected(self._lastQuadControl), self._relative(x, y))

    def absCubeTo(self, x1, y1, x2, y2, x, y):
        self._cubeTo((x1, y1), (x2, y2), (x, y))

    def relCubeTo(self, x1, y1, x2, y2, x, y):
        self._cubeTo(
            self._relative(x1, y1), self._relative(x2, y2), self._relative(x, y)
        )

    def absSmoothCubeTo(self, x2, y2, x, y):
        self._cubeTo(self._reflected(self._lastCubicControl), (x2, y2), (x, y))

    def relSmoothCubeTo(self, x2, y2, x, y):
        self._cubeTo(
            self._reflected(self._lastCubicControl),
            self._relative(x2, y2),
            self._relative(x, y),
        )

    def absArcTo(self, rx, ry, rotation, largeArc, sweep, x, y):
        self._arcTo(rx, ry, rotation, largeArc, sweep, (x, y))

    def relArcTo(self, rx, ry, rotation, largeArc, sweep, x, y):
        self._arcTo(rx, ry, rotation, largeArc, sweep, self._relative(x, y))

    def closePathAbsMoveTo(self, x, y):
        self.pen.closePath()
        self._moveTo((x, y))

    def closePathRelMoveTo(self, x, y):
        self.pen.closePath()
        # After closing, the current point is back at the subpath start.
        self._current = self._start
        self._moveTo(self._relative(x, y))

    def closePathEndPath(self):
        self.pen.closePath()
        self._current = self._start
        self._resetControls()

    def setColorRegister(self, registerId: int, blend: BlendSpec):
        if registerId in self.blends:
            logger.warning(f"color register {registerId} is redefined")
        self.blends[registerId] = blend
