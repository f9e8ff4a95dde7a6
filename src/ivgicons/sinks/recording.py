from __future__ import annotations

from ..core.classes import BlendSpec
from ..core.protocols import DrawingSink


class RecordingSink:
    """A DrawingSink that records every call as a (methodName, *args) tuple,
    in the spirit of fontTools' RecordingPen.
    """

    def __init__(self):
        self.value: list[tuple] = []

    @property
    def commandCount(self) -> int:
        # Drawing commands only
        return sum(1 for command in self.value if command[0] != "setColorRegister")

    def replay(self, sink: DrawingSink) -> None:
        for methodName, *args in self.value:
            getattr(sink, methodName)(*args)

    def startPath(self, registerId, x, y):
        self.value.append(("startPath", registerId, x, y))

    def absLineTo(self, x, y):
        self.value.append(("absLineTo", x, y))

    def relLineTo(self, x, y):
        self.value.append(("relLineTo", x, y))

    def absHLineTo(self, x):
        self.value.append(("absHLineTo", x))

    def relHLineTo(self, x):
        self.value.append(("relHLineTo", x))

    def absVLineTo(self, y):
        self.value.append(("absVLineTo", y))

    def relVLineTo(self, y):
        self.value.append(("relVLineTo", y))

    def absQuadTo(self, x1, y1, x, y):
        self.value.append(("absQuadTo", x1, y1, x, y))

    def relQuadTo(self, x1, y1, x, y):
        self.value.append(("relQuadTo", x1, y1, x, y))

    def absSmoothQuadTo(self, x, y):
        self.value.append(("absSmoothQuadTo", x, y))

    def relSmoothQuadTo(self, x, y):
        self.value.append(("relSmoothQuadTo", x, y))

    def absCubeTo(self, x1, y1, x2, y2, x, y):
        self.value.append(("absCubeTo", x1, y1, x2, y2, x, y))

    def relCubeTo(self, x1, y1, x2, y2, x, y):
        self.value.append(("relCubeTo", x1, y1, x2, y2, x, y))

    def absSmoothCubeTo(self, x2, y2, x, y):
        self.value.append(("absSmoothCubeTo", x2, y2, x, y))

    def relSmoothCubeTo(self, x2, y2, x, y):
        self.value.append(("relSmoothCubeTo", x2, y2, x, y))

    def absArcTo(self, rx, ry, rotation, largeArc, sweep, x, y):
        self.value.append(("absArcTo", rx, ry, rotation, largeArc, sweep, x, y))

    def relArcTo(self, rx, ry, rotation, largeArc, sweep, x, y):
        self.value.append(("relArcTo", rx, ry, rotation, largeArc, sweep, x, y))

    def closePathAbsMoveTo(self, x, y):
        self.value.append(("closePathAbsMoveTo", x, y))

    def closePathRelMoveTo(self, x, y):
        self.value.append(("closePathRelMoveTo", x, y))

    def closePathEndPath(self):
        self.value.append(("closePathEndPath",))

    def setColorRegister(self, registerId: int, blend: BlendSpec):
        self.value.append(("setColorRegister", registerId, blend))
