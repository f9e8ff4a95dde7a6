from __future__ import annotations

from typing import Protocol, runtime_checkable

from .classes import BlendSpec


@runtime_checkable
class DrawingSink(Protocol):
    def startPath(self, registerId: int, x: float, y: float) -> None:
        pass

    def absLineTo(self, x: float, y: float) -> None:
        pass

    def relLineTo(self, x: float, y: float) -> None:
        pass

    def absHLineTo(self, x: float) -> None:
        pass

    def relHLineTo(self, x: float) -> None:
        pass

    def absVLineTo(self, y: float) -> None:
        pass

    def relVLineTo(self, y: float) -> None:
        pass

    def absQuadTo(self, x1: float, y1: float, x: float, y: float) -> None:
        pass

    def relQuadTo(self, x1: float, y1: float, x: float, y: float) -> None:
        pass

    def absSmoothQuadTo(self, x: float, y: float) -> None:
        pass

    def relSmoothQuadTo(self, x: float, y: float) -> None:
        pass

    def absCubeTo(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        pass

    def relCubeTo(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        pass

    def absSmoothCubeTo(self, x2: float, y2: float, x: float, y: float) -> None:
        pass

    def relSmoothCubeTo(self, x2: float, y2: float, x: float, y: float) -> None:
        pass

    def absArcTo(
        self,
        rx: float,
        ry: float,
        rotation: float,
        largeArc: bool,
        sweep: bool,
        x: float,
        y: float,
    ) -> None:
        pass

    def relArcTo(
        self,
        rx: float,
        ry: float,
        rotation: float,
        largeArc: bool,
        sweep: bool,
        x: float,
        y: float,
    ) -> None:
        pass

    def closePathAbsMoveTo(self, x: float, y: float) -> None:
        pass

    def closePathRelMoveTo(self, x: float, y: float) -> None:
        """Close the current subpath and start a new one at (x, y) relative to
        the start point of the closed subpath.
        """

    def closePathEndPath(self) -> None:
        pass

    def setColorRegister(self, registerId: int, blend: BlendSpec) -> None:
        pass
