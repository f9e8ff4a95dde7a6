from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import cattrs


@dataclass(frozen=True, kw_only=True)
class BoundingBox:
    xMin: float = 0
    yMin: float = 0
    xMax: float = 0
    yMax: float = 0

    @property
    def width(self) -> float:
        return self.xMax - self.xMin

    @property
    def height(self) -> float:
        return self.yMax - self.yMin


@dataclass(frozen=True, kw_only=True)
class Circle:
    cx: float = 0
    cy: float = 0
    r: float = 0


@dataclass(frozen=True, kw_only=True)
class Shape:
    pathData: str = ""
    fill: str = ""
    opacity: float = 1.0


@dataclass(kw_only=True)
class IconSource:
    iconSet: str
    fileName: str
    baseName: str = ""
    nativeSize: float = 24
    boundingBox: BoundingBox = field(default_factory=BoundingBox)
    shapes: list[Shape] = field(default_factory=list)
    # Circles have no place in the command set of their own: they are tacked
    # onto the first emitted path as pairs of arcs.
    circles: list[Circle] = field(default_factory=list)
    sourceByteCount: int = 0

    @property
    def name(self) -> str:
        return f"{self.iconSet}/{self.fileName}"


# Palette indices as used by IconVG: 0x7F is transparent black in the custom
# palette, 0x80 selects the first custom palette color.
TRANSPARENT_COLOR = 0x7F
FILL_COLOR = 0x80


@dataclass(frozen=True, kw_only=True)
class BlendSpec:
    ratio: int
    fromColor: int = TRANSPARENT_COLOR
    toColor: int = FILL_COLOR


@dataclass(frozen=True, kw_only=True)
class OpacityRegister:
    opacity: float
    registerId: int
    blendRatio: int


@dataclass(kw_only=True)
class IconReport:
    commandCount: int = 0
    shapeCount: int = 0
    skippedShapeCount: int = 0
    registers: list[OpacityRegister] = field(default_factory=list)

    @property
    def registerCount(self) -> int:
        return len(self.registers)


# cattrs hooks + structure/unstructure support


def _unstructureFloat(v):
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return v


def _structureNumber(d, tp):
    if isinstance(d, bool) or not isinstance(d, (float, int)):
        raise TypeError(f"expected a number, got {d!r}")
    return d


_cattrsConverter = cattrs.Converter()

_cattrsConverter.register_unstructure_hook(float, _unstructureFloat)
_cattrsConverter.register_structure_hook(float, _structureNumber)


def structure(obj, cls):
    return _cattrsConverter.structure(obj, cls)


def unstructure(obj) -> Any:
    return _cattrsConverter.unstructure(obj)


def unstructureCommand(command: tuple) -> list:
    methodName, *args = command
    return [methodName, *(unstructure(v) for v in args)]
