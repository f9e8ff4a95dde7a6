from __future__ import annotations

from dataclasses import dataclass

from .classes import BoundingBox
from .pathdata import PathOperator

# The width and height of the logical coordinate space, regardless of the
# native size of the source icon. The logical view box is centered on the
# origin: [-targetSize / 2, +targetSize / 2] on both axes.
DEFAULT_TARGET_SIZE = 48


@dataclass(frozen=True, kw_only=True)
class NormalizationContext:
    nativeSize: float
    targetSize: float = DEFAULT_TARGET_SIZE
    offsetX: float = 0
    offsetY: float = 0

    @classmethod
    def fromBoundingBox(
        cls,
        boundingBox: BoundingBox,
        nativeSize: float,
        targetSize: float = DEFAULT_TARGET_SIZE,
    ) -> NormalizationContext:
        if nativeSize <= 0:
            raise ValueError(f"native size must be positive, got {nativeSize}")
        return cls(
            nativeSize=nativeSize,
            targetSize=targetSize,
            offsetX=boundingBox.xMin * targetSize / nativeSize,
            offsetY=boundingBox.yMin * targetSize / nativeSize,
        )

    @property
    def scale(self) -> float:
        return self.targetSize / self.nativeSize

    @property
    def offset(self) -> tuple[float, float]:
        return (self.offsetX, self.offsetY)


def normalizeOperands(
    operator: PathOperator,
    relative: bool,
    operands: tuple[float, ...],
    context: NormalizationContext,
) -> tuple[float, ...]:
    """Map path operands from native units into the logical coordinate space.

    Relative operands are deltas, so they are only scaled. Absolute operands
    are also re-centered and shifted by the icon's bounding box offset; for
    operators taking coordinate pairs the operands alternate between x and
    y, while H and V take a single x or y coordinate respectively.
    """
    if operator == PathOperator.ARC_TO:
        return _normalizeArcOperands(relative, operands, context)
    scale = context.scale
    if relative:
        return tuple(v * scale for v in operands)

    half = context.targetSize / 2
    if len(operands) == 1:
        if operator == PathOperator.HLINE_TO:
            offset = context.offsetX
        elif operator == PathOperator.VLINE_TO:
            offset = context.offsetY
        else:
            raise ValueError(f"{operator.name} does not take a single operand")
        return (operands[0] * scale - half - offset,)

    offsets = context.offset
    return tuple(v * scale - half - offsets[i % 2] for i, v in enumerate(operands))


def _normalizeArcOperands(relative, operands, context):
    # rx ry rotation large-arc-flag sweep-flag x y
    rx, ry, rotation, largeArc, sweep, x, y = operands
    if relative:
        x, y = normalizeLength(x, context), normalizeLength(y, context)
    else:
        x, y = normalizePoint(x, y, context)
    return (
        normalizeLength(rx, context),
        normalizeLength(ry, context),
        rotation,
        bool(largeArc),
        bool(sweep),
        x,
        y,
    )


def normalizePoint(
    x: float, y: float, context: NormalizationContext
) -> tuple[float, float]:
    scale = context.scale
    half = context.targetSize / 2
    return (x * scale - half - context.offsetX, y * scale - half - context.offsetY)


def normalizeLength(value: float, context: NormalizationContext) -> float:
    return value * context.scale
