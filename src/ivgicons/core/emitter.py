from __future__ import annotations

import logging
from typing import Iterable, assert_never

from .circles import expandCircles
from .classes import Circle, IconReport, IconSource, Shape
from .errors import ParseError
from .normalize import DEFAULT_TARGET_SIZE, NormalizationContext, normalizeOperands
from .pathdata import PathCommand, PathOperator, tokenizePathData
from .protocols import DrawingSink
from .registers import OpacityRegisterAllocator
from .skippolicy import SkipPolicy

logger = logging.getLogger(__name__)


def emitIcon(
    icon: IconSource,
    sink: DrawingSink,
    *,
    skipPolicy: SkipPolicy | None = None,
    targetSize: float = DEFAULT_TARGET_SIZE,
) -> IconReport:
    context = NormalizationContext.fromBoundingBox(
        icon.boundingBox, icon.nativeSize, targetSize
    )
    emitter = PathCommandEmitter(sink, context, skipPolicy=skipPolicy)
    return emitter.emitShapes(icon.shapes, icon.circles)


class PathCommandEmitter:
    """Drives a DrawingSink with the normalized commands for one icon.

    An emitter holds per-icon state (the normalization context and the
    opacity registers), so a new one must be created for every icon.
    """

    def __init__(
        self,
        sink: DrawingSink,
        context: NormalizationContext,
        *,
        skipPolicy: SkipPolicy | None = None,
    ):
        self.sink = _CountingSink(sink)
        self.context = context
        self.skipPolicy = skipPolicy if skipPolicy is not None else SkipPolicy()
        self.allocator = OpacityRegisterAllocator(self.sink)
        self.report = IconReport()

    def emitShapes(
        self, shapes: Iterable[Shape], circles: Iterable[Circle] = ()
    ) -> IconReport:
        # The circles all go onto the first path that gets emitted.
        pendingCircles = list(circles)
        for shape in shapes:
            if self.skipPolicy.skipsShape(shape):
                logger.debug(f"skipping shape {shape.pathData!r} ({shape.fill!r})")
                self.report.skippedShapeCount += 1
                continue
            self.emitShape(shape, pendingCircles)
            pendingCircles = []

        if pendingCircles:
            self.emitShape(Shape(), pendingCircles)

        self.report.commandCount = self.sink.commandCount
        self.report.registers = self.allocator.registers
        return self.report

    def emitShape(self, shape: Shape, circles: Iterable[Circle] = ()) -> None:
        registerId = self.allocator.registerFor(shape.opacity)
        pathStarted = False
        if shape.pathData:
            pathStarted = self._emitPathData(registerId, shape.pathData)
        pathStarted = expandCircles(
            self.sink, circles, self.context, registerId, pathStarted
        )
        if not pathStarted:
            # Nothing to draw; still emit a well-formed (empty) path.
            self.sink.startPath(registerId, 0, 0)
        self.sink.closePathEndPath()
        self.report.shapeCount += 1

    def _emitPathData(self, registerId: int, pathData: str) -> bool:
        commands = tokenizePathData(pathData)
        state = _SubpathState()

        for command in commands:
            operator = command.operator
            if not state.started:
                if operator == PathOperator.CLOSE_PATH:
                    continue
                if operator != PathOperator.MOVE_TO:
                    raise ParseError(
                        f"path data must start with a moveto, not {operator.value!r}"
                    )
                # An initial relative moveto is treated as absolute.
                x, y = normalizeOperands(
                    operator, False, command.operands, self.context
                )
                self.sink.startPath(registerId, x, y)
                state.started = True
                state.moveTo(x, y)
                continue

            if state.closed and operator not in (
                PathOperator.MOVE_TO,
                PathOperator.CLOSE_PATH,
            ):
                # Drawing continues after an explicit close without a moveto:
                # start the next subpath where the closed one started.
                self.sink.closePathAbsMoveTo(state.startX, state.startY)
                state.moveTo(state.startX, state.startY)

            args = normalizeOperands(
                operator, command.relative, command.operands, self.context
            )
            self._emitCommand(command, args, state)

        return state.started

    def _emitCommand(
        self, command: PathCommand, args: tuple, state: _SubpathState
    ) -> None:
        sink = self.sink
        relative = command.relative
        match command.operator:
            case PathOperator.MOVE_TO:
                if relative:
                    x, y = state.x + args[0], state.y + args[1]
                    # The sink measures a relative move from the start of the
                    # subpath it closes, not from the current point.
                    sink.closePathRelMoveTo(x - state.startX, y - state.startY)
                    state.moveTo(x, y)
                else:
                    sink.closePathAbsMoveTo(*args)
                    state.moveTo(*args)
                return
            case PathOperator.LINE_TO:
                (sink.relLineTo if relative else sink.absLineTo)(*args)
            case PathOperator.HLINE_TO:
                (sink.relHLineTo if relative else sink.absHLineTo)(*args)
                state.x = state.x + args[0] if relative else args[0]
                return
            case PathOperator.VLINE_TO:
                (sink.relVLineTo if relative else sink.absVLineTo)(*args)
                state.y = state.y + args[0] if relative else args[0]
                return
            case PathOperator.QUAD_TO:
                (sink.relQuadTo if relative else sink.absQuadTo)(*args)
            case PathOperator.SMOOTH_QUAD_TO:
                (sink.relSmoothQuadTo if relative else sink.absSmoothQuadTo)(*args)
            case PathOperator.CUBIC_TO:
                (sink.relCubeTo if relative else sink.absCubeTo)(*args)
            case PathOperator.SMOOTH_CUBIC_TO:
                (sink.relSmoothCubeTo if relative else sink.absSmoothCubeTo)(*args)
            case PathOperator.ARC_TO:
                (sink.relArcTo if relative else sink.absArcTo)(*args)
            case PathOperator.CLOSE_PATH:
                state.close()
                return
            case _:
                assert_never(command.operator)

        x, y = args[-2:]
        if relative:
            state.x += x
            state.y += y
        else:
            state.x, state.y = x, y


class _SubpathState:
    # Current point and subpath start, in logical coordinates

    def __init__(self):
        self.started = False
        self.closed = False
        self.x = self.y = 0.0
        self.startX = self.startY = 0.0

    def moveTo(self, x, y):
        self.x = self.startX = x
        self.y = self.startY = y
        self.closed = False

    def close(self):
        self.x, self.y = self.startX, self.startY
        self.closed = True


class _CountingSink:
    # Counts drawing commands; register definitions are reported separately.

    def __init__(self, sink: DrawingSink):
        self._sink = sink
        self.commandCount = 0

    def __getattr__(self, name):
        method = getattr(self._sink, name)
        if name == "setColorRegister":
            return method

        def countingMethod(*args):
            self.commandCount += 1
            return method(*args)

        return countingMethod
