from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from dataclasses import dataclass, field, replace
from functools import partial
from typing import Iterable, Optional

from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.pens.svgPathPen import SVGPathPen

from .config import GeneratorConfig
from .core.classes import (
    IconReport,
    IconSource,
    unstructure,
    unstructureCommand,
)
from .core.emitter import emitIcon
from .core.errors import IconError, SkipIcon
from .sinks.pen import PenSink
from .sinks.recording import RecordingSink
from .sources.files import IconFile
from .sources.naming import iconVariableName
from .sources.svg import readIconSource

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class IconResult:
    name: str
    iconSet: str
    baseName: str
    variableName: str
    nativeSize: float
    sourceByteCount: int
    commands: list[tuple] = field(default_factory=list)
    report: IconReport = field(default_factory=IconReport)
    controlBounds: Optional[tuple[float, float, float, float]] = None
    svgPath: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class IconFailure:
    name: str
    error: str


@dataclass(kw_only=True)
class GenerationTotals:
    fileCount: int = 0
    sourceByteCount: int = 0
    commandCount: int = 0
    skippedFileCount: int = 0
    skippedShapeCount: int = 0
    failureCount: int = 0


@dataclass(kw_only=True)
class GenerationResult:
    icons: list[IconResult] = field(default_factory=list)
    failures: list[IconFailure] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def totals(self) -> GenerationTotals:
        return GenerationTotals(
            fileCount=len(self.icons),
            sourceByteCount=sum(icon.sourceByteCount for icon in self.icons),
            commandCount=sum(icon.report.commandCount for icon in self.icons),
            skippedFileCount=len(self.skipped),
            skippedShapeCount=sum(
                icon.report.skippedShapeCount for icon in self.icons
            ),
            failureCount=len(self.failures),
        )

    def sort(self) -> None:
        self.icons.sort(key=lambda icon: icon.name)
        self.failures.sort(key=lambda failure: failure.name)
        self.skipped.sort()


def convertIcon(
    icon: IconSource,
    config: GeneratorConfig,
    *,
    withSVGPath: bool = False,
) -> IconResult:
    sink = RecordingSink()
    report = emitIcon(
        icon, sink, skipPolicy=config.skipPolicy, targetSize=config.targetSize
    )

    boundsPen = ControlBoundsPen(None)
    sink.replay(PenSink(boundsPen))
    bounds = boundsPen.bounds
    if bounds is not None and not _isInsideViewBox(bounds, config.targetSize):
        logger.warning(f"{icon.name}: geometry exceeds the view box: {bounds}")

    svgPath = None
    if withSVGPath:
        svgPen = SVGPathPen(None, ntos=_formatNumber)
        sink.replay(PenSink(svgPen))
        svgPath = svgPen.getCommands()

    return IconResult(
        name=icon.name,
        iconSet=icon.iconSet,
        baseName=icon.baseName,
        variableName=iconVariableName(
            icon.iconSet, icon.baseName, config.acronyms
        ),
        nativeSize=icon.nativeSize,
        sourceByteCount=icon.sourceByteCount,
        commands=sink.value,
        report=report,
        controlBounds=bounds,
        svgPath=svgPath,
    )


async def generateIcons(
    iconFiles: Iterable[IconFile],
    config: GeneratorConfig,
    *,
    numTasks: int = 1,
    continueOnError: bool = True,
    withSVGPaths: bool = False,
) -> GenerationResult:
    """Convert all icon files. Icons are handed out to numTasks worker tasks;
    the result is sorted by icon name, so it does not depend on the order in
    which the workers finish.

    With continueOnError, an icon that fails to parse or convert is logged
    and recorded in the result's failures, and the run carries on.
    """
    iconFilesToConvert = list(iconFiles)
    result = GenerationResult()

    with concurrent.futures.ThreadPoolExecutor(max_workers=numTasks) as executor:
        tasks = [
            asyncio.create_task(
                convertIconFiles(
                    iconFilesToConvert,
                    result,
                    config,
                    executor,
                    continueOnError=continueOnError,
                    withSVGPaths=withSVGPaths,
                )
            )
            for i in range(numTasks)
        ]
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        for task in pending:
            task.cancel()
        exceptions: list[BaseException | None] = [
            task.exception() for task in done if task.exception()
        ]
        if exceptions:
            if len(exceptions) > 1:
                logger.error(f"Multiple exceptions were raised: {exceptions}")
            e = exceptions[0]
            assert e is not None
            raise e

    result.sort()
    return result


async def convertIconFiles(
    iconFilesToConvert: list[IconFile],
    result: GenerationResult,
    config: GeneratorConfig,
    executor: concurrent.futures.Executor,
    *,
    continueOnError: bool,
    withSVGPaths: bool,
) -> None:
    loop = asyncio.get_running_loop()
    while iconFilesToConvert:
        iconFile = iconFilesToConvert.pop(0)
        logger.debug(f"converting {iconFile.name}")

        try:
            if iconFile.skipped:
                raise SkipIcon(iconFile.name)
            icon = await loop.run_in_executor(
                executor,
                partial(
                    readIconSource,
                    iconFile.path,
                    iconSet=iconFile.iconSet,
                    baseName=iconFile.baseName,
                    nativeSize=iconFile.nativeSize,
                ),
            )
            iconResult = convertIcon(icon, config, withSVGPath=withSVGPaths)
        except SkipIcon:
            logger.info(f"skipping {iconFile.name}")
            result.skipped.append(iconFile.name)
            continue
        except IconError as e:
            if not continueOnError:
                raise
            logger.error(f"icon {iconFile.name} caused an error: {e!r}")
            result.failures.append(IconFailure(name=iconFile.name, error=str(e)))
            continue

        result.icons.append(iconResult)


def resultToJSONData(result: GenerationResult) -> dict:
    icons = []
    for icon in result.icons:
        iconData = unstructure(replace(icon, commands=[]))
        iconData["commands"] = [unstructureCommand(c) for c in icon.commands]
        if icon.svgPath is None:
            del iconData["svgPath"]
        icons.append(iconData)
    return {
        "icons": icons,
        "failures": unstructure(result.failures),
        "skipped": list(result.skipped),
        "totals": unstructure(result.totals),
    }


def _isInsideViewBox(bounds, targetSize, tolerance=1e-4):
    half = targetSize / 2 + tolerance
    return all(-half <= v <= half for v in bounds)


def _formatNumber(v):
    s = f"{v:.4f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s
