import argparse
import asyncio
import json
import logging
import pathlib
import sys

from . import __version__ as ivgiconsVersion
from .config import ConfigError, loadConfig
from .core.errors import IconError
from .generator import GenerationResult, generateIcons, resultToJSONData
from .sources.files import collectIconFiles

logger = logging.getLogger(__name__)

levelNamesMapping = logging.getLevelNamesMapping()

sortedLevelNames = [
    name for name, value in sorted(levelNamesMapping.items(), key=lambda item: item[1])
]


def existing_folder(path):
    path = pathlib.Path(path)
    if not path.is_dir():
        raise argparse.ArgumentTypeError(f"Folder not found: {str(path)!r}")
    return path.resolve()


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value}")
    return number


def makeArgumentParser():
    parser = argparse.ArgumentParser(
        prog="ivgicons",
        description="Convert a tree of SVG icons into normalized IconVG "
        "drawing command streams.",
    )
    parser.add_argument(
        "icons_dir",
        type=existing_folder,
        help="The root folder of the icon sets, for example a checkout of "
        "https://github.com/google/material-design-icons",
    )
    parser.add_argument(
        "--config",
        action="append",
        default=[],
        type=pathlib.Path,
        help="A YAML or JSON file with configuration. May be given multiple "
        "times; later files override top-level keys of earlier ones.",
    )
    parser.add_argument(
        "--no-default-config",
        action="store_true",
        help="Do not start from the built-in Material Design Icons configuration",
    )
    parser.add_argument(
        "--output",
        type=pathlib.Path,
        help="A path for the JSON output. If omitted, no output is written",
    )
    parser.add_argument(
        "--num-tasks",
        type=positive_int,
        default=1,
        help="The number of icons to convert concurrently",
    )
    parser.add_argument(
        "--svg-paths",
        action="store_true",
        help="Include an SVG path preview, in logical coordinates, for each icon",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first icon that can't be converted, instead of "
        "logging the error and continuing with the next icon",
    )
    parser.add_argument(
        "--logging-level",
        choices=sortedLevelNames,
        default="WARNING",
        help="The logging level for stdout output",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=ivgiconsVersion,
        help="Show the version number and exit",
    )
    return parser


def setupLogging(levelName):
    rootLogger = logging.getLogger()
    rootLogger.setLevel(logging.NOTSET)
    stdoutHandler = logging.StreamHandler(sys.stdout)
    stdoutHandler.setLevel(levelNamesMapping[levelName])
    stdoutHandler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(name)-17s %(levelname)-8s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    rootLogger.addHandler(stdoutHandler)
    return stdoutHandler


def formatSummary(result: GenerationResult) -> str:
    totals = result.totals
    lines = [
        f"In total, {totals.sourceByteCount} SVG bytes in {totals.fileCount} files "
        f"converted to {totals.commandCount} drawing commands.",
    ]
    if totals.skippedFileCount or totals.skippedShapeCount:
        lines.append(
            f"Skipped {totals.skippedFileCount} files "
            f"and {totals.skippedShapeCount} paths."
        )
    if result.failures:
        lines.append("")
        lines.append("FAILURES:")
        lines.append("")
        for failure in result.failures:
            lines.append(f"{failure.name}: {failure.error}")
    return "\n".join(lines)


async def mainAsync(args) -> int:
    try:
        config = loadConfig(*args.config, useDefaults=not args.no_default_config)
    except ConfigError as e:
        logger.error(str(e))
        return 2

    iconFiles = collectIconFiles(
        args.icons_dir,
        skipPolicy=config.skipPolicy,
        nativeSizes=config.nativeSizes,
        fileNamePrefix=config.fileNamePrefix,
    )
    logger.info(f"found {len(iconFiles)} icon files in {args.icons_dir}")

    try:
        result = await generateIcons(
            iconFiles,
            config,
            numTasks=args.num_tasks,
            continueOnError=not args.fail_fast,
            withSVGPaths=args.svg_paths,
        )
    except IconError as e:
        logger.error(f"conversion stopped: {e}")
        return 1

    if args.output is not None:
        text = json.dumps(resultToJSONData(result), indent=1, ensure_ascii=False)
        args.output.write_text(text + "\n", encoding="utf-8")

    print(formatSummary(result))

    if not result.icons:
        logger.error("no icons could be converted")
        return 1
    return 0


def main(argv=None):
    args = makeArgumentParser().parse_args(argv)
    handler = setupLogging(args.logging_level)
    try:
        return asyncio.run(mainAsync(args))
    finally:
        logging.getLogger().removeHandler(handler)


if __name__ == "__main__":
    sys.exit(main())
