from __future__ import annotations

import logging
import os
import pathlib
import re
from dataclasses import dataclass
from typing import Iterable

from ..core.skippolicy import SkipPolicy

logger = logging.getLogger(__name__)


# Location of the SVG files within an icon set directory
SVG_SUBDIRECTORY = ("svg", "production")

_fileNamePat = re.compile(r"^(?P<baseName>.+)_\d+px\.svg$")


@dataclass(frozen=True, kw_only=True)
class IconFile:
    iconSet: str
    fileName: str
    baseName: str
    nativeSize: int
    path: pathlib.Path
    # Excluded by the skip policy; listed so the run can report it
    skipped: bool = False

    @property
    def name(self) -> str:
        return f"{self.iconSet}/{self.fileName}"


def nativeSizeFromFileName(fileName: str, nativeSizes: Iterable[int]) -> int | None:
    m = re.search(r"_(\d+)px\.svg$", fileName)
    if m is None:
        return None
    size = int(m.group(1))
    return size if size in set(nativeSizes) else None


def baseNameFromFileName(fileName: str, prefix: str) -> str | None:
    if not fileName.startswith(prefix):
        return None
    m = _fileNamePat.match(fileName[len(prefix) :])
    if m is None:
        return None
    return m.group("baseName")


def collectIconFiles(
    rootDir: os.PathLike,
    *,
    skipPolicy: SkipPolicy | None = None,
    nativeSizes: Iterable[int] = (12, 18, 24, 36, 48),
    fileNamePrefix: str = "ic_",
) -> list[IconFile]:
    """Find the icons to convert below rootDir.

    Each non-hidden subdirectory of rootDir is an icon set, with its SVG files
    in svg/production. An icon may come in several native sizes; the largest
    one is used. Files excluded by the skip policy take no part in the size
    selection and are returned with skipped=True. The result is sorted by
    icon set and base name.
    """
    rootDir = pathlib.Path(rootDir)
    if not rootDir.is_dir():
        raise FileNotFoundError(rootDir)
    nativeSizes = set(nativeSizes)

    iconFiles = []
    for setDir in sorted(rootDir.iterdir()):
        if not setDir.is_dir() or setDir.name.startswith("."):
            continue
        svgDir = setDir.joinpath(*SVG_SUBDIRECTORY)
        if not svgDir.is_dir():
            logger.debug(f"{setDir.name}: no SVG directory, skipping")
            continue
        iconFiles.extend(
            _collectIconSet(
                svgDir, setDir.name, skipPolicy, nativeSizes, fileNamePrefix
            )
        )
    return iconFiles


def _collectIconSet(svgDir, iconSet, skipPolicy, nativeSizes, fileNamePrefix):
    largest: dict[str, IconFile] = {}
    skipped: list[IconFile] = []
    for path in svgDir.iterdir():
        if not path.is_file():
            continue
        fileName = path.name
        baseName = baseNameFromFileName(fileName, fileNamePrefix)
        if baseName is None:
            continue
        size = nativeSizeFromFileName(fileName, nativeSizes)
        if size is None:
            continue
        if skipPolicy is not None and skipPolicy.skipsFile(iconSet, fileName):
            skipped.append(
                IconFile(
                    iconSet=iconSet,
                    fileName=fileName,
                    baseName=baseName,
                    nativeSize=size,
                    path=path,
                    skipped=True,
                )
            )
            continue
        previous = largest.get(baseName)
        if previous is None or size > previous.nativeSize:
            largest[baseName] = IconFile(
                iconSet=iconSet,
                fileName=fileName,
                baseName=baseName,
                nativeSize=size,
                path=path,
            )
    iconFiles = list(largest.values()) + skipped
    return sorted(
        iconFiles, key=lambda iconFile: (iconFile.baseName, iconFile.fileName)
    )
