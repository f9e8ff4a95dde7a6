from __future__ import annotations

from dataclasses import dataclass, field

from .classes import Shape


@dataclass(frozen=True, kw_only=True)
class SkippedFile:
    iconSet: str
    fileName: str
    reason: str = ""


@dataclass(frozen=True, kw_only=True)
class SkippedPath:
    pathData: str
    fill: str = ""
    reason: str = ""


@dataclass(kw_only=True)
class SkipPolicy:
    """Exclusions for known-defective or duplicate source data.

    A file is skipped by its (icon set, file name) pair. A shape is skipped
    when both its path data and its fill attribute match exactly.
    """

    skippedFiles: list[SkippedFile] = field(default_factory=list)
    skippedPaths: list[SkippedPath] = field(default_factory=list)

    def __post_init__(self):
        self._fileKeys = {(s.iconSet, s.fileName) for s in self.skippedFiles}
        self._pathKeys = {(s.pathData, s.fill) for s in self.skippedPaths}

    def skipsFile(self, iconSet: str, fileName: str) -> bool:
        return (iconSet, fileName) in self._fileKeys

    def skipsShape(self, shape: Shape) -> bool:
        return (shape.pathData, shape.fill) in self._pathKeys
