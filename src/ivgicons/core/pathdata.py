from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from .errors import ParseError


class PathOperator(Enum):
    MOVE_TO = "M"
    LINE_TO = "L"
    HLINE_TO = "H"
    VLINE_TO = "V"
    QUAD_TO = "Q"
    SMOOTH_QUAD_TO = "T"
    CUBIC_TO = "C"
    SMOOTH_CUBIC_TO = "S"
    ARC_TO = "A"
    CLOSE_PATH = "Z"

    @property
    def arity(self) -> int:
        return _operatorArity[self]


_operatorArity = {
    PathOperator.MOVE_TO: 2,
    PathOperator.LINE_TO: 2,
    PathOperator.HLINE_TO: 1,
    PathOperator.VLINE_TO: 1,
    PathOperator.QUAD_TO: 4,
    PathOperator.SMOOTH_QUAD_TO: 2,
    PathOperator.CUBIC_TO: 6,
    PathOperator.SMOOTH_CUBIC_TO: 4,
    PathOperator.ARC_TO: 7,
    PathOperator.CLOSE_PATH: 0,
}


# Elliptical arcs only reach the sink through circle expansion, so "A" is
# deliberately absent here.
acceptedLetters = frozenset("MLHVQTCSZ")


@dataclass(frozen=True)
class PathCommand:
    operator: PathOperator
    relative: bool = False
    operands: tuple[float, ...] = ()


_tokenPat = re.compile(
    r"""
    (?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)
    | (?P<letter>[A-Za-z])
    | (?P<separator>[\s,]+)
    """,
    re.VERBOSE,
)


def tokenizePathData(pathData: str) -> list[PathCommand]:
    """Split SVG path data into a list of PathCommand objects.

    A run of numbers that is longer than the current operator's arity
    repeats that operator (with the same absolute/relative mode), so
    "L 1 2 3 4" yields two LINE_TO commands. A trailing close marker is
    dropped; closing the final subpath is up to the caller.
    """
    pathData = pathData.rstrip()
    if pathData[-1:] in ("Z", "z"):
        pathData = pathData[:-1]

    commands: list[PathCommand] = []
    operator: PathOperator | None = None
    relative = False
    operands: list[float] = []

    for token in _iterTokens(pathData):
        if isinstance(token, str):
            if operands:
                raise ParseError(
                    f"expected {operator.arity} operands for "
                    f"{_letter(operator, relative)!r}, got {len(operands)}"
                )
            operator, relative = _parseLetter(token)
            if operator.arity == 0:
                commands.append(PathCommand(operator, relative))
            continue

        if operator is None:
            raise ParseError(f"number {token!r} before the first path operator")
        if operator.arity == 0:
            raise ParseError(
                f"unexpected number {token!r} after {_letter(operator, relative)!r}"
            )
        operands.append(token)
        if len(operands) == operator.arity:
            commands.append(PathCommand(operator, relative, tuple(operands)))
            operands = []

    if operands:
        raise ParseError(
            f"expected {operator.arity} operands for "
            f"{_letter(operator, relative)!r}, got {len(operands)}"
        )

    return commands


def _iterTokens(pathData):
    pos = 0
    while pos < len(pathData):
        m = _tokenPat.match(pathData, pos)
        if m is None:
            raise ParseError(
                f"unexpected character {pathData[pos]!r} at position {pos}"
            )
        pos = m.end()
        if m.lastgroup == "number":
            number = float(m.group())
            if not math.isfinite(number):
                raise ParseError(
                    f"number {m.group()!r} out of range at position {m.start()}"
                )
            yield number
        elif m.lastgroup == "letter":
            yield m.group()


def _parseLetter(letter: str) -> tuple[PathOperator, bool]:
    if letter.upper() not in acceptedLetters:
        raise ParseError(f"unknown path operator {letter!r}")
    return PathOperator(letter.upper()), letter.islower()


def _letter(operator: PathOperator, relative: bool) -> str:
    return operator.value.lower() if relative else operator.value
