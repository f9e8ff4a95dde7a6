from __future__ import annotations

import logging
import math
import os
import pathlib
import re

from fontTools.misc import etree

from ..core.classes import BoundingBox, Circle, IconSource, Shape
from ..core.errors import IconReadError, ParseError

logger = logging.getLogger(__name__)


_listSeparatorPat = re.compile(r"[\s,]+")


def parseBoundingBox(viewBox: str) -> BoundingBox:
    """Parse an SVG viewBox attribute ("minX minY width height")."""
    parts = [part for part in _listSeparatorPat.split(viewBox.strip()) if part]
    if len(parts) != 4:
        raise ParseError(f"malformed viewBox {viewBox!r}: expected four numbers")
    xMin, yMin, width, height = (
        _parseNumber(part, "viewBox") for part in parts
    )
    if width < 0 or height < 0:
        raise ParseError(f"malformed viewBox {viewBox!r}: negative size")
    return BoundingBox(xMin=xMin, yMin=yMin, xMax=xMin + width, yMax=yMin + height)


def parseIconSource(
    data: bytes,
    *,
    iconSet: str,
    fileName: str,
    baseName: str = "",
    nativeSize: float,
) -> IconSource:
    try:
        root = etree.fromstring(data)
    except etree.ParseError as e:
        raise ParseError(f"invalid SVG document: {e}") from e

    if _localName(root.tag) != "svg":
        raise ParseError(f"expected an <svg> root element, found <{root.tag}>")

    viewBox = root.get("viewBox")
    if viewBox is None:
        boundingBox = BoundingBox(xMax=nativeSize, yMax=nativeSize)
    else:
        boundingBox = parseBoundingBox(viewBox)

    shapes = []
    circles = []
    # Only direct children are considered; groups are not supported.
    for element in root:
        if not isinstance(element.tag, str):
            # comments, processing instructions
            continue
        tag = _localName(element.tag)
        if tag == "path":
            shapes.append(_parseShape(element))
        elif tag == "circle":
            circles.append(_parseCircle(element))
        else:
            logger.debug(f"{iconSet}/{fileName}: ignoring <{tag}> element")

    return IconSource(
        iconSet=iconSet,
        fileName=fileName,
        baseName=baseName,
        nativeSize=nativeSize,
        boundingBox=boundingBox,
        shapes=shapes,
        circles=circles,
        sourceByteCount=len(data),
    )


def readIconSource(
    path: os.PathLike,
    *,
    iconSet: str,
    baseName: str = "",
    nativeSize: float,
) -> IconSource:
    path = pathlib.Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise IconReadError(f"can't read {path.name}: {e.strerror}") from e
    return parseIconSource(
        data,
        iconSet=iconSet,
        fileName=path.name,
        baseName=baseName,
        nativeSize=nativeSize,
    )


def _parseShape(element) -> Shape:
    # "opacity" takes precedence over "fill-opacity"
    opacity = element.get("opacity")
    if opacity is None:
        opacity = element.get("fill-opacity")
    return Shape(
        pathData=element.get("d", ""),
        fill=element.get("fill", ""),
        opacity=1.0 if opacity is None else _parseNumber(opacity, "opacity"),
    )


def _parseCircle(element) -> Circle:
    r = _parseNumber(element.get("r", "0"), "r")
    if r < 0:
        raise ParseError(f"circle radius must not be negative, got {r}")
    return Circle(
        cx=_parseNumber(element.get("cx", "0"), "cx"),
        cy=_parseNumber(element.get("cy", "0"), "cy"),
        r=r,
    )


def _parseNumber(value: str, attributeName: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise ParseError(f"could not parse {attributeName} {value!r} as a number")
    if not math.isfinite(number):
        raise ParseError(f"{attributeName} must be a finite number, got {value!r}")
    return number


def _localName(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]
