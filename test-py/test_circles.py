import pytest

from ivgicons.core.circles import expandCircles
from ivgicons.core.classes import BoundingBox, Circle
from ivgicons.core.normalize import NormalizationContext
from ivgicons.sinks.recording import RecordingSink


def makeContext(nativeSize, xMin=0, yMin=0):
    return NormalizationContext.fromBoundingBox(
        BoundingBox(xMin=xMin, yMin=yMin), nativeSize
    )


def test_expandCircle():
    sink = RecordingSink()
    pathStarted = expandCircles(
        sink, [Circle(cx=12, cy=12, r=5)], makeContext(24), 0, False
    )
    assert pathStarted
    assert sink.value == [
        ("startPath", 0, -10, 0),
        ("relArcTo", 10, 10, 0, False, True, 20, 0),
        ("relArcTo", 10, 10, 0, False, True, -20, 0),
    ]


@pytest.mark.parametrize("r", [0.5, 1, 3, 12])
def test_circleAtOrigin(r):
    sink = RecordingSink()
    expandCircles(sink, [Circle(cx=0, cy=0, r=r)], makeContext(24), 0, False)
    arcs = [args for methodName, *args in sink.value if methodName == "relArcTo"]
    assert len(arcs) == 2
    assert sum(arc[5] for arc in arcs) == 0
    assert sum(arc[6] for arc in arcs) == 0
    for rx, ry, rotation, largeArc, sweep, dx, dy in arcs:
        assert rx == ry == 2 * r
        assert rotation == 0
        assert (largeArc, sweep) == (False, True)


def test_expandCirclesOntoOpenPath():
    sink = RecordingSink()
    circles = [Circle(cx=6, cy=6, r=2), Circle(cx=18, cy=18, r=2)]
    pathStarted = expandCircles(sink, circles, makeContext(24), 3, True)
    assert pathStarted
    assert [methodName for methodName, *_ in sink.value] == [
        "closePathAbsMoveTo",
        "relArcTo",
        "relArcTo",
        "closePathAbsMoveTo",
        "relArcTo",
        "relArcTo",
    ]
    assert sink.value[0] == ("closePathAbsMoveTo", -16, -12)
    assert sink.value[3] == ("closePathAbsMoveTo", 8, 12)


def test_expandCirclesWithOffset():
    sink = RecordingSink()
    expandCircles(sink, [Circle(cx=2, cy=2, r=1)], makeContext(24, 2, 2), 1, False)
    assert sink.value[0] == ("startPath", 1, -26, -24)


def test_expandNoCircles():
    sink = RecordingSink()
    assert not expandCircles(sink, [], makeContext(24), 0, False)
    assert expandCircles(sink, [], makeContext(24), 0, True)
    assert sink.value == []
