import pytest

from ivgicons.core.errors import ParseError
from ivgicons.core.pathdata import PathCommand, PathOperator, tokenizePathData

M = PathOperator.MOVE_TO
L = PathOperator.LINE_TO
H = PathOperator.HLINE_TO
V = PathOperator.VLINE_TO
Q = PathOperator.QUAD_TO
T = PathOperator.SMOOTH_QUAD_TO
C = PathOperator.CUBIC_TO
S = PathOperator.SMOOTH_CUBIC_TO
Z = PathOperator.CLOSE_PATH


tokenizeTestData = [
    ("", []),
    ("z", []),
    (
        "M10 10L20 10L20 20Z",
        [
            PathCommand(M, False, (10, 10)),
            PathCommand(L, False, (20, 10)),
            PathCommand(L, False, (20, 20)),
        ],
    ),
    (
        "M19 13h-6v6h-2v-6H5v-2h6V5h2v6h6v2z",
        [
            PathCommand(M, False, (19, 13)),
            PathCommand(H, True, (-6,)),
            PathCommand(V, True, (6,)),
            PathCommand(H, True, (-2,)),
            PathCommand(V, True, (-6,)),
            PathCommand(H, False, (5,)),
            PathCommand(V, True, (-2,)),
            PathCommand(H, True, (6,)),
            PathCommand(V, False, (5,)),
            PathCommand(H, True, (2,)),
            PathCommand(V, True, (6,)),
            PathCommand(H, True, (6,)),
            PathCommand(V, True, (2,)),
        ],
    ),
    (
        "M1-2.5.5 3",
        [
            PathCommand(M, False, (1, -2.5)),
            PathCommand(M, False, (0.5, 3)),
        ],
    ),
    (
        "M1,2 3,4",
        [
            PathCommand(M, False, (1, 2)),
            PathCommand(M, False, (3, 4)),
        ],
    ),
    ("M1e1 2E-1", [PathCommand(M, False, (10, 0.2))]),
    (
        "  M 0 0  q 1 2 3 4 t 5 6 C 1 2 3 4 5 6 s 1 2 3 4  ",
        [
            PathCommand(M, False, (0, 0)),
            PathCommand(Q, True, (1, 2, 3, 4)),
            PathCommand(T, True, (5, 6)),
            PathCommand(C, False, (1, 2, 3, 4, 5, 6)),
            PathCommand(S, True, (1, 2, 3, 4)),
        ],
    ),
    (
        "M0 0L10 0ZL0 10",
        [
            PathCommand(M, False, (0, 0)),
            PathCommand(L, False, (10, 0)),
            PathCommand(Z, False),
            PathCommand(L, False, (0, 10)),
        ],
    ),
    (
        "M12 2C6.48 2 2 6.48 2 12s4.48 10 10 10",
        [
            PathCommand(M, False, (12, 2)),
            PathCommand(C, False, (6.48, 2, 2, 6.48, 2, 12)),
            PathCommand(S, True, (4.48, 10, 10, 10)),
        ],
    ),
]


@pytest.mark.parametrize("pathData, expectedCommands", tokenizeTestData)
def test_tokenizePathData(pathData, expectedCommands):
    assert expectedCommands == tokenizePathData(pathData)


@pytest.mark.parametrize(
    "repeated, explicit",
    [
        ("L 1 2 3 4", "L 1 2 L 3 4"),
        ("l1 2 3 4 5 6", "l1 2l3 4l5 6"),
        ("H1 2 3", "H1H2H3"),
        ("c1 2 3 4 5 6 7 8 9 10 11 12", "c1 2 3 4 5 6c7 8 9 10 11 12"),
        ("Q1 2 3 4 5 6 7 8", "Q1 2 3 4Q5 6 7 8"),
    ],
)
def test_implicitRepeat(repeated, explicit):
    assert tokenizePathData(repeated) == tokenizePathData(explicit)


def test_implicitRepeatKeepsMode():
    commands = tokenizePathData("M0 0l1 2 3 4")
    assert [c.relative for c in commands] == [False, True, True]


@pytest.mark.parametrize(
    "pathData, message",
    [
        ("Q 1 2 3", "expected 4 operands"),
        ("M0 0Q 1 2 3", "expected 4 operands"),
        ("M0 0L1 2 3", "expected 2 operands"),
        ("M0 0L1 H2", "expected 2 operands"),
        ("M0 0X1 2", "unknown path operator 'X'"),
        ("M0 0A1 1 0 0 1 2 2", "unknown path operator 'A'"),
        ("M0 0a1 1 0 0 1 2 2", "unknown path operator 'a'"),
        ("1 2", "before the first path operator"),
        ("M0 0z 1 2", "unexpected number"),
        ("M0 0 #", "unexpected character"),
        ("M1e999 0", "out of range"),
        ("M0 0L1 -1e400", "out of range"),
    ],
)
def test_tokenizePathDataErrors(pathData, message):
    with pytest.raises(ParseError, match=message):
        tokenizePathData(pathData)


def test_operatorArity():
    assert {op.value: op.arity for op in PathOperator} == {
        "M": 2,
        "L": 2,
        "H": 1,
        "V": 1,
        "Q": 4,
        "T": 2,
        "C": 6,
        "S": 4,
        "A": 7,
        "Z": 0,
    }
