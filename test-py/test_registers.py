import pytest

from ivgicons.core.classes import BlendSpec, OpacityRegister
from ivgicons.core.errors import ParseError, RegisterOverflowError
from ivgicons.core.registers import OpacityRegisterAllocator, blendRatioForOpacity
from ivgicons.sinks.recording import RecordingSink


def test_opaqueUsesDefaultRegister():
    sink = RecordingSink()
    allocator = OpacityRegisterAllocator(sink)
    assert allocator.registerFor(1) == 0
    assert allocator.registerFor(1.0) == 0
    assert sink.value == []
    assert allocator.registers == []


def test_registerReuse():
    sink = RecordingSink()
    allocator = OpacityRegisterAllocator(sink)
    assert allocator.registerFor(0.5) == 1
    assert allocator.registerFor(0.5) == 1
    assert sink.value == [("setColorRegister", 1, BlendSpec(ratio=128))]
    assert allocator.registers == [
        OpacityRegister(opacity=0.5, registerId=1, blendRatio=128)
    ]


def test_registersInFirstSeenOrder():
    sink = RecordingSink()
    allocator = OpacityRegisterAllocator(sink)
    opacities = [0.25, 0.5, 1, 0.25, 0.2, 0.5]
    assert [allocator.registerFor(v) for v in opacities] == [1, 2, 0, 1, 3, 2]
    assert sink.value == [
        ("setColorRegister", 1, BlendSpec(ratio=64)),
        ("setColorRegister", 2, BlendSpec(ratio=128)),
        ("setColorRegister", 3, BlendSpec(ratio=51)),
    ]
    assert [reg.registerId for reg in allocator.registers] == [1, 2, 3]


def test_blendSpecColors():
    blend = BlendSpec(ratio=128)
    assert blend.fromColor == 0x7F
    assert blend.toColor == 0x80


@pytest.mark.parametrize(
    "opacity, ratio", [(0.5, 128), (0.25, 64), (0.2, 51), (1 / 255, 1), (1, 255)]
)
def test_blendRatioForOpacity(opacity, ratio):
    assert blendRatioForOpacity(opacity) == ratio


def test_registerOverflow():
    allocator = OpacityRegisterAllocator(RecordingSink())
    opacities = [(i + 1) / 1000 for i in range(255)]
    assert [allocator.registerFor(v) for v in opacities] == list(range(1, 256))
    # Known values are still fine
    assert allocator.registerFor(opacities[-1]) == 255
    with pytest.raises(RegisterOverflowError):
        allocator.registerFor(0.999)


@pytest.mark.parametrize("opacity", [0, -0.5, 1.5])
def test_invalidOpacity(opacity):
    allocator = OpacityRegisterAllocator(RecordingSink())
    with pytest.raises(ParseError):
        allocator.registerFor(opacity)
