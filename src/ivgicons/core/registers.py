from __future__ import annotations

import logging

from fontTools.misc.roundTools import otRound

from .classes import BlendSpec, OpacityRegister
from .errors import ParseError, RegisterOverflowError
from .protocols import DrawingSink

logger = logging.getLogger(__name__)


DEFAULT_REGISTER_ID = 0
MAX_REGISTER_ID = 255


def blendRatioForOpacity(opacity: float) -> int:
    return otRound(opacity * 0xFF)


class OpacityRegisterAllocator:
    """Hands out color register ids for the opacities used within one icon.

    Fully opaque shapes use register 0, the plain fill color. Every other
    distinct opacity gets its own register, numbered from 1 in the order the
    opacities are first seen. The register is programmed on the sink exactly
    once, as a blend between transparent and the fill color.
    """

    def __init__(self, sink: DrawingSink):
        self.sink = sink
        self._registers: dict[float, OpacityRegister] = {}

    @property
    def registers(self) -> list[OpacityRegister]:
        return sorted(self._registers.values(), key=lambda reg: reg.registerId)

    def registerFor(self, opacity: float) -> int:
        if not 0 < opacity <= 1:
            raise ParseError(f"opacity must be in the range (0, 1], got {opacity}")
        if opacity == 1:
            return DEFAULT_REGISTER_ID

        register = self._registers.get(opacity)
        if register is not None:
            return register.registerId

        registerId = len(self._registers) + 1
        if registerId > MAX_REGISTER_ID:
            raise RegisterOverflowError(
                f"more than {MAX_REGISTER_ID} distinct opacity values in one icon"
            )
        register = OpacityRegister(
            opacity=opacity,
            registerId=registerId,
            blendRatio=blendRatioForOpacity(opacity),
        )
        self._registers[opacity] = register
        logger.debug(
            f"register {registerId}: opacity {opacity} (ratio {register.blendRatio})"
        )
        self.sink.setColorRegister(registerId, BlendSpec(ratio=register.blendRatio))
        return registerId
