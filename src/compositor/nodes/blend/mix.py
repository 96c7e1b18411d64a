"""
Alpha mix node.

Blends two RGBA buffers sample by sample with a constant factor.
"""

from __future__ import annotations

from typing import Mapping

from compositor.config import DEFAULT_MIX
from compositor.core.data_types import ImageData
from compositor.core.node import Node
from compositor.core.registry import register_node


@register_node
class MixRgba(Node):
    """
    Mix two images: output = a * mix + b * (1 - mix).

    Both inputs are required. Samples are paired by position; when the
    buffers differ in length the output stops at the shorter one.

    Attributes:
        mix: Weight of INPUT_A, nominally in [0, 1] (not clamped)
    """

    INPUT_A = "INPUT_A"
    INPUT_B = "INPUT_B"
    OUTPUT_MIX = "OUTPUT_MIX"

    kind = "Mix"
    inputs = (INPUT_A, INPUT_B)
    outputs = (OUTPUT_MIX,)

    def __init__(self, mix: float = DEFAULT_MIX) -> None:
        super().__init__()
        self.mix = mix

    def process(self, inputs: Mapping[str, ImageData]) -> dict[str, ImageData]:
        """Blend INPUT_A over INPUT_B."""
        a = inputs[self.INPUT_A].take()
        b = inputs[self.INPUT_B].take()

        n = min(len(a), len(b))
        mixed = a[:n] * self.mix + b[:n] * (1.0 - self.mix)

        return {self.OUTPUT_MIX: ImageData.from_owned(mixed)}
