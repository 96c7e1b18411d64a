"""Core node system components."""

from compositor.core.data_types import Image, ImageData, Pixel
from compositor.core.errors import (
    CompositorError,
    ConsumedBufferError,
    ImageDecodeError,
    NodeNotFoundError,
    UnknownSlotError,
)
from compositor.core.graph import NodeGraph, generate_name
from compositor.core.node import Node
from compositor.core.port import Port
from compositor.core.registry import NodeRegistry, register_node

__all__ = [
    "Image",
    "ImageData",
    "Pixel",
    "CompositorError",
    "ConsumedBufferError",
    "ImageDecodeError",
    "NodeNotFoundError",
    "UnknownSlotError",
    "NodeGraph",
    "generate_name",
    "Node",
    "Port",
    "NodeRegistry",
    "register_node",
]
