"""Compositor: an in-process image-compositing node graph."""

from compositor.core import (
    Image,
    ImageData,
    Node,
    NodeGraph,
    NodeRegistry,
    Pixel,
    Port,
    generate_name,
    register_node,
)
from compositor.nodes import MixRgba

__version__ = "0.1.0"

__all__ = [
    "Image",
    "ImageData",
    "MixRgba",
    "Node",
    "NodeGraph",
    "NodeRegistry",
    "Pixel",
    "Port",
    "generate_name",
    "register_node",
]
