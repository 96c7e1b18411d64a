"""Nodes that combine two images."""

from compositor.nodes.blend.mix import MixRgba

__all__ = ["MixRgba"]
