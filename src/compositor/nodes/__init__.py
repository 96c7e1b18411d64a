"""Built-in node kinds. Importing this package registers them."""

from compositor.nodes.blend import MixRgba

__all__ = ["MixRgba"]
