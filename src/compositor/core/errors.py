"""Exceptions raised by the compositor core."""


class CompositorError(Exception):
    """Base class for all compositor errors."""


class UnknownSlotError(CompositorError, LookupError):
    """A slot name is not declared by the node kind."""

    def __init__(self, action: str, direction: str, kind: str, slot: str) -> None:
        super().__init__(f"cannot {action}: no {direction} slot on {kind} named {slot}")
        self.kind = kind
        self.slot = slot


class NodeNotFoundError(CompositorError, LookupError):
    """A node name does not exist in the graph."""

    def __init__(self, node_name: str) -> None:
        super().__init__(f"no node named {node_name!r} in graph")
        self.node_name = node_name


class ConsumedBufferError(CompositorError, RuntimeError):
    """An ImageData was accessed after its samples were taken."""


class ImageDecodeError(CompositorError, ValueError):
    """An image file could not be decoded."""
