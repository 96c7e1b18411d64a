"""
Node kind lookup.

Hosts that only know a kind name, such as "Mix", use the registry to
find the node class and build a configured instance.
"""

from __future__ import annotations

from typing import Any, Type

from compositor.core.node import Node


class NodeRegistry:
    """
    Global registry of available node kinds.

    Usage:
        @register_node
        class MixRgba(Node):
            kind = "Mix"
            ...

        node_class = NodeRegistry.get("Mix")
        node = NodeRegistry.create("Mix", mix=0.25)
    """

    _registry: dict[str, Type[Node]] = {}

    @classmethod
    def register(cls, node_class: Type[Node]) -> Type[Node]:
        """
        Register a node class under its kind name.

        Re-registering a kind replaces the previous class.

        Args:
            node_class: The node class to register

        Returns:
            The registered class (for decorator use)

        Raises:
            ValueError: If the class declares no kind
        """
        if not node_class.kind:
            raise ValueError(f"{node_class.__name__} has no kind name")

        cls._registry[node_class.kind] = node_class
        return node_class

    @classmethod
    def unregister(cls, kind: str) -> bool:
        """
        Unregister a node kind.

        Returns:
            True if unregistered, False if not found
        """
        return cls._registry.pop(kind, None) is not None

    @classmethod
    def get(cls, kind: str) -> Type[Node] | None:
        """Get a node class by kind name."""
        return cls._registry.get(kind)

    @classmethod
    def create(cls, kind: str, **config: Any) -> Node | None:
        """
        Create a node instance by kind name.

        Args:
            kind: Kind name of the node
            **config: Keyword arguments for the node's constructor

        Returns:
            New node instance or None if the kind is not registered
        """
        node_class = cls._registry.get(kind)
        if node_class is not None:
            return node_class(**config)
        return None

    @classmethod
    def list_all(cls) -> list[str]:
        """List all registered kind names."""
        return list(cls._registry.keys())

    @classmethod
    def clear(cls) -> None:
        """Forget every registered kind."""
        cls._registry.clear()


def register_node(cls: Type[Node]) -> Type[Node]:
    """Class decorator that registers a node kind under its kind name."""
    return NodeRegistry.register(cls)
