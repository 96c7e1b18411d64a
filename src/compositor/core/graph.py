"""
Node graph.

Owns the node instances, names them, and is the only place connections
between them are made.
"""

from __future__ import annotations

import logging
from typing import Iterator

from compositor.core.errors import NodeNotFoundError
from compositor.core.node import Node
from compositor.core.port import Port

logger = logging.getLogger(__name__)


def generate_name(kind: str, index: int) -> str:
    """Instance name for the index-th candidate of a kind ("Mix", "Mix1", ...)."""
    if index == 0:
        return kind
    return f"{kind}{index}"


class NodeGraph:
    """
    A graph of named nodes.

    Nodes are stored by instance names the graph generates itself. Each
    node keeps its own wiring; the graph keeps both ends consistent and
    enforces one source per input slot.

    Cycles are not detected and nothing here evaluates the whole graph:
    callers execute nodes one at a time with inputs they assemble.
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._nodes: dict[str, Node] = {}

    def add(self, node: Node) -> str:
        """
        Add a node to the graph.

        Use connect() to wire it to other nodes.

        Args:
            node: The node to add; the graph takes ownership

        Returns:
            The unique instance name generated for the node
        """
        kind = node.name()
        index = 0
        while generate_name(kind, index) in self._nodes:
            index += 1

        name = generate_name(kind, index)
        self._nodes[name] = node
        logger.debug("Added node %s", name)
        return name

    def connect(self, from_port: Port, to_port: Port) -> None:
        """
        Connect an output slot to an input slot.

        An input has only one source, so the first node whose output slot
        named like from_port's already feeds to_port loses that
        destination. The new connection is then recorded on both nodes.

        Args:
            from_port: Output end (node name and output slot)
            to_port: Input end (node name and input slot)

        Raises:
            NodeNotFoundError: If either node name is not in the graph
            UnknownSlotError: If either slot is not declared by its node
        """
        source = self.node(from_port.node_name)
        dest = self.node(to_port.node_name)

        for name, node in self._nodes.items():
            if node.has_connection(from_port.slot_name, to_port):
                node.remove_output(from_port.slot_name, to_port)
                logger.debug("Removed %s.%s -> %s", name, from_port.slot_name, to_port)
                break

        source.connect_output(from_port.slot_name, to_port)
        dest.connect_input(to_port.slot_name, from_port)
        logger.debug("Connected %s -> %s", from_port, to_port)

    def node(self, name: str) -> Node:
        """
        Get a node by instance name.

        Raises:
            NodeNotFoundError: If no node has that name
        """
        try:
            return self._nodes[name]
        except KeyError:
            raise NodeNotFoundError(name) from None

    def items(self) -> Iterator[tuple[str, Node]]:
        """Iterate over (name, node) pairs in insertion order."""
        return iter(list(self._nodes.items()))

    def connections(self) -> list[tuple[Port, Port]]:
        """
        Get all connections in the graph.

        Returns:
            (output port, input port) pairs, read from each node's
            output destinations
        """
        result = []
        for name, node in self._nodes.items():
            for slot in node.outputs:
                for destination in node.output_destinations(slot) or ():
                    result.append((Port(name, slot), destination))
        return result

    def __getitem__(self, name: str) -> Node:
        return self.node(name)

    def __len__(self) -> int:
        """Number of nodes in the graph."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        """Iterate over node names in insertion order."""
        return iter(list(self._nodes))

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __repr__(self) -> str:
        return f"NodeGraph(nodes={self._nodes!r})"
