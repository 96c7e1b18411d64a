"""
Port value type.

A port names one endpoint of a connection: a node instance in the graph
and one of that node's slots.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Port:
    """
    One end of a node graph connection.

    Equality and hashing use both fields. A port does not imply that a
    connection exists; nodes store ports to record their wiring.

    Attributes:
        node_name: Instance name of the node in its graph
        slot_name: Input or output slot on that node
    """

    node_name: str
    slot_name: str

    def __str__(self) -> str:
        return f"{self.node_name}.{self.slot_name}"
