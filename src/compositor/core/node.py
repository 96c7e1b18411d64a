"""
Node base class.

A node kind declares its slot names once as class attributes; the base
class keeps the per-instance wiring (one source per input slot, an ordered
destination list per output slot) and enforces the execution contract.
Kinds only implement process().
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Mapping

from compositor.core.data_types import ImageData
from compositor.core.errors import ConsumedBufferError, UnknownSlotError
from compositor.core.port import Port

logger = logging.getLogger(__name__)


class Node(ABC):
    """
    Base class for all node kinds.

    Subclasses set the class attributes and implement process():

        class InvertNode(Node):
            kind = "Invert"
            inputs = ("INPUT",)
            outputs = ("OUTPUT",)

            def process(self, inputs):
                return {"OUTPUT": ImageData.from_owned(1.0 - inputs["INPUT"].take())}

    Attributes:
        kind: Kind name, shared by all instances; seeds instance names
        inputs: Declared input slot names
        outputs: Declared output slot names
        required_inputs: Inputs that must be supplied to execute();
            all declared inputs when left as None
    """

    kind: ClassVar[str] = ""
    inputs: ClassVar[tuple[str, ...]] = ()
    outputs: ClassVar[tuple[str, ...]] = ()
    required_inputs: ClassVar[tuple[str, ...] | None] = None

    def __init__(self) -> None:
        self._sources: dict[str, Port | None] = {slot: None for slot in self.inputs}
        self._destinations: dict[str, list[Port]] = {slot: [] for slot in self.outputs}

    def name(self) -> str:
        """Kind name of this node (not the instance name)."""
        return self.kind

    # --- Execution ---

    def execute(self, inputs: Mapping[str, ImageData]) -> dict[str, ImageData] | None:
        """
        Run the node on explicitly supplied inputs.

        Args:
            inputs: Input slot name -> buffer. Buffers used by the node
                are consumed.

        Returns:
            Output slot name -> buffer, or None if a required input is
            missing (nothing is produced and nothing is consumed)

        Raises:
            ConsumedBufferError: If a supplied buffer was already consumed
                or is supplied under two slots; no buffer is consumed
        """
        required = self.inputs if self.required_inputs is None else self.required_inputs
        missing = [slot for slot in required if slot not in inputs]
        if missing:
            logger.debug("%s skipped, missing inputs: %s", self.kind, ", ".join(missing))
            return None

        seen: set[int] = set()
        for slot in self.inputs:
            buffer = inputs.get(slot)
            if buffer is None:
                continue
            if buffer.consumed:
                raise ConsumedBufferError(f"{self.kind} input {slot} was already consumed")
            if id(buffer) in seen:
                raise ConsumedBufferError(
                    f"{self.kind} input {slot} shares a buffer with another input"
                )
            seen.add(id(buffer))

        return self.process(inputs)

    @abstractmethod
    def process(self, inputs: Mapping[str, ImageData]) -> dict[str, ImageData]:
        """
        Compute outputs. Called only when every required input is present.

        Args:
            inputs: Input slot name -> buffer

        Returns:
            Output slot name -> buffer
        """

    # --- Connection state ---

    def input_source(self, slot: str) -> Port | None:
        """Port feeding an input slot, or None if unconnected or unknown."""
        return self._sources.get(slot)

    def output_destinations(self, slot: str) -> tuple[Port, ...] | None:
        """Ports an output slot feeds, in connection order; None if unknown."""
        destinations = self._destinations.get(slot)
        if destinations is None:
            return None
        return tuple(destinations)

    def connect_input(self, slot: str, source_port: Port) -> None:
        """
        Set the source of an input slot, replacing any previous one.

        Raises:
            UnknownSlotError: If the slot is not a declared input
        """
        if slot not in self._sources:
            raise UnknownSlotError("connect", "input", self.kind, slot)
        self._sources[slot] = source_port

    def connect_output(self, slot: str, destination_port: Port) -> None:
        """
        Append a destination to an output slot.

        Raises:
            UnknownSlotError: If the slot is not a declared output
        """
        if slot not in self._destinations:
            raise UnknownSlotError("connect", "output", self.kind, slot)
        self._destinations[slot].append(destination_port)

    def remove_output(self, slot: str, destination_port: Port) -> None:
        """
        Remove a destination from an output slot; absent destinations are ignored.

        Raises:
            UnknownSlotError: If the slot is not a declared output
        """
        if slot not in self._destinations:
            raise UnknownSlotError("remove", "output", self.kind, slot)
        self._destinations[slot] = [
            port for port in self._destinations[slot] if port != destination_port
        ]

    def has_connection(self, slot: str, destination_port: Port) -> bool:
        """Check if an output slot currently feeds the destination."""
        destinations = self.output_destinations(slot)
        return destinations is not None and destination_port in destinations

    def __repr__(self) -> str:
        sources = {slot: str(port) if port else None for slot, port in self._sources.items()}
        destinations = {
            slot: [str(port) for port in ports] for slot, ports in self._destinations.items()
        }
        return f"{type(self).__name__}(kind={self.kind!r}, sources={sources}, destinations={destinations})"
