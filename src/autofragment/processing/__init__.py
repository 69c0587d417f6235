"""Provide protocols to better type-check deck processing code."""

from typing import TYPE_CHECKING, Protocol, TypeVar

# Necessary to avoid circular imports with ..components.protocols
if TYPE_CHECKING:
    from ..components.protocols import DeckProtocol


T = TypeVar("T")


class Processor(Protocol[T]):
    def process(self, deck: "DeckProtocol") -> T:
        """Process a deck."""
        ...
