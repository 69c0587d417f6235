"""Model classes for the results of a processing pass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AssignmentResult:
    """Changes made by a single fragment assignment."""

    fragments: int = 0
    """Number of elements that received the fragment class."""

    indices: int = 0
    """Number of elements that received a fragment index."""


@dataclass
class ProcessingReport:
    """Counters gathered while processing a whole deck."""

    slides: int = 0
    scopes: int = 0
    fragments: int = 0
    indices: int = 0

    def record(self, result: AssignmentResult) -> None:
        self.scopes += 1
        self.fragments += result.fragments
        self.indices += result.indices
