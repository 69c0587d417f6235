from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from ..models import AssignmentResult, FragmentOptions


class ElementProtocol(Protocol):
    """Node of a deck tree.

    Implementations only expose what fragment assignment needs: navigation, class \
    and attribute edition. Elements are never created or destroyed through this \
    interface.
    """

    @property
    def name(self) -> str:
        """Lowercase tag name of the element (e.g. `section`, `h2`)."""
        ...

    @property
    def children(self) -> list[Self]:
        """Child elements, in document order. Text nodes are not included."""
        ...

    @property
    def parent(self) -> Self | None:
        """Parent element, or None for the top of the document."""
        ...

    def descendants(self) -> Iterator[Self]:
        """Yield all descendant elements in document order."""
        ...

    def has_class(self, name: str) -> bool: ...

    def add_class(self, name: str) -> None: ...

    def remove_class(self, name: str) -> None: ...

    def has_attr(self, name: str) -> bool: ...

    def get_attr(self, name: str) -> str | None: ...

    def set_attr(self, name: str, value: str) -> None: ...

    def remove_attr(self, name: str) -> None: ...


class DeckProtocol(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def root(self) -> ElementProtocol:
        """Element containing the whole deck, used to sweep for leftover markers."""
        ...

    def slides(self) -> list[ElementProtocol]:
        """Slides of the deck in presentation order."""
        ...

    def dump(self) -> str: ...


class DeckLoaderProtocol(Protocol):
    def load(self, path: Path) -> DeckProtocol: ...

    def from_string(self, html: str, name: str = "deck") -> DeckProtocol: ...

    def save(self, deck: DeckProtocol, path: Path) -> None: ...


class OptionsResolverProtocol(Protocol):
    def resolve_slide(
        self, slide: ElementProtocol, heading: ElementProtocol | None = None
    ) -> "FragmentOptions": ...

    def resolve_element(self, element: ElementProtocol) -> "FragmentOptions": ...

    def marked_elements(self, root: ElementProtocol) -> list[ElementProtocol]: ...

    def restore_directives(self) -> int: ...


class FragmentAssignerProtocol(Protocol):
    def assign(
        self, elements: Sequence[ElementProtocol], options: "FragmentOptions"
    ) -> "AssignmentResult": ...

    def content_elements(self, slide: ElementProtocol) -> list[ElementProtocol]: ...

    def heading(self, slide: ElementProtocol) -> ElementProtocol | None: ...


class FactoryProtocol(Protocol):
    def deck_loader(self) -> DeckLoaderProtocol: ...

    def options_resolver(self) -> OptionsResolverProtocol: ...

    def fragment_assigner(self) -> FragmentAssignerProtocol: ...
