from collections.abc import Sequence
from logging import getLogger
from re import compile as re_compile

from ..models import AssignmentResult, FragmentIndex, FragmentOptions
from ..utils import parse_int
from .protocols import ElementProtocol, FragmentAssignerProtocol

_heading_pattern = re_compile(r"h[1-6]")


def is_heading(element: ElementProtocol) -> bool:
    return _heading_pattern.fullmatch(element.name) is not None


def descend_singletons(elements: Sequence[ElementProtocol]) -> list[ElementProtocol]:
    """Replace a single element by its children until there is not exactly one.

    This lets authors wrap the content of a slide in layout containers without \
    preventing its children from being fragmented.

    Args:
        elements: Candidate siblings.

    Returns:
        The first level, going down, that doesn't contain exactly one element.
    """
    candidates = list(elements)
    while len(candidates) == 1:
        candidates = candidates[0].children
    return candidates


class FragmentAssigner(FragmentAssignerProtocol):
    """Mark sibling elements as fragments and number them.

    Classes and indices already present are kept, so that manually authored \
    fragments coexist with assigned ones and assigning twice changes nothing.
    """

    def __init__(
        self,
        fragment_class: str,
        index_attr: str,
        notes_class: str,
        boundary_class: str,
    ) -> None:
        """Initialize an instance with the reserved names of the deck.

        Args:
            fragment_class: Class marking an element as a fragment.
            index_attr: Attribute holding the index of a fragment.
            notes_class: Class marking `aside` elements as presenter notes.
            boundary_class: Class of the slides container. Searching for the index \
                of an ancestor stops there.
        """
        self._fragment_class = fragment_class
        self._index_attr = index_attr
        self._notes_class = notes_class
        self._boundary_class = boundary_class
        self._logger = getLogger(__name__)

    def assign(
        self, elements: Sequence[ElementProtocol], options: FragmentOptions
    ) -> AssignmentResult:
        if not elements:
            return AssignmentResult()

        index_start = options.index_start
        if options.init_relative:
            index_start += self.ancestor_index(elements[0])

        fragments = indices = 0
        for i, element in enumerate(elements, start=1):
            if i > options.skip and not element.has_class(self._fragment_class):
                element.add_class(self._fragment_class)
                fragments += 1
            if not element.has_attr(self._index_attr):
                index = FragmentIndex(index_start + (i - 1) * options.index_step)
                element.set_attr(self._index_attr, str(index))
                indices += 1

        self._logger.debug(
            "Assigned %d fragment(s) and %d index(es) to %d element(s) from %d",
            fragments,
            indices,
            len(elements),
            index_start,
        )
        return AssignmentResult(fragments=fragments, indices=indices)

    def ancestor_index(self, element: ElementProtocol) -> FragmentIndex:
        """Find the index of the closest indexed ancestor of `element`.

        The search goes up to the slides container included, and no further.

        Args:
            element: Element whose ancestors are searched.

        Returns:
            The index found, 0 if there is none or if it is not an integer.
        """
        current = element
        while not current.has_class(self._boundary_class):
            parent = current.parent
            if parent is None:
                break
            current = parent
            value = current.get_attr(self._index_attr)
            if value is None:
                continue
            index = parse_int(value)
            if index is None:
                self._logger.warning(
                    "Ignoring non-numeric ancestor index %r for a relative start",
                    value,
                )
                break
            return FragmentIndex(index)
        return FragmentIndex(0)

    def heading(self, slide: ElementProtocol) -> ElementProtocol | None:
        children = slide.children
        if children and is_heading(children[0]):
            return children[0]
        return None

    def content_elements(self, slide: ElementProtocol) -> list[ElementProtocol]:
        """List the top-level content of a slide.

        That is every child except a heading in first position and presenter notes, \
        wherever they are.

        Args:
            slide: Slide whose content is requested.

        Returns:
            Content elements in document order.
        """
        children = slide.children
        if children and is_heading(children[0]):
            children = children[1:]
        return [child for child in children if not self.is_presenter_notes(child)]

    def is_presenter_notes(self, element: ElementProtocol) -> bool:
        return element.name == "aside" and element.has_class(self._notes_class)
