from rich.tree import Tree

from ..components.protocols import DeckProtocol, ElementProtocol
from ..configuring.settings import Markers
from . import Processor


class RichTreeProcessor(Processor[Tree | None]):
    """Render the fragments of a deck, slide by slide."""

    def __init__(self, markers: Markers, only_fragments: bool = True) -> None:
        self._markers = markers
        self._only_fragments = only_fragments

    def process(self, deck: DeckProtocol) -> Tree | None:
        slide_trees = []
        for number, slide in enumerate(deck.slides(), start=1):
            slide_tree = self._process_slide(number, slide)
            if slide_tree is not None:
                slide_trees.append(slide_tree)

        if slide_trees:
            tree = Tree(deck.name)
            tree.children.extend(slide_trees)
            return tree
        return None

    def _process_slide(self, number: int, slide: ElementProtocol) -> Tree | None:
        children_trees = [
            Tree(self._label(element))
            for element in slide.descendants()
            if element.has_attr(self._markers.fragment_index)
        ]

        if self._only_fragments and not children_trees:
            return None

        slide_id = slide.get_attr("id")
        label = f"slide {number}" if slide_id is None else f"slide {number} #{slide_id}"
        if slide.has_class(self._markers.title_slide):
            label = f"{label} [dim](title)[/]"
        tree = Tree(label)
        tree.children.extend(children_trees)
        return tree

    def _label(self, element: ElementProtocol) -> str:
        index = element.get_attr(self._markers.fragment_index)
        label = f"<{element.name}> {index}"
        if element.has_class(self._markers.fragment):
            return f"[green]{label}[/]"
        return f"[yellow]{label} (no fragment)[/]"
