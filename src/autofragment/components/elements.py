"""Adapt BeautifulSoup tags to the element interface used by fragment assignment."""

from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag

from .protocols import ElementProtocol


class SoupElement(ElementProtocol):
    """Wrap a BeautifulSoup [`Tag`][bs4.Tag].

    Two wrappers are equal when they wrap the very same tag: `Tag.__eq__` compares \
    markup, which would make identical siblings indistinguishable.
    """

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @property
    def tag(self) -> Tag:
        return self._tag

    @property
    def name(self) -> str:
        return self._tag.name.lower()

    @property
    def children(self) -> list["SoupElement"]:
        return [SoupElement(child) for child in self._tag.children if _is_tag(child)]

    @property
    def parent(self) -> "SoupElement | None":
        parent = self._tag.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return SoupElement(parent)

    def descendants(self) -> Iterator["SoupElement"]:
        for descendant in self._tag.descendants:
            if _is_tag(descendant):
                yield SoupElement(descendant)

    def has_class(self, name: str) -> bool:
        return name in self._classes()

    def add_class(self, name: str) -> None:
        classes = self._classes()
        if name not in classes:
            self._tag["class"] = [*classes, name]

    def remove_class(self, name: str) -> None:
        classes = [c for c in self._classes() if c != name]
        if classes:
            self._tag["class"] = classes
        elif self._tag.has_attr("class"):
            del self._tag["class"]

    def has_attr(self, name: str) -> bool:
        return self._tag.has_attr(name)

    def get_attr(self, name: str) -> str | None:
        value = self._tag.get(name)
        # Multi-valued attributes (class, rel, ...) are parsed into lists
        if isinstance(value, list):
            return " ".join(value)
        return value

    def set_attr(self, name: str, value: str) -> None:
        self._tag[name] = value

    def remove_attr(self, name: str) -> None:
        if self._tag.has_attr(name):
            del self._tag[name]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SoupElement):
            return NotImplemented
        return self._tag is other._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        return f"SoupElement(<{self.name}>)"

    def _classes(self) -> list[str]:
        classes = self._tag.get("class")
        if classes is None:
            return []
        if isinstance(classes, str):
            return classes.split()
        return list(classes)


def _is_tag(node: object) -> bool:
    return isinstance(node, Tag)
