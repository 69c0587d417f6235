"""Load and save reveal.js decks written as HTML documents."""

from logging import getLogger
from pathlib import Path

from bs4 import BeautifulSoup

from ..exceptions import DeckNotFoundError, InvalidDeckError
from .elements import SoupElement
from .protocols import DeckLoaderProtocol, DeckProtocol


class SoupDeck(DeckProtocol):
    """Reveal.js deck parsed by BeautifulSoup.

    Slides are the `section` elements under the slides container. A section that \
    directly contains other sections is a vertical stack, not a slide: reveal.js \
    never displays it on its own.
    """

    def __init__(
        self, soup: BeautifulSoup, name: str, root_selector: str, slides_class: str
    ) -> None:
        root = soup.select_one(root_selector)
        if root is None:
            msg = f"could not find the deck root element ({root_selector}) in {name}"
            raise InvalidDeckError(msg)
        self._soup = soup
        self._name = name
        self._root = SoupElement(root)
        self._slides_class = slides_class

    @property
    def name(self) -> str:
        return self._name

    @property
    def root(self) -> SoupElement:
        return self._root

    def slides(self) -> list[SoupElement]:
        return [
            SoupElement(section)
            for section in self._root.tag.select(f".{self._slides_class} section")
            if section.find("section", recursive=False) is None
        ]

    def dump(self) -> str:
        return str(self._soup)


class DeckLoader(DeckLoaderProtocol):
    def __init__(
        self, parser: str, encoding: str, root_selector: str, slides_class: str
    ) -> None:
        """Initialize an instance with the necessary parsing information.

        Args:
            parser: Name of the BeautifulSoup tree builder (e.g. `lxml`).
            encoding: Encoding used to read and write deck files.
            root_selector: CSS selector of the element containing the whole deck.
            slides_class: Class of the element containing the slides.
        """
        self._parser = parser
        self._encoding = encoding
        self._root_selector = root_selector
        self._slides_class = slides_class
        self._logger = getLogger(__name__)

    def load(self, path: Path) -> SoupDeck:
        if not path.is_file():
            msg = f"could not find deck file {path}"
            raise DeckNotFoundError(msg)
        self._logger.debug("Loading %s with the %s parser", path, self._parser)
        return self.from_string(path.read_text(encoding=self._encoding), path.stem)

    def from_string(self, html: str, name: str = "deck") -> SoupDeck:
        return SoupDeck(
            BeautifulSoup(html, self._parser),
            name=name,
            root_selector=self._root_selector,
            slides_class=self._slides_class,
        )

    def save(self, deck: DeckProtocol, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(deck.dump(), encoding=self._encoding)
        self._logger.debug("Wrote %s", path)
