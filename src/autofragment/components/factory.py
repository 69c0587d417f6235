from typing import TYPE_CHECKING

from .protocols import (
    DeckLoaderProtocol,
    FactoryProtocol,
    FragmentAssignerProtocol,
    OptionsResolverProtocol,
)

if TYPE_CHECKING:
    from ..configuring.settings import Settings


class SettingsFactory(FactoryProtocol):
    def __init__(self, settings: "Settings") -> None:
        self._settings = settings

    def deck_loader(self) -> DeckLoaderProtocol:
        from .decks import DeckLoader

        return DeckLoader(
            parser=self._settings.parser,
            encoding=self._settings.encoding,
            root_selector=self._settings.root_selector,
            slides_class=self._settings.markers.slides_container,
        )

    def options_resolver(self) -> OptionsResolverProtocol:
        from .options_resolver import OptionsResolver

        return OptionsResolver(
            base_options=self._settings.global_options(),
            directive_attr=self._settings.markers.directive,
            title_class=self._settings.markers.title_slide,
        )

    def fragment_assigner(self) -> FragmentAssignerProtocol:
        from .fragment_assigner import FragmentAssigner

        return FragmentAssigner(
            fragment_class=self._settings.markers.fragment,
            index_attr=self._settings.markers.fragment_index,
            notes_class=self._settings.markers.presenter_notes,
            boundary_class=self._settings.markers.slides_container,
        )
