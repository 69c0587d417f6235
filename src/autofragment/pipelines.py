from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from .components.factory import SettingsFactory
from .components.fragment_assigner import descend_singletons
from .configuring.settings import Settings
from .models import ProcessingReport

if TYPE_CHECKING:
    from rich.tree import Tree

    from .components.protocols import (
        DeckProtocol,
        ElementProtocol,
        FactoryProtocol,
        FragmentAssignerProtocol,
        OptionsResolverProtocol,
    )

_logger = getLogger(__name__)


def process_slide(
    slide: "ElementProtocol",
    resolver: "OptionsResolverProtocol",
    assigner: "FragmentAssignerProtocol",
    report: ProcessingReport,
) -> None:
    options = resolver.resolve_slide(slide, assigner.heading(slide))
    if not options.enabled:
        return
    elements = descend_singletons(assigner.content_elements(slide))
    if len(elements) > 1:
        report.record(assigner.assign(elements, options))


def sweep_markers(
    root: "ElementProtocol",
    resolver: "OptionsResolverProtocol",
    assigner: "FragmentAssignerProtocol",
    report: ProcessingReport,
) -> None:
    """Process the elements whose directive was not consumed by the slides pass.

    Those are directives placed deeper than the slides and their headings. Each of \
    them makes its own children a scope.
    """
    for element in resolver.marked_elements(root):
        options = resolver.resolve_element(element)
        if not options.enabled:
            continue
        elements = descend_singletons(element.children)
        if len(elements) > 1:
            report.record(assigner.assign(elements, options))


def process_deck(
    deck: "DeckProtocol", factory: "FactoryProtocol", restore_directives: bool = False
) -> ProcessingReport:
    """Assign fragments to a whole deck, in place.

    Slides are processed in order, then leftover directives are swept in document \
    order.

    Args:
        deck: Deck to modify.
        factory: Factory providing the options resolver and the fragment assigner.
        restore_directives: Put the consumed directives back once done, so that the \
            deck resolves the same options if it is processed again.

    Returns:
        What was changed in the deck.
    """
    resolver = factory.options_resolver()
    assigner = factory.fragment_assigner()
    report = ProcessingReport()
    for slide in deck.slides():
        report.slides += 1
        process_slide(slide, resolver, assigner, report)
    sweep_markers(deck.root, resolver, assigner, report)
    if restore_directives:
        resolver.restore_directives()
    _logger.info(
        "Processed %d slide(s) of %s: %d scope(s), %d fragment(s), %d index(es)",
        report.slides,
        deck.name,
        report.scopes,
        report.fragments,
        report.indices,
    )
    return report


def run(
    settings: Settings, input_path: Path, output_path: Path | None = None
) -> ProcessingReport:
    """Process a deck file and write the result.

    Args:
        settings: Resolved settings.
        input_path: Path of the HTML deck to process.
        output_path: Where to write the processed deck. Defaults to `input_path`.

    Returns:
        What was changed in the deck.
    """
    factory = SettingsFactory(settings)
    loader = factory.deck_loader()
    deck = loader.load(input_path)
    report = process_deck(
        deck, factory, restore_directives=settings.restore_directives
    )
    destination = input_path if output_path is None else output_path
    loader.save(deck, destination)
    _logger.info(f"Wrote {destination}")
    return report


def preview(
    settings: Settings, input_path: Path, only_fragments: bool = True
) -> "Tree | None":
    """Process a deck file in memory and render its fragments.

    Args:
        settings: Resolved settings.
        input_path: Path of the HTML deck to process. It is not modified.
        only_fragments: Leave slides without fragments out of the tree.

    Returns:
        The rendered tree, None if there is nothing to show.
    """
    from .processing.rich_tree import RichTreeProcessor

    factory = SettingsFactory(settings)
    deck = factory.deck_loader().load(input_path)
    process_deck(deck, factory)
    return RichTreeProcessor(settings.markers, only_fragments).process(deck)
