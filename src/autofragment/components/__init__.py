"""Components processing decks.

- [`options_resolver`][autofragment.components.options_resolver] resolves the \
    fragment options of a slide or of a marked element
- [`fragment_assigner`][autofragment.components.fragment_assigner] marks sibling \
    elements as fragments and numbers them
- [`elements`][autofragment.components.elements] and \
    [`decks`][autofragment.components.decks] adapt BeautifulSoup documents to the \
    [`protocols`][autofragment.components.protocols] used by the two components above
- [`factory`][autofragment.components.factory] builds all components from the \
    settings
"""
