class AutoFragmentError(Exception):
    pass


class DeckNotFoundError(AutoFragmentError):
    pass


class InvalidDeckError(AutoFragmentError):
    pass
