from typing import Any

__version__ = "0.1.0"

app_name = "autofragment"


def __getattr__(name: str) -> Any:
    """Lazy-load attributes of the autofragment package.

    This way of loading is required to avoid loading any code before some important \
    setup is done (such as logging setup). The entry point (the main function of the \
    autofragment.cli.__init__ file) has to configure logging before the modules that \
    contain these attributes are imported, but loading autofragment.cli.__init__ \
    entails loading autofragment.__init__ first.

    Args:
        name: Name of the attribute to load.

    Raises:
        ValueError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    match name:
        case "process_deck":
            from .pipelines import process_deck

            return process_deck
        case "FragmentOptions":
            from .models.options import FragmentOptions

            return FragmentOptions
        case _:
            msg = f"cannot find the attribute {name} in module {__name__}"
            raise ValueError(msg)
