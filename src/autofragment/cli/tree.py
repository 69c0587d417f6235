from pathlib import Path

from . import app


@app.command()
def tree(
    deck: Path,
    /,
    *,
    all: bool = False,  # noqa: A002
    enable: bool = False,
    workdir: Path = Path(),
) -> None:
    """Show the fragments DECK would get, without modifying it.

    Args:
        deck: HTML file of the reveal.js deck
        all: Also show slides without fragments
        enable: Enable fragments on every slide without a directive
        workdir: Directory to load the settings from
    """
    from logging import getLogger

    from rich import print as rich_print

    from ..configuring.settings import Settings
    from ..pipelines import preview

    settings = Settings.from_yaml(workdir)
    if enable:
        settings = settings.with_plugin_overrides(enabled=True)
    tree = preview(settings, deck, only_fragments=not all)
    if tree is None:
        getLogger(__name__).info(f"No fragments in {deck}")
    else:
        rich_print(tree)
