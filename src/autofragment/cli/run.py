from pathlib import Path

from . import app


@app.command()
def run(
    deck: Path,
    /,
    *,
    output: Path | None = None,
    enable: bool = False,
    workdir: Path = Path(),
) -> None:
    """Assign fragments to the slides of DECK.

    Args:
        deck: HTML file of the reveal.js deck
        output: Where to write the result. Defaults to overwriting DECK
        enable: Enable fragments on every slide without a directive
        workdir: Directory to load the settings from

    """
    from ..configuring.settings import Settings
    from ..pipelines import run

    settings = Settings.from_yaml(workdir)
    if enable:
        settings = settings.with_plugin_overrides(enabled=True)
    run(settings=settings, input_path=deck, output_path=output)
