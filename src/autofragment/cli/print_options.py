from pathlib import Path

from . import app


@app.command()
def print_options(*, workdir: Path = Path()) -> None:
    """Print the fragment options applied to slides without a directive.

    Args:
        workdir: Directory to load the settings from

    """
    from rich import print as rich_print

    from ..configuring.settings import Settings

    options = Settings.from_yaml(workdir).global_options()
    config = options.model_dump(by_alias=True)
    max_length = max(len(key) for key in config)
    rich_print(
        "\n".join((f"[green]{k:{max_length}}[/] {v}") for k, v in config.items())
    )
