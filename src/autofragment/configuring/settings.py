from functools import reduce
from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from ..models import FragmentOptions, PluginId
from ..utils import dirs_hierarchy, load_all_yamls, merge_dicts
from .paths import Paths, default_user_config_dir, settings_file_name


class Markers(BaseModel):
    """Reserved class and attribute names read or written in decks."""

    model_config = ConfigDict(extra="forbid")

    directive: str = "data-auto-fragment"
    """Attribute holding a fragment directive. Consumed when read."""

    fragment: str = "fragment"
    """Class marking an element as a fragment."""

    fragment_index: str = "data-fragment-index"
    """Attribute holding the reveal order of a fragment."""

    title_slide: str = "title-slide"
    """Class of title slides, where fragments are disabled by default."""

    presenter_notes: str = "notes"
    """Class of the `aside` elements holding presenter notes."""

    slides_container: str = "slides"
    """Class of the element containing all slides."""


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    plugin_id: PluginId = PluginId("autoFragment")
    parser: str = "lxml"
    encoding: str = "utf8"
    root_selector: str = ".reveal"
    restore_directives: bool = True
    markers: Markers = Field(default_factory=Markers)
    plugins: dict[PluginId, dict[str, Any]] = Field(default_factory=dict)
    paths: Paths

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load settings from the user config dir, then from `path`.

        Args:
            path: Directory containing the deck to process.

        Returns:
            Validated settings. Values found in `path` win.
        """
        resolved_path = path.resolve()
        yamls = load_all_yamls(
            d
            for p in dirs_hierarchy(default_user_config_dir(), resolved_path)
            if (d := p / settings_file_name).is_file()
        )
        content: dict[str, Any] = reduce(
            merge_dicts, (yaml_content or {} for yaml_content in yamls), {}
        )
        if "paths" not in content:
            content["paths"] = {}
        if "current_dir" not in content["paths"]:
            content["paths"]["current_dir"] = resolved_path
        return cls.model_validate(content)

    def global_options(self) -> FragmentOptions:
        """Merge the default fragment options with the plugin section of the settings.

        Raises:
            pydantic.ValidationError: Raised if the plugin section is invalid.
        """
        return FragmentOptions().with_overrides(self.plugins.get(self.plugin_id, {}))

    def with_plugin_overrides(self, **overrides: Any) -> Self:
        plugins = merge_dicts(self.plugins, {self.plugin_id: overrides})
        return self.model_copy(update={"plugins": plugins})
