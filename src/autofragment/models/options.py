"""Model classes for the options driving fragment assignment.

[`FragmentOptions`][autofragment.models.options.FragmentOptions] is the effective \
configuration of a scope. It is immutable: merging a \
[`PartialOptions`][autofragment.models.options.PartialOptions] into it returns a new \
value, so that options resolved for one slide can never leak into the next one.
"""

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, NonNegativeInt
from pydantic.alias_generators import to_camel

_model_config = ConfigDict(
    extra="forbid", alias_generator=to_camel, populate_by_name=True, frozen=True
)


class PartialOptions(BaseModel):
    """Options where every field is optional.

    A field left to None means "keep the value of the previous layer".
    """

    model_config = _model_config

    enabled: bool | None = None
    skip: NonNegativeInt | None = None
    index_start: int | None = None
    index_step: int | None = None
    init_relative: bool | None = None


class FragmentOptions(BaseModel):
    """Effective fragment options of a scope.

    Global configuration files use the camelCase aliases of the fields (`indexStart`, \
    `indexStep`, `initRelative`), field names are accepted too.
    """

    model_config = _model_config

    enabled: bool = False
    """Whether fragments are assigned in the scope at all."""

    skip: NonNegativeInt = 0
    """Number of leading elements that get an index but no fragment class."""

    index_start: int = 10
    """Index of the first element."""

    index_step: int = 10
    """Increment between the indices of consecutive elements."""

    init_relative: bool = False
    """Whether `index_start` is added to the index of the closest indexed ancestor."""

    def merge(self, partial: PartialOptions) -> Self:
        """Override the fields set in `partial`.

        Args:
            partial: Options to apply on top of this instance.

        Returns:
            A new instance, this one is left untouched.
        """
        return self.model_copy(update=partial.model_dump(exclude_none=True))

    def with_overrides(self, overrides: Mapping[str, Any]) -> Self:
        """Validate and apply overrides coming from a configuration file.

        Args:
            overrides: Mapping of field names or aliases to values.

        Raises:
            pydantic.ValidationError: Raised if a key is unknown or a value invalid.

        Returns:
            A new instance with the overrides applied.
        """
        return self.merge(PartialOptions.model_validate(overrides))
