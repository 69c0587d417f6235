"""Resolve the fragment options of a scope from its layered configuration.

Options are layered in increasing precedence: built-in defaults, global \
configuration, directive found on the scope element, directive found on the heading \
of the scope. Directives are one-shot: reading one removes it from its element.

A directive is the value of the directive attribute (`data-auto-fragment` by \
default):

- `""` enables fragments with the options of the previous layers
- `"false"` disables fragments
- `"skip,start,step"` enables fragments and overrides the given fields. Any field \
    can be left empty to keep its previous value. A `+` in front of `start` makes it \
    relative to the index of the closest indexed ancestor
"""

from logging import getLogger

from ..models import FragmentOptions, PartialOptions
from ..utils import parse_int
from .protocols import ElementProtocol, OptionsResolverProtocol

_logger = getLogger(__name__)


def parse_directive(value: str) -> PartialOptions:
    """Parse a directive string into the options it overrides.

    Malformed fields are ignored with a warning: they keep the value of the previous \
    layer, and never end up as a non-numeric fragment index.

    Args:
        value: Value of the directive attribute.

    Returns:
        Partial options with only the fields set by the directive.
    """
    if value == "":
        return PartialOptions(enabled=True)
    if value == "false":
        return PartialOptions(enabled=False)

    fields = [field.strip() for field in value.split(",")]
    if len(fields) > 3:
        _logger.debug("Ignoring extra fields of directive %r", value)
    skip_field, start_field, step_field = (fields + ["", ""])[:3]
    overrides: dict[str, int | bool] = {"enabled": True}

    if skip_field:
        skip = parse_int(skip_field)
        if skip is None or skip < 0:
            _logger.warning(
                "Ignoring invalid skip %r in directive %r", skip_field, value
            )
        else:
            overrides["skip"] = skip
    if start_field:
        index_start = parse_int(start_field)
        if index_start is None:
            _logger.warning(
                "Ignoring invalid start index %r in directive %r", start_field, value
            )
        else:
            overrides["index_start"] = index_start
            overrides["init_relative"] = start_field.startswith("+")
    if step_field:
        index_step = parse_int(step_field)
        if index_step is None:
            _logger.warning(
                "Ignoring invalid index step %r in directive %r", step_field, value
            )
        else:
            overrides["index_step"] = index_step

    return PartialOptions(**overrides)


class OptionsResolver(OptionsResolverProtocol):
    def __init__(
        self, base_options: FragmentOptions, directive_attr: str, title_class: str
    ) -> None:
        """Initialize an instance with the options shared by every scope.

        Args:
            base_options: Defaults already merged with the global configuration.
            directive_attr: Name of the attribute holding directives.
            title_class: Class marking title slides, where fragments are disabled \
                unless a directive enables them.
        """
        self._base_options = base_options
        self._directive_attr = directive_attr
        self._title_class = title_class
        self._consumed: list[tuple[ElementProtocol, str]] = []

    @property
    def base_options(self) -> FragmentOptions:
        return self._base_options

    def resolve_slide(
        self, slide: ElementProtocol, heading: ElementProtocol | None = None
    ) -> FragmentOptions:
        options = self._base_options
        if slide.has_class(self._title_class):
            options = options.model_copy(update={"enabled": False})
        options = self._consume(slide, options)
        if heading is not None:
            options = self._consume(heading, options)
        return options

    def resolve_element(self, element: ElementProtocol) -> FragmentOptions:
        return self._consume(element, self._base_options)

    def marked_elements(self, root: ElementProtocol) -> list[ElementProtocol]:
        """List the elements still carrying a directive, in document order.

        The list is built before anything is consumed, so that processing an element \
        doesn't change which elements are visited afterwards.
        """
        return [e for e in root.descendants() if e.has_attr(self._directive_attr)]

    def restore_directives(self) -> int:
        """Put back the directives consumed so far.

        A written deck keeps its directives this way, so that processing it again \
        resolves the same options and changes nothing.

        Returns:
            Number of directives restored.
        """
        for element, value in self._consumed:
            element.set_attr(self._directive_attr, value)
        restored = len(self._consumed)
        self._consumed.clear()
        return restored

    def _consume(
        self, element: ElementProtocol, options: FragmentOptions
    ) -> FragmentOptions:
        value = element.get_attr(self._directive_attr)
        if value is None:
            return options
        element.remove_attr(self._directive_attr)
        self._consumed.append((element, value))
        return options.merge(parse_directive(value))
