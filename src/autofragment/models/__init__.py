"""Modules containing model classes for different parts of autofragment.

- [`options`][autofragment.models.options] contains the fragment options, complete \
    or partial, that drive the fragment assignment of a scope
- [`report`][autofragment.models.report] contains the results gathered while \
    processing a deck
- [`scalars`][autofragment.models.scalars] contains NewTypes that help disambiguate \
    types that are used a lot in different contexts (e.g. int and str)
"""

from .options import FragmentOptions, PartialOptions
from .report import AssignmentResult, ProcessingReport
from .scalars import FragmentIndex, PluginId

__all__ = [
    "AssignmentResult",
    "FragmentIndex",
    "FragmentOptions",
    "PartialOptions",
    "PluginId",
    "ProcessingReport",
]
