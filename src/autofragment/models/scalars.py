"""Model NewTypes to disambiguate multi-usage types."""

from typing import NewType

FragmentIndex = NewType("FragmentIndex", int)
"""Derived from int to represent the reveal order value of a fragment."""

PluginId = NewType("PluginId", str)
"""Derived from str to represent the key of a plugin in the global configuration."""
