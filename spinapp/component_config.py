"""Per-component access to resolved configuration values."""

from __future__ import annotations

from .keys import ConfigError, Key
from .resolver import Resolver
from .tree import TreePath

_FALLBACK_ROOT = "invalid.path.issue_337"


class ComponentConfig:
    """Configuration lookups scoped to one component."""

    def __init__(self, component_id: str, resolver: Resolver) -> None:
        try:
            self.component_root = TreePath(component_id)
        except ConfigError:
            # Component ids that are not valid paths get a root with no slots.
            self.component_root = TreePath(_FALLBACK_ROOT)
        self.resolver = resolver

    def get_config(self, key: str) -> str:
        """Return the resolved value of the component's configuration key."""
        return self.resolver.resolve(self.component_root + Key(key))

    def __repr__(self) -> str:
        return f"ComponentConfig(component_root={self.component_root!r})"