"""Resolution of configuration values through providers and default templates."""

from __future__ import annotations

from .keys import InvalidPathError, InvalidTemplateError, ProviderError
from .providers import Provider
from .template import Expr, Literal, Template
from .tree import Tree, TreePath

RECURSION_LIMIT = 100


class Resolver:
    """Resolves configuration values for paths in a configuration tree."""

    def __init__(self, tree: Tree | None = None) -> None:
        self.tree = tree if tree is not None else Tree()
        self._providers: list[Provider] = []

    def add_provider(self, provider: Provider) -> None:
        """Add a provider consulted for top-level values, in insertion order."""
        self._providers.append(provider)

    def resolve(self, path: TreePath) -> str:
        """Return the resolved value at the given path."""
        return self._resolve_path(path, 0)

    def _resolve_path(self, path: TreePath, depth: int) -> str:
        depth += 1
        if depth > RECURSION_LIMIT:
            raise InvalidTemplateError(f"hit recursion limit at path: {path}")
        slot = self.tree.get(path)
        if path.size() == 1:
            key = next(path.keys())
            for provider in self._providers:
                value = self._query(provider, key)
                if value is not None:
                    return value
        if slot.default is None:
            raise InvalidPathError(f"missing value at required path: {path}")
        return self._resolve_template(path, slot.default, depth)

    @staticmethod
    def _query(provider: Provider, key) -> str | None:
        try:
            return provider.get(key)
        except ProviderError:
            raise
        except Exception as exc:
            raise ProviderError(repr(exc)) from exc

    def _resolve_template(self, path: TreePath, template: Template, depth: int) -> str:
        pieces: list[str] = []
        for part in template:
            if isinstance(part, Literal):
                pieces.append(part.text)
            elif isinstance(part, Expr):
                expr = part.text
                if expr.startswith("."):
                    expr_path = path.resolve_relative(expr)
                else:
                    expr_path = TreePath(expr)
                pieces.append(self._resolve_path(expr_path, depth))
        return "".join(pieces)

    def __repr__(self) -> str:
        return f"Resolver(tree={self.tree!r}, providers={self._providers!r})"