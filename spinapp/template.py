"""Simple string templates with ``{{ expr }}`` expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .keys import InvalidTemplateError


@dataclass(frozen=True)
class Literal:
    """Literal text within a template."""

    text: str


@dataclass(frozen=True)
class Expr:
    """An expression within double curly braces."""

    text: str


Part = Literal | Expr


class Template:
    """A template made of literal text and ``{{ expr }}`` expressions."""

    __slots__ = ("_parts",)

    def __init__(self, text: str) -> None:
        self._parts: tuple[Part, ...] = tuple(self._parse(text))

    @staticmethod
    def _parse(remainder: str) -> Iterator[Part]:
        while remainder:
            if remainder.startswith("{{"):
                rest = remainder[2:]
                end = rest.find("}}")
                if end < 0:
                    raise InvalidTemplateError("unmatched '{{' in template")
                yield Expr(rest[:end].strip())
                remainder = rest[end + 2 :]
            else:
                start = remainder.find("{{")
                if start < 0:
                    yield Literal(remainder)
                    remainder = ""
                else:
                    yield Literal(remainder[:start])
                    remainder = remainder[start:]

    def __iter__(self) -> Iterator[Part]:
        return iter(self._parts)

    def __str__(self) -> str:
        return "".join(
            part.text if isinstance(part, Literal) else f"{{{{ {part.text} }}}}"
            for part in self._parts
        )

    def __repr__(self) -> str:
        return f"Template({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Template):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self) -> int:
        return hash(self._parts)