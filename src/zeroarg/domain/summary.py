from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from zeroarg.domain.base import ValueObject
from zeroarg.domain.tokens import Attribute, Flag, Operand, Token


class ArgumentSummary(ValueObject):
    """Lookup view over a classified token sequence."""

    operands: tuple[str, ...] = ()
    flags: tuple[str, ...] = ()
    attribute_items: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token]) -> ArgumentSummary:
        operands: list[str] = []
        flags: list[str] = []
        attributes: dict[str, str] = {}
        for token in tokens:
            if isinstance(token, Operand):
                operands.append(token.text)
            elif isinstance(token, Flag):
                flags.append(token.name)
            elif isinstance(token, Attribute):
                # Last occurrence wins
                attributes[token.name] = token.value
        return cls(
            operands=tuple(operands),
            flags=tuple(flags),
            attribute_items=tuple(attributes.items()),
        )

    @property
    def attributes(self) -> Mapping[str, str]:
        """Read-only mapping of attribute names to values."""
        return MappingProxyType(dict(self.attribute_items))

    def has_flag(self, name: str) -> bool:
        return name in self.flags

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)
