"""
Token domain model.

A classified argument is one of three token kinds. They share no behavior,
only membership in the classifier's output, so ``Token`` is a discriminated
union over independent value objects rather than a class hierarchy.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter

from zeroarg.domain.base import ValueObject


class Operand(ValueObject):
    """Positional content, never interpreted as a flag or attribute."""

    kind: Literal["operand"] = Field(default="operand", repr=False)
    text: str

    def __init__(self, text: str, **data: Any) -> None:
        super().__init__(text=text, **data)


class Flag(ValueObject):
    """A named switch without a value."""

    kind: Literal["flag"] = Field(default="flag", repr=False)
    name: str = Field(min_length=1)

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)

    @property
    def is_short(self) -> bool:
        return len(self.name) == 1


class Attribute(ValueObject):
    """A named switch carrying a string value.

    The value may be empty (``--name=``) but is always present.
    """

    kind: Literal["attribute"] = Field(default="attribute", repr=False)
    name: str = Field(min_length=1)
    value: str

    def __init__(self, name: str, value: str, **data: Any) -> None:
        super().__init__(name=name, value=value, **data)

    @property
    def is_short(self) -> bool:
        return len(self.name) == 1


Token = Annotated[Operand | Flag | Attribute, Field(discriminator="kind")]

token_adapter: TypeAdapter[list[Token]] = TypeAdapter(list[Token])


def dump_tokens(tokens: list[Token]) -> list[dict[str, Any]]:
    """Serialize tokens to plain dictionaries tagged with their ``kind``."""
    return token_adapter.dump_python(tokens, mode="json")


def load_tokens(data: list[dict[str, Any]]) -> list[Token]:
    """Rebuild tokens from the output of :func:`dump_tokens`."""
    return token_adapter.validate_python(data)
