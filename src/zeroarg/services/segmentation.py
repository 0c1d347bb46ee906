"""
Segmentation of a single argument into flag and attribute tokens.

Two body shapes exist:

- a *named body* (after ``--``, after ``+``, or bare when the argument contains
  ``+`` or ``=``): ``+``-joined names, the last of which may be a
  ``name=value`` attribute;
- a *short body* (after a single ``-``): a run of one-character flags, the
  last of which may take a value through a single ``=``.

The helpers here raise classification errors without position information.
"""

from __future__ import annotations

from enum import Enum

from zeroarg.common.exceptions import (
    EmptyBodyError,
    MalformedNamedBodyError,
    MalformedShortBodyError,
)
from zeroarg.domain.tokens import Attribute, Flag

DELIMITERS = frozenset({"-", "--", "+"})

COMPONENT_SEPARATOR = "+"
VALUE_SEPARATOR = "="


class Prefix(str, Enum):
    """Prefix found in front of an argument."""

    LONG = "--"
    PLUS = "+"
    SHORT = "-"
    NONE = ""


def is_delimiter(argument: str) -> bool:
    """Return True for the bare ``-``, ``--`` and ``+`` operand delimiters."""
    return argument in DELIMITERS


def split_prefix(argument: str) -> tuple[Prefix, str]:
    """Split ``argument`` into its prefix and the remaining body."""
    for prefix in (Prefix.LONG, Prefix.PLUS, Prefix.SHORT):
        if argument.startswith(prefix.value):
            return prefix, argument[len(prefix.value) :]
    return Prefix.NONE, argument


def has_named_shape(argument: str) -> bool:
    """Whether an unprefixed argument is a flag/attribute list, not an operand."""
    return COMPONENT_SEPARATOR in argument or VALUE_SEPARATOR in argument


def segment_named_body(body: str) -> list[Flag | Attribute]:
    """Segment a ``+``-joined body such as ``verbose+level=3``.

    Raises:
        EmptyBodyError: If ``body`` is empty.
        MalformedNamedBodyError: On an empty component, an attribute that is
            not the last component, or an attribute without a name.
    """
    if not body:
        raise EmptyBodyError("prefix is not followed by a flag or attribute")

    components = body.split(COMPONENT_SEPARATOR)
    last = len(components) - 1
    tokens: list[Flag | Attribute] = []
    for position, component in enumerate(components):
        if not component:
            raise MalformedNamedBodyError(
                f"empty component at position {position} of {body!r}"
            )
        if VALUE_SEPARATOR not in component:
            tokens.append(Flag(component))
            continue
        if position != last:
            raise MalformedNamedBodyError(
                f"attribute {component!r} must be the last component"
            )
        name, value = component.split(VALUE_SEPARATOR, 1)
        if not name:
            raise MalformedNamedBodyError(f"attribute {component!r} has no name")
        tokens.append(Attribute(name, value))
    return tokens


def segment_short_body(body: str) -> list[Flag | Attribute]:
    """Segment a compound short-flag run such as ``abc`` or ``abc=value``.

    Raises:
        EmptyBodyError: If ``body`` is empty.
        MalformedShortBodyError: If the body contains ``+``, more than one
            ``=``, or an ``=`` with no flag character before it.
    """
    if not body:
        raise EmptyBodyError("'-' is not followed by a short flag")
    if COMPONENT_SEPARATOR in body:
        raise MalformedShortBodyError(
            f"'+' is not allowed in short flags {body!r}"
        )

    separators = body.count(VALUE_SEPARATOR)
    if separators > 1:
        raise MalformedShortBodyError(f"more than one '=' in {body!r}")
    if separators == 0:
        return [Flag(char) for char in body]

    names, value = body.split(VALUE_SEPARATOR, 1)
    if not names:
        raise MalformedShortBodyError(f"no short flag before '=' in {body!r}")
    tokens: list[Flag | Attribute] = [Flag(char) for char in names[:-1]]
    tokens.append(Attribute(names[-1], value))
    return tokens
