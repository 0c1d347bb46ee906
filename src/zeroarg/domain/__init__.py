from zeroarg.domain.summary import ArgumentSummary
from zeroarg.domain.tokens import (
    Attribute,
    Flag,
    Operand,
    Token,
    dump_tokens,
    load_tokens,
)

__all__ = [
    "ArgumentSummary",
    "Attribute",
    "Flag",
    "Operand",
    "Token",
    "dump_tokens",
    "load_tokens",
]
