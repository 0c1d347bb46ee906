"""Schema-free classification of command-line arguments.

Parse arguments with :func:`classify`::

    >>> classify(["--flag1+flag2", "build"])
    [Flag(name='flag1'), Flag(name='flag2'), Operand(text='build')]
"""

from zeroarg.common.exceptions import (
    ClassificationError,
    ConfigurationError,
    EmptyBodyError,
    MalformedNamedBodyError,
    MalformedShortBodyError,
    ZeroArgError,
)
from zeroarg.domain.summary import ArgumentSummary
from zeroarg.domain.tokens import (
    Attribute,
    Flag,
    Operand,
    Token,
    dump_tokens,
    load_tokens,
)
from zeroarg.services.argument_classifier import (
    ArgumentClassifier,
    classify,
    classify_argv,
    summarize,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentClassifier",
    "ArgumentSummary",
    "Attribute",
    "ClassificationError",
    "ConfigurationError",
    "EmptyBodyError",
    "Flag",
    "MalformedNamedBodyError",
    "MalformedShortBodyError",
    "Operand",
    "Token",
    "ZeroArgError",
    "classify",
    "classify_argv",
    "dump_tokens",
    "load_tokens",
    "summarize",
]
