from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from zeroarg.common.exceptions import ClassificationError
from zeroarg.common.logging import get_logger
from zeroarg.domain.summary import ArgumentSummary
from zeroarg.domain.tokens import Operand, Token
from zeroarg.interfaces.argument_classifier_interface import IArgumentClassifier
from zeroarg.services.segmentation import (
    Prefix,
    has_named_shape,
    is_delimiter,
    segment_named_body,
    segment_short_body,
    split_prefix,
)

logger = get_logger(__name__)


class ArgumentClassifier(IArgumentClassifier):
    """Classify raw arguments into operands, flags and attributes by syntax.

    - ``--name``, ``+name`` and bare ``a+b`` / ``name=value`` are named bodies
    - ``-abc`` and ``-abc=value`` are compound short flags
    - a bare ``-``, ``--`` or ``+`` is dropped and turns every later argument
      into a verbatim operand
    - anything else is an operand
    """

    def classify(self, args: Iterable[str]) -> list[Token]:
        tokens: list[Token] = []
        delimiter_seen = False
        delimiter_index: int | None = None
        count = 0

        for index, argument in enumerate(args):
            count += 1
            if delimiter_seen:
                tokens.append(Operand(argument))
                continue
            if is_delimiter(argument):
                delimiter_seen = True
                delimiter_index = index
                continue
            try:
                tokens.extend(self._classify_argument(argument))
            except ClassificationError as exc:
                logger.debug(
                    "Argument classification failed",
                    index=index,
                    kind=exc.kind,
                    reason=exc.reason,
                )
                raise exc.locate(index, argument)

        logger.debug(
            "Classified arguments",
            arguments=count,
            tokens=len(tokens),
            delimiter_index=delimiter_index,
        )
        return tokens

    def _classify_argument(self, argument: str) -> list[Token]:
        prefix, body = split_prefix(argument)
        if prefix is Prefix.SHORT:
            return list(segment_short_body(body))
        if prefix is Prefix.NONE and not has_named_shape(argument):
            return [Operand(argument)]
        return list(segment_named_body(body))


_default_classifier = ArgumentClassifier()


def classify(args: Iterable[str]) -> list[Token]:
    """Classify ``args`` with the default classifier.

    Raises:
        ClassificationError: On the first argument that violates the syntax.
    """
    return _default_classifier.classify(args)


def classify_argv(
    argv: Sequence[str] | None = None, *, skip_program: bool = True
) -> list[Token]:
    """Classify process arguments, ``sys.argv`` by default.

    The first element is the program name and is skipped unless
    ``skip_program`` is False.
    """
    if argv is None:
        argv = sys.argv
    if skip_program:
        argv = argv[1:]
    return classify(argv)


def summarize(args: Iterable[str]) -> ArgumentSummary:
    """Classify ``args`` and return a lookup view over the tokens."""
    return ArgumentSummary.from_tokens(classify(args))
