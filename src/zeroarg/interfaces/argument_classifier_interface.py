from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from zeroarg.domain.tokens import Token


class IArgumentClassifier(Protocol):
    """Classifies raw command-line arguments into tokens.

    Implementations should be pure and side-effect free.
    """

    def classify(self, args: Iterable[str]) -> list[Token]:
        """Classify arguments into operands, flags and attributes.

        Args:
            args: Raw arguments in invocation order

        Returns:
            Tokens in the same order as the arguments they came from.

        Raises:
            ClassificationError: If an argument violates the flag syntax.
        """
        ...
