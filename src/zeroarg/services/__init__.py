# Services package

from .argument_classifier import (
    ArgumentClassifier,
    classify,
    classify_argv,
    summarize,
)

__all__ = [
    "ArgumentClassifier",
    "classify",
    "classify_argv",
    "summarize",
]
