"""
Tests for the zeroarg exception hierarchy.
"""

import pytest
from zeroarg.common.exceptions import (
    ClassificationError,
    ConfigurationError,
    EmptyBodyError,
    MalformedNamedBodyError,
    MalformedShortBodyError,
    ZeroArgError,
)


@pytest.mark.parametrize(
    "error_type, kind",
    [
        (MalformedNamedBodyError, "MalformedNamedBody"),
        (MalformedShortBodyError, "MalformedShortBody"),
        (EmptyBodyError, "EmptyBody"),
    ],
)
def test_classification_error_kinds(error_type, kind: str) -> None:
    error = error_type("bad input")

    assert isinstance(error, ClassificationError)
    assert isinstance(error, ZeroArgError)
    assert error.kind == kind
    assert str(error) == f"{kind}: bad input"


def test_locate_attaches_position() -> None:
    error = MalformedShortBodyError("'+' is not allowed")

    located = error.locate(3, "-a+b")

    assert located is error
    assert error.index == 3
    assert error.argument == "-a+b"
    assert str(error) == (
        "MalformedShortBody in argument 3 ('-a+b'): '+' is not allowed"
    )
    assert error.details == {
        "kind": "MalformedShortBody",
        "reason": "'+' is not allowed",
        "index": 3,
        "argument": "-a+b",
    }


def test_position_can_be_given_up_front() -> None:
    error = EmptyBodyError("nothing after prefix", index=0, argument="--")

    assert error.message.startswith("EmptyBody in argument 0")


def test_to_dict() -> None:
    error = MalformedNamedBodyError("empty component", index=1, argument="a++b")

    result = error.to_dict()

    assert result["error"]["type"] == "MalformedNamedBodyError"
    assert result["error"]["details"]["index"] == 1
    assert "empty component" in result["error"]["message"]


def test_configuration_error_defaults() -> None:
    error = ConfigurationError()

    assert error.message == "Configuration error"
    assert error.details == {}
