"""Exceptions raised by the Result API on programmer misuse."""

from __future__ import annotations


class InvalidVariantAccessError(ValueError):
    """
    Raised when an unchecked accessor is called on the wrong variant.

    This signals a programming error, not a domain failure. Domain failures
    are always returned as ``Failure`` values.

    Attributes:
        expected: Name of the variant the accessor requires.
        payload: The value actually held by the result.
    """

    def __init__(self, expected: str, payload: object) -> None:
        self.expected = expected
        self.payload = payload
        predicate = "is_success()" if expected == "Success" else "is_failure()"
        super().__init__(
            f"Cannot access {expected} payload: result holds {payload!r}. "
            f"Check {predicate} before calling an unchecked accessor."
        )
