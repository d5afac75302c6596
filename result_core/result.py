"""
Result pattern for explicit error handling.

A ``Result`` is either a ``Success`` holding a value or a ``Failure`` holding
an error. Both variants expose the same combinators, so calling code can
transform and chain results without branching on the variant by hand.

Example:
    >>> def parse_port(raw: str) -> Result[int, str]:
    ...     if not raw.isdigit():
    ...         return Failure(f"not a number: {raw}")
    ...     return Success(int(raw))
    ...
    >>> parse_port("8080").map(lambda p: p + 1).get_or_else(lambda: 80)
    8081
    >>> parse_port("http").map(lambda p: p + 1).get_or_else(lambda: 80)
    80

Results can also be taken apart with structural pattern matching:
    >>> match parse_port("443"):
    ...     case Success(port):
    ...         print(f"port {port}")
    ...     case Failure(error):
    ...         print(error)
    port 443
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Never

from pydantic import ValidationError

from result_core.config import get_settings
from result_core.errors import InvalidVariantAccessError
from result_core.logging import get_logger

if TYPE_CHECKING:
    from types import TracebackType

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Success[T]:
    """
    Represents a successful result containing a value.

    Attributes:
        value: The success value.
    """

    value: T

    def __str__(self) -> str:
        return f"Success: {self.value}"

    def is_success(self) -> bool:
        """Return True if this is a Success."""
        return True

    def is_failure(self) -> bool:
        """Return False if this is a Success."""
        return False

    def get_or_throw(self) -> T:
        """Return the success value."""
        return self.value

    def get_failure_or_throw(self) -> Never:
        """
        Raise since a Success holds no error.

        Raises:
            InvalidVariantAccessError: Always.
        """
        raise InvalidVariantAccessError("Failure", self.value)

    def get_or_else(self, or_else: Callable[[], T]) -> T:
        """Return the success value without calling ``or_else``."""
        return self.value

    def get_or_none(self) -> T:
        """Return the success value."""
        return self.value

    def get_failure_or_none(self) -> None:
        """Return None, a Success has no error."""
        return None

    def fold[R](
        self,
        *,
        on_success: Callable[[T], R],
        on_failure: Callable[[Never], R],
    ) -> R:
        """
        Reduce to a single value by applying ``on_success``.

        Args:
            on_success: Applied to the success value.
            on_failure: Not called for Success.

        Returns:
            Result of ``on_success``.
        """
        return on_success(self.value)

    def map[U](self, transform: Callable[[T], U]) -> Success[U]:
        """
        Apply a function to the success value.

        Args:
            transform: Function to apply to the value.

        Returns:
            New Success with the mapped value.
        """
        return Success(transform(self.value))

    def map_failure[U](self, transform: Callable[[Never], U]) -> Success[T]:
        """Return self unchanged, there is no error to map."""
        return self

    def flat_map[U, F](self, transform: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """
        Chain an operation that itself returns a Result.

        The Result produced by ``transform`` is returned as is, so chaining
        never nests a Result inside another one.

        Args:
            transform: Function from the success value to a new Result.

        Returns:
            The Result returned by ``transform``.
        """
        return transform(self.value)

    def flat_map_failure[F](
        self, transform: Callable[[Never], Result[T, F]]
    ) -> Success[T]:
        """Return self unchanged, there is no error to recover from."""
        return self

    def handle(self, on_success: Completion[T], on_failure: Completion[Never]) -> None:
        """Call ``on_success`` with the value."""
        on_success(self.value)


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """
    Represents a failed result containing an error.

    Attributes:
        error: The error value.
    """

    error: E

    def __str__(self) -> str:
        return f"Failure: {self.error}"

    def is_success(self) -> bool:
        """Return False if this is a Failure."""
        return False

    def is_failure(self) -> bool:
        """Return True if this is a Failure."""
        return True

    def get_or_throw(self) -> Never:
        """
        Raise since a Failure holds no success value.

        Raises:
            InvalidVariantAccessError: Always.
        """
        raise InvalidVariantAccessError("Success", self.error)

    def get_failure_or_throw(self) -> E:
        """Return the error value."""
        return self.error

    def get_or_else[T](self, or_else: Callable[[], T]) -> T:
        """
        Return the fallback computed by ``or_else``.

        Args:
            or_else: Zero-argument function producing the fallback value.

        Returns:
            The value returned by ``or_else``.
        """
        return or_else()

    def get_or_none(self) -> None:
        """Return None, a Failure has no success value."""
        return None

    def get_failure_or_none(self) -> E:
        """Return the error value."""
        return self.error

    def fold[R](
        self,
        *,
        on_success: Callable[[Never], R],
        on_failure: Callable[[E], R],
    ) -> R:
        """
        Reduce to a single value by applying ``on_failure``.

        Args:
            on_success: Not called for Failure.
            on_failure: Applied to the error value.

        Returns:
            Result of ``on_failure``.
        """
        return on_failure(self.error)

    def map[U](self, transform: Callable[[Never], U]) -> Failure[E]:
        """Return self unchanged, the error passes through."""
        return self

    def map_failure[U](self, transform: Callable[[E], U]) -> Failure[U]:
        """
        Apply a function to the error value.

        Args:
            transform: Function to apply to the error.

        Returns:
            New Failure with the mapped error.
        """
        return Failure(transform(self.error))

    def flat_map[U](self, transform: Callable[[Never], Result[U, E]]) -> Failure[E]:
        """Return self unchanged, ``transform`` is never called."""
        return self

    def flat_map_failure[T, F](
        self, transform: Callable[[E], Result[T, F]]
    ) -> Result[T, F]:
        """
        Chain a recovery step that itself returns a Result.

        Args:
            transform: Function from the error to a new Result.

        Returns:
            The Result returned by ``transform``.
        """
        return transform(self.error)

    def handle(self, on_success: Completion[Never], on_failure: Completion[E]) -> None:
        """Call ``on_failure`` with the error."""
        on_failure(self.error)


# Type alias for Result
type Result[T, E] = Success[T] | Failure[E]

# Callback passed to Result.handle
type Completion[T] = Callable[[T], None]


def success[T](value: T) -> Success[T]:
    """
    Create a Success result.

    Args:
        value: The success value.

    Returns:
        A Success containing the value.
    """
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """
    Create a Failure result.

    Args:
        error: The error value.

    Returns:
        A Failure containing the error.
    """
    return Failure(error)


def try_catch[T, E](
    run: Callable[[], T],
    on_error: Callable[[Exception, TracebackType | None], E],
) -> Result[T, E]:
    """
    Run ``run`` and capture any exception it raises as a Failure.

    If ``run`` returns normally its value is wrapped in Success. If it raises,
    ``on_error`` receives the exception and its traceback and its return
    value is wrapped in Failure. ``on_error`` must not raise itself.

    Only ``Exception`` subclasses are captured; ``KeyboardInterrupt`` and
    ``SystemExit`` propagate.

    Args:
        run: Zero-argument computation.
        on_error: Converts the raised exception into an error value.

    Returns:
        Success with the computed value, or Failure with the converted error.
    """
    try:
        value = run()
    except Exception as exc:
        result = Failure(on_error(exc, exc.__traceback__))
        if _log_captured_errors():
            # Only the type name: str(exc) may itself raise.
            logger.debug("result_captured_exception", error_type=type(exc).__name__)
        return result
    return Success(value)


def _log_captured_errors() -> bool:
    """Return the log_captured_errors flag, False when settings fail to load."""
    try:
        return get_settings().log_captured_errors
    except ValidationError:
        return False
