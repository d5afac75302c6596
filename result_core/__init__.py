"""Explicit, composable error handling with Success and Failure values."""

from result_core.errors import InvalidVariantAccessError
from result_core.result import (
    Completion,
    Failure,
    Result,
    Success,
    failure,
    success,
    try_catch,
)

__all__ = [
    "Completion",
    "Failure",
    "InvalidVariantAccessError",
    "Result",
    "Success",
    "failure",
    "success",
    "try_catch",
]
