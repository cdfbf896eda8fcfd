"""Exceptions raised by typed-path conversions.

Classification itself never raises; only narrowing and host-path
conversions can fail, and each failure carries the value that failed so the
caller can inspect it or retry.
"""

from typing import Any


class TypedPathError(Exception):
    """Base class for every error raised by this package."""


class VariantMismatchError(TypedPathError):
    """A typed value was narrowed to a variant that is not active.

    ``path`` is the original value, untouched; ``expected`` is the
    ``PathType`` that was asked for.
    """

    def __init__(self, path: Any, expected: Any):
        self.path = path
        self.expected = expected
        super().__init__(
            f"expected a {expected.value} path, got {path!r}"
        )


class NativeConversionError(TypedPathError):
    """An engine path could not be converted to or from the host path type."""

    def __init__(self, path: Any, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot convert {path!r}: {reason}")


class InvalidUtf8Error(TypedPathError, ValueError):
    """Bytes given to a UTF-8 path type are not valid UTF-8."""

    def __init__(self, data: bytes, reason: str):
        self.data = data
        self.reason = reason
        super().__init__(f"invalid UTF-8 in path {data!r}: {reason}")
