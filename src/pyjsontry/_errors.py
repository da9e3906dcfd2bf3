"""Exception hierarchy for JSON parse and conversion failures."""

import enum


class ErrorKind(enum.StrEnum):
    """Which step of a try-operation failed."""

    PARSE = "parse"
    CONVERSION = "conversion"


class JsonTryError(Exception):
    """Base exception for JSON parse and conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for diagnostics.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class JsonParseError(JsonTryError):
    """Raised when text is not a valid JSON document."""


class MaxDepthExceededError(JsonTryError):
    """Raised when nesting depth exceeds the configured limit."""


class SerializationError(JsonTryError):
    """Raised when a value cannot be written as JSON text."""


class DeclaredTypeMismatchError(SerializationError):
    """Raised when a value does not conform to its declared type."""


class UnsupportedTypeError(JsonTryError):
    """Raised when a type has no JSON representation."""


class MaterializationError(JsonTryError):
    """Raised when a document tree cannot be turned into the requested type."""


class ConverterError(JsonTryError):
    """Raised when a pluggable converter fails."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_JSON = "invalid JSON text"
ERR_MSG_DEPTH_EXCEEDED = "maximum nesting depth exceeded"
ERR_MSG_TYPE_MISMATCH = "value does not match declared type"
ERR_MSG_UNSUPPORTED_TYPE = "unsupported type"
ERR_MSG_CANNOT_MATERIALIZE = "cannot convert JSON value to requested type"
ERR_MSG_CONVERTER_FAILED = "converter failed"
ERR_MSG_CANNOT_SERIALIZE = "cannot write value as JSON"
