# File: src/commitgen/errors.py
# Purpose: Error taxonomy for commit message generation
from enum import Enum


class ErrorKind(str, Enum):
    """Every way a generation attempt can fail. All kinds are terminal."""

    FEATURE_DISABLED = "feature_disabled"
    COMMAND_NOT_CONFIGURED = "command_not_configured"
    TIMEOUT = "timeout"
    EXECUTION_FAILED = "execution_failed"
    COMMAND_FAILED = "command_failed"
    EMPTY_RESPONSE = "empty_response"
    OVERSIZED_RESPONSE = "oversized_response"
    INVALID_ENCODING = "invalid_encoding"
    UPSTREAM_REPORTED_ERROR = "upstream_reported_error"


_DIAGNOSTICS = {
    ErrorKind.FEATURE_DISABLED: "LLM commit generation is disabled in config",
    ErrorKind.COMMAND_NOT_CONFIGURED: "LLM command is not configured",
    ErrorKind.TIMEOUT: "LLM {detail}",
    ErrorKind.EXECUTION_FAILED: "failed to execute LLM command: {detail}",
    ErrorKind.COMMAND_FAILED: "LLM command failed: {detail}",
    ErrorKind.EMPTY_RESPONSE: "empty response from LLM command",
    ErrorKind.OVERSIZED_RESPONSE: "generated message unreasonably large ({detail} bytes) - possible script error",
    ErrorKind.INVALID_ENCODING: "generated message contains invalid UTF-8 characters",
    ErrorKind.UPSTREAM_REPORTED_ERROR: "{detail}",
}


class ClassifiedError(Exception):
    """
    A failed generation attempt.

    Attributes:
        kind: Which check or process outcome failed
        detail: Captured stderr, upstream error text, byte count or
            system error text; empty when the kind says it all
    """

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(_DIAGNOSTICS[kind].format(detail=detail))

    def __repr__(self) -> str:
        return f"ClassifiedError(kind={self.kind.value!r}, detail={self.detail!r})"


def get_status_code(kind: ErrorKind) -> int:
    """Map an error kind to the HTTP status returned by the API"""
    status_codes = {
        ErrorKind.FEATURE_DISABLED: 403,
        ErrorKind.COMMAND_NOT_CONFIGURED: 409,
        ErrorKind.TIMEOUT: 504,
    }
    return status_codes.get(kind, 502)


def get_exit_code(kind: ErrorKind) -> int:
    """Map an error kind to the CLI process exit code"""
    exit_codes = {
        ErrorKind.FEATURE_DISABLED: 2,
        ErrorKind.COMMAND_NOT_CONFIGURED: 2,
        ErrorKind.TIMEOUT: 124,
    }
    return exit_codes.get(kind, 1)
