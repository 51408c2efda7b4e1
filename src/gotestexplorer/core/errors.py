"""gotest-explorer error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Test
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Test (7xxx)
    TEST_UNSUPPORTED_OPERATION = 7001
    TEST_GRAMMAR_UNAVAILABLE = 7002


@dataclass(frozen=True, slots=True)
class GoTestExplorerError(Exception):
    """Base error with structured context for host responses."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(GoTestExplorerError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class UnsupportedOperationError(GoTestExplorerError):
    """Adapter entry points that exist on the contract but are not implemented."""

    @classmethod
    def not_implemented(cls, operation: str) -> "UnsupportedOperationError":
        return cls(
            code=ErrorCode.TEST_UNSUPPORTED_OPERATION,
            message=f"Method not implemented: {operation}",
            details={"operation": operation},
        )


class GrammarUnavailableError(GoTestExplorerError):
    """The tree-sitter grammar for a language could not be loaded."""

    @classmethod
    def for_language(cls, language: str, reason: str) -> "GrammarUnavailableError":
        return cls(
            code=ErrorCode.TEST_GRAMMAR_UNAVAILABLE,
            message=f"Language not available: {language}",
            details={"language": language, "reason": reason},
        )
