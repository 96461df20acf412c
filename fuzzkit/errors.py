"""Error hierarchy for fuzzkit."""

from typing import Any, Optional


class FuzzkitError(Exception):
    """Base error for all fuzzkit errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(FuzzkitError, ValueError):
    """Raised when an argument violates a precondition."""

    def __init__(self, name: str, message: str, **details: Any) -> None:
        super().__init__(message, details={"argument": name, **details})
        self.name = name


class ParseError(FuzzkitError, ValueError):
    """Raised when a string does not match the pattern it is parsed with."""

    def __init__(self, pattern: str, text: str) -> None:
        super().__init__(
            f'The pattern "{pattern}" does not match the string "{text}"',
            details={"pattern": pattern, "text": text},
        )
        self.pattern = pattern
        self.text = text
