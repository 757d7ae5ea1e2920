"""Custom exception hierarchy for the twiml_builder package.

Builders and the serializer never raise.  These exceptions are reserved for
callers of the validator and the configuration loader when a check cannot
run at all; ordinary findings are returned as data.
"""

from __future__ import annotations


class TwiMLError(Exception):
    """Base exception for all twiml_builder errors."""


class TwiMLValidationError(TwiMLError):
    """Raised when a TwiML document fails a structural check."""

    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"TwiML validation failed: {message}")


class MalformedXmlError(TwiMLValidationError):
    """Raised by the tag-balance scanner for input that is not well-formed."""


class MismatchedClosingTagError(MalformedXmlError):
    """A closing tag does not match the innermost open element."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Mismatched closing tag: expected </{expected}>, found </{found}>")


class UnexpectedClosingTagError(MalformedXmlError):
    """A closing tag appears while no element is open."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Unexpected closing tag: </{tag}>")


class UnclosedTagsError(MalformedXmlError):
    """The input ended with elements still open (outermost first)."""

    def __init__(self, tags: list[str]) -> None:
        self.tags = list(tags)
        super().__init__(f"Unclosed tags: {', '.join(self.tags)}")


class InvalidParameterError(TwiMLError):
    """Raised when a caller passes an argument the operation cannot use."""

    def __init__(self, param: str, reason: str) -> None:
        self.param = param
        self.reason = reason
        super().__init__(f"Invalid parameter '{param}': {reason}")


class ConfigError(TwiMLError):
    """Raised when a validator configuration cannot be loaded."""
