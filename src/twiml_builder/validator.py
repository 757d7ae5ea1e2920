"""TwiML validator -- structural and content checks over serialized XML.

The validator works on the flat XML string, never on a document tree, so it
accepts TwiML from any source, including malformed input.  It does not use
an XML parser.

  Check                                           Mode      Kind
  ─────────────────────────────────────────────   ───────   ───────────────
  XML declaration, <Response> root, < / > count   always    MALFORMED_XML
  Tag balance (streaming tag-stack scan)          always    MALFORMED_XML
  URL attributes start with http://, https://, /  strict    INVALID_URL
  <Number> content starts with +, client:, sip:   strict    INVALID_PHONE_NUMBER
  Plain-text <Say> content <= 4096 characters     always    CONTENT_TOO_LONG
  <Body> content <= 1600 characters               always    CONTENT_TOO_LONG

A structural failure is reported as a single ``MALFORMED_XML`` issue and
the content checks are skipped for that call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator

from .config import ValidatorConfig
from .exceptions import (
    InvalidParameterError,
    MalformedXmlError,
    MismatchedClosingTagError,
    UnclosedTagsError,
    UnexpectedClosingTagError,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


class ValidationErrorType(Enum):
    """Closed set of diagnostic kinds.

    Only MALFORMED_XML, INVALID_URL, INVALID_PHONE_NUMBER and
    CONTENT_TOO_LONG are produced by the current rules; the remaining kinds
    are reserved.
    """

    MALFORMED_XML = "Malformed XML"
    MISSING_REQUIRED_ATTRIBUTE = "Missing Required Attribute"
    INVALID_ATTRIBUTE_VALUE = "Invalid Attribute Value"
    INVALID_NESTING = "Invalid Nesting"
    CONTENT_TOO_LONG = "Content Too Long"
    INVALID_URL = "Invalid URL"
    INVALID_PHONE_NUMBER = "Invalid Phone Number"
    EMPTY_REQUIRED_FIELD = "Empty Required Field"
    INVALID_ENUM_VALUE = "Invalid Enum Value"
    UNSUPPORTED_COMBINATION = "Unsupported Combination"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation finding."""

    kind: ValidationErrorType
    message: str
    context: str | None = None

    def __str__(self) -> str:
        if self.context is not None:
            return f"[{self.context}] {self.kind.label}: {self.message}"
        return f"{self.kind.label}: {self.message}"


# ---------------------------------------------------------------------------
# Tag-balance scanner
# ---------------------------------------------------------------------------


class _TagScanner:
    """Single-pass state machine that checks open/close tag balance.

    A ``/`` directly after ``<`` marks a closing tag.  A later ``/`` marks
    the tag self-closing until any character other than a space follows it,
    so ``<Hangup />`` is self-closing while the ``//`` of an ``https://``
    value is not.
    """

    def __init__(self) -> None:
        self.stack: list[str] = []
        self.in_tag = False
        self.tag_name = ""
        self.is_closing = False
        self.is_self_closing = False
        self.in_attributes = False

    def _start_tag(self) -> None:
        self.in_tag = True
        self.tag_name = ""
        self.is_closing = False
        self.is_self_closing = False
        self.in_attributes = False

    def _end_tag(self) -> None:
        self.in_tag = False

        # Declarations, processing instructions and comments.
        if self.tag_name.startswith(("?", "!")):
            return
        if self.is_self_closing:
            return

        words = self.tag_name.split()
        tag = words[0] if words else ""

        if self.is_closing:
            if not self.stack:
                raise UnexpectedClosingTagError(tag)
            last = self.stack.pop()
            if last != tag:
                raise MismatchedClosingTagError(last, tag)
        elif tag:
            self.stack.append(tag)

    def _tag_char(self, ch: str) -> None:
        if ch == "/":
            if not self.tag_name:
                self.is_closing = True
            else:
                self.is_self_closing = True
        elif self.is_self_closing and ch != " ":
            self.is_self_closing = False
        elif ch == " " and not self.in_attributes:
            self.in_attributes = True
        elif not self.in_attributes and not self.is_self_closing:
            self.tag_name += ch

    def scan(self, xml: str) -> None:
        for ch in xml:
            if ch == "<":
                self._start_tag()
            elif ch == ">" and self.in_tag:
                self._end_tag()
            elif self.in_tag:
                self._tag_char(ch)

        if self.stack:
            raise UnclosedTagsError(self.stack)


# ---------------------------------------------------------------------------
# Content scans
# ---------------------------------------------------------------------------


def _element_contents(xml: str, tag: str) -> Iterator[tuple[int, str]]:
    """Yield ``(occurrence, content)`` for each ``<tag ...>content</tag>`` span.

    The open tag may carry attributes.  Occurrences are numbered from 1 and
    count every open tag, including self-closing ones and ones with no
    matching close tag, which yield nothing.
    """
    open_prefix = f"<{tag}"
    close_tag = f"</{tag}>"
    occurrence = 0
    pos = 0
    while True:
        start = xml.find(open_prefix, pos)
        if start == -1:
            return
        after = start + len(open_prefix)
        if after >= len(xml):
            return
        if xml[after] != ">" and not xml[after].isspace():
            pos = after
            continue
        gt = xml.find(">", after)
        if gt == -1:
            return
        occurrence += 1
        pos = gt + 1
        if xml[gt - 1] == "/":
            continue
        end = xml.find(close_tag, pos)
        if end == -1:
            continue
        yield occurrence, xml[pos:end]


def _attribute_values(xml: str, name: str) -> Iterator[str]:
    """Yield the quoted value of every ``name="..."`` occurrence.

    The attribute name must be preceded by whitespace so ``url=`` does not
    match inside ``waitUrl=``.  The value runs between the first two ``"``
    characters after the ``=``.
    """
    needle = f"{name}="
    pos = 0
    while True:
        start = xml.find(needle, pos)
        if start == -1:
            return
        pos = start + len(needle)
        if start == 0 or not xml[start - 1].isspace():
            continue
        quote_start = xml.find('"', pos)
        if quote_start == -1:
            return
        quote_end = xml.find('"', quote_start + 1)
        if quote_end == -1:
            return
        yield xml[quote_start + 1 : quote_end]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class TwiMLValidator:
    """Validate serialized TwiML.

    Usage::

        validator = TwiMLValidator()
        issues = validator.validate(xml_string)
        for issue in issues:
            print(issue)

    Strict mode adds the URL and phone-number checks::

        issues = TwiMLValidator.strict_validator().validate(xml_string)
    """

    def __init__(self, strict: bool = False, config: ValidatorConfig | None = None) -> None:
        self.strict = strict
        self.config = config if config is not None else ValidatorConfig()

    @classmethod
    def strict_validator(cls, config: ValidatorConfig | None = None) -> TwiMLValidator:
        return cls(strict=True, config=config)

    def with_strict(self, strict: bool) -> TwiMLValidator:
        """Return a validator with the same config and the given mode."""
        return type(self)(strict=strict, config=self.config)

    def validate_xml(self, xml: str) -> None:
        """Check that ``xml`` is structurally well-formed.

        Raises
        ------
        MalformedXmlError
            On a missing declaration or root element, an unequal number of
            ``<`` and ``>``, or unbalanced tags (one of the
            :class:`MismatchedClosingTagError`,
            :class:`UnexpectedClosingTagError` or :class:`UnclosedTagsError`
            subclasses).
        """
        if "<?xml" not in xml:
            raise MalformedXmlError("XML declaration missing")
        if "<Response>" not in xml or "</Response>" not in xml:
            raise MalformedXmlError("Response element missing or malformed")
        if xml.count("<") != xml.count(">"):
            raise MalformedXmlError("Unbalanced XML tags")

        _TagScanner().scan(xml)

    def validate(self, xml: str) -> list[ValidationIssue]:
        """Validate ``xml`` and return every finding, in check order."""
        if not isinstance(xml, str):
            raise InvalidParameterError("xml", f"expected str, got {type(xml).__name__}")

        try:
            self.validate_xml(xml)
        except MalformedXmlError as exc:
            logger.debug("Structural check failed, skipping content checks: %s", exc)
            return [ValidationIssue(ValidationErrorType.MALFORMED_XML, str(exc))]

        issues: list[ValidationIssue] = []
        if self.strict:
            issues.extend(self._check_urls(xml))
            issues.extend(self._check_phone_numbers(xml))
        issues.extend(self._check_content_lengths(xml))

        logger.debug("Validation finished with %d issue(s) (strict=%s)", len(issues), self.strict)
        return issues

    def validate_file(self, path: str | Path) -> list[ValidationIssue]:
        """Read a UTF-8 TwiML file and validate its contents."""
        text = Path(path).read_text(encoding="utf-8")
        return self.validate(text)

    # -- content rules ------------------------------------------------------

    def _check_urls(self, xml: str) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        prefixes = self.config.url_prefixes
        for attr in self.config.url_attributes:
            for url in _attribute_values(xml, attr):
                if url and not url.startswith(prefixes):
                    issues.append(
                        ValidationIssue(
                            ValidationErrorType.INVALID_URL,
                            f"URL should start with http://, https://, or /: {url}",
                            context=attr,
                        )
                    )
        return issues

    def _check_phone_numbers(self, xml: str) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        prefixes = self.config.phone_prefixes
        for i, number in _element_contents(xml, "Number"):
            if number and not number.startswith(prefixes):
                issues.append(
                    ValidationIssue(
                        ValidationErrorType.INVALID_PHONE_NUMBER,
                        f"Phone number should start with + or be a client/sip identifier: {number}",
                        context=f"Number element #{i}",
                    )
                )
        return issues

    def _check_content_lengths(self, xml: str) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []

        say_max = self.config.say_max_length
        for i, content in _element_contents(xml, "Say"):
            # SSML content is not measured.
            if len(content) > say_max and "<" not in content:
                issues.append(
                    ValidationIssue(
                        ValidationErrorType.CONTENT_TOO_LONG,
                        f"Say content exceeds {say_max} characters: {len(content)} characters",
                        context=f"Say element #{i}",
                    )
                )

        body_max = self.config.body_max_length
        for i, content in _element_contents(xml, "Body"):
            if len(content) > body_max:
                issues.append(
                    ValidationIssue(
                        ValidationErrorType.CONTENT_TOO_LONG,
                        f"Message body exceeds {body_max} characters: {len(content)} characters",
                        context=f"Body element #{i}",
                    )
                )

        return issues


def validate_twiml(xml: str) -> list[ValidationIssue]:
    """Validate ``xml`` with the default (non-strict) rules."""
    return TwiMLValidator().validate(xml)


def validate_twiml_strict(xml: str) -> list[ValidationIssue]:
    """Validate ``xml`` with the URL and phone-number checks enabled."""
    return TwiMLValidator.strict_validator().validate(xml)
