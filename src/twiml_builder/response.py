"""Common base for the voice, messaging and fax documents."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, TypeVar

from .elements import Element
from .serializer import serialize
from .validator import TwiMLValidator, ValidationIssue

_R = TypeVar("_R", bound="TwiMLResponse")


@dataclass(frozen=True)
class TwiMLResponse:
    """An append-only TwiML ``<Response>`` document.

    Every builder method returns a new document; the receiver is never
    modified, so chains read naturally::

        doc = VoiceResponse().say("Hello").hangup()
    """

    verbs: tuple[Element, ...] = ()
    comments_before: tuple[str, ...] = ()
    comments: tuple[str, ...] = ()
    comments_after: tuple[str, ...] = ()

    # Indented layout (voice) versus compact layout (messaging, fax).
    PRETTY: ClassVar[bool] = False

    def append(self: _R, verb: Element) -> _R:
        """Append any pre-built verb, including containers with nested nouns."""
        return replace(self, verbs=self.verbs + (verb,))

    def comment(self: _R, text: str) -> _R:
        """Add a comment inside ``<Response>``, before the verbs."""
        return replace(self, comments=self.comments + (text,))

    def comment_before(self: _R, text: str) -> _R:
        return replace(self, comments_before=self.comments_before + (text,))

    def comment_after(self: _R, text: str) -> _R:
        return replace(self, comments_after=self.comments_after + (text,))

    def to_xml(self) -> str:
        return serialize(self)

    def __str__(self) -> str:
        return self.to_xml()

    def validate(self) -> list[ValidationIssue]:
        return TwiMLValidator().validate(self.to_xml())

    def validate_strict(self) -> list[ValidationIssue]:
        return TwiMLValidator.strict_validator().validate(self.to_xml())
