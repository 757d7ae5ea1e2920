"""SSML elements nested inside a ``<Say>`` verb.

These are written inline, directly after the Say message text, in the
order they were added.  The ``amazon:`` prefixed elements and the
``xml:lang`` attribute rely on the platform's fixed namespace table; no
``xmlns`` declaration is emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from .elements import Element, WireAttributes
from .enums import (
    SsmlBreakStrength,
    SsmlEmphasisLevel,
    SsmlPhonemeAlphabet,
    SsmlSayAsFormat,
    SsmlSayAsInterpretAs,
)


class SsmlElement(Element):
    """Base for inline SSML elements."""

    INLINE: ClassVar[bool] = True


@dataclass(frozen=True)
class Break(SsmlElement):
    """``<break>`` -- a pause in speech.  Always self-closing."""

    strength: SsmlBreakStrength | None = None
    time: str | None = None  # e.g. "500ms", "2s"

    TAG: ClassVar[str] = "break"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("strength", "strength"), ("time", "time"))


@dataclass(frozen=True)
class Emphasis(SsmlElement):
    text: str
    level: SsmlEmphasisLevel | None = None

    TAG: ClassVar[str] = "emphasis"
    TEXT_FIELD: ClassVar[str | None] = "text"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("level", "level"),)


@dataclass(frozen=True)
class Prosody(SsmlElement):
    """``<prosody>`` -- pitch, rate and volume control for a span of text."""

    text: str
    pitch: str | None = None
    rate: str | None = None
    volume: str | None = None

    TAG: ClassVar[str] = "prosody"
    TEXT_FIELD: ClassVar[str | None] = "text"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("pitch", "pitch"),
        ("rate", "rate"),
        ("volume", "volume"),
    )


@dataclass(frozen=True)
class SayAs(SsmlElement):
    text: str
    interpret_as: SsmlSayAsInterpretAs | None = None
    format: SsmlSayAsFormat | None = None

    TAG: ClassVar[str] = "say-as"
    TEXT_FIELD: ClassVar[str | None] = "text"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("interpret_as", "interpret-as"),
        ("format", "format"),
    )


@dataclass(frozen=True)
class Sub(SsmlElement):
    """``<sub>`` -- speak ``alias`` in place of the written text."""

    text: str
    alias: str | None = None

    TAG: ClassVar[str] = "sub"
    TEXT_FIELD: ClassVar[str | None] = "text"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("alias", "alias"),)


@dataclass(frozen=True)
class P(SsmlElement):
    text: str

    TAG: ClassVar[str] = "p"
    TEXT_FIELD: ClassVar[str | None] = "text"


@dataclass(frozen=True)
class S(SsmlElement):
    text: str

    TAG: ClassVar[str] = "s"
    TEXT_FIELD: ClassVar[str | None] = "text"


@dataclass(frozen=True)
class Lang(SsmlElement):
    text: str
    xml_lang: str | None = None

    TAG: ClassVar[str] = "lang"
    TEXT_FIELD: ClassVar[str | None] = "text"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("xml_lang", "xml:lang"),)


@dataclass(frozen=True)
class Phoneme(SsmlElement):
    """``<phoneme>`` -- explicit pronunciation in the given alphabet."""

    text: str
    ph: str | None = None
    alphabet: SsmlPhonemeAlphabet | None = None

    TAG: ClassVar[str] = "phoneme"
    TEXT_FIELD: ClassVar[str | None] = "text"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("alphabet", "alphabet"), ("ph", "ph"))


@dataclass(frozen=True)
class W(SsmlElement):
    text: str
    role: str | None = None

    TAG: ClassVar[str] = "w"
    TEXT_FIELD: ClassVar[str | None] = "text"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("role", "role"),)


@dataclass(frozen=True)
class AmazonEffect(SsmlElement):
    text: str
    name: str | None = None  # e.g. "whispered"

    TAG: ClassVar[str] = "amazon:effect"
    TEXT_FIELD: ClassVar[str | None] = "text"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("name", "name"),)


@dataclass(frozen=True)
class AmazonDomain(SsmlElement):
    text: str
    name: str | None = None  # e.g. "news", "conversational"

    TAG: ClassVar[str] = "amazon:domain"
    TEXT_FIELD: ClassVar[str | None] = "text"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("name", "name"),)


SsmlNode = Union[
    Break, Emphasis, Prosody, SayAs, Sub, P, S, Lang, Phoneme, W, AmazonEffect, AmazonDomain
]
