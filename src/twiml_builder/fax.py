"""Fax TwiML -- the ``<Receive>`` verb."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .elements import AttributeRecord, Element, WireAttributes
from .enums import HttpMethod, ReceiveMediaType, ReceivePageSize
from .response import TwiMLResponse


@dataclass(frozen=True)
class ReceiveAttributes(AttributeRecord):
    action: str | None = None
    media_type: ReceiveMediaType | None = None
    method: HttpMethod | None = None
    page_size: ReceivePageSize | None = None
    store_media: bool | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("action", "action"),
        ("media_type", "mediaType"),
        ("method", "method"),
        ("page_size", "pageSize"),
        ("store_media", "storeMedia"),
    )


@dataclass(frozen=True)
class Receive(Element):
    """``<Receive>`` -- accept an incoming fax.  Always self-closing."""

    attributes: ReceiveAttributes = field(default_factory=ReceiveAttributes)

    TAG: ClassVar[str] = "Receive"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"


@dataclass(frozen=True)
class FaxResponse(TwiMLResponse):
    """``<Response>`` for incoming fax webhooks."""

    PRETTY: ClassVar[bool] = False

    def receive(self, attributes: ReceiveAttributes | None = None) -> FaxResponse:
        return self.append(Receive(attributes or ReceiveAttributes()))
