"""Messaging TwiML -- ``<Message>`` and ``<Redirect>`` inside a compact ``<Response>``."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Union

from .elements import AttributeRecord, Element, Redirect, RedirectAttributes, WireAttributes
from .enums import HttpMethod
from .lint import TwiMLWarning, collect_warnings
from .response import TwiMLResponse


@dataclass(frozen=True)
class Body(Element):
    """``<Body>`` -- the text of a message."""

    message: str

    TAG: ClassVar[str] = "Body"
    TEXT_FIELD: ClassVar[str | None] = "message"


@dataclass(frozen=True)
class Media(Element):
    """``<Media>`` -- URL of media to attach to a message."""

    url: str

    TAG: ClassVar[str] = "Media"
    TEXT_FIELD: ClassVar[str | None] = "url"


MessageNoun = Union[Body, Media]


@dataclass(frozen=True)
class MessageAttributes(AttributeRecord):
    action: str | None = None
    from_: str | None = None
    method: HttpMethod | None = None
    status_callback: str | None = None
    to: str | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("action", "action"),
        ("from_", "from"),
        ("method", "method"),
        ("status_callback", "statusCallback"),
        ("to", "to"),
    )


@dataclass(frozen=True)
class Message(Element):
    """``<Message>`` verb holding ``<Body>`` and ``<Media>`` nouns in order."""

    attributes: MessageAttributes = field(default_factory=MessageAttributes)
    nouns: tuple[MessageNoun, ...] = ()

    TAG: ClassVar[str] = "Message"
    CHILDREN_FIELD: ClassVar[str | None] = "nouns"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"

    def body(self, body: Body | str) -> Message:
        """Set the message body, replacing any existing ``<Body>`` in place."""
        if isinstance(body, str):
            body = Body(body)
        for index, noun in enumerate(self.nouns):
            if isinstance(noun, Body):
                nouns = self.nouns[:index] + (body,) + self.nouns[index + 1 :]
                return replace(self, nouns=nouns)
        return self.with_child(body)

    def add_media(self, media: Media | str) -> Message:
        if isinstance(media, str):
            media = Media(media)
        return self.with_child(media)


@dataclass(frozen=True)
class MessagingResponse(TwiMLResponse):
    """``<Response>`` for messaging webhooks.

    Example::

        doc = (
            MessagingResponse()
            .message("Thanks for your order!")
            .redirect("https://example.com/next")
        )
        xml = doc.to_xml()
    """

    PRETTY: ClassVar[bool] = False

    def message(self, body: str) -> MessagingResponse:
        return self.append(Message(nouns=(Body(body),)))

    def message_with_attributes(
        self, attributes: MessageAttributes, body: str | None = None
    ) -> MessagingResponse:
        nouns = (Body(body),) if body is not None else ()
        return self.append(Message(attributes=attributes, nouns=nouns))

    def message_with_nouns(self, message: Message) -> MessagingResponse:
        """Append a pre-built Message carrying any mix of Body and Media nouns."""
        return self.append(message)

    def redirect(self, url: str) -> MessagingResponse:
        return self.append(Redirect(url))

    def redirect_with_attributes(self, attributes: RedirectAttributes, url: str) -> MessagingResponse:
        return self.append(Redirect(url, attributes=attributes))

    def warnings(self) -> list[TwiMLWarning]:
        """Return best-practice warnings for this document's verb sequence."""
        return collect_warnings(self.verbs)
