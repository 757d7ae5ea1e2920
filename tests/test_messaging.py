"""Tests for twiml_builder.messaging.

Covers:
- message / message_with_attributes / message_with_nouns
- redirect / redirect_with_attributes
- Compact layout and order preservation
- Document-level validation and warnings
"""

from __future__ import annotations

from lxml import etree

from twiml_builder import (
    Body,
    HttpMethod,
    Media,
    Message,
    MessageAttributes,
    MessagingResponse,
    RedirectAttributes,
    UnreachableVerbsAfterRedirect,
)

DECL = '<?xml version="1.0" encoding="UTF-8"?>'


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


class TestMessageBuilders:
    def test_message(self, messaging: MessagingResponse) -> None:
        xml = messaging.message("Hello!").to_xml()
        assert xml == f"{DECL}\n<Response><Message><Body>Hello!</Body></Message></Response>"

    def test_message_with_attributes(self, messaging: MessagingResponse) -> None:
        attrs = MessageAttributes(
            to="+15551111111",
            from_="+15552222222",
            action="/status",
            method=HttpMethod.POST,
            status_callback="/cb",
        )
        xml = messaging.message_with_attributes(attrs, "Hi").to_xml()
        assert (
            '<Message action="/status" from="+15552222222" method="POST" statusCallback="/cb"'
            ' to="+15551111111"><Body>Hi</Body></Message>'
        ) in xml

    def test_message_with_attributes_no_body(self, messaging: MessagingResponse) -> None:
        xml = messaging.message_with_attributes(MessageAttributes(to="+1")).to_xml()
        assert '<Message to="+1" />' in xml

    def test_message_with_nouns(self, messaging: MessagingResponse) -> None:
        message = (
            Message()
            .body(Body("Look"))
            .add_media(Media("https://example.com/1.jpg"))
            .add_media("https://example.com/2.jpg")
        )
        xml = messaging.message_with_nouns(message).to_xml()
        assert (
            "<Message><Body>Look</Body><Media>https://example.com/1.jpg</Media>"
            "<Media>https://example.com/2.jpg</Media></Message>"
        ) in xml

    def test_body_replaces_existing_body(self, messaging: MessagingResponse) -> None:
        message = Message().body("a").add_media("https://example.com/1.jpg").body("b")
        xml = messaging.message_with_nouns(message).to_xml()
        assert xml.count("<Body>") == 1
        assert "<Message><Body>b</Body><Media>https://example.com/1.jpg</Media></Message>" in xml

    def test_redirect(self, messaging: MessagingResponse) -> None:
        xml = messaging.redirect("https://example.com/next").to_xml()
        assert xml.endswith("<Response><Redirect>https://example.com/next</Redirect></Response>")

    def test_redirect_with_attributes(self, messaging: MessagingResponse) -> None:
        attrs = RedirectAttributes(method=HttpMethod.GET)
        xml = messaging.redirect_with_attributes(attrs, "/next").to_xml()
        assert '<Redirect method="GET">/next</Redirect>' in xml

    def test_chaining_preserves_receiver(self, messaging: MessagingResponse) -> None:
        one = messaging.message("a")
        two = one.message("b")
        assert len(messaging.verbs) == 0
        assert len(one.verbs) == 1
        assert len(two.verbs) == 2


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class TestMessagingLayout:
    def test_message_redirect_message(self, messaging: MessagingResponse) -> None:
        doc = messaging.message("Hi").redirect("https://example.com").message("never sent")
        assert doc.to_xml() == (
            f"{DECL}\n<Response>"
            "<Message><Body>Hi</Body></Message>"
            "<Redirect>https://example.com</Redirect>"
            "<Message><Body>never sent</Body></Message>"
            "</Response>"
        )

    def test_output_is_well_formed(self, messaging: MessagingResponse) -> None:
        doc = messaging.comment("note").message("a & b").redirect("/x")
        root = etree.fromstring(doc.to_xml().encode("utf-8"))
        assert root.find("Message/Body").text == "a & b"

    def test_str_is_xml(self, messaging: MessagingResponse) -> None:
        doc = messaging.message("x")
        assert str(doc) == doc.to_xml()


# ---------------------------------------------------------------------------
# Validation and warnings
# ---------------------------------------------------------------------------


class TestMessagingValidation:
    def test_warnings_for_unreachable_message(self, messaging: MessagingResponse) -> None:
        doc = messaging.message("Hi").redirect("https://example.com").message("never sent")
        assert doc.warnings() == [UnreachableVerbsAfterRedirect(redirect_index=1, unreachable_count=1)]

    def test_generated_document_validates_cleanly(self, messaging: MessagingResponse) -> None:
        doc = messaging.message("Hi").redirect("https://example.com")
        assert doc.validate() == []
        assert doc.validate_strict() == []

    def test_long_body_reported(self, messaging: MessagingResponse) -> None:
        issues = messaging.message("x" * 1601).validate()
        assert len(issues) == 1
        assert issues[0].context == "Body element #1"

    def test_strict_flags_relative_url_without_slash(self, messaging: MessagingResponse) -> None:
        attrs = MessageAttributes(action="status")
        issues = messaging.message_with_attributes(attrs, "Hi").validate_strict()
        assert [i.context for i in issues] == ["action"]
