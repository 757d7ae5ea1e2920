"""Tests for twiml_builder.fax."""

from __future__ import annotations

from lxml import etree

from twiml_builder import (
    FaxResponse,
    HttpMethod,
    ReceiveAttributes,
    ReceiveMediaType,
    ReceivePageSize,
)

DECL = '<?xml version="1.0" encoding="UTF-8"?>'


class TestReceive:
    def test_receive_defaults(self, fax: FaxResponse) -> None:
        assert fax.receive().to_xml() == f"{DECL}\n<Response><Receive /></Response>"

    def test_receive_all_attributes(self, fax: FaxResponse) -> None:
        attrs = ReceiveAttributes(
            action="/fax/received",
            media_type=ReceiveMediaType.APPLICATION_PDF,
            method=HttpMethod.POST,
            page_size=ReceivePageSize.A4,
            store_media=False,
        )
        xml = fax.receive(attrs).to_xml()
        assert xml == (
            f"{DECL}\n<Response>"
            '<Receive action="/fax/received" mediaType="application/pdf" method="POST"'
            ' pageSize="a4" storeMedia="false" />'
            "</Response>"
        )

    def test_enum_wire_values(self) -> None:
        assert ReceiveMediaType.IMAGE_TIFF.value == "image/tiff"
        assert [p.value for p in ReceivePageSize] == ["letter", "legal", "a4"]

    def test_comments(self, fax: FaxResponse) -> None:
        xml = fax.comment_before("incoming").comment("store").receive().comment_after("done").to_xml()
        assert xml == (
            f"{DECL}\n"
            "<!-- incoming -->\n"
            "<Response>\n"
            "  <!-- store --><Receive /></Response>\n"
            "<!-- done -->"
        )

    def test_well_formed(self, fax: FaxResponse) -> None:
        root = etree.fromstring(fax.receive(ReceiveAttributes(action="/a?x=1&y=2")).to_xml().encode())
        assert root[0].get("action") == "/a?x=1&y=2"

    def test_validates_cleanly(self, fax: FaxResponse) -> None:
        assert fax.receive(ReceiveAttributes(action="/fax")).validate_strict() == []
