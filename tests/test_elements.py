"""Tests for twiml_builder.elements, twiml_builder.ssml and twiml_builder.enums.

Covers:
- Wire metadata exposed by element classes
- attribute_items() ordering and omission
- Immutability of elements
- Enum wire values
"""

from __future__ import annotations

import dataclasses

import pytest

from twiml_builder import (
    AmazonEffect,
    Break,
    ConferenceBeep,
    Dial,
    DialAttributes,
    Hangup,
    HttpMethod,
    Parameter,
    Redirect,
    RedirectAttributes,
    Say,
    SsmlSayAsInterpretAs,
    StreamTrack,
)
from twiml_builder.elements import Element


class TestWireMetadata:
    def test_redirect(self) -> None:
        redirect = Redirect("/next", RedirectAttributes(method=HttpMethod.POST))
        assert redirect.tag == "Redirect"
        assert redirect.text_content() == "/next"
        assert redirect.children() == ()
        assert redirect.attribute_items() == [("method", HttpMethod.POST)]

    def test_parameter_owns_its_attributes(self) -> None:
        param = Parameter("k", "v")
        assert param.attribute_owner() is param
        assert param.attribute_items() == [("name", "k"), ("value", "v")]

    def test_leaf_has_no_content(self) -> None:
        assert Hangup().is_empty
        assert not Redirect("").is_empty

    def test_ssml_is_inline(self) -> None:
        assert Break.INLINE
        assert AmazonEffect("x", name="whispered").tag == "amazon:effect"
        assert not Say.INLINE

    def test_attribute_items_skip_absent(self) -> None:
        dial = Dial(attributes=DialAttributes(timeout=5))
        assert dial.attribute_items() == [("timeout", 5)]

    def test_every_verb_is_an_element(self) -> None:
        for cls in (Say, Dial, Redirect, Hangup, Parameter, Break):
            assert issubclass(cls, Element)


class TestImmutability:
    def test_elements_are_frozen(self) -> None:
        say = Say("Hi")
        with pytest.raises(dataclasses.FrozenInstanceError):
            say.message = "Bye"  # type: ignore[misc]

    def test_with_child_copies(self) -> None:
        say = Say("Hi")
        updated = say.add_break()
        assert say.ssml == ()
        assert updated.ssml == (Break(),)


class TestEnums:
    def test_wire_values(self) -> None:
        assert HttpMethod.GET.value == "GET"
        assert ConferenceBeep.ON_ENTER.value == "onEnter"
        assert StreamTrack.BOTH_TRACKS.value == "both_tracks"
        assert SsmlSayAsInterpretAs.SPELL_OUT.value == "spell-out"

    def test_str_is_wire_value(self) -> None:
        assert str(HttpMethod.POST) == "POST"
        assert HttpMethod.POST == "POST"
