"""Tests for twiml_builder.validator.

Covers:
- Structural pre-checks (declaration, root element, < / > count)
- The tag-balance scanner, including the self-closing heuristic
- Default versus strict mode
- URL, phone-number and content-length rules with their boundaries
- Issue formatting, file-based validation and bad input types
"""

from __future__ import annotations

from pathlib import Path

import pytest

from twiml_builder import (
    Dial,
    Number,
    ValidatorConfig,
    VoiceResponse,
    validate_twiml,
    validate_twiml_strict,
)
from twiml_builder.exceptions import (
    InvalidParameterError,
    MalformedXmlError,
    MismatchedClosingTagError,
    UnclosedTagsError,
    UnexpectedClosingTagError,
)
from twiml_builder.validator import TwiMLValidator, ValidationErrorType, ValidationIssue

DECL = '<?xml version="1.0" encoding="UTF-8"?>'


def doc(inner: str) -> str:
    return f"{DECL}\n<Response>{inner}</Response>"


def say_document(length: int) -> str:
    return doc(f"<Say>{'a' * length}</Say>")


def body_document(length: int) -> str:
    return doc(f"<Message><Body>{'b' * length}</Body></Message>")


# ---------------------------------------------------------------------------
# Data model tests
# ---------------------------------------------------------------------------


class TestValidationIssue:
    def test_str_with_context(self) -> None:
        issue = ValidationIssue(ValidationErrorType.CONTENT_TOO_LONG, "too long", context="Say element #2")
        assert str(issue) == "[Say element #2] Content Too Long: too long"

    def test_str_without_context(self) -> None:
        issue = ValidationIssue(ValidationErrorType.MALFORMED_XML, "bad")
        assert str(issue) == "Malformed XML: bad"

    def test_reserved_kinds_representable(self) -> None:
        labels = {kind.label for kind in ValidationErrorType}
        assert "Missing Required Attribute" in labels
        assert "Unsupported Combination" in labels
        assert len(ValidationErrorType) == 10


# ---------------------------------------------------------------------------
# Structural checks
# ---------------------------------------------------------------------------


class TestStructure:
    def test_valid_voice(self, validator: TwiMLValidator, valid_voice: str) -> None:
        validator.validate_xml(valid_voice)
        assert validator.validate(valid_voice) == []

    def test_valid_messaging(self, validator: TwiMLValidator, valid_messaging: str) -> None:
        assert validator.validate(valid_messaging) == []

    def test_missing_declaration(self, validator: TwiMLValidator) -> None:
        with pytest.raises(MalformedXmlError, match="XML declaration missing"):
            validator.validate_xml("<Response><Say>Hello</Say></Response>")

    def test_missing_response(self, validator: TwiMLValidator) -> None:
        with pytest.raises(MalformedXmlError, match="Response element missing or malformed"):
            validator.validate_xml(f"{DECL}\n<Say>Hello</Say>")

    def test_unbalanced_brackets(self, validator: TwiMLValidator) -> None:
        with pytest.raises(MalformedXmlError, match="Unbalanced XML tags"):
            validator.validate_xml(doc("<Say>Hello</Say"))

    def test_malformed_short_circuits(self, strict_validator: TwiMLValidator) -> None:
        xml = doc(f'<Say>{"a" * 5000}</Play><Play url="ftp://x">y</Play>')
        issues = strict_validator.validate(xml)
        assert len(issues) == 1
        assert issues[0].kind is ValidationErrorType.MALFORMED_XML
        assert issues[0].message == (
            "TwiML validation failed: Mismatched closing tag: expected </Say>, found </Play>"
        )


# ---------------------------------------------------------------------------
# Tag-balance scanner
# ---------------------------------------------------------------------------


class TestTagScanner:
    def test_mismatched_closing_tag(self, validator: TwiMLValidator) -> None:
        with pytest.raises(MismatchedClosingTagError) as exc_info:
            validator.validate_xml(doc("<Say>Hello</Play>"))
        assert exc_info.value.expected == "Say"
        assert exc_info.value.found == "Play"

    def test_unclosed_tags_outermost_first(self, validator: TwiMLValidator) -> None:
        xml = f"{DECL}\n<Response><Dial><Number>+1</Number>\n</Response>"
        with pytest.raises(MismatchedClosingTagError):
            validator.validate_xml(xml)

        # With no closing tag at all the remaining stack is reported.
        xml = f"{DECL}\n<Response></Response><Gather><Say>x</Say>"
        with pytest.raises(UnclosedTagsError) as exc_info:
            validator.validate_xml(xml)
        assert exc_info.value.tags == ["Gather"]
        assert "Unclosed tags: Gather" in str(exc_info.value)

    def test_unclosed_tags_listed_in_stack_order(self, validator: TwiMLValidator) -> None:
        xml = f"{DECL}\n<Response></Response><Gather><Dial>"
        with pytest.raises(UnclosedTagsError, match="Unclosed tags: Gather, Dial"):
            validator.validate_xml(xml)

    def test_unexpected_closing_tag(self, validator: TwiMLValidator) -> None:
        with pytest.raises(UnexpectedClosingTagError, match=r"Unexpected closing tag: </Say>"):
            validator.validate_xml(f"{DECL}\n</Say><Response></Response>")

    def test_removed_closing_tag_is_detected(self, validator: TwiMLValidator, valid_voice: str) -> None:
        broken = valid_voice.replace("</Dial>", "", 1)
        with pytest.raises((MismatchedClosingTagError, UnclosedTagsError)):
            validator.validate_xml(broken)

    def test_self_closing_with_space(self, validator: TwiMLValidator) -> None:
        validator.validate_xml(doc("<Hangup />"))

    def test_self_closing_without_space(self, validator: TwiMLValidator) -> None:
        validator.validate_xml(doc("<Receive/>"))

    def test_slash_inside_url_attribute_is_not_self_closing(self, validator: TwiMLValidator) -> None:
        validator.validate_xml(doc('<Dial action="https://example.com/dial">+1</Dial>'))

    def test_url_attribute_on_self_closing_tag(self, validator: TwiMLValidator) -> None:
        validator.validate_xml(doc('<Record action="https://example.com/rec" />'))

    def test_comments_and_declaration_skipped(self, validator: TwiMLValidator) -> None:
        xml = f"{DECL}\n<!-- before -->\n<Response>\n  <!-- inside --><Hangup /></Response>\n<!-- after -->"
        validator.validate_xml(xml)

    def test_namespaced_ssml_tags(self, validator: TwiMLValidator) -> None:
        validator.validate_xml(
            doc('<Say>Hi<amazon:effect name="whispered">psst</amazon:effect><break time="1s" /></Say>')
        )

    def test_every_generated_voice_document_balances(self, validator: TwiMLValidator) -> None:
        xml = (
            VoiceResponse()
            .say("Hello")
            .append(Dial().add_number("+15551234567").add_client("x"))
            .pause(1)
            .redirect("https://example.com/next")
            .to_xml()
        )
        validator.validate_xml(xml)


# ---------------------------------------------------------------------------
# Strict-mode rules
# ---------------------------------------------------------------------------


class TestUrls:
    def test_default_mode_skips_url_check(self, validator: TwiMLValidator) -> None:
        assert validator.validate(doc('<Play url="ftp://example.com/a.mp3" />')) == []

    def test_invalid_url(self, strict_validator: TwiMLValidator) -> None:
        issues = strict_validator.validate(doc('<Play url="ftp://example.com/a.mp3" />'))
        assert issues == [
            ValidationIssue(
                ValidationErrorType.INVALID_URL,
                "URL should start with http://, https://, or /: ftp://example.com/a.mp3",
                context="url",
            )
        ]

    @pytest.mark.parametrize("url", ["https://example.com", "http://example.com", "/relative", ""])
    def test_accepted_urls(self, strict_validator: TwiMLValidator, url: str) -> None:
        assert strict_validator.validate(doc(f'<Gather action="{url}" />')) == []

    def test_every_occurrence_checked(self, strict_validator: TwiMLValidator) -> None:
        xml = doc('<Gather action="/ok" /><Record action="bad1" /><Record action="bad2" />')
        issues = strict_validator.validate(xml)
        assert [i.message.rsplit(" ", 1)[-1] for i in issues] == ["bad1", "bad2"]

    def test_suffix_of_longer_attribute_not_matched(self, strict_validator: TwiMLValidator) -> None:
        issues = strict_validator.validate(doc('<Enqueue waitUrl="hold">q</Enqueue>'))
        assert [i.context for i in issues] == ["waitUrl"]

    def test_status_callback(self, strict_validator: TwiMLValidator) -> None:
        issues = strict_validator.validate(doc('<Message statusCallback="example.com"><Body>x</Body></Message>'))
        assert [i.context for i in issues] == ["statusCallback"]

    def test_custom_prefixes(self) -> None:
        config = ValidatorConfig(url_prefixes=("https://",))
        validator = TwiMLValidator(strict=True, config=config)
        assert len(validator.validate(doc('<Redirect method="POST">x</Redirect><Play url="/x" />'))) == 1


class TestPhoneNumbers:
    def test_default_mode_skips(self, validator: TwiMLValidator) -> None:
        assert validator.validate(doc("<Dial><Number>5551234567</Number></Dial>")) == []

    def test_invalid_number(self, strict_validator: TwiMLValidator) -> None:
        issues = strict_validator.validate(doc("<Dial><Number>5551234567</Number></Dial>"))
        assert len(issues) == 1
        assert issues[0].kind is ValidationErrorType.INVALID_PHONE_NUMBER
        assert issues[0].context == "Number element #1"
        assert issues[0].message.endswith(": 5551234567")

    @pytest.mark.parametrize("number", ["+15551234567", "client:alice", "sip:bob@example.com", ""])
    def test_accepted_numbers(self, strict_validator: TwiMLValidator, number: str) -> None:
        assert strict_validator.validate(doc(f"<Dial><Number>{number}</Number></Dial>")) == []

    def test_occurrence_index(self, strict_validator: TwiMLValidator) -> None:
        xml = doc("<Dial><Number>+1</Number><Number>2</Number></Dial>")
        issues = strict_validator.validate(xml)
        assert [i.context for i in issues] == ["Number element #2"]

    def test_number_with_attributes(self, strict_validator: TwiMLValidator) -> None:
        xml = VoiceResponse().append(Dial().add_number(Number("5551234567", send_digits="1"))).to_xml()
        issues = strict_validator.validate(xml)
        assert [i.kind for i in issues] == [ValidationErrorType.INVALID_PHONE_NUMBER]


# ---------------------------------------------------------------------------
# Content lengths
# ---------------------------------------------------------------------------


class TestContentLengths:
    def test_say_at_limit(self, validator: TwiMLValidator) -> None:
        assert validator.validate(say_document(4096)) == []

    def test_say_over_limit(self, validator: TwiMLValidator) -> None:
        issues = validator.validate(say_document(4097))
        assert issues == [
            ValidationIssue(
                ValidationErrorType.CONTENT_TOO_LONG,
                "Say content exceeds 4096 characters: 4097 characters",
                context="Say element #1",
            )
        ]

    def test_say_with_ssml_not_measured(self, validator: TwiMLValidator) -> None:
        xml = doc(f"<Say>{'a' * 5000}<break /></Say>")
        assert validator.validate(xml) == []

    def test_say_with_attributes_measured(self, validator: TwiMLValidator) -> None:
        xml = doc(f'<Say voice="alice">{"a" * 4097}</Say>')
        assert len(validator.validate(xml)) == 1

    def test_body_at_limit(self, validator: TwiMLValidator) -> None:
        assert validator.validate(body_document(1600)) == []

    def test_body_over_limit(self, validator: TwiMLValidator) -> None:
        issues = validator.validate(body_document(1601))
        assert len(issues) == 1
        assert issues[0].message == "Message body exceeds 1600 characters: 1601 characters"
        assert issues[0].context == "Body element #1"

    def test_length_checks_in_both_modes(self, strict_validator: TwiMLValidator) -> None:
        assert len(strict_validator.validate(say_document(4097))) == 1

    def test_second_element_indexed(self, validator: TwiMLValidator) -> None:
        xml = doc(f"<Say>short</Say><Say>{'a' * 4097}</Say>")
        assert [i.context for i in validator.validate(xml)] == ["Say element #2"]

    def test_custom_limits(self) -> None:
        validator = TwiMLValidator(config=ValidatorConfig(say_max_length=10))
        assert len(validator.validate(say_document(11))) == 1


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestEntryPoints:
    def test_module_functions(self) -> None:
        xml = doc("<Dial><Number>123</Number></Dial>")
        assert validate_twiml(xml) == []
        assert len(validate_twiml_strict(xml)) == 1

    def test_with_strict(self, validator: TwiMLValidator) -> None:
        strict = validator.with_strict(True)
        assert strict.strict is True
        assert strict.config is validator.config
        assert validator.strict is False

    def test_non_string_input(self, validator: TwiMLValidator) -> None:
        with pytest.raises(InvalidParameterError, match="Invalid parameter 'xml'"):
            validator.validate(b"<Response/>")  # type: ignore[arg-type]

    def test_validate_file(self, tmp_path: Path, validator: TwiMLValidator, valid_voice: str) -> None:
        path = tmp_path / "call.xml"
        path.write_text(valid_voice, encoding="utf-8")
        assert validator.validate_file(path) == []

    def test_document_methods(self) -> None:
        response = VoiceResponse().append(Dial().add_number("5551234567"))
        assert response.validate() == []
        assert len(response.validate_strict()) == 1
