"""Shared test fixtures for the twiml_builder test suite."""

from __future__ import annotations

import pytest

from twiml_builder import FaxResponse, MessagingResponse, TwiMLValidator, VoiceResponse

DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


# ---------------------------------------------------------------------------
# Sample TwiML strings
# ---------------------------------------------------------------------------

VALID_VOICE = (
    DECLARATION + "\n"
    "<Response>\n"
    '  <Say voice="alice">Hello</Say>\n'
    '  <Dial action="https://example.com/dial">\n'
    "    <Number>+15551234567</Number>\n"
    "  </Dial>\n"
    "  <Hangup />\n"
    "</Response>"
)

VALID_MESSAGING = (
    DECLARATION + "\n"
    "<Response><Message><Body>Hello</Body>"
    "<Media>https://example.com/cat.jpg</Media></Message></Response>"
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def valid_voice() -> str:
    return VALID_VOICE


@pytest.fixture()
def valid_messaging() -> str:
    return VALID_MESSAGING


@pytest.fixture()
def voice() -> VoiceResponse:
    return VoiceResponse()


@pytest.fixture()
def messaging() -> MessagingResponse:
    return MessagingResponse()


@pytest.fixture()
def fax() -> FaxResponse:
    return FaxResponse()


@pytest.fixture()
def validator() -> TwiMLValidator:
    return TwiMLValidator()


@pytest.fixture()
def strict_validator() -> TwiMLValidator:
    return TwiMLValidator.strict_validator()
