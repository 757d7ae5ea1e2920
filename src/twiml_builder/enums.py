"""Closed wire-value domains for enumerated TwiML attributes.

Each member's value is the exact string written to the document.  The
``str`` mixin lets members compare equal to their wire string, but the
serializer always writes ``member.value``.
"""

from __future__ import annotations

from enum import Enum


class WireEnum(str, Enum):
    """Base class for enumerations with a fixed wire representation."""

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------


class HttpMethod(WireEnum):
    GET = "GET"
    POST = "POST"


class Trim(WireEnum):
    TRIM_SILENCE = "trim-silence"
    DO_NOT_TRIM = "do-not-trim"


class RecordingEvent(WireEnum):
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    ABSENT = "absent"


class CallProgressEvent(WireEnum):
    """Events for ``statusCallbackEvent`` on Number, Client, Sip and WhatsApp."""

    INITIATED = "initiated"
    RINGING = "ringing"
    ANSWERED = "answered"
    COMPLETED = "completed"


# ---------------------------------------------------------------------------
# Fax
# ---------------------------------------------------------------------------


class ReceiveMediaType(WireEnum):
    APPLICATION_PDF = "application/pdf"
    IMAGE_TIFF = "image/tiff"


class ReceivePageSize(WireEnum):
    LETTER = "letter"
    LEGAL = "legal"
    A4 = "a4"


# ---------------------------------------------------------------------------
# Voice verbs
# ---------------------------------------------------------------------------


class RejectReason(WireEnum):
    REJECTED = "rejected"
    BUSY = "busy"


class DialRecord(WireEnum):
    DO_NOT_RECORD = "do-not-record"
    RECORD_FROM_ANSWER = "record-from-answer"
    RECORD_FROM_RINGING = "record-from-ringing"
    RECORD_FROM_ANSWER_DUAL = "record-from-answer-dual"
    RECORD_FROM_RINGING_DUAL = "record-from-ringing-dual"


class DialEvents(WireEnum):
    CALL_PROGRESS_EVENT = "call-progress-event"


class RecordingTrack(WireEnum):
    BOTH = "both"
    INBOUND = "inbound"
    OUTBOUND = "outbound"


class RecordingChannels(WireEnum):
    MONO = "mono"
    DUAL = "dual"


class GatherInput(WireEnum):
    DTMF = "dtmf"
    SPEECH = "speech"


class StreamTrack(WireEnum):
    """Track selection for Stream, Siprec and Transcription."""

    INBOUND_TRACK = "inbound_track"
    OUTBOUND_TRACK = "outbound_track"
    BOTH_TRACKS = "both_tracks"


class ConferenceBeep(WireEnum):
    TRUE = "true"
    FALSE = "false"
    ON_ENTER = "onEnter"
    ON_EXIT = "onExit"


class ConferenceRecord(WireEnum):
    DO_NOT_RECORD = "do-not-record"
    RECORD_FROM_START = "record-from-start"


class ConferenceEvent(WireEnum):
    START = "start"
    END = "end"
    JOIN = "join"
    LEAVE = "leave"
    MUTE = "mute"
    HOLD = "hold"
    MODIFY = "modify"
    SPEAKER = "speaker"
    ANNOUNCEMENT = "announcement"


class ConferenceRegion(WireEnum):
    US1 = "us1"
    US2 = "us2"
    IE1 = "ie1"
    SG1 = "sg1"
    BR1 = "br1"
    AU1 = "au1"
    JP1 = "jp1"
    DE1 = "de1"


class ConferenceJitterBufferSize(WireEnum):
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"
    OFF = "off"


# ---------------------------------------------------------------------------
# Pay / Prompt
# ---------------------------------------------------------------------------


class PayInput(WireEnum):
    DTMF = "dtmf"


class PayPaymentMethod(WireEnum):
    ACH_DEBIT = "ach-debit"
    CREDIT_CARD = "credit-card"


class PayBankAccountType(WireEnum):
    CONSUMER_CHECKING = "consumer-checking"
    CONSUMER_SAVINGS = "consumer-savings"
    COMMERCIAL_CHECKING = "commercial-checking"
    COMMERCIAL_SAVINGS = "commercial-savings"


class PayTokenType(WireEnum):
    ONE_TIME = "one-time"
    REUSABLE = "reusable"
    PAYMENT_METHOD = "payment-method"


class CardType(WireEnum):
    VISA = "visa"
    MASTERCARD = "mastercard"
    AMEX = "amex"
    MAESTRO = "maestro"
    DISCOVER = "discover"
    OPTIMA = "optima"
    JCB = "jcb"
    DINERS_CLUB = "diners-club"
    ENROUTE = "enroute"


class PromptFor(WireEnum):
    PAYMENT_CARD_NUMBER = "payment-card-number"
    EXPIRATION_DATE = "expiration-date"
    SECURITY_CODE = "security-code"
    POSTAL_CODE = "postal-code"
    PAYMENT_PROCESSING = "payment-processing"
    BANK_ACCOUNT_NUMBER = "bank-account-number"
    BANK_ROUTING_NUMBER = "bank-routing-number"


class PromptErrorType(WireEnum):
    TIMEOUT = "timeout"
    INVALID_CARD_NUMBER = "invalid-card-number"
    INVALID_CARD_TYPE = "invalid-card-type"
    INVALID_DATE = "invalid-date"
    INVALID_SECURITY_CODE = "invalid-security-code"
    INTERNAL_ERROR = "internal-error"
    INPUT_MATCHING_FAILED = "input-matching-failed"


# ---------------------------------------------------------------------------
# SSML
# ---------------------------------------------------------------------------


class SsmlBreakStrength(WireEnum):
    NONE = "none"
    X_WEAK = "x-weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    X_STRONG = "x-strong"


class SsmlEmphasisLevel(WireEnum):
    STRONG = "strong"
    MODERATE = "moderate"
    REDUCED = "reduced"


class SsmlPhonemeAlphabet(WireEnum):
    IPA = "ipa"
    X_SAMPA = "x-sampa"
    X_AMAZON_JYUTPING = "x-amazon-jyutping"
    X_AMAZON_PINYIN = "x-amazon-pinyin"
    X_AMAZON_PRON_KANA = "x-amazon-pron-kana"
    X_AMAZON_YOMIGANA = "x-amazon-yomigana"


class SsmlSayAsInterpretAs(WireEnum):
    CHARACTERS = "characters"
    SPELL_OUT = "spell-out"
    CARDINAL = "cardinal"
    NUMBER = "number"
    ORDINAL = "ordinal"
    DIGITS = "digits"
    FRACTION = "fraction"
    UNIT = "unit"
    DATE = "date"
    TIME = "time"
    ADDRESS = "address"
    EXPLETIVE = "expletive"
    TELEPHONE = "telephone"


class SsmlSayAsFormat(WireEnum):
    MDY = "mdy"
    DMY = "dmy"
    YMD = "ymd"
    MD = "md"
    DM = "dm"
    YM = "ym"
    MY = "my"
    D = "d"
    M = "m"
    Y = "y"
    YYYYMMDD = "yyyymmdd"
