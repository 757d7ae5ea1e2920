"""twiml_builder -- typed builders, serializer and validator for TwiML.

Public API re-exports for convenient access::

    from twiml_builder import VoiceResponse, MessagingResponse, validate_twiml
"""

from ._version import __version__
from .config import ValidatorConfig, config_from_mapping, load_config
from .elements import AttributeRecord, Element, Parameter, Redirect, RedirectAttributes
from .enums import (
    CallProgressEvent,
    CardType,
    ConferenceBeep,
    ConferenceEvent,
    ConferenceJitterBufferSize,
    ConferenceRecord,
    ConferenceRegion,
    DialEvents,
    DialRecord,
    GatherInput,
    HttpMethod,
    PayBankAccountType,
    PayInput,
    PayPaymentMethod,
    PayTokenType,
    PromptErrorType,
    PromptFor,
    ReceiveMediaType,
    ReceivePageSize,
    RecordingChannels,
    RecordingEvent,
    RecordingTrack,
    RejectReason,
    SsmlBreakStrength,
    SsmlEmphasisLevel,
    SsmlPhonemeAlphabet,
    SsmlSayAsFormat,
    SsmlSayAsInterpretAs,
    StreamTrack,
    Trim,
    WireEnum,
)
from .escape import escape_attr, escape_comment, escape_text
from .exceptions import (
    ConfigError,
    InvalidParameterError,
    MalformedXmlError,
    MismatchedClosingTagError,
    TwiMLError,
    TwiMLValidationError,
    UnclosedTagsError,
    UnexpectedClosingTagError,
)
from .fax import FaxResponse, Receive, ReceiveAttributes
from .lint import (
    EmptyRedirectUrl,
    TwiMLWarning,
    UnreachableRedirectAfterMessageWithAction,
    UnreachableVerbsAfterRedirect,
    WarningKind,
)
from .messaging import Body, Media, Message, MessageAttributes, MessagingResponse
from .response import TwiMLResponse
from .serializer import serialize
from .ssml import (
    AmazonDomain,
    AmazonEffect,
    Break,
    Emphasis,
    Lang,
    P,
    Phoneme,
    Prosody,
    S,
    SayAs,
    Sub,
    W,
)
from .validator import (
    TwiMLValidator,
    ValidationErrorType,
    ValidationIssue,
    validate_twiml,
    validate_twiml_strict,
)
from .voice import (
    AiSession,
    Application,
    Assistant,
    Autopilot,
    Client,
    Conference,
    Connect,
    ConnectAttributes,
    Conversation,
    ConversationRelay,
    ConversationRelaySession,
    Dial,
    DialAttributes,
    DialQueue,
    Echo,
    Enqueue,
    EnqueueAttributes,
    Gather,
    GatherAttributes,
    Hangup,
    Language,
    Leave,
    Number,
    Pause,
    PauseAttributes,
    Pay,
    PayAttributes,
    Play,
    PlayAttributes,
    Prompt,
    PromptAttributes,
    Queue,
    QueueAttributes,
    Record,
    RecordAttributes,
    Recording,
    Refer,
    ReferAttributes,
    ReferSip,
    Reject,
    RejectAttributes,
    Room,
    Say,
    SayAttributes,
    Sim,
    Sip,
    Siprec,
    Sms,
    SmsAttributes,
    Start,
    StartAttributes,
    Stop,
    Stream,
    Task,
    Transcription,
    VirtualAgent,
    VoiceResponse,
    WhatsApp,
)

__all__ = [
    "__version__",
    # Documents
    "TwiMLResponse",
    "VoiceResponse",
    "MessagingResponse",
    "FaxResponse",
    # Serialization
    "serialize",
    "escape_text",
    "escape_attr",
    "escape_comment",
    # Validation
    "TwiMLValidator",
    "ValidationIssue",
    "ValidationErrorType",
    "validate_twiml",
    "validate_twiml_strict",
    "ValidatorConfig",
    "load_config",
    "config_from_mapping",
    # Warnings
    "TwiMLWarning",
    "WarningKind",
    "UnreachableVerbsAfterRedirect",
    "EmptyRedirectUrl",
    "UnreachableRedirectAfterMessageWithAction",
    # Base elements
    "Element",
    "AttributeRecord",
    "Redirect",
    "RedirectAttributes",
    "Parameter",
    # Voice verbs
    "Say",
    "SayAttributes",
    "Play",
    "PlayAttributes",
    "Pause",
    "PauseAttributes",
    "Dial",
    "DialAttributes",
    "Gather",
    "GatherAttributes",
    "Record",
    "RecordAttributes",
    "Reject",
    "RejectAttributes",
    "Connect",
    "ConnectAttributes",
    "Start",
    "StartAttributes",
    "Stop",
    "Enqueue",
    "EnqueueAttributes",
    "Queue",
    "QueueAttributes",
    "Pay",
    "PayAttributes",
    "Prompt",
    "PromptAttributes",
    "Sms",
    "SmsAttributes",
    "Refer",
    "ReferAttributes",
    "Hangup",
    "Leave",
    "Echo",
    # Voice nouns
    "Number",
    "Client",
    "Conference",
    "DialQueue",
    "Sip",
    "Sim",
    "Application",
    "WhatsApp",
    "Stream",
    "Room",
    "Conversation",
    "VirtualAgent",
    "Autopilot",
    "AiSession",
    "ConversationRelaySession",
    "Assistant",
    "ConversationRelay",
    "Language",
    "Siprec",
    "Transcription",
    "Recording",
    "Task",
    "ReferSip",
    # SSML
    "Break",
    "Emphasis",
    "Prosody",
    "SayAs",
    "Sub",
    "P",
    "S",
    "Lang",
    "Phoneme",
    "W",
    "AmazonEffect",
    "AmazonDomain",
    # Messaging
    "Message",
    "MessageAttributes",
    "Body",
    "Media",
    # Fax
    "Receive",
    "ReceiveAttributes",
    # Enums
    "WireEnum",
    "HttpMethod",
    "Trim",
    "RecordingEvent",
    "CallProgressEvent",
    "ReceiveMediaType",
    "ReceivePageSize",
    "RejectReason",
    "DialRecord",
    "DialEvents",
    "RecordingTrack",
    "RecordingChannels",
    "GatherInput",
    "StreamTrack",
    "ConferenceBeep",
    "ConferenceRecord",
    "ConferenceEvent",
    "ConferenceRegion",
    "ConferenceJitterBufferSize",
    "PayInput",
    "PayPaymentMethod",
    "PayBankAccountType",
    "PayTokenType",
    "CardType",
    "PromptFor",
    "PromptErrorType",
    "SsmlBreakStrength",
    "SsmlEmphasisLevel",
    "SsmlPhonemeAlphabet",
    "SsmlSayAsInterpretAs",
    "SsmlSayAsFormat",
    # Exceptions
    "TwiMLError",
    "TwiMLValidationError",
    "MalformedXmlError",
    "MismatchedClosingTagError",
    "UnexpectedClosingTagError",
    "UnclosedTagsError",
    "InvalidParameterError",
    "ConfigError",
]
