"""Voice TwiML -- verbs, nouns and the ``VoiceResponse`` document.

Top-level verbs carry an ``*Attributes`` record; nouns nested inside a
container verb carry their attribute fields directly.  Attribute tables
list fields in the dialect's conventional emission order.

Example::

    doc = (
        VoiceResponse()
        .say("Please hold.")
        .append(
            Dial(attributes=DialAttributes(timeout=20))
            .add_number(Number("+15551234567"))
            .add_client(Client("support"))
        )
        .hangup()
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Union

from .elements import (
    AttributeRecord,
    Element,
    Parameter,
    Redirect,
    RedirectAttributes,
    WireAttributes,
)
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
)
from .response import TwiMLResponse
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
    SsmlNode,
    Sub,
    W,
)

# ---------------------------------------------------------------------------
# Say / Play / Pause
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SayAttributes(AttributeRecord):
    voice: str | None = None
    language: str | None = None
    loop: int | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("voice", "voice"),
        ("language", "language"),
        ("loop", "loop"),
    )


@dataclass(frozen=True)
class Say(Element):
    """``<Say>`` -- text to speech, optionally followed by SSML elements.

    The SSML elements are written inline after ``message`` in the order
    they were added.
    """

    message: str = ""
    attributes: SayAttributes = field(default_factory=SayAttributes)
    ssml: tuple[SsmlNode, ...] = ()

    TAG: ClassVar[str] = "Say"
    TEXT_FIELD: ClassVar[str | None] = "message"
    CHILDREN_FIELD: ClassVar[str | None] = "ssml"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"

    def add_ssml(self, element: SsmlNode) -> Say:
        return self.with_child(element)

    def add_break(self, strength: SsmlBreakStrength | None = None, time: str | None = None) -> Say:
        return self.with_child(Break(strength=strength, time=time))

    def add_emphasis(self, text: str, level: SsmlEmphasisLevel | None = None) -> Say:
        return self.with_child(Emphasis(text, level=level))

    def add_prosody(
        self,
        text: str,
        pitch: str | None = None,
        rate: str | None = None,
        volume: str | None = None,
    ) -> Say:
        return self.with_child(Prosody(text, pitch=pitch, rate=rate, volume=volume))

    def add_lang(self, text: str, xml_lang: str) -> Say:
        return self.with_child(Lang(text, xml_lang=xml_lang))

    def add_p(self, text: str) -> Say:
        return self.with_child(P(text))

    def add_s(self, text: str) -> Say:
        return self.with_child(S(text))

    def add_phoneme(self, text: str, ph: str, alphabet: SsmlPhonemeAlphabet | None = None) -> Say:
        return self.with_child(Phoneme(text, ph=ph, alphabet=alphabet))

    def add_say_as(
        self,
        text: str,
        interpret_as: SsmlSayAsInterpretAs,
        format: SsmlSayAsFormat | None = None,
    ) -> Say:
        return self.with_child(SayAs(text, interpret_as=interpret_as, format=format))

    def add_sub(self, text: str, alias: str) -> Say:
        return self.with_child(Sub(text, alias=alias))

    def add_w(self, text: str, role: str | None = None) -> Say:
        return self.with_child(W(text, role=role))

    def add_amazon_effect(self, text: str, name: str) -> Say:
        return self.with_child(AmazonEffect(text, name=name))

    def add_amazon_domain(self, text: str, name: str) -> Say:
        return self.with_child(AmazonDomain(text, name=name))


@dataclass(frozen=True)
class PlayAttributes(AttributeRecord):
    digits: str | None = None
    loop: int | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("digits", "digits"), ("loop", "loop"))


@dataclass(frozen=True)
class Play(Element):
    """``<Play>`` -- play an audio file, or send ``digits`` as DTMF."""

    url: str | None = None
    attributes: PlayAttributes = field(default_factory=PlayAttributes)

    TAG: ClassVar[str] = "Play"
    TEXT_FIELD: ClassVar[str | None] = "url"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"


@dataclass(frozen=True)
class PauseAttributes(AttributeRecord):
    length: int | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("length", "length"),)


@dataclass(frozen=True)
class Pause(Element):
    attributes: PauseAttributes = field(default_factory=PauseAttributes)

    TAG: ClassVar[str] = "Pause"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"


SpeechNoun = Union[Say, Play, Pause]


def _as_say(say: Say | str) -> Say:
    return Say(say) if isinstance(say, str) else say


def _as_play(play: Play | str) -> Play:
    return Play(play) if isinstance(play, str) else play


# ---------------------------------------------------------------------------
# Dial and its nouns
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Number(Element):
    number: str
    send_digits: str | None = None
    url: str | None = None
    method: HttpMethod | None = None
    status_callback: str | None = None
    status_callback_event: tuple[CallProgressEvent, ...] = ()
    status_callback_method: HttpMethod | None = None
    call_reason: str | None = None
    byoc: str | None = None
    machine_detection: str | None = None
    machine_detection_timeout: int | None = None
    machine_detection_speech_threshold: int | None = None
    machine_detection_speech_end_threshold: int | None = None
    machine_detection_silence_timeout: int | None = None
    amd_status_callback: str | None = None
    amd_status_callback_method: HttpMethod | None = None

    TAG: ClassVar[str] = "Number"
    TEXT_FIELD: ClassVar[str | None] = "number"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("send_digits", "sendDigits"),
        ("url", "url"),
        ("method", "method"),
        ("status_callback", "statusCallback"),
        ("status_callback_event", "statusCallbackEvent"),
        ("status_callback_method", "statusCallbackMethod"),
        ("call_reason", "callReason"),
        ("byoc", "byoc"),
        ("machine_detection", "machineDetection"),
        ("machine_detection_timeout", "machineDetectionTimeout"),
        ("machine_detection_speech_threshold", "machineDetectionSpeechThreshold"),
        ("machine_detection_speech_end_threshold", "machineDetectionSpeechEndThreshold"),
        ("machine_detection_silence_timeout", "machineDetectionSilenceTimeout"),
        ("amd_status_callback", "amdStatusCallback"),
        ("amd_status_callback_method", "amdStatusCallbackMethod"),
    )


@dataclass(frozen=True)
class Client(Element):
    identity: str
    url: str | None = None
    method: HttpMethod | None = None
    status_callback_event: tuple[CallProgressEvent, ...] = ()
    status_callback: str | None = None
    status_callback_method: HttpMethod | None = None
    client_notification_url: str | None = None

    TAG: ClassVar[str] = "Client"
    TEXT_FIELD: ClassVar[str | None] = "identity"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("url", "url"),
        ("method", "method"),
        ("status_callback_event", "statusCallbackEvent"),
        ("status_callback", "statusCallback"),
        ("status_callback_method", "statusCallbackMethod"),
        ("client_notification_url", "clientNotificationUrl"),
    )


@dataclass(frozen=True)
class Conference(Element):
    name: str
    muted: bool | None = None
    beep: ConferenceBeep | None = None
    start_conference_on_enter: bool | None = None
    end_conference_on_exit: bool | None = None
    wait_url: str | None = None
    wait_method: HttpMethod | None = None
    max_participants: int | None = None
    record: ConferenceRecord | None = None
    region: ConferenceRegion | None = None
    coach: str | None = None
    trim: Trim | None = None
    status_callback_event: tuple[ConferenceEvent, ...] = ()
    status_callback: str | None = None
    status_callback_method: HttpMethod | None = None
    recording_status_callback: str | None = None
    recording_status_callback_method: HttpMethod | None = None
    recording_status_callback_event: tuple[RecordingEvent, ...] = ()
    event_callback_url: str | None = None
    jitter_buffer_size: ConferenceJitterBufferSize | None = None
    participant_label: str | None = None
    call_sid_to_coach: str | None = None
    beep_on_customer_entrance: bool | None = None
    coaching: bool | None = None

    TAG: ClassVar[str] = "Conference"
    TEXT_FIELD: ClassVar[str | None] = "name"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("muted", "muted"),
        ("beep", "beep"),
        ("start_conference_on_enter", "startConferenceOnEnter"),
        ("end_conference_on_exit", "endConferenceOnExit"),
        ("wait_url", "waitUrl"),
        ("wait_method", "waitMethod"),
        ("max_participants", "maxParticipants"),
        ("record", "record"),
        ("region", "region"),
        ("coach", "coach"),
        ("trim", "trim"),
        ("status_callback_event", "statusCallbackEvent"),
        ("status_callback", "statusCallback"),
        ("status_callback_method", "statusCallbackMethod"),
        ("recording_status_callback", "recordingStatusCallback"),
        ("recording_status_callback_method", "recordingStatusCallbackMethod"),
        ("recording_status_callback_event", "recordingStatusCallbackEvent"),
        ("event_callback_url", "eventCallbackUrl"),
        ("jitter_buffer_size", "jitterBufferSize"),
        ("participant_label", "participantLabel"),
        ("call_sid_to_coach", "callSidToCoach"),
        ("beep_on_customer_entrance", "beepOnCustomerEntrance"),
        ("coaching", "coaching"),
    )


@dataclass(frozen=True)
class DialQueue(Element):
    """``<Queue>`` noun inside ``<Dial>`` -- dequeue a caller from ``name``."""

    name: str
    url: str | None = None
    method: HttpMethod | None = None
    reservation_sid: str | None = None
    post_work_activity_sid: str | None = None

    TAG: ClassVar[str] = "Queue"
    TEXT_FIELD: ClassVar[str | None] = "name"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("url", "url"),
        ("method", "method"),
        ("reservation_sid", "reservationSid"),
        ("post_work_activity_sid", "postWorkActivitySid"),
    )


@dataclass(frozen=True)
class Sip(Element):
    """``<Sip>`` noun.

    Custom headers are carried on the SIP URI as a query string, e.g.
    ``sip:alice@example.com?X-Account=42&X-Tier=gold``.
    """

    sip_url: str
    url: str | None = None
    method: HttpMethod | None = None
    username: str | None = None
    password: str | None = None
    status_callback_event: tuple[CallProgressEvent, ...] = ()
    status_callback: str | None = None
    status_callback_method: HttpMethod | None = None
    codecs: tuple[str, ...] = ()
    headers: tuple[tuple[str, str], ...] = ()

    TAG: ClassVar[str] = "Sip"
    TEXT_FIELD: ClassVar[str | None] = "uri"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("url", "url"),
        ("method", "method"),
        ("username", "username"),
        ("password", "password"),
        ("status_callback_event", "statusCallbackEvent"),
        ("status_callback", "statusCallback"),
        ("status_callback_method", "statusCallbackMethod"),
        ("codecs", "codecs"),
    )
    JOINERS: ClassVar[dict[str, str]] = {"codecs": ","}

    @property
    def uri(self) -> str:
        """The SIP URI with any custom headers appended."""
        if not self.headers:
            return self.sip_url
        query = "&".join(f"{name}={value}" for name, value in self.headers)
        separator = "&" if "?" in self.sip_url else "?"
        return f"{self.sip_url}{separator}{query}"

    def add_header(self, name: str, value: str) -> Sip:
        return replace(self, headers=self.headers + ((name, value),))

    def add_codec(self, codec: str) -> Sip:
        return replace(self, codecs=self.codecs + (codec,))


@dataclass(frozen=True)
class Sim(Element):
    sim_sid: str

    TAG: ClassVar[str] = "Sim"
    TEXT_FIELD: ClassVar[str | None] = "sim_sid"


@dataclass(frozen=True)
class Application(Element):
    """``<Application>`` noun -- dial a TwiML App, passing optional Parameters."""

    sid: str | None = None
    customer_id: str | None = None
    copy_parent_to: bool | None = None
    parameters: tuple[Parameter, ...] = ()

    TAG: ClassVar[str] = "Application"
    CHILDREN_FIELD: ClassVar[str | None] = "parameters"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("sid", "sid"),
        ("customer_id", "customerId"),
        ("copy_parent_to", "copyParentTo"),
    )

    def add_parameter(self, name: str, value: str) -> Application:
        return self.with_child(Parameter(name, value))


@dataclass(frozen=True)
class WhatsApp(Element):
    number: str
    url: str | None = None
    method: HttpMethod | None = None
    status_callback_event: tuple[CallProgressEvent, ...] = ()
    status_callback: str | None = None
    status_callback_method: HttpMethod | None = None

    TAG: ClassVar[str] = "WhatsApp"
    TEXT_FIELD: ClassVar[str | None] = "number"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("url", "url"),
        ("method", "method"),
        ("status_callback_event", "statusCallbackEvent"),
        ("status_callback", "statusCallback"),
        ("status_callback_method", "statusCallbackMethod"),
    )


DialNoun = Union[Number, Client, Conference, DialQueue, Sip, Sim, Application, WhatsApp]


@dataclass(frozen=True)
class DialAttributes(AttributeRecord):
    action: str | None = None
    method: HttpMethod | None = None
    timeout: int | None = None
    hangup_on_star: bool | None = None
    time_limit: int | None = None
    caller_id: str | None = None
    call_reason: str | None = None
    record: DialRecord | None = None
    trim: Trim | None = None
    recording_status_callback: str | None = None
    answer_on_bridge: bool | None = None
    ring_tone: str | None = None
    events: DialEvents | None = None
    refer_method: HttpMethod | None = None
    refer_url: str | None = None
    sequential: bool | None = None
    recording_track: RecordingTrack | None = None
    recording_status_callback_event: tuple[RecordingEvent, ...] = ()
    recording_status_callback_method: HttpMethod | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("action", "action"),
        ("method", "method"),
        ("timeout", "timeout"),
        ("hangup_on_star", "hangupOnStar"),
        ("time_limit", "timeLimit"),
        ("caller_id", "callerId"),
        ("call_reason", "callReason"),
        ("record", "record"),
        ("trim", "trim"),
        ("recording_status_callback", "recordingStatusCallback"),
        ("answer_on_bridge", "answerOnBridge"),
        ("ring_tone", "ringTone"),
        ("events", "events"),
        ("refer_method", "referMethod"),
        ("refer_url", "referUrl"),
        ("sequential", "sequential"),
        ("recording_track", "recordingTrack"),
        ("recording_status_callback_event", "recordingStatusCallbackEvent"),
        ("recording_status_callback_method", "recordingStatusCallbackMethod"),
    )


@dataclass(frozen=True)
class Dial(Element):
    """``<Dial>`` -- connect the caller to another party.

    A bare ``number`` is written as the element's text.  Nested nouns are
    written after it, one per line.
    """

    number: str | None = None
    attributes: DialAttributes = field(default_factory=DialAttributes)
    nouns: tuple[DialNoun, ...] = ()

    TAG: ClassVar[str] = "Dial"
    TEXT_FIELD: ClassVar[str | None] = "number"
    CHILDREN_FIELD: ClassVar[str | None] = "nouns"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"

    def add_noun(self, noun: DialNoun) -> Dial:
        return self.with_child(noun)

    def add_number(self, number: Number | str) -> Dial:
        return self.with_child(Number(number) if isinstance(number, str) else number)

    def add_client(self, client: Client | str) -> Dial:
        return self.with_child(Client(client) if isinstance(client, str) else client)

    def add_conference(self, conference: Conference | str) -> Dial:
        return self.with_child(Conference(conference) if isinstance(conference, str) else conference)

    def add_queue(self, queue: DialQueue | str) -> Dial:
        return self.with_child(DialQueue(queue) if isinstance(queue, str) else queue)

    def add_sip(self, sip: Sip | str) -> Dial:
        return self.with_child(Sip(sip) if isinstance(sip, str) else sip)

    def add_sim(self, sim: Sim | str) -> Dial:
        return self.with_child(Sim(sim) if isinstance(sim, str) else sim)

    def add_application(self, application: Application) -> Dial:
        return self.with_child(application)

    def add_whatsapp(self, whatsapp: WhatsApp | str) -> Dial:
        return self.with_child(WhatsApp(whatsapp) if isinstance(whatsapp, str) else whatsapp)


# ---------------------------------------------------------------------------
# Gather / Record / Reject
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GatherAttributes(AttributeRecord):
    input: tuple[GatherInput, ...] = ()
    action: str | None = None
    method: HttpMethod | None = None
    timeout: int | None = None
    finish_on_key: str | None = None
    num_digits: int | None = None
    partial_result_callback: str | None = None
    language: str | None = None
    hints: str | None = None
    barge_in: bool | None = None
    speech_timeout: str | None = None  # seconds, or "auto"
    action_on_empty_result: bool | None = None
    debug: bool | None = None
    dtmf_detection: bool | None = None
    enhanced: bool | None = None
    max_speech_time: int | None = None
    partial_result_callback_method: HttpMethod | None = None
    profanity_filter: bool | None = None
    speech_model: str | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("input", "input"),
        ("action", "action"),
        ("method", "method"),
        ("timeout", "timeout"),
        ("finish_on_key", "finishOnKey"),
        ("num_digits", "numDigits"),
        ("partial_result_callback", "partialResultCallback"),
        ("language", "language"),
        ("hints", "hints"),
        ("barge_in", "bargeIn"),
        ("speech_timeout", "speechTimeout"),
        ("action_on_empty_result", "actionOnEmptyResult"),
        ("debug", "debug"),
        ("dtmf_detection", "dtmfDetection"),
        ("enhanced", "enhanced"),
        ("max_speech_time", "maxSpeechTime"),
        ("partial_result_callback_method", "partialResultCallbackMethod"),
        ("profanity_filter", "profanityFilter"),
        ("speech_model", "speechModel"),
    )


@dataclass(frozen=True)
class Gather(Element):
    """``<Gather>`` -- collect DTMF or speech while playing nested prompts."""

    attributes: GatherAttributes = field(default_factory=GatherAttributes)
    nouns: tuple[SpeechNoun, ...] = ()

    TAG: ClassVar[str] = "Gather"
    CHILDREN_FIELD: ClassVar[str | None] = "nouns"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"

    def add_say(self, say: Say | str) -> Gather:
        return self.with_child(_as_say(say))

    def add_play(self, play: Play | str) -> Gather:
        return self.with_child(_as_play(play))

    def add_pause(self, length: int | None = None) -> Gather:
        return self.with_child(Pause(PauseAttributes(length=length)))


@dataclass(frozen=True)
class RecordAttributes(AttributeRecord):
    action: str | None = None
    method: HttpMethod | None = None
    timeout: int | None = None
    finish_on_key: str | None = None
    max_length: int | None = None
    play_beep: bool | None = None
    trim: Trim | None = None
    recording_status_callback: str | None = None
    recording_status_callback_event: tuple[RecordingEvent, ...] = ()
    recording_status_callback_method: HttpMethod | None = None
    transcribe: bool | None = None
    transcribe_callback: str | None = None
    recording_channels: RecordingChannels | None = None
    recording_track: RecordingTrack | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("action", "action"),
        ("method", "method"),
        ("timeout", "timeout"),
        ("finish_on_key", "finishOnKey"),
        ("max_length", "maxLength"),
        ("play_beep", "playBeep"),
        ("trim", "trim"),
        ("recording_status_callback", "recordingStatusCallback"),
        ("recording_status_callback_event", "recordingStatusCallbackEvent"),
        ("recording_status_callback_method", "recordingStatusCallbackMethod"),
        ("transcribe", "transcribe"),
        ("transcribe_callback", "transcribeCallback"),
        ("recording_channels", "recordingChannels"),
        ("recording_track", "recordingTrack"),
    )


@dataclass(frozen=True)
class Record(Element):
    attributes: RecordAttributes = field(default_factory=RecordAttributes)

    TAG: ClassVar[str] = "Record"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"


@dataclass(frozen=True)
class RejectAttributes(AttributeRecord):
    reason: RejectReason | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("reason", "reason"),)


@dataclass(frozen=True)
class Reject(Element):
    attributes: RejectAttributes = field(default_factory=RejectAttributes)

    TAG: ClassVar[str] = "Reject"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"


# ---------------------------------------------------------------------------
# Nouns shared by Connect and Start
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Stream(Element):
    """``<Stream>`` -- fork call audio to a WebSocket."""

    name: str | None = None
    connector_name: str | None = None
    url: str | None = None
    track: StreamTrack | None = None
    status_callback: str | None = None
    status_callback_method: HttpMethod | None = None
    parameters: tuple[Parameter, ...] = ()

    TAG: ClassVar[str] = "Stream"
    CHILDREN_FIELD: ClassVar[str | None] = "parameters"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("name", "name"),
        ("connector_name", "connectorName"),
        ("url", "url"),
        ("track", "track"),
        ("status_callback", "statusCallback"),
        ("status_callback_method", "statusCallbackMethod"),
    )

    def add_parameter(self, name: str, value: str) -> Stream:
        return self.with_child(Parameter(name, value))


# ---------------------------------------------------------------------------
# Connect and its nouns
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Room(Element):
    name: str
    participant_identity: str | None = None

    TAG: ClassVar[str] = "Room"
    TEXT_FIELD: ClassVar[str | None] = "name"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("participant_identity", "participantIdentity"),)


@dataclass(frozen=True)
class Conversation(Element):
    service_instance_sid: str | None = None

    TAG: ClassVar[str] = "Conversation"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("service_instance_sid", "serviceInstanceSid"),)


@dataclass(frozen=True)
class VirtualAgent(Element):
    connector_name: str | None = None
    language: str | None = None
    parameters: tuple[Parameter, ...] = ()

    TAG: ClassVar[str] = "VirtualAgent"
    CHILDREN_FIELD: ClassVar[str | None] = "parameters"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("connector_name", "connectorName"),
        ("language", "language"),
    )

    def add_parameter(self, name: str, value: str) -> VirtualAgent:
        return self.with_child(Parameter(name, value))


@dataclass(frozen=True)
class Autopilot(Element):
    name: str

    TAG: ClassVar[str] = "Autopilot"
    TEXT_FIELD: ClassVar[str | None] = "name"


@dataclass(frozen=True)
class AiSession(Element):
    assistant_sid: str | None = None

    TAG: ClassVar[str] = "AiSession"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("assistant_sid", "assistantSid"),)


@dataclass(frozen=True)
class ConversationRelaySession(Element):
    connector: str | None = None
    session_configuration: str | None = None

    TAG: ClassVar[str] = "ConversationRelaySession"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("connector", "connector"),
        ("session_configuration", "sessionConfiguration"),
    )


@dataclass(frozen=True)
class Assistant(Element):
    sid: str | None = None

    TAG: ClassVar[str] = "Assistant"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("sid", "sid"),)


@dataclass(frozen=True)
class Language(Element):
    """``<Language>`` -- per-language TTS/STT provider for ConversationRelay."""

    code: str | None = None
    tts_provider: str | None = None
    stt_provider: str | None = None

    TAG: ClassVar[str] = "Language"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("code", "code"),
        ("tts_provider", "ttsProvider"),
        ("stt_provider", "sttProvider"),
    )


@dataclass(frozen=True)
class ConversationRelay(Element):
    url: str | None = None
    welcome_greeting: str | None = None
    voice: str | None = None
    language: str | None = None
    dtmf_detection: bool | None = None
    interruptible: bool | None = None
    interruption_sensitivity: str | None = None
    speech_model: str | None = None
    profanity_filter: bool | None = None
    transcription_enabled: bool | None = None
    status_callback: str | None = None
    status_callback_method: HttpMethod | None = None
    max_duration: int | None = None
    nouns: tuple[Union[Language, Parameter], ...] = ()

    TAG: ClassVar[str] = "ConversationRelay"
    CHILDREN_FIELD: ClassVar[str | None] = "nouns"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("url", "url"),
        ("welcome_greeting", "welcomeGreeting"),
        ("voice", "voice"),
        ("language", "language"),
        ("dtmf_detection", "dtmfDetection"),
        ("interruptible", "interruptible"),
        ("interruption_sensitivity", "interruptionSensitivity"),
        ("speech_model", "speechModel"),
        ("profanity_filter", "profanityFilter"),
        ("transcription_enabled", "transcriptionEnabled"),
        ("status_callback", "statusCallback"),
        ("status_callback_method", "statusCallbackMethod"),
        ("max_duration", "maxDuration"),
    )

    def add_language(self, language: Language) -> ConversationRelay:
        return self.with_child(language)

    def add_parameter(self, name: str, value: str) -> ConversationRelay:
        return self.with_child(Parameter(name, value))


ConnectNoun = Union[
    Stream,
    Room,
    Conversation,
    VirtualAgent,
    Autopilot,
    AiSession,
    ConversationRelaySession,
    Assistant,
    ConversationRelay,
]


@dataclass(frozen=True)
class ConnectAttributes(AttributeRecord):
    action: str | None = None
    method: HttpMethod | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("action", "action"), ("method", "method"))


@dataclass(frozen=True)
class Connect(Element):
    attributes: ConnectAttributes = field(default_factory=ConnectAttributes)
    nouns: tuple[ConnectNoun, ...] = ()

    TAG: ClassVar[str] = "Connect"
    CHILDREN_FIELD: ClassVar[str | None] = "nouns"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"

    def add_noun(self, noun: ConnectNoun) -> Connect:
        return self.with_child(noun)

    def add_stream(self, stream: Stream) -> Connect:
        return self.with_child(stream)

    def add_room(self, room: Room | str) -> Connect:
        return self.with_child(Room(room) if isinstance(room, str) else room)

    def add_conversation(self, conversation: Conversation) -> Connect:
        return self.with_child(conversation)

    def add_virtual_agent(self, virtual_agent: VirtualAgent) -> Connect:
        return self.with_child(virtual_agent)

    def add_autopilot(self, autopilot: Autopilot | str) -> Connect:
        return self.with_child(Autopilot(autopilot) if isinstance(autopilot, str) else autopilot)

    def add_ai_session(self, ai_session: AiSession) -> Connect:
        return self.with_child(ai_session)

    def add_conversation_relay_session(self, session: ConversationRelaySession) -> Connect:
        return self.with_child(session)

    def add_assistant(self, assistant: Assistant) -> Connect:
        return self.with_child(assistant)

    def add_conversation_relay(self, relay: ConversationRelay) -> Connect:
        return self.with_child(relay)


# ---------------------------------------------------------------------------
# Start / Stop and their nouns
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Siprec(Element):
    name: str | None = None
    connector_name: str | None = None
    track: StreamTrack | None = None
    parameters: tuple[Parameter, ...] = ()

    TAG: ClassVar[str] = "Siprec"
    CHILDREN_FIELD: ClassVar[str | None] = "parameters"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("name", "name"),
        ("connector_name", "connectorName"),
        ("track", "track"),
    )

    def add_parameter(self, name: str, value: str) -> Siprec:
        return self.with_child(Parameter(name, value))


@dataclass(frozen=True)
class Transcription(Element):
    """``<Transcription>`` -- real-time transcription of the call."""

    name: str | None = None
    track: StreamTrack | None = None
    language_code: str | None = None
    enable_automatic_punctuation: bool | None = None
    hints: str | None = None
    inbound_track_label: str | None = None
    intelligence_service: str | None = None
    outbound_track_label: str | None = None
    partial_results: bool | None = None
    profanity_filter: bool | None = None
    speech_model: str | None = None
    status_callback_method: HttpMethod | None = None
    status_callback_url: str | None = None
    transcription_engine: str | None = None

    TAG: ClassVar[str] = "Transcription"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("name", "name"),
        ("track", "track"),
        ("language_code", "languageCode"),
        ("enable_automatic_punctuation", "enableAutomaticPunctuation"),
        ("hints", "hints"),
        ("inbound_track_label", "inboundTrackLabel"),
        ("intelligence_service", "intelligenceService"),
        ("outbound_track_label", "outboundTrackLabel"),
        ("partial_results", "partialResults"),
        ("profanity_filter", "profanityFilter"),
        ("speech_model", "speechModel"),
        ("status_callback_method", "statusCallbackMethod"),
        ("status_callback_url", "statusCallbackUrl"),
        ("transcription_engine", "transcriptionEngine"),
    )


@dataclass(frozen=True)
class Recording(Element):
    recording_status_callback: str | None = None
    recording_status_callback_method: HttpMethod | None = None
    recording_status_callback_event: tuple[RecordingEvent, ...] = ()
    trim: Trim | None = None
    track: RecordingTrack | None = None
    channels: RecordingChannels | None = None

    TAG: ClassVar[str] = "Recording"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("recording_status_callback", "recordingStatusCallback"),
        ("recording_status_callback_method", "recordingStatusCallbackMethod"),
        ("recording_status_callback_event", "recordingStatusCallbackEvent"),
        ("trim", "trim"),
        ("track", "track"),
        ("channels", "channels"),
    )


StartNoun = Union[Stream, Siprec, Transcription, Recording]


@dataclass(frozen=True)
class StartAttributes(AttributeRecord):
    action: str | None = None
    method: HttpMethod | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("action", "action"), ("method", "method"))


@dataclass(frozen=True)
class Start(Element):
    """``<Start>`` -- begin an asynchronous action (stream, siprec, ...)."""

    attributes: StartAttributes = field(default_factory=StartAttributes)
    nouns: tuple[StartNoun, ...] = ()

    TAG: ClassVar[str] = "Start"
    CHILDREN_FIELD: ClassVar[str | None] = "nouns"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"

    def add_stream(self, stream: Stream) -> Start:
        return self.with_child(stream)

    def add_siprec(self, siprec: Siprec) -> Start:
        return self.with_child(siprec)

    def add_transcription(self, transcription: Transcription) -> Start:
        return self.with_child(transcription)

    def add_recording(self, recording: Recording) -> Start:
        return self.with_child(recording)


@dataclass(frozen=True)
class Stop(Element):
    """``<Stop>`` -- stop the named asynchronous actions started earlier."""

    nouns: tuple[StartNoun, ...] = ()

    TAG: ClassVar[str] = "Stop"
    CHILDREN_FIELD: ClassVar[str | None] = "nouns"

    def add_stream(self, stream: Stream) -> Stop:
        return self.with_child(stream)

    def add_siprec(self, siprec: Siprec) -> Stop:
        return self.with_child(siprec)

    def add_transcription(self, transcription: Transcription) -> Stop:
        return self.with_child(transcription)


# ---------------------------------------------------------------------------
# Enqueue / Queue
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Task(Element):
    sid: str | None = None

    TAG: ClassVar[str] = "Task"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("sid", "sid"),)


@dataclass(frozen=True)
class EnqueueAttributes(AttributeRecord):
    action: str | None = None
    method: HttpMethod | None = None
    wait_url: str | None = None
    wait_url_method: HttpMethod | None = None
    workflow_sid: str | None = None
    max_queue_size: int | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("action", "action"),
        ("method", "method"),
        ("wait_url", "waitUrl"),
        ("wait_url_method", "waitUrlMethod"),
        ("workflow_sid", "workflowSid"),
        ("max_queue_size", "maxQueueSize"),
    )


@dataclass(frozen=True)
class Enqueue(Element):
    """``<Enqueue>`` -- place the caller in queue ``name`` or route a Task."""

    name: str | None = None
    attributes: EnqueueAttributes = field(default_factory=EnqueueAttributes)
    task: Task | None = None

    TAG: ClassVar[str] = "Enqueue"
    TEXT_FIELD: ClassVar[str | None] = "name"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"

    def children(self) -> tuple[Element, ...]:
        return (self.task,) if self.task is not None else ()

    def with_task(self, task: Task) -> Enqueue:
        return replace(self, task=task)


@dataclass(frozen=True)
class QueueAttributes(AttributeRecord):
    url: str | None = None
    method: HttpMethod | None = None
    reservation_sid: str | None = None
    post_work_activity_sid: str | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("url", "url"),
        ("method", "method"),
        ("reservation_sid", "reservationSid"),
        ("post_work_activity_sid", "postWorkActivitySid"),
    )


@dataclass(frozen=True)
class Queue(Element):
    name: str
    attributes: QueueAttributes = field(default_factory=QueueAttributes)

    TAG: ClassVar[str] = "Queue"
    TEXT_FIELD: ClassVar[str | None] = "name"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"


# ---------------------------------------------------------------------------
# Pay / Prompt
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PromptAttributes(AttributeRecord):
    for_: PromptFor | None = None
    attempt: tuple[int, ...] = ()
    card_type: tuple[CardType, ...] = ()
    error_type: tuple[PromptErrorType, ...] = ()
    require_matching_inputs: bool | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("for_", "for"),
        ("attempt", "attempt"),
        ("card_type", "cardType"),
        ("error_type", "errorType"),
        ("require_matching_inputs", "requireMatchingInputs"),
    )


@dataclass(frozen=True)
class Prompt(Element):
    """``<Prompt>`` -- custom Say/Play/Pause prompts for one step of ``<Pay>``."""

    attributes: PromptAttributes = field(default_factory=PromptAttributes)
    nouns: tuple[SpeechNoun, ...] = ()

    TAG: ClassVar[str] = "Prompt"
    CHILDREN_FIELD: ClassVar[str | None] = "nouns"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"

    def add_say(self, say: Say | str) -> Prompt:
        return self.with_child(_as_say(say))

    def add_play(self, play: Play | str) -> Prompt:
        return self.with_child(_as_play(play))

    def add_pause(self, length: int | None = None) -> Prompt:
        return self.with_child(Pause(PauseAttributes(length=length)))


@dataclass(frozen=True)
class PayAttributes(AttributeRecord):
    input: PayInput | None = None
    action: str | None = None
    charge_amount: str | None = None
    currency: str | None = None
    payment_connector: str | None = None
    payment_method: PayPaymentMethod | None = None
    timeout: int | None = None
    status_callback_method: HttpMethod | None = None
    status_callback: str | None = None
    bank_account_type: PayBankAccountType | None = None
    description: str | None = None
    language: str | None = None
    max_attempts: int | None = None
    min_postal_code_length: int | None = None
    postal_code: bool | str | None = None
    security_code: bool | None = None
    token_type: PayTokenType | None = None
    valid_card_types: tuple[CardType, ...] = ()

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("input", "input"),
        ("action", "action"),
        ("charge_amount", "chargeAmount"),
        ("currency", "currency"),
        ("payment_connector", "paymentConnector"),
        ("payment_method", "paymentMethod"),
        ("timeout", "timeout"),
        ("status_callback_method", "statusCallbackMethod"),
        ("status_callback", "statusCallback"),
        ("bank_account_type", "bankAccountType"),
        ("description", "description"),
        ("language", "language"),
        ("max_attempts", "maxAttempts"),
        ("min_postal_code_length", "minPostalCodeLength"),
        ("postal_code", "postalCode"),
        ("security_code", "securityCode"),
        ("token_type", "tokenType"),
        ("valid_card_types", "validCardTypes"),
    )


@dataclass(frozen=True)
class Pay(Element):
    attributes: PayAttributes = field(default_factory=PayAttributes)
    nouns: tuple[Union[Prompt, Parameter], ...] = ()

    TAG: ClassVar[str] = "Pay"
    CHILDREN_FIELD: ClassVar[str | None] = "nouns"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"

    def add_prompt(self, prompt: Prompt) -> Pay:
        return self.with_child(prompt)

    def add_parameter(self, name: str, value: str) -> Pay:
        return self.with_child(Parameter(name, value))


# ---------------------------------------------------------------------------
# Sms / Refer / leaf verbs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SmsAttributes(AttributeRecord):
    to: str | None = None
    from_: str | None = None
    action: str | None = None
    method: HttpMethod | None = None
    status_callback: str | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (
        ("to", "to"),
        ("from_", "from"),
        ("action", "action"),
        ("method", "method"),
        ("status_callback", "statusCallback"),
    )


@dataclass(frozen=True)
class Sms(Element):
    message: str
    attributes: SmsAttributes = field(default_factory=SmsAttributes)

    TAG: ClassVar[str] = "Sms"
    TEXT_FIELD: ClassVar[str | None] = "message"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"


@dataclass(frozen=True)
class ReferSip(Element):
    """``<Sip>`` noun inside ``<Refer>`` -- the SIP URI to transfer to."""

    sip_url: str

    TAG: ClassVar[str] = "Sip"
    TEXT_FIELD: ClassVar[str | None] = "sip_url"


@dataclass(frozen=True)
class ReferAttributes(AttributeRecord):
    action: str | None = None
    method: HttpMethod | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("action", "action"), ("method", "method"))


@dataclass(frozen=True)
class Refer(Element):
    attributes: ReferAttributes = field(default_factory=ReferAttributes)
    sip: ReferSip | None = None

    TAG: ClassVar[str] = "Refer"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"

    def children(self) -> tuple[Element, ...]:
        return (self.sip,) if self.sip is not None else ()

    def with_sip(self, sip: ReferSip | str) -> Refer:
        return replace(self, sip=ReferSip(sip) if isinstance(sip, str) else sip)


@dataclass(frozen=True)
class Hangup(Element):
    TAG: ClassVar[str] = "Hangup"


@dataclass(frozen=True)
class Leave(Element):
    TAG: ClassVar[str] = "Leave"


@dataclass(frozen=True)
class Echo(Element):
    TAG: ClassVar[str] = "Echo"


VoiceVerb = Union[
    Connect,
    Dial,
    Echo,
    Enqueue,
    Gather,
    Hangup,
    Leave,
    Pause,
    Pay,
    Play,
    Prompt,
    Queue,
    Record,
    Redirect,
    Refer,
    Reject,
    Say,
    Sms,
    Start,
    Stop,
]


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VoiceResponse(TwiMLResponse):
    """``<Response>`` for voice webhooks, written in the indented layout.

    Convenience builders take the most common field; the ``*_with_attributes``
    forms take a full attribute record.  Containers built elsewhere (a Dial
    with nouns, a Gather with prompts) are added with :meth:`append` or the
    matching builder.
    """

    PRETTY: ClassVar[bool] = True

    def say(self, message: str) -> VoiceResponse:
        return self.append(Say(message))

    def say_with_attributes(self, attributes: SayAttributes, message: str) -> VoiceResponse:
        return self.append(Say(message, attributes=attributes))

    def play(self, url: str) -> VoiceResponse:
        return self.append(Play(url))

    def play_with_attributes(self, attributes: PlayAttributes, url: str | None = None) -> VoiceResponse:
        return self.append(Play(url, attributes=attributes))

    def pause(self, length: int | None = None) -> VoiceResponse:
        return self.append(Pause(PauseAttributes(length=length)))

    def dial(self, number: str) -> VoiceResponse:
        return self.append(Dial(number))

    def dial_with_attributes(self, attributes: DialAttributes, number: str | None = None) -> VoiceResponse:
        return self.append(Dial(number, attributes=attributes))

    def gather(self, gather: Gather | None = None) -> VoiceResponse:
        return self.append(gather if gather is not None else Gather())

    def record(self, record: Record | None = None) -> VoiceResponse:
        return self.append(record if record is not None else Record())

    def redirect(self, url: str) -> VoiceResponse:
        return self.append(Redirect(url))

    def redirect_with_attributes(self, attributes: RedirectAttributes, url: str) -> VoiceResponse:
        return self.append(Redirect(url, attributes=attributes))

    def reject(self, reason: RejectReason | None = None) -> VoiceResponse:
        return self.append(Reject(RejectAttributes(reason=reason)))

    def connect(self, connect: Connect | None = None) -> VoiceResponse:
        return self.append(connect if connect is not None else Connect())

    def enqueue(self, name: str) -> VoiceResponse:
        return self.append(Enqueue(name))

    def enqueue_with_attributes(
        self,
        attributes: EnqueueAttributes,
        name: str | None = None,
        task: Task | None = None,
    ) -> VoiceResponse:
        return self.append(Enqueue(name, attributes=attributes, task=task))

    def queue(self, name: str) -> VoiceResponse:
        return self.append(Queue(name))

    def queue_with_attributes(self, attributes: QueueAttributes, name: str) -> VoiceResponse:
        return self.append(Queue(name, attributes=attributes))

    def pay(self, pay: Pay | None = None) -> VoiceResponse:
        return self.append(pay if pay is not None else Pay())

    def prompt(self, prompt: Prompt | None = None) -> VoiceResponse:
        return self.append(prompt if prompt is not None else Prompt())

    def sms(self, message: str) -> VoiceResponse:
        return self.append(Sms(message))

    def sms_with_attributes(self, attributes: SmsAttributes, message: str) -> VoiceResponse:
        return self.append(Sms(message, attributes=attributes))

    def start(self, start: Start | None = None) -> VoiceResponse:
        return self.append(start if start is not None else Start())

    def stop(self, stop: Stop | None = None) -> VoiceResponse:
        return self.append(stop if stop is not None else Stop())

    def refer(self, refer: Refer | None = None) -> VoiceResponse:
        return self.append(refer if refer is not None else Refer())

    def hangup(self) -> VoiceResponse:
        return self.append(Hangup())

    def leave(self) -> VoiceResponse:
        return self.append(Leave())

    def echo(self) -> VoiceResponse:
        return self.append(Echo())
