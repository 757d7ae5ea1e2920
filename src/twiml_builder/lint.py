"""Best-practice warnings for messaging documents.

Warnings never affect serialization; the TwiML they describe is valid.
They point at logic that will not behave as the author probably intended:

  UNREACHABLE_VERBS_AFTER_REDIRECT    verbs following a Redirect never run
  EMPTY_REDIRECT_URL                  an empty Redirect loops forever
  UNREACHABLE_REDIRECT_AFTER_ACTION   a Message with an action hands control
                                      to the action URL before the Redirect
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .elements import Element, Redirect


class WarningKind(Enum):
    UNREACHABLE_REDIRECT_AFTER_MESSAGE_WITH_ACTION = "unreachable_redirect_after_message_with_action"
    EMPTY_REDIRECT_URL = "empty_redirect_url"
    UNREACHABLE_VERBS_AFTER_REDIRECT = "unreachable_verbs_after_redirect"


class TwiMLWarning:
    """Base for all warning records."""

    kind: WarningKind


@dataclass(frozen=True)
class UnreachableRedirectAfterMessageWithAction(TwiMLWarning):
    message_index: int
    redirect_index: int

    kind = WarningKind.UNREACHABLE_REDIRECT_AFTER_MESSAGE_WITH_ACTION

    def __str__(self) -> str:
        return (
            f"Warning: Redirect at index {self.redirect_index} may be unreachable "
            f"because Message at index {self.message_index} has an action attribute"
        )


@dataclass(frozen=True)
class EmptyRedirectUrl(TwiMLWarning):
    redirect_index: int

    kind = WarningKind.EMPTY_REDIRECT_URL

    def __str__(self) -> str:
        return (
            f"Warning: Redirect at index {self.redirect_index} has an empty URL, "
            "which will create an infinite loop"
        )


@dataclass(frozen=True)
class UnreachableVerbsAfterRedirect(TwiMLWarning):
    redirect_index: int
    unreachable_count: int

    kind = WarningKind.UNREACHABLE_VERBS_AFTER_REDIRECT

    def __str__(self) -> str:
        return (
            f"Warning: {self.unreachable_count} verb(s) after Redirect "
            f"at index {self.redirect_index} will never be reached"
        )


def _has_action(verb: Element) -> bool:
    action = getattr(verb.attribute_owner(), "action", None)
    return bool(action)


def collect_warnings(verbs: Sequence[Element]) -> list[TwiMLWarning]:
    """Return warnings for a messaging verb sequence, ordered by Redirect index.

    For each Redirect the order is: empty URL, preceding Message with an
    action, then unreachable verbs.
    """
    warnings: list[TwiMLWarning] = []
    last_message_with_action: int | None = None

    for i, verb in enumerate(verbs):
        if verb.tag == "Message" and _has_action(verb):
            last_message_with_action = i
            continue
        if not isinstance(verb, Redirect):
            continue

        if not verb.url.strip():
            warnings.append(EmptyRedirectUrl(redirect_index=i))
        if last_message_with_action is not None:
            warnings.append(
                UnreachableRedirectAfterMessageWithAction(
                    message_index=last_message_with_action,
                    redirect_index=i,
                )
            )
        remaining = len(verbs) - i - 1
        if remaining > 0:
            warnings.append(UnreachableVerbsAfterRedirect(redirect_index=i, unreachable_count=remaining))

    return warnings
