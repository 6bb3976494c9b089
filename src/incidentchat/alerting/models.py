"""
Incident Chat - Alerting Models

Wire payload and the capability errors expose to be reported.
"""

import traceback
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional, Protocol, runtime_checkable

DEFAULT_TAG = "stack"
UNKNOWN_MESSAGE = "UNKNOWN"


@runtime_checkable
class Reportable(Protocol):
    """An error that knows how to describe itself in an incident report."""

    def description(self) -> str: ...

    def custom_summary(self) -> Optional[str]: ...


class ReportableError(Exception):
    """
    Base error for incidents.

    Subclasses override ``custom_summary`` to attach a ``PROPS`` section
    to the chat message.
    """

    def description(self) -> str:
        return format_traceback(self)

    def custom_summary(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class ChatMessage:
    """Payload for a single chat send."""

    message: str
    tag: str = DEFAULT_TAG
    props: Optional[str] = None
    msg_id: Optional[str] = None
    thread: Optional[str] = None


def format_traceback(error: BaseException) -> str:
    """Full traceback text, or just ``Type: message`` if never raised."""
    return "".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    ).rstrip("\n")


def describe_error(error: Any) -> str:
    """Descriptive trace text for an error, ``UNKNOWN`` when it has none."""
    if isinstance(error, Reportable):
        text = error.description()
    elif isinstance(error, BaseException):
        text = format_traceback(error)
    else:
        text = getattr(error, "stack", None)
    return text or UNKNOWN_MESSAGE


def summarize_error(error: Any) -> Optional[str]:
    """
    Custom serialized properties of an error, if it exposes any.

    Exceptions raised by the error's serializer propagate to the caller.
    """
    if isinstance(error, Reportable):
        return error.custom_summary()

    serializer = getattr(error, "serialize_to_incident_chat", None)
    if serializer is not None:
        return serializer()
    return None


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC ISO-8601 timestamp with millisecond precision, e.g. ``...T10:00:00.000Z``."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def format_chat_text(
    message: ChatMessage,
    thread: str,
    msg_id: str,
    timestamp: str,
) -> str:
    """Build the chat text body for a message."""
    props = f"PROPS 📋 {message.props}\n" if message.props else ""
    return (
        f"[{thread}#{msg_id}] @ {timestamp}\n\n"
        f"{props}{message.tag.upper()} 📋 {message.message}"
    )
