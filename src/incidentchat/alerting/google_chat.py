"""
Incident Chat - Google Chat Alerting
"""

import json
from typing import Any, Optional
from uuid import uuid4

import httpx

from incidentchat.alerting.models import (
    DEFAULT_TAG,
    ChatMessage,
    describe_error,
    format_chat_text,
    iso_timestamp,
    summarize_error,
)
from incidentchat.core.config import Settings, get_settings
from incidentchat.core.exceptions import ConfigurationError
from incidentchat.core.logging import IncidentLogger, StructlogIncidentLogger

DEFAULT_THREAD = "SVILUPPO"


class IncidentNotifier:
    """
    Google Chat incident notifier.

    Best effort: ``report_incident`` never raises, failures only surface
    through the injected logger and the returned boolean.
    """

    def __init__(
        self,
        webhook_url: str,
        logger: IncidentLogger,
        default_thread: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not webhook_url:
            raise ConfigurationError(
                "Google Chat webhook not provided", setting="webhook_url"
            )
        if not logger:
            raise ConfigurationError("Error logger not provided", setting="logger")
        for method in ("error", "log", "debug"):
            if not callable(getattr(logger, method, None)):
                raise ConfigurationError(
                    f"Error logger does not support '{method}'", setting="logger"
                )

        self._webhook_url = webhook_url
        self._logger = logger
        self._default_thread = default_thread
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        logger: Optional[IncidentLogger] = None,
        settings: Optional[Settings] = None,
    ) -> "IncidentNotifier":
        """Build a notifier from application settings."""
        settings = settings or get_settings()
        return cls(
            webhook_url=settings.INCIDENT_CHAT_WEBHOOK_URL,
            logger=logger or StructlogIncidentLogger(),
            default_thread=settings.INCIDENT_CHAT_THREAD or settings.APP_ENV,
        )

    @property
    def webhook_url(self) -> str:
        return self._webhook_url

    @property
    def default_thread(self) -> Optional[str]:
        return self._default_thread

    async def report_incident(self, error: Any) -> bool:
        """
        Send an error to Google Chat as an incident report.

        Args:
            error: Exception (or any object with a ``stack``) to report

        Returns:
            True if the message was dispatched, False if it was dropped
        """
        try:
            message = ChatMessage(
                message=describe_error(error),
                tag=DEFAULT_TAG,
                props=summarize_error(error),
            )
            return await self._send_to_chat(message, self._webhook_url)
        except Exception:
            self._logger.error(
                {"msg": "Cannot send incident report, unexpected exception"}
            )
            return False

    async def _send_to_chat(self, message: ChatMessage, webhook_url: str) -> bool:
        """
        Send a message into Google Chat.

        See https://developers.google.com/chat/how-tos/webhooks

        Returns:
            True if the message was correctly dispatched
        """
        thread = message.thread or self._default_thread or DEFAULT_THREAD
        # webhook_url already carries the key/token query string
        url = f"{webhook_url}&threadKey={thread}"

        msg_id = message.msg_id or str(uuid4())
        text = format_chat_text(message, thread, msg_id, iso_timestamp())

        body = json.dumps({"text": text}, ensure_ascii=False)
        headers = {"Content-Type": "application/json; charset=UTF-8"}

        try:
            async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
                response = await client.post(url, content=body, headers=headers)
                payload = response.json()
        except Exception as e:
            self._logger.error({"msg": "Cannot send msg to google chat", "body": body})
            self._logger.error(e)
            return False

        self._logger.log({"msg": "Sent msg OK", "msgId": msg_id})
        self._logger.debug({"response": payload, "data": message})
        return True
