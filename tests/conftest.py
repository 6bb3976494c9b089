"""
Incident Chat - Test Fixtures
"""

import json
import os
from typing import Callable, Dict, List
from unittest.mock import MagicMock

import httpx
import pytest

# Set test environment
os.environ["APP_ENV"] = "test"
os.environ["APP_DEBUG"] = "false"
os.environ["INCIDENT_CHAT_WEBHOOK_URL"] = ""

WEBHOOK_OK = "https://chat.test/hook?resp=ok"
WEBHOOK_KO = "https://chat.test/hook?resp=KO"
WEBHOOK_NOT_JSON = "https://chat.test/hook?resp=html"

webhook_error = httpx.ConnectError("Webhook test doesnt work properly")


@pytest.fixture
def logger() -> MagicMock:
    """Logger double exposing error, log and debug."""
    return MagicMock(spec=["error", "log", "debug"])


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests captured by the mock transport."""
    return []


@pytest.fixture
def transport(sent_requests: List[httpx.Request]) -> httpx.MockTransport:
    """Mock Google Chat webhook, routed on the ``resp`` query parameter."""

    def handler(request: httpx.Request) -> httpx.Response:
        sent_requests.append(request)
        resp = request.url.params.get("resp")
        if resp == "ok":
            return httpx.Response(200, json={"ok": True})
        if resp == "html":
            return httpx.Response(502, text="<html>Bad Gateway</html>")
        raise webhook_error

    return httpx.MockTransport(handler)


@pytest.fixture
def sent_text(sent_requests: List[httpx.Request]) -> Callable[[int], str]:
    """Decode the chat text of a captured request."""

    def _text(index: int = 0) -> str:
        body: Dict[str, str] = json.loads(sent_requests[index].content)
        return body["text"]

    return _text
