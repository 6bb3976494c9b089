"""
Incident Chat - Send Error Example

Reports a sample error to the configured Google Chat webhook.

Usage:
    INCIDENT_CHAT_WEBHOOK_URL="https://chat.googleapis.com/...?key=...&token=..." \
        incidentchat-send-error --message "Very basic error"
"""

import argparse
import asyncio
from typing import List, Optional

import structlog

from incidentchat.alerting.google_chat import IncidentNotifier
from incidentchat.alerting.models import ReportableError
from incidentchat.core.config import Settings, get_settings
from incidentchat.core.logging import StructlogIncidentLogger, setup_logging

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_WEBHOOK_MISSING = 222


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    parser = argparse.ArgumentParser(description="Send a sample incident to Google Chat")
    parser.add_argument("--message", "-m", default="Very basic error", help="Error message")
    parser.add_argument("--thread", "-t", default=None, help="Thread key override")
    args = parser.parse_args(argv)

    setup_logging()
    settings = settings or get_settings()

    if not settings.INCIDENT_CHAT_WEBHOOK_URL:
        logger.error("WEBHOOK NOT SETUP PROPERLY")
        return EXIT_WEBHOOK_MISSING

    notifier = IncidentNotifier(
        webhook_url=settings.INCIDENT_CHAT_WEBHOOK_URL,
        logger=StructlogIncidentLogger(logger),
        default_thread=args.thread or settings.INCIDENT_CHAT_THREAD or settings.APP_ENV,
    )

    try:
        asyncio.run(notifier.report_incident(ReportableError(args.message)))
    except Exception as e:
        logger.error("Incident report failed", error=str(e))
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
