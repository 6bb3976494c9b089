"""Alerting module - Google Chat incident reports and message formatting."""

from incidentchat.alerting.google_chat import IncidentNotifier
from incidentchat.alerting.models import ChatMessage, Reportable, ReportableError

__all__ = [
    "ChatMessage",
    "IncidentNotifier",
    "Reportable",
    "ReportableError",
]
