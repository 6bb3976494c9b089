"""Core module - Configuration, logging, and exceptions."""

from incidentchat.core.config import settings
from incidentchat.core.exceptions import ConfigurationError, IncidentChatError
from incidentchat.core.logging import IncidentLogger, StructlogIncidentLogger

__all__ = [
    # Config
    "settings",
    # Exceptions
    "ConfigurationError",
    "IncidentChatError",
    # Logging
    "IncidentLogger",
    "StructlogIncidentLogger",
]
