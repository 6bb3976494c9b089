"""
Incident Chat - Custom Exceptions
"""

from typing import Any, Dict, Optional


class IncidentChatError(Exception):
    """Base exception for Incident Chat."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(IncidentChatError):
    """Raised when a component is constructed with missing settings."""

    def __init__(self, message: str, setting: str = "unknown"):
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            details={"setting": setting},
        )
