"""
Incident Chat - Incident Notification Client

Formats application errors into readable incident reports and posts them
to a Google Chat webhook.
"""

__version__ = "0.1.0"
__author__ = "Incident Chat Team"
