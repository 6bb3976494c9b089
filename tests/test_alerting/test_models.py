"""
Incident Chat - Alerting Model Tests
"""

from datetime import datetime, timedelta, timezone

import pytest

from incidentchat.alerting.models import (
    ChatMessage,
    Reportable,
    ReportableError,
    describe_error,
    format_chat_text,
    iso_timestamp,
    summarize_error,
)


class TestDescribeError:
    """Tests for extracting the descriptive trace of an error."""

    def test_raised_error_includes_traceback(self):
        """Test that a raised error is described with its traceback."""
        try:
            raise ValueError("broken pipe")
        except ValueError as e:
            text = describe_error(e)

        assert text.startswith("Traceback (most recent call last):")
        assert text.endswith("ValueError: broken pipe")

    def test_unraised_error(self):
        """Test describing an error that was never raised."""
        assert describe_error(KeyError("k")) == "KeyError: 'k'"

    def test_object_with_stack(self):
        """Test duck-typed objects carrying a stack attribute."""

        class Wrapped:
            stack = "remote stack"

        assert describe_error(Wrapped()) == "remote stack"

    @pytest.mark.parametrize("value", [None, "plain string", 42])
    def test_fallback_unknown(self, value):
        """Test the UNKNOWN fallback for values without a trace."""
        assert describe_error(value) == "UNKNOWN"


class TestSummarizeError:
    """Tests for custom error summaries."""

    def test_reportable_error_has_no_summary_by_default(self):
        """Test the base error reports no properties."""
        error = ReportableError("x")

        assert isinstance(error, Reportable)
        assert summarize_error(error) is None

    def test_plain_exception(self):
        """Test a plain exception reports no properties."""
        assert summarize_error(RuntimeError("x")) is None

    def test_serializer_errors_propagate(self):
        """Test that serializer failures are left to the caller."""

        class Broken(Exception):
            def serialize_to_incident_chat(self):
                raise RuntimeError("nope")

        with pytest.raises(RuntimeError):
            summarize_error(Broken())


class TestFormatChatText:
    """Tests for the chat text layout."""

    def test_with_props(self):
        """Test the layout with a PROPS section."""
        message = ChatMessage(message="Error: M", props="X")

        text = format_chat_text(message, "prod", "id-1", "2024-01-01T00:00:00.000Z")

        assert text == (
            "[prod#id-1] @ 2024-01-01T00:00:00.000Z\n\n"
            "PROPS 📋 X\n"
            "STACK 📋 Error: M"
        )

    def test_without_props(self):
        """Test the layout without properties."""
        message = ChatMessage(message="Error: M", tag="warning")

        text = format_chat_text(message, "prod", "id-1", "ts")

        assert text == "[prod#id-1] @ ts\n\nWARNING 📋 Error: M"


def test_iso_timestamp_is_utc_with_millis():
    """Test the timestamp matches the Z-suffixed millisecond format."""
    local = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone(timedelta(hours=2)))

    assert iso_timestamp(local) == "2024-05-01T10:30:15.123Z"
