"""Unit tests for SegmentTracker.

Mocks the Segment SDK Client so we can test the adapter's wiring and error
handling without network access.
"""

from unittest.mock import MagicMock, patch

import pytest

from oshub.adapters.analytics.segment import SegmentTracker
from oshub.core.config import Settings
from oshub.core.exceptions import ConfigurationError


def _settings(**overrides) -> Settings:
    defaults = dict(SEGMENT_WRITE_KEY="wk_test", ANALYTICS_ENABLED=True)
    defaults.update(overrides)
    return Settings(**defaults)


@pytest.fixture
def mock_client_cls():
    with patch("oshub.adapters.analytics.segment.Client") as cls:
        yield cls


def test_missing_write_key_raises_configuration_error(mock_client_cls):
    with pytest.raises(ConfigurationError) as exc_info:
        SegmentTracker(_settings(SEGMENT_WRITE_KEY=None))

    assert exc_info.value.setting == "SEGMENT_WRITE_KEY"
    mock_client_cls.assert_not_called()


def test_empty_write_key_raises_configuration_error(mock_client_cls):
    with pytest.raises(ConfigurationError):
        SegmentTracker(_settings(SEGMENT_WRITE_KEY=""))


def test_client_built_from_settings(mock_client_cls):
    SegmentTracker(_settings(SEGMENT_HOST="https://events.eu1.segmentapis.com", SEGMENT_SYNC_MODE=True))

    kwargs = mock_client_cls.call_args.kwargs
    assert kwargs["write_key"] == "wk_test"
    assert kwargs["host"] == "https://events.eu1.segmentapis.com"
    assert kwargs["sync_mode"] is True
    assert callable(kwargs["on_error"])


def test_host_omitted_when_not_configured(mock_client_cls):
    SegmentTracker(_settings())

    assert "host" not in mock_client_cls.call_args.kwargs


def test_calls_are_forwarded_to_client(mock_client_cls):
    client = mock_client_cls.return_value
    tracker = SegmentTracker(_settings())

    tracker.identify("u1", {"email": "a@x.com"})
    tracker.group("u1", "opensourcehub")
    tracker.track("u1", "[OSH] User created")
    tracker.flush()

    client.identify.assert_called_once_with(user_id="u1", traits={"email": "a@x.com"})
    client.group.assert_called_once_with(user_id="u1", group_id="opensourcehub", traits={})
    client.track.assert_called_once_with(user_id="u1", event="[OSH] User created", properties={})
    client.flush.assert_called_once_with()


def test_client_errors_are_logged_not_raised(mock_client_cls):
    client = mock_client_cls.return_value
    client.identify.side_effect = AssertionError("traits must be a dict")
    client.track.side_effect = RuntimeError("queue full")
    tracker = SegmentTracker(_settings())

    tracker.identify("u1", {})
    tracker.track("u1", "[OSH] User deleted")

    client.identify.assert_called_once()
    client.track.assert_called_once()


def test_disabled_tracker_needs_no_key_and_drops_calls(mock_client_cls):
    tracker = SegmentTracker(_settings(ANALYTICS_ENABLED=False, SEGMENT_WRITE_KEY=None))

    tracker.identify("u1", {"email": "a@x.com"})
    tracker.group("u1", "opensourcehub")
    tracker.track("u1", "[OSH] User created")
    tracker.flush()

    mock_client_cls.assert_not_called()


def test_on_error_callback_logs_failure():
    logged = MagicMock()
    with patch("oshub.adapters.analytics.segment.logger", logged):
        SegmentTracker._on_error(RuntimeError("503"), [{"type": "track"}, {"type": "identify"}])

    message = logged.error.call_args.args[0]
    assert "2 message(s)" in message
    assert "503" in message
