from __future__ import annotations

from datetime import UTC, datetime

import pytest

from window_sort.observability import LogMessage, log_to_dict


def test_log_message_requires_level_and_message() -> None:
    # Logging payloads are structured but still require explicit semantic basics.
    with pytest.raises(ValueError):
        LogMessage(level="", message="")


def test_log_message_defaults_to_utc_timestamp() -> None:
    message = LogMessage(level="info", message="hello")
    assert message.timestamp.tzinfo is UTC
    assert message.fields == {}


def test_log_to_dict_uses_z_suffix() -> None:
    message = LogMessage(level="info", message="hello", timestamp=datetime(2024, 5, 6, tzinfo=UTC))
    assert log_to_dict(message)["timestamp"] == "2024-05-06T00:00:00Z"
