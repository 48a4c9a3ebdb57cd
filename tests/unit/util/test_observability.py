"""Unit tests for observability settings."""

import pytest

from hunt.config import ObservabilitySettings
from hunt.util.observability import should_send


class TestShouldSend:
    """Tests for deciding whether telemetry leaves the process."""

    @pytest.mark.parametrize(
        ("token", "flag", "expected"),
        [
            (None, None, False),
            ("tok", None, True),
            ("tok", False, False),
            (None, True, True),
        ],
    )
    def test_decision(self, token, flag, expected):
        settings = ObservabilitySettings(logfire_token=token, send_to_logfire=flag)

        assert should_send(settings) is expected
