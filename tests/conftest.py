"""
Pytest configuration and shared fixtures.
"""

import os

import pytest

os.environ.setdefault("WILDFLY_MONITOR_SKIP_DEFAULT_LOGGING", "1")

from wildfly_monitor.common.errors import ErrorCode, TransportError


class RecordingSink:
    """Notification sink that records every message it is asked to send."""

    def __init__(self, fail_for=()):
        self.sent = []
        self.attempts = []
        self._fail_for = set(fail_for)

    def send(self, channel, message):
        self.attempts.append((channel, message))
        fallback = message.attachments[0].fallback
        if fallback in self._fail_for:
            raise TransportError(
                ErrorCode.TRANSPORT_FAILED,
                "Http Status is 500",
                transport_type="slack",
                status_code=500,
            )
        self.sent.append((channel, message))

    @property
    def colors(self):
        return [message.attachments[0].color for _, message in self.sent]

    @property
    def descriptions(self):
        return [message.attachments[0].fallback for _, message in self.sent]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def deployments_dir(tmp_path):
    """An empty WildFly deployments directory."""
    path = tmp_path / "deployments"
    path.mkdir()
    return path


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""

    def _write(text):
        path = tmp_path / "config.yaml"
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def valid_config_text(deployments_dir):
    return f"""
slack:
  api_url: "https://hooks.slack.example/services/T000/B000/XXXX"
  channel: "#deploy"

wildfly:
  war_path: "{deployments_dir / 'app.war'}"

app:
  duration: 3
  notify_marker:
    - failed
"""
