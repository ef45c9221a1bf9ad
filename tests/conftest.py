"""
Pytest configuration and fixtures for chatmod tests.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Keep session log files out of the working tree; must run before chatmod is imported
os.environ.setdefault("CHATMOD_LOGS_DIR", tempfile.mkdtemp(prefix="chatmod-logs-"))

# Add src directory to path so imports work
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


class FakeTransport:
    """Recording stand-in for the chat connection."""

    def __init__(self, joined=(), message_capable=None):
        self.joined = list(joined)
        # Channels that accept chat output; defaults to every joined channel
        self.message_capable = set(joined if message_capable is None else message_capable)
        self.chat_messages = []
        self.rate_limited = []
        self.system_messages = []
        self.membership_checks = []

    def is_on_channel(self, channel, require_message_capable):
        self.membership_checks.append((channel, require_message_capable))
        if channel not in self.joined:
            return False
        return not require_message_capable or channel in self.message_capable

    def send_chat_message(self, channel, text, echo_text):
        self.chat_messages.append((channel, text, echo_text))

    def send_rate_limited_message(self, channel, text, silent):
        self.rate_limited.append((channel, text, silent))

    def list_joined_channels(self):
        return list(self.joined)

    def print_system_message(self, channel, text):
        self.system_messages.append((channel, text))

    @property
    def sent_anything(self):
        return bool(self.chat_messages or self.rate_limited)


class FakeSettings:
    def __init__(self, enabled=True):
        self.enabled = enabled

    def is_auto_mods_request_enabled(self):
        return self.enabled


@pytest.fixture()
def transport():
    return FakeTransport(joined=["#alpha", "#beta"])


@pytest.fixture()
def settings():
    return FakeSettings()


@pytest.fixture()
def dispatcher(transport):
    from chatmod.commands.dispatcher import CommandDispatcher

    return CommandDispatcher(transport)


@pytest.fixture()
def make_transport():
    return FakeTransport


@pytest.fixture()
def make_settings():
    return FakeSettings
