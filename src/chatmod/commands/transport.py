"""Behavioral contracts for the collaborators the dispatcher talks to."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, runtime_checkable


@runtime_checkable
class ChatTransport(Protocol):
    """Connection to the chat service, owned by the client.

    The transport sends bytes, tracks channel membership and applies its own
    spam protection to rate-limited sends. It prints system messages; chatmod
    never writes to the user directly.
    """

    def is_on_channel(self, channel: str, require_message_capable: bool) -> bool: ...

    def send_chat_message(self, channel: str, text: str, echo_text: str) -> None: ...

    def send_rate_limited_message(self, channel: str, text: str, silent: bool) -> None: ...

    def list_joined_channels(self) -> Iterable[str]: ...

    def print_system_message(self, channel: Optional[str], text: str) -> None: ...


@runtime_checkable
class ModsRequestSettingsSource(Protocol):
    def is_auto_mods_request_enabled(self) -> bool: ...


__all__ = ["ChatTransport", "ModsRequestSettingsSource"]
