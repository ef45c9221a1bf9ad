"""
Command descriptor types for chat moderation commands.

This module defines the enums and dataclasses that make up the static command
table: how a command's parameter is checked, how its protocol message and echo
are built, which channel check guards it and what the dispatcher does with it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from chatmod.datatypes.channel_datatypes import ChannelName


class CommandFamily(Enum):
    """How a command turns its parameter into protocol text and echo."""

    FIXED = "fixed"
    TARGETED = "targeted"
    OPTIONAL_SECONDS = "optional_seconds"
    TIMEOUT = "timeout"

    def __str__(self) -> str:
        return self.value


class ChannelCheck(Enum):
    """Channel state a command needs before anything is sent."""

    # Joined and currently allowed to send chat messages
    MESSAGE_CAPABLE = "message_capable"
    # Joined, output capability not required
    MEMBERSHIP = "membership"

    @property
    def requires_message_capable(self) -> bool:
        return self is ChannelCheck.MESSAGE_CAPABLE


class CommandAction(Enum):
    """What the dispatcher does once a command's parameter is accepted."""

    SEND = "send"
    REQUEST_MODS_SILENT = "request_mods_silent"


@dataclass(frozen=True, slots=True)
class ParameterRule:
    """Syntax rule a command parameter must fully match after trimming.

    Attributes:
        name: Short rule name used in logs.
        pattern: Compiled pattern matched against the whole trimmed parameter.
        allow_empty: Whether a missing or blank parameter is accepted.
    """
    name: str
    pattern: re.Pattern[str]
    allow_empty: bool = False


@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    """One entry of the static command table.

    Attributes:
        keyword: Exact, case-sensitive keyword the user types after the slash.
        family: Formatting family of the command.
        protocol: Dot-command sent to the server, without arguments.
        echo: Echo template; ``{param}`` and ``{time}`` are interpolated.
        usage_args: Argument synopsis shown in the usage hint.
        rule: Parameter rule, or None when the command takes no parameter.
        channel_check: Channel state required before sending.
        action: Dispatcher action for the command.
        channel_independent: Usage hints go to the global context, not the channel.
        echo_with_time: Echo template used when a positive time is given.
    """
    keyword: str
    family: CommandFamily
    protocol: str
    echo: str
    usage_args: str = ""
    rule: Optional[ParameterRule] = None
    channel_check: ChannelCheck = ChannelCheck.MESSAGE_CAPABLE
    action: CommandAction = CommandAction.SEND
    channel_independent: bool = False
    echo_with_time: str = ""

    @property
    def usage(self) -> str:
        """Usage hint in the form ``Usage: /<command> <args>``."""
        if self.usage_args:
            return f"Usage: /{self.keyword} {self.usage_args}"
        return f"Usage: /{self.keyword}"


@dataclass(frozen=True, slots=True)
class FormattedCommand:
    """Protocol message to send and the echo shown to the user."""
    protocol_message: str
    echo_message: str


@dataclass(slots=True)
class ModeratorListResponse:
    """Result of handling one moderator-list response.

    Attributes:
        channel: Channel the response belongs to.
        names: Parsed moderator names, possibly empty.
        silent: True when the response answered a silent request and was not printed.
    """
    channel: ChannelName
    names: List[str] = field(default_factory=list)
    silent: bool = False
