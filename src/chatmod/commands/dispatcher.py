"""
Command dispatcher: routes a typed chat command to the chat transport.

The dispatcher looks the keyword up in the static command table, validates
the parameter, builds the protocol message and echo, checks that the channel
is joined and finally hands the message to the transport. It also owns the
moderator-list request path: silent requests are recorded in the
:class:`ModsRequestTracker` so that the matching response is not printed.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Union

from chatmod.commands import command_table
from chatmod.commands.errors import CommandUsageError, InternalInconsistencyError
from chatmod.commands.formatter import DurationFormatter, format_command
from chatmod.commands.transport import ChatTransport
from chatmod.commands.validator import validate
from chatmod.datatypes.channel_datatypes import ChannelName
from chatmod.datatypes.command_datatypes import (
    ChannelCheck,
    CommandAction,
    CommandDescriptor,
    FormattedCommand,
    ModeratorListResponse,
)
from chatmod.moderators.moderator_list import parse_moderator_list
from chatmod.moderators.mods_request_tracker import ModsRequestTracker
from chatmod.util.format_utils import format_duration
from chatmod.util.logger import get_logger

logger = get_logger("command_dispatcher")

ChannelLike = Union[str, ChannelName]
ActionHandler = Callable[[ChannelName, CommandDescriptor, FormattedCommand], None]

NO_MODERATORS_MESSAGE = "There are no moderators of this room."


class CommandDispatcher:
    """
    Entry point for moderation commands typed by the user.

    Args:
        transport: Connection used for membership checks, sending and printing.
        tracker: Moderator-list request state; a fresh one is created if omitted.
        duration_formatter: Formats timeout durations for echoes.
    """

    def __init__(
        self,
        transport: ChatTransport,
        tracker: Optional[ModsRequestTracker] = None,
        duration_formatter: DurationFormatter = format_duration,
    ) -> None:
        self.transport = transport
        self.tracker = tracker or ModsRequestTracker()
        self.duration_formatter = duration_formatter
        self._actions: Dict[CommandAction, ActionHandler] = {
            CommandAction.SEND: self._send,
            CommandAction.REQUEST_MODS_SILENT: self._fix_mods,
        }

    # --------------------------
    # Command entry point
    # --------------------------
    def dispatch(self, channel: Optional[ChannelLike], command: str, parameter: Optional[str] = None) -> bool:
        """
        Handle one command typed by the user.

        Args:
            channel: Channel the command was typed in. None or a blank name means
                no channel context: usage hints are printed globally and nothing is sent.
            command: Keyword without the leading slash, matched exactly.
            parameter: Raw parameter text, or None if none was given.

        Returns:
            bool: False if the keyword is not a known command, True otherwise,
            including when the parameter was rejected or the channel is not joined.
        """
        descriptor = command_table.lookup(command)
        if descriptor is None:
            logger.debug("Not a moderation command: %r", command)
            return False

        channel_name = self._channel_context(channel)

        param: Optional[str] = None
        if descriptor.rule is not None:
            param = validate(descriptor.rule, parameter)
            if param is None:
                self._print_usage(channel_name, descriptor, descriptor.usage)
                return True

        try:
            formatted = format_command(descriptor, param, self.duration_formatter)
        except InternalInconsistencyError as exc:
            logger.error(
                "Parameter %r for /%s passed validation but could not be formatted: %s",
                parameter, command, exc.detail,
            )
            self._print_usage(channel_name, descriptor, str(exc))
            return True
        except CommandUsageError as exc:
            self._print_usage(channel_name, descriptor, str(exc))
            return True

        if channel_name is None or not self._is_on_channel(channel_name, descriptor.channel_check):
            logger.debug("Dropping /%s, not on channel %s", command, channel_name)
            return True

        self._actions[descriptor.action](channel_name, descriptor, formatted)
        return True

    def commands(self) -> List[str]:
        """Return every known command keyword, sorted."""
        return sorted(command_table.COMMAND_TABLE)

    # --------------------------
    # Moderator list
    # --------------------------
    def request_mods_silent(self, channel: Optional[ChannelLike]) -> bool:
        """
        Request the moderator list without printing the response.

        Only channel membership is required, the channel does not need to
        accept chat output. Returns True if the request was sent.
        """
        channel_name = self._channel_context(channel)
        if channel_name is None or not self._is_on_channel(channel_name, ChannelCheck.MEMBERSHIP):
            logger.debug("Not requesting mods for %s, not on channel", channel_name)
            return False

        self.tracker.mark_silent_pending(channel_name)
        self.transport.send_rate_limited_message(
            str(channel_name), command_table.MODS_REQUEST_MESSAGE, True
        )
        return True

    def handle_moderator_list(self, channel: ChannelLike, text: str) -> ModeratorListResponse:
        """
        Process a moderator-list response received for ``channel``.

        A response answering a silent request is consumed quietly; any other
        response is printed to the channel.
        """
        channel_name = ChannelName(channel)
        names = parse_moderator_list(text)
        silent = self.tracker.consume_silent_pending(channel_name)

        if silent:
            logger.debug("Silent moderator list for %s: %d names", channel_name, len(names))
        elif names:
            self.transport.print_system_message(str(channel_name), "Moderators: " + ", ".join(names))
        else:
            self.transport.print_system_message(str(channel_name), NO_MODERATORS_MESSAGE)

        return ModeratorListResponse(channel=channel_name, names=names, silent=silent)

    def is_default_mods_handling_suppressed(self) -> bool:
        """True while any silent moderator-list request is outstanding."""
        return self.tracker.has_pending_silent()

    # --------------------------
    # Session hooks
    # --------------------------
    def on_channel_left(self, channel: ChannelLike) -> None:
        channel_name = ChannelName(channel)
        self.tracker.clear_polled(channel_name)
        self.tracker.clear_silent_pending(channel_name)

    def on_disconnect(self) -> None:
        self.tracker.clear_polled()
        self.tracker.clear_silent_pending()
        logger.info("Cleared moderator-list request state after disconnect")

    # --------------------------
    # Action handlers
    # --------------------------
    def _send(self, channel: ChannelName, descriptor: CommandDescriptor, formatted: FormattedCommand) -> None:
        self.transport.send_chat_message(str(channel), formatted.protocol_message, formatted.echo_message)
        self.transport.print_system_message(str(channel), formatted.echo_message)
        logger.debug("Sent %r to %s", formatted.protocol_message, channel)

    def _fix_mods(self, channel: ChannelName, descriptor: CommandDescriptor, formatted: FormattedCommand) -> None:
        self.transport.print_system_message(str(channel), formatted.echo_message)
        self.request_mods_silent(channel)

    # --------------------------
    # Helpers
    # --------------------------
    @staticmethod
    def _channel_context(channel: Optional[ChannelLike]) -> Optional[ChannelName]:
        """Return the normalized channel, or None when the command has no channel context."""
        if channel is None or (isinstance(channel, str) and not channel.strip()):
            return None
        return ChannelName(channel)

    def _is_on_channel(self, channel: ChannelName, check: ChannelCheck) -> bool:
        return bool(self.transport.is_on_channel(str(channel), check.requires_message_capable))

    def _print_usage(self, channel: Optional[ChannelName], descriptor: CommandDescriptor, message: str) -> None:
        target = None if descriptor.channel_independent or channel is None else str(channel)
        self.transport.print_system_message(target, message)
