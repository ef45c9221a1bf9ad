"""
Static table of the chat moderation commands.

Every keyword maps to exactly one :class:`CommandDescriptor`. Lookup is an
exact, case-sensitive match on the keyword as typed, so aliases such as
``to`` are separate entries.
"""

from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from chatmod.commands import validator
from chatmod.datatypes.command_datatypes import (
    CommandAction,
    CommandDescriptor,
    CommandFamily,
)

MODS_REQUEST_MESSAGE = ".mods"

TIMEOUT = CommandDescriptor(
    keyword="timeout",
    family=CommandFamily.TIMEOUT,
    protocol=".timeout",
    echo="Trying to timeout {param}..",
    echo_with_time="Trying to timeout {param} ({time})",
    usage_args="<nick> [time]",
    rule=validator.USERNAME_WITH_SECONDS,
)

_DESCRIPTORS = (
    TIMEOUT,
    replace(TIMEOUT, keyword="to"),
    CommandDescriptor(
        keyword="ban",
        family=CommandFamily.TARGETED,
        protocol=".ban",
        echo="Trying to ban {param}..",
        usage_args="<nick>",
        rule=validator.USERNAME,
    ),
    CommandDescriptor(
        keyword="unban",
        family=CommandFamily.TARGETED,
        protocol=".unban",
        echo="Trying to unban {param}..",
        usage_args="<nick>",
        rule=validator.USERNAME,
    ),
    CommandDescriptor(
        keyword="mod",
        family=CommandFamily.TARGETED,
        protocol=".mod",
        echo="Trying to mod {param}..",
        usage_args="<nick>",
        rule=validator.USERNAME,
    ),
    CommandDescriptor(
        keyword="unmod",
        family=CommandFamily.TARGETED,
        protocol=".unmod",
        echo="Trying to unmod {param}..",
        usage_args="<nick>",
        rule=validator.USERNAME,
    ),
    CommandDescriptor(
        keyword="host",
        family=CommandFamily.TARGETED,
        protocol=".host",
        echo="Trying to host {param}..",
        usage_args="<stream>",
        rule=validator.USERNAME,
    ),
    CommandDescriptor(
        keyword="unhost",
        family=CommandFamily.FIXED,
        protocol=".unhost",
        echo="Trying to turn off host mode..",
    ),
    # The chat color belongs to the user, not to the channel
    CommandDescriptor(
        keyword="color",
        family=CommandFamily.TARGETED,
        protocol=".color",
        echo="Trying to change color to {param}",
        usage_args="<newcolor>",
        rule=validator.COLOR,
        channel_independent=True,
    ),
    CommandDescriptor(
        keyword="slow",
        family=CommandFamily.OPTIONAL_SECONDS,
        protocol=".slow",
        echo="Trying to turn on slowmode..",
        echo_with_time="Trying to turn on slowmode ({time})",
        usage_args="[time]",
        rule=validator.OPTIONAL_SECONDS,
    ),
    CommandDescriptor(
        keyword="slowoff",
        family=CommandFamily.FIXED,
        protocol=".slowoff",
        echo="Trying to turn off slowmode..",
    ),
    CommandDescriptor(
        keyword="subscribers",
        family=CommandFamily.FIXED,
        protocol=".subscribers",
        echo="Trying to turn on subscribers mode..",
    ),
    CommandDescriptor(
        keyword="subscribersoff",
        family=CommandFamily.FIXED,
        protocol=".subscribersoff",
        echo="Trying to turn off subscribers mode..",
    ),
    CommandDescriptor(
        keyword="r9k",
        family=CommandFamily.FIXED,
        protocol=".r9kbeta",
        echo="Trying to turn on r9k mode..",
    ),
    CommandDescriptor(
        keyword="r9koff",
        family=CommandFamily.FIXED,
        protocol=".r9kbetaoff",
        echo="Trying to turn r9k mode off..",
    ),
    CommandDescriptor(
        keyword="clear",
        family=CommandFamily.FIXED,
        protocol=".clear",
        echo="Trying to clear channel..",
    ),
    CommandDescriptor(
        keyword="mods",
        family=CommandFamily.FIXED,
        protocol=MODS_REQUEST_MESSAGE,
        echo="Requesting moderator list..",
    ),
    # Re-requests the moderator list without printing it
    CommandDescriptor(
        keyword="fixmods",
        family=CommandFamily.FIXED,
        protocol=MODS_REQUEST_MESSAGE,
        echo="Trying to fix moderators..",
        action=CommandAction.REQUEST_MODS_SILENT,
    ),
)


def build_command_table(descriptors: Iterable[CommandDescriptor]) -> Mapping[str, CommandDescriptor]:
    """Index descriptors by keyword, rejecting duplicate keywords."""
    table: Dict[str, CommandDescriptor] = {}
    for descriptor in descriptors:
        if descriptor.keyword in table:
            raise ValueError(f"Duplicate command keyword: {descriptor.keyword!r}")
        table[descriptor.keyword] = descriptor
    return MappingProxyType(table)


COMMAND_TABLE: Mapping[str, CommandDescriptor] = build_command_table(_DESCRIPTORS)


def lookup(keyword: str) -> Optional[CommandDescriptor]:
    """Return the descriptor for ``keyword`` or None if it is not a command."""
    return COMMAND_TABLE.get(keyword)
