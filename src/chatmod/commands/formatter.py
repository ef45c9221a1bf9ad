"""
Protocol message and echo formatting for chat commands.

Formatting is pure: given a descriptor and an already validated parameter it
returns the dot-command to send and the text echoed to the user. The only
failure is a parameter the validator accepted but the formatter cannot read,
which is reported as :class:`InternalInconsistencyError`.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from chatmod.commands.errors import InternalInconsistencyError
from chatmod.datatypes.command_datatypes import CommandDescriptor, CommandFamily, FormattedCommand
from chatmod.util.format_utils import format_duration

DurationFormatter = Callable[[int], str]


def format_command(
    descriptor: CommandDescriptor,
    param: Optional[str] = None,
    duration_formatter: DurationFormatter = format_duration,
) -> FormattedCommand:
    """Build the protocol message and echo for ``descriptor``.

    Args:
        descriptor: Table entry of the command.
        param: Validated, trimmed parameter; None or empty when absent.
        duration_formatter: Turns seconds into a human-friendly duration, used
            by timeout echoes.

    Raises:
        InternalInconsistencyError: A numeric argument does not parse as an integer.
    """
    param = param or ""
    family = descriptor.family

    if family is CommandFamily.FIXED:
        return FormattedCommand(descriptor.protocol, descriptor.echo)

    if family is CommandFamily.TARGETED:
        return FormattedCommand(
            f"{descriptor.protocol} {param}",
            descriptor.echo.format(param=param),
        )

    if family is CommandFamily.OPTIONAL_SECONDS:
        seconds = _parse_seconds(descriptor, param) if param else 0
        if seconds <= 0:
            return FormattedCommand(descriptor.protocol, descriptor.echo)
        return FormattedCommand(
            f"{descriptor.protocol} {seconds}",
            descriptor.echo_with_time.format(time=f"{seconds}s"),
        )

    if family is CommandFamily.TIMEOUT:
        name, seconds = _split_target_and_seconds(descriptor, param)
        if seconds <= 0:
            return FormattedCommand(
                f"{descriptor.protocol} {name}",
                descriptor.echo.format(param=name),
            )
        return FormattedCommand(
            f"{descriptor.protocol} {name} {seconds}",
            descriptor.echo_with_time.format(param=name, time=timeout_time_string(seconds, duration_formatter)),
        )

    raise InternalInconsistencyError(descriptor.usage, f"unsupported command family {family}")


def timeout_time_string(seconds: int, duration_formatter: DurationFormatter = format_duration) -> str:
    """Return ``"<N>s/<formatted>"``, or only ``"<N>s"`` when both read the same."""
    only_seconds = f"{seconds}s"
    formatted = duration_formatter(seconds)
    if formatted == only_seconds:
        return only_seconds
    return f"{only_seconds}/{formatted}"


def _split_target_and_seconds(descriptor: CommandDescriptor, param: str) -> Tuple[str, int]:
    parts = param.split()
    if not parts:
        raise InternalInconsistencyError(descriptor.usage, "no target given")
    if len(parts) < 2:
        return parts[0], 0
    return parts[0], _parse_seconds(descriptor, parts[1])


def _parse_seconds(descriptor: CommandDescriptor, text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise InternalInconsistencyError(
            f"{descriptor.usage} (no valid time specified)",
            f"could not parse {text!r} as seconds",
        ) from None
