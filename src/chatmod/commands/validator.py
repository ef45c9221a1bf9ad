"""Parameter syntax rules for chat commands."""

from __future__ import annotations

import re
from typing import Optional

from chatmod.datatypes.command_datatypes import ParameterRule

USERNAME_REGEX = r"[A-Za-z0-9_]+"

USERNAME = ParameterRule(
    name="username",
    pattern=re.compile(USERNAME_REGEX),
)
USERNAME_WITH_SECONDS = ParameterRule(
    name="username_with_seconds",
    pattern=re.compile(rf"{USERNAME_REGEX}(\s+[0-9]+)?"),
)
OPTIONAL_SECONDS = ParameterRule(
    name="optional_seconds",
    pattern=re.compile(r"-?[0-9]+"),
    allow_empty=True,
)
COLOR = ParameterRule(
    name="color",
    pattern=re.compile(r"\S+"),
)


def validate(rule: ParameterRule, raw: Optional[str]) -> Optional[str]:
    """Check ``raw`` against ``rule``.

    Returns the trimmed parameter when it is accepted, ``None`` otherwise. A
    missing or blank parameter is accepted only by rules that allow empty,
    in which case the empty string is returned.
    """
    if raw is None:
        return "" if rule.allow_empty else None

    trimmed = raw.strip()
    if not trimmed:
        return "" if rule.allow_empty else None

    if rule.pattern.fullmatch(trimmed) is None:
        return None
    return trimmed
