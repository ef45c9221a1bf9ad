"""
Type-safe wrapper for chat channel names.

Channel names are case-insensitive on the chat service, so every set and
lookup in chatmod keys on the normalized form produced here.
"""

from __future__ import annotations

from typing import Union


class ChannelName:
    """
    Normalized, hashable channel identifier.

    Surrounding whitespace is stripped and the name is lower-cased, so
    ``ChannelName(" #Foo ")`` and ``ChannelName("#foo")`` are the same key.

    Attributes:
        _value (str): The normalized channel name.

    Example:
        >>> ChannelName("#SomeStreamer") == ChannelName(" #somestreamer")
        True
        >>> ChannelName("#somestreamer") == "#somestreamer"
        False
        >>> str(ChannelName(" #a "))
        '#a'
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[str, "ChannelName"]) -> None:
        """
        Initialize a ChannelName from a string or another ChannelName.

        Raises:
            ValueError: If the value is not a string or is blank.
        """
        if isinstance(value, ChannelName):
            self._value = value._value
        elif isinstance(value, str):
            normalized = value.strip().lower()
            if not normalized:
                raise ValueError("Channel name must not be blank")
            self._value = normalized
        else:
            raise ValueError(f"Cannot create ChannelName from {type(value).__name__}: {value}")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"ChannelName({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ChannelName):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: "ChannelName") -> bool:
        if not isinstance(other, ChannelName):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)
