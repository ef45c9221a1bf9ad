"""
Bookkeeping for moderator-list requests.

Two independent flags are kept per channel:

- *pending silent*: a silent ``.mods`` request was sent and its response has
  not arrived yet. The next response for the channel is consumed as silent.
- *already polled*: the background scheduler has requested the list for the
  channel since the set was last cleared (on part or disconnect).

Both sets are guarded by one lock, so the message-receiving thread, user
input handling and the scheduler can use the tracker at the same time.
"""

from __future__ import annotations

import threading
from typing import Optional, Set, Union

from chatmod.datatypes.channel_datatypes import ChannelName
from chatmod.util.logger import get_logger

logger = get_logger("mods_request_tracker")

ChannelLike = Union[str, ChannelName]


class ModsRequestTracker:
    """
    Thread-safe state of silent and already-polled moderator-list requests.

    Attributes:
        _pending_silent (set[ChannelName]): Channels waiting for a silent response.
        _polled (set[ChannelName]): Channels auto-polled since the last reset.
        _lock (threading.Lock): Guards both sets.
    """

    def __init__(self) -> None:
        self._pending_silent: Set[ChannelName] = set()
        self._polled: Set[ChannelName] = set()
        self._lock = threading.Lock()

    # --------------------------
    # Silent requests
    # --------------------------
    def mark_silent_pending(self, channel: ChannelLike) -> None:
        """Record that a silent request is outstanding for ``channel``. Idempotent."""
        with self._lock:
            self._pending_silent.add(ChannelName(channel))

    def consume_silent_pending(self, channel: ChannelLike) -> bool:
        """Remove ``channel`` from the pending set, returning whether it was there."""
        key = ChannelName(channel)
        with self._lock:
            if key in self._pending_silent:
                self._pending_silent.remove(key)
                return True
            return False

    def has_pending_silent(self) -> bool:
        with self._lock:
            return bool(self._pending_silent)

    def clear_silent_pending(self, channel: Optional[ChannelLike] = None) -> None:
        """Forget one channel's pending silent request, or all of them."""
        with self._lock:
            if channel is None:
                self._pending_silent.clear()
            else:
                self._pending_silent.discard(ChannelName(channel))

    # --------------------------
    # Auto polling
    # --------------------------
    def mark_polled(self, channel: ChannelLike) -> None:
        with self._lock:
            self._polled.add(ChannelName(channel))

    def is_polled(self, channel: ChannelLike) -> bool:
        key = ChannelName(channel)
        with self._lock:
            return key in self._polled

    def claim_for_poll(self, channel: ChannelLike) -> bool:
        """Mark ``channel`` polled unless it already was.

        Returns True when this call marked it, so exactly one caller wins when
        several race for the same channel.
        """
        key = ChannelName(channel)
        with self._lock:
            if key in self._polled:
                return False
            self._polled.add(key)
            return True

    def clear_polled(self, channel: Optional[ChannelLike] = None) -> None:
        """Make one channel, or every channel, eligible for auto polling again."""
        with self._lock:
            if channel is None:
                self._polled.clear()
            else:
                self._polled.discard(ChannelName(channel))
        logger.debug("Cleared polled state for %s", channel if channel is not None else "all channels")

    # --------------------------
    # Introspection
    # --------------------------
    def pending_silent_channels(self) -> Set[ChannelName]:
        """Return a snapshot of channels with an outstanding silent request."""
        with self._lock:
            return set(self._pending_silent)

    def polled_channels(self) -> Set[ChannelName]:
        """Return a snapshot of channels already auto-polled."""
        with self._lock:
            return set(self._polled)
