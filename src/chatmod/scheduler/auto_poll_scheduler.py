"""Background requests of the moderator list for joined channels.

Every tick requests the list silently for at most one joined channel that has
not been polled yet, so the outbound request rate stays at one channel per
interval no matter how many channels are joined. Once every joined channel
has been polled, ticks are no-ops until the polled set is cleared on part or
disconnect.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from chatmod.commands.dispatcher import CommandDispatcher
from chatmod.commands.transport import ModsRequestSettingsSource
from chatmod.configuration.mods_request_settings import (
    DEFAULT_INITIAL_DELAY_SECONDS,
    DEFAULT_INTERVAL_SECONDS,
)
from chatmod.datatypes.channel_datatypes import ChannelName
from chatmod.util.logger import get_logger

logger = get_logger("auto_poll_scheduler")


class AutoPollScheduler:
    """
    Periodic task that auto-requests the moderator list, one channel per tick.

    Args:
        dispatcher: Dispatcher whose silent request path and tracker are used.
        settings: Source of the auto request enabled flag, read every tick.
        initial_delay: Seconds before the first tick.
        interval: Seconds between ticks.
    """

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        settings: ModsRequestSettingsSource,
        initial_delay: float = DEFAULT_INITIAL_DELAY_SECONDS,
        interval: float = DEFAULT_INTERVAL_SECONDS,
    ) -> None:
        self._dispatcher = dispatcher
        self._settings = settings
        self._initial_delay = initial_delay
        self._interval = interval
        self._task: asyncio.Task | None = None
        self._stopped = False

    @classmethod
    def from_config(cls, dispatcher: CommandDispatcher, config=None) -> "AutoPollScheduler":
        """Build a scheduler using the ``mods_request`` section of the app config."""
        if config is None:
            from chatmod.configuration.app_configuration import app_config
            config = app_config
        mods_request = config.mods_request
        return cls(
            dispatcher,
            config,
            initial_delay=mods_request.initial_delay_seconds,
            interval=mods_request.interval_seconds,
        )

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def tick(self) -> Optional[ChannelName]:
        """Run one polling step.

        Returns the channel a silent request was issued for, or None when the
        feature is disabled or every joined channel was already polled.
        """
        if not self._settings.is_auto_mods_request_enabled():
            return None

        tracker = self._dispatcher.tracker
        joined = sorted({ChannelName(channel) for channel in self._dispatcher.transport.list_joined_channels()})
        for channel in joined:
            if tracker.claim_for_poll(channel):
                logger.info("Auto-requesting mods for %s", channel)
                self._dispatcher.request_mods_silent(channel)
                return channel
        return None

    async def _run_loop(self) -> None:
        """Wait the initial delay, then tick every interval until cancelled."""
        logger.info(
            "Starting moderator-list auto requests (delay=%.1fs, interval=%.1fs)",
            self._initial_delay, self._interval,
        )
        try:
            await asyncio.sleep(self._initial_delay)
            while not self._stopped:
                try:
                    self.tick()
                except Exception as exc:
                    logger.error("Moderator-list auto request failed: %s", exc)
                await asyncio.sleep(self._interval)
        except asyncio.CancelledError:
            logger.info("Moderator-list auto requests cancelled")
            raise

    def start(self) -> None:
        """Start the background task if it is not already running."""
        if self.running:
            logger.warning("Auto poll task already running")
            return
        self._stopped = False
        self._task = asyncio.create_task(self._run_loop(), name="chatmod-auto-poll")

    async def shutdown(self) -> None:
        """Stop the task. No tick starts after this returns."""
        self._stopped = True
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
        logger.info("Auto poll scheduler shutdown complete")
