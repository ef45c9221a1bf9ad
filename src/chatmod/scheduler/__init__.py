"""
Scheduled background work for chatmod.

- **auto_poll_scheduler.py**: Periodic asyncio task that silently requests the
  moderator list for one not yet polled joined channel per interval. Reads the
  enabled flag every tick and stops cleanly on shutdown.
"""
