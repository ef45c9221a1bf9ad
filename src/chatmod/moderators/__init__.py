"""
Moderator-list request tracking.

- **mods_request_tracker.py**: Thread-safe sets of channels with an
  outstanding silent ``.mods`` request and channels already auto-polled.
- **moderator_list.py**: Pure parser for the moderator-list response text.
"""
