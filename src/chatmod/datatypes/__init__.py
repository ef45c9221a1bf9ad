"""
Data types shared across chatmod.

- **channel_datatypes.py**: ``ChannelName``, the normalized case-insensitive
  channel key used by every tracking set.
- **command_datatypes.py**: Command table descriptors, parameter rules,
  formatted command pairs and moderator-list response results.
"""
