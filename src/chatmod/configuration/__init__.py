"""
Configuration management for chatmod.

- **app_configuration.py**: File-locked YAML configuration loader for global
  settings. Exposes the moderator-list auto request settings (enabled flag,
  initial delay, interval) and falls back gracefully on missing or malformed
  config files.
"""
