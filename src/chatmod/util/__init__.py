"""
Utility functions and helpers for chatmod.

This package provides reusable utilities:

- **logger.py**: Centralized logging configuration with colored console output,
  rotating file handlers, and per-session log aggregation. Uses prompt_toolkit
  so log lines do not break an active input prompt.

- **format_utils.py**: Human-readable duration formatting used in timeout
  echoes.
"""
