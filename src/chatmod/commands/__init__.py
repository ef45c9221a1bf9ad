"""
Chat moderation commands.

- **command_table.py**: Static keyword -> descriptor table. Adding a command
  is a new table entry, not a new branch.
- **validator.py**: Parameter rules and the pure ``validate`` check.
- **formatter.py**: Builds the dot-command protocol message and the local echo.
- **transport.py**: Protocols for the chat transport and settings collaborators.
- **dispatcher.py**: ``CommandDispatcher``, the entry point that validates,
  formats and sends commands, and handles moderator-list requests.
- **errors.py**: Exception hierarchy for rejected commands.
"""
