class ChatCommandError(Exception):
    """Base class for errors raised while handling a chat command."""


class CommandUsageError(ChatCommandError):
    """A recognized command was given parameters it cannot use."""

    def __init__(self, message: str, detail: str = "") -> None:
        super().__init__(message)
        self.detail = detail


class InternalInconsistencyError(CommandUsageError):
    """The validator accepted a parameter the formatter cannot interpret."""
