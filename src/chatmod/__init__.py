"""
chatmod - Moderation command core for channel-based chat clients

chatmod turns the moderation commands a user types into a chat client
(``/ban``, ``/timeout``, ``/slow``, ``/host`` ...) into the dot-command
messages the chat service understands, and keeps track of moderator-list
requests sent on the user's behalf.

Core Components:

- **Commands**: Static command table, parameter validation, protocol/echo
  formatting and the dispatcher that ties them to the chat transport
- **Moderators**: Thread-safe bookkeeping of silent and already-polled
  moderator-list requests, plus parsing of the moderator-list response
- **Scheduler**: Background task that requests the moderator list for one
  newly joined channel at a time
- **Configuration**: YAML application settings and logging

Usage:
    from chatmod.commands.dispatcher import CommandDispatcher
    dispatcher = CommandDispatcher(transport)
    dispatcher.dispatch("#channel", "ban", "spammer")
"""
