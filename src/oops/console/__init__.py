"""Reference console host: senders, dispatch and interception."""

from .commands import register_builtin_commands
from .host import ConsoleHost
from .sender import ConsoleSender, Sender
from .text import legacy_text, strip_codes

__all__ = [
    "ConsoleHost",
    "ConsoleSender",
    "Sender",
    "legacy_text",
    "register_builtin_commands",
    "strip_codes",
]
