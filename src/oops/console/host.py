"""Console host: command dispatch with an interception hook."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from oops.registry.memory import InMemoryCommandRegistry

if TYPE_CHECKING:
    from collections.abc import Callable

    from oops.registry.base import CommandRegistryAdapter

    from .sender import Sender

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND = 'Unknown command. Type "help" for help.'
NO_PERMISSION = "&cI'm sorry, but you do not have permission to perform this command."
INTERNAL_ERROR = "&cAn internal error occurred while attempting to perform this command."


class ConsoleHost:
    """Runs typed command lines against a command registry.

    Interceptors see each raw line before it is dispatched and may suppress
    it by returning True.
    """

    def __init__(self, registry: CommandRegistryAdapter | None = None) -> None:
        self.registry = registry if registry is not None else InMemoryCommandRegistry()
        self.running = True
        self._interceptors: list[Callable[[Sender, str], bool]] = []

    def add_interceptor(self, interceptor: Callable[[Sender, str], bool]) -> None:
        self._interceptors.append(interceptor)

    def remove_interceptor(self, interceptor: Callable[[Sender, str], bool]) -> bool:
        if interceptor in self._interceptors:
            self._interceptors.remove(interceptor)
            return True
        return False

    def submit(self, sender: Sender, line: str) -> bool:
        """Process a line as typed by a sender.

        Returns:
            True if the line was handled, either by an interceptor or a command
        """
        for interceptor in self._interceptors:
            if interceptor(sender, line):
                return True
        return self.dispatch(sender, line)

    def dispatch(self, sender: Sender, line: str) -> bool:
        """Execute a command line, bypassing interceptors.

        Args:
            sender: Who runs the command
            line: Command line, with or without a leading '/'

        Returns:
            Whether the command ran successfully
        """
        line = line.strip()
        if line.startswith("/"):
            line = line[1:]
        parts = line.split()
        if not parts:
            return False

        label = parts[0].lower()
        args = parts[1:]
        command = self.registry.get(label)
        if command is None:
            sender.send_message(UNKNOWN_COMMAND)
            return False
        if not sender.has_permission(command.permission):
            sender.send_message(NO_PERMISSION)
            return False

        logger.debug(f"{sender.name} issued command: {line}")
        try:
            return command.execute(sender, label, args)
        except Exception:
            logger.exception(f"Command '{line}' failed for {sender.name}")
            sender.send_message(INTERNAL_ERROR)
            return False
