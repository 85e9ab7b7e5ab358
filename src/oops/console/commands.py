"""Built-in commands for the console host."""

from __future__ import annotations

from typing import TYPE_CHECKING

from oops import __version__
from oops.registry.base import KnownCommand

if TYPE_CHECKING:
    from .host import ConsoleHost
    from .sender import Sender


def register_builtin_commands(host: ConsoleHost) -> list[KnownCommand]:
    """Register the stock command set on a host's registry.

    Returns:
        The registered commands
    """

    def help_command(sender: Sender, label: str, args: list[str]) -> bool:
        sender.send_message("&6--- Available commands ---")
        for command in host.registry.commands():
            if not sender.has_permission(command.permission):
                continue
            aliases = f" &7({', '.join(command.aliases)})" if command.aliases else ""
            sender.send_message(f"&e{command.name}{aliases}&f: {command.description}")
        return True

    def version_command(sender: Sender, label: str, args: list[str]) -> bool:
        sender.send_message(f"This console is running Oops {__version__}")
        return True

    def say_command(sender: Sender, label: str, args: list[str]) -> bool:
        if not args:
            sender.send_message(f"&cUsage: /{label} <message>")
            return False
        sender.send_message(f"[{sender.name}] {' '.join(args)}")
        return True

    def teleport_command(sender: Sender, label: str, args: list[str]) -> bool:
        if len(args) != 3:
            sender.send_message(f"&cUsage: /{label} <x> <y> <z>")
            return False
        try:
            x, y, z = (float(arg) for arg in args)
        except ValueError:
            sender.send_message("&cCoordinates must be numbers")
            return False
        sender.position = (x, y, z)
        sender.send_message(f"Teleported {sender.name} to {x:g}, {y:g}, {z:g}")
        return True

    def stop_command(sender: Sender, label: str, args: list[str]) -> bool:
        sender.send_message("Stopping the console")
        host.running = False
        return True

    commands = [
        KnownCommand("help", ("?",), description="Show available commands", handler=help_command),
        KnownCommand("version", ("ver",), description="Show the running version", handler=version_command),
        KnownCommand("say", description="Broadcast a message", handler=say_command),
        KnownCommand(
            "teleport",
            ("tp",),
            permission="cmd.tp",
            description="Move to coordinates",
            handler=teleport_command,
        ),
        KnownCommand(
            "stop",
            ("exit", "quit"),
            permission="cmd.stop",
            description="Stop the console",
            handler=stop_command,
        ),
    ]
    for command in commands:
        host.registry.put(command.name, command)
        for alias in command.aliases:
            if alias not in host.registry:
                host.registry.put(alias, command)
    return commands
