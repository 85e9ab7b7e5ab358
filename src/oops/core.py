"""Core Oops functionality: the correction controller."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from oops.config import OopsConfig, load_config
from oops.errors import RegistryIntrospectionError
from oops.recovery.fuzzy import FuzzyMatcher
from oops.recovery.pending import PendingCorrectionStore
from oops.registry.base import KnownCommand
from oops.registry.overlay import AliasOverlay

if TYPE_CHECKING:
    from collections.abc import Callable

    from oops.registry.base import CommandRegistryAdapter

logger = logging.getLogger(__name__)

COMMAND_NAME = "oops"
RELOAD_PERMISSION = "oops.reload"
RELOAD_MESSAGE = "Oops configuration reloaded successfully!"


class CorrectionController:
    """Offers corrections for mistyped commands and runs them on request.

    The controller claims its trigger names in the host's registry while
    loaded, watches every command line through ``handle_input`` and remembers
    one suggested correction per sender until it is confirmed or goes stale.
    """

    def __init__(
        self,
        registry: CommandRegistryAdapter,
        dispatch: Callable[[Any, str], bool],
        config_path: str | Path | None = None,
        config: OopsConfig | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            registry: The host's command table
            dispatch: Runs a command line for a sender
            config_path: Configuration file to read on load
            config: Fixed settings; when given, the file is never read
        """
        self.registry = registry
        self.dispatch = dispatch
        self.config_path = Path(config_path) if config_path else None
        self.enabled = False

        self._fixed_config = config
        self.config = config or OopsConfig()
        self.matcher = FuzzyMatcher(registry)
        self.pending = PendingCorrectionStore()
        self.overlay = AliasOverlay(registry)
        self.command: KnownCommand | None = None
        self.triggers: list[str] = []

    def enable(self) -> bool:
        """Check registry access and load.

        Returns:
            Whether the controller is active
        """
        try:
            self.registry.commands()
        except RegistryIntrospectionError as e:
            logger.error(f"Error reading the command table, corrections cannot function: {e}")
            self.enabled = False
            return False

        self.enabled = True
        self.load()
        return self.enabled

    def disable(self) -> None:
        self.unload()
        self.enabled = False

    def load(self) -> None:
        """Read settings and claim the trigger names."""
        if self._fixed_config is None:
            self.config = load_config(self.config_path)

        triggers = [COMMAND_NAME]
        triggers.extend(a for a in self.config.aliases if a != COMMAND_NAME)
        self.triggers = triggers
        self.command = KnownCommand(
            COMMAND_NAME,
            tuple(a for a in triggers if a != COMMAND_NAME),
            description="Run the last suggested correction",
            owner="oops",
            handler=self.on_command,
        )

        try:
            self.overlay.claim(self.triggers, self.command)
        except RegistryIntrospectionError:
            self.enabled = False
            return
        logger.info(f"Loaded with triggers {self.triggers}, instant correction {self.config.instantly_correct}")

    def unload(self) -> None:
        """Release the trigger names and forget pending corrections."""
        self.overlay.restore()
        self.pending.clear()

    def reload(self) -> None:
        self.unload()
        self.enabled = True
        self.load()

    def can_use(self, sender: Any) -> Callable[[KnownCommand], bool]:
        """Permission predicate for a sender."""
        return lambda command: command.permission is None or sender.has_permission(command.permission)

    def handle_input(self, sender: Any, executed: str) -> bool:
        """Inspect a command line before the host runs it.

        Args:
            sender: Who typed the line
            executed: The raw line, usually starting with '/'

        Returns:
            True if the host should not process the line itself
        """
        if not self.enabled:
            return False

        line = executed.lstrip()
        slash = line.startswith("/")
        body = line[1:] if slash else line
        parts = body.split(None, 1)
        command_name = parts[0].lower() if parts else ""
        remainder = body[len(parts[0]):] if parts else ""
        if not command_name:
            return False

        if command_name in self.triggers and not remainder.strip():
            corrected = self.pending.take(sender.name)
            if corrected is not None:
                logger.debug(f"Running correction for {sender.name}: {corrected}")
                self.dispatch(sender, corrected)
            return True

        corrected = self.matcher.match(command_name, self.can_use(sender))
        if corrected is None:
            # Valid or hopelessly invalid command
            if command_name not in self.triggers and command_name in self.registry:
                self.pending.invalidate(sender.name)
            return False

        if self.config.instantly_correct:
            logger.debug(f"Correcting {command_name} to {corrected} for {sender.name}")
            self.dispatch(sender, corrected + remainder)
            return True

        sender.send_message(self.config.format_message("/" if slash else "", corrected))
        if corrected in self.triggers:
            # Never store a trigger as its own correction
            return True
        self.pending.put(sender.name, corrected + remainder)
        return True

    def on_command(self, sender: Any, label: str, args: list[str]) -> bool:
        """Handle the trigger command itself."""
        if args and args[0].lower() == "reload" and sender.has_permission(RELOAD_PERMISSION):
            self.reload()
            sender.send_message(RELOAD_MESSAGE)
            return True

        corrected = self.pending.take(sender.name)
        if corrected is not None:
            self.dispatch(sender, corrected)
        return True
