"""Reversible trigger-name bindings in a shared command table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from oops.errors import RegistryIntrospectionError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .base import CommandRegistryAdapter, KnownCommand

logger = logging.getLogger(__name__)


class AliasOverlay:
    """Claims trigger names for a replacement command and restores them later."""

    def __init__(self, registry: CommandRegistryAdapter) -> None:
        self.registry = registry
        self._claimed: list[str] = []
        self._overridden: dict[str, KnownCommand] = {}
        self._failure_reported = False

    @property
    def claimed(self) -> tuple[str, ...]:
        """Names currently bound to the replacement command."""
        return tuple(self._claimed)

    @property
    def overridden(self) -> dict[str, KnownCommand]:
        """Copy of the backup table."""
        return dict(self._overridden)

    def claim(self, trigger_names: Iterable[str], replacement: KnownCommand) -> None:
        """Bind every trigger name to ``replacement``, backing up prior bindings.

        Raises:
            RegistryIntrospectionError: if the registry cannot be modified
        """
        try:
            for name in trigger_names:
                key = name.lower()
                previous = self.registry.put(key, replacement)
                if key in self._claimed:
                    # Already ours; keep the original backup.
                    continue
                self._claimed.append(key)
                if previous is None or previous is replacement:
                    continue
                self._overridden[key] = previous
                owner = previous.owner or "host"
                logger.info(f"Overriding {key} by {owner}. Aliases: {list(previous.aliases)}")
        except RegistryIntrospectionError as e:
            self._failure_reported = True
            logger.error(f"Unable to modify the command table, no aliases will be registered: {e}")
            raise

    def restore(self, trigger_names: Iterable[str] | None = None) -> None:
        """Unbind trigger names and put back whatever they replaced.

        Never raises; registry failures are logged and ignored.
        """
        names = [n.lower() for n in trigger_names] if trigger_names is not None else list(self._claimed)
        try:
            for key in names:
                self.registry.remove(key)
                if key in self._claimed:
                    self._claimed.remove(key)
            for key in names:
                previous = self._overridden.pop(key, None)
                if previous is not None:
                    self.registry.put(key, previous)
        except RegistryIntrospectionError as e:
            if self._failure_reported:
                logger.debug(f"Skipping alias restore: {e}")
            else:
                self._failure_reported = True
                logger.warning(f"Unable to restore overridden commands: {e}")
