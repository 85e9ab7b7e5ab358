"""Concrete registry adapters."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any

from oops.errors import RegistryIntrospectionError

from .base import CommandRegistryAdapter, KnownCommand

if TYPE_CHECKING:
    from collections.abc import Iterator


class InMemoryCommandRegistry(CommandRegistryAdapter):
    """Dict-backed command table owned by the console host."""

    def __init__(self) -> None:
        self._known_commands: dict[str, KnownCommand] = {}

    def get(self, name: str) -> KnownCommand | None:
        return self._known_commands.get(name.lower())

    def put(self, name: str, command: KnownCommand) -> KnownCommand | None:
        key = name.lower()
        previous = self._known_commands.get(key)
        self._known_commands[key] = command
        return previous

    def remove(self, name: str) -> KnownCommand | None:
        return self._known_commands.pop(name.lower(), None)

    def bindings(self) -> Iterator[tuple[str, KnownCommand]]:
        return iter(list(self._known_commands.items()))

    def snapshot(self) -> dict[str, KnownCommand]:
        """Copy of the current table."""
        return dict(self._known_commands)


class AttributeCommandRegistry(CommandRegistryAdapter):
    """Adapter over a name table held as an attribute of some host object.

    Hosts rarely expose their command table publicly, so this reaches into
    ``target.<attribute>`` on every access and reports anything unexpected
    as a RegistryIntrospectionError.
    """

    def __init__(self, target: Any, attribute: str = "_known_commands") -> None:
        self.target = target
        self.attribute = attribute

    def _table(self) -> MutableMapping[str, KnownCommand]:
        try:
            table = getattr(self.target, self.attribute)
        except AttributeError as e:
            raise RegistryIntrospectionError(
                f"{type(self.target).__name__} has no command table '{self.attribute}'"
            ) from e
        if not isinstance(table, MutableMapping):
            raise RegistryIntrospectionError(
                f"{type(self.target).__name__}.{self.attribute} is not a mutable mapping"
            )
        return table

    def get(self, name: str) -> KnownCommand | None:
        return self._table().get(name.lower())

    def put(self, name: str, command: KnownCommand) -> KnownCommand | None:
        table = self._table()
        key = name.lower()
        previous = table.get(key)
        table[key] = command
        return previous

    def remove(self, name: str) -> KnownCommand | None:
        return self._table().pop(name.lower(), None)

    def bindings(self) -> Iterator[tuple[str, KnownCommand]]:
        return iter(list(self._table().items()))
