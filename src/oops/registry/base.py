"""Base registry classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@dataclass(eq=False)
class KnownCommand:
    """A command as the host's registry knows it."""

    name: str
    aliases: tuple[str, ...] = ()
    permission: str | None = None
    description: str = ""
    owner: str | None = None  # None means the host itself
    handler: Callable[[Any, str, list[str]], bool] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.aliases = tuple(self.aliases)
        if not self.permission:
            self.permission = None

    @property
    def names(self) -> list[str]:
        """Aliases followed by the canonical name."""
        return [*self.aliases, self.name]

    def execute(self, sender: Any, label: str, args: list[str]) -> bool:
        """Run the handler, if any."""
        if self.handler is None:
            return False
        return self.handler(sender, label, args)


class CommandRegistryAdapter(ABC):
    """Access to a host's shared name -> command table.

    Implementations raise RegistryIntrospectionError when the underlying
    table cannot be reached.
    """

    @abstractmethod
    def get(self, name: str) -> KnownCommand | None:
        """Return the command bound to ``name``, if any."""
        pass

    @abstractmethod
    def put(self, name: str, command: KnownCommand) -> KnownCommand | None:
        """Bind ``command`` to ``name`` and return the previous binding."""
        pass

    @abstractmethod
    def remove(self, name: str) -> KnownCommand | None:
        """Unbind ``name`` and return what was bound."""
        pass

    @abstractmethod
    def bindings(self) -> Iterator[tuple[str, KnownCommand]]:
        """Iterate over every (name, command) pair in registration order."""
        pass

    def commands(self) -> list[KnownCommand]:
        """Return each distinct command once, in registration order."""
        seen: set[int] = set()
        unique = []
        for _, command in self.bindings():
            if id(command) not in seen:
                seen.add(id(command))
                unique.append(command)
        return unique

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None
