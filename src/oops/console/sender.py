"""Command senders."""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import TYPE_CHECKING

from rich.console import Console

from .text import legacy_text

if TYPE_CHECKING:
    from collections.abc import Iterable


class Sender:
    """Something that issues commands and receives replies."""

    def __init__(
        self,
        name: str,
        permissions: Iterable[str] | None = None,
        op: bool = False,
    ) -> None:
        self.name = name
        self.permissions = set(permissions or [])
        self.op = op
        self.messages: list[str] = []

    def has_permission(self, permission: str | None) -> bool:
        """Check a permission node; granted nodes may use ``*`` wildcards."""
        if not permission or self.op:
            return True
        return any(fnmatchcase(permission, granted) for granted in self.permissions)

    def send_message(self, message: str) -> None:
        self.messages.append(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ConsoleSender(Sender):
    """Terminal user; prints replies through a rich console."""

    def __init__(
        self,
        name: str = "CONSOLE",
        console: Console | None = None,
        permissions: Iterable[str] | None = None,
        op: bool = True,
    ) -> None:
        super().__init__(name, permissions=permissions, op=op)
        self.console = console or Console()

    def send_message(self, message: str) -> None:
        super().send_message(message)
        self.console.print(legacy_text(message))
