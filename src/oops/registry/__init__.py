"""Command registry adapters and the trigger alias overlay."""

from .base import CommandRegistryAdapter, KnownCommand
from .memory import AttributeCommandRegistry, InMemoryCommandRegistry
from .overlay import AliasOverlay

__all__ = [
    "AliasOverlay",
    "AttributeCommandRegistry",
    "CommandRegistryAdapter",
    "InMemoryCommandRegistry",
    "KnownCommand",
]
