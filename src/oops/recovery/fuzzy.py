"""Fuzzy matching of mistyped command names."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rapidfuzz.distance import Levenshtein
from thefuzz import fuzz, process

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from oops.registry.base import CommandRegistryAdapter, KnownCommand

logger = logging.getLogger(__name__)


def threshold_for(name: str) -> int:
    """Distances strictly below this value are accepted for ``name``."""
    # Allow more fuzziness for longer commands
    return 3 + len(name) // 4


def find_correction(
    token: str,
    can_use: Callable[[KnownCommand], bool],
    catalog: Iterable[KnownCommand],
    is_known: Callable[[str], bool] | None = None,
) -> str | None:
    """Find the closest usable command name for a mistyped token.

    Args:
        token: The command name as typed, without prefix
        can_use: Whether the sender may use a command
        catalog: Known commands, in registration order
        is_known: Registry lookup; a recognized token is never corrected

    Returns:
        The matching name, or None if the token is valid or nothing is close
    """
    if not token:
        return None
    if is_known is not None and is_known(token):
        # Valid command, nothing to correct.
        return None

    best_distance: int | None = None
    best_name: str | None = None
    for command in catalog:
        if not can_use(command):
            continue
        for name in command.names:
            distance = Levenshtein.distance(token, name)
            if distance == 0:
                return None
            if best_distance is None or distance < best_distance:
                best_distance = distance
                best_name = name

    if best_name is None:
        return None
    if best_distance < threshold_for(best_name):
        return best_name
    return None


class FuzzyMatcher:
    """Matches tokens against the catalog of a command registry."""

    def __init__(self, registry: CommandRegistryAdapter) -> None:
        self.registry = registry

    def match(
        self,
        token: str,
        can_use: Callable[[KnownCommand], bool],
        catalog: Sequence[KnownCommand] | None = None,
    ) -> str | None:
        """Return the best correction for ``token`` or None.

        Args:
            token: The command name as typed
            can_use: Permission predicate for the sender
            catalog: Commands to search (defaults to the registry's)
        """
        if catalog is None:
            catalog = self.registry.commands()
        match = find_correction(token, can_use, catalog, is_known=self.registry.__contains__)
        if match is not None:
            logger.debug(f"Matched '{token}' to '{match}'")
        return match


def rank_names(token: str, names: list[str], limit: int = 3) -> list[tuple[str, int]]:
    """Rank names by similarity to a token.

    Args:
        token: The token to match
        names: Candidate names
        limit: Maximum number of results

    Returns:
        List of (name, score) tuples, best first
    """
    if not token or not names:
        return []
    matches = process.extract(token, names, scorer=fuzz.ratio, limit=limit)
    return [(match[0], match[1]) for match in matches]
