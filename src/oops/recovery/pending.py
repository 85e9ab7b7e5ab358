"""Per-sender storage of unconfirmed corrections."""

from __future__ import annotations


class PendingCorrectionStore:
    """Holds at most one corrected command line per sender.

    Senders are keyed by name rather than a persistent id so the console
    can be corrected too.
    """

    def __init__(self) -> None:
        self._pending: dict[str, str] = {}

    def put(self, sender_id: str, command_line: str) -> None:
        """Store a correction, replacing any earlier one."""
        self._pending[sender_id] = command_line

    def take(self, sender_id: str) -> str | None:
        """Remove and return the sender's correction."""
        return self._pending.pop(sender_id, None)

    def peek(self, sender_id: str) -> str | None:
        return self._pending.get(sender_id)

    def invalidate(self, sender_id: str) -> None:
        """Drop the sender's correction, if any."""
        self._pending.pop(sender_id, None)

    def clear(self) -> None:
        self._pending.clear()

    def __contains__(self, sender_id: str) -> bool:
        return sender_id in self._pending

    def __len__(self) -> int:
        return len(self._pending)
