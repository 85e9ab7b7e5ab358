"""Tests for registry adapters and the alias overlay."""

import logging

import pytest

from oops.errors import RegistryIntrospectionError
from oops.registry.base import KnownCommand
from oops.registry.memory import AttributeCommandRegistry, InMemoryCommandRegistry
from oops.registry.overlay import AliasOverlay


def make_registry(*commands: KnownCommand) -> InMemoryCommandRegistry:
    registry = InMemoryCommandRegistry()
    for command in commands:
        for name in command.names:
            registry.put(name, command)
    return registry


class HostWithTable:
    """Stand-in host keeping its command table private."""

    def __init__(self) -> None:
        self._known_commands: dict[str, KnownCommand] = {}


class TestInMemoryCommandRegistry:
    """Test the dict-backed registry."""

    def test_put_returns_previous(self) -> None:
        """Test that put reports the replaced binding."""
        registry = InMemoryCommandRegistry()
        first = KnownCommand("help")
        second = KnownCommand("help2")

        assert registry.put("help", first) is None
        assert registry.put("HELP", second) is first
        assert registry.get("help") is second

    def test_remove(self) -> None:
        """Test unbinding a name."""
        command = KnownCommand("help")
        registry = make_registry(command)

        assert registry.remove("help") is command
        assert registry.remove("help") is None
        assert "help" not in registry

    def test_commands_are_unique_and_ordered(self) -> None:
        """Test that each command is listed once in registration order."""
        help_cmd = KnownCommand("help", ("?",))
        tp_cmd = KnownCommand("teleport", ("tp",))
        registry = make_registry(help_cmd, tp_cmd)

        assert registry.commands() == [help_cmd, tp_cmd]

    def test_names_include_canonical_last(self) -> None:
        """Test the name set ordering."""
        assert KnownCommand("teleport", ("tp", "tele")).names == ["tp", "tele", "teleport"]

    def test_empty_permission_means_none(self) -> None:
        """Test that an empty permission string is treated as no permission."""
        assert KnownCommand("help", permission="").permission is None


class TestAttributeCommandRegistry:
    """Test the adapter over a host's private table."""

    def test_reads_and_writes_host_table(self) -> None:
        """Test access through the attribute."""
        host = HostWithTable()
        registry = AttributeCommandRegistry(host)
        command = KnownCommand("help")

        registry.put("help", command)

        assert host._known_commands["help"] is command
        assert registry.get("help") is command
        assert registry.commands() == [command]

    def test_missing_attribute(self) -> None:
        """Test that a host without the table raises."""
        registry = AttributeCommandRegistry(object())

        with pytest.raises(RegistryIntrospectionError):
            registry.get("help")

    def test_wrong_type(self) -> None:
        """Test that a non-mapping table raises."""
        host = HostWithTable()
        host._known_commands = ["help"]
        registry = AttributeCommandRegistry(host)

        with pytest.raises(RegistryIntrospectionError):
            registry.commands()


class TestAliasOverlay:
    """Test claiming and restoring trigger names."""

    @pytest.fixture
    def replacement(self) -> KnownCommand:
        return KnownCommand("oops", ("fix",), owner="oops")

    def test_claim_binds_names(self, replacement: KnownCommand) -> None:
        """Test that every trigger name points at the replacement."""
        registry = make_registry(KnownCommand("help"))
        overlay = AliasOverlay(registry)

        overlay.claim(["oops", "fix"], replacement)

        assert registry.get("oops") is replacement
        assert registry.get("fix") is replacement
        assert overlay.claimed == ("oops", "fix")
        assert overlay.overridden == {}

    def test_claim_backs_up_existing(self, replacement: KnownCommand) -> None:
        """Test that a prior binding is kept aside."""
        original = KnownCommand("fix", owner="repairs")
        registry = make_registry(original)
        overlay = AliasOverlay(registry)

        overlay.claim(["oops", "fix"], replacement)

        assert registry.get("fix") is replacement
        assert overlay.overridden == {"fix": original}

    @pytest.mark.parametrize("initial", [
        [],
        [KnownCommand("fix")],
        [KnownCommand("oops"), KnownCommand("fix")],
        [KnownCommand("repair", ("fix",)), KnownCommand("help", ("?",))],
    ])
    def test_round_trip(self, replacement: KnownCommand, initial: list[KnownCommand]) -> None:
        """Test that claim followed by restore leaves the table unchanged."""
        registry = make_registry(*initial)
        before = registry.snapshot()
        overlay = AliasOverlay(registry)

        overlay.claim(["oops", "fix"], replacement)
        overlay.restore(["oops", "fix"])

        after = registry.snapshot()
        assert after.keys() == before.keys()
        assert all(after[name] is before[name] for name in before)
        assert overlay.overridden == {}
        assert overlay.claimed == ()

    def test_restore_defaults_to_claimed(self, replacement: KnownCommand) -> None:
        """Test restore without explicit names."""
        original = KnownCommand("fix")
        registry = make_registry(original)
        overlay = AliasOverlay(registry)

        overlay.claim(["oops", "fix"], replacement)
        overlay.restore()

        assert registry.get("fix") is original
        assert registry.get("oops") is None

    def test_reclaim_does_not_stack(self, replacement: KnownCommand) -> None:
        """Test that a second claim keeps the original backup."""
        original = KnownCommand("fix")
        registry = make_registry(original)
        overlay = AliasOverlay(registry)

        overlay.claim(["fix"], replacement)
        overlay.claim(["fix"], replacement)

        assert overlay.overridden == {"fix": original}
        assert overlay.claimed == ("fix",)

        overlay.restore()
        assert registry.get("fix") is original

    def test_partial_restore(self, replacement: KnownCommand) -> None:
        """Test restoring a subset of names."""
        registry = make_registry()
        overlay = AliasOverlay(registry)

        overlay.claim(["oops", "fix"], replacement)
        overlay.restore(["fix"])

        assert registry.get("fix") is None
        assert registry.get("oops") is replacement
        assert overlay.claimed == ("oops",)

    def test_override_is_logged(self, replacement: KnownCommand, caplog) -> None:
        """Test the override log line."""
        registry = make_registry(KnownCommand("fix", ("mend",), owner="repairs"))
        overlay = AliasOverlay(registry)

        with caplog.at_level(logging.INFO, logger="oops.registry.overlay"):
            overlay.claim(["fix"], replacement)

        assert "Overriding fix by repairs. Aliases: ['mend']" in caplog.text

    def test_claim_failure_raises(self, replacement: KnownCommand, caplog) -> None:
        """Test that claim reports registry failures loudly."""
        overlay = AliasOverlay(AttributeCommandRegistry(object()))

        with pytest.raises(RegistryIntrospectionError):
            overlay.claim(["oops"], replacement)

        assert "Unable to modify the command table" in caplog.text

    def test_restore_failure_is_silent(self, replacement: KnownCommand) -> None:
        """Test that restore never raises."""
        overlay = AliasOverlay(AttributeCommandRegistry(object()))

        with pytest.raises(RegistryIntrospectionError):
            overlay.claim(["oops"], replacement)

        overlay.restore(["oops"])

    def test_restore_failure_reported_once(self, caplog) -> None:
        """Test a first restore failure is warned about."""
        overlay = AliasOverlay(AttributeCommandRegistry(object()))

        with caplog.at_level(logging.DEBUG, logger="oops.registry.overlay"):
            overlay.restore(["oops"])
            overlay.restore(["oops"])

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
