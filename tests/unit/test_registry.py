"""Unit tests for the parameter registry.

Tests verify uniqueness of flags and command names, lookup by either flag form
and the ordering guarantees of the listing methods.
"""

import pytest

from argspy.core.command import Command
from argspy.core.parameter import Parameter
from argspy.core.registry import ParameterRegistry
from argspy.errors import DuplicateFlagError, ParserUsageError


def _registry(*parameters: Parameter) -> ParameterRegistry:
    registry = ParameterRegistry()
    for parameter in parameters:
        registry.register(parameter)
    return registry


class TestRegister:
    """Test registering parameters and commands."""

    def test_rejects_duplicate_full_flag(self) -> None:
        """When the full flag is taken, registration fails."""
        registry = _registry(Parameter("file", "f"))
        with pytest.raises(DuplicateFlagError):
            registry.register(Parameter("file", "x"))

    def test_rejects_duplicate_short_flag(self) -> None:
        """When the short flag is taken by another parameter, registration fails."""
        registry = _registry(Parameter("file", "f"))
        with pytest.raises(DuplicateFlagError):
            registry.register(Parameter("format", "f"))

    def test_rejects_help_flag(self) -> None:
        """When --help is registered, it is refused as reserved."""
        with pytest.raises(DuplicateFlagError, match="reserved"):
            _registry(Parameter("help"))

    def test_rejects_help_short_flag(self) -> None:
        """When -h is registered as short flag, it is refused as reserved."""
        with pytest.raises(DuplicateFlagError, match="reserved"):
            _registry(Parameter("height", "h"))

    def test_duplicate_is_reported_before_reserved(self) -> None:
        """When a flag is both taken and a reserved one clashes, the duplicate is reported."""
        registry = _registry(Parameter("file", "f"))
        with pytest.raises(DuplicateFlagError, match="already exists"):
            registry.register(Parameter("help", "f"))

    def test_command_cannot_reuse_flag(self) -> None:
        """When a command name equals a registered flag, registration fails."""
        registry = _registry(Parameter("file", "f"))
        with pytest.raises(DuplicateFlagError):
            registry.register_command(Command("--file"))

    def test_failed_registration_leaves_registry_unchanged(self) -> None:
        """When registration fails, no parameter is added."""
        registry = _registry(Parameter("file", "f"))
        with pytest.raises(DuplicateFlagError):
            registry.register(Parameter("save", "f"))
        assert "--save" not in registry

    def test_tracks_longest_flags(self) -> None:
        """When several flags are registered, the longest lengths are kept."""
        registry = _registry(Parameter("file", "f"), Parameter("parameter", "par"))
        assert (registry.longest_full_flag, registry.longest_short_flag) == (11, 4)


class TestLookup:
    """Test finding registered entries."""

    def test_short_and_full_flag_share_entity(self) -> None:
        """When looked up by either flag, the same parameter is returned."""
        registry = _registry(Parameter("file", "f"))
        assert registry.lookup("-f") is registry.lookup("--file")

    def test_unknown_flag_returns_none(self) -> None:
        """When the flag is unknown, None is returned."""
        assert _registry(Parameter("file")).lookup("--save") is None

    def test_lookup_is_exact(self) -> None:
        """When the bare name is looked up, it does not match the flag."""
        assert _registry(Parameter("file")).lookup("file") is None

    def test_contains_covers_commands(self) -> None:
        """When a command is registered, membership checks find it."""
        registry = ParameterRegistry()
        registry.register_command(Command("build", "b"))
        assert "b" in registry


class TestListing:
    """Test ordered listings."""

    def test_mandatory_in_registration_order(self) -> None:
        """When several parameters are mandatory, they are listed in declaration order."""
        registry = _registry(
            Parameter("save", mandatory=True),
            Parameter("load"),
            Parameter("file", mandatory=True),
        )
        flags = [p.full_flag for p in registry.mandatory_entities()]
        assert flags == ["--save", "--file"]

    def test_known_names_order(self) -> None:
        """When names are listed, flags come before commands."""
        registry = _registry(Parameter("file", "f"))
        registry.register_command(Command("build", "b"))
        assert registry.known_names() == ["--file", "-f", "build", "b"]

    def test_len_counts_parameters(self) -> None:
        """When two parameters are registered, the registry has length 2."""
        assert len(_registry(Parameter("file"), Parameter("save"))) == 2


class TestToggle:
    """Test declaring toggles."""

    def test_needs_two_commands(self) -> None:
        """When a toggle has a single command, it is rejected."""
        registry = ParameterRegistry()
        build = registry.register_command(Command("build"))
        with pytest.raises(ParserUsageError):
            registry.toggle(build)

    def test_needs_registered_commands(self) -> None:
        """When a toggled command was never registered, it is rejected."""
        registry = ParameterRegistry()
        build = registry.register_command(Command("build"))
        with pytest.raises(ParserUsageError):
            registry.toggle(build, Command("clean"))

    def test_group_is_recorded(self) -> None:
        """When a toggle is declared, it is listed by the registry."""
        registry = ParameterRegistry()
        build = registry.register_command(Command("build"))
        clean = registry.register_command(Command("clean"))
        registry.toggle(build, clean)
        assert registry.toggles() == ((build, clean),)
