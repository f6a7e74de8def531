"""Tests for grammar value types and the command registry."""

import pytest

from rconshell.errors import GrammarError
from rconshell.grammar import ArgumentSpec, CommandRegistry, CommandSpec


class TestArgumentSpec:
    """Argument slot construction and invariants."""

    def test_placeholder_kinds(self):
        assert ArgumentSpec.required("mode").kind == "required"
        assert ArgumentSpec.optional("target").kind == "optional"
        assert not ArgumentSpec.required("mode").is_choice

    def test_choice_kinds(self):
        arg = ArgumentSpec.required_choice(["add", "set"])
        assert arg.kind == "required_choice"
        assert arg.options == ("add", "set")
        assert arg.is_choice
        assert ArgumentSpec.optional_choice(["on"]).is_choice

    def test_empty_options_rejected(self):
        with pytest.raises(GrammarError):
            ArgumentSpec.required_choice([])

    @pytest.mark.parametrize("option", ["", " add", "set "])
    def test_untrimmed_or_empty_option_rejected(self, option):
        with pytest.raises(GrammarError):
            ArgumentSpec.optional_choice(["query", option])

    def test_placeholder_requires_name(self):
        with pytest.raises(GrammarError):
            ArgumentSpec.required("")

    def test_unknown_kind_rejected(self):
        with pytest.raises(GrammarError):
            ArgumentSpec(kind="variadic", name="x")

    def test_listing_notation(self):
        command = CommandSpec(
            "/weather",
            (
                ArgumentSpec.required_choice(["clear", "rain"]),
                ArgumentSpec.optional("duration"),
                ArgumentSpec.optional_choice(["a", "b"]),
                ArgumentSpec.required("x"),
            ),
        )
        assert command.usage() == "/weather (clear|rain) [<duration>] [a|b] <x>"


class TestCommandRegistry:
    """Read-only registry behavior."""

    def test_names_sorted(self):
        registry = CommandRegistry([CommandSpec("/b"), CommandSpec("/a"), CommandSpec("/c")])
        assert registry.names() == ("/a", "/b", "/c")
        assert [c.name for c in registry] == ["/a", "/b", "/c"]

    def test_prefix_matches_sorted(self):
        registry = CommandRegistry([CommandSpec("/gamerule"), CommandSpec("/gamemode"), CommandSpec("/give")])
        assert registry.prefix_matches("/gam") == ["/gamemode", "/gamerule"]

    def test_lookup(self):
        registry = CommandRegistry([CommandSpec("/list")])
        assert "/list" in registry
        assert "/lis" not in registry
        assert registry.get("/list") == CommandSpec("/list")
        assert registry.get("/nope") is None
        assert len(registry) == 1

    def test_empty(self):
        registry = CommandRegistry.empty()
        assert registry.is_empty
        assert registry.names() == ()
        assert registry.prefix_matches("/") == []

    def test_later_spec_with_same_name_wins(self):
        registry = CommandRegistry(
            [CommandSpec("/a", (ArgumentSpec.required("x"),)), CommandSpec("/a")]
        )
        assert registry.get("/a").arguments == ()
