"""Tests for tab completion."""

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import fragment_list_to_text

from rconshell.constants import STYLE_COMMAND_SUGGESTED
from rconshell.editing import Candidate, RegistryCompleter, complete
from rconshell.grammar import CommandRegistry


def _complete(registry, line, cursor=None):
    return complete(registry, line, len(line) if cursor is None else cursor)


class TestCommandNames:
    """First-token completion."""

    def test_prefix_matches_with_trailing_space(self, sample_registry):
        result = _complete(sample_registry, "/gam")
        assert result.start == 0
        assert result.candidates == (
            Candidate("/gamemode", "/gamemode "),
            Candidate("/gamerule", "/gamerule "),
        )

    def test_bare_prefix_lists_everything(self, sample_registry):
        result = _complete(sample_registry, "/")
        assert [c.display for c in result.candidates] == list(sample_registry.names())

    def test_no_match(self, sample_registry):
        assert _complete(sample_registry, "/zzz").candidates == ()

    def test_empty_input(self, sample_registry):
        result = _complete(sample_registry, "")
        assert result.start == 0
        assert result.candidates == ()

    def test_only_text_before_cursor_counts(self, sample_registry):
        result = complete(sample_registry, "/gamemode", 4)
        assert [c.display for c in result.candidates] == ["/gamemode", "/gamerule"]


class TestChoiceArguments:
    """Argument-position completion."""

    def test_partial_choice(self, time_registry):
        line = "/time s"
        result = _complete(time_registry, line)
        assert result.candidates == (Candidate("set", "set "),)
        assert result.start == len(line) - 1

    def test_empty_partial_lists_all_options_in_order(self, time_registry):
        result = _complete(time_registry, "/time ")
        assert [c.replacement for c in result.candidates] == ["add ", "query ", "set "]
        assert result.start == len("/time ")

    def test_too_many_tokens(self, time_registry):
        assert _complete(time_registry, "/time set 10").candidates == ()

    def test_free_text_slot_not_completed(self, sample_registry):
        # /time's first slot is the <value> placeholder after category ordering.
        assert _complete(sample_registry, "/time a").candidates == ()

    def test_second_slot_choice(self, sample_registry):
        result = _complete(sample_registry, "/time 10 q")
        assert result.candidates == (Candidate("query", "query "),)
        assert result.start == len("/time 10 ")

    def test_optional_choice(self, sample_registry):
        result = _complete(sample_registry, "/difficulty ha")
        assert result.candidates == (Candidate("hard", "hard "),)

    def test_alias_gets_target_completion(self):
        from rconshell.grammar import build_registry

        registry = build_registry("/weather (clear|rain)\n/w -> weather")
        result = _complete(registry, "/w r")
        assert result.candidates == (Candidate("rain", "rain "),)

    def test_unknown_command(self, sample_registry):
        result = _complete(sample_registry, "/nope a")
        assert result.start == 0
        assert result.candidates == ()

    def test_command_without_arguments(self, sample_registry):
        assert _complete(sample_registry, "/list ").candidates == ()

    def test_cursor_mid_line(self, time_registry):
        line = "/time q trailing"
        result = complete(time_registry, line, len("/time q"))
        assert result.candidates == (Candidate("query", "query "),)
        assert result.start == len("/time ")


def test_empty_registry_never_completes():
    registry = CommandRegistry.empty()
    assert _complete(registry, "/").candidates == ()
    assert _complete(registry, "/time s").candidates == ()


class TestRegistryCompleter:
    """prompt_toolkit adapter."""

    def test_yields_completions_with_relative_start(self, time_registry):
        completer = RegistryCompleter(lambda: time_registry)
        document = Document("/time q", cursor_position=7)

        completions = list(completer.get_completions(document, CompleteEvent(completion_requested=True)))

        assert len(completions) == 1
        assert completions[0].text == "query "
        assert completions[0].start_position == -1

    def test_command_name_display_is_highlighted(self, sample_registry):
        completer = RegistryCompleter(lambda: sample_registry)
        document = Document("/li", cursor_position=3)

        (completion,) = completer.get_completions(document, CompleteEvent(completion_requested=True))

        assert completion.text == "/list "
        assert completion.start_position == -3
        assert completion.display == [(STYLE_COMMAND_SUGGESTED, "/list")]
        assert fragment_list_to_text(completion.display) == "/list"

    def test_reads_current_registry_each_call(self, time_registry):
        holder = {"registry": CommandRegistry.empty()}
        completer = RegistryCompleter(lambda: holder["registry"])
        document = Document("/ti", cursor_position=3)

        assert list(completer.get_completions(document, CompleteEvent())) == []
        holder["registry"] = time_registry
        assert [c.text for c in completer.get_completions(document, CompleteEvent())] == ["/time "]
