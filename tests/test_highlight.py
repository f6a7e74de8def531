"""Tests for command highlighting."""

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import fragment_list_to_text

from rconshell.constants import STYLE_COMMAND_KNOWN, STYLE_COMMAND_SUGGESTED
from rconshell.editing import RegistryLexer, highlight, highlight_ansi
from rconshell.grammar import CommandRegistry


def test_known_command_on_input_line(sample_registry):
    fragments = highlight(sample_registry, "/time set 1000")
    assert fragments == [(STYLE_COMMAND_KNOWN, "/time"), ("", " set 1000")]


def test_known_command_as_suggestion(sample_registry):
    fragments = highlight(sample_registry, "/time", is_suggestion=True)
    assert fragments == [(STYLE_COMMAND_SUGGESTED, "/time")]


def test_unknown_command_unstyled(sample_registry):
    assert highlight(sample_registry, "/tim set") == [("", "/tim set")]


def test_partial_token_is_not_a_match(sample_registry):
    assert highlight(sample_registry, "/gamemod") == [("", "/gamemod")]


def test_text_is_preserved(sample_registry):
    line = "  /gamemode   creative  Steve "
    fragments = highlight(sample_registry, line)
    assert fragment_list_to_text(fragments) == line
    assert (STYLE_COMMAND_KNOWN, "/gamemode") in fragments


def test_empty_and_blank(sample_registry):
    assert highlight(sample_registry, "") == []
    assert highlight(sample_registry, "   ") == [("", "   ")]


def test_empty_registry_highlights_nothing():
    assert highlight(CommandRegistry.empty(), "/time set") == [("", "/time set")]


def test_ansi_rendering(sample_registry):
    assert highlight_ansi(sample_registry, "/list now") == "\x1b[32m/list\x1b[0m now"
    assert highlight_ansi(sample_registry, "/list", is_suggestion=True) == "\x1b[33m/list\x1b[0m"
    assert highlight_ansi(sample_registry, "/nope x") == "/nope x"


def test_lexer_highlights_each_line(sample_registry):
    lexer = RegistryLexer(lambda: sample_registry)
    get_line = lexer.lex_document(Document("/list\nhello"))

    assert get_line(0) == [(STYLE_COMMAND_KNOWN, "/list")]
    assert get_line(1) == [("", "hello")]
    assert get_line(5) == []
