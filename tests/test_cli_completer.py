"""Tests for ChunkTermCompleter."""

import pytest

from prompt_toolkit.document import Document

from cli.completer import ChunkTermCompleter
from cli.constants import COMMANDS


@pytest.fixture
def completer():
    """Create a ChunkTermCompleter instance."""
    return ChunkTermCompleter()


def get_completions_list(completer, text):
    """Helper to get list of completion texts from completer."""
    doc = Document(text, len(text))
    return [c.text for c in completer.get_completions(doc, None)]


class TestCommandCompletion:
    """Tests for command name completion."""

    def test_empty_input_shows_all_commands(self, completer):
        """Empty input should suggest all commands."""
        completions = get_completions_list(completer, "")
        for cmd in COMMANDS:
            assert cmd in completions

    def test_partial_command_filters(self, completer):
        """Partial command should filter to matching commands."""
        completions = get_completions_list(completer, "ch")
        assert completions == ["chunkget"]

    def test_command_completion_case_insensitive(self, completer):
        """Command completion should be case insensitive."""
        completions = get_completions_list(completer, "PE")
        assert "peer" in completions

    def test_help_completes_commands(self, completer):
        completions = get_completions_list(completer, "help ch")
        assert completions == ["chunkget"]


class TestChunkGetCompletion:
    """Tests for chunkget argument completion."""

    def test_only_names_offered_for_chunk_reference(self, completer):
        """The first argument is a chunk id or a name=value pair."""
        completions = get_completions_list(completer, "chunkget ")
        assert "cid=" in completions
        assert "int" not in completions

    def test_element_types_after_chunk_id(self, completer):
        completions = get_completions_list(completer, "chunkget 0x1 ")
        for element_type in ("byte", "short", "int", "long", "string"):
            assert element_type in completions

    def test_partial_type(self, completer):
        completions = get_completions_list(completer, "chunkget 0x1 sh")
        assert completions == ["short"]

    def test_keyword_names(self, completer):
        completions = get_completions_list(completer, "chunkget ci")
        assert completions == ["cid="]
        completions = get_completions_list(completer, "chunkget 0x1 ty")
        assert completions == ["type="]

    def test_other_commands_get_nothing(self, completer):
        assert get_completions_list(completer, "peer ") == []
