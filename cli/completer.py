"""Custom completer for chunkterm CLI with chunkget argument completion."""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import CHUNKGET_COMPLETIONS, COMMANDS, KEYWORD_COMPLETIONS


class ChunkTermCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - Element type, flag and name= completion for 'chunkget' arguments
    - Command name completion after 'help'
    """

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on cursor position and context.
        """
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_words(COMMANDS, tokens[0] if tokens else "")
            return

        command = tokens[0].lower()
        current_word = "" if is_typing_new_token else tokens[-1]

        if command == "help":
            yield from self._complete_words(COMMANDS, current_word)
        elif command == "chunkget":
            # the chunk reference comes first, only name= words fit there
            typed_args = len(tokens) - 1 if is_typing_new_token else len(tokens) - 2
            if typed_args == 0:
                yield from self._complete_words(KEYWORD_COMPLETIONS, current_word)
            else:
                yield from self._complete_words(CHUNKGET_COMPLETIONS, current_word)

    def _complete_words(self, words: Iterable[str], partial: str) -> Iterable[Completion]:
        """Complete words matching the partial input."""
        partial_lower = partial.lower()
        for word in words:
            if word.startswith(partial_lower):
                yield Completion(word, start_position=-len(partial))
