"""REPL with prompt_toolkit for user interaction."""

import os
import sys
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from cli.commands import handle_chunkget, handle_peer
from cli.completer import ChunkTermCompleter
from cli.constants import (
    COMMAND_HELP,
    HELP_TEXT,
    LOGO,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
from cli.models import ChunkGetCommand, PeerCommand
from cli.output import ConsoleSink
from cli.parser import ParseError, parse_command


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_logo() -> None:
    """Display chunkterm logo with ANSI colors."""
    print(LOGO)


def show_help(topic: str) -> str:
    """Return general help, or the help of a single command."""
    if not topic:
        return HELP_TEXT
    return COMMAND_HELP.get(topic, f"No help for '{topic}'.\n{HELP_TEXT}")


def dispatch_command(cmd_obj, sink: Optional[ConsoleSink] = None) -> Optional[str]:
    """Dispatch parsed command to appropriate handler.

    chunkget prints through its output sink and returns nothing to print.
    """
    if isinstance(cmd_obj, ChunkGetCommand):
        handle_chunkget(cmd_obj, sink=sink)
        return None
    elif isinstance(cmd_obj, PeerCommand):
        return handle_peer(cmd_obj)
    else:
        return f"Unknown command type: {type(cmd_obj)}"


def run_line(user_input: str) -> bool:
    """
    Parse and run one command line outside the REPL.

    Returns:
        True if the command ran without printing an error
    """
    line = user_input.strip()
    if line == "help" or line.startswith("help "):
        print(show_help(line[len("help"):].strip()))
        return True

    sink = ConsoleSink()
    try:
        result = dispatch_command(parse_command(user_input), sink=sink)
    except ParseError as e:
        print(f"Error: {e}")
        return False

    if result is not None:
        print(result)
    return sink.error_count == 0


def repl_loop() -> None:
    """Start interactive REPL with prompt_toolkit."""
    history = InMemoryHistory()
    session: PromptSession = PromptSession(
        completer=ChunkTermCompleter(), history=history, style=STYLE
    )

    clear_screen()
    show_logo()
    print(WELCOME_TITLE)
    print(WELCOME_HELP)

    while True:
        try:
            user_input = session.prompt([("class:prompt", PROMPT_TEXT)])
            line = user_input.strip()

            if not line:
                continue

            if line == "exit":
                print("Goodbye!")
                break

            if line == "help" or line.startswith("help "):
                print(show_help(line[len("help"):].strip()))
                continue

            if line == "clear":
                clear_screen()
                show_logo()
                print(WELCOME_TITLE)
                print(WELCOME_HELP)
                continue

            cmd_obj = parse_command(user_input)
            result = dispatch_command(cmd_obj)
            if result is not None:
                print(result)

        except ParseError as e:
            print(f"Error: {e}")
        except KeyboardInterrupt:
            continue
        except EOFError:
            print("\nGoodbye!")
            break
