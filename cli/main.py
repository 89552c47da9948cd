"""CLI entry point."""

import shlex
import sys
import os

from common.logging_config import setup_logging
from cli.commands import get_config
from cli.repl import repl_loop, run_line


def main() -> None:
    """Entry point for CLI.

    With arguments, runs them as a single command line and exits;
    without, starts the interactive REPL.
    """
    log_level = 'DEBUG' if '--debug' in sys.argv else os.getenv('LOG_LEVEL', 'WARNING')

    logger = setup_logging('cli', log_level=log_level, peer_target=get_config().get_peer_target())
    setup_logging('chunkget', log_level=log_level)
    setup_logging('common', log_level=log_level)

    if '--debug' in sys.argv:
        logger.info("Debug logging enabled")
        sys.argv.remove('--debug')

    command_args = sys.argv[1:]

    logger.info("CLI starting...")
    try:
        if command_args:
            ok = run_line(shlex.join(command_args))
            sys.exit(0 if ok else 1)
        repl_loop()
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise
    finally:
        logger.info("CLI exiting")


if __name__ == "__main__":
    main()
