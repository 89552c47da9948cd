"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

from chunkget.decoder import ELEMENT_TYPES
from chunkget.dispatcher import KEYWORD_NAMES

COMMANDS = ["chunkget", "peer", "clear", "exit", "help"]

KEYWORD_COMPLETIONS = [f"{name}=" for name in KEYWORD_NAMES]
CHUNKGET_COMPLETIONS = list(ELEMENT_TYPES) + KEYWORD_COMPLETIONS + ["true", "false"]

STYLE = Style.from_dict(
    {
        "prompt": "#2AA198 bold",
        "command": "#0088ff bold",
    }
)

TEAL = "\033[38;2;42;161;152m"
RED = "\033[31m"
RESET = "\033[0m"

LOGO = f"""{TEAL}
  ___ _             _   _____
 / __| |_ _  _ _ _ | |_|_   _|__ _ _ _ __
| (__| ' \\ || | ' \\| / / | |/ -_) '_| '  \\
 \\___|_||_\\_,_|_||_|_\\_\\ |_|\\___|_| |_|_|_|
{RESET}"""

WELCOME_TITLE = "chunkterm - storage cluster chunk inspector"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "chunkterm> "

HELP_TEXT = """Available commands:
  chunkget <cid|nid lid> [options]    Print the data of a chunk (see 'help chunkget')
  peer [host port]                    Show or set the storage peer to talk to
  clear                               Clear screen and redisplay welcome message
  help [command]                      Show this help
  exit                                Exit REPL"""

CHUNKGET_HELP = """Get a chunk specified by either full cid or separate nid + lid from a storage peer

Usage:
  chunkget <cid>                              print chunk as text
  chunkget <cid> <class>                      load chunk into data structure <class>
  chunkget <cid> <type> [hex] [offset] [length]
  chunkget <cid> [offset] [length] [type] [hex]
  chunkget <nid> <lid> ...                    same forms with nid + lid instead of cid
  chunkget cid=<cid> type=<type> ...          named arguments, in any order

Arguments:
  cid     Full chunk id. An all-digit value (10) is decimal, anything else
          (0x1a, 1a) is hex. A decimal cid followed by more arguments is
          read as <nid> <lid>, so write the cid in hex (0x...) or use cid=
  nid     Node id part of the chunk id (decimal, or hex when not all digits)
  lid     Local id part of the chunk id (decimal, or hex when not all digits)
  offset  Offset within the chunk to start printing from (default 0)
  length  Number of bytes to print (default: up to the end, range is truncated to the chunk)
  type    Element type: str, byte, short, int, long (default str)
  hex     For byte/short/int/long, print as hex instead of decimal (default true)
  class   Name of the data structure type to load the chunk into; cannot be
          combined with type, hex, offset or length

Examples:
  chunkget 0x1000000000001
  chunkget 1 1 int false 0 16
  chunkget 0x1000000000001 8 8 long
  chunkget nid=1 lid=1 type=short hex=false"""

PEER_HELP = """Show or set the storage peer

Usage:
  peer                 show current peer address
  peer <host> <port>   use another peer (saved to config)"""

COMMAND_HELP = {
    "chunkget": CHUNKGET_HELP,
    "peer": PEER_HELP,
}
