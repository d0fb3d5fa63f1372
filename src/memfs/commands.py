"""Command vocabulary and name-or-id resolution for the shell."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from memfs.errors import InvalidInputError

if TYPE_CHECKING:
    from memfs.registry.store import FileKey, FileRegistry


class Operation(str, Enum):
    CREATE = "create"
    WRITE = "write"
    READ = "read"
    LIST = "list"
    DELETE = "delete"
    INFO = "info"
    STATS = "stats"
    HELP = "help"
    QUIT = "quit"


_ALIASES: dict[str, Operation] = {
    "create": Operation.CREATE,
    "c": Operation.CREATE,
    "write": Operation.WRITE,
    "w": Operation.WRITE,
    "read": Operation.READ,
    "r": Operation.READ,
    "list": Operation.LIST,
    "l": Operation.LIST,
    "ls": Operation.LIST,
    "delete": Operation.DELETE,
    "d": Operation.DELETE,
    "del": Operation.DELETE,
    "info": Operation.INFO,
    "i": Operation.INFO,
    "stats": Operation.STATS,
    "s": Operation.STATS,
    "help": Operation.HELP,
    "h": Operation.HELP,
    "?": Operation.HELP,
    "quit": Operation.QUIT,
    "q": Operation.QUIT,
    "exit": Operation.QUIT,
}

HELP_LINES = [
    "create, c    - Create a new file",
    "write, w     - Write content to an existing file",
    "read, r      - Read file content (by name or ID)",
    "list, l, ls  - List all files",
    "delete, d    - Delete a file (by name or ID)",
    "info, i      - Show detailed file information",
    "stats, s     - Show system statistics",
    "help, h, ?   - Show this help message",
    "quit, q      - Exit the program",
]


def parse_operation(text: str) -> Operation:
    """Map a command word (or alias) to its Operation."""
    word = text.strip().lower()
    try:
        return _ALIASES[word]
    except KeyError:
        raise InvalidInputError(f"Unknown command: {text.strip()}") from None


def resolve_key(registry: FileRegistry, text: str) -> FileKey:
    """Turn free-form user input into a registry key.

    A positive integer that matches a live id is an id lookup; anything else
    is a name. A file literally named "1" is therefore shadowed by id 1 while
    both exist.
    """
    if text.isascii() and text.isdigit():
        file_id = int(text)
        if file_id > 0 and registry.has_id(file_id):
            return file_id
    return text
