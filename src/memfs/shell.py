"""Interactive REPL over a FileRegistry."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, BinaryIO, Callable, TextIO

from memfs.commands import HELP_LINES, Operation, parse_operation, resolve_key
from memfs.config import ShellConfig
from memfs.errors import FileError, InvalidInputError
from memfs.registry.display import format_detailed, format_stats, format_summary

if TYPE_CHECKING:
    from memfs.registry.store import FileRegistry

logger = logging.getLogger(__name__)

OK = "✅"
FAIL = "❌"
_RULE = "-" * 40


class FileShell:
    """Line-oriented shell: reads commands from stdin, writes to stdout.

    One command is read, executed and rendered before the next line is read.
    Domain errors are printed and the loop continues; only ``quit`` (or EOF)
    ends it.
    """

    def __init__(
        self,
        registry: FileRegistry,
        config: ShellConfig | None = None,
        stdin: TextIO | BinaryIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or ShellConfig()
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._handlers: dict[Operation, Callable[[], None]] = {
            Operation.CREATE: self._create,
            Operation.WRITE: self._write,
            Operation.READ: self._read,
            Operation.LIST: self._list,
            Operation.DELETE: self._delete,
            Operation.INFO: self._info,
            Operation.STATS: self._stats,
            Operation.HELP: self._help,
        }

    # ── Loop ─────────────────────────────────────────────────

    def run(self) -> None:
        if self.config.banner:
            self._print("🗂️  Welcome to the In-Memory File Management System!")
            self._print("Type 'help' to see available commands.\n")

        while True:
            line = self._read_line(self.config.prompt)
            if line is None:
                self._print("")
                break

            if not line.strip():
                continue

            try:
                if not self.execute(parse_operation(line)):
                    break
            except FileError as e:
                self._print(f"{FAIL} {e}")
            except EOFError:
                self._print("")
                break

        self._print("👋 Goodbye!")

    def execute(self, operation: Operation) -> bool:
        """Run one operation. Returns False when the loop should stop."""
        if operation is Operation.QUIT:
            return False
        logger.debug("Executing %s", operation.value)
        self._handlers[operation]()
        return True

    # ── I/O helpers ──────────────────────────────────────────

    def _print(self, text: str) -> None:
        self._stdout.write(text + "\n")

    def _read_line(self, prompt: str) -> str | None:
        self._stdout.write(prompt)
        self._stdout.flush()
        # Read bytes where the stream has them so undecodable input becomes U+FFFD
        stream = getattr(self._stdin, "buffer", self._stdin)
        raw = stream.readline()
        if not raw:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        return raw.rstrip("\r\n")

    def _ask(self, prompt: str) -> str:
        """Prompt for a required argument."""
        line = self._read_line(prompt)
        if line is None:
            raise EOFError
        value = line.strip()
        if not value:
            raise InvalidInputError("Input cannot be empty")
        return value

    # ── Commands ─────────────────────────────────────────────

    def _create(self) -> None:
        name = self._ask("Enter file name: ")
        content = self._ask("Enter file content: ")
        file_id = self.registry.create(name, content)
        self._print(f"{OK} File '{name}' created successfully with ID: {file_id}")

    def _write(self) -> None:
        name = self._ask("Enter file name: ")
        content = self._ask("Enter new content: ")
        self.registry.write(name, content)
        size = self.registry.find_by_name(name).size
        self._print(f"{OK} Content written to '{name}' successfully ({size} bytes)")

    def _read(self) -> None:
        key = resolve_key(self.registry, self._ask("Enter file name or ID: "))
        content = self.registry.read(key)
        self._print(f"📄 Content of '{self._label(key)}':")
        self._print(_RULE)
        self._print(content)
        self._print(_RULE)

    def _list(self) -> None:
        files = self.registry.list()
        if not files:
            self._print("📭 No files found.")
            return
        self._print("📂 Files in system:")
        for file in files:
            self._print(f"  {format_summary(file)}")

    def _delete(self) -> None:
        key = resolve_key(self.registry, self._ask("Enter file name or ID: "))
        label = self._label(key)
        self.registry.delete(key)
        self._print(f"{OK} File '{label}' deleted successfully")

    def _info(self) -> None:
        key = resolve_key(self.registry, self._ask("Enter file name or ID: "))
        info = self.registry.info(key)
        self._print("📋 File Information:")
        self._print(format_detailed(info))

    def _stats(self) -> None:
        self._print("📊 System Statistics:")
        for line in format_stats(self.registry.stats()):
            self._print(f"  {line}")

    def _help(self) -> None:
        self._print("📚 Available Commands:")
        for line in HELP_LINES:
            self._print(f"  {line}")

    def _label(self, key: int | str) -> str:
        if isinstance(key, int):
            return self.registry.find_by_id(key).name
        return key
