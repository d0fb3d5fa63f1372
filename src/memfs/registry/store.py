"""In-memory file registry.

Records live in a single dict keyed by id (insertion order == creation order)
plus a name index pointing at the same objects. Every operation validates
before it mutates, so a rejected call leaves both maps and the id counter
untouched.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime

from memfs.errors import (
    AlreadyExistsError,
    EmptyContentError,
    InvalidIdError,
    InvalidInputError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_LENGTH = 50
NO_EXTENSION = "no extension"

# A name (str) or an id (int)
FileKey = str | int


@dataclass
class FileRecord:
    """A named text file held in memory."""

    id: int
    name: str
    content: str
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def size(self) -> int:
        """Byte length of the content (UTF-8)."""
        return len(self.content.encode("utf-8"))

    @property
    def extension(self) -> str | None:
        _, dot, ext = self.name.rpartition(".")
        if not dot or not ext:
            return None
        return ext


@dataclass(frozen=True)
class FileSummary:
    id: int
    name: str
    size: int


@dataclass(frozen=True)
class FileInfo:
    """Detailed, read-only view of a record."""

    id: int
    name: str
    size: int
    created_at: datetime
    preview: str
    truncated: bool


@dataclass(frozen=True)
class RegistryStats:
    file_count: int
    total_size: int
    average_size: int
    extensions: dict[str, int]


def truncate_preview(content: str, length: int) -> tuple[str, bool]:
    """Return the first ``length`` characters of ``content`` and whether it was cut.

    Slicing a ``str`` works on code points, so a multi-byte character is never
    split at the boundary.
    """
    if len(content) > length:
        return content[:length], True
    return content, False


def _utf8_size(text: str, what: str) -> int:
    """Byte length of ``text``; lone surrogates are rejected."""
    try:
        return len(text.encode("utf-8"))
    except UnicodeEncodeError:
        raise InvalidInputError(f"{what} is not valid UTF-8 text") from None


class FileRegistry:
    """Owns every live file record and the id allocator."""

    def __init__(self, preview_length: int = DEFAULT_PREVIEW_LENGTH) -> None:
        self.preview_length = preview_length
        self._files: dict[int, FileRecord] = {}
        self._by_name: dict[str, FileRecord] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    # ── Mutations ─────────────────────────────────────────────

    def create(self, name: str, content: str) -> int:
        """Store a new file and return its id."""
        if not name or not name.strip():
            raise InvalidInputError("File name cannot be empty")
        _utf8_size(name, "File name")
        if name in self._by_name:
            logger.debug("Rejected create: %s already exists", name)
            raise AlreadyExistsError(name)
        if not content:
            logger.debug("Rejected create of %s: empty content", name)
            raise EmptyContentError()
        size = _utf8_size(content, "File content")

        record = FileRecord(id=self._next_id, name=name, content=content)
        self._files[record.id] = record
        self._by_name[name] = record
        self._next_id += 1
        logger.info("Created file %s (id=%d, %d bytes)", name, record.id, size)
        return record.id

    def write(self, name: str, content: str) -> None:
        """Replace the content of an existing file."""
        record = self.find_by_name(name)
        if not content:
            logger.debug("Rejected write to %s: empty content", name)
            raise EmptyContentError()
        size = _utf8_size(content, "File content")
        record.content = content
        logger.info("Wrote %d bytes to %s", size, name)

    def delete(self, key: FileKey) -> None:
        """Remove a file. Its name becomes free again, its id never is."""
        record = self._lookup(key)
        del self._files[record.id]
        del self._by_name[record.name]
        logger.info("Deleted file %s (id=%d)", record.name, record.id)

    # ── Lookups ───────────────────────────────────────────────

    def find_by_name(self, name: str) -> FileRecord:
        record = self._by_name.get(name)
        if record is None:
            raise NotFoundError(name)
        return record

    def find_by_id(self, file_id: int) -> FileRecord:
        # bool is an int subclass; True must not resolve to id 1
        if isinstance(file_id, bool) or not isinstance(file_id, int) or file_id < 1:
            raise InvalidIdError(file_id)
        record = self._files.get(file_id)
        if record is None:
            raise NotFoundError(file_id)
        return record

    def has_id(self, file_id: int) -> bool:
        return file_id in self._files

    def _lookup(self, key: FileKey) -> FileRecord:
        if isinstance(key, str):
            return self.find_by_name(key)
        return self.find_by_id(key)

    # ── Queries ───────────────────────────────────────────────

    def read(self, key: FileKey) -> str:
        return self._lookup(key).content

    def list(self) -> list[FileSummary]:
        """All live files in creation order."""
        return [FileSummary(r.id, r.name, r.size) for r in self._files.values()]

    def info(self, key: FileKey) -> FileInfo:
        record = self._lookup(key)
        preview, truncated = truncate_preview(record.content, self.preview_length)
        return FileInfo(
            id=record.id,
            name=record.name,
            size=record.size,
            created_at=record.created_at,
            preview=preview,
            truncated=truncated,
        )

    def stats(self) -> RegistryStats:
        sizes = [r.size for r in self._files.values()]
        total = sum(sizes)
        count = len(sizes)
        extensions = Counter(r.extension or NO_EXTENSION for r in self._files.values())
        return RegistryStats(
            file_count=count,
            total_size=total,
            average_size=total // count if count else 0,
            extensions=dict(extensions),
        )
