"""Text renderings of registry records for the shell."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from memfs.registry.store import NO_EXTENSION

if TYPE_CHECKING:
    from memfs.registry.store import FileInfo, FileSummary, RegistryStats


def format_elapsed(seconds: float) -> str:
    """Compact duration: ``4.2s``, ``3m12s``, ``1h5m0s``."""
    if seconds < 0:
        seconds = 0
    if seconds < 60:
        return f"{seconds:.1f}s"
    if seconds < 3600:
        m, s = divmod(int(seconds), 60)
        return f"{m}m{s}s"
    h, rem = divmod(int(seconds), 3600)
    m, s = divmod(rem, 60)
    return f"{h}h{m}m{s}s"


def format_summary(file: FileSummary) -> str:
    return f"[{file.id}] {file.name} ({file.size} bytes)"


def format_detailed(info: FileInfo, now: datetime | None = None) -> str:
    now = now or datetime.now()
    elapsed = (now - info.created_at).total_seconds()
    ellipsis = "..." if info.truncated else ""
    return "\n".join([
        f"ID: {info.id}",
        f"Name: {info.name}",
        f"Size: {info.size} bytes",
        f"Created: {format_elapsed(elapsed)} ago",
        f"Preview: {info.preview}{ellipsis}",
    ])


def format_stats(stats: RegistryStats) -> list[str]:
    lines = [
        f"Total files: {stats.file_count}",
        f"Total size: {stats.total_size} bytes",
        f"Average file size: {stats.average_size} bytes",
    ]
    if stats.extensions:
        lines.append("File types:")
        for ext, count in stats.extensions.items():
            label = ext if ext == NO_EXTENSION else f".{ext}"
            noun = "file" if count == 1 else "files"
            lines.append(f"  {label}: {count} {noun}")
    return lines
