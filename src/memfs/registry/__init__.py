"""In-memory file registry.

Nothing here touches the disk: records live for as long as the owning
``FileRegistry`` instance does.

    store.py    FileRecord, FileRegistry and the read-only views it returns
    display.py  summary / detailed / stats renderings for the shell
"""

from memfs.registry.store import (
    FileInfo,
    FileRecord,
    FileRegistry,
    FileSummary,
    RegistryStats,
)

__all__ = ["FileInfo", "FileRecord", "FileRegistry", "FileSummary", "RegistryStats"]
