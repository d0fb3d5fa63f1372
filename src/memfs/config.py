"""Configuration loading from environment variables and memfs.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from memfs.registry.store import DEFAULT_PREVIEW_LENGTH

_CONFIG_FILENAME = "memfs.toml"
_DEFAULT_PROMPT = "file-cli> "


@dataclass
class ShellConfig:
    """Interactive shell configuration."""

    prompt: str = _DEFAULT_PROMPT
    banner: bool = True


@dataclass
class DisplayConfig:
    """Rendering options for file views."""

    preview_length: int = DEFAULT_PREVIEW_LENGTH


@dataclass
class MemfsConfig:
    """Top-level memfs configuration."""

    shell: ShellConfig = field(default_factory=ShellConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "WARNING"


def load_config(config_path: Path | None = None) -> MemfsConfig:
    """Load configuration from environment variables and optional memfs.toml.

    Priority: environment variables > memfs.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.memfs/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".memfs" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    shell_data = file_data.get("shell", {})
    display_data = file_data.get("display", {})

    preview_length = int(
        os.getenv("MEMFS_PREVIEW_LENGTH", display_data.get("preview_length", DEFAULT_PREVIEW_LENGTH))
    )
    if preview_length < 1:
        raise ValueError(f"preview_length must be positive, got {preview_length}")

    return MemfsConfig(
        shell=ShellConfig(
            prompt=os.getenv("MEMFS_PROMPT", shell_data.get("prompt", _DEFAULT_PROMPT)),
            banner=bool(shell_data.get("banner", True)),
        ),
        display=DisplayConfig(preview_length=preview_length),
        log_level=os.getenv("MEMFS_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )
