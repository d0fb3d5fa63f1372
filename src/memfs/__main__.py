"""Entry point: python -m memfs

Starts the interactive shell over a fresh, empty in-memory registry.
"""

from __future__ import annotations

import logging

from memfs.config import load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main() -> None:
    config = load_config()
    _setup_logging(config.log_level)

    from memfs.registry import FileRegistry
    from memfs.shell import FileShell

    registry = FileRegistry(preview_length=config.display.preview_length)
    shell = FileShell(registry, config.shell)

    try:
        shell.run()
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")


if __name__ == "__main__":
    main()
