"""Exceptions raised by the registry and the command layer."""

from __future__ import annotations


class FileError(Exception):
    """Base class for every recoverable memfs error."""


class NotFoundError(FileError):
    def __init__(self, key: str | int) -> None:
        self.key = key
        if isinstance(key, int):
            super().__init__(f"File with ID {key} not found")
        else:
            super().__init__(f"File '{key}' not found")


class AlreadyExistsError(FileError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"File '{name}' already exists")


class InvalidInputError(FileError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid input: {message}")


class EmptyContentError(FileError):
    def __init__(self) -> None:
        super().__init__("File content cannot be empty")


class InvalidIdError(FileError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid file ID: {value}")
