"""Tests for command parsing and name-or-id resolution."""

from __future__ import annotations

import pytest

from memfs.commands import Operation, parse_operation, resolve_key
from memfs.errors import InvalidInputError
from memfs.registry.store import FileRegistry


class TestParseOperation:
    @pytest.mark.parametrize(
        "word, expected",
        [
            ("create", Operation.CREATE),
            ("c", Operation.CREATE),
            ("write", Operation.WRITE),
            ("w", Operation.WRITE),
            ("read", Operation.READ),
            ("r", Operation.READ),
            ("list", Operation.LIST),
            ("l", Operation.LIST),
            ("ls", Operation.LIST),
            ("delete", Operation.DELETE),
            ("d", Operation.DELETE),
            ("del", Operation.DELETE),
            ("info", Operation.INFO),
            ("i", Operation.INFO),
            ("stats", Operation.STATS),
            ("s", Operation.STATS),
            ("help", Operation.HELP),
            ("h", Operation.HELP),
            ("?", Operation.HELP),
            ("quit", Operation.QUIT),
            ("q", Operation.QUIT),
            ("exit", Operation.QUIT),
        ],
    )
    def test_aliases(self, word: str, expected: Operation):
        assert parse_operation(word) is expected

    def test_case_and_whitespace(self):
        assert parse_operation("  LS \n") is Operation.LIST

    def test_unknown(self):
        with pytest.raises(InvalidInputError, match="Unknown command: frobnicate"):
            parse_operation("frobnicate")


class TestResolveKey:
    @pytest.fixture
    def registry(self) -> FileRegistry:
        r = FileRegistry()
        r.create("notes.txt", "hello")
        return r

    def test_name(self, registry: FileRegistry):
        assert resolve_key(registry, "notes.txt") == "notes.txt"

    def test_existing_id(self, registry: FileRegistry):
        assert resolve_key(registry, "1") == 1

    def test_unknown_id_falls_back_to_name(self, registry: FileRegistry):
        assert resolve_key(registry, "42") == "42"

    @pytest.mark.parametrize("text", ["0", "-1", "1.0", "٣"])
    def test_non_positive_or_odd_numbers_are_names(self, registry: FileRegistry, text: str):
        assert resolve_key(registry, text) == text

    def test_id_shadows_numeric_name(self, registry: FileRegistry):
        registry.create("1", "a file literally named one")
        assert resolve_key(registry, "1") == 1
        assert registry.read(resolve_key(registry, "1")) == "hello"

    def test_numeric_name_reachable_once_id_is_gone(self, registry: FileRegistry):
        registry.create("1", "named one")
        registry.delete(1)
        assert resolve_key(registry, "1") == "1"
        assert registry.read(resolve_key(registry, "1")) == "named one"
