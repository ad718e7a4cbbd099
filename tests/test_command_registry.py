"""
Tests for the command palette registry.
"""

import pytest

from termhint.services import Command, CommandRegistry


def _noop(ctx):
    return None


@pytest.fixture
def registry():
    registry = CommandRegistry()
    registry.register(Command("quit", "Exit the application", _noop, category="app", aliases=("q", "exit")))
    registry.register(Command("help", "Show available commands", _noop, category="app"))
    registry.register(Command("find_matches", "Search targets", _noop, category="nav"))
    registry.register(Command("file_manager", "Open the file browser", _noop, category="nav"))
    return registry


class TestCommandRegistry:
    def test_get_by_name_and_alias(self, registry):
        assert registry.get("quit").name == "quit"
        assert registry.get("exit").name == "quit"
        assert registry.get("nope") is None
        assert registry.contains("q")

    def test_register_replaces_and_drops_old_aliases(self, registry):
        registry.register(Command("quit", "Leave", _noop, aliases=("bye",)))
        assert registry.get("quit").description == "Leave"
        assert registry.get("exit") is None
        assert registry.get("bye").name == "quit"
        assert len(registry) == 4

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            CommandRegistry().register(Command("", "nothing", _noop))

    def test_unregister(self, registry):
        assert registry.unregister("quit")
        assert not registry.unregister("quit")
        assert registry.get("q") is None

    def test_empty_query_lists_all_by_name(self, registry):
        suggestions = registry.search("")
        assert [s.name for s in suggestions] == ["file_manager", "find_matches", "help", "quit"]
        assert all(s.score == 0.0 for s in suggestions)

    def test_search_ranks_name_matches(self, registry):
        suggestions = registry.search("fm")
        names = [s.name for s in suggestions]
        assert set(names) >= {"file_manager", "find_matches"}
        assert suggestions[0].match_positions
        for earlier, later in zip(suggestions, suggestions[1:]):
            assert earlier.score >= later.score

    def test_search_by_alias(self, registry):
        suggestions = registry.search("exit")
        assert suggestions[0].name == "quit"

    def test_search_falls_back_to_description(self, registry):
        suggestions = registry.search("browser")
        assert [s.name for s in suggestions] == ["file_manager"]
        assert suggestions[0].match_positions == []

    def test_search_no_match(self, registry):
        assert registry.search("zzz") == []

    def test_categories(self, registry):
        assert registry.categories() == ["app", "nav"]
        assert [s.name for s in registry.filter_by_category("nav")] == [
            "file_manager",
            "find_matches",
        ]
        assert registry.filter_by_category("missing") == []

    def test_execute(self):
        calls = []
        registry = CommandRegistry()
        registry.register(Command("echo", "Echo", lambda ctx: calls.append(ctx) or "done"))
        result = registry.execute("echo", "ctx")
        assert result.success
        assert result.message == "done"
        assert calls == ["ctx"]

    def test_execute_unknown(self, registry):
        result = registry.execute("missing")
        assert not result.success
        assert "missing" in result.error

    def test_execute_handler_error(self):
        def boom(ctx):
            raise RuntimeError("kaboom")

        registry = CommandRegistry()
        registry.register(Command("boom", "Fails", boom))
        result = registry.execute("boom")
        assert not result.success
        assert result.error == "kaboom"

    def test_execute_non_string_output(self):
        registry = CommandRegistry()
        registry.register(Command("count", "Count targets", lambda ctx: 3))
        registry.register(Command("silent", "No output", lambda ctx: None))
        result = registry.execute("count")
        assert result.success
        assert result.message == "3"
        assert registry.execute("silent").message is None

    def test_execute_output_that_cannot_be_rendered(self):
        class Unprintable:
            def __str__(self):
                raise ValueError("no text form")

        registry = CommandRegistry()
        registry.register(Command("odd", "Odd output", lambda ctx: Unprintable()))
        result = registry.execute("odd")
        assert not result.success
        assert result.error == "no text form"

    def test_clear(self, registry):
        registry.clear()
        assert registry.is_empty()
        assert registry.get("q") is None
