"""
Tests for the overlay context frame boundary and the full interaction flow.
"""

from termhint.config import NavConfig, OverlayConfig
from termhint.schemas import Rect, Target, TargetPriority, TooltipContent
from termhint.services import Command, OverlayContext


def _populate(ctx):
    ctx.targets.register(Target(id=1, rect=Rect.of(0, 0, 10, 10), label="Files"))
    ctx.targets.register(Target(id=2, rect=Rect.of(5, 5, 10, 10), label="Search"))
    ctx.targets.register(
        Target(id=3, rect=Rect.of(20, 20, 10, 10), label="Quit", priority=TargetPriority.HIGH)
    )


class TestFrameBoundary:
    def test_begin_frame_clears_only_targets(self):
        ctx = OverlayContext()
        _populate(ctx)
        ctx.tooltips.register(1, TooltipContent(body="Browse files"))
        ctx.commands.register(Command("quit", "Exit", lambda c: None))
        ctx.record_command("quit")

        ctx.begin_frame()

        assert ctx.targets.is_empty()
        assert ctx.frame_count == 1
        assert ctx.tooltips.contains(1)
        assert ctx.commands.contains("quit")
        assert ctx.history == ["quit"]

    def test_tooltip_outlives_and_precedes_target(self):
        ctx = OverlayContext()
        ctx.tooltips.register(1, TooltipContent(body="Browse files"))
        screen = Rect.of(0, 0, 80, 24)
        assert ctx.tooltip_position(1, screen) is None

        _populate(ctx)
        result = ctx.tooltip_position(1, screen)
        assert result is not None
        assert result.rect.width > 0

        ctx.begin_frame()
        assert ctx.tooltip_position(1, screen) is None
        assert ctx.tooltips.get(1).body == "Browse files"


class TestHistory:
    def test_skips_blank_and_repeated(self):
        ctx = OverlayContext()
        for text in ["open", "open", "  ", "close", "open"]:
            ctx.record_command(text)
        assert ctx.history == ["open", "close", "open"]

    def test_bounded(self):
        ctx = OverlayContext(OverlayConfig(max_history=2))
        for text in ["a", "b", "c"]:
            ctx.record_command(text)
        assert ctx.history == ["b", "c"]
        ctx.clear_history()
        assert ctx.history == []

    def test_omnibar_survives_frames_and_shares_history(self):
        ctx = OverlayContext()
        ctx.record_command("first")
        ctx.omnibar.activate()
        for char in "dra":
            ctx.omnibar.insert_char(char)

        ctx.begin_frame()

        assert ctx.omnibar.is_active
        assert ctx.omnibar.buffer == "dra"
        ctx.omnibar.history_prev()
        assert ctx.omnibar.buffer == "first"

    def test_submit_omnibar_executes(self):
        ctx = OverlayContext()
        ctx.commands.register(Command("quit", "Exit", lambda c: "bye", aliases=("q",)))
        ctx.omnibar.activate()
        assert ctx.submit_omnibar() is None
        ctx.omnibar.insert_char("q")
        result = ctx.submit_omnibar()
        assert result.success and result.message == "bye"
        assert ctx.history == ["q"]
        assert not ctx.omnibar.is_active

    def test_run_command_records_and_executes(self):
        ctx = OverlayContext()
        seen = []
        ctx.commands.register(Command("ping", "Ping", lambda c: seen.append(c) or "pong"))
        result = ctx.run_command(" ping ")
        assert result.success and result.message == "pong"
        assert seen == [ctx]
        assert ctx.history == ["ping"]


class TestInteractionFlow:
    def test_spatial_fuzzy_and_hint_flow(self):
        ctx = OverlayContext(OverlayConfig(nav=NavConfig(hint_charset="asdf")))
        _populate(ctx)

        assert {t.id for t in ctx.targets.at_point(7, 7)} == {1, 2}
        assert [t.id for t in ctx.targets.at_point(25, 25)] == [3]
        assert ctx.targets.nearest_to(0, 0).id == 1

        labels = [t.label for t in ctx.targets]
        best = ctx.matcher.find_matches("srch", labels)[0]
        assert best.text == "Search"

        hints = ctx.navigation.activate(ctx.targets)
        assert [(h.text, h.target_id) for h in hints] == [("a", 3), ("s", 1), ("d", 2)]
        selected = ctx.navigation.handle_char("d")
        assert selected.id == 2
        assert not ctx.navigation.is_active
