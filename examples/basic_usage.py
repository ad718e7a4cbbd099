"""
Basic usage examples for termhint.
"""

from termhint import OverlayContext, Rect, TargetBuilder, TooltipContent
from termhint.services import Command
from termhint.utils.logging import setup_logging

SCREEN = Rect.of(0, 0, 80, 24)


def build_frame(ctx: OverlayContext) -> None:
    """
    Register the targets a host would draw in one frame.
    """
    builder = TargetBuilder()
    ctx.begin_frame()
    ctx.targets.register(builder.tab(Rect.of(0, 0, 8, 1), "Files"))
    ctx.targets.register(builder.tab(Rect.of(9, 0, 8, 1), "Search"))
    for row, name in enumerate(["README.md", "setup.py", "src/"], start=2):
        ctx.targets.register(builder.list_item(Rect.of(0, row, 30, 1), name))
    ctx.targets.register(builder.button(Rect.of(70, 22, 8, 1), "Quit"))


def example_hint_mode(ctx: OverlayContext):
    """
    Example: Pick a target by typing its hint.
    """
    print("\n" + "=" * 60)
    print("Example 1: Hint Mode")
    print("=" * 60)

    hints = ctx.navigation.activate(ctx.targets)
    for hint in hints:
        print(f"  [{hint.text}] {ctx.targets.by_id(hint.target_id).label}")

    typed = hints[2].text
    for char in typed:
        selected = ctx.navigation.handle_char(char)
    print(f"\nTyped {typed!r} -> {selected.label}")


def example_command_palette(ctx: OverlayContext):
    """
    Example: Fuzzy search and run a palette command.
    """
    print("\n" + "=" * 60)
    print("Example 2: Command Palette")
    print("=" * 60)

    ctx.commands.register(
        Command("open_file", "Open a file", lambda c: "opened", category="file", aliases=("o",))
    )
    ctx.commands.register(Command("quit", "Exit the application", lambda c: "bye"))

    for suggestion in ctx.commands.search("opf"):
        print(f"  {suggestion.name:<12} {suggestion.score:5.1f}")

    result = ctx.run_command("o")
    print(f"\nSuccess: {result.success} ({result.message})")


def example_tooltip(ctx: OverlayContext):
    """
    Example: Place a tooltip next to a target near the screen edge.
    """
    print("\n" + "=" * 60)
    print("Example 3: Tooltip")
    print("=" * 60)

    quit_button = ctx.targets.nearest_to(79, 23)
    ctx.tooltips.register(quit_button.id, TooltipContent(body="Leave the app", title="Quit"))
    result = ctx.tooltip_position(quit_button.id, SCREEN)
    print(f"\nSide: {result.side.value} {result.arrow_direction.glyph} flipped={result.was_flipped}")
    print(f"Rect: {result.rect}")


def main():
    """
    Run all examples.
    """
    setup_logging(verbose=False)
    ctx = OverlayContext()
    build_frame(ctx)

    example_hint_mode(ctx)
    example_command_palette(ctx)
    example_tooltip(ctx)


if __name__ == "__main__":
    main()
