"""Tests for the buffered Rich console."""

from rich.console import Console
from rich.text import Text

from civiltime.output.console import DEFAULT_WIDTH, render_to_text


class TestRenderToText:
    def test_returns_printed_text(self) -> None:
        def draw(console: Console) -> None:
            console.print(Text("OK", style="civil.ok"), "done")

        assert render_to_text(draw) == "OK done"

    def test_strips_trailing_newlines(self) -> None:
        def draw(console: Console) -> None:
            console.print("a")
            console.print()

        assert render_to_text(draw) == "a"

    def test_default_width(self) -> None:
        seen: list[int] = []
        render_to_text(lambda console: seen.append(console.width))
        assert seen == [DEFAULT_WIDTH]

    def test_explicit_width(self) -> None:
        seen: list[int] = []
        render_to_text(lambda console: seen.append(console.width), width=40)
        assert seen == [40]

    def test_theme_styles_resolve(self) -> None:
        def draw(console: Console) -> None:
            console.print("[civil.value]2014-03-21[/civil.value]")

        assert render_to_text(draw) == "2014-03-21"
