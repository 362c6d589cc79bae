"""Tests for Rich Console factory and theme."""

from io import StringIO

from epochctl.output.console import EPOCH_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_plain_when_not_a_terminal(self) -> None:
        console = create_console()
        console.print("[epoch.label]Epoch timestamp[/epoch.label]: 42")
        assert get_output(console) == "Epoch timestamp: 42\n"

    def test_force_terminal_emits_styles(self) -> None:
        console = create_console(force_terminal=True)
        console.print("[epoch.label]Epoch timestamp[/epoch.label]")
        assert "\x1b[" in get_output(console)

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80


def test_theme_styles() -> None:
    assert "epoch.label" in EPOCH_THEME.styles
    assert "epoch.error" in EPOCH_THEME.styles
