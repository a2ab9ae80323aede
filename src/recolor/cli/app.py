"""Typer CLI application for managing stored tweaks."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from recolor.config import resolve_tweaks_path
from recolor.core import color as engine
from recolor.core.constants import CHANNELS
from recolor.errors import RecolorError
from recolor.host.base import Level
from recolor.host.memory import StaticTheme
from recolor.store.tweaks import TweakStore

LEVEL_STYLES = {
    Level.INFO: "green",
    Level.WARN: "yellow",
    Level.ERROR: "red",
}


class ConsoleNotifier:
    """Notifier printing to a rich console, counting errors."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self.errors = 0

    def notify(self, message: str, level: Level = Level.INFO) -> None:
        if level is Level.ERROR:
            self.errors += 1
        self.console.print(f"[{LEVEL_STYLES[level]}]{escape(message)}[/]")


def _swatch(color: str) -> str:
    return f"[{color}]██[/] {color}"


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="recolor",
        help="Inspect and edit per-theme highlight color tweaks.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)
    notifier = ConsoleNotifier(console)
    settings: dict[str, Path] = {}

    def open_store(theme: str) -> TweakStore:
        return TweakStore(settings["path"], StaticTheme(theme), notifier=notifier)

    def fail(message: str) -> None:
        console.print(f"[red]{escape(message)}[/]")
        raise typer.Exit(1)

    def finish() -> None:
        if notifier.errors:
            raise typer.Exit(1)

    @app.callback()
    def main(
        file: Annotated[Optional[Path], typer.Option("--file", "-f", help="Tweak file (default: $XDG_CONFIG_HOME/recolor/recolor.json)")] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Inspect and edit per-theme highlight color tweaks."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
            force=True,
        )
        settings["path"] = resolve_tweaks_path(file)

    @app.command()
    def path() -> None:
        """Print the tweak file location."""
        print(settings["path"])

    @app.command("list")
    def list_tweaks(
        theme: Annotated[Optional[str], typer.Option("--theme", "-t", help="Only this theme")] = None,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """List stored tweaks, grouped by theme."""
        store = open_store(theme or "")
        data = store.load().to_dict()
        if theme is not None:
            data = {theme: data[theme]} if theme in data else {}

        if json_output:
            print(json.dumps(data, indent=2))
            return

        if not data:
            console.print("[dim]No tweaks stored[/]")
            return

        for name in sorted(data):
            store.themes = StaticTheme(name)
            table = Table(title=escape(name), title_justify="left")
            table.add_column("Group")
            for ch in CHANNELS:
                table.add_column(ch)
            for group in store.get_tweaked_groups():
                cells = [
                    _swatch(group.tweaks[ch]) if ch in group.tweaks else ""
                    for ch in CHANNELS
                ]
                table.add_row(escape(group.name), *cells)
            console.print(table)

    @app.command("set")
    def set_tweak(
        theme: Annotated[str, typer.Argument(help="Theme name")],
        group: Annotated[str, typer.Argument(help="Highlight group")],
        channel: Annotated[str, typer.Argument(help="fg, bg or sp")],
        color: Annotated[str, typer.Argument(help="Hex color, e.g. #1a1a2e")],
    ) -> None:
        """Store a color for one channel of a group."""
        try:
            engine.check_channel(channel)
            value = engine.normalize_hex(color)
        except RecolorError as e:
            fail(str(e))
            return
        open_store(theme).set_tweak(group, channel, value)
        finish()
        console.print(f"{escape(theme)}: {escape(group)} {channel} = {_swatch(value)}")

    @app.command()
    def remove(
        theme: Annotated[str, typer.Argument(help="Theme name")],
        group: Annotated[str, typer.Argument(help="Highlight group")],
        channel: Annotated[Optional[str], typer.Argument(help="Channel (all when omitted)")] = None,
    ) -> None:
        """Remove a tweak, or every tweak of a group."""
        store = open_store(theme)
        if channel is None:
            if not store.is_group_tweaked(group):
                fail(f"{group} is not tweaked in {theme}")
            store.remove_group(group)
        else:
            try:
                engine.check_channel(channel)
            except RecolorError as e:
                fail(str(e))
            if not store.is_tweaked(group, channel):
                fail(f"{group} {channel} is not tweaked in {theme}")
            store.remove_tweak(group, channel)
        finish()
        console.print(f"[green]Removed {escape(group)}{' ' + channel if channel else ''}[/]")

    @app.command()
    def clear(
        theme: Annotated[str, typer.Argument(help="Theme name")],
    ) -> None:
        """Remove every tweak of a theme."""
        store = open_store(theme)
        count = sum(len(g.tweaks) for g in store.get_tweaked_groups())
        store.clear_scheme()
        finish()
        console.print(f"[green]Cleared {count} tweak(s) for {escape(theme)}[/]")

    @app.command()
    def adjust(
        theme: Annotated[str, typer.Argument(help="Theme name")],
        group: Annotated[str, typer.Argument(help="Highlight group")],
        channel: Annotated[str, typer.Argument(help="fg, bg or sp")],
        hue: Annotated[float, typer.Option("--hue", help="Hue delta in degrees")] = 0.0,
        brightness: Annotated[float, typer.Option("--brightness", help="Lightness delta (-1 to 1)")] = 0.0,
        saturation: Annotated[float, typer.Option("--saturation", help="Saturation delta (-1 to 1)")] = 0.0,
    ) -> None:
        """Adjust a stored tweak's hue, brightness or saturation."""
        try:
            engine.check_channel(channel)
        except RecolorError as e:
            fail(str(e))
        store = open_store(theme)
        current = store.get_tweak(group, channel)
        if current is None:
            fail(f"No stored {channel} tweak for {group} in {theme}")
            return

        value = current
        if hue:
            value = engine.adjust_hue(value, hue)
        if brightness:
            value = engine.adjust_brightness(value, brightness)
        if saturation:
            value = engine.adjust_saturation(value, saturation)

        store.set_tweak(group, channel, value)
        finish()
        console.print(f"{escape(group)} {channel}: {current} → {_swatch(value)}")

    @app.command()
    def convert(
        color: Annotated[str, typer.Argument(help="Hex color")],
    ) -> None:
        """Show a color as hex, RGB and HSL."""
        try:
            value = engine.normalize_hex(color)
        except RecolorError as e:
            fail(str(e))
            return
        r, g, b = engine.hex_to_rgb(value)
        h, s, l = engine.rgb_to_hsl(r, g, b)
        console.print(f"[bold]Hex:[/] {_swatch(value)}")
        console.print(f"[bold]RGB:[/] {r}, {g}, {b}")
        console.print(f"[bold]HSL:[/] {h:.1f}°, {s * 100:.1f}%, {l * 100:.1f}%")

    return app
