"""Command-line interface for Oops."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from oops import ConsoleHost, CorrectionController
from oops.config import default_config_path, save_default_config
from oops.console import ConsoleSender, Sender, register_builtin_commands
from oops.recovery.fuzzy import FuzzyMatcher, rank_names, threshold_for

console = Console()


def _build_host() -> ConsoleHost:
    host = ConsoleHost()
    register_builtin_commands(host)
    return host


@click.group()
@click.option("--config", "-c", type=click.Path(), help="Configuration file path")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """Oops - typo correction for console commands."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@cli.command()
@click.option("--name", default="CONSOLE", help="Sender name")
@click.option("--permission", "-p", multiple=True, help="Grant a permission (disables operator mode)")
@click.pass_context
def shell(ctx: click.Context, name: str, permission: tuple[str, ...]) -> None:
    """Start an interactive console with corrections enabled."""
    host = _build_host()
    sender = ConsoleSender(name, console=console, permissions=permission, op=not permission)

    controller = CorrectionController(
        host.registry,
        host.dispatch,
        config_path=ctx.obj.get("config_path"),
    )
    if controller.enable():
        host.add_interceptor(controller.handle_input)
    else:
        console.print("[yellow]Corrections are disabled for this session.[/yellow]")

    console.print(Panel.fit(f"Oops console - triggers: {', '.join(controller.triggers) or 'none'}"))

    try:
        while host.running:
            try:
                line = console.input("[bold green]> [/bold green]")
            except EOFError:
                break
            if line.strip():
                host.submit(sender, line)
    except KeyboardInterrupt:
        console.print()
    finally:
        controller.disable()


@cli.command()
@click.option("--permission", "-p", multiple=True, help="Permission held by the sender")
@click.option("--op", is_flag=True, help="Sender holds every permission")
@click.option("--limit", default=3, help="Number of nearby names to show")
@click.argument("token")
def match(permission: tuple[str, ...], op: bool, limit: int, token: str) -> None:
    """Show the correction offered for a mistyped command name."""
    host = _build_host()
    sender = Sender("CONSOLE", permissions=permission, op=op)
    matcher = FuzzyMatcher(host.registry)

    token = token.lstrip("/").lower()
    corrected = matcher.match(token, lambda c: sender.has_permission(c.permission))

    if token in host.registry:
        console.print(f"[green]✓ VALID[/green]: {token}")
    elif corrected:
        console.print(f"[yellow]→ CORRECTION[/yellow]: {token} -> {corrected}")
    else:
        console.print(f"[red]✗ NO MATCH[/red]: {token}")

    names = [
        name
        for command in host.registry.commands()
        if sender.has_permission(command.permission)
        for name in command.names
    ]
    nearby = rank_names(token, names, limit=limit)
    if nearby:
        table = Table(title="Nearby Names")
        table.add_column("Name", style="cyan")
        table.add_column("Similarity", style="green")
        table.add_column("Max Distance", style="yellow")
        for name, score in nearby:
            table.add_row(name, f"{score}%", str(threshold_for(name) - 1))
        console.print(table)


@cli.command()
def commands() -> None:
    """List the built-in command catalog."""
    host = _build_host()

    table = Table(title="Commands")
    table.add_column("Name", style="cyan")
    table.add_column("Aliases", style="white")
    table.add_column("Permission", style="yellow")
    table.add_column("Description", style="green")

    for command in host.registry.commands():
        table.add_row(
            command.name,
            ", ".join(command.aliases),
            command.permission or "-",
            command.description,
        )

    console.print(table)


@cli.command()
@click.argument("path", type=click.Path(), required=False)
@click.pass_context
def init_config(ctx: click.Context, path: str | None) -> None:
    """Write the default configuration file."""
    target = Path(path or ctx.obj.get("config_path") or default_config_path())
    if save_default_config(target):
        console.print(f"[green]Saved to:[/green] {target}")
    else:
        console.print(f"[yellow]Already exists:[/yellow] {target}")


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
