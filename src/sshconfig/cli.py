"""CLI commands for sshconfig."""

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from sshconfig import __version__
from sshconfig.config import (
    clear_ssh_config_path,
    get_ssh_config_path,
    load_config,
    set_ssh_config_path,
    set_stamp_comment,
)
from sshconfig.keywords import HOST, HOST_NAME, PORT, USER, is_known_keyword
from sshconfig.ssh_config import SSHConfig, SSHHost, new_host, new_param, parse_file

app = typer.Typer(
    name="sshconfig",
    help="Inspect and edit ~/.ssh/config without losing comments.",
    add_completion=False,
)

console = Console()

logger = logging.getLogger(__name__)


def version_callback(value: bool):
    if value:
        console.print(f"[bold cyan]sshconfig[/bold cyan] version {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    file: str = typer.Option(
        None,
        "--file",
        "-f",
        help="SSH config file to use instead of the configured default.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
):
    """Inspect and edit ~/.ssh/config without losing comments."""
    _setup_logging(verbose)
    ctx.obj = Path(file).expanduser() if file else None


def _fail(message: str, title: str = "Error") -> NoReturn:
    console.print(Panel(f"[red]{message}[/red]", title=title, border_style="red"))
    raise typer.Exit(1)


def _config_path(ctx: typer.Context) -> Path:
    if ctx.obj is not None:
        return ctx.obj
    return get_ssh_config_path()


def _load(path: Path, missing_ok: bool = False) -> SSHConfig:
    """Parse path, reporting read errors and exiting on failure."""
    try:
        return parse_file(path)
    except FileNotFoundError:
        if missing_ok:
            logger.debug("%s does not exist, starting from an empty config", path)
            return SSHConfig()
        _fail(f"SSH config not found: {escape(str(path))}")
    except OSError as e:
        _fail(f"Cannot read {escape(str(path))}: {escape(str(e))}")


def _save(config: SSHConfig, path: Path) -> None:
    try:
        written = config.write_to_path(path)
    except OSError as e:
        _fail(f"Cannot write {escape(str(path))}: {escape(str(e))}")
    logger.debug("Wrote %d bytes to %s", written, path)


def _comments(comment: str | None) -> list[str]:
    if comment is None:
        comment = load_config().stamp_comment
    return [comment] if comment else []


def _param_value(block: SSHHost, keyword: str) -> str:
    param = block.get_param(keyword)
    return param.value if param is not None and param.args else "-"


@app.command()
def show(ctx: typer.Context):
    """Print the SSH config in canonical form."""
    config = _load(_config_path(ctx))
    typer.echo(config.render(), nl=False)


@app.command()
def hosts(ctx: typer.Context):
    """List all Host blocks."""
    path = _config_path(ctx)
    config = _load(path)

    if not config.hosts:
        console.print(
            Panel(
                f"[yellow]No hosts in {escape(str(path))}[/yellow]\n\n"
                "Add one with [bold cyan]sshconfig add-host <name>[/bold cyan]",
                title="Hosts",
                border_style="yellow",
            )
        )
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Host", style="cyan")
    table.add_column("HostName", style="green")
    table.add_column("User")
    table.add_column("Port", style="dim")

    for host in config.hosts:
        table.add_row(
            escape(" ".join(host.hostnames)),
            escape(_param_value(host, HOST_NAME)),
            escape(_param_value(host, USER)),
            escape(_param_value(host, PORT)),
        )

    console.print(table)


@app.command()
def host(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Host alias or HostName value"),
):
    """Show one host, found by alias or by its HostName."""
    config = _load(_config_path(ctx))

    found = config.find_by_hostname(name)
    if found is None:
        _fail(f"Host '{escape(name)}' not found", title="Host")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Keyword", style="dim")
    table.add_column("Arguments", style="bold")

    for param in found.params:
        if param.keyword:
            table.add_row(escape(param.keyword), escape(" ".join(param.args)))

    for comment in found.comments:
        console.print(f"[dim]{escape(comment)}[/dim]")

    console.print(
        Panel(
            table,
            title=f"[bold green]Host {escape(' '.join(found.hostnames))}[/bold green]",
            border_style="green",
        )
    )


@app.command()
def get(
    ctx: typer.Context,
    keyword: str = typer.Argument(..., help="Keyword, e.g. User"),
    host_name: str = typer.Option(
        None, "--host", "-H", help="Look inside this host instead of the globals"
    ),
):
    """Print the arguments of a global or per-host parameter."""
    config = _load(_config_path(ctx))

    if host_name is None:
        param = config.get_param(keyword)
    else:
        found = config.find_by_hostname(host_name)
        if found is None:
            _fail(f"Host '{escape(host_name)}' not found", title="Host")
        param = found.get_param(keyword)

    if param is None:
        console.print(f"[yellow]{escape(keyword)} is not set[/yellow]")
        raise typer.Exit(1)

    typer.echo(" ".join(param.args))


@app.command("set")
def set_param(
    ctx: typer.Context,
    keyword: str = typer.Argument(..., help="Keyword, e.g. VisualHostKey"),
    args: list[str] = typer.Argument(..., help="Arguments for the keyword"),
    host_name: str = typer.Option(
        None, "--host", "-H", help="Set inside this host instead of the globals"
    ),
    comment: str = typer.Option(
        None, "--comment", "-c", help="Comment to put above the entry"
    ),
):
    """Set a parameter, changing it in place or appending it."""
    if keyword == HOST:
        _fail("Use [bold cyan]sshconfig add-host[/bold cyan] to create host blocks")

    if not is_known_keyword(keyword):
        console.print(
            f"[yellow]Warning:[/yellow] '{escape(keyword)}' is not a known ssh_config keyword"
        )

    path = _config_path(ctx)
    config = _load(path, missing_ok=True)
    comments = _comments(comment)

    if host_name is None:
        target = config
        where = "global"
    else:
        target = config.find_by_hostname(host_name)
        if target is None:
            _fail(f"Host '{escape(host_name)}' not found", title="Host")
        where = f"host {' '.join(target.hostnames)}"

    param = target.get_param(keyword)
    if param is not None:
        # modify by reference
        param.args = list(args)
        if comments:
            param.comments = comments
        action = "Updated"
    else:
        target.add_param(new_param(keyword, args, comments))
        action = "Added"

    _save(config, path)
    console.print(
        f"[bold green]✓[/bold green] {action} [cyan]{escape(keyword)}[/cyan] "
        f"[green]{escape(' '.join(args))}[/green] [dim]({escape(where)})[/dim]"
    )


@app.command("add-host")
def add_host(
    ctx: typer.Context,
    hostnames: list[str] = typer.Argument(..., help="Host names or patterns"),
    comment: str = typer.Option(
        None, "--comment", "-c", help="Comment to put above the block"
    ),
):
    """Append a new Host block."""
    path = _config_path(ctx)
    config = _load(path, missing_ok=True)

    for name in hostnames:
        if config.get_host(name) is not None:
            console.print(
                f"[yellow]Host '{escape(name)}' already exists.[/yellow] "
                "Use [bold cyan]sshconfig set --host[/bold cyan] to change it."
            )
            raise typer.Exit(1)

    config.add_host(new_host(hostnames, _comments(comment)))
    _save(config, path)
    console.print(
        f"[bold green]✓[/bold green] Added host [cyan]{escape(' '.join(hostnames))}[/cyan]"
    )


@app.command()
def use(
    path: str = typer.Argument(None, help="SSH config file to use by default"),
    clear: bool = typer.Option(False, "--clear", help="Go back to ~/.ssh/config"),
):
    """Choose the SSH config file commands operate on."""
    if clear:
        clear_ssh_config_path()
    elif path is not None:
        set_ssh_config_path(path)

    console.print(
        f"[bold]SSH config:[/bold] [cyan]{escape(str(get_ssh_config_path()))}[/cyan]"
    )


@app.command()
def stamp(
    comment: str = typer.Argument(None, help="Comment for entries written by sshconfig"),
    clear: bool = typer.Option(False, "--clear", help="Stop adding a comment"),
):
    """Set the default comment attached to entries this tool writes."""
    if clear:
        set_stamp_comment(None)
    elif comment is not None:
        set_stamp_comment(comment)

    current = load_config().stamp_comment
    if current:
        console.print(f"[bold]Stamp comment:[/bold] [cyan]{escape(current)}[/cyan]")
    else:
        console.print("[dim]No stamp comment set[/dim]")


if __name__ == "__main__":
    app()
