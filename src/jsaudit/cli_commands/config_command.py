"""Configuration CLI command."""

from pathlib import Path

import typer
import yaml
from rich.markup import escape

from .deps import cli_module
from .shared import app, console


def _mask(key: str, value: str) -> str:
    if "key" in key.lower() and value:
        return value[:8] + "..." + value[-4:] if len(value) > 12 else "***"
    return value


@app.command()
def config(
    action: str = typer.Argument("show", help="Action: show, init"),
    global_config: bool = typer.Option(
        False,
        "--global",
        help="Use the global config (~/.jsaudit/config.yml) instead of the project",
    ),
) -> None:
    """Show or create jsaudit configuration."""
    cli = cli_module()

    if action == "init":
        if global_config:
            config_path = cli.create_global_config()
            console.print(f"[green]Global config:[/green] {config_path}")
            return

        env_path = cli.create_project_config_template(Path.cwd())
        console.print(f"[green]Project config:[/green] {env_path}")
        console.print("[dim]Edit the file and uncomment the settings you want to use.[/dim]")
        return

    if action == "show":
        if global_config:
            config_data = cli.load_global_config()
            console.print("[bold]Global Configuration (~/.jsaudit/config.yml):[/bold]")
            masked = {key: _mask(str(key), str(value)) for key, value in config_data.items()}
            console.print(escape(yaml.dump(masked, default_flow_style=False)))
            return

        env_config = cli.load_project_config(Path.cwd())
        if not env_config:
            console.print("[dim]No project config found. Run 'jsaudit config init'.[/dim]")
            return

        env_path = cli.get_project_env_path(Path.cwd())
        console.print(f"[bold]Project Configuration ({env_path}):[/bold]")
        for key, value in env_config.items():
            console.print(f"  {escape(key)}={escape(_mask(key, value))}")
        return

    console.print(f"[red]Unknown action: {escape(action)}. Use 'show' or 'init'.[/red]")
    raise typer.Exit(1)
