"""Defines the command-line interface for the valq application.

This module uses the `click` library to create the CLI. It serves as the main
entry point for validating JSON documents against the registered schemas and
for managing the configuration.
"""
import io
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

import click
import requests
from halo import Halo
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .core.config import Config
from .core.runner import discover_schemas, get_schema, validate_document

# Configure rich console for output.
console = Console(emoji=True)

# Set up basic logging.
logger = logging.getLogger(__name__)


class AliasedGroup(click.Group):
    """A custom click Group that supports command aliases and case-insensitivity."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._aliases: Dict[str, str] = {}

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Gets a command by name, checking for aliases and prefixes.

        Args:
            ctx: The click context.
            cmd_name: The command name entered by the user.

        Returns:
            The matched click command, or None.
        """
        cmd_name = cmd_name.lower()
        # Exact match
        rv = super().get_command(ctx, cmd_name)
        if rv is not None:
            return rv
        # Alias match
        if cmd_name in self._aliases:
            return super().get_command(ctx, self._aliases[cmd_name])
        # Prefix match
        matches = [x for x in self.list_commands(ctx) if x.startswith(cmd_name)]
        if not matches:
            return None
        if len(matches) == 1:
            return super().get_command(ctx, matches[0])
        ctx.fail(f"Ambiguous command: '{cmd_name}'. Matches: {', '.join(sorted(matches))}")
        return None

    def add_alias(self, alias: str, command_name: str) -> None:
        self._aliases[alias.lower()] = command_name.lower()


@click.group(cls=AliasedGroup, invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="pyvalq")
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Validate JSON documents against composable schemas.

    valq loads each document, runs it through the chosen schema once, and
    reports either the validated value or every issue found.
    """
    if sys.platform == "win32" and isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding='utf-8')
    log_level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.debug("Debug mode enabled.")

    if ctx.invoked_subcommand is None:
        console.print("Use 'valq check --schema <name> <document>' to validate a document, or 'valq --help' for more commands.")


@main.command()
@click.argument("locations", nargs=-1, required=True)
@click.option("--schema", "-s", "schema_name", required=True, help="Name of the schema to validate against.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom config file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
def check(locations: Tuple[str, ...], schema_name: str, config_path: Optional[str], json_output: bool) -> None:
    """Validate one or more JSON documents (files or URLs).

    Every document is validated independently. The command exits with a
    non-zero status if any document is invalid or cannot be loaded.
    """
    config_obj = Config(config_path=config_path)
    try:
        schema = get_schema(schema_name, config_obj)
    except KeyError as e:
        console.print(f"[red]{e.args[0]}[/red]")
        sys.exit(2)

    json_output = json_output or config_obj.get("output") == "json"
    all_results = []
    failed = False
    for location in locations:
        with Halo(text=f"Validating {location}...", spinner="dots", enabled=not json_output) as spinner:
            try:
                result = validate_document(location, schema, config_obj)
            except (ValueError, requests.RequestException) as e:
                spinner.fail(f"Could not load {location}: {e}")
                all_results.append({"schema": schema.name, "location": location, "valid": False, "value": None, "issues": [], "error": str(e)})
                failed = True
                continue
            all_results.append(result)
            if result["valid"]:
                spinner.succeed(f"{location} is valid")
            else:
                spinner.warn(f"{location} has {len(result['issues'])} issue(s)")
                failed = True

    if json_output:
        click.echo(json.dumps(all_results, indent=2))
    else:
        _display_results(all_results)

    if failed:
        sys.exit(1)


def _display_results(all_results: List[Dict[str, Any]]) -> None:
    """Displays validation results as a summary table and per-document issues.

    Args:
        all_results: A list of result dictionaries from `validate_document`.
    """
    summary_table = Table(title="Validation Summary")
    summary_table.add_column("Document", style="cyan")
    summary_table.add_column("Schema")
    summary_table.add_column("Status")
    summary_table.add_column("Issues", justify="right")
    for res in all_results:
        if res.get("error"):
            status = "[red]Error[/red]"
        elif res["valid"]:
            status = "[green]Valid[/green]"
        else:
            status = "[yellow]Invalid[/yellow]"
        summary_table.add_row(res["location"], res["schema"], status, str(len(res["issues"])))
    console.print(summary_table)

    for res in all_results:
        if not res["issues"]:
            continue
        issues_table = Table(title=f"Issues for {res['location']}")
        issues_table.add_column("#", justify="right")
        issues_table.add_column("Issue")
        for index, issue in enumerate(res["issues"], start=1):
            issues_table.add_row(str(index), str(issue))
        console.print(issues_table)

    invalid_count = sum(1 for r in all_results if not r["valid"])
    if invalid_count:
        console.print(Panel(f"{invalid_count} of {len(all_results)} document(s) failed validation.", style="red", title="Done"))
    else:
        console.print(Panel(f"All {len(all_results)} document(s) are valid.", style="green", title="Done"))


@main.command(name="schemas")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to config file.")
def list_schemas(config_path: Optional[str]) -> None:
    """List the schemas available to the check command."""
    config_obj = Config(config_path=config_path)
    table = Table(title="Available Schemas")
    table.add_column("Name", style="cyan")
    table.add_column("Enabled")
    table.add_column("Description")
    for schema_class in discover_schemas():
        enabled = "[green]yes[/green]" if config_obj.is_schema_enabled(schema_class.name) else "[red]no[/red]"
        table.add_row(schema_class.name, enabled, schema_class.description)
    console.print(table)


@main.command()
@click.argument("action", type=click.Choice(['get', 'set', 'list', 'reset']), required=True)
@click.argument("key", type=str, required=False)
@click.argument("value", type=str, required=False)
def config(action: str, key: Optional[str], value: Optional[str]) -> None:
    """Manage the valq configuration.

    This command allows you to view, set, and reset configuration values
    that are stored in the user-level configuration file.

    \b
    ACTION:
        get <key>       Get a configuration value.
        set <key> <value> Set a configuration value.
        list            List all current configuration values.
        reset           Reset the configuration to its default state.
    """
    config_obj = Config()
    if action == "list":
        console.print(Panel(json.dumps(config_obj.config, indent=2), title="Current Configuration"))
    elif action == "get":
        if not key:
            console.print("[red]Error: 'get' action requires a key.[/red]")
            sys.exit(1)
        console.print(config_obj.get(key))
    elif action == "set":
        if not key or value is None:
            console.print("[red]Error: 'set' action requires a key and a value.[/red]")
            sys.exit(1)
        # Type casting for bools and ints
        if value.lower() in ('true', 'false'):
            processed_value: Any = value.lower() == 'true'
        elif value.isdigit():
            processed_value = int(value)
        else:
            processed_value = value
        config_obj.set(key, processed_value)
        try:
            config_obj.save_user_config()
            console.print(f"[green]'{key}' set to '{processed_value}' and saved to user config.[/green]")
        except IOError as e:
            console.print(f"[red]Error saving configuration: {e}[/red]")
            sys.exit(1)
    elif action == "reset":
        if config_obj.reset_user_config():
            console.print("[green]Configuration reset to defaults.[/green]")
        else:
            console.print("[yellow]No user configuration file to reset.[/yellow]")


main.add_alias('c', 'check')
main.add_alias('ls', 'schemas')

if __name__ == "__main__":
    main()
