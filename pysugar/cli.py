"""Defines the command-line interface for pysugar.

This module uses the `click` library to expose the library's helpers from
a shell: fetching URLs, reading typed environment variables, generating
random values, printing files and asking for validated input.
"""
import json
import logging
import sys
from typing import Dict, Optional, Tuple

import click
import requests
from halo import Halo
from rich.console import Console
from rich.table import Table

from .core.config import Config
from .core.errors import attempt
from .core.exceptions import SugarError
from .utils import env as env_utils
from .utils import http, randomness
from .utils.files import read_file
from .utils.input import input_string
from .validators import max_length, min_length, not_empty

console = Console()

# Set up basic logging.
logger = logging.getLogger(__name__)


class AliasedGroup(click.Group):
    """A click Group that accepts aliases and unambiguous prefixes."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._aliases: Dict[str, str] = {}

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Gets a command by exact name, alias, or unique prefix."""
        cmd_name = cmd_name.lower()
        rv = super().get_command(ctx, cmd_name)
        if rv is not None:
            return rv
        if cmd_name in self._aliases:
            return super().get_command(ctx, self._aliases[cmd_name])
        matches = [x for x in self.list_commands(ctx) if x.startswith(cmd_name)]
        if not matches:
            return None
        if len(matches) == 1:
            return super().get_command(ctx, matches[0])
        ctx.fail(f"Ambiguous command: '{cmd_name}'. Matches: {', '.join(sorted(matches))}")
        return None

    def add_alias(self, alias: str, command_name: str) -> None:
        self._aliases[alias.lower()] = command_name.lower()


def _fail(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
    sys.exit(1)


def _parse_bool_default(text: str) -> bool:
    """Parses a --default value for `env --type bool`.

    Raises:
        ValueError: If the text is not a recognized boolean.
    """
    lowered = text.lower()
    if lowered in env_utils.TRUE_VALUES:
        return True
    if lowered in env_utils.FALSE_VALUES:
        return False
    raise ValueError(f"invalid bool default: {text!r}")


@click.group(cls=AliasedGroup, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="pysugar")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom config file.")
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], verbose: bool, debug: bool) -> None:
    """Small conveniences over the standard library, from the shell."""
    config = Config(config_path=config_path)
    verbose = verbose or config.get("verbose", False)
    log_level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.debug("Debug mode enabled.")

    if not config.get("colors", True):
        console.no_color = True

    seed = config.get("random.seed")
    if seed is not None:
        randomness.seed(seed)

    ctx.obj = config


@main.command()
@click.argument("url")
@click.option("--json", "json_output", is_flag=True, help="Decode the response as JSON.")
@click.option("--headers", "show_headers", is_flag=True, help="Show the response headers instead of the body.")
@click.pass_obj
def get(config: Config, url: str, json_output: bool, show_headers: bool) -> None:
    """Send a GET request and print the response."""
    timeout = config.get("timeout", http.DEFAULT_TIMEOUT)
    headers = {"User-Agent": config.get("http.user_agent", http.DEFAULT_USER_AGENT)}

    # The spinner only animates on a terminal.
    interactive = sys.stderr.isatty()
    with Halo(text=f"Fetching {url}...", spinner="dots", stream=sys.stderr, enabled=interactive) as spinner:
        try:
            if show_headers:
                result = http.get_header(url, headers=headers, timeout=timeout)
            elif json_output:
                result = http.get_json(url, headers=headers, timeout=timeout)
            else:
                result = http.get_body(url, headers=headers, timeout=timeout)
            spinner.succeed(f"Fetched {url}")
        except (SugarError, requests.RequestException, ValueError) as e:
            spinner.fail(f"Request failed for {url}: {e}")
            if not interactive:
                _fail(f"Request failed for {url}: {e}")
            sys.exit(1)

    if show_headers:
        table = Table(title=f"Headers for {url}")
        table.add_column("Header", style="cyan")
        table.add_column("Value")
        for name, value in result.items():
            table.add_row(name, value)
        console.print(table)
    elif json_output:
        console.print_json(json.dumps(result))
    else:
        click.echo(result)


@main.command()
@click.argument("key")
@click.option("--type", "value_type", type=click.Choice(["str", "int", "bool"]), default="str", show_default=True, help="How to parse the value.")
@click.option("--default", "default", help="Value to use when the variable is missing or invalid.")
@click.option("--env-file", "env_path", type=click.Path(dir_okay=False), help="Env file to load first.")
@click.pass_obj
def env(config: Config, key: str, value_type: str, default: Optional[str], env_path: Optional[str]) -> None:
    """Print an environment variable, parsed as the given type."""
    try:
        if env_path:
            env_utils.env_file(env_path)
        elif config.get("env_file"):
            # The configured env file is optional.
            default_path = config.get("env_file")
            loaded = attempt(lambda: env_utils.env_file(default_path))
            if not loaded.ok:
                logger.debug(f"Skipping env file {default_path}: {loaded.error}")

        if value_type == "int":
            fallback = int(default) if default is not None else env_utils.MISSING
            value = env_utils.env_int(key, fallback)
        elif value_type == "bool":
            fallback = _parse_bool_default(default) if default is not None else env_utils.MISSING
            value = env_utils.env_bool(key, fallback)
        elif default is not None:
            value = env_utils.env_string(key, default)
        else:
            value = env_utils.must_env(key)
    except (SugarError, ValueError) as e:
        _fail(str(e))
        return

    click.echo(json.dumps(value) if value_type == "bool" else value)


@main.group(cls=AliasedGroup)
def rand() -> None:
    """Generate random values."""


@rand.command(name="int")
@click.argument("low", type=int)
@click.argument("high", type=int)
def rand_int(low: int, high: int) -> None:
    """Print an integer between LOW and HIGH, inclusive."""
    try:
        click.echo(randomness.rand_int(low, high))
    except ValueError as e:
        _fail(str(e))


@rand.command(name="float")
@click.argument("low", type=float)
@click.argument("high", type=float)
def rand_float(low: float, high: float) -> None:
    """Print a float in [LOW, HIGH)."""
    try:
        click.echo(randomness.rand_float(low, high))
    except ValueError as e:
        _fail(str(e))


@rand.command(name="bool")
def rand_bool() -> None:
    """Print true or false."""
    click.echo(json.dumps(randomness.rand_bool()))


@rand.command(name="string")
@click.argument("length", type=int)
def rand_string(length: int) -> None:
    """Print LENGTH random letters."""
    try:
        click.echo(randomness.rand_string(length))
    except ValueError as e:
        _fail(str(e))


@rand.command(name="choice")
@click.argument("items", nargs=-1, required=True)
def rand_choice(items: Tuple[str, ...]) -> None:
    """Print one of ITEMS at random."""
    click.echo(randomness.choice(items))


@main.command()
@click.argument("path", type=click.Path(dir_okay=False))
def read(path: str) -> None:
    """Print the contents of a text file."""
    try:
        click.echo(read_file(path), nl=False)
    except SugarError as e:
        _fail(str(e))


@main.command()
@click.argument("prompt")
@click.option("--not-empty", "require_value", is_flag=True, help="Reject an empty answer.")
@click.option("--min", "min_len", type=click.IntRange(min=0), help="Minimum answer length.")
@click.option("--max", "max_len", type=click.IntRange(min=0), help="Maximum answer length.")
def ask(prompt: str, require_value: bool, min_len: Optional[int], max_len: Optional[int]) -> None:
    """Read one line of input, check it, and print it back."""
    validators = []
    if require_value:
        validators.append(not_empty())
    if min_len is not None:
        validators.append(min_length(min_len))
    if max_len is not None:
        validators.append(max_length(max_len))

    try:
        answer = input_string(f"{prompt} ", *validators)
    except SugarError as e:
        _fail(str(e))
        return
    click.echo(answer)


main.add_alias("fetch", "get")
main.add_alias("cat", "read")
