"""
Command-line interface for appmanifest.

This module provides the command-line entry point for creating and editing
application manifests, package links and folder aliases.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Annotated, Optional

import orjson
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from appmanifest_py import __version__
from appmanifest_py.config import ToolConfig
from appmanifest_py.filesystem.local import LocalFileSystem
from appmanifest_py.manifest.controller import ManifestController, ManifestInput
from appmanifest_py.manifest.links import LinkController, LinkInput
from appmanifest_py.report import TwoColumnReport

# Set up the console and logger
console = Console()
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=console, rich_tracebacks=True)],
)
logger = logging.getLogger("appmanifest")

# Create the Typer app
app = typer.Typer(
    help="Create and edit application manifest files.",
    add_completion=False,
)


def config_path() -> Optional[Path]:
    """Return the config file named by $APPMANIFEST_CONFIG, if any."""
    path = os.environ.get("APPMANIFEST_CONFIG")
    return Path(path).expanduser() if path else None


def load_config() -> ToolConfig:
    """Load the tool configuration, honouring $APPMANIFEST_CONFIG."""
    return ToolConfig.load(config_path())


def save_config(config: ToolConfig) -> None:
    try:
        config.save(config_path())
    except OSError as e:
        log_error(f"Failed to save configuration: {e}")
        raise typer.Exit(1) from e


class JsonFormatter(logging.Formatter):
    """Render each log record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return orjson.dumps(payload).decode()


def say(message: str) -> None:
    """Print a plain status line; paths and values are never read as markup."""
    console.print(message, soft_wrap=True, markup=False)


def log_error(message: str) -> None:
    """Log an error message to both logger and console."""
    logger.error(message)
    console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)
    return None


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output."
    ),
    json: bool = typer.Option(False, "--json", help="Output logs in JSON format."),
    version: bool = typer.Option(
        False, "--version", help="Show the application version and exit."
    ),
) -> None:
    """
    appmanifest: wire up an application's environment from the command line.
    """
    if version:
        console.print(f"appmanifest version: {__version__}")
        raise typer.Exit()

    # Configure logging level based on verbosity
    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    # Configure JSON logging if requested
    if json:
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        json_handler = logging.StreamHandler(sys.stdout)
        json_handler.setFormatter(JsonFormatter(datefmt="%Y-%m-%dT%H:%M:%S"))
        logging.basicConfig(
            level=logging.INFO if not verbose else logging.DEBUG,
            handlers=[json_handler],
        )
        logger.debug("JSON logging enabled")


@app.command()
def manifest(
    folder: Annotated[
        str,
        typer.Argument(help="Application folder or alias holding the manifest."),
    ] = ".",
    open_flag: Annotated[
        bool,
        typer.Option("--open", help="Open the manifest in an editor afterwards."),
    ] = False,
    create_flag: Annotated[
        bool,
        typer.Option(
            "--create", help="Create the manifest. Does not overwrite without -f."
        ),
    ] = False,
    force_flag: Annotated[
        bool,
        typer.Option("--force", "-f", help="Allow --create to overwrite a manifest."),
    ] = False,
    assembly: Annotated[
        Optional[str],
        typer.Option("--assembly", help="Set the environment assembly."),
    ] = None,
    class_name: Annotated[
        Optional[str],
        typer.Option(
            "--class",
            "--environment-class-name",
            help="Set the environment class name.",
        ),
    ] = None,
) -> None:
    """
    Access an application manifest file.
    """
    config = load_config()
    resolved = config.resolve_folder(folder)
    logger.debug(f"Using application folder {resolved}")

    controller = ManifestController(LocalFileSystem(editor=config.editor), console)
    try:
        controller.execute(
            ManifestInput(
                folder=resolved,
                open_flag=open_flag,
                create_flag=create_flag,
                force_flag=force_flag,
                assembly_flag=assembly,
                environment_class_name_flag=class_name,
            )
        )
    except (OSError, orjson.JSONDecodeError) as e:
        log_error(f"Failed to access the manifest in {resolved}: {e}")
        raise typer.Exit(1) from e


@app.command()
def link(
    app_folder: Annotated[
        str, typer.Argument(help="Application folder or alias holding the manifest.")
    ],
    package_folder: Annotated[
        Optional[str],
        typer.Argument(help="Package folder to link. Lists links when omitted."),
    ] = None,
    remove: Annotated[
        bool, typer.Option("--remove", help="Remove the link to the package folder.")
    ] = False,
    clean_all: Annotated[
        bool, typer.Option("--clean-all", help="Remove every package link.")
    ] = False,
) -> None:
    """
    Link package folders into an application manifest.
    """
    config = load_config()
    resolved_app = config.resolve_folder(app_folder)
    resolved_package = (
        config.resolve_folder(package_folder) if package_folder else None
    )

    controller = LinkController(LocalFileSystem(editor=config.editor), console)
    try:
        controller.execute(
            LinkInput(
                app_folder=resolved_app,
                package_folder=resolved_package,
                remove_flag=remove,
                clean_all_flag=clean_all,
            )
        )
    except (OSError, orjson.JSONDecodeError) as e:
        log_error(f"Failed to update links in {resolved_app}: {e}")
        raise typer.Exit(1) from e


@app.command()
def alias(
    name: Annotated[Optional[str], typer.Argument(help="Alias name.")] = None,
    folder: Annotated[
        Optional[str], typer.Argument(help="Folder the alias points to.")
    ] = None,
    remove: Annotated[
        bool, typer.Option("--remove", help="Remove the alias.")
    ] = False,
) -> None:
    """
    List, register or remove folder aliases.
    """
    config = load_config()

    if not name:
        if not config.aliases:
            console.print("No aliases are registered")
            return
        report = TwoColumnReport("Aliases")
        for alias_name, alias_folder in sorted(config.aliases.items()):
            report.add(alias_name, alias_folder)
        report.write(console)
        return

    if remove:
        if name not in config.aliases:
            say(f"No alias named {name} is registered")
            return
        del config.aliases[name]
        save_config(config)
        say(f"Removed alias {name}")
        return

    if not folder:
        if name in config.aliases:
            say(f"{name} -> {config.aliases[name]}")
        else:
            say(f"No alias named {name} is registered")
        return

    target = str(Path(folder).expanduser().resolve())
    config.aliases[name] = target
    save_config(config)
    say(f"Registered alias {name} for {target}")


@app.command()
def version() -> None:
    """Show the application version and exit."""
    console.print(f"appmanifest version: {__version__}")


if __name__ == "__main__":
    app()
