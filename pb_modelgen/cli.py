"""
Command-line interface.

Loads the configuration, fetches collection schemas (from the server or an
exported file), generates one Dart model per collection, writes the files
and formats them.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .client import PocketBaseClient, PocketBaseError
from .codegen import (
    ConfigError,
    DartGenerator,
    GenerationResult,
    GeneratorConfig,
    generate_code,
)
from .codegen.core.schema import CollectionSchema
from .config import CONFIG_HELP, DEFAULT_CONFIG_PATH, AppConfig, load_config
from .logging_config import configure_logging, get_logger
from .utils import SchemaFileError, load_collections_file
from .writer import WriterError, format_models, write_models

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pb-modelgen",
        description="Generate Dart models from PocketBase collections",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pb-modelgen
  pb-modelgen --config config/pocketbase.yaml --output lib/src/models
  pb-modelgen --schema-file pb_schema.json --output lib/models
  pb-modelgen --schema-file pb_schema.json --stdout
        """.strip(),
    )

    parser.add_argument(
        "--config",
        "-c",
        default=DEFAULT_CONFIG_PATH,
        help=f"Configuration file path (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--schema-file",
        metavar="FILE",
        help="Read collections from an exported JSON file instead of the server",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="DIR",
        help="Output directory (overrides output_directory from the config)",
    )
    parser.add_argument(
        "--include-system",
        action="store_true",
        help="Also generate models for system collections",
    )
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Don't run 'dart format' on the generated files",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print generated code instead of writing files",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug output")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Warnings only")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_app_config(args: argparse.Namespace) -> Optional[AppConfig]:
    """Load the config file; with --schema-file it is optional."""
    if args.schema_file and not Path(args.config).exists():
        return None
    try:
        return load_config(args.config)
    except ConfigError as e:
        console.print(f"[red]✗ Error loading configuration:[/red] {e}")
        console.print(Panel(CONFIG_HELP, title="Configuration", border_style="yellow"))
        raise CLIError("Invalid or missing configuration") from e


def _fetch_collections(
    args: argparse.Namespace, config: Optional[AppConfig]
) -> List[CollectionSchema]:
    include_system = args.include_system or (config.include_system if config else False)

    if args.schema_file:
        console.print(f"📄 Reading collections from [cyan]{args.schema_file}[/cyan]")
        try:
            collections = load_collections_file(args.schema_file)
        except (FileNotFoundError, SchemaFileError) as e:
            raise CLIError(str(e)) from e
        if not include_system:
            collections = [c for c in collections if not c.system]
        return collections

    console.print(f"🔐 Authenticating with [cyan]{config.domain}[/cyan]")
    try:
        client = PocketBaseClient(config.domain)
        client.authenticate(config.email, config.password)
    except PocketBaseError as e:
        console.print(
            "[dim]Please check your email and password in the configuration file.[/dim]"
        )
        raise CLIError(f"Authentication failed: {e}") from e

    console.print("🌐 Fetching collections")
    try:
        return client.get_collections(include_system=include_system)
    except PocketBaseError as e:
        raise CLIError(f"Failed to fetch collections: {e}") from e


def _print_summary(result: GenerationResult, written: List[Path]) -> None:
    table = Table(
        title="📊 Generated Models",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Collection", style="bold")
    table.add_column("File", style="green")

    paths = {path.name: path for path in written}
    for name, model in result.models.items():
        table.add_row(name, str(paths.get(model.file_name, model.file_name)))
    for name in result.errors:
        table.add_row(name, "[red]failed[/red]")

    console.print()
    console.print(table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    if result.errors:
        console.print("\n[red]✗ Errors:[/red]")
        for error in result.errors.values():
            console.print(f"  [red]•[/red] {error}")


def run(args: argparse.Namespace) -> int:
    """Execute a generation run; returns the process exit code."""
    config = _load_app_config(args)
    collections = _fetch_collections(args, config)
    if not collections:
        console.print("[yellow]No collections found.[/yellow]")
        return 0

    generator_config = config.generator if config else GeneratorConfig()
    console.print(f"⚙️  Generating {len(collections)} models")
    result = generate_code(DartGenerator(generator_config), collections)

    if args.stdout:
        for model in result.models.values():
            console.print(Panel(Syntax(model.source_text, "dart"), title=model.file_name))
        _print_summary(result, [])
        return 0 if result.success else 1

    output_directory = args.output or (
        config.output_directory if config else "./lib/models"
    )
    console.print(f"📁 Writing models to [cyan]{output_directory}[/cyan]")
    try:
        written = write_models(result.models.values(), output_directory)
    except WriterError as e:
        raise CLIError(str(e)) from e

    format_output = not args.no_format and (config.format_output if config else True)
    if written and format_output:
        console.print("🧹 Formatting generated models")
        if not format_models(output_directory):
            console.print("[yellow]⚠️  Formatting skipped or failed[/yellow]")

    _print_summary(result, written)

    if not result.success:
        return 1
    console.print("[green]✓ Done[/green]")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``pb-modelgen`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        return run(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        return 130
