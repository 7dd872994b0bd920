"""
CLI integration for code generation functionality.

Provides the command-line options and handler for the codegen module.
"""

import argparse
import sys
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich import box

from . import (
    list_supported_languages,
    is_language_supported,
    get_generator,
    get_language_info,
    generate_code,
    GeneratorConfig,
    GeneratorError,
    load_config,
)
from ..document import collect_bodies, parse_document
from ..logging_config import get_logger
from ..utils import read_source

logger = get_logger(__name__)

# Messages go to stderr so that generated code can be piped from stdout
console = Console(stderr=True)
out_console = Console()


def add_codegen_args(parser: argparse.ArgumentParser):
    """Add code generation arguments to an existing CLI parser."""

    input_group = parser.add_argument_group("input")
    source = input_group.add_mutually_exclusive_group()
    source.add_argument(
        "--input",
        "-i",
        metavar="FILE",
        help="Export file to read (default: stdin)",
    )
    source.add_argument("--url", help="URL to fetch the export from")

    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )

    selection = parser.add_argument_group("selection")
    selection.add_argument(
        "--classification",
        "-c",
        metavar="NAME",
        help="Only generate the classification with this exact name (default: all)",
    )
    selection.add_argument(
        "--path",
        "-p",
        metavar="PATH",
        help="Only generate the API with this exact path (default: all)",
    )

    codegen_group = parser.add_argument_group("code generation")
    codegen_group.add_argument(
        "--language",
        "-l",
        default="go",
        help="Target language (default: go; use --list-languages to see options)",
    )
    codegen_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )
    codegen_group.add_argument(
        "--package-name",
        metavar="NAME",
        help="Emit a package declaration with this name",
    )
    codegen_group.add_argument(
        "--sort-fields",
        action="store_true",
        help="Sort struct fields by name instead of document order",
    )
    codegen_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add field descriptions as comments",
    )
    codegen_group.add_argument(
        "--no-json-tags",
        action="store_true",
        help="Don't generate JSON struct tags",
    )
    codegen_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation result metadata",
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    info_group.add_argument(
        "--list-classifications",
        action="store_true",
        help="List the classifications of the input and exit",
    )


def handle_codegen_command(args: argparse.Namespace) -> int:
    """
    Handle code generation command from CLI arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        if args.list_languages:
            return _list_languages()

        if not _validate_language(args.language):
            return 1

        source, raw = read_source(file_path=args.input, url=args.url)
        logger.debug("Input source: %s", source)

        if args.list_classifications:
            return _list_classifications(raw, source)

        config = _build_config(args)
        generator = get_generator(args.language, config)

        kinds = parse_document(raw, args.classification)
        bodies = collect_bodies(kinds, args.path)
        result = generate_code(generator, bodies)

        if not result.success:
            console.print(f"[red]✗ {escape(result.error_message)}[/red]")
            return 1

        return _write_output(result, args)

    except GeneratorError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for language in list_supported_languages():
        info = get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {language}", info["file_extension"], info["class"], aliases)

    out_console.print()
    out_console.print(table)
    out_console.print()
    return 0


def _list_classifications(raw: bytes, source: str) -> int:
    """Show the classifications of an export with their API counts."""
    kinds = parse_document(raw)

    table = Table(
        title=f"📂 Classifications in {escape(source)}",
        box=box.ROUNDED,
        title_style="bold cyan",
    )
    table.add_column("Classification", style="bold green")
    table.add_column("APIs", style="cyan", justify="right")
    table.add_column("Paths", style="dim")

    for kind in kinds:
        paths = ", ".join(api.path for api in kind.apis)
        table.add_row(escape(kind.name), str(len(kind.apis)), escape(paths))

    out_console.print(table)
    out_console.print(
        Panel(
            "[bold]Usage:[/bold] yapi-struct -i [dim]export.json[/dim] -c [cyan]CLASSIFICATION[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _validate_language(language: str) -> bool:
    """Validate that a language name or alias is supported."""
    if is_language_supported(language):
        return True

    supported = ", ".join(list_supported_languages())
    console.print(f"[red]✗ Unsupported language '{escape(language)}'[/red]")
    console.print(f"[dim]Supported languages: {supported}[/dim]")
    return False


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from config file and CLI arguments."""
    config_dict = {}

    if args.package_name:
        config_dict["package_name"] = args.package_name

    if args.sort_fields:
        config_dict["sort_fields"] = True

    if args.no_comments:
        config_dict["add_comments"] = False

    if args.no_json_tags:
        config_dict["generate_json_tags"] = False

    return load_config(
        args.language.lower(), custom_config=config_dict, config_file=args.config
    )


def _write_output(result, args: argparse.Namespace) -> int:
    """Write generated code to a file or stdout and report warnings."""
    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            console.print(
                f"[red]✗ Failed to write to {escape(str(output_path))}:[/red] {escape(str(e))}"
            )
            return 1
        console.print(
            f"[green]✓[/green] {result.metadata['declaration_count']} declarations "
            f"saved to [cyan]{escape(str(output_path))}[/cyan]"
        )
    elif sys.stdout.isatty():
        out_console.print(Syntax(result.code, args.language.lower(), theme="monokai"))
    else:
        sys.stdout.write(result.code)
        sys.stdout.flush()

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")
        console.print()

    return 0
