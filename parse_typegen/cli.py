"""
Command-line interface for parse_typegen.

Loads Parse schemas from a file or a Parse Server and writes the requested
TypeScript artifacts.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    GeneratorConfig,
    GeneratorError,
    ParseClassGenerator,
    list_all_artifact_info,
    load_config,
)
from .codegen.core.config import ARTIFACT_NAMES, ENVIRONMENT_MODULES
from .codegen.core.naming import ReferenceStyle
from .logging_config import get_logger, setup_logging
from .utils import SchemaLoaderError, load_schemas

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()

OVERRIDE_OPTIONS = {"user": "_User", "role": "_Role", "session": "_Session"}


def parse_override(value: str) -> Any:
    """Interpret an override flag: true/false, or a replacement class name."""
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0", ""):
        return False
    return value.strip()


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="parse-typegen",
        description="Generate TypeScript classes and declarations from Parse schemas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  parse-typegen --schema-file schema.json --out-dir types
  parse-typegen --server-url http://localhost:1337/parse --app-id APP --master-key KEY
  parse-typegen --schema-file schema.json --user CustomUser --role true
  parse-typegen --schema-file schema.json --print classes
  parse-typegen --list-artifacts
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("--schema-file", metavar="FILE", help="JSON schema file")
    input_group.add_argument(
        "--server-url",
        metavar="URL",
        default=os.environ.get("PARSE_SERVER_URL"),
        help="Parse Server URL (default: $PARSE_SERVER_URL)",
    )

    parser.add_argument(
        "--app-id",
        default=os.environ.get("PARSE_APP_ID"),
        help="Parse application ID (default: $PARSE_APP_ID)",
    )
    parser.add_argument(
        "--master-key",
        default=os.environ.get("PARSE_MASTER_KEY"),
        help="Parse master key (default: $PARSE_MASTER_KEY)",
    )
    parser.add_argument(
        "--timeout", type=int, default=30, help="Request timeout in seconds"
    )

    # Output options
    output_group = parser.add_argument_group("output")
    output_group.add_argument("--config", metavar="FILE", help="JSON configuration file")
    output_group.add_argument(
        "--out-dir", metavar="DIR", help="Directory for all generated files"
    )
    output_group.add_argument(
        "--artifacts",
        nargs="+",
        metavar="NAME",
        help=f"Artifacts to write ({', '.join(ARTIFACT_NAMES)})",
    )
    for artifact in ARTIFACT_NAMES:
        output_group.add_argument(
            f"--{artifact}-file", metavar="FILE", help=f"Output file for {artifact}"
        )
    output_group.add_argument(
        "--print",
        metavar="ARTIFACT",
        dest="print_artifact",
        help="Print one artifact to the console instead of writing files",
    )

    # Generation options
    gen_group = parser.add_argument_group("generation")
    gen_group.add_argument(
        "--env",
        choices=sorted(ENVIRONMENT_MODULES),
        help="Runtime the generated code imports Parse for",
    )
    gen_group.add_argument(
        "--reference-style",
        choices=[s.value for s in ReferenceStyle],
        help="How Pointer/Relation fields reference other classes",
    )
    for option, kind in OVERRIDE_OPTIONS.items():
        gen_group.add_argument(
            f"--{option}",
            metavar="NAME|true|false",
            help=f"Generate {kind}: 'true' keeps the name, any other value renames it",
        )
    gen_group.add_argument(
        "--no-comments", action="store_true", help="Don't add a header comment"
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-artifacts", action="store_true", help="List artifacts and exit"
    )
    info_group.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging and metadata"
    )

    return parser


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from CLI arguments on top of an optional config file."""
    config_dict: Dict[str, Any] = {}
    overrides: Dict[str, Any] = {}

    for option, kind in OVERRIDE_OPTIONS.items():
        value = getattr(args, option, None)
        if value is not None:
            overrides[kind] = parse_override(value)
    if overrides:
        config_dict["overrides"] = overrides

    if args.env:
        config_dict["environment"] = args.env
    if args.reference_style:
        config_dict["reference_style"] = args.reference_style
    if args.no_comments:
        config_dict["add_comments"] = False
    if args.artifacts:
        config_dict["artifacts"] = args.artifacts

    defaults = GeneratorConfig()
    for artifact in ARTIFACT_NAMES:
        key = f"{artifact}_file"
        explicit = getattr(args, key, None)
        if explicit:
            config_dict[key] = explicit
        elif args.out_dir:
            config_dict[key] = str(Path(args.out_dir) / Path(getattr(defaults, key)).name)

    return load_config(custom_config=config_dict, config_file=args.config)


def _list_artifacts() -> int:
    """List available artifacts with details."""
    table = Table(title="📋 Available Artifacts", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Artifact", style="bold green", no_wrap=True)
    table.add_column("Default Path", style="cyan")
    table.add_column("Generator", style="dim")
    table.add_column("Aliases", style="blue")

    for name, info in sorted(list_all_artifact_info().items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {name}", info["default_path"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print(
        Panel(
            "[bold]Usage:[/bold] parse-typegen --schema-file [dim]schema.json[/dim] "
            "--artifacts [cyan]attributes classes[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _load_input(args: argparse.Namespace):
    if not (args.schema_file or args.server_url):
        raise CLIError("Input source required (--schema-file or --server-url)")
    try:
        return load_schemas(
            file_path=args.schema_file,
            server_url=None if args.schema_file else args.server_url,
            app_id=args.app_id,
            master_key=args.master_key,
            timeout=args.timeout,
        )
    except (SchemaLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load schemas: {e}") from e


def _print_artifact(generator: ParseClassGenerator, schemas, artifact: str) -> int:
    descriptors = generator.translate(schemas)
    result = generator.generate_artifact(artifact, descriptors)
    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    lexer = "javascript" if artifact in ("jsdoc", "js") else "typescript"
    console.print(Syntax(result.code, lexer, theme="monokai"))
    _print_warnings(generator.warnings + result.warnings)
    return 0


def _print_warnings(warnings: List[str]) -> None:
    if warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")


def _write_artifacts(
    generator: ParseClassGenerator, schemas, verbose: bool
) -> int:
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("[green]Generating artifacts...", total=None)
        results = generator.write_artifacts(schemas)
        progress.remove_task(task)

    table = Table(title="📄 Generated Files", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Artifact", style="bold")
    table.add_column("Path", style="green")
    table.add_column("Classes", justify="right")
    for name, result in results.items():
        table.add_row(
            name, str(result.metadata["output_path"]), str(result.metadata["class_count"])
        )
    console.print(table)

    if verbose and results:
        classes = next(iter(results.values())).metadata["classes"]
        console.print(f"[dim]Classes: {', '.join(classes) or 'none'}[/dim]")

    warnings = []
    for result in results.values():
        warnings.extend(w for w in result.warnings if w not in warnings)
    _print_warnings(warnings)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.list_artifacts:
            return _list_artifacts()

        config = build_config(args)
        source, schemas = _load_input(args)
        console.print(f"Loaded: {source} ({len(schemas)} classes)")

        generator = ParseClassGenerator(config)
        if args.print_artifact:
            return _print_artifact(generator, schemas, args.print_artifact)
        return _write_artifacts(generator, schemas, args.verbose)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except GeneratorError as e:
        logger.debug("Generation failed", exc_info=True)
        console.print(f"[red]✗ Generation failed:[/red] {e}")
        return 1
    except OSError as e:
        console.print(f"[red]✗ File error:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
