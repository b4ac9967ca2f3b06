"""
Command-line interface for model generation.

Collects settings from a JSON config file and flags, runs the pipeline,
and reports the outcome on a rich console.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich import box

from . import __version__
from .codegen import generate_models
from .codegen.core.config import ConfigError, ConfigManager, GeneratorConfig
from .codegen.core.exceptions import GeneratorError
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="modelgen",
        description="Generate Go model structs from a MySQL schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  modelgen --dsn 'root:root@localhost:3306/blog' --database blog
  modelgen --config modelgen.json --path ./internal --package-name model
        """.strip(),
    )

    db_group = parser.add_argument_group("database")
    db_group.add_argument("--dsn", help="Connection string, or a full SQLAlchemy URL")
    db_group.add_argument(
        "--database", "--schema", dest="table_schema", metavar="NAME", help="Schema to generate models for"
    )
    db_group.add_argument(
        "--driver", dest="driver_name", metavar="DRIVER", help="SQLAlchemy driver (default: mysql+pymysql)"
    )

    out_group = parser.add_argument_group("output")
    out_group.add_argument("--work-dir", metavar="DIR", help="Working directory (default: current directory)")
    out_group.add_argument("--path", metavar="DIR", help="Parent directory of the package (default: work dir)")
    out_group.add_argument("--package-name", "--package", metavar="NAME", help="Package name (default: model)")

    gen_group = parser.add_argument_group("generation")
    gen_group.add_argument(
        "--template", dest="model_template", metavar="NAME", help="Template file name (default: model.tpl)"
    )
    gen_group.add_argument("--create-time", metavar="FIELD", help="Field tracked with autoCreateTime")
    gen_group.add_argument("--update-time", metavar="FIELD", help="Field tracked with autoUpdateTime")
    gen_group.add_argument("--workers", dest="max_workers", type=int, metavar="N", help="Render workers")
    gen_group.add_argument("--formatter", metavar="CMD", help="Formatter command (default: 'gofmt -w')")
    gen_group.add_argument("--no-format", action="store_true", help="Skip formatting generated files")

    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", metavar="FILE", help="Also write logs to FILE")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge the config file and flags into a complete configuration."""
    overrides = {
        "work_dir": args.work_dir,
        "path": args.path,
        "package_name": args.package_name,
        "table_schema": args.table_schema,
        "dsn": args.dsn,
        "driver_name": args.driver_name,
        "model_template": args.model_template,
        "create_time": args.create_time,
        "update_time": args.update_time,
        "max_workers": args.max_workers,
        "formatter": "" if args.no_format else args.formatter,
    }

    manager = ConfigManager()
    config = manager.get_config(custom_config=overrides, config_file=args.config)
    manager.require_complete(config)

    for warning in manager.validate_config(config):
        console.print(f"[yellow]⚠️  {warning}[/yellow]")
    return config


def _print_summary(result) -> None:
    table = Table(title="📋 Generated Models", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("File", style="bold green")
    table.add_column("Size", justify="right")
    for path in result.files:
        table.add_row(path.name, f"{path.stat().st_size} B")
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point.

    Returns:
        Exit code (0 for success, 1 for any failure)
    """
    args = create_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        config = build_config(args)
    except ConfigError as e:
        console.print(f"[red]✗ Configuration error:[/red] {e}")
        return 1

    console.print(f"📦 Output directory: {config.abs_path}")
    if Path(config.abs_path).exists():
        console.print(f"[red]Clearing directory => {config.abs_path}[/red]")
    try:
        result = generate_models(config)
    except GeneratorError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    if not result.success:
        console.print(f"[red]✗ {result.error_message}[/red]")
        return 1

    for warning in result.warnings:
        console.print(f"[yellow]⚠️  {warning}[/yellow]")

    if args.verbose:
        _print_summary(result)

    console.print(f"[green]✓ Generated {len(result.files)} models => {config.abs_path}[/green]")
    console.print("[green]Success![/green]")
    logger.info("Generation finished: %s", result.metadata)
    return 0
