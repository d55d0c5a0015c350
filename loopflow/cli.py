"""
Command-line interface for LoopFlow
"""

import sys
from pathlib import Path

import click

from . import __version__, check_dependencies, get_info
from .config import get_default_config, load_config, save_config, validate_config
from .core.exceptions import ConfigurationError
from .utils import setup_logging


@click.group()
@click.version_option(__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", "-q", is_flag=True, help="Enable quiet mode (minimal output)")
def main(verbose, quiet):
    """
    LoopFlow: chromatin loop dataset manipulation

    Utilities for inspecting the installation and managing LoopFlow
    configuration files.
    """
    log_level = "DEBUG" if verbose else "WARNING" if quiet else "INFO"
    setup_logging(level=log_level, use_colors=sys.stdout.isatty())


@main.command()
def info():
    """Show LoopFlow package information"""

    info_data = get_info()

    click.echo("=" * 50)
    click.echo(f"LoopFlow v{info_data['version']}")
    click.echo("=" * 50)
    click.echo(f"Description: {info_data['description']}")
    click.echo(f"Python version: {info_data['python_version']}")
    click.echo()

    click.echo("Available modules:")
    for module in info_data["modules"]:
        click.echo(f"  - {module}")
    click.echo()

    click.echo("Dependency status:")
    for dep, available in check_dependencies().items():
        status = "✓" if available else "✗"
        click.echo(f"  {status} {dep}")


@main.command()
@click.argument("output_file", type=click.Path())
@click.option(
    "--format",
    "file_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    help="Output format for configuration file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init_config(output_file, file_format, force):
    """Initialize a new LoopFlow configuration file"""

    output_path = Path(output_file)
    suffixes = [".json"] if file_format == "json" else [".yaml", ".yml"]
    if output_path.suffix.lower() not in suffixes:
        output_path = output_path.with_suffix(suffixes[0])

    if output_path.exists() and not force:
        if not click.confirm(f"File {output_path} already exists. Overwrite?"):
            click.echo("Configuration initialization cancelled.")
            return

    save_config(get_default_config(), output_path)

    click.echo(f"Configuration file created: {output_path}")
    click.echo("Edit this file to customize processing parameters.")


@main.command("validate-config")
@click.argument("config_file", type=click.Path(exists=True))
def validate_config_command(config_file):
    """Check a LoopFlow configuration file for problems"""

    try:
        config = load_config(config_file)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    issues = validate_config(config)

    if issues:
        click.echo(f"Found {len(issues)} configuration issue(s):")
        for issue in issues:
            click.echo(f"  ✗ {issue}")
        sys.exit(1)

    click.echo(f"✓ Configuration is valid: {config_file}")


if __name__ == "__main__":
    main()
