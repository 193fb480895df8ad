"""
CLI tool that writes the genesis document of a Quorum network.

Reads the participant configuration, derives the initial storage of the block
voting and governance contracts, funds every participant and writes the
result next to the configuration.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from quorum_genesis import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_OUTPUT_FILENAME,
    ConfigMode,
    ConfigurationError,
    TemplateError,
    assemble_genesis,
    load_config,
    load_template,
    write_genesis,
)
from quorum_genesis.utils import get_stream_logger


@click.command()
@click.option(
    "--mode",
    "-m",
    type=click.Choice([mode.value for mode in ConfigMode]),
    default=ConfigMode.STANDARD.value,
    show_default=True,
    help="Configuration variant: how owners default and whether observers are funded",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    help="Configuration file, relative to the current directory",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=DEFAULT_OUTPUT_FILENAME,
    show_default=True,
    help="Genesis file to write",
)
@click.option(
    "--template",
    "-t",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Genesis template with the contract bytecode, defaults to the packaged template",
)
@click.option("--verbose", "-v", is_flag=True, help="Log every build phase")
def main(
    mode: str, config_path: Path, output: Path, template: Optional[Path], verbose: bool
) -> None:
    """
    Generate a Quorum genesis file from a voting configuration.
    """
    logger = get_stream_logger("quorum_genesis", logging.DEBUG if verbose else logging.INFO)

    try:
        config = load_config(config_path, ConfigMode(mode))
        genesis_template = load_template(template)
    except (ConfigurationError, TemplateError) as e:
        click.echo(f" > {e}")
        sys.exit(1)

    logger.debug(f"Building genesis in {mode} mode")
    document = assemble_genesis(genesis_template, config)
    write_genesis(document, output)


if __name__ == "__main__":
    main()
