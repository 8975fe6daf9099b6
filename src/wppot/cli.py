import logging
import os
import sys
from typing import Any

import yaml

import click
from wppot import generator
from wppot.config import load_config
from wppot.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LOGGING = {
    "level": "INFO",
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "datefmt": "%Y-%m-%d %H:%M:%S",
}


@click.group()
@click.version_option(package_name="wppot")
def cli() -> None:
    pass


@cli.command("generate")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option("--source-folder", required=True, help="Folder with the PHP sources.")
@click.option(
    "--output",
    default=None,
    help="POT file to write. Defaults to <source-folder>/languages/<domain>.pot",
)
@click.option("--domain", default=None, help="Only extract strings of this domain.")
def generate(
    config_folder: str, source_folder: str, output: str | None, domain: str | None
) -> None:
    config_folder_path = os.path.abspath(config_folder)
    config_file_path = os.path.abspath(f"{config_folder_path}/config.yml")

    config: dict[str, Any] = {}
    try:
        with open(config_file_path, "r") as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        logger.error("File not found.")
    except yaml.YAMLError as exc:
        logger.error(sys._getframe().f_code.co_name + " " + str(exc))
        sys.exit(1)

    if not isinstance(config, dict):
        raise click.UsageError(f"{config_file_path} must hold a mapping of settings")
    logging_section = config.get("logging") or {}
    if not isinstance(logging_section, dict):
        raise click.UsageError("The 'logging' section must be a mapping")

    logging_cfg = {**DEFAULT_LOGGING, **logging_section}
    logging.basicConfig(
        level=logging.getLevelName(logging_cfg["level"]),
        format=logging_cfg["format"],
        datefmt=logging_cfg["datefmt"],
    )

    pot_options = config.get("pot")
    if pot_options is None:
        pot_options = {}

    try:
        config_options = load_config(pot_options)
        if domain is not None:
            config_options.domain = domain

        source_folder_path = os.path.abspath(source_folder)
        if output is None:
            name = config_options.domain or config_options.package or "messages"
            output = os.path.join(source_folder_path, "languages", f"{name}.pot")

        generator.run(
            config_options=config_options,
            source_folder_path=source_folder_path,
            output_path=output,
        )
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc
