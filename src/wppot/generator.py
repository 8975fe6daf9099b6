import logging
import pathlib
from collections.abc import Iterable, Mapping
from typing import Any

from wppot.catalog import Catalog
from wppot.classes import Config
from wppot.config import load_config
from wppot.extractor import extract_calls
from wppot.renderer import render_pot

logger = logging.getLogger(__name__)


def generate_pot(
    sources: Iterable[tuple[str, str]],
    options: Config | Mapping[str, Any] | None = None,
) -> str:
    """Build a POT document from ``(path, text)`` pairs of PHP source."""
    # Options are checked before any source is touched
    config = load_config(options)
    catalog = Catalog(config)
    for path, text in sources:
        kept = catalog.ingest_all(extract_calls(text, path))
        logger.debug(f"{path}: {kept} strings")
    logger.info(f"Collected {len(catalog)} unique strings")
    return render_pot(catalog)


def collect_sources(path: str) -> list[tuple[str, str]]:
    root = pathlib.Path(path)
    sources = []
    for file in sorted(root.rglob("*.php")):
        if not file.is_file():
            continue
        logger.debug(f"Reading {file}")
        try:
            text = file.read_text("utf-8")
        except UnicodeDecodeError as ex:
            logger.error(f"Error reading {file}: {ex}")
            continue
        sources.append((file.relative_to(root).as_posix(), text))
    return sources


def run(
    *,
    config_options: Config | Mapping[str, Any] | None,
    source_folder_path: str,
    output_path: str,
) -> None:
    config = load_config(config_options)

    logger.info(f"Scanning {source_folder_path} for PHP files...")
    sources = collect_sources(source_folder_path)
    logger.info(f"Found {len(sources)} PHP files")

    document = generate_pot(sources, config)

    output = pathlib.Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, "utf-8")
    print(f"Wrote {output}")
