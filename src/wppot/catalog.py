import logging
from collections.abc import Iterable, Iterator

from wppot.classes import CatalogEntry, Config, ExtractionRecord

logger = logging.getLogger(__name__)


class Catalog:
    """Translation entries of one run, in the order they were first seen."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.entries: dict[tuple[str | None, str], CatalogEntry] = {}

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries.values())

    def ingest(
        self, record: ExtractionRecord, domain_filter: str | None = None
    ) -> bool:
        """Merge ``record`` into the catalog.

        With a domain filter set, only records whose domain token matches it
        exactly are kept. Calls without a domain argument never match a filter.
        Returns whether the record was kept.
        """
        if domain_filter is not None and record.domain != domain_filter:
            logger.debug(
                f"{record.source_path}:{record.source_line}: domain "
                f"{record.domain!r} doesn't match {domain_filter!r}"
            )
            return False

        occurrence = (record.source_path.replace("\\", "/"), record.source_line)
        key = (record.context, record.primary_text)
        entry = self.entries.get(key)
        if entry is None:
            self.entries[key] = CatalogEntry(
                primary_text=record.primary_text,
                context=record.context,
                plural_text=record.plural_text,
                occurrences=[occurrence],
            )
            return True

        if occurrence not in entry.occurrences:
            entry.occurrences.append(occurrence)
        if entry.plural_text is None and record.plural_text is not None:
            entry.plural_text = record.plural_text
        return True

    def ingest_all(self, records: Iterable[ExtractionRecord]) -> int:
        """Merge records with the configured domain filter."""
        return sum(self.ingest(record, self.config.domain) for record in records)
