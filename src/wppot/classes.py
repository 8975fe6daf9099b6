from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Role(Enum):
    PRIMARY_TEXT = "primary"
    PLURAL_TEXT = "plural"
    COUNT = "count"
    CONTEXT = "context"
    DOMAIN = "domain"


@dataclass(frozen=True)
class RecognizedFunction:
    name: str
    roles: tuple[Role, ...]

    def position(self, role: Role) -> int | None:
        """1-based argument position of ``role``, as used in keyword lists."""
        if role not in self.roles:
            return None
        return self.roles.index(role) + 1


@dataclass
class ExtractionRecord:
    primary_text: str
    source_path: str
    source_line: int
    plural_text: str | None = None
    context: str | None = None
    domain: str | None = None


@dataclass
class CatalogEntry:
    primary_text: str
    context: str | None = None
    plural_text: str | None = None
    occurrences: list[tuple[str, int]] = field(default_factory=list)

    @property
    def key(self) -> tuple[str | None, str]:
        return (self.context, self.primary_text)

    @property
    def is_plural(self) -> bool:
        return self.plural_text is not None


@dataclass
class Config:
    domain: str | None = None
    package: str | None = None
    bug_report: str = ""
    last_translator: str = "FULL NAME <EMAIL@ADDRESS>"
    team: str = "LANGUAGE <LL@li.org>"
    headers: dict[str, str] = field(default_factory=dict)
    full_headers: bool = True
    creation_date: datetime | None = None

    @property
    def project(self) -> str:
        return self.package or self.domain or "PACKAGE"
