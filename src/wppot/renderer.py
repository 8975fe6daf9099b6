from datetime import UTC, datetime

from wppot.catalog import Catalog
from wppot.classes import CatalogEntry, Config, Role
from wppot.extractor import FUNCTIONS

PO_REVISION_PLACEHOLDER = "YEAR-MO-DA HO:MI+ZONE"


def quote(text: str) -> str:
    """Quote a string for POT output, splitting it on embedded newlines."""
    text = text.replace("\\", "\\\\").replace('"', '\\"').replace("\t", "\\t")
    if "\n" not in text:
        return f'"{text}"'
    parts = text.split("\n")
    lines = ['""']
    for i, part in enumerate(parts):
        segment = part + ("\\n" if i < len(parts) - 1 else "")
        if segment:
            lines.append(f'"{segment}"')
    return "\n".join(lines)


def keywords_list() -> str:
    """Poedit keyword spec for every recognized function, e.g. ``_nx:1,2,4c``."""
    keywords = []
    for function in FUNCTIONS.values():
        specs = []
        for role in (Role.PRIMARY_TEXT, Role.PLURAL_TEXT):
            position = function.position(role)
            if position is not None:
                specs.append(str(position))
        context = function.position(Role.CONTEXT)
        if context is not None:
            specs.append(f"{context}c")
        if specs == ["1"]:
            keywords.append(function.name)
        else:
            keywords.append(f"{function.name}:{','.join(specs)}")
    return ";".join(keywords)


def header_fields(config: Config, now: datetime) -> list[tuple[str, str]]:
    fields = [
        ("Project-Id-Version", config.project),
        ("Report-Msgid-Bugs-To", config.bug_report),
        ("POT-Creation-Date", now.strftime("%Y-%m-%d %H:%M%z")),
        ("PO-Revision-Date", PO_REVISION_PLACEHOLDER),
        ("Last-Translator", config.last_translator),
        ("Language-Team", config.team),
        ("MIME-Version", "1.0"),
        ("Content-Type", "text/plain; charset=UTF-8"),
        ("Content-Transfer-Encoding", "8bit"),
    ]
    if not config.full_headers:
        return fields

    fields += [
        ("X-Poedit-KeywordsList", keywords_list()),
        ("X-Poedit-Basepath", ".."),
        ("X-Poedit-SourceCharset", "UTF-8"),
        ("X-Poedit-SearchPath-0", "."),
        ("X-Poedit-SearchPathExcluded-0", "*.js"),
        ("X-Textdomain-Support", "yes"),
        ("Plural-Forms", "nplurals=2; plural=(n != 1);"),
    ]
    fields += list(config.headers.items())
    return fields


def _reference(path: str, line: int) -> str:
    path = path.replace("\\", "/")
    return f"{path}:{line}"


def render_header(config: Config, now: datetime) -> str:
    project = config.project
    body = "".join(f"{name}: {value}\n" for name, value in header_fields(config, now))
    return (
        f"# Copyright (C) {now.year} {project}\n"
        "# This file is distributed under the same license as the "
        f"{project} package.\n"
        'msgid ""\n'
        f"msgstr {quote(body)}\n"
    )


def render_entry(entry: CatalogEntry) -> str:
    lines = []
    if entry.occurrences:
        refs = " ".join(_reference(path, line) for path, line in entry.occurrences)
        lines.append(f"#: {refs}")
    if entry.context is not None:
        lines.append(f"msgctxt {quote(entry.context)}")
    lines.append(f"msgid {quote(entry.primary_text)}")
    if entry.is_plural:
        lines.append(f"msgid_plural {quote(entry.plural_text)}")
        lines.append('msgstr[0] ""')
        lines.append('msgstr[1] ""')
    else:
        lines.append('msgstr ""')
    return "\n".join(lines) + "\n"


def render_pot(catalog: Catalog, now: datetime | None = None) -> str:
    """Serialize ``catalog`` into a POT document."""
    if now is None:
        now = catalog.config.creation_date or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    blocks = [render_header(catalog.config, now)]
    blocks += [render_entry(entry) for entry in catalog]
    return "\n".join(blocks)
