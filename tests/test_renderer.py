from datetime import UTC, datetime

from wppot.catalog import Catalog
from wppot.classes import CatalogEntry, Config
from wppot.renderer import keywords_list, quote, render_entry, render_pot

NOW = datetime(2024, 1, 2, 3, 4, tzinfo=UTC)


def test_quote_escapes():
    assert quote('say "hi"') == r'"say \"hi\""'
    assert quote("back\\slash") == r'"back\\slash"'
    assert quote("a\tb") == r'"a\tb"'


def test_quote_multiline():
    assert quote("Hello\nWorld") == '""\n"Hello\\n"\n"World"'
    assert quote("Line\n") == '""\n"Line\\n"'


def test_render_entry_singular():
    entry = CatalogEntry("Name", occurrences=[("test\\test.php", 1), ("b.php", 4)])
    assert render_entry(entry) == (
        '#: test/test.php:1 b.php:4\nmsgid "Name"\nmsgstr ""\n'
    )


def test_render_entry_plural_with_context():
    entry = CatalogEntry(
        "%s star",
        context="stars translation",
        plural_text="%s stars",
        occurrences=[("a.php", 2)],
    )
    assert render_entry(entry) == (
        "#: a.php:2\n"
        'msgctxt "stars translation"\n'
        'msgid "%s star"\n'
        'msgid_plural "%s stars"\n'
        'msgstr[0] ""\n'
        'msgstr[1] ""\n'
    )


def test_render_entry_multiline_msgid():
    entry = CatalogEntry("Hello\nWorld", occurrences=[("a.php", 1)])
    assert 'msgid ""\n"Hello\\n"\n"World"\n' in render_entry(entry)


def test_minimal_header():
    config = Config(
        domain="test",
        bug_report="http://example.com",
        full_headers=False,
        headers={"Hello-World": "ignored"},
    )
    assert render_pot(Catalog(config), NOW) == (
        "# Copyright (C) 2024 test\n"
        "# This file is distributed under the same license as the test package.\n"
        'msgid ""\n'
        'msgstr ""\n'
        '"Project-Id-Version: test\\n"\n'
        '"Report-Msgid-Bugs-To: http://example.com\\n"\n'
        '"POT-Creation-Date: 2024-01-02 03:04+0000\\n"\n'
        '"PO-Revision-Date: YEAR-MO-DA HO:MI+ZONE\\n"\n'
        '"Last-Translator: FULL NAME <EMAIL@ADDRESS>\\n"\n'
        '"Language-Team: LANGUAGE <LL@li.org>\\n"\n'
        '"MIME-Version: 1.0\\n"\n'
        '"Content-Type: text/plain; charset=UTF-8\\n"\n'
        '"Content-Transfer-Encoding: 8bit\\n"\n'
    )


def test_full_header_appends_custom_headers_in_order():
    config = Config(package="My Plugin", headers={"B-Header": "2", "A-Header": "1"})
    document = render_pot(Catalog(config), NOW)
    assert "Project-Id-Version: My Plugin\\n" in document
    assert '"X-Poedit-SourceCharset: UTF-8\\n"\n' in document
    assert "X-Poedit-KeywordsList: " in document
    assert document.index("Plural-Forms") < document.index("B-Header: 2\\n")
    assert document.index("B-Header: 2\\n") < document.index("A-Header: 1\\n")


def test_creation_date_from_config():
    config = Config(creation_date=NOW)
    assert "POT-Creation-Date: 2024-01-02 03:04+0000" in render_pot(Catalog(config))


def test_keywords_list():
    keywords = keywords_list().split(";")
    assert "__" in keywords
    assert "_x:1,2c" in keywords
    assert "_n:1,2" in keywords
    assert "_nx:1,2,4c" in keywords
    assert "_nx_noop:1,2,3c" in keywords


def test_entries_follow_header():
    catalog = Catalog(Config(full_headers=False))
    catalog.entries[(None, "a")] = CatalogEntry("a", occurrences=[("x.php", 1)])
    catalog.entries[(None, "b")] = CatalogEntry("b", occurrences=[("x.php", 2)])
    document = render_pot(catalog, NOW)
    assert document.endswith(
        '"Content-Transfer-Encoding: 8bit\\n"\n'
        "\n"
        "#: x.php:1\n"
        'msgid "a"\n'
        'msgstr ""\n'
        "\n"
        "#: x.php:2\n"
        'msgid "b"\n'
        'msgstr ""\n'
    )


def test_naive_creation_date_is_utc():
    config = Config(creation_date=datetime(2024, 1, 2, 3, 4))
    assert "POT-Creation-Date: 2024-01-02 03:04+0000\\n" in render_pot(Catalog(config))
