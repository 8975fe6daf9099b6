from collections.abc import Mapping
from dataclasses import fields
from datetime import datetime
from typing import Any

from wppot.classes import Config
from wppot.errors import ConfigurationError

# Option names used by the gulp-style API
ALIASES = {
    "bugReport": "bug_report",
    "lastTranslator": "last_translator",
    "creationDate": "creation_date",
}

_KNOWN = {f.name for f in fields(Config)}


def _text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"Option {name!r} must be a string, got {value!r}")
    return value


def load_config(options: Config | Mapping[str, Any] | None) -> Config:
    """Validate user supplied options into a Config.

    ``headers`` may be False for the minimal header set, True or None for
    the full set, or a mapping of extra header lines.
    """
    if options is None:
        return Config()
    if isinstance(options, Config):
        return options
    if not isinstance(options, Mapping):
        raise ConfigurationError("Require a argument of type object.")

    values: dict[str, Any] = {}
    for raw_name, value in options.items():
        name = ALIASES.get(raw_name, raw_name)
        if name not in _KNOWN:
            raise ConfigurationError(f"Unknown option {raw_name!r}")
        values[name] = value

    headers = values.pop("headers", None)
    if headers is False:
        values["full_headers"] = False
    elif isinstance(headers, Mapping):
        values["headers"] = {str(name): str(value) for name, value in headers.items()}
    elif headers not in (None, True):
        raise ConfigurationError(
            f"Option 'headers' must be a mapping or a boolean, got {headers!r}"
        )

    for name in ("domain", "package"):
        if values.get(name) is not None:
            _text(name, values[name])
    for name in ("bug_report", "last_translator", "team"):
        if name in values:
            _text(name, values[name])
    if "full_headers" in values and not isinstance(values["full_headers"], bool):
        raise ConfigurationError("Option 'full_headers' must be a boolean")
    creation_date = values.get("creation_date")
    if creation_date is not None and not isinstance(creation_date, datetime):
        raise ConfigurationError("Option 'creation_date' must be a datetime")

    return Config(**values)
