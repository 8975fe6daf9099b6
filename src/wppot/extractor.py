import logging
import re
from collections.abc import Iterator

from wppot.classes import ExtractionRecord, RecognizedFunction, Role
from wppot.literals import decode_literal, is_quoted, strip_quotes
from wppot.scanner import find_closing_paren, find_literal_end, split_arguments

logger = logging.getLogger(__name__)

_TEXT = (Role.PRIMARY_TEXT,)
_CONTEXT = (Role.PRIMARY_TEXT, Role.CONTEXT)

FUNCTIONS: dict[str, RecognizedFunction] = {
    function.name: function
    for function in [
        RecognizedFunction("__", _TEXT + (Role.DOMAIN,)),
        RecognizedFunction("_e", _TEXT + (Role.DOMAIN,)),
        RecognizedFunction("esc_attr__", _TEXT + (Role.DOMAIN,)),
        RecognizedFunction("esc_attr_e", _TEXT + (Role.DOMAIN,)),
        RecognizedFunction("esc_html__", _TEXT + (Role.DOMAIN,)),
        RecognizedFunction("esc_html_e", _TEXT + (Role.DOMAIN,)),
        RecognizedFunction("_x", _CONTEXT + (Role.DOMAIN,)),
        RecognizedFunction("_ex", _CONTEXT + (Role.DOMAIN,)),
        RecognizedFunction("esc_attr_x", _CONTEXT + (Role.DOMAIN,)),
        RecognizedFunction("esc_html_x", _CONTEXT + (Role.DOMAIN,)),
        RecognizedFunction(
            "_n", (Role.PRIMARY_TEXT, Role.PLURAL_TEXT, Role.COUNT, Role.DOMAIN)
        ),
        RecognizedFunction(
            "_nx",
            (
                Role.PRIMARY_TEXT,
                Role.PLURAL_TEXT,
                Role.COUNT,
                Role.CONTEXT,
                Role.DOMAIN,
            ),
        ),
        RecognizedFunction(
            "_n_noop", (Role.PRIMARY_TEXT, Role.PLURAL_TEXT, Role.DOMAIN)
        ),
        RecognizedFunction(
            "_nx_noop",
            (Role.PRIMARY_TEXT, Role.PLURAL_TEXT, Role.CONTEXT, Role.DOMAIN),
        ),
    ]
}

# Longest names first so the alternation never stops at a prefix
_NAMES = sorted(FUNCTIONS, key=len, reverse=True)
_NAME_PATTERN = "|".join(map(re.escape, _NAMES))
_CALL_RE = re.compile(rf"(?<![\w$>:])({_NAME_PATTERN})\s*\(")


def _single_literal(argument: str) -> bool:
    """True when the argument is one quoted literal and nothing else."""
    return is_quoted(argument) and find_literal_end(argument, 0) == len(argument) - 1


def _build_record(
    function: RecognizedFunction, arguments: list[str], path: str, line: int
) -> ExtractionRecord | None:
    values: dict[Role, str] = {}
    for role, argument in zip(function.roles, arguments):
        if role == Role.COUNT:
            continue
        if role == Role.DOMAIN:
            if _single_literal(argument):
                argument = strip_quotes(argument)
            values[role] = argument
            continue
        if not _single_literal(argument):
            logger.debug(
                f"{path}:{line}: skipping {function.name}(), "
                f"{role.value} argument is not a literal: {argument!r}"
            )
            return None
        values[role] = decode_literal(argument)

    if Role.PRIMARY_TEXT not in values:
        logger.debug(f"{path}:{line}: skipping {function.name}() without arguments")
        return None
    if not values[Role.PRIMARY_TEXT]:
        logger.debug(f"{path}:{line}: skipping {function.name}() with empty text")
        return None

    return ExtractionRecord(
        primary_text=values[Role.PRIMARY_TEXT],
        source_path=path,
        source_line=line,
        plural_text=values.get(Role.PLURAL_TEXT),
        context=values.get(Role.CONTEXT),
        domain=values.get(Role.DOMAIN),
    )


def extract_calls(text: str, path: str = "") -> Iterator[ExtractionRecord]:
    """Yield a record for every translation call found in ``text``.

    Calls that can't be read statically are skipped; scanning always
    continues with the rest of the text.
    """
    for match in _CALL_RE.finditer(text):
        function = FUNCTIONS[match.group(1)]
        line = text.count("\n", 0, match.start()) + 1

        open_paren = match.end() - 1
        close_paren = find_closing_paren(text, open_paren)
        if close_paren is None:
            logger.debug(f"{path}:{line}: unbalanced call to {function.name}()")
            continue

        arguments = split_arguments(text[open_paren + 1 : close_paren])
        if arguments is None:
            logger.debug(f"{path}:{line}: unterminated literal in {function.name}()")
            continue

        record = _build_record(function, arguments, path, line)
        if record is not None:
            yield record
