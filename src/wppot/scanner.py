"""Quote and parenthesis aware scanning over PHP source text.

Regular expressions can't balance nested calls, so the extractor walks the
text character by character. Inside a literal a backslash always consumes
the character after it, which covers the escape sets of both quote styles
as far as finding the closing quote goes.
"""

from wppot.literals import QUOTES


def find_literal_end(text: str, start: int) -> int | None:
    """Index of the quote closing the literal opened at ``start``."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == quote:
            return i
        i += 1
    return None


def find_closing_paren(text: str, start: int) -> int | None:
    """Index of the ``)`` matching the ``(`` at ``start``.

    Returns None for unbalanced parentheses or an unterminated literal.
    """
    depth = 0
    i = start
    while i < len(text):
        char = text[i]
        if char in QUOTES:
            end = find_literal_end(text, i)
            if end is None:
                return None
            i = end + 1
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return None


def unwrap_parens(argument: str) -> str:
    """Strip one layer of parentheses wrapping the whole argument."""
    if (
        argument.startswith("(")
        and find_closing_paren(argument, 0) == len(argument) - 1
    ):
        return argument[1:-1].strip()
    return argument


def split_arguments(inner: str) -> list[str] | None:
    """Split the text between a call's parentheses on top-level commas.

    Returns None when a literal inside the list is never closed.
    """
    arguments = []
    depth = 0
    current = 0
    i = 0
    while i < len(inner):
        char = inner[i]
        if char in QUOTES:
            end = find_literal_end(inner, i)
            if end is None:
                return None
            i = end + 1
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth == 0:
            arguments.append(inner[current:i])
            current = i + 1
        i += 1
    arguments.append(inner[current:])

    arguments = [unwrap_parens(arg.strip()) for arg in arguments]
    # PHP allows a trailing comma in argument lists
    if arguments and not arguments[-1]:
        arguments.pop()
    return arguments
