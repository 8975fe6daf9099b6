QUOTES = ("'", '"')


def is_quoted(token: str) -> bool:
    return len(token) >= 2 and token[0] in QUOTES and token[-1] == token[0]


def decode_literal(token: str) -> str:
    """Turn a PHP quoted string token into the text it stands for.

    Single-quoted strings only know ``\\\\`` and ``\\'``. Double-quoted strings
    only get ``\\"`` decoded; interpolation and the other escapes are left
    as written.
    """
    if not is_quoted(token):
        raise ValueError(f"Expected quoted literal: {token!r}")

    quote = token[0]
    body = token[1:-1]
    if quote == "'":
        escapes = {"\\": "\\", "'": "'"}
    else:
        escapes = {'"': '"'}

    result = []
    i = 0
    while i < len(body):
        if body[i] == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            result.append(escapes.get(nxt, body[i : i + 2]))
            i += 2
        else:
            result.append(body[i])
            i += 1
    return "".join(result)


def strip_quotes(token: str) -> str:
    if is_quoted(token):
        return token[1:-1]
    return token
