"""JSON with `//` and `/* */` comments.

Comments are only recognized outside double-quoted strings; nothing else
about the JSON structure is tracked while stripping.
"""

from __future__ import annotations

import msgspec

from pagesmith.errors import JsoncError


def strip_comments(text: str) -> str:
    """Remove comments from JSON text.

    Raises:
        JsoncError: If a block comment is never closed.
    """
    out = []
    in_string = False
    escaped = False
    i = 0
    n = len(text)

    while i < n:
        char = text[i]

        if char == '"' and not escaped:
            in_string = not in_string

        if char == "\\" and in_string:
            escaped = not escaped
        else:
            escaped = False

        if not in_string and char == "/" and i + 1 < n:
            following = text[i + 1]

            if following == "/":
                i += 2
                while i < n and text[i] not in "\r\n":
                    i += 1
                continue

            if following == "*":
                end = text.find("*/", i + 2)
                if end < 0:
                    raise JsoncError("unclosed comment")
                i = end + 2
                continue

        out.append(char)
        i += 1

    return "".join(out)


def decode_object(text: str) -> dict[str, str]:
    """Decode a comment-tolerant JSON object of string values.

    Raises:
        JsoncError: On an unclosed comment.
        msgspec.DecodeError: On malformed JSON.
        msgspec.ValidationError: If the document is not a flat
            string-to-string object.
    """
    return msgspec.json.decode(strip_comments(text), type=dict[str, str])
