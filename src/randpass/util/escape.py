import string

__all__ = ("parse_escape_sequences",)

ESCAPE_SEQUENCES = {
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "v": "\v",
    "f": "\f",
    "r": "\r",
    "e": "\x1b",
    "\\": "\\",
    "'": "'",
    '"': '"',
}

MAX_UNICODE_DIGITS = 4


def parse_escape_sequences(text: str) -> str:
    """
    Replaces backslash escape sequences in ``text`` with the chars they stand for.

    Supports the C-style escapes plus ``\\e`` (ESC) and ``\\uXXXX`` with one to four
    hex digits. Unknown escapes and a trailing backslash are kept as they are.

    Example::

        >>> parse_escape_sequences(r"a\\tb\\u41")
        'a\\tbA'
    """
    result: list[str] = []
    pos, end = 0, len(text)

    while pos < end:
        ch = text[pos]
        pos += 1

        if ch != "\\" or pos == end:
            result.append(ch)
            continue

        nxt = text[pos]

        if (replacement := ESCAPE_SEQUENCES.get(nxt)) is not None:
            result.append(replacement)
            pos += 1
        elif nxt == "u":
            pos += 1
            digits = ""
            while (
                pos < end
                and len(digits) < MAX_UNICODE_DIGITS
                and text[pos] in string.hexdigits
            ):
                digits += text[pos]
                pos += 1
            # surrogates are not valid chars on their own
            if digits and not 0xD800 <= (codepoint := int(digits, 16)) <= 0xDFFF:
                result.append(chr(codepoint))
        else:
            # the next char is emitted on its own on the following iteration
            result.append(ch)

    return "".join(result)
